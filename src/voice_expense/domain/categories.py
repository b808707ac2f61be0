from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    FOOD = "Food"
    TRAVEL = "Travel"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    OTHER = "Other"


CATEGORY_NAMES: tuple[str, ...] = tuple(category.value for category in Category)

# Order matters: on equal counts the earlier category wins.
CATEGORY_KEYWORDS = MappingProxyType({
    Category.FOOD: ("food", "lunch", "dinner", "breakfast", "meal", "restaurant", "cafe", "snack",
                    "grocery", "groceries"),
    Category.TRAVEL: ("travel", "trip", "flight", "hotel", "vacation", "tour", "booking"),
    Category.TRANSPORT: ("transport", "taxi", "uber", "ola", "bus", "train", "metro", "fuel", "petrol",
                         "diesel", "gas"),
    Category.SHOPPING: ("shopping", "clothes", "shoes", "amazon", "flipkart", "purchase", "bought"),
    Category.BILLS: ("bill", "electricity", "water", "internet", "phone", "mobile", "recharge", "rent"),
    Category.ENTERTAINMENT: ("movie", "cinema", "netflix", "spotify", "game", "concert", "show",
                             "entertainment"),
    Category.HEALTHCARE: ("doctor", "medicine", "hospital", "pharmacy", "medical", "health", "clinic"),
    Category.EDUCATION: ("education", "course", "book", "tuition", "school", "college", "training"),
    Category.OTHER: (),
})

# Search queries use a broader vocabulary than dictated expenses.
SEARCH_KEYWORDS = MappingProxyType({
    Category.FOOD: ("food", "restaurant", "grocery", "groceries", "eat", "eating", "dining", "lunch",
                    "dinner", "breakfast", "meal", "snack"),
    Category.TRAVEL: ("travel", "flight", "flights", "hotel", "hotels", "trip", "vacation", "holiday"),
    Category.TRANSPORT: ("transport", "transportation", "taxi", "uber", "ola", "bus", "train", "metro",
                         "petrol", "fuel", "gas"),
    Category.SHOPPING: ("shop", "shopping", "mall", "store", "clothes", "clothing", "fashion", "purchase"),
    Category.BILLS: ("bill", "bills", "electricity", "water", "internet", "utility", "utilities", "rent"),
    Category.ENTERTAINMENT: ("movie", "movies", "cinema", "game", "games", "entertainment", "concert",
                             "show", "netflix", "spotify"),
    Category.HEALTHCARE: ("health", "healthcare", "medical", "doctor", "hospital", "medicine", "pharmacy",
                          "clinic"),
    Category.EDUCATION: ("education", "school", "college", "university", "course", "courses", "book",
                         "books", "tuition", "class", "classes"),
})


def is_known_category(name: str | None) -> bool:
    return name in CATEGORY_NAMES


def match_category(text: str) -> Category | None:
    """
    Return the concrete category with the most keyword hits in ``text``.

    ``text`` is expected to be lowercase already. Keywords are matched as
    substrings, so "bills" also counts for "bill".
    """
    best: Category | None = None
    best_count = 0
    for category, keywords in CATEGORY_KEYWORDS.items():
        if category is Category.OTHER:
            continue
        count = sum(1 for keyword in keywords if keyword in text)
        if count > best_count:
            best = category
            best_count = count
    return best
