import calendar
import re
from datetime import datetime, time, timedelta

from dateutil.relativedelta import relativedelta

from voice_expense.domain.categories import SEARCH_KEYWORDS
from voice_expense.errors import MAX_QUERY_LENGTH, require_text
from voice_expense.models import QueryFilters

MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

_YEAR_RE = re.compile(r"\b(20\d{2})\b")
_MONTH_RE = re.compile(r"\b(" + "|".join(MONTHS) + r")\b")
_AMOUNT = r"[₹$]?\s*([\d,]+)"
_AMOUNT_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(rf"over\s*{_AMOUNT}"), "min"),
    (re.compile(rf"more\s+than\s*{_AMOUNT}"), "min"),
    (re.compile(rf"above\s*{_AMOUNT}"), "min"),
    (re.compile(rf"greater\s+than\s*{_AMOUNT}"), "min"),
    (re.compile(rf"under\s*{_AMOUNT}"), "max"),
    (re.compile(rf"less\s+than\s*{_AMOUNT}"), "max"),
    (re.compile(rf"below\s*{_AMOUNT}"), "max"),
    (re.compile(rf"between\s*{_AMOUNT}\s*and\s*{_AMOUNT}"), "range"),
)

STOP_WORDS = frozenset({
    "show", "find", "list", "get", "fetch", "display", "search",
    "expense", "expenses", "spending", "spent", "total", "all",
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "up", "about", "into", "through", "during",
    "last", "this", "year", "month", "week", "day", "my", "me", "i",
    "what", "when", "where", "how", "much", "many", "did", "was", "were",
    "matching", "related", "regarding",
    "food", "travel", "transport", "shopping", "bills", "entertainment",
    "healthcare", "education", "restaurant", "grocery", "flight", "hotel",
    "taxi", "uber", "mall", "store", "movie", "cinema", "doctor", "hospital",
})

_NON_WORD_RE = re.compile(r"[^\w]")

_END_OF_DAY = time(23, 59, 59)


def _month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime.combine(datetime(year, month, last_day), _END_OF_DAY)


def _year_bounds(year: int) -> tuple[datetime, datetime]:
    return datetime(year, 1, 1), datetime.combine(datetime(year, 12, 31), _END_OF_DAY)


def _apply_explicit_year(filters: QueryFilters, text: str, year: int) -> None:
    filters.year = year
    match = _MONTH_RE.search(text)
    if match:
        name = match.group(1)
        filters.month = MONTHS[name]
        filters.start_date, filters.end_date = _month_bounds(year, filters.month)
        filters.time_period = f"{name} {year}"
        return
    filters.start_date, filters.end_date = _year_bounds(year)
    filters.time_period = f"year {year}"


def _apply_relative_period(filters: QueryFilters, text: str, now: datetime) -> None:
    midnight = datetime.combine(now.date(), time.min)

    if "last year" in text:
        filters.year = now.year - 1
        filters.start_date, filters.end_date = _year_bounds(now.year - 1)
        filters.time_period = "last year"
    elif "this year" in text:
        filters.year = now.year
        filters.start_date, filters.end_date = datetime(now.year, 1, 1), now
        filters.time_period = "this year"
    elif "last month" in text:
        previous = now - relativedelta(months=1)
        filters.start_date, filters.end_date = _month_bounds(previous.year, previous.month)
        filters.time_period = "last month"
    elif "this month" in text:
        filters.start_date, filters.end_date = datetime(now.year, now.month, 1), now
        filters.time_period = "this month"
    elif "last week" in text:
        filters.start_date, filters.end_date = now - timedelta(days=7), now
        filters.time_period = "last week"
    elif "week" in text:
        filters.start_date, filters.end_date = now - timedelta(days=7), now
        filters.time_period = "this week"
    elif "today" in text:
        filters.start_date, filters.end_date = midnight, now
        filters.time_period = "today"
    elif "yesterday" in text:
        yesterday = midnight - timedelta(days=1)
        filters.start_date = yesterday
        filters.end_date = datetime.combine(yesterday.date(), time.max)
        filters.time_period = "yesterday"


def _apply_amounts(filters: QueryFilters, text: str) -> None:
    for pattern, kind in _AMOUNT_RULES:
        match = pattern.search(text)
        if not match:
            continue
        values = [float(group.replace(",", "")) for group in match.groups() if group.replace(",", "")]
        if not values:
            continue
        if kind == "min":
            filters.min_amount = values[0]
        elif kind == "max":
            filters.max_amount = values[0]
        elif len(values) == 2:
            filters.min_amount, filters.max_amount = values
        return


def _description_keywords(text: str) -> list[str]:
    keywords: list[str] = []
    for word in text.split():
        clean = _NON_WORD_RE.sub("", word)
        if len(clean) <= 3 or clean in STOP_WORDS or clean.isdigit():
            continue
        keywords.append(clean)
    return keywords


def parse_natural_language_query(query: str, now: datetime | None = None) -> QueryFilters:
    """
    Turn a search phrase such as "food over 500 last month" into filters.

    Recognizes an explicit year (optionally with a month), relative periods,
    a category, amount bounds and leftover free-text keywords. Raises
    ``InvalidInputError``/``InputTooLongError`` for unusable input.
    """
    text = require_text(query, MAX_QUERY_LENGTH, what="Query").lower()
    now = now or datetime.now()
    filters = QueryFilters()

    year_match = _YEAR_RE.search(text)
    if year_match:
        _apply_explicit_year(filters, text, int(year_match.group(1)))
    else:
        _apply_relative_period(filters, text, now)

    for category, keywords in SEARCH_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            filters.category = category.value
            break

    _apply_amounts(filters, text)
    filters.description_keywords = _description_keywords(text)
    return filters
