import math
import re
from collections.abc import Callable

from voice_expense.domain.numbers import find_spelled_number

# Digits with optional thousands separators and up to two decimals
NUMBER_PATTERN = r"\d+(?:,\d{3})*(?:\.\d{1,2})?"
CURRENCY_SYMBOLS = "₹$€£"

_NUMBER_RE = re.compile(NUMBER_PATTERN)
_CURRENCY_RE = re.compile(rf"[{re.escape(CURRENCY_SYMBOLS)}]\s*({NUMBER_PATTERN})")

AmountExtractor = Callable[[str], float | None]


def _to_amount(raw: str) -> float | None:
    value = float(raw.replace(",", ""))
    # Very long digit runs overflow to inf
    return value if math.isfinite(value) and value > 0 else None


def extract_digits(text: str) -> float | None:
    match = _NUMBER_RE.search(text)
    if not match:
        return None
    return _to_amount(match.group(0))


def extract_spelled(text: str) -> float | None:
    value = find_spelled_number(text)
    if not value:
        return None
    return float(value)


def extract_currency(text: str) -> float | None:
    match = _CURRENCY_RE.search(text)
    if not match:
        return None
    return _to_amount(match.group(1))


AMOUNT_EXTRACTORS: tuple[AmountExtractor, ...] = (
    extract_digits,
    extract_spelled,
    extract_currency,
)


def extract_amount(text: str) -> float | None:
    """Return the amount from the first extractor that finds one."""
    for extractor in AMOUNT_EXTRACTORS:
        amount = extractor(text)
        if amount is not None:
            return amount
    return None
