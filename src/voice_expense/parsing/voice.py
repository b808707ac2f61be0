import re

from voice_expense.domain.categories import Category, match_category
from voice_expense.errors import MAX_TRANSCRIPT_LENGTH, require_text
from voice_expense.logger import get_logger
from voice_expense.models import ParsedExpense
from voice_expense.parsing.amount import CURRENCY_SYMBOLS, NUMBER_PATTERN, extract_amount

logger = get_logger(__name__)

AMOUNT_WEIGHT = 0.5
CATEGORY_WEIGHT = 0.3
DESCRIPTION_WEIGHT = 0.2

_NUMBER_RE = re.compile(NUMBER_PATTERN)
_SYMBOL_RE = re.compile(f"[{re.escape(CURRENCY_SYMBOLS)}]")
_CURRENCY_WORD_RE = re.compile(r"\b(?:rupees?|dollars?|euros?|pounds?)\b", re.IGNORECASE)
_LEADING_COMMAND_RE = re.compile(r"^(?:add|spent|paid|expense|for)\s+", re.IGNORECASE)
_TRAILING_COMMAND_RE = re.compile(r"\s+(?:expense|spent|paid)$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def extract_description(text: str, amount: float | None, category: Category | None) -> str:
    description = text

    if amount is not None:
        description = _NUMBER_RE.sub("", description)
        description = _SYMBOL_RE.sub("", description)
        description = _CURRENCY_WORD_RE.sub("", description)

    description = _LEADING_COMMAND_RE.sub("", description, count=1)
    description = _TRAILING_COMMAND_RE.sub("", description, count=1)
    description = _WHITESPACE_RE.sub(" ", description).strip()

    if not description:
        return f"{(category or Category.OTHER).value} expense"
    return description[0].upper() + description[1:]


def score_confidence(amount: float | None, category: Category | None, description: str) -> float:
    score = 0.0
    if amount is not None and amount > 0:
        score += AMOUNT_WEIGHT
    if category is not None and category is not Category.OTHER:
        score += CATEGORY_WEIGHT
    if len(description) > 3:
        score += DESCRIPTION_WEIGHT
    return min(score, 1.0)


def parse_voice_command(transcript: str) -> ParsedExpense:
    """
    Turn a dictated sentence into an expense candidate.

    Raises ``InvalidInputError`` for a missing or blank transcript and
    ``InputTooLongError`` past 1000 characters. Anything else parses; an
    uncertain result is flagged through ``needs_review`` and a lower
    ``confidence`` instead of an error.
    """
    text = require_text(transcript, MAX_TRANSCRIPT_LENGTH).lower()

    amount = extract_amount(text)
    category = match_category(text)
    description = extract_description(text, amount, category)

    result = ParsedExpense(
        amount=amount,
        category=(category or Category.OTHER).value,
        description=description,
        confidence=score_confidence(amount, category, description),
        needs_review=amount is None or category is None,
    )
    logger.debug(
        "[VOICE] Parsed '%s...' -> amount=%s category=%s confidence=%.2f",
        text[:50],
        result.amount,
        result.category,
        result.confidence,
    )
    return result
