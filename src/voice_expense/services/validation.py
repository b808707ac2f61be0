import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel

from voice_expense.models import FieldCheck, ValidationResult

MAX_AMOUNT = 10_000_000
MAX_CATEGORY_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 500
MAX_FUTURE_YEARS = 1
MAX_PAST_YEARS = 10

AMOUNT_REQUIRED_MESSAGE = "Amount is required and must be greater than 0"
HIGH_AMOUNT_MESSAGE = "Amount seems unusually high"
CATEGORY_REQUIRED_MESSAGE = "Category is required"


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_expense_data(data: BaseModel | Mapping[str, Any] | None) -> ValidationResult:
    """
    Check a parsed expense before it is stored.

    The high-amount entry is advisory: it makes the result invalid, but callers
    may compare against ``HIGH_AMOUNT_MESSAGE`` and decide to store anyway.
    """
    if isinstance(data, BaseModel):
        fields: Mapping[str, Any] = data.model_dump()
    elif isinstance(data, Mapping):
        fields = data
    else:
        fields = {}

    errors: list[str] = []
    amount = _as_number(fields.get("amount"))

    if amount is None or amount <= 0:
        errors.append(AMOUNT_REQUIRED_MESSAGE)
    elif amount > MAX_AMOUNT:
        errors.append(HIGH_AMOUNT_MESSAGE)

    if not fields.get("category"):
        errors.append(CATEGORY_REQUIRED_MESSAGE)

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_amount(amount: Any, field_name: str = "Amount") -> FieldCheck:
    if amount is None:
        return FieldCheck(valid=False, error=f"{field_name} is required")

    number = _as_number(amount)
    if number is None:
        return FieldCheck(valid=False, error=f"{field_name} must be a valid number")
    if number <= 0:
        return FieldCheck(valid=False, error=f"{field_name} must be greater than 0")
    if number > MAX_AMOUNT:
        return FieldCheck(valid=False, error=f"{field_name} cannot exceed {MAX_AMOUNT:,}")
    return FieldCheck(valid=True, value=number)


def validate_category(category: Any, allowed: Iterable[str] | None = None) -> FieldCheck:
    if not category or not isinstance(category, str):
        return FieldCheck(valid=False, error=CATEGORY_REQUIRED_MESSAGE)

    trimmed = category.strip()
    if not trimmed:
        return FieldCheck(valid=False, error="Category cannot be empty")
    if len(trimmed) > MAX_CATEGORY_LENGTH:
        return FieldCheck(valid=False, error=f"Category name too long (max {MAX_CATEGORY_LENGTH} characters)")

    if allowed is not None:
        allowed_list = list(allowed)
        if trimmed not in allowed_list:
            return FieldCheck(valid=False, error=f"Invalid category. Allowed: {', '.join(allowed_list)}")
    return FieldCheck(valid=True, value=trimmed)


def validate_description(description: str | None, required: bool = False) -> FieldCheck:
    if not description or not description.strip():
        if required:
            return FieldCheck(valid=False, error="Description is required")
        return FieldCheck(valid=True, value="")

    trimmed = description.strip()
    if len(trimmed) > MAX_DESCRIPTION_LENGTH:
        return FieldCheck(
            valid=False,
            error=f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)",
        )
    return FieldCheck(valid=True, value=trimmed)


def validate_date(value: datetime | str | None, now: datetime | None = None) -> FieldCheck:
    if not value:
        return FieldCheck(valid=False, error="Date is required")

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return FieldCheck(valid=False, error="Invalid date format")
    else:
        return FieldCheck(valid=False, error="Invalid date format")

    now = now or datetime.now(moment.tzinfo)
    if moment.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone()
    elif moment.tzinfo is None and now.tzinfo is not None:
        moment = moment.replace(tzinfo=now.tzinfo)

    if moment > now + relativedelta(years=MAX_FUTURE_YEARS):
        return FieldCheck(valid=False, error="Date cannot be more than 1 year in the future")
    if moment < now - relativedelta(years=MAX_PAST_YEARS):
        return FieldCheck(valid=False, error="Date cannot be more than 10 years in the past")
    return FieldCheck(valid=True, value=moment)
