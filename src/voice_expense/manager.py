from datetime import datetime

from voice_expense.logger import get_logger
from voice_expense.models import Expense, ParsedExpense, QueryFilters, ValidationResult
from voice_expense.parsing.query import parse_natural_language_query
from voice_expense.parsing.voice import parse_voice_command
from voice_expense.services.expenses import ExpenseStore
from voice_expense.services.validation import (
    HIGH_AMOUNT_MESSAGE,
    validate_date,
    validate_description,
    validate_expense_data,
)

logger = get_logger(__name__)


class VoiceExpenseService:
    def __init__(self, store: ExpenseStore, block_high_amounts: bool = True):
        self.store = store
        self.block_high_amounts = block_high_amounts

    def parse(self, transcript: str) -> ParsedExpense:
        return parse_voice_command(transcript)

    def parse_query(self, query: str) -> QueryFilters:
        return parse_natural_language_query(query)

    def _check(
        self, parsed: ParsedExpense, date: datetime | str | None
    ) -> tuple[ValidationResult, datetime | None]:
        result = validate_expense_data(parsed)
        errors = list(result.errors)

        if errors == [HIGH_AMOUNT_MESSAGE] and not self.block_high_amounts:
            logger.warning("[VOICE] Accepting unusually high amount %.2f.", parsed.amount)
            errors = []

        description = validate_description(parsed.description)
        if not description.valid:
            errors.append(description.error)

        when: datetime | None = None
        if date is None or (isinstance(date, str) and not date.strip()):
            when = datetime.now()
        else:
            checked = validate_date(date)
            if checked.valid:
                when = checked.value
            else:
                errors.append(checked.error)

        return ValidationResult(is_valid=not errors, errors=errors), when

    def create_from_transcript(
        self, transcript: str, date: datetime | str | None = None
    ) -> tuple[Expense | None, ParsedExpense, ValidationResult]:
        """
        Parse ``transcript`` and store it as an expense if it passes validation.

        Returns the stored expense (``None`` when rejected) along with the parse
        and the validation outcome, so callers can show the draft for correction.
        """
        parsed = self.parse(transcript)
        validation, when = self._check(parsed, date)

        if not validation.is_valid:
            logger.info("[VOICE] Rejected voice expense: %s", "; ".join(validation.errors))
            return None, parsed, validation

        expense = Expense(
            amount=parsed.amount,
            category=parsed.category,
            description=parsed.description,
            date=when,
            confidence=parsed.confidence,
        )
        return self.store.add(expense), parsed, validation

    def list_expenses(self, category: str | None = None) -> list[Expense]:
        return self.store.list(category=category)
