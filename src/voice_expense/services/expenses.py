import json
import os
import threading

from pydantic import TypeAdapter, ValidationError

from voice_expense.logger import get_logger
from voice_expense.models import Expense

logger = get_logger(__name__)

_EXPENSE_LIST = TypeAdapter(list[Expense])


class ExpenseStore:
    """Expenses kept in a single JSON file, rewritten on every change."""

    def __init__(self, data_path: str = "expenses.json"):
        self.data_path = data_path
        self.expenses: list[Expense] = []
        self._lock = threading.Lock()
        self.load()

    def load(self) -> None:
        if not os.path.exists(self.data_path):
            self.expenses = []
            return
        try:
            with open(self.data_path, encoding="utf-8") as f:
                self.expenses = _EXPENSE_LIST.validate_python(json.load(f))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("[STORE] Could not read %s (%s); starting empty.", self.data_path, exc)
            self.expenses = []

    def save(self) -> None:
        directory = os.path.dirname(self.data_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.data_path, "wb") as f:
            f.write(_EXPENSE_LIST.dump_json(self.expenses, indent=2))

    def add(self, expense: Expense) -> Expense:
        with self._lock:
            self.expenses.append(expense)
            self.save()
        logger.info(
            "[STORE] Saved expense %s: %.2f %s '%s'",
            expense.id,
            expense.amount,
            expense.category,
            expense.description[:50],
        )
        return expense

    def get(self, expense_id: str) -> Expense | None:
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def list(self, category: str | None = None) -> list[Expense]:
        items = [e for e in self.expenses if category is None or e.category == category]
        return sorted(items, key=lambda e: e.created_at, reverse=True)

    def clear(self) -> None:
        with self._lock:
            self.expenses = []
            self.save()
        logger.info("[STORE] All expenses cleared.")
