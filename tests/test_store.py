from datetime import datetime
from pathlib import Path

import pytest

from voice_expense.models import Expense
from voice_expense.services.expenses import ExpenseStore


@pytest.fixture
def store(tmp_path: Path) -> ExpenseStore:
    return ExpenseStore(data_path=str(tmp_path / "expenses.json"))


def _expense(description: str, category: str, created_at: datetime) -> Expense:
    return Expense(
        amount=10.0,
        category=category,
        description=description,
        date=created_at,
        created_at=created_at,
    )


def test_add_and_persist(store: ExpenseStore, tmp_path: Path) -> None:
    saved = store.add(_expense("Lunch", "Food", datetime(2024, 1, 1)))

    reloaded = ExpenseStore(data_path=str(tmp_path / "expenses.json"))
    assert len(reloaded.expenses) == 1
    assert reloaded.get(saved.id) == saved


def test_list_newest_first_and_filter(store: ExpenseStore) -> None:
    store.add(_expense("Lunch", "Food", datetime(2024, 1, 1)))
    store.add(_expense("Taxi", "Transport", datetime(2024, 1, 3)))
    store.add(_expense("Dinner", "Food", datetime(2024, 1, 2)))

    assert [e.description for e in store.list()] == ["Taxi", "Dinner", "Lunch"]
    assert [e.description for e in store.list(category="Food")] == ["Dinner", "Lunch"]


def test_corrupt_file_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "expenses.json"
    path.write_text("{not json", encoding="utf-8")
    assert ExpenseStore(data_path=str(path)).expenses == []


def test_clear(store: ExpenseStore, tmp_path: Path) -> None:
    store.add(_expense("Lunch", "Food", datetime(2024, 1, 1)))
    store.clear()
    assert store.list() == []
    assert ExpenseStore(data_path=str(tmp_path / "expenses.json")).expenses == []


def test_missing_id(store: ExpenseStore) -> None:
    assert store.get("nope") is None
