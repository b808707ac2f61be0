from datetime import datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ParsedExpense(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    category: str = "Other"
    description: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    needs_review: bool = Field(default=True, serialization_alias="needsReview")


class Expense(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    amount: float = Field(gt=0, allow_inf_nan=False)
    category: str
    description: str
    date: datetime
    confidence: float | None = None
    source: str = "voice"
    created_at: datetime = Field(default_factory=datetime.now)


class ValidationResult(BaseModel):
    is_valid: bool = Field(serialization_alias="isValid")
    errors: list[str] = Field(default_factory=list)


class FieldCheck(BaseModel):
    valid: bool
    value: Any = None
    error: str | None = None


class QueryFilters(BaseModel):
    category: str | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    time_period: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    description_keywords: list[str] = Field(default_factory=list)
    year: int | None = None
    month: int | None = None # 1-12
