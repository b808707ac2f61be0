from pydantic import BaseModel, Field

from voice_expense.models import Expense, ParsedExpense, QueryFilters


class VoiceParseRequest(BaseModel):
    transcript: str | None = None


class VoiceExpenseRequest(BaseModel):
    transcript: str | None = None
    date: str | None = None


class VoiceParseResponse(BaseModel):
    success: bool = True
    data: ParsedExpense
    message: str


class VoiceExpenseResponse(BaseModel):
    success: bool = True
    expense: Expense
    confidence: float
    message: str = "Expense created from voice command"


class ExpenseListResponse(BaseModel):
    expenses: list[Expense]
    total: int


class QueryRequest(BaseModel):
    query: str | None = None


class QueryResponse(BaseModel):
    filters: QueryFilters


class HealthResponse(BaseModel):
    status: str = "ok"
    expenses: int = Field(default=0, ge=0)
