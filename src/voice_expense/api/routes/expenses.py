import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from voice_expense.api.dependencies import get_service, get_service_optional
from voice_expense.api.schemas import (
    ExpenseListResponse,
    HealthResponse,
    QueryRequest,
    QueryResponse,
)
from voice_expense.domain.categories import is_known_category
from voice_expense.errors import InputTooLongError, VoiceExpenseError
from voice_expense.manager import VoiceExpenseService

router = APIRouter()


@router.get("/api/expenses", response_model=ExpenseListResponse)
async def list_expenses(
    service: Annotated[VoiceExpenseService, Depends(get_service)],
    category: str | None = None,
) -> ExpenseListResponse:
    if category is not None and not is_known_category(category):
        raise HTTPException(status_code=400, detail=f"Unknown category '{category}'")
    expenses = await asyncio.to_thread(service.list_expenses, category=category)
    return ExpenseListResponse(expenses=expenses, total=len(expenses))


@router.post("/api/search/parse", response_model=QueryResponse)
async def parse_search_query(
    req: QueryRequest,
    service: Annotated[VoiceExpenseService, Depends(get_service)],
) -> QueryResponse:
    if not req.query or not req.query.strip():
        raise HTTPException(status_code=400, detail="Query is required")
    try:
        filters = service.parse_query(req.query)
    except VoiceExpenseError as exc:
        status_code = 413 if isinstance(exc, InputTooLongError) else 400
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return QueryResponse(filters=filters)


@router.get("/health", response_model=HealthResponse)
async def health(
    service: Annotated[VoiceExpenseService | None, Depends(get_service_optional)],
) -> HealthResponse:
    if not service:
        return HealthResponse(status="starting")
    return HealthResponse(expenses=len(service.store.expenses))
