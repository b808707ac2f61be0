import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from voice_expense.api.dependencies import get_service
from voice_expense.api.schemas import (
    VoiceExpenseRequest,
    VoiceExpenseResponse,
    VoiceParseRequest,
    VoiceParseResponse,
)
from voice_expense.errors import InputTooLongError, VoiceExpenseError
from voice_expense.logger import get_logger
from voice_expense.manager import VoiceExpenseService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/voice")

REVIEW_MESSAGE = "Please review and confirm the details"
PARSED_MESSAGE = "Expense parsed successfully"


def _require_transcript(transcript: str | None) -> str:
    if not transcript or not transcript.strip():
        raise HTTPException(status_code=400, detail="Transcript is required")
    return transcript


def _input_error(exc: VoiceExpenseError) -> HTTPException:
    status_code = 413 if isinstance(exc, InputTooLongError) else 400
    logger.info("[VOICE] Rejected transcript: %s", exc)
    return HTTPException(status_code=status_code, detail=str(exc))


@router.post("/parse", response_model=VoiceParseResponse)
async def parse_transcript(
    req: VoiceParseRequest,
    service: Annotated[VoiceExpenseService, Depends(get_service)],
) -> VoiceParseResponse:
    transcript = _require_transcript(req.transcript)
    try:
        parsed = service.parse(transcript)
    except VoiceExpenseError as exc:
        raise _input_error(exc) from exc

    message = REVIEW_MESSAGE if parsed.needs_review else PARSED_MESSAGE
    return VoiceParseResponse(data=parsed, message=message)


@router.post("/expense", status_code=201, response_model=VoiceExpenseResponse)
async def create_expense(
    req: VoiceExpenseRequest,
    service: Annotated[VoiceExpenseService, Depends(get_service)],
) -> VoiceExpenseResponse | JSONResponse:
    transcript = _require_transcript(req.transcript)
    try:
        expense, parsed, validation = await asyncio.to_thread(
            service.create_from_transcript,
            transcript,
            req.date,
        )
    except VoiceExpenseError as exc:
        raise _input_error(exc) from exc

    if expense is None:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid expense data",
                "details": validation.errors,
                "parsedData": parsed.model_dump(mode="json", by_alias=True),
            },
        )

    return VoiceExpenseResponse(expense=expense, confidence=parsed.confidence)
