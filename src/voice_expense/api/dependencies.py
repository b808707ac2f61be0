from fastapi import HTTPException, Request

from voice_expense.manager import VoiceExpenseService


def get_service(request: Request) -> VoiceExpenseService:
    service = getattr(request.app.state, "service", None)
    if not service:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return service


def get_service_optional(request: Request) -> VoiceExpenseService | None:
    return getattr(request.app.state, "service", None)
