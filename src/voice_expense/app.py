from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voice_expense.api.routes import expenses, voice
from voice_expense.core import settings
from voice_expense.logger import get_logger, setup_logging
from voice_expense.manager import VoiceExpenseService
from voice_expense.services.expenses import ExpenseStore

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        store = ExpenseStore(data_path=settings.get_expenses_path())
        service = VoiceExpenseService(store=store, block_high_amounts=settings.block_high_amounts())
        app.state.service = service

        logger.info("Services initialized (%d stored expenses).", len(store.expenses))
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Voice Expense", lifespan=lifespan)

    app.include_router(voice.router)
    app.include_router(expenses.router)

    return app


app = create_app()
