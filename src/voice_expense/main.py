import uvicorn

from voice_expense.app import app
from voice_expense.core import settings
from voice_expense.logger import get_logging_config


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=get_logging_config())


if __name__ == "__main__":
    run()
