"""Entry point that serves the quiz API without the desktop client."""

from __future__ import annotations

from quiz_challenge.config import get_settings
from quiz_challenge.core.quiz_manager import QuizManager
from quiz_challenge.server.api_server import run_api_server
from quiz_challenge.utils.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    quiz_manager = QuizManager.from_catalog_dir(settings.catalog_dir)
    logger.info("Serving %d quizzes", len(quiz_manager.list_quizzes()))
    run_api_server(quiz_manager, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
