"""Application entry point for the Quiz Challenge desktop client."""

from __future__ import annotations

import sys
import time

from PySide6.QtWidgets import QApplication

from quiz_challenge.client.api_client import QuizApiClient
from quiz_challenge.config import get_settings
from quiz_challenge.core.quiz_manager import QuizManager
from quiz_challenge.server.api_server import start_api_server
from quiz_challenge.ui.player_main_window import PlayerMainWindow
from quiz_challenge.utils.logging_config import configure_logging


def _wait_for_server(api_client: QuizApiClient, attempts: int = 50, delay_seconds: float = 0.1) -> None:
    """Give the embedded server a moment to bind before the UI fetches quizzes."""
    for _ in range(attempts):
        if api_client.check_health():
            return
        time.sleep(delay_seconds)


def main() -> None:
    """Initialize logging, optionally start the API server, and launch the Qt UI."""
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting Quiz Challenge client…")

    if settings.embed_server:
        quiz_manager = QuizManager.from_catalog_dir(settings.catalog_dir)
        start_api_server(quiz_manager=quiz_manager, host=settings.host, port=settings.port)

    logger.info("Using quiz API at %s", settings.api_url)
    api_client = QuizApiClient(settings.api_url, timeout=settings.request_timeout_seconds)
    if settings.embed_server:
        _wait_for_server(api_client)

    app = QApplication(sys.argv)
    window = PlayerMainWindow(api_client=api_client)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
