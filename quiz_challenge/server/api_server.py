"""FastAPI server that exposes the quiz catalog, scoring and leaderboards."""

from __future__ import annotations

from threading import Thread
from typing import Any
import logging

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from quiz_challenge.constants.about import APP_NAME, APP_VERSION
from quiz_challenge.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_challenge.core.errors import InvalidSubmissionError, QuizNotFoundError
from quiz_challenge.core.quiz_manager import QuizManager, format_timestamp, utc_now
from quiz_challenge.server.schemas import INVALID_ANSWERS_MESSAGE, parse_submission

logger = logging.getLogger(__name__)

_ENDPOINTS = (
    ("GET ", "/api/quizzes", "Get all quizzes"),
    ("GET ", "/api/quiz/{id}", "Get specific quiz"),
    ("POST", "/api/quiz/{id}/submit", "Submit answers"),
    ("GET ", "/api/stats/{id}", "Get quiz statistics"),
    ("GET ", "/api/leaderboard/{id}", "Get leaderboard"),
    ("GET ", "/health", "Health check"),
)


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.exception_handler(QuizNotFoundError)
    async def handle_quiz_not_found(request: Request, exc: QuizNotFoundError) -> JSONResponse:
        logger.info("Unknown quiz id '%s' requested at %s", exc.quiz_id, request.url.path)
        return _error_response(404, str(exc))

    @app.exception_handler(InvalidSubmissionError)
    async def handle_invalid_submission(request: Request, exc: InvalidSubmissionError) -> JSONResponse:
        logger.warning("Rejected submission at %s: %s", request.url.path, exc)
        return _error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Malformed request body at %s", request.url.path)
        return _error_response(400, INVALID_ANSWERS_MESSAGE)

    @app.get("/api/quizzes")
    def list_quizzes(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"quizzes": [quiz.to_summary_dict() for quiz in manager.list_quizzes()]}

    @app.get("/api/quiz/{quiz_id}")
    def get_quiz(quiz_id: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return manager.get_quiz(quiz_id).to_sanitized_dict()

    @app.post("/api/quiz/{quiz_id}/submit")
    def submit_quiz(
        quiz_id: str,
        body: Any = Body(default=None),
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        # Unknown quiz wins over a malformed body.
        manager.get_quiz(quiz_id)
        payload = parse_submission(body)
        result = manager.submit_answers(
            quiz_id,
            payload.to_submitted_answers(),
            time_spent=payload.time_spent,
        )
        return result.to_dict()

    @app.get("/api/stats/{quiz_id}")
    def get_stats(quiz_id: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return manager.get_stats(quiz_id).to_dict()

    @app.get("/api/leaderboard/{quiz_id}")
    def get_leaderboard(quiz_id: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"leaderboard": [result.to_dict() for result in manager.get_leaderboard(quiz_id)]}

    @app.get("/health")
    def health() -> dict[str, object]:
        return {"status": "OK", "timestamp": format_timestamp(utc_now())}

    return app


def _log_endpoints(host: str, port: int) -> None:
    display_host = "localhost" if host in ("0.0.0.0", "") else host
    logger.info("Quiz API server running on http://%s:%s", display_host, port)
    logger.info("Available endpoints:")
    for method, path, description in _ENDPOINTS:
        logger.info("  %s %s - %s", method, path, description)


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    log_level: str = "info",
) -> None:
    """Serve the API in the current thread until interrupted."""
    app = create_api_app(quiz_manager)
    _log_endpoints(host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    _log_endpoints(host, port)
    return thread
