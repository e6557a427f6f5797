"""HTTP client for the quiz API used by the desktop client."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

import requests

from quiz_challenge.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from quiz_challenge.core.models import (
    AttemptResult,
    QuizStats,
    QuizSummary,
    SanitizedQuestion,
    SubmittedAnswer,
)

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Raised when a request to the quiz API fails for any reason."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuizApiClient:
    """Thin wrapper over the quiz HTTP endpoints returning domain models."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def list_quizzes(self) -> list[QuizSummary]:
        data = self._request("GET", "/api/quizzes")
        return [QuizSummary.from_dict(item) for item in data["quizzes"]]

    def get_questions(self, quiz_id: str) -> list[SanitizedQuestion]:
        data = self._request("GET", f"/api/quiz/{quiz_id}")
        return [SanitizedQuestion.from_dict(item) for item in data["questions"]]

    def submit_answers(
        self,
        quiz_id: str,
        answers: Sequence[SubmittedAnswer],
        time_spent: int,
    ) -> AttemptResult:
        payload = {
            "answers": [answer.to_dict() for answer in answers],
            "timeSpent": time_spent,
        }
        data = self._request("POST", f"/api/quiz/{quiz_id}/submit", json=payload)
        return AttemptResult.from_dict(data)

    def get_stats(self, quiz_id: str) -> QuizStats:
        return QuizStats.from_dict(self._request("GET", f"/api/stats/{quiz_id}"))

    def get_leaderboard(self, quiz_id: str) -> list[AttemptResult]:
        data = self._request("GET", f"/api/leaderboard/{quiz_id}")
        return [AttemptResult.from_dict(item) for item in data["leaderboard"]]

    def check_health(self) -> bool:
        try:
            data = self._request("GET", "/health")
        except ApiClientError:
            return False
        return data.get("status") == "OK"

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, path: str, json: Any = None) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiClientError(f"Unable to reach the quiz server: {exc}") from exc

        if not response.ok:
            message = _extract_error_message(response)
            logger.error("%s %s returned %s: %s", method, url, response.status_code, message)
            raise ApiClientError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ApiClientError(f"Invalid response from {url}") from exc


def _extract_error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status {response.status_code}"
