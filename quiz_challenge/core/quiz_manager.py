"""Business logic for the quiz catalog and attempt scoring shared with the API."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timezone
import logging
from pathlib import Path
from threading import Lock

from quiz_challenge.core.default_catalog import DEFAULT_QUIZZES
from quiz_challenge.core.models import AttemptResult, Quiz, QuizStats, SubmittedAnswer
from quiz_challenge.core.quiz_importer import load_catalog_from_directory
from quiz_challenge.core.services.quiz_catalog import QuizCatalog
from quiz_challenge.core.services.results_log import ResultsLog
from quiz_challenge.core.services.scoreboard import compute_stats, rank_results
from quiz_challenge.core.services.scoring import score_submission

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing 'Z'."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class QuizManager:
    """Facade for quiz services: Catalog, ResultsLog and Scoreboard."""

    def __init__(
        self,
        quizzes: Iterable[Quiz] | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._lock = Lock()
        self._clock = clock

        # Services
        self._catalog = QuizCatalog(DEFAULT_QUIZZES if quizzes is None else quizzes)
        self._results = ResultsLog()

    @classmethod
    def from_catalog_dir(cls, catalog_dir: Path | None) -> QuizManager:
        """Build a manager from quiz files, or the built-in quizzes when no directory is given."""
        if catalog_dir is None:
            return cls()
        return cls(load_catalog_from_directory(catalog_dir))

    # --- Catalog Delegation ---

    def list_quizzes(self) -> list[Quiz]:
        return self._catalog.list_quizzes()

    def get_quiz(self, quiz_id: str) -> Quiz:
        return self._catalog.get_quiz(quiz_id)

    # --- Submission ---

    def submit_answers(
        self,
        quiz_id: str,
        answers: Iterable[SubmittedAnswer],
        time_spent: int | float = 0,
    ) -> AttemptResult:
        """Score an answer set, append it to the results log and return it."""
        quiz = self._catalog.get_quiz(quiz_id)
        with self._lock:
            result = score_submission(
                quiz,
                answers,
                time_spent=time_spent,
                timestamp=format_timestamp(self._clock()),
            )
            self._results.append(result)
        logger.info(
            "Recorded attempt for quiz '%s': %d/%d in %ss",
            quiz_id,
            result.score,
            result.total_questions,
            time_spent,
        )
        return result

    def get_attempt_count(self) -> int:
        with self._lock:
            return len(self._results)

    # --- Scoreboard Delegation ---

    def get_stats(self, quiz_id: str) -> QuizStats:
        with self._lock:
            results = self._results.for_quiz(quiz_id)
        return compute_stats(quiz_id, results)

    def get_leaderboard(self, quiz_id: str) -> list[AttemptResult]:
        with self._lock:
            results = self._results.for_quiz(quiz_id)
        return rank_results(results)
