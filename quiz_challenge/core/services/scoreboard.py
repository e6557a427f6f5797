"""Aggregate statistics and rankings over logged quiz attempts."""

from __future__ import annotations

from collections.abc import Sequence

from quiz_challenge.constants.quiz_constants import LEADERBOARD_SIZE
from quiz_challenge.core.models import AttemptResult, QuizStats


def format_two_decimals(value: float) -> str:
    return f"{value:.2f}"


def compute_stats(quiz_id: str, results: Sequence[AttemptResult]) -> QuizStats:
    """Summarize the attempts for one quiz.

    ``results`` must already be filtered to ``quiz_id``.
    """
    if not results:
        return QuizStats(quiz_id=quiz_id, total_attempts=0, average_score=0, highest_score=0)

    total_attempts = len(results)
    average = sum(result.score for result in results) / total_attempts
    return QuizStats(
        quiz_id=quiz_id,
        total_attempts=total_attempts,
        average_score=format_two_decimals(average),
        highest_score=max(result.score for result in results),
    )


def rank_results(
    results: Sequence[AttemptResult], limit: int = LEADERBOARD_SIZE
) -> list[AttemptResult]:
    """Return the top ``limit`` results sorted by score and time spent.

    Higher scores rank first; equal scores are ordered by lower time spent.
    The sort is stable, so complete ties keep their log order.
    """
    sorted_results = sorted(results, key=lambda r: (-r.score, r.time_spent))
    return sorted_results[:limit]
