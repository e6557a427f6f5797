"""Append-only, in-memory log of scored quiz attempts."""

from __future__ import annotations

from quiz_challenge.core.models import AttemptResult


class ResultsLog:
    """List of attempt results that only ever grows.

    Not synchronized on its own; ``QuizManager`` holds its lock around every
    call.
    """

    def __init__(self) -> None:
        self._results: list[AttemptResult] = []

    def append(self, result: AttemptResult) -> None:
        self._results.append(result)

    def for_quiz(self, quiz_id: str) -> list[AttemptResult]:
        """Return a snapshot of the results for one quiz, in log order."""
        return [result for result in self._results if result.quiz_id == quiz_id]

    def __len__(self) -> int:
        return len(self._results)
