"""Exceptions raised by the quiz core and translated by the API layer."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for domain errors surfaced to API callers."""


class QuizNotFoundError(QuizError):
    """Raised when a quiz id is not present in the catalog."""

    def __init__(self, quiz_id: str) -> None:
        super().__init__("Quiz not found")
        self.quiz_id = quiz_id


class InvalidSubmissionError(QuizError):
    """Raised when a submission body does not have the expected shape."""
