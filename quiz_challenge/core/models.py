"""Domain models for the quiz application.

The JSON wire format uses camelCase keys; ``to_dict``/``from_dict`` are the
only place where that mapping lives so the server and the client agree on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Multiple-choice question with one correct option."""

    id: int
    question_text: str
    options: tuple[str, ...]
    correct_option_index: int

    def to_sanitized_dict(self) -> dict[str, Any]:
        """Client-facing view that withholds the correct option."""
        return {
            "id": self.id,
            "question": self.question_text,
            "options": list(self.options),
        }


@dataclass(frozen=True, slots=True)
class Quiz:
    """A titled, ordered set of questions."""

    id: str
    title: str
    questions: tuple[QuizQuestion, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def find_question(self, question_id: int | None) -> QuizQuestion | None:
        return next((q for q in self.questions if q.id == question_id), None)

    def to_summary_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "questionCount": self.question_count}

    def to_sanitized_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "questions": [q.to_sanitized_dict() for q in self.questions],
        }


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Catalog entry as seen by the client."""

    id: str
    title: str
    question_count: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizSummary:
        return cls(id=data["id"], title=data["title"], question_count=data["questionCount"])


@dataclass(frozen=True, slots=True)
class SanitizedQuestion:
    """Question as delivered to the client before scoring."""

    id: int
    question_text: str
    options: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SanitizedQuestion:
        return cls(id=data["id"], question_text=data["question"], options=tuple(data["options"]))


@dataclass(frozen=True, slots=True)
class SubmittedAnswer:
    """Represents the option picked for one question; ``None`` means no answer.

    ``question_id`` is ``None`` when the caller omitted it; such entries are never scored.
    """

    question_id: int | None
    answer: int | None

    def to_dict(self) -> dict[str, Any]:
        return {"questionId": self.question_id, "answer": self.answer}


@dataclass(frozen=True, slots=True)
class DetailedResult:
    """Per-question outcome echoed back after scoring."""

    question_id: int
    question_text: str
    user_answer: int | None
    correct_answer: int
    correct: bool
    options: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionId": self.question_id,
            "question": self.question_text,
            "userAnswer": self.user_answer,
            "correctAnswer": self.correct_answer,
            "correct": self.correct,
            "options": list(self.options),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DetailedResult:
        return cls(
            question_id=data["questionId"],
            question_text=data["question"],
            user_answer=data.get("userAnswer"),
            correct_answer=data["correctAnswer"],
            correct=data["correct"],
            options=tuple(data["options"]),
        )


@dataclass(frozen=True, slots=True)
class AttemptResult:
    """Scored record of one quiz attempt."""

    quiz_id: str
    score: int
    total_questions: int
    percentage: str
    time_spent: int | float
    timestamp: str
    detailed_results: tuple[DetailedResult, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "quizId": self.quiz_id,
            "score": self.score,
            "totalQuestions": self.total_questions,
            "percentage": self.percentage,
            "timeSpent": self.time_spent,
            "detailedResults": [detail.to_dict() for detail in self.detailed_results],
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttemptResult:
        return cls(
            quiz_id=data["quizId"],
            score=data["score"],
            total_questions=data["totalQuestions"],
            percentage=data["percentage"],
            time_spent=data["timeSpent"],
            timestamp=data["timestamp"],
            detailed_results=tuple(
                DetailedResult.from_dict(item) for item in data.get("detailedResults", [])
            ),
        )


@dataclass(frozen=True, slots=True)
class QuizStats:
    """Aggregate statistics over the attempts logged for one quiz.

    ``average_score`` is ``0`` when there are no attempts and a two-decimal
    string otherwise.
    """

    quiz_id: str
    total_attempts: int
    average_score: int | str
    highest_score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "quizId": self.quiz_id,
            "totalAttempts": self.total_attempts,
            "averageScore": self.average_score,
            "highestScore": self.highest_score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizStats:
        return cls(
            quiz_id=data["quizId"],
            total_attempts=data["totalAttempts"],
            average_score=data["averageScore"],
            highest_score=data["highestScore"],
        )
