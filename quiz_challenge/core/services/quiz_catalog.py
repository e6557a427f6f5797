"""Service for holding the fixed collection of quizzes."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_challenge.core.errors import QuizNotFoundError
from quiz_challenge.core.models import Quiz, QuizQuestion


class QuizCatalog:
    """Read-only, insertion-ordered store of validated quizzes."""

    def __init__(self, quizzes: Iterable[Quiz]) -> None:
        self._quizzes: dict[str, Quiz] = {}
        for quiz in quizzes:
            if quiz.id in self._quizzes:
                raise ValueError(f"Duplicate quiz id '{quiz.id}'.")
            self._quizzes[quiz.id] = self._prepare_quiz(quiz)

    def list_quizzes(self) -> list[Quiz]:
        """Return all quizzes in catalog order."""
        return list(self._quizzes.values())

    def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self._quizzes.get(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    def __len__(self) -> int:
        return len(self._quizzes)

    def _prepare_quiz(self, quiz: Quiz) -> Quiz:
        """Validate and normalize a quiz before storage."""
        quiz_id = quiz.id.strip()
        if not quiz_id:
            raise ValueError("Quiz id must not be empty.")
        title = quiz.title.strip()
        if not title:
            raise ValueError(f"Quiz '{quiz_id}' must have a title.")
        if not quiz.questions:
            raise ValueError(f"Quiz '{quiz_id}' must contain at least one question.")

        seen_ids: set[int] = set()
        questions = []
        for question in quiz.questions:
            if question.id in seen_ids:
                raise ValueError(f"Quiz '{quiz_id}' has duplicate question id {question.id}.")
            seen_ids.add(question.id)
            questions.append(self._prepare_question(question))

        return Quiz(id=quiz_id, title=title, questions=tuple(questions))

    def _prepare_question(self, question: QuizQuestion) -> QuizQuestion:
        options = self._validate_options(question.options)
        if not 0 <= question.correct_option_index < len(options):
            raise ValueError(
                f"Correct option index for question {question.id} must be between 0 and {len(options) - 1}."
            )

        cleaned_text = question.question_text.strip()
        if not cleaned_text:
            raise ValueError(f"Question {question.id} text must not be empty.")

        return QuizQuestion(
            id=question.id,
            question_text=cleaned_text,
            options=options,
            correct_option_index=question.correct_option_index,
        )

    @staticmethod
    def _validate_options(options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) < 2:
            raise ValueError("Each question must have at least two options.")
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        return cleaned
