"""Scoring of a submitted answer set against a quiz."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_challenge.core.models import AttemptResult, DetailedResult, Quiz, SubmittedAnswer
from quiz_challenge.core.services.scoreboard import format_two_decimals


def score_submission(
    quiz: Quiz,
    answers: Iterable[SubmittedAnswer],
    time_spent: int | float,
    timestamp: str,
) -> AttemptResult:
    """Build the attempt result for ``answers``.

    Answers that reference unknown question ids are dropped. The percentage
    is always relative to the full question count of the quiz.
    """
    details: list[DetailedResult] = []
    for submitted in answers:
        question = quiz.find_question(submitted.question_id)
        if question is None:
            continue
        details.append(
            DetailedResult(
                question_id=question.id,
                question_text=question.question_text,
                user_answer=submitted.answer,
                correct_answer=question.correct_option_index,
                correct=submitted.answer == question.correct_option_index,
                options=question.options,
            )
        )

    score = sum(1 for detail in details if detail.correct)
    total = quiz.question_count
    return AttemptResult(
        quiz_id=quiz.id,
        score=score,
        total_questions=total,
        percentage=format_two_decimals(score / total * 100),
        time_spent=time_spent,
        timestamp=timestamp,
        detailed_results=tuple(details),
    )
