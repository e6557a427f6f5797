"""Request schemas for the quiz API."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError, field_validator

from quiz_challenge.core.errors import InvalidSubmissionError
from quiz_challenge.core.models import SubmittedAnswer

INVALID_ANSWERS_MESSAGE = "Invalid answers format"
INVALID_TIME_SPENT_MESSAGE = "Invalid timeSpent"


class AnswerPayload(BaseModel):
    """One submitted answer; a missing or null ``answer`` means unanswered.

    A missing ``questionId`` matches no question, so scoring drops the entry.
    """

    model_config = ConfigDict(populate_by_name=True)

    question_id: StrictInt | None = Field(default=None, alias="questionId")
    answer: StrictInt | None = None


class SubmitPayload(BaseModel):
    """Payload schema for a complete quiz attempt."""

    model_config = ConfigDict(populate_by_name=True)

    answers: list[AnswerPayload]
    time_spent: StrictInt | StrictFloat = Field(default=0, alias="timeSpent")

    @field_validator("time_spent")
    @classmethod
    def _finite_non_negative(cls, value: int | float) -> int | float:
        if not math.isfinite(value) or value < 0:
            raise ValueError("timeSpent must be a finite, non-negative number")
        return value

    def to_submitted_answers(self) -> list[SubmittedAnswer]:
        return [SubmittedAnswer(question_id=item.question_id, answer=item.answer) for item in self.answers]


def parse_submission(body: Any) -> SubmitPayload:
    """Validate a raw JSON body, raising ``InvalidSubmissionError`` on bad shape."""
    if not isinstance(body, dict):
        raise InvalidSubmissionError(INVALID_ANSWERS_MESSAGE)
    try:
        return SubmitPayload.model_validate(body)
    except ValidationError as exc:
        if any(error["loc"] and error["loc"][0] == "answers" for error in exc.errors()):
            raise InvalidSubmissionError(INVALID_ANSWERS_MESSAGE) from exc
        raise InvalidSubmissionError(INVALID_TIME_SPENT_MESSAGE) from exc
