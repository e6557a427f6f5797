"""Client-side state for running one timed quiz attempt."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
import math
import time

from quiz_challenge.constants.quiz_constants import QUESTION_TIME_LIMIT_SECONDS
from quiz_challenge.core.models import AttemptResult, QuizSummary, SanitizedQuestion, SubmittedAnswer


class SessionState(Enum):
    """Lifecycle of a quiz attempt as seen by the player."""

    IDLE = auto()
    LOADING = auto()
    IN_PROGRESS = auto()
    ANSWERED = auto()
    SUBMITTING = auto()
    RESULT = auto()
    VIEWING_STATS = auto()


class SessionStateError(RuntimeError):
    """Raised when an action is not allowed in the current session state."""


@dataclass(slots=True)
class RecordedAnswer:
    """An answer collected locally.

    ``correct`` stays ``None`` until the server result confirms it; a
    timeout is known to be wrong and is recorded as ``False`` immediately.
    """

    question_id: int
    answer: int | None
    correct: bool | None


class QuizSession:
    """Drives one attempt: per-question countdown, answer collection, submission."""

    def __init__(
        self,
        time_limit_seconds: int = QUESTION_TIME_LIMIT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if time_limit_seconds <= 0:
            raise ValueError("Time limit must be a positive integer.")
        self._time_limit_seconds = time_limit_seconds
        self._clock = clock
        self._state = SessionState.IDLE
        self._stats_quiz_id: str | None = None
        self._clear_attempt()
        self.quiz: QuizSummary | None = None

    def _clear_attempt(self) -> None:
        self.questions: list[SanitizedQuestion] = []
        self.current_index: int = 0
        self.selected_answer: int | None = None
        self.time_left: int = self._time_limit_seconds
        self.answers: list[RecordedAnswer] = []
        self.result: AttemptResult | None = None
        self.submit_error: str | None = None
        self.time_spent: int | None = None
        self._started_at: float | None = None

    # --- State inspection ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def time_limit_seconds(self) -> int:
        return self._time_limit_seconds

    @property
    def current_question(self) -> SanitizedQuestion | None:
        if self._state not in (SessionState.IN_PROGRESS, SessionState.ANSWERED):
            return None
        return self.questions[self.current_index]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def answered_count(self) -> int:
        return sum(1 for answer in self.answers if answer.answer is not None)

    @property
    def is_last_question(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    @property
    def is_confirmed(self) -> bool:
        """True once the server has scored the attempt."""
        return self.result is not None

    @property
    def stats_quiz_id(self) -> str | None:
        return self._stats_quiz_id

    # --- Transitions ---

    def begin_loading(self, quiz: QuizSummary) -> None:
        self._require(SessionState.IDLE, SessionState.RESULT)
        self._clear_attempt()
        self.quiz = quiz
        self._state = SessionState.LOADING

    def start(self, questions: Sequence[SanitizedQuestion]) -> None:
        """Begin the first question once the quiz content has arrived."""
        self._require(SessionState.LOADING)
        if not questions:
            self._state = SessionState.IDLE
            raise SessionStateError("Quiz has no questions.")
        self.questions = list(questions)
        self.current_index = 0
        self._reset_question()
        self._started_at = self._clock()
        self._state = SessionState.IN_PROGRESS

    def cancel_loading(self) -> None:
        self._require(SessionState.LOADING)
        self.quiz = None
        self._state = SessionState.IDLE

    def select_answer(self, option_index: int) -> None:
        self._require(SessionState.IN_PROGRESS)
        question = self.questions[self.current_index]
        if not 0 <= option_index < len(question.options):
            raise ValueError(f"Option index {option_index} out of range")
        self.selected_answer = option_index

    def submit_answer(self) -> RecordedAnswer:
        self._require(SessionState.IN_PROGRESS)
        if self.selected_answer is None:
            raise SessionStateError("Select an option before submitting.")
        return self._record(self.selected_answer, correct=None)

    def tick(self) -> bool:
        """Advance the countdown by one second; return True if it timed out."""
        if self._state is not SessionState.IN_PROGRESS:
            return False
        self.time_left = max(0, self.time_left - 1)
        if self.time_left == 0:
            self.time_out()
            return True
        return False

    def time_out(self) -> RecordedAnswer:
        self._require(SessionState.IN_PROGRESS)
        self.selected_answer = None
        return self._record(None, correct=False)

    def advance(self) -> bool:
        """Move to the next question; return False when the attempt is ready to submit."""
        self._require(SessionState.ANSWERED)
        if self.is_last_question:
            self._state = SessionState.SUBMITTING
            return False
        self.current_index += 1
        self._reset_question()
        self._state = SessionState.IN_PROGRESS
        return True

    def build_submission(self) -> tuple[list[SubmittedAnswer], int]:
        """Return the answer sequence and whole elapsed seconds for the attempt."""
        self._require(SessionState.SUBMITTING)
        if self.time_spent is None:
            elapsed = self._clock() - (self._started_at or self._clock())
            self.time_spent = max(0, math.floor(elapsed))
        answers = [SubmittedAnswer(question_id=a.question_id, answer=a.answer) for a in self.answers]
        return answers, self.time_spent

    def complete(self, result: AttemptResult) -> None:
        """Apply the server-confirmed result, overwriting provisional correctness."""
        self._require(SessionState.SUBMITTING)
        confirmed = {detail.question_id: detail.correct for detail in result.detailed_results}
        for answer in self.answers:
            answer.correct = confirmed.get(answer.question_id, False)
        self.result = result
        self._state = SessionState.RESULT

    def fail_submission(self, error: str) -> None:
        """Show the result view without a server score."""
        self._require(SessionState.SUBMITTING)
        self.submit_error = error
        self._state = SessionState.RESULT

    def reset(self) -> None:
        """Abandon whatever is in progress and return to idle."""
        self._clear_attempt()
        self.quiz = None
        self._stats_quiz_id = None
        self._state = SessionState.IDLE

    def view_stats(self, quiz_id: str) -> None:
        self._require(SessionState.IDLE, SessionState.RESULT)
        self._stats_quiz_id = quiz_id
        self._state = SessionState.VIEWING_STATS

    def close_stats(self) -> None:
        self._require(SessionState.VIEWING_STATS)
        self._stats_quiz_id = None
        self._state = SessionState.IDLE

    # --- Helpers ---

    def _record(self, answer: int | None, correct: bool | None) -> RecordedAnswer:
        question = self.questions[self.current_index]
        recorded = RecordedAnswer(question_id=question.id, answer=answer, correct=correct)
        self.answers.append(recorded)
        self._state = SessionState.ANSWERED
        return recorded

    def _reset_question(self) -> None:
        self.selected_answer = None
        self.time_left = self._time_limit_seconds

    def _require(self, *allowed: SessionState) -> None:
        if self._state not in allowed:
            expected = ", ".join(state.name for state in allowed)
            raise SessionStateError(f"Action not allowed in state {self._state.name} (expected {expected}).")
