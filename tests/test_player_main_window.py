import os
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QTimer  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from quiz_challenge.client.api_client import ApiClientError, QuizApiClient  # noqa: E402
from quiz_challenge.core.models import (  # noqa: E402
    AttemptResult,
    DetailedResult,
    QuizSummary,
    SanitizedQuestion,
)
from quiz_challenge.core.services.quiz_session import QuizSession, SessionState  # noqa: E402
from quiz_challenge.ui.player_main_window import PlayerMainWindow  # noqa: E402

QUIZ = QuizSummary(id="mini", title="Mini Quiz", question_count=2)
QUESTIONS = [
    SanitizedQuestion(id=1, question_text="1 + 1?", options=("1", "2")),
    SanitizedQuestion(id=2, question_text="Sky colour?", options=("Blue", "Green", "Red")),
]


@pytest.fixture(scope="session")
def qt_app():
    """Create a single QApplication for the session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def api_client():
    """Fixture for a stubbed QuizApiClient."""
    client = MagicMock(spec=QuizApiClient)
    client.list_quizzes.return_value = [QUIZ]
    client.get_questions.return_value = QUESTIONS
    return client


@pytest.fixture
def window(qt_app, api_client):
    main_window = PlayerMainWindow(api_client=api_client, session=QuizSession(clock=lambda: 50.0))
    yield main_window
    main_window.close()
    main_window.deleteLater()


def _active_timers(window):
    return [timer for timer in window.findChildren(QTimer) if timer.parent() is window and timer.isActive()]


def _answer_current(window, option):
    window._handle_select(option)
    window._handle_submit_answer()


def test_start_quiz_runs_only_the_countdown(window, api_client):
    window.start_quiz(QUIZ)

    api_client.get_questions.assert_called_once_with("mini")
    assert window.session.state == SessionState.IN_PROGRESS
    assert window.view_stack.currentWidget() is window.quiz_panel
    assert window.countdown_timer.isActive()
    assert not window.advance_timer.isActive()
    assert _active_timers(window) == [window.countdown_timer]


def test_answer_swaps_countdown_for_advance_timer(window):
    window.start_quiz(QUIZ)
    _answer_current(window, 1)

    assert not window.countdown_timer.isActive()
    assert window.advance_timer.isActive()

    window._advance()
    assert window.session.current_index == 1
    assert window.countdown_timer.isActive()
    assert not window.advance_timer.isActive()


def test_countdown_expiry_records_timeout(window):
    window.start_quiz(QUIZ)
    for _ in range(window.session.time_limit_seconds):
        window._tick_countdown()

    assert window.session.answers[-1].answer is None
    assert window.session.answers[-1].correct is False
    assert not window.countdown_timer.isActive()
    assert window.advance_timer.isActive()


def test_going_home_stops_all_timers(window):
    window.start_quiz(QUIZ)
    _answer_current(window, 0)

    window.go_home()
    assert window.session.state == SessionState.IDLE
    assert window.view_stack.currentWidget() is window.home_panel
    assert _active_timers(window) == []

    window.start_quiz(QUIZ)
    assert _active_timers(window) == [window.countdown_timer]


def test_failed_submission_shows_unconfirmed_result(window, api_client):
    api_client.submit_answers.side_effect = ApiClientError("Unable to reach the quiz server")
    window.start_quiz(QUIZ)
    _answer_current(window, 1)
    window._advance()
    _answer_current(window, 0)
    window._advance()

    api_client.submit_answers.assert_called_once()
    assert window.session.state == SessionState.RESULT
    assert not window.session.is_confirmed
    assert window.view_stack.currentWidget() is window.result_panel
    assert window.result_panel.warning_label.isVisibleTo(window.result_panel)
    assert _active_timers(window) == []


def test_confirmed_submission_updates_answers(window, api_client):
    api_client.submit_answers.return_value = AttemptResult(
        quiz_id="mini",
        score=1,
        total_questions=2,
        percentage="50.00",
        time_spent=0,
        timestamp="2024-01-01T00:00:00.000Z",
        detailed_results=(
            DetailedResult(1, "1 + 1?", 1, 1, True, ("1", "2")),
            DetailedResult(2, "Sky colour?", 2, 0, False, ("Blue", "Green", "Red")),
        ),
    )
    window.start_quiz(QUIZ)
    _answer_current(window, 1)
    window._advance()
    _answer_current(window, 2)
    window._advance()

    assert window.session.is_confirmed
    assert [answer.correct for answer in window.session.answers] == [True, False]
    assert window.result_panel.score_label.text() == "1/2"
