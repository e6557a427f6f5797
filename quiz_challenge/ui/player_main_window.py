"""Qt main window that runs quizzes against the quiz API."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.client.api_client import ApiClientError, QuizApiClient
from quiz_challenge.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from quiz_challenge.constants.quiz_constants import (
    ANSWER_FEEDBACK_DELAY_MS,
    COUNTDOWN_TICK_INTERVAL_MS,
)
from quiz_challenge.constants.ui_constants import (
    LOADING_MESSAGE,
    SUBMITTING_MESSAGE,
    WINDOW_TITLE,
)
from quiz_challenge.core.models import QuizSummary
from quiz_challenge.core.services.quiz_session import QuizSession, SessionState, SessionStateError
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.components.home_panel import HomePanel
from quiz_challenge.ui.components.quiz_panel import QuizPanel
from quiz_challenge.ui.components.result_panel import ResultPanel
from quiz_challenge.ui.components.stats_panel import StatsPanel
from quiz_challenge.ui.dialog_helpers import confirm_quit_quiz, show_error, show_info

logger = logging.getLogger(__name__)


class PlayerView(Enum):
    """Page shown in the main window stack."""

    HOME = auto()
    LOADING = auto()
    QUIZ = auto()
    RESULT = auto()
    STATS = auto()


class PlayerMainWindow(QMainWindow):
    """Main Qt window orchestrating quiz selection, play, results and stats."""

    def __init__(self, api_client: QuizApiClient, session: QuizSession | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(720, 640)

        self.api_client = api_client
        self.session = session or QuizSession()
        self._quizzes: list[QuizSummary] = []

        self._build_ui()
        self._configure_timers()
        self.setStyleSheet(Styles.get_main_window_style())
        self.refresh_quizzes()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.view_stack = QStackedWidget(self)

        self.home_panel = HomePanel(
            on_start_quiz=self.start_quiz,
            on_view_stats=self.view_stats,
            on_refresh=self.refresh_quizzes,
            on_about=self._handle_about,
            parent=self,
        )
        self.loading_label = QLabel(LOADING_MESSAGE, self)
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.quiz_panel = QuizPanel(
            on_select=self._handle_select,
            on_submit=self._handle_submit_answer,
            on_quit=self._handle_quit_quiz,
            parent=self,
        )
        self.result_panel = ResultPanel(
            on_retry=self._handle_retry,
            on_home=self.go_home,
            on_view_stats=self._handle_stats_from_result,
            parent=self,
        )
        self.stats_panel = StatsPanel(on_back=self.go_home, parent=self)

        self._view_widgets = {
            PlayerView.HOME: self.home_panel,
            PlayerView.LOADING: self.loading_label,
            PlayerView.QUIZ: self.quiz_panel,
            PlayerView.RESULT: self.result_panel,
            PlayerView.STATS: self.stats_panel,
        }
        for widget in self._view_widgets.values():
            self.view_stack.addWidget(widget)

        root_layout.addWidget(self.view_stack)
        self._set_view(PlayerView.HOME)

    def _configure_timers(self) -> None:
        # One countdown per window; restarting it replaces the previous question's timer.
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(COUNTDOWN_TICK_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._tick_countdown)

        self.advance_timer = QTimer(self)
        self.advance_timer.setSingleShot(True)
        self.advance_timer.setInterval(ANSWER_FEEDBACK_DELAY_MS)
        self.advance_timer.timeout.connect(self._advance)

    def _set_view(self, view: PlayerView, message: str | None = None) -> None:
        if view == PlayerView.LOADING:
            self.loading_label.setText(message or LOADING_MESSAGE)
        self.view_stack.setCurrentWidget(self._view_widgets[view])
        # Paint the page before a blocking request starts.
        QApplication.processEvents()

    def _stop_timers(self) -> None:
        self.countdown_timer.stop()
        self.advance_timer.stop()

    # --- Home ---

    def refresh_quizzes(self) -> None:
        try:
            self._quizzes = self.api_client.list_quizzes()
        except ApiClientError as exc:
            logger.error("Error fetching quizzes: %s", exc)
            self._quizzes = []
        self.home_panel.set_quizzes(self._quizzes)

    def go_home(self) -> None:
        self._stop_timers()
        if self.session.state == SessionState.VIEWING_STATS:
            self.session.close_stats()
        else:
            self.session.reset()
        self.home_panel.set_loading(False)
        self._set_view(PlayerView.HOME)

    def _handle_about(self) -> None:
        show_info(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}",
        )

    # --- Playing ---

    def start_quiz(self, quiz: QuizSummary) -> None:
        self._stop_timers()
        self.session.begin_loading(quiz)
        self.home_panel.set_loading(True)
        self._set_view(PlayerView.LOADING)
        try:
            questions = self.api_client.get_questions(quiz.id)
            self.session.start(questions)
        except (ApiClientError, SessionStateError) as exc:
            logger.error("Error fetching quiz questions for '%s': %s", quiz.id, exc)
            if self.session.state == SessionState.LOADING:
                self.session.cancel_loading()
            self.home_panel.set_loading(False)
            self._set_view(PlayerView.HOME)
            show_error(self, "Unable to start quiz", str(exc))
            return

        self.home_panel.set_loading(False)
        self._show_current_question()

    def _show_current_question(self) -> None:
        self.quiz_panel.show_question(self.session)
        self._set_view(PlayerView.QUIZ)
        self.countdown_timer.start()

    def _tick_countdown(self) -> None:
        if self.session.state != SessionState.IN_PROGRESS:
            self.countdown_timer.stop()
            return
        timed_out = self.session.tick()
        self.quiz_panel.update_timer(self.session)
        if timed_out:
            self.countdown_timer.stop()
            self.quiz_panel.show_answered(self.session, self.session.answers[-1])
            self.advance_timer.start()

    def _handle_select(self, option_index: int) -> None:
        if self.session.state != SessionState.IN_PROGRESS:
            return
        self.session.select_answer(option_index)
        self.quiz_panel.update_selection(self.session)

    def _handle_submit_answer(self) -> None:
        if self.session.state != SessionState.IN_PROGRESS or self.session.selected_answer is None:
            return
        recorded = self.session.submit_answer()
        self.countdown_timer.stop()
        self.quiz_panel.show_answered(self.session, recorded)
        self.advance_timer.start()

    def _advance(self) -> None:
        if self.session.state != SessionState.ANSWERED:
            return
        if self.session.advance():
            self._show_current_question()
        else:
            self._submit_attempt()

    def _submit_attempt(self) -> None:
        quiz = self.session.quiz
        if quiz is None:
            return
        self._set_view(PlayerView.LOADING, SUBMITTING_MESSAGE)
        answers, time_spent = self.session.build_submission()
        try:
            result = self.api_client.submit_answers(quiz.id, answers, time_spent)
        except ApiClientError as exc:
            logger.error("Error submitting quiz '%s': %s", quiz.id, exc)
            self.session.fail_submission(str(exc))
        else:
            self.session.complete(result)
        self.result_panel.show_result(self.session)
        self._set_view(PlayerView.RESULT)

    def _handle_quit_quiz(self) -> None:
        if not confirm_quit_quiz(self):
            return
        self.go_home()

    def _handle_retry(self) -> None:
        quiz = self.session.quiz
        if quiz is None:
            self.go_home()
            return
        self.start_quiz(quiz)

    # --- Stats ---

    def view_stats(self, quiz: QuizSummary) -> None:
        self._stop_timers()
        if self.session.state not in (SessionState.IDLE, SessionState.RESULT):
            self.session.reset()
        self.session.view_stats(quiz.id)
        self._set_view(PlayerView.LOADING)
        try:
            stats = self.api_client.get_stats(quiz.id)
            leaderboard = self.api_client.get_leaderboard(quiz.id)
        except ApiClientError as exc:
            logger.error("Error fetching stats for '%s': %s", quiz.id, exc)
            self.go_home()
            show_error(self, "Unable to load statistics", str(exc))
            return
        self.stats_panel.show_stats(quiz.title, stats, leaderboard)
        self._set_view(PlayerView.STATS)

    def _handle_stats_from_result(self) -> None:
        quiz = self.session.quiz
        if quiz is not None:
            self.view_stats(quiz)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self._stop_timers()
        self.api_client.close()
        super().closeEvent(event)
