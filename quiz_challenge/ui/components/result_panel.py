"""Component showing the outcome of a finished attempt."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

from quiz_challenge.constants.ui_constants import (
    HOME_STATS_BUTTON,
    RESULT_HEADLINE,
    RESULT_HOME_BUTTON,
    RESULT_RETRY_BUTTON,
    RESULT_UNCONFIRMED_MESSAGE,
)
from quiz_challenge.core.services.quiz_session import QuizSession
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.question_renderer import render_answer_summary


class ResultPanel(QWidget):
    """UI component for the score and per-question summary."""

    def __init__(
        self,
        on_retry: Callable[[], None],
        on_home: Callable[[], None],
        on_view_stats: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_retry = on_retry
        self.on_home = on_home
        self.on_view_stats = on_view_stats

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel(RESULT_HEADLINE, self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        self.headline_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.headline_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 28pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.percentage_label = QLabel("", self)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percentage_label)

        self.warning_label = QLabel(RESULT_UNCONFIRMED_MESSAGE, self)
        self.warning_label.setWordWrap(True)
        self.warning_label.setAlignment(Qt.AlignCenter)
        self.warning_label.setVisible(False)
        layout.addWidget(self.warning_label)

        self.summary_label = QLabel("", self)
        self.summary_label.setTextFormat(Qt.RichText)
        self.summary_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        summary_scroll = QScrollArea(self)
        summary_scroll.setWidgetResizable(True)
        summary_scroll.setWidget(self.summary_label)
        layout.addWidget(summary_scroll, stretch=1)

        button_row = QHBoxLayout()
        self.retry_button = QPushButton(RESULT_RETRY_BUTTON, self)
        self.retry_button.setStyleSheet(Styles.get_primary_button_style())
        self.retry_button.clicked.connect(self.on_retry)
        button_row.addWidget(self.retry_button)
        self.stats_button = QPushButton(HOME_STATS_BUTTON, self)
        self.stats_button.clicked.connect(self.on_view_stats)
        button_row.addWidget(self.stats_button)
        self.home_button = QPushButton(RESULT_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        button_row.addWidget(self.home_button)
        layout.addLayout(button_row)

    def show_result(self, session: QuizSession) -> None:
        result = session.result
        if result is not None:
            self.score_label.setText(f"{result.score}/{result.total_questions}")
            self.percentage_label.setText(f"{result.percentage}% correct in {result.time_spent}s")
            self.warning_label.setVisible(False)
            details = result.detailed_results
        else:
            self.score_label.setText("—")
            self.percentage_label.setText(
                f"Answered {session.answered_count} of {session.question_count} questions"
            )
            self.warning_label.setText(f"{RESULT_UNCONFIRMED_MESSAGE}\n{session.submit_error or ''}".strip())
            self.warning_label.setVisible(True)
            details = ()
        self.summary_label.setText(
            render_answer_summary(session.answers, session.question_count, details)
        )
