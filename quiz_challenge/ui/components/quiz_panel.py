"""Component for answering questions against the countdown."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.constants.quiz_constants import TIME_LIMIT_WARNING_SECONDS
from quiz_challenge.constants.ui_constants import (
    ANSWER_SENT_FEEDBACK,
    QUESTION_PROGRESS_TEMPLATE,
    QUIZ_QUIT_BUTTON,
    QUIZ_SUBMIT_BUTTON,
    RUNNING_SCORE_TEMPLATE,
    TIME_LEFT_TEMPLATE,
    TIMEOUT_FEEDBACK,
)
from quiz_challenge.core.services.quiz_session import QuizSession, RecordedAnswer
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.question_renderer import render_option, render_question


class QuizPanel(QWidget):
    """UI component showing one question, its options and the time left."""

    def __init__(
        self,
        on_select: Callable[[int], None],
        on_submit: Callable[[], None],
        on_quit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select = on_select
        self.on_submit = on_submit
        self.on_quit = on_quit
        self._font_size: int = 14
        self.option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.time_left_label = QLabel("", self)
        self.time_left_label.setStyleSheet(Styles.get_timer_label_style(warning=False))
        header_row.addWidget(self.time_left_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setMaximumHeight(8)
        layout.addWidget(self.progress_bar)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.feedback_label)

        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.clicked.connect(self.on_submit)
        layout.addWidget(self.submit_button)

        footer_row = QHBoxLayout()
        self.running_label = QLabel("", self)
        footer_row.addWidget(self.running_label)
        footer_row.addStretch()
        self.quit_button = QPushButton(QUIZ_QUIT_BUTTON, self)
        self.quit_button.clicked.connect(self.on_quit)
        footer_row.addWidget(self.quit_button)
        layout.addLayout(footer_row)

        layout.addStretch()

    def show_question(self, session: QuizSession) -> None:
        question = session.current_question
        if question is None:
            return
        number = session.current_index + 1
        total = session.question_count
        self.progress_label.setText(QUESTION_PROGRESS_TEMPLATE.format(number=number, total=total))
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(number)
        self.question_label.setText(render_question(question.question_text, self._font_size))
        self._rebuild_option_buttons(question.options)
        self.feedback_label.setText("")
        self.submit_button.setVisible(True)
        self.submit_button.setEnabled(False)
        self._update_running_label(session)
        self.update_timer(session)

    def update_selection(self, session: QuizSession) -> None:
        for index, button in enumerate(self.option_buttons):
            button.setStyleSheet(Styles.get_option_button_style(selected=index == session.selected_answer))
        self.submit_button.setEnabled(session.selected_answer is not None)

    def update_timer(self, session: QuizSession) -> None:
        seconds = session.time_left
        self.time_left_label.setText(TIME_LEFT_TEMPLATE.format(seconds=seconds))
        self.time_left_label.setStyleSheet(
            Styles.get_timer_label_style(warning=seconds <= TIME_LIMIT_WARNING_SECONDS)
        )

    def show_answered(self, session: QuizSession, recorded: RecordedAnswer) -> None:
        """Lock the options and show provisional feedback for the answer."""
        for index, button in enumerate(self.option_buttons):
            button.setEnabled(False)
            if recorded.answer is None:
                button.setStyleSheet(Styles.get_option_button_style())
            elif index == recorded.answer:
                button.setStyleSheet(
                    Styles.get_option_button_style(selected=True, correct=recorded.correct)
                )
        self.submit_button.setVisible(False)
        if recorded.answer is None:
            self.feedback_label.setText(TIMEOUT_FEEDBACK)
        else:
            self.feedback_label.setText(ANSWER_SENT_FEEDBACK)
        self._update_running_label(session)
        self.update_timer(session)

    def _update_running_label(self, session: QuizSession) -> None:
        self.running_label.setText(
            RUNNING_SCORE_TEMPLATE.format(answered=session.answered_count, total=session.question_count)
        )

    def _rebuild_option_buttons(self, options: tuple[str, ...]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for index, option in enumerate(options):
            button = QPushButton(render_option(index, option), self)
            button.setStyleSheet(Styles.get_option_button_style())
            button.clicked.connect(lambda _checked=False, i=index: self.on_select(i))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)
