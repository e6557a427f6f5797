"""Component listing the available quizzes."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.constants.about import RULES_TEXT
from quiz_challenge.constants.ui_constants import (
    HOME_ABOUT_BUTTON,
    HOME_HEADLINE,
    HOME_REFRESH_BUTTON,
    HOME_START_BUTTON,
    HOME_STATS_BUTTON,
    HOME_SUBTITLE,
    NO_QUIZZES_MESSAGE,
)
from quiz_challenge.core.models import QuizSummary
from quiz_challenge.styling.styles import Styles


class HomePanel(QWidget):
    """UI component for choosing a quiz to play or inspect."""

    def __init__(
        self,
        on_start_quiz: Callable[[QuizSummary], None],
        on_view_stats: Callable[[QuizSummary], None],
        on_refresh: Callable[[], None],
        on_about: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self.on_view_stats = on_view_stats
        self.on_refresh = on_refresh
        self.on_about = on_about
        self._start_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel(HOME_HEADLINE, self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        self.headline_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.headline_label)

        self.subtitle_label = QLabel(HOME_SUBTITLE, self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.subtitle_label)

        self.quiz_list_layout = QVBoxLayout()
        layout.addLayout(self.quiz_list_layout, stretch=1)

        self.empty_label = QLabel(NO_QUIZZES_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        self.rules_label = QLabel(RULES_TEXT, self)
        self.rules_label.setWordWrap(True)
        layout.addWidget(self.rules_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.refresh_button = QPushButton(HOME_REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.on_refresh)
        button_row.addWidget(self.refresh_button)
        self.about_button = QPushButton(HOME_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        button_row.addWidget(self.about_button)
        layout.addLayout(button_row)

    def set_quizzes(self, quizzes: list[QuizSummary]) -> None:
        while self.quiz_list_layout.count():
            item = self.quiz_list_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self._start_buttons = []
        for quiz in quizzes:
            self.quiz_list_layout.addWidget(self._build_quiz_card(quiz))
        self.quiz_list_layout.addStretch()
        self.empty_label.setVisible(not quizzes)

    def set_loading(self, loading: bool) -> None:
        for button in self._start_buttons:
            button.setEnabled(not loading)

    def _build_quiz_card(self, quiz: QuizSummary) -> QGroupBox:
        card = QGroupBox(quiz.title, self)
        card_layout = QHBoxLayout()
        card.setLayout(card_layout)

        count_label = QLabel(f"{quiz.question_count} questions", card)
        card_layout.addWidget(count_label)
        card_layout.addStretch()

        start_button = QPushButton(HOME_START_BUTTON, card)
        start_button.setStyleSheet(Styles.get_primary_button_style())
        start_button.clicked.connect(lambda _checked=False, q=quiz: self.on_start_quiz(q))
        card_layout.addWidget(start_button)
        self._start_buttons.append(start_button)

        stats_button = QPushButton(HOME_STATS_BUTTON, card)
        stats_button.clicked.connect(lambda _checked=False, q=quiz: self.on_view_stats(q))
        card_layout.addWidget(stats_button)
        return card
