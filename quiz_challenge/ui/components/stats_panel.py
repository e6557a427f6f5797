"""Component for quiz statistics and the leaderboard."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.constants.ui_constants import (
    LEADERBOARD_EMPTY,
    LEADERBOARD_TITLE,
    STATS_BACK_BUTTON,
    STATS_HEADLINE,
)
from quiz_challenge.core.models import AttemptResult, QuizStats
from quiz_challenge.styling.styles import Styles


class StatsPanel(QWidget):
    """UI component for aggregate stats and the top attempts of one quiz."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.headline_label = QLabel(STATS_HEADLINE, self)
        self.headline_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.headline_label)
        header_row.addStretch()
        self.back_button = QPushButton(STATS_BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header_row.addWidget(self.back_button)
        layout.addLayout(header_row)

        self.quiz_title_label = QLabel("", self)
        layout.addWidget(self.quiz_title_label)

        stats_row = QHBoxLayout()
        self.attempts_value = self._add_stat_box(stats_row, "Total Attempts")
        self.average_value = self._add_stat_box(stats_row, "Average Score")
        self.highest_value = self._add_stat_box(stats_row, "Highest Score")
        layout.addLayout(stats_row)

        self.leaderboard_group = QGroupBox(LEADERBOARD_TITLE, self)
        leaderboard_layout = QVBoxLayout()
        self.leaderboard_group.setLayout(leaderboard_layout)
        self.leaderboard_list = QListWidget(self)
        self.leaderboard_list.setAlternatingRowColors(True)
        leaderboard_layout.addWidget(self.leaderboard_list)
        self.empty_label = QLabel(LEADERBOARD_EMPTY, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        leaderboard_layout.addWidget(self.empty_label)
        layout.addWidget(self.leaderboard_group, stretch=1)

    def _add_stat_box(self, row: QHBoxLayout, caption: str) -> QLabel:
        box = QGroupBox(caption, self)
        box_layout = QVBoxLayout()
        box.setLayout(box_layout)
        value_label = QLabel("0", box)
        value_label.setAlignment(Qt.AlignCenter)
        value_label.setStyleSheet(Styles.get_large_label_style())
        box_layout.addWidget(value_label)
        row.addWidget(box)
        return value_label

    def show_stats(self, quiz_title: str, stats: QuizStats, leaderboard: list[AttemptResult]) -> None:
        self.quiz_title_label.setText(quiz_title)
        self.attempts_value.setText(str(stats.total_attempts))
        self.average_value.setText(str(stats.average_score))
        self.highest_value.setText(str(stats.highest_score))

        self.leaderboard_list.clear()
        for rank, entry in enumerate(leaderboard, start=1):
            QListWidgetItem(
                f"{rank}. Score: {entry.score}/{entry.total_questions}   "
                f"{entry.percentage}% • {entry.time_spent}s",
                self.leaderboard_list,
            )
        self.empty_label.setVisible(not leaderboard)
