"""Component for the final score summary."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from kvizoteka.constants.ui_constants import (
    CORRECT_COUNT_TEMPLATE,
    PERCENTAGE_TEMPLATE,
    RESTART_BUTTON_TEXT,
    SCORE_TEMPLATE,
    WRONG_COUNT_TEMPLATE,
)
from kvizoteka.core.models import ResultSummary
from kvizoteka.core.services.scorer import tier_content
from kvizoteka.styling.styles import Styles


class ResultPanel(QWidget):
    """Shows the tier message, counts, and percentage of a finished quiz."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.icon_label = QLabel("", self)
        self.icon_label.setAlignment(Qt.AlignCenter)
        self.icon_label.setStyleSheet(Styles.get_icon_label_style())
        layout.addWidget(self.icon_label)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        stats_row = QHBoxLayout()
        stats_row.addStretch()
        self.correct_label = QLabel("", self)
        stats_row.addWidget(self.correct_label)
        self.wrong_label = QLabel("", self)
        stats_row.addWidget(self.wrong_label)
        self.percentage_label = QLabel("", self)
        stats_row.addWidget(self.percentage_label)
        stats_row.addStretch()
        layout.addLayout(stats_row)

        self.restart_button = QPushButton(RESTART_BUTTON_TEXT, self)
        self.restart_button.setFocusPolicy(Qt.NoFocus)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)

    def update_summary(self, summary: ResultSummary) -> None:
        content = tier_content(summary.tier)
        self.icon_label.setText(content.icon)
        self.title_label.setText(content.title)
        self.message_label.setText(content.message)
        self.score_label.setText(SCORE_TEMPLATE.format(correct=summary.correct, total=summary.total))
        self.correct_label.setText(CORRECT_COUNT_TEMPLATE.format(count=summary.correct))
        self.wrong_label.setText(WRONG_COUNT_TEMPLATE.format(count=summary.wrong))
        self.percentage_label.setText(PERCENTAGE_TEMPLATE.format(percentage=summary.percentage))
