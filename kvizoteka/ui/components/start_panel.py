"""Component for the start screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from kvizoteka.constants.ui_constants import (
    ABOUT_BUTTON_TEXT,
    LOAD_ERROR_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    OPEN_QUESTIONS_BUTTON_TEXT,
    START_BUTTON_TEXT,
    START_COUNT_TEMPLATE,
    START_DESCRIPTION,
    START_TITLE,
)
from kvizoteka.core.view_state import SessionView
from kvizoteka.styling.styles import Styles


class StartPanel(QWidget):
    """Welcome screen with the question count and the start button."""

    def __init__(
        self,
        on_start: Callable[[], None],
        on_open_questions: Callable[[], None],
        on_about: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_open_questions = on_open_questions
        self.on_about = on_about
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(START_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel(START_DESCRIPTION, self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.count_label = QLabel(NO_QUESTIONS_MESSAGE, self)
        self.count_label.setAlignment(Qt.AlignCenter)
        self.count_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.count_label)

        self.error_label = QLabel("", self)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.start_button = QPushButton(START_BUTTON_TEXT, self)
        self.start_button.setFocusPolicy(Qt.NoFocus)
        self.start_button.clicked.connect(self.on_start)
        button_row.addWidget(self.start_button)

        self.open_button = QPushButton(OPEN_QUESTIONS_BUTTON_TEXT, self)
        self.open_button.setFocusPolicy(Qt.NoFocus)
        self.open_button.clicked.connect(self.on_open_questions)
        button_row.addWidget(self.open_button)

        self.about_button = QPushButton(ABOUT_BUTTON_TEXT, self)
        self.about_button.setFocusPolicy(Qt.NoFocus)
        self.about_button.clicked.connect(self.on_about)
        button_row.addWidget(self.about_button)
        button_row.addStretch()
        layout.addLayout(button_row)

    def update_view(self, view: SessionView) -> None:
        if view.can_start:
            self.count_label.setText(START_COUNT_TEMPLATE.format(count=view.question_count))
        else:
            self.count_label.setText(NO_QUESTIONS_MESSAGE)

        if view.load_error:
            self.error_label.setText(f"{LOAD_ERROR_MESSAGE}\n{view.load_error}")
            self.error_label.setVisible(True)
        else:
            self.error_label.setVisible(False)

        self.start_button.setEnabled(view.can_start)
