"""Component for answering the current question."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kvizoteka.constants.ui_constants import NEXT_BUTTON_TEXT, PROGRESS_TEMPLATE, QUESTION_FONT_SIZE
from kvizoteka.core.view_state import SessionView
from kvizoteka.styling.styles import Styles
from kvizoteka.ui.question_renderer import render_question_document


class QuizPanel(QWidget):
    """Shows one question, its answers, progress, and the next button."""

    def __init__(
        self,
        on_answer: Callable[[int], None],
        on_next: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self.on_next = on_next
        self._rendered_question_id: int | str | None = None
        self._answer_buttons: list[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        progress_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        progress_row.addWidget(self.progress_label)
        progress_row.addStretch()
        self.percentage_label = QLabel("", self)
        self.percentage_label.setStyleSheet(Styles.get_secondary_label_style())
        progress_row.addWidget(self.percentage_label)
        layout.addLayout(progress_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_view = QWebEngineView(self)
        self.question_view.setFocusPolicy(Qt.NoFocus)
        layout.addWidget(self.question_view, stretch=1)

        self.answers_layout = QGridLayout()
        layout.addLayout(self.answers_layout)

        next_row = QHBoxLayout()
        next_row.addStretch()
        self.next_button = QPushButton(NEXT_BUTTON_TEXT, self)
        self.next_button.setFocusPolicy(Qt.NoFocus)
        self.next_button.setEnabled(False)
        self.next_button.clicked.connect(self.on_next)
        next_row.addWidget(self.next_button)
        layout.addLayout(next_row)

    def reset(self) -> None:
        self._rendered_question_id = None

    def update_view(self, view: SessionView, base_dir: Path | None = None) -> None:
        self.progress_label.setText(PROGRESS_TEMPLATE.format(position=view.position, total=view.total))
        self.percentage_label.setText(f"{view.progress_percentage}%")
        self.progress_bar.setValue(view.progress_percentage)

        if view.question_id != self._rendered_question_id or len(view.answers) != len(self._answer_buttons):
            self._rendered_question_id = view.question_id
            self.question_view.setHtml(
                render_question_document(
                    view.question_id,
                    view.question_text or "",
                    view.image_ref,
                    font_size=QUESTION_FONT_SIZE,
                    base_dir=base_dir,
                )
            )
            self._rebuild_answer_buttons(len(view.answers))

        for button, answer in zip(self._answer_buttons, view.answers):
            button.setText(f"{answer.index + 1}. {answer.text}")
            button.setEnabled(answer.enabled)
            button.setStyleSheet(Styles.get_answer_button_style(answer.mark))

        self.next_button.setText(view.next_label)
        self.next_button.setEnabled(view.next_enabled)

    def _rebuild_answer_buttons(self, count: int) -> None:
        for button in self._answer_buttons:
            self.answers_layout.removeWidget(button)
            button.deleteLater()
        self._answer_buttons = []

        for index in range(count):
            button = QPushButton("", self)
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _checked=False, i=index: self.on_answer(i))
            self.answers_layout.addWidget(button, index // 2, index % 2)
            self._answer_buttons.append(button)
