"""Qt main window rendering the start, quiz, and result screens."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from kvizoteka.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from kvizoteka.constants.ui_constants import (
    LOADED_MESSAGE_TEMPLATE,
    OPEN_DIALOG_TITLE,
    OPEN_FILE_FILTER,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from kvizoteka.core.errors import QuizError
from kvizoteka.core.input_mapper import (
    AdvanceRequested,
    AnswerSelected,
    InputEvent,
    InputMapper,
    KeyPressed,
    RestartRequested,
    StartRequested,
)
from kvizoteka.core.quiz_manager import QuizManager
from kvizoteka.core.view_state import Screen, SessionView
from kvizoteka.styling.styles import Styles
from kvizoteka.ui.components.quiz_panel import QuizPanel
from kvizoteka.ui.components.result_panel import ResultPanel
from kvizoteka.ui.components.start_panel import StartPanel
from kvizoteka.ui.dialog_helpers import show_error, show_info

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    Qt.Key_Return: "Enter",
    Qt.Key_Enter: "Enter",
    Qt.Key_Space: " ",
}


class _ViewBridge(QObject):
    """Carries session views from any thread onto the Qt GUI thread."""

    view_changed = Signal(object)


class QuizMainWindow(QMainWindow):
    """Main Qt window; redraws from the manager's view after every transition."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        input_mapper: InputMapper,
        web_url: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.quiz_manager = quiz_manager
        self.input_mapper = input_mapper
        self.web_url = web_url
        self._shown_question_id: int | str | None = None

        self._bridge = _ViewBridge(self)
        self._bridge.view_changed.connect(self._render)
        self._unsubscribe = self.quiz_manager.subscribe(self._bridge.view_changed.emit)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._render(self.quiz_manager.get_view())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)
        self.start_panel = StartPanel(
            on_start=lambda: self._dispatch(StartRequested()),
            on_open_questions=self._handle_open_questions,
            on_about=self._handle_about,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            on_answer=lambda index: self._dispatch(AnswerSelected(index, self._shown_question_id)),
            on_next=lambda: self._dispatch(AdvanceRequested(self._shown_question_id)),
            parent=self,
        )
        self.result_panel = ResultPanel(
            on_restart=lambda: self._dispatch(RestartRequested()),
            parent=self,
        )
        self.screen_stack.addWidget(self.start_panel)
        self.screen_stack.addWidget(self.quiz_panel)
        self.screen_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.screen_stack, stretch=1)

        self.web_label = QLabel("", self)
        self.web_label.setStyleSheet(Styles.get_secondary_label_style())
        if self.web_url:
            self.web_label.setText(f"Also playable in a browser at {self.web_url}")
        root_layout.addWidget(self.web_label)

    def _render(self, view: SessionView) -> None:
        index_map = {
            Screen.START: 0,
            Screen.QUIZ: 1,
            Screen.RESULT: 2,
        }
        self.screen_stack.setCurrentIndex(index_map[view.screen])
        self._shown_question_id = view.question_id

        if view.screen is Screen.START:
            self.quiz_panel.reset()
            self.start_panel.update_view(view)
        elif view.screen is Screen.QUIZ:
            self.quiz_panel.update_view(view, base_dir=self.quiz_manager.get_source_dir())
        elif view.summary is not None:
            self.quiz_panel.reset()
            self.result_panel.update_summary(view.summary)

    def _dispatch(self, event: InputEvent) -> bool:
        try:
            return self.input_mapper.dispatch(event)
        except QuizError as exc:
            logger.warning("Input %r rejected: %s", event, exc)
            self._render(self.quiz_manager.get_view())
            return False

    def _handle_open_questions(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            OPEN_DIALOG_TITLE,
            str(Path.home()),
            OPEN_FILE_FILTER,
        )
        if not file_path:
            return

        path = Path(file_path)
        if not self.quiz_manager.load_from_file(path):
            show_error(self, "Import failed", self.quiz_manager.get_load_error() or "Unknown error")
            return

        show_info(
            self,
            "Questions loaded",
            LOADED_MESSAGE_TEMPLATE.format(count=self.quiz_manager.get_question_count(), name=path.name),
        )

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = _KEY_NAMES.get(event.key(), event.text())
        if key and self.screen_stack.currentWidget() is self.quiz_panel:
            if self._dispatch(KeyPressed(key, self._shown_question_id)):
                return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        super().closeEvent(event)
