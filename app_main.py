"""Application entry point for Kvizoteka."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from kvizoteka.constants.about import APP_NAME
from kvizoteka.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from kvizoteka.constants.quiz_constants import DEFAULT_QUESTIONS_PATH
from kvizoteka.core.input_mapper import InputMapper
from kvizoteka.core.quiz_manager import QuizManager
from kvizoteka.server.api_server import start_api_server
from kvizoteka.ui.quiz_main_window import QuizMainWindow
from kvizoteka.utils.logging_config import configure_logging


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME.lower(), description="Play a multiple-choice quiz.")
    parser.add_argument(
        "questions",
        nargs="?",
        type=Path,
        default=DEFAULT_QUESTIONS_PATH,
        help="question file (.json or the plain-text format); defaults to the bundled set",
    )
    parser.add_argument("--seed", type=int, default=None, help="fix the question order for repeatable runs")
    return parser.parse_args(argv)


def main() -> None:
    """Initialize logging, load questions, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Kvizoteka…")

    # Qt consumes its own options from argv; only the rest is ours.
    app = QApplication(sys.argv)
    args = parse_args(app.arguments()[1:])

    quiz_manager = QuizManager()
    if args.seed is not None:
        quiz_manager.set_shuffle_seed(args.seed)
        logger.info("Question order seeded with %d", args.seed)
    if not quiz_manager.load_from_file(args.questions):
        logger.error("No questions available; open a question file from the start screen.")

    input_mapper = InputMapper(quiz_manager)
    start_api_server(quiz_manager=quiz_manager, input_mapper=input_mapper, host=DEFAULT_HOST, port=DEFAULT_PORT)
    web_url = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}/"
    logger.info("Browser page available at %s", web_url)

    window = QuizMainWindow(quiz_manager=quiz_manager, input_mapper=input_mapper, web_url=web_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
