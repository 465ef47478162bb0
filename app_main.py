"""Application entry point for the IntervalQt trainer."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from interval_quiz.core.quiz_manager import QuizManager
from interval_quiz.core.settings import QuizSettings, SettingsError, load_settings
from interval_quiz.ui.qt_scheduler import QtScheduler
from interval_quiz.ui.quiz_main_window import QuizMainWindow
from interval_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load settings, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting IntervalQt trainer…")

    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.warning("%s; using default settings", exc)
        settings = QuizSettings()

    app = QApplication(sys.argv)
    quiz_manager = QuizManager(settings, scheduler=QtScheduler(app))
    window = QuizMainWindow(quiz_manager=quiz_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
