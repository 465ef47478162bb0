"""Qt main window switching between the quiz and review modes."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from interval_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from interval_quiz.constants.ui_constants import (
    MODE_BUTTON_START,
    MODE_BUTTON_STOP,
    WINDOW_TITLE,
)
from interval_quiz.core.quiz_manager import QuizManager
from interval_quiz.core.settings import SettingsError, save_settings
from interval_quiz.styling.styles import Styles
from interval_quiz.ui.components.quiz_panel import QuizPanel
from interval_quiz.ui.components.review_panel import ReviewPanel
from interval_quiz.ui.dialog_helpers import confirm_end_round, show_info, show_warning
from interval_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class QuizMode(Enum):
    """High-level UI mode of the trainer window."""

    QUIZ = auto()
    REVIEW = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window orchestrating the quiz and review modes."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self._mode = QuizMode.QUIZ

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            on_round_finished=self._show_review,
            parent=self,
        )
        self.review_panel = ReviewPanel(
            self.quiz_manager,
            on_restart=self._start_round,
            parent=self,
        )
        self.mode_stack.addWidget(self.quiz_panel)
        self.mode_stack.addWidget(self.review_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(QuizMode.QUIZ)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.start_mode_button = QPushButton(MODE_BUTTON_START, self)
        self.start_mode_button.clicked.connect(self._handle_start_mode_button)
        button_row.addWidget(self.start_mode_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: QuizMode) -> None:
        self._mode = mode
        index_map = {
            QuizMode.QUIZ: 0,
            QuizMode.REVIEW: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        in_round = mode == QuizMode.QUIZ and self.quiz_manager.has_active_round()
        self.start_mode_button.setText(MODE_BUTTON_STOP if in_round else MODE_BUTTON_START)

    def _handle_start_mode_button(self) -> None:
        if self.quiz_manager.has_active_round():
            if confirm_end_round(self):
                self.quiz_panel.stop_session()
                self._show_review()
            return
        self._start_round()

    def _start_round(self) -> None:
        self.quiz_panel.start_session()
        self._set_mode(QuizMode.QUIZ)

    def _show_review(self) -> None:
        self.review_panel.refresh_review()
        self._set_mode(QuizMode.REVIEW)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.quiz_manager.get_settings())
        if not dialog.exec():
            return
        settings = dialog.get_settings()
        self.quiz_manager.apply_settings(settings)
        try:
            path = save_settings(settings)
        except SettingsError as exc:
            logger.warning("Settings not saved: %s", exc)
            show_warning(self, "Settings not saved", str(exc))
        else:
            logger.info("Saved settings to %s", path)
        self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        settings = self.quiz_manager.get_settings()

        # Apply UI font size to main buttons
        ui_style = f"font-size: {settings.ui_font_size}pt;"
        buttons = [
            self.start_mode_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        # Pass settings to components
        self.quiz_panel.apply_font_size(settings.game_font_size)
        self.quiz_panel.set_show_note_palette(settings.show_note_palette)
        self.review_panel.apply_font_size(settings.game_font_size)
