"""Component for the end-of-round review."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from interval_quiz.constants.ui_constants import MODE_BUTTON_RESTART, REVIEW_EMPTY_STATE
from interval_quiz.core.quiz_manager import QuizManager
from interval_quiz.styling.styles import Styles
from interval_quiz.ui.question_renderer import render_review


class ReviewPanel(QWidget):
    """UI component showing the score and answers of the last round."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_restart = on_restart
        self._game_font_size: int = 14

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("Round review", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.review_view = QWebEngineView(self)
        layout.addWidget(self.review_view, stretch=1)

        self.empty_label = QLabel(REVIEW_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        self.restart_button = QPushButton(MODE_BUTTON_RESTART, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def refresh_review(self) -> None:
        review = self.quiz_manager.get_review()
        state = self.quiz_manager.get_state()
        if review is None or state is None:
            self.review_view.setHtml("")
            self.empty_label.setVisible(True)
            return
        self.empty_label.setVisible(False)
        self.review_view.setHtml(render_review(review, state.questions, font_size=self._game_font_size))

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.restart_button.setStyleSheet(f"font-size: {font_size}pt;")
        self.title_label.setStyleSheet(f"font-size: {font_size + 2}pt; font-weight: bold;")
        self.refresh_review()
