"""Component for answering the questions of a quiz round."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from interval_quiz.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    ELAPSED_TEMPLATE,
    NEXT_QUESTION_BUTTON,
    SCORE_TEMPLATE,
    SHOW_REVIEW_BUTTON,
    SUBMIT_BUTTON,
    WELCOME_MESSAGE,
)
from interval_quiz.core.markdown_renderer import renderer
from interval_quiz.core.models import FeedbackStatus, QuizPhase
from interval_quiz.core.music_theory import DISPLAY_NOTES
from interval_quiz.core.quiz_manager import QuizManager
from interval_quiz.core.services.review import format_elapsed
from interval_quiz.styling.styles import Styles
from interval_quiz.ui.question_renderer import render_question

logger = logging.getLogger(__name__)

_PALETTE_COLUMNS = 6


class QuizPanel(QWidget):
    """UI component for running a quiz round."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_round_finished: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_round_finished = on_round_finished

        self._game_font_size: int = 14
        self._palette_buttons: list[QPushButton] = []

        self._build_ui()
        self.quiz_manager.set_tick_listener(self._handle_tick)
        self.show_welcome()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Status row: score, progress and active time
        status_row = QHBoxLayout()
        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0, total=0), self)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        status_row.addWidget(self.score_label)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(True)
        self.progress_bar.setFormat("%v / %m")
        status_row.addWidget(self.progress_bar, stretch=1)

        self.elapsed_label = QLabel(ELAPSED_TEMPLATE.format(elapsed=format_elapsed(0)), self)
        self.elapsed_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        status_row.addWidget(self.elapsed_label)
        layout.addLayout(status_row)

        self.preview_view = QWebEngineView(self)
        layout.addWidget(self.preview_view, stretch=1)

        # Note palette
        self.palette_widget = QWidget(self)
        palette_layout = QGridLayout()
        self.palette_widget.setLayout(palette_layout)
        for idx, note in enumerate(DISPLAY_NOTES):
            button = QPushButton(note.label, self.palette_widget)
            button.clicked.connect(lambda _checked=False, value=note.value: self._handle_palette_click(value))
            palette_layout.addWidget(button, idx // _PALETTE_COLUMNS, idx % _PALETTE_COLUMNS)
            self._palette_buttons.append(button)
        layout.addWidget(self.palette_widget)

        # Answer row
        answer_row = QHBoxLayout()
        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.returnPressed.connect(self._handle_submit)
        answer_row.addWidget(self.answer_input, stretch=1)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        answer_row.addWidget(self.submit_button)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        answer_row.addWidget(self.next_button)
        layout.addLayout(answer_row)

    def show_welcome(self) -> None:
        self.preview_view.setHtml(renderer.render_full_document(WELCOME_MESSAGE, font_size=self._game_font_size))
        self._set_answering_enabled(False)
        self.next_button.setEnabled(False)

    def start_session(self) -> None:
        self.quiz_manager.start_quiz()
        self._refresh_view()

    def stop_session(self) -> None:
        if self.quiz_manager.has_active_round():
            self.quiz_manager.finish_quiz()
        self._set_answering_enabled(False)
        self.next_button.setEnabled(False)

    def _handle_palette_click(self, note_value: str) -> None:
        self.answer_input.setText(note_value)
        self._handle_submit()

    def _handle_submit(self) -> None:
        if not self.quiz_manager.has_active_round():
            return
        state = self.quiz_manager.get_state()
        if state is None or state.phase is not QuizPhase.ANSWERING:
            return
        text = self.answer_input.text()
        if not text.strip():
            return
        feedback = self.quiz_manager.submit_answer(text)
        if feedback.status is FeedbackStatus.INVALID:
            logger.debug("Rejected answer %r", text)
            self.answer_input.selectAll()
        self._refresh_view()

    def _handle_next(self) -> None:
        question = self.quiz_manager.next_question()
        if question is None:
            self.on_round_finished()
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        state = self.quiz_manager.get_state()
        question = self.quiz_manager.get_current_question()
        if state is None or question is None:
            return

        answering = state.phase is QuizPhase.ANSWERING
        html = render_question(
            question,
            number=state.current_index + 1,
            total=state.total,
            feedback=state.feedback,
            font_size=self._game_font_size,
        )
        self.preview_view.setHtml(html)

        answered_count = state.current_index + (0 if answering else 1)
        self.progress_bar.setRange(0, state.total)
        self.progress_bar.setValue(answered_count)
        self.score_label.setText(SCORE_TEMPLATE.format(score=state.score, total=state.total))

        self._set_answering_enabled(answering)
        self.next_button.setEnabled(not answering)
        if answering:
            if state.feedback is None:
                self.answer_input.clear()
            self.answer_input.setFocus()
        else:
            self._update_next_button_label()
            self.next_button.setFocus()

    def _update_next_button_label(self) -> None:
        remaining = self.quiz_manager.get_remaining_question_count()
        if remaining == 0:
            self.next_button.setText(SHOW_REVIEW_BUTTON)
        else:
            self.next_button.setText(f"{NEXT_QUESTION_BUTTON} ({remaining} Q left)")

    def _set_answering_enabled(self, enabled: bool) -> None:
        self.answer_input.setEnabled(enabled)
        self.submit_button.setEnabled(enabled)
        for button in self._palette_buttons:
            button.setEnabled(enabled)

    def _handle_tick(self, elapsed_seconds: int) -> None:
        self.elapsed_label.setText(ELAPSED_TEMPLATE.format(elapsed=format_elapsed(elapsed_seconds)))

    def set_show_note_palette(self, enabled: bool) -> None:
        self.palette_widget.setVisible(enabled)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size

        game_label_style = f"font-size: {font_size}pt;"
        self.score_label.setStyleSheet(f"font-size: {font_size}pt; font-weight: bold;")
        self.elapsed_label.setStyleSheet(game_label_style)
        self.answer_input.setStyleSheet(game_label_style)
        self.submit_button.setStyleSheet(game_label_style)
        self.next_button.setStyleSheet(game_label_style)
        for button in self._palette_buttons:
            button.setStyleSheet(game_label_style)

        # Refresh preview if active
        if self.quiz_manager.has_active_round():
            self._refresh_view()
        else:
            self.show_welcome()
