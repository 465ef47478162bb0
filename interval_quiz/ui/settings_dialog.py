"""Settings dialog for configuring IntervalQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from interval_quiz.constants.quiz_constants import MAX_QUESTION_COUNT
from interval_quiz.core.settings import QuizSettings


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, parent=None, settings: QuizSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or QuizSettings()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Font settings group
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        self.ui_font_spinbox = self._add_spin_row(
            font_layout,
            "UI Font Size (buttons, menus):",
            "Font size for buttons, menus, and controls",
            8,
            24,
            self._settings.ui_font_size,
            suffix=" pt",
        )
        self.game_font_spinbox = self._add_spin_row(
            font_layout,
            "Game Font Size (questions, review):",
            "Font size for questions, feedback and the review table",
            10,
            32,
            self._settings.game_font_size,
            suffix=" pt",
        )
        layout.addWidget(font_group)

        # Quiz settings group
        quiz_group = QGroupBox("Quiz Settings")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.question_count_spinbox = self._add_spin_row(
            quiz_layout,
            "Questions per round:",
            "Number of questions generated for each new round.",
            1,
            MAX_QUESTION_COUNT,
            self._settings.question_count,
        )

        self.use_seed_checkbox = QCheckBox("Use a fixed random seed")
        self.use_seed_checkbox.setToolTip("Repeat the same sequence of rounds every time the app starts.")
        self.use_seed_checkbox.setChecked(self._settings.shuffle_seed is not None)
        quiz_layout.addWidget(self.use_seed_checkbox)

        self.seed_spinbox = self._add_spin_row(
            quiz_layout,
            "Random seed:",
            "Seed used when a fixed random seed is enabled.",
            0,
            2_147_483_647,
            self._settings.shuffle_seed or 0,
        )
        self.seed_spinbox.setEnabled(self.use_seed_checkbox.isChecked())
        self.use_seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)

        self.show_palette_checkbox = QCheckBox("Show the note palette below the question")
        self.show_palette_checkbox.setChecked(self._settings.show_note_palette)
        quiz_layout.addWidget(self.show_palette_checkbox)

        layout.addWidget(quiz_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_spin_row(
        self,
        layout: QVBoxLayout,
        label_text: str,
        tooltip: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(label_text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_settings(self) -> QuizSettings:
        """Build a settings object from the current widget values."""
        return QuizSettings(
            question_count=self.question_count_spinbox.value(),
            shuffle_seed=self.seed_spinbox.value() if self.use_seed_checkbox.isChecked() else None,
            ui_font_size=self.ui_font_spinbox.value(),
            game_font_size=self.game_font_spinbox.value(),
            show_note_palette=self.show_palette_checkbox.isChecked(),
        )
