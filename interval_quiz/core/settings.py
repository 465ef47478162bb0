"""User preferences for the interval quiz, stored as a small JSON file.

File format (all keys optional):

    {
      "question_count": 10,
      "shuffle_seed": null,
      "ui_font_size": 10,
      "game_font_size": 14,
      "show_note_palette": true
    }

A missing file means defaults. A file that cannot be read or does not
validate raises ``SettingsError`` so the caller can decide how to report it.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from interval_quiz.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    MAX_QUESTION_COUNT,
    SETTINGS_FILE_NAME,
    SETTINGS_PATH_ENV_VAR,
)


class SettingsError(Exception):
    """Raised when the settings file cannot be loaded or saved."""


class QuizSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    question_count: int = Field(default=DEFAULT_QUESTION_COUNT, ge=1, le=MAX_QUESTION_COUNT)
    shuffle_seed: int | None = None
    ui_font_size: int = Field(default=10, ge=8, le=24)
    game_font_size: int = Field(default=14, ge=10, le=32)
    show_note_palette: bool = True


def default_settings_path() -> Path:
    override = os.environ.get(SETTINGS_PATH_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd() / SETTINGS_FILE_NAME


def load_settings(file_path: Path | None = None) -> QuizSettings:
    file_path = file_path or default_settings_path()
    if not file_path.exists():
        return QuizSettings()
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(f"Could not read settings from {file_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file {file_path} must contain a JSON object.")
    try:
        return QuizSettings.model_validate(raw)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {file_path}: {exc}") from exc


def save_settings(settings: QuizSettings, file_path: Path | None = None) -> Path:
    """Persist settings and return the path written."""
    file_path = (file_path or default_settings_path()).resolve()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Could not write settings to {file_path}: {exc}") from exc
    return file_path
