"""Quiz-related constants shared across UI and core layers."""

DEFAULT_QUESTION_COUNT: int = 10
MAX_QUESTION_COUNT: int = 50
FORWARD_PROBABILITY: float = 0.5
TIMER_TICK_INTERVAL_MS: int = 1000
SETTINGS_FILE_NAME: str = "interval_quiz_settings.json"
SETTINGS_PATH_ENV_VAR: str = "INTERVAL_QUIZ_SETTINGS"
