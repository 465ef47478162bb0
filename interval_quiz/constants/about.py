"""Static metadata describing IntervalQt."""

APP_NAME = "IntervalQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "IntervalQt is a small music-theory trainer built with Qt. "
    "Each round asks ten questions about the intervals between notes and "
    "shows a review with your score and the time you spent answering."
)

HELP_TEXT = (
    "Each question names an interval (2nd, 3rd, 4th, 5th, 6th or 7th) and a note.\n\n"
    "Forward questions ask for the note above the root, for example:\n"
    "  What is the 5th of C?  ->  G\n\n"
    "Reverse questions give the upper note and ask for the root:\n"
    "  G is the 5th of which note?  ->  C\n\n"
    "Type the note name or click it on the note palette. Sharps (C#) and flats (Db) "
    "are both accepted. The timer only runs while a question is waiting for an answer."
)
