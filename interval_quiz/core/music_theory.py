"""Notes, intervals and note-name normalization for the interval quiz."""

from __future__ import annotations

from dataclasses import dataclass

NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
NOTE_INDEX: dict[str, int] = {note: index for index, note in enumerate(NOTES)}

FLAT_ALIASES: dict[str, str] = {
    "DB": "C#",
    "EB": "D#",
    "GB": "F#",
    "AB": "G#",
    "BB": "A#",
}


@dataclass(frozen=True, slots=True)
class DisplayNote:
    """Canonical note paired with a label that shows its flat alias."""

    value: str
    label: str


def _build_display_notes() -> tuple[DisplayNote, ...]:
    flats_by_sharp = {sharp: flat[0] + "b" for flat, sharp in FLAT_ALIASES.items()}
    return tuple(
        DisplayNote(value=note, label=f"{note}/{flats_by_sharp[note]}" if note in flats_by_sharp else note)
        for note in NOTES
    )


DISPLAY_NOTES: tuple[DisplayNote, ...] = _build_display_notes()


@dataclass(frozen=True, slots=True)
class IntervalDef:
    """Named semitone distance between two notes."""

    name: str
    semitones: int


INTERVALS: tuple[IntervalDef, ...] = (
    IntervalDef("2nd", 2),
    IntervalDef("3rd", 4),
    IntervalDef("4th", 5),
    IntervalDef("5th", 7),
    IntervalDef("6th", 9),
    IntervalDef("7th", 11),
)


def transpose(note: str, semitones: int) -> str:
    """Move a canonical note by ``semitones`` around the chromatic circle."""
    return NOTES[(NOTE_INDEX[note] + semitones) % len(NOTES)]


def normalize_note(text: str) -> str | None:
    """Return the canonical sharp spelling of ``text`` or ``None`` if unknown.

    Matching ignores surrounding whitespace and case. Flat spellings are
    accepted for the five black keys; anything else is rejected.
    """
    raw = text.strip().upper()
    if not raw:
        return None
    if raw in NOTE_INDEX:
        return raw
    return FLAT_ALIASES.get(raw)
