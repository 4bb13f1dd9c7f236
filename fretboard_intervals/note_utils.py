"""Utility functions for working with pitch classes, intervals and frequencies."""

import re

import numpy as np

from .logger import get_logger

# Get logger for this module
logger = get_logger(__name__)

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
NOTE_NAMES_FLATS = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Interval names by semitone distance (0..11)
INTERVAL_NAMES = [
    "U",
    "m2",
    "M2",
    "m3",
    "M3",
    "P4",
    "TT",
    "P5",
    "m6",
    "M6",
    "m7",
    "M7",
]

# Spellings outside NOTE_NAMES / NOTE_NAMES_FLATS
ENHARMONIC_MAP = {
    "B#": "C",
    "E#": "F",
    "Cb": "B",
    "Fb": "E",
}

# Note letter, optional accidental, optional octave
NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]?)(-?[0-9]*)$")


def up(base: int, steps: int) -> int:
    """Return the pitch class ``steps`` semitones above ``base``.

    Negative steps move down; Python's modulo keeps the result in 0-11.
    """
    return (base + steps) % 12


def interval_steps(note: int, root: int) -> int:
    """Semitone distance from ``root`` up to ``note``, in the range 0-11."""
    return (note - root + 12) % 12


def interval_name(steps: int) -> str:
    """Name of the interval spanning ``steps`` semitones (e.g. 7 -> 'P5')."""
    return INTERVAL_NAMES[steps % 12]


def note_name(pitch_class: int, use_flats: bool = False) -> str:
    """Name of a pitch class, with sharps unless ``use_flats`` is set."""
    names = NOTE_NAMES_FLATS if use_flats else NOTE_NAMES
    return names[pitch_class % 12]


def parse_pitch_class(text: str) -> int:
    """Parse a note name such as 'C', 'f#', 'Bb' or 'A4' into a pitch class.

    Any octave number is ignored.

    Raises:
        ValueError: If the text is not a note name
    """
    match = NOTE_PATTERN.match(str(text).strip())
    if not match:
        raise ValueError(f"Invalid note name: {text!r}")

    letter, accidental, _octave = match.groups()
    name = letter.upper() + accidental
    name = ENHARMONIC_MAP.get(name, name)
    if name in NOTE_NAMES:
        return NOTE_NAMES.index(name)
    if name in NOTE_NAMES_FLATS:
        return NOTE_NAMES_FLATS.index(name)

    # Only unreachable spellings remain (the pattern limits accidentals)
    raise ValueError(f"Invalid note name: {text!r}")


def midi_to_frequency(midi: float) -> float:
    """Equal-tempered frequency of a MIDI note number (A4 = 69 = 440 Hz)."""
    return float(440.0 * 2.0 ** ((midi - 69) / 12.0))


def get_note_name(freq: float, use_flats: bool = False) -> str:
    """Convert frequency to note name using Scientific Pitch Notation (SPN).

    Args:
        freq: Frequency in Hz
        use_flats: If True, use flat notes (e.g., 'Bb') instead of sharps (e.g., 'A#')

    Returns:
        Note name with octave in SPN (e.g., 'A4', 'C#4', 'Bb3'), or '---'
        for a non-positive frequency

    Note:
        - Middle C is C4 (261.63 Hz)
        - A4 is 440 Hz
        - Octave numbers change between B and C (e.g., B3 -> C4)
    """
    if freq <= 0:
        logger.debug(f"Non-positive frequency: {freq}")
        return "---"

    # Calculate half steps from A4 (A4 is 69 in MIDI)
    half_steps = int(round(12 * np.log2(freq / 440.0)))
    midi_number = 69 + half_steps

    # SPN octave calculation (C4 is middle C)
    octave = (midi_number // 12) - 1
    return f"{note_name(midi_number, use_flats)}{octave}"
