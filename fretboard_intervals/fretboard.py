"""Fretboard geometry for a six-string guitar in standard tuning.

String indices follow the rendered board: 0 is the high e string at the top,
5 is the low E string at the bottom.
"""

from typing import Dict, Iterator, Optional, Tuple

from .logger import get_logger
from .note_types import FretPosition, IntervalLabel, TriadQuality
from .note_utils import interval_name, interval_steps, note_name, up

logger = get_logger(__name__)

STRING_COUNT = 6
FRET_COUNT = 22  # Highest fret; the open string is position 0

# Open strings by string index, high e first
OPEN_STRING_NAMES: Tuple[str, ...] = ("E", "B", "G", "D", "A", "E")
OPEN_PITCH_CLASSES: Tuple[int, ...] = (4, 11, 7, 2, 9, 4)
OPEN_MIDI_NOTES: Tuple[int, ...] = (64, 59, 55, 50, 45, 40)


class InvalidPositionError(ValueError):
    """Raised when a string index or fret lies outside the fretboard."""


class FretboardGeometry:
    """Maps (string, fret) cells to pitches for the fixed standard tuning."""

    def __init__(self, fret_count: int = FRET_COUNT):
        if not 0 <= fret_count <= FRET_COUNT:
            raise ValueError(
                f"fret_count must be between 0 and {FRET_COUNT}, got {fret_count}"
            )
        self.fret_count = fret_count
        self.string_count = STRING_COUNT

    def contains(self, string: int, fret: int) -> bool:
        """True if the cell exists on this board."""
        return 0 <= string < self.string_count and 0 <= fret <= self.fret_count

    def validate(self, string: int, fret: int) -> None:
        """Reject a cell outside the board.

        Raises:
            InvalidPositionError: If the string or fret is out of range
        """
        if not isinstance(string, int) or not 0 <= string < self.string_count:
            raise InvalidPositionError(
                f"String index must be 0-{self.string_count - 1}, got {string!r}"
            )
        if not isinstance(fret, int) or not 0 <= fret <= self.fret_count:
            raise InvalidPositionError(
                f"Fret must be 0-{self.fret_count}, got {fret!r}"
            )

    def position(self, string: int, fret: int) -> FretPosition:
        """Build a validated FretPosition."""
        self.validate(string, fret)
        return FretPosition(string, fret)

    def open_pitch(self, string: int) -> int:
        self.validate(string, 0)
        return OPEN_PITCH_CLASSES[string]

    def open_midi(self, string: int) -> int:
        self.validate(string, 0)
        return OPEN_MIDI_NOTES[string]

    def pitch_at(self, string: int, fret: int) -> int:
        """Pitch class sounding at a cell."""
        self.validate(string, fret)
        return up(OPEN_PITCH_CLASSES[string], fret)

    def midi_at(self, string: int, fret: int) -> int:
        """MIDI note number sounding at a cell."""
        self.validate(string, fret)
        return OPEN_MIDI_NOTES[string] + fret

    def positions(self) -> Iterator[FretPosition]:
        """Every cell on the board, high string first, frets ascending."""
        for string in range(self.string_count):
            for fret in range(self.fret_count + 1):
                yield FretPosition(string, fret)

    def compute_interval_labels(
        self,
        root: int,
        quality: Optional[TriadQuality] = None,
        use_flats: bool = False,
    ) -> Dict[FretPosition, IntervalLabel]:
        """Label every cell with its interval above ``root``.

        Args:
            root: Root pitch class (0-11)
            quality: If given, cells belonging to the triad also get a role
                and degree label ('R', '3'/'b3', '5')
            use_flats: Spell note names with flats

        Returns:
            Mapping of every FretPosition to its IntervalLabel
        """
        root %= 12
        labels: Dict[FretPosition, IntervalLabel] = {}
        for pos in self.positions():
            pitch = up(OPEN_PITCH_CLASSES[pos.string], pos.fret)
            steps = interval_steps(pitch, root)
            role = quality.role_for_steps(steps) if quality else None
            labels[pos] = IntervalLabel(
                pitch_class=pitch,
                note_name=note_name(pitch, use_flats),
                steps=steps,
                interval_name=interval_name(steps),
                is_root=steps == 0,
                role=role,
                degree_label=quality.degree_label(role) if role else None,
            )

        logger.debug(
            f"Labeled {len(labels)} cells for root {note_name(root)}"
            f" ({quality.value if quality else 'intervals'})"
        )
        return labels
