"""Turns fretboard positions and triad shapes into timed frequencies."""

from typing import List, Tuple

from .fretboard import FretboardGeometry
from .logger import get_logger
from .note_types import FretPosition, SoundEvent, TriadShape

logger = get_logger(__name__)

# Open string pitches in Hz by string index, high e first
OPEN_STRING_FREQUENCIES: Tuple[float, ...] = (
    329.63,
    246.94,
    196.00,
    146.83,
    110.00,
    82.41,
)

STRUM_SPACING = 0.08  # Seconds between successive notes of a strum


class TriadSoundPlan:
    """Pure conversion of positions into (frequency, delay) pairs."""

    def __init__(self, geometry: FretboardGeometry = None):
        self.geometry = geometry or FretboardGeometry()

    def frequency_at(self, position: FretPosition) -> float:
        """Frequency of the note fretted at ``position``."""
        self.geometry.validate(position.string, position.fret)
        return OPEN_STRING_FREQUENCIES[position.string] * 2.0 ** (position.fret / 12.0)

    def plan(self, shape: TriadShape) -> List[SoundEvent]:
        """Order the shape's notes as a downward strum, lowest pitch first.

        Each note starts STRUM_SPACING seconds after the previous one.
        """
        # Ties (same pitch on two strings) start from the lower string
        ordered = sorted(
            shape.positions,
            key=lambda pos: (self.frequency_at(pos), -pos.string),
        )
        events = [
            SoundEvent(frequency=self.frequency_at(pos), delay=round(i * STRUM_SPACING, 6))
            for i, pos in enumerate(ordered)
        ]
        logger.debug(
            "Strum plan: "
            + ", ".join(f"{e.frequency:.2f}Hz@{e.delay:.2f}s" for e in events)
        )
        return events
