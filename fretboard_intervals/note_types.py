"""Type definitions for the Fretboard Intervals project."""

from enum import Enum
from typing import NamedTuple, Optional, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class FretPosition:
    """Represents a position on the guitar fretboard."""

    string: int  # String index (0 is the thinnest, highest-pitched string)
    fret: int  # Fret number (0 for open string)

    def __str__(self):
        return f"S{self.string}F{self.fret}"


class TriadQuality(Enum):
    """Triad qualities with their semitone offsets from the root."""

    MAJOR = "major"
    MINOR = "minor"

    @property
    def third(self) -> int:
        return 4 if self is TriadQuality.MAJOR else 3

    @property
    def fifth(self) -> int:
        return 7

    @property
    def offsets(self) -> Tuple[int, int, int]:
        return (0, self.third, self.fifth)

    def degree_label(self, role: "TriadRole") -> str:
        """Short label shown on the fretboard for a role ("R", "3", "b3", "5")."""
        if role is TriadRole.ROOT:
            return "R"
        if role is TriadRole.FIFTH:
            return "5"
        return "3" if self is TriadQuality.MAJOR else "b3"

    def role_for_steps(self, steps: int) -> Optional["TriadRole"]:
        """Role of a note ``steps`` semitones above the root, if it is in the triad."""
        steps %= 12
        if steps == 0:
            return TriadRole.ROOT
        if steps == self.third:
            return TriadRole.THIRD
        if steps == self.fifth:
            return TriadRole.FIFTH
        return None

    @classmethod
    def parse(cls, value) -> "TriadQuality":
        """Parse a quality from text such as 'major', 'maj', 'M', 'minor' or 'm'.

        Raises:
            ValueError: If the value names no known quality
        """
        if isinstance(value, TriadQuality):
            return value
        text = str(value).strip()
        if text in ("M", "maj", "major", "Major", "MAJOR"):
            return cls.MAJOR
        if text in ("m", "min", "minor", "Minor", "MINOR"):
            return cls.MINOR
        raise ValueError(f"Unknown triad quality: {value!r}")


class TriadRole(Enum):
    """The function of a note inside a triad."""

    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"


@dataclass(frozen=True)
class TriadNote:
    """One fretted note of a triad shape."""

    position: FretPosition
    role: TriadRole
    pitch_class: int
    label: str  # Degree label, e.g. 'R', 'b3'


@dataclass(frozen=True)
class TriadShape:
    """A playable triad voicing: three notes on three adjacent strings."""

    quality: TriadQuality
    inversion: str  # 'root', 'second' or 'first'
    notes: Tuple[TriadNote, TriadNote, TriadNote]

    def __post_init__(self):
        if len(self.notes) != 3:
            raise ValueError(f"A triad shape needs 3 notes, got {len(self.notes)}")
        if len({n.position.string for n in self.notes}) != 3:
            raise ValueError("Triad shape notes must be on distinct strings")

    def note_for(self, role: TriadRole) -> TriadNote:
        for note in self.notes:
            if note.role is role:
                return note
        raise KeyError(role)

    @property
    def root(self) -> TriadNote:
        return self.note_for(TriadRole.ROOT)

    @property
    def positions(self) -> Tuple[FretPosition, ...]:
        return tuple(n.position for n in self.notes)

    @property
    def strings(self) -> Tuple[int, ...]:
        return tuple(n.position.string for n in self.notes)

    @property
    def pitch_classes(self) -> Tuple[int, ...]:
        return tuple(n.pitch_class for n in self.notes)

    def __contains__(self, position) -> bool:
        return position in self.positions

    def __str__(self):
        notes = " ".join(f"{n.label}@{n.position}" for n in self.notes)
        return f"{self.quality.value} ({self.inversion}): {notes}"


@dataclass(frozen=True)
class IntervalLabel:
    """Display data for one fretboard cell relative to a chosen root."""

    pitch_class: int
    note_name: str  # e.g. 'C#'
    steps: int  # Semitones above the root (0-11)
    interval_name: str  # e.g. 'm3'
    is_root: bool
    role: Optional[TriadRole] = None  # Only set in triad modes
    degree_label: Optional[str] = None  # 'R', '3', 'b3' or '5' in triad modes


class SoundEvent(NamedTuple):
    """A single tone for the tone generator: pitch and start offset."""

    frequency: float  # Hz
    delay: float  # Seconds after the first note


@dataclass(frozen=True)
class FretboardView:
    """Everything a renderer needs to paint the board for one interaction."""

    mode: Optional[TriadQuality]  # None is the plain interval mode
    root: Optional[FretPosition] = None
    labels: dict = field(default_factory=dict)  # FretPosition -> IntervalLabel
    shape: Optional[TriadShape] = None
    sound_plan: Tuple[SoundEvent, ...] = ()
    degraded: bool = False  # Triad mode without a playable shape

    @property
    def is_idle(self) -> bool:
        return self.root is None
