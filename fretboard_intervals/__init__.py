"""Intervals and playable triad shapes on a six-string guitar fretboard."""

from .engine import FretboardEngine
from .fretboard import FretboardGeometry, InvalidPositionError
from .note_types import (
    FretboardView,
    FretPosition,
    IntervalLabel,
    SoundEvent,
    TriadQuality,
    TriadRole,
    TriadShape,
)
from .session import IDLE, FretboardSession, SelectionState

__all__ = [
    "FretboardEngine",
    "FretboardGeometry",
    "FretboardSession",
    "FretboardView",
    "FretPosition",
    "IDLE",
    "IntervalLabel",
    "InvalidPositionError",
    "SelectionState",
    "SoundEvent",
    "TriadQuality",
    "TriadRole",
    "TriadShape",
]
