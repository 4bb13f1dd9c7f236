"""Defines the collaborator interfaces for the Fretboard Intervals application."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence

from ..note_types import FretboardView, SoundEvent


class ITonePlayer(ABC):
    """Interface for tone generators that sound a timed frequency plan."""

    @abstractmethod
    def play(self, plan: Sequence[SoundEvent]) -> None:
        """Start sounding every event at its delay."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop anything still sounding."""
        pass


class IFretboardRenderer(ABC):
    """Interface for renderers that paint a FretboardView."""

    @abstractmethod
    def render(self, view: FretboardView) -> str:
        """Render the view and return its textual form."""
        pass
