"""Core components for the Fretboard Intervals application."""

# Import interfaces for easier access
from .interfaces import (
    ITonePlayer,
    IFretboardRenderer,
)

__all__ = ["ITonePlayer", "IFretboardRenderer"]
