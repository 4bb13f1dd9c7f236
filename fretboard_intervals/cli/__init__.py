"""Command-line interface for Fretboard Intervals."""

from .main import main

__all__ = ["main"]
