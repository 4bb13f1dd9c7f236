"""Audio output for Fretboard Intervals."""
