"""Renders a sound plan into a mono float32 sample buffer."""

from __future__ import annotations
from typing import Sequence

import numpy as np

from ..note_types import SoundEvent

ATTACK_SECONDS = 0.01
# Relative strength of the first harmonics, a plain plucked-string colour
PARTIALS = (1.0, 0.5, 0.25)


def render_tone(
    frequency: float,
    duration: float,
    sample_rate: int = 44100,
    volume: float = 0.3,
) -> np.ndarray:
    """A single tone with a short linear attack and an exponential decay."""
    n_samples = max(int(duration * sample_rate), 1)
    t = np.arange(n_samples) / sample_rate

    wave = np.zeros(n_samples, dtype=np.float64)
    for harmonic, weight in enumerate(PARTIALS, start=1):
        wave += weight * np.sin(2 * np.pi * frequency * harmonic * t)
    wave /= sum(PARTIALS)

    attack = np.minimum(t / ATTACK_SECONDS, 1.0)
    decay = np.exp(-4.0 * t / duration)
    return (volume * wave * attack * decay).astype(np.float32)


def render_plan(
    plan: Sequence[SoundEvent],
    duration: float = 1.5,
    sample_rate: int = 44100,
    volume: float = 0.3,
) -> np.ndarray:
    """Mix every event of ``plan`` into one buffer, each offset by its delay.

    The mix is scaled down when overlapping tones would clip.
    """
    if not plan:
        return np.zeros(0, dtype=np.float32)

    total = max(event.delay for event in plan) + duration
    buffer = np.zeros(int(total * sample_rate) + 1, dtype=np.float32)
    for event in plan:
        tone = render_tone(event.frequency, duration, sample_rate, volume)
        start = int(round(event.delay * sample_rate))
        buffer[start : start + len(tone)] += tone

    peak = float(np.max(np.abs(buffer)))
    if peak > 1.0:
        buffer /= peak
    return buffer
