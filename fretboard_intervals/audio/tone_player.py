"""Tone playback through the system audio output using sounddevice."""

from __future__ import annotations
from typing import Optional, Sequence

import sounddevice as sd

from ..core.interfaces import ITonePlayer
from ..logger import get_logger
from ..note_types import SoundEvent
from .synth import render_plan

logger = get_logger(__name__)


class SoundDeviceTonePlayer(ITonePlayer):
    """Plays sound plans on an output device.

    Playback is asynchronous; a new plan replaces whatever is still sounding.
    """

    def __init__(
        self,
        device_id: Optional[int] = None,
        sample_rate: int = 44100,
        note_duration: float = 1.5,
        volume: float = 0.3,
    ) -> None:
        self._device_id = device_id
        self._sample_rate = sample_rate
        self._note_duration = note_duration
        self._volume = volume

    def play(self, plan: Sequence[SoundEvent]) -> None:
        buffer = render_plan(
            plan,
            duration=self._note_duration,
            sample_rate=self._sample_rate,
            volume=self._volume,
        )
        if not len(buffer):
            return

        try:
            sd.stop()
            sd.play(buffer, samplerate=self._sample_rate, device=self._device_id)
            logger.debug(
                f"Playing {len(plan)} tone(s), {len(buffer) / self._sample_rate:.2f}s"
            )
        except Exception as e:
            logger.error(f"Error playing tones on device {self._device_id}: {e}")
            raise

    def wait(self) -> None:
        """Block until the current buffer has finished."""
        sd.wait()

    def stop(self) -> None:
        sd.stop()
