import unittest

import numpy as np

from fretboard_intervals.audio.synth import render_plan, render_tone
from fretboard_intervals.note_types import SoundEvent


class TestRenderTone(unittest.TestCase):
    def test_length_and_level(self):
        tone = render_tone(440.0, duration=0.5, sample_rate=8000, volume=0.3)
        self.assertEqual(len(tone), 4000)
        self.assertEqual(tone.dtype, np.float32)
        self.assertLessEqual(float(np.max(np.abs(tone))), 0.3 + 1e-6)
        self.assertEqual(float(tone[0]), 0.0)

    def test_decays(self):
        tone = render_tone(220.0, duration=1.0, sample_rate=8000)
        head = np.max(np.abs(tone[:800]))
        tail = np.max(np.abs(tone[-800:]))
        self.assertGreater(head, tail * 10)


class TestRenderPlan(unittest.TestCase):
    def test_strum_length(self):
        plan = [SoundEvent(98.0, 0.0), SoundEvent(123.47, 0.08), SoundEvent(146.83, 0.16)]
        buffer = render_plan(plan, duration=0.5, sample_rate=8000)
        self.assertEqual(len(buffer), int((0.16 + 0.5) * 8000) + 1)
        self.assertLessEqual(float(np.max(np.abs(buffer))), 1.0)

    def test_later_notes_start_silent(self):
        buffer = render_plan([SoundEvent(440.0, 0.25)], duration=0.5, sample_rate=8000)
        self.assertTrue(np.all(buffer[:2000] == 0.0))
        self.assertGreater(float(np.max(np.abs(buffer[2000:]))), 0.0)

    def test_loud_mix_is_normalized(self):
        plan = [SoundEvent(110.0, 0.0)] * 6
        buffer = render_plan(plan, duration=0.2, sample_rate=8000, volume=0.9)
        self.assertAlmostEqual(float(np.max(np.abs(buffer))), 1.0, places=5)

    def test_empty_plan(self):
        self.assertEqual(len(render_plan([])), 0)


if __name__ == "__main__":
    unittest.main()
