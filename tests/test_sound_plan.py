import unittest
from fretboard_intervals.fretboard import InvalidPositionError
from fretboard_intervals.note_types import (
    FretPosition,
    TriadNote,
    TriadQuality,
    TriadRole,
    TriadShape,
)
from fretboard_intervals.sound_plan import STRUM_SPACING, TriadSoundPlan
from fretboard_intervals.triads import TriadShapeSelector


def make_shape(*positions):
    roles = (TriadRole.ROOT, TriadRole.THIRD, TriadRole.FIFTH)
    notes = tuple(
        TriadNote(position=pos, role=role, pitch_class=0, label="?")
        for pos, role in zip(positions, roles)
    )
    return TriadShape(quality=TriadQuality.MAJOR, inversion="root", notes=notes)


class TestSingleNoteFrequency(unittest.TestCase):
    def setUp(self):
        self.planner = TriadSoundPlan()

    def test_open_strings(self):
        self.assertAlmostEqual(self.planner.frequency_at(FretPosition(5, 0)), 82.41)
        self.assertAlmostEqual(self.planner.frequency_at(FretPosition(4, 0)), 110.0)
        self.assertAlmostEqual(self.planner.frequency_at(FretPosition(0, 0)), 329.63)

    def test_twelfth_fret_is_an_octave(self):
        self.assertAlmostEqual(self.planner.frequency_at(FretPosition(4, 12)), 220.0)

    def test_a440(self):
        self.assertAlmostEqual(self.planner.frequency_at(FretPosition(0, 5)), 440.0, places=1)

    def test_rejects_off_board(self):
        with self.assertRaises(InvalidPositionError):
            self.planner.frequency_at(FretPosition(0, 23))


class TestStrumPlan(unittest.TestCase):
    def setUp(self):
        self.planner = TriadSoundPlan()

    def test_three_events_with_strum_delays(self):
        shape = TriadShapeSelector().select(FretPosition(5, 3), TriadQuality.MAJOR)
        plan = self.planner.plan(shape)
        self.assertEqual(len(plan), 3)
        for expected, event in zip((0.0, 0.08, 0.16), plan):
            self.assertAlmostEqual(event.delay, expected)
        self.assertAlmostEqual(STRUM_SPACING, 0.08)

        # G2, B2, D3
        self.assertAlmostEqual(plan[0].frequency, 98.0, places=1)
        self.assertAlmostEqual(plan[1].frequency, 123.47, places=1)
        self.assertAlmostEqual(plan[2].frequency, 146.83, places=2)

    def test_sorted_by_pitch_not_by_string(self):
        # High open e first in the shape, a high fret on the low E string in the middle
        shape = make_shape(FretPosition(0, 0), FretPosition(5, 17), FretPosition(2, 1))
        plan = self.planner.plan(shape)
        frequencies = [event.frequency for event in plan]
        self.assertEqual(frequencies, sorted(frequencies))
        self.assertAlmostEqual(frequencies[0], 207.65, places=1)  # G#3 on the G string
        self.assertAlmostEqual(frequencies[1], 220.0, places=1)  # A3 on the low E string
        self.assertAlmostEqual(frequencies[2], 329.63)
        self.assertEqual([event.delay for event in plan], sorted(event.delay for event in plan))


if __name__ == "__main__":
    unittest.main()
