import unittest
from fretboard_intervals.note_utils import (
    get_note_name,
    interval_name,
    interval_steps,
    midi_to_frequency,
    note_name,
    parse_pitch_class,
    up,
)


class TestPitchClassArithmetic(unittest.TestCase):
    def test_up_wraps_around_the_octave(self):
        self.assertEqual(up(11, 1), 0)  # B -> C
        self.assertEqual(up(4, 3), 7)  # E -> G
        self.assertEqual(up(0, -1), 11)  # C -> B going down

    def test_up_then_down_returns_to_start(self):
        for p in range(12):
            for n in range(-30, 31):
                self.assertEqual(up(up(p, n), -n), p)

    def test_up_depends_only_on_steps_mod_12(self):
        for p in range(12):
            for n in (-25, -13, -1, 13, 26):
                self.assertEqual(up(p, n), up(p, n % 12))

    def test_interval_steps_range(self):
        for a in range(12):
            self.assertEqual(interval_steps(a, a), 0)
            for b in range(12):
                self.assertIn(interval_steps(a, b), range(12))
        self.assertEqual(interval_steps(7, 0), 7)  # G above C
        self.assertEqual(interval_steps(0, 7), 5)  # C above G


class TestIntervalNames(unittest.TestCase):
    def test_known_names(self):
        self.assertEqual(interval_name(0), "U")
        self.assertEqual(interval_name(3), "m3")
        self.assertEqual(interval_name(4), "M3")
        self.assertEqual(interval_name(6), "TT")
        self.assertEqual(interval_name(7), "P5")
        self.assertEqual(interval_name(11), "M7")

    def test_steps_are_reduced(self):
        self.assertEqual(interval_name(12), "U")
        self.assertEqual(interval_name(19), "P5")


class TestNoteNames(unittest.TestCase):
    def test_sharps_and_flats(self):
        self.assertEqual(note_name(1), "C#")
        self.assertEqual(note_name(1, use_flats=True), "Db")
        self.assertEqual(note_name(10, use_flats=True), "Bb")
        self.assertEqual(note_name(4, use_flats=True), "E")

    def test_parse_natural_and_accidentals(self):
        self.assertEqual(parse_pitch_class("C"), 0)
        self.assertEqual(parse_pitch_class("f#"), 6)
        self.assertEqual(parse_pitch_class("Bb"), 10)
        self.assertEqual(parse_pitch_class("A4"), 9)

    def test_parse_enharmonic_spellings(self):
        self.assertEqual(parse_pitch_class("B#"), 0)
        self.assertEqual(parse_pitch_class("Cb"), 11)
        self.assertEqual(parse_pitch_class("E#"), 5)
        self.assertEqual(parse_pitch_class("Fb"), 4)

    def test_parse_rejects_garbage(self):
        for text in ("", "H", "C##", "do", "#"):
            with self.assertRaises(ValueError):
                parse_pitch_class(text)


class TestScientificPitchNotation(unittest.TestCase):
    def test_middle_c(self):
        # Middle C (C4) should be ~261.63 Hz
        self.assertEqual(get_note_name(261.63), "C4")

    def test_a4(self):
        self.assertEqual(get_note_name(440.0), "A4")

    def test_octave_transitions(self):
        # Test octave transitions (B3 -> C4)
        self.assertEqual(get_note_name(246.94), "B3")
        self.assertEqual(get_note_name(261.63), "C4")

    def test_sharps_and_flats(self):
        self.assertEqual(get_note_name(277.18), "C#4")
        self.assertEqual(get_note_name(277.18, use_flats=True), "Db4")
        self.assertEqual(get_note_name(311.13, use_flats=True), "Eb4")

    def test_open_strings(self):
        self.assertEqual(get_note_name(82.41), "E2")
        self.assertEqual(get_note_name(110.0), "A2")
        self.assertEqual(get_note_name(329.63), "E4")

    def test_non_positive(self):
        self.assertEqual(get_note_name(0), "---")

    def test_midi_to_frequency(self):
        self.assertAlmostEqual(midi_to_frequency(69), 440.0)
        self.assertAlmostEqual(midi_to_frequency(40), 82.41, places=2)


if __name__ == "__main__":
    unittest.main()
