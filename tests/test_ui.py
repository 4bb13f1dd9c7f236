import unittest
from fretboard_intervals.engine import FretboardEngine
from fretboard_intervals.fretboard import FretboardGeometry
from fretboard_intervals.note_types import FretPosition, SoundEvent
from fretboard_intervals.ui import GHOST, TextFretboardRenderer, render_sound_plan


class TestTextFretboardRenderer(unittest.TestCase):
    def test_idle_board_shows_note_names(self):
        engine = FretboardEngine()
        text = TextFretboardRenderer().render(engine.empty_view())
        lines = text.splitlines()
        self.assertEqual(len(lines), 2 + 6 + 1)
        self.assertTrue(lines[2].lstrip().startswith("E |"))
        self.assertIn("F#", lines[2])
        self.assertIn("Click a note", lines[-1])

    def test_intervals_mark_the_root(self):
        engine = FretboardEngine()
        text = TextFretboardRenderer().render(engine.view_for(FretPosition(4, 3)))
        self.assertIn("[U]", text)
        self.assertIn("P5", text)
        self.assertIn("Intervals from C (S4F3)", text)

    def test_triad_shows_only_the_shape(self):
        engine = FretboardEngine(mode="major")
        text = TextFretboardRenderer().render(engine.view_for(FretPosition(5, 3)))
        self.assertIn("[R:G]", text)
        self.assertIn("3:B", text)
        self.assertIn("5:D", text)
        self.assertIn(GHOST, text)
        self.assertIn("G major triad, root position", text.splitlines()[-1])

    def test_degraded_board(self):
        geometry = FretboardGeometry(fret_count=2)
        engine = FretboardEngine(mode="major", geometry=geometry)
        text = TextFretboardRenderer(geometry).render(engine.view_for(FretPosition(5, 1)))
        self.assertIn("(R)", text)
        self.assertIn("no playable shape", text)

    def test_flats(self):
        engine = FretboardEngine(use_flats=True)
        text = TextFretboardRenderer(use_flats=True).render(engine.empty_view())
        self.assertIn("Bb", text)
        self.assertNotIn("A#", text)

    def test_sound_plan_lines(self):
        lines = render_sound_plan([SoundEvent(98.0, 0.0), SoundEvent(123.47, 0.08)])
        self.assertEqual(lines, [" 0.00s     98.00 Hz", " 0.08s    123.47 Hz"])


if __name__ == "__main__":
    unittest.main()
