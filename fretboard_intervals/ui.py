"""Plain-text rendering of a fretboard view for the terminal."""

from typing import List

from .core.interfaces import IFretboardRenderer
from .fretboard import OPEN_STRING_NAMES, FretboardGeometry
from .logger import get_logger
from .note_types import FretboardView, FretPosition
from .note_utils import note_name

# Get logger for this module
logger = get_logger(__name__)

CELL_WIDTH = 6
GHOST = "·"
INLAY_FRETS = {3, 5, 7, 9, 12, 15, 17, 19, 21}
INVERSION_NAMES = {
    "root": "root position",
    "first": "first inversion",
    "second": "second inversion",
}


class TextFretboardRenderer(IFretboardRenderer):
    """Draws the board with the high e string on top, as a player sees it."""

    def __init__(self, geometry: FretboardGeometry = None, use_flats: bool = False):
        self.geometry = geometry or FretboardGeometry()
        self.use_flats = use_flats

    def render(self, view: FretboardView) -> str:
        lines = [self._header(), self._inlays()]
        for string in range(self.geometry.string_count):
            cells = [
                self._cell(view, FretPosition(string, fret)).center(CELL_WIDTH)
                for fret in range(self.geometry.fret_count + 1)
            ]
            lines.append(f"{OPEN_STRING_NAMES[string]:>2} |" + "|".join(cells) + "|")
        lines.append(self._legend(view))
        logger.debug(f"Rendered {len(lines)} lines for {view.root or 'idle board'}")
        return "\n".join(lines)

    def _header(self) -> str:
        frets = [str(f).center(CELL_WIDTH) for f in range(self.geometry.fret_count + 1)]
        return "    " + " ".join(frets)

    def _inlays(self) -> str:
        marks = []
        for fret in range(self.geometry.fret_count + 1):
            mark = ":" if fret == 12 else "." if fret in INLAY_FRETS else ""
            marks.append(mark.center(CELL_WIDTH))
        return "    " + " ".join(marks)

    def _cell(self, view: FretboardView, pos: FretPosition) -> str:
        if view.is_idle:
            return note_name(self.geometry.pitch_at(pos.string, pos.fret), self.use_flats)

        label = view.labels[pos]
        if view.mode is None:
            return f"[{label.interval_name}]" if label.is_root else label.interval_name

        if view.shape is not None:
            if pos not in view.shape:
                return GHOST
            text = f"{label.degree_label}:{label.note_name}"
            return f"[{text}]" if label.is_root else text

        # No playable shape: show every matching note, bracketed as degraded
        if label.role is None:
            return GHOST
        return f"({label.degree_label})"

    def _legend(self, view: FretboardView) -> str:
        if view.is_idle:
            return "Click a note to choose a root."

        root_pc = view.labels[view.root].pitch_class
        root = note_name(root_pc, self.use_flats)
        if view.mode is None:
            return f"Intervals from {root} ({view.root})"
        title = f"{root} {view.mode.value} triad"
        if view.shape is None:
            return f"{title}: no playable shape from {view.root}, matching notes shown"
        return f"{title}, {INVERSION_NAMES[view.shape.inversion]}: " + ", ".join(
            f"{n.label}={note_name(n.pitch_class, self.use_flats)}@{n.position}"
            for n in view.shape.notes
        )


def render_sound_plan(plan) -> List[str]:
    """One line per tone, for printing alongside the board."""
    return [f"{event.delay:5.2f}s  {event.frequency:8.2f} Hz" for event in plan]
