"""Selection of a single playable triad shape for a root on the fretboard.

Highlighting every cell whose pitch class belongs to a triad gives a cloud of
correct but unplayable notes. The selector instead commits to one closed
voicing on three adjacent strings. Which voicing depends on the root string:
the G-B pair is a major third apart while every other adjacent pair is a
fourth, so the fret deltas are derived from the absolute distance between
open strings rather than from a single translated shape.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .fretboard import FretboardGeometry
from .logger import get_logger
from .note_types import FretPosition, TriadNote, TriadQuality, TriadRole, TriadShape
from .note_utils import note_name

logger = get_logger(__name__)

OCTAVE = 12

# Closed voicings as (string offset from the root string, role), with the
# signed semitone distance of each role from the root. A string offset of -1
# is the next higher-pitched string.
#   root:   R 3 5 ascending, root on the lowest string
#   second: 5 R 3 ascending, root in the middle
#   first:  3 5 R ascending, root on the highest string
VOICINGS: Dict[str, Tuple[Tuple[int, TriadRole], ...]] = {
    "root": ((-1, TriadRole.THIRD), (-2, TriadRole.FIFTH)),
    "second": ((1, TriadRole.FIFTH), (-1, TriadRole.THIRD)),
    "first": ((2, TriadRole.THIRD), (1, TriadRole.FIFTH)),
}

# Tried in this order: each fallback moves the shape onto lower strings
VOICING_ORDER = ("root", "second", "first")


def relative_pitch(inversion: str, role: TriadRole, quality: TriadQuality) -> int:
    """Signed semitones from the root to ``role`` inside a closed voicing."""
    if role is TriadRole.ROOT:
        return 0
    if role is TriadRole.THIRD:
        return quality.third - (OCTAVE if inversion == "first" else 0)
    return quality.fifth - (OCTAVE if inversion in ("first", "second") else 0)


@dataclass(frozen=True)
class ShapeTemplate:
    """Fret deltas of one voicing relative to the root fret."""

    inversion: str
    deltas: Tuple[Tuple[int, TriadRole, int], ...]  # (string, role, fret delta)

    def frets_for(self, root_fret: int) -> List[Tuple[int, TriadRole, int]]:
        return [(string, role, root_fret + delta) for string, role, delta in self.deltas]


class TriadShapeSelector:
    """Deterministically picks one ergonomic triad shape per root position."""

    def __init__(self, geometry: Optional[FretboardGeometry] = None):
        self.geometry = geometry or FretboardGeometry()
        self._table = self._build_table()

    def _build_table(self) -> Dict[Tuple[int, TriadQuality], List[ShapeTemplate]]:
        """Precompute the candidate voicings for each root string and quality."""
        table: Dict[Tuple[int, TriadQuality], List[ShapeTemplate]] = {}
        for root_string in range(self.geometry.string_count):
            root_midi = self.geometry.open_midi(root_string)
            for quality in TriadQuality:
                templates = []
                for inversion in VOICING_ORDER:
                    deltas = []
                    for offset, role in VOICINGS[inversion]:
                        string = root_string + offset
                        if not 0 <= string < self.geometry.string_count:
                            break
                        distance = self.geometry.open_midi(string) - root_midi
                        delta = relative_pitch(inversion, role, quality) - distance
                        deltas.append((string, role, delta))
                    else:
                        templates.append(
                            ShapeTemplate(
                                inversion=inversion,
                                deltas=((root_string, TriadRole.ROOT, 0),) + tuple(deltas),
                            )
                        )
                table[(root_string, quality)] = templates
                logger.debug(
                    f"String {root_string} {quality.value}: "
                    f"{[(t.inversion, [d for _, _, d in t.deltas]) for t in templates]}"
                )
        return table

    def templates_for(self, root_string: int, quality: TriadQuality) -> List[ShapeTemplate]:
        """Candidate voicings for a root string, in preference order."""
        self.geometry.validate(root_string, 0)
        return list(self._table[(root_string, TriadQuality.parse(quality))])

    def select(self, root: FretPosition, quality: TriadQuality) -> Optional[TriadShape]:
        """Choose the triad shape for a root position.

        The root fret is tried first; if no voicing fits on the board the root
        is moved an octave along the same string. Returns None when nothing
        fits, never a partial shape.

        Raises:
            InvalidPositionError: If the root is not on the board
            ValueError: If the quality is unknown
        """
        self.geometry.validate(root.string, root.fret)
        quality = TriadQuality.parse(quality)

        for root_fret in self._root_frets(root.fret):
            shape = self._first_fit(root.string, root_fret, quality)
            if shape is not None:
                if root_fret != root.fret:
                    logger.debug(
                        f"Root {root} shifted to fret {root_fret} to fit a "
                        f"{quality.value} shape"
                    )
                return shape

        logger.info(f"No playable {quality.value} triad shape for root {root}")
        return None

    def _root_frets(self, fret: int) -> List[int]:
        shifted = fret + OCTAVE
        if shifted > self.geometry.fret_count:
            shifted = fret - OCTAVE
        frets = [fret]
        if 0 <= shifted <= self.geometry.fret_count:
            frets.append(shifted)
        return frets

    def _first_fit(
        self, root_string: int, root_fret: int, quality: TriadQuality
    ) -> Optional[TriadShape]:
        root_pc = self.geometry.pitch_at(root_string, root_fret)
        for template in self._table[(root_string, quality)]:
            frets = template.frets_for(root_fret)
            if not all(self.geometry.contains(s, f) for s, _, f in frets):
                continue

            notes = []
            for string, role, fret in frets:
                pitch = self.geometry.pitch_at(string, fret)
                notes.append(
                    TriadNote(
                        position=FretPosition(string, fret),
                        role=role,
                        pitch_class=pitch,
                        label=quality.degree_label(role),
                    )
                )
            shape = TriadShape(quality=quality, inversion=template.inversion, notes=tuple(notes))
            logger.debug(f"{note_name(root_pc)} {shape}")
            return shape
        return None
