"""One fretboard engine for the interval, major triad and minor triad modes."""

from typing import Dict, List, Optional

from .fretboard import FretboardGeometry
from .logger import get_logger
from .note_types import (
    FretboardView,
    FretPosition,
    IntervalLabel,
    SoundEvent,
    TriadQuality,
    TriadShape,
)
from .sound_plan import TriadSoundPlan
from .triads import TriadShapeSelector

logger = get_logger(__name__)

MODES = ("intervals", "major", "minor")


def parse_mode(value: Optional[str]) -> Optional[TriadQuality]:
    """Map a mode name to the engine's quality ('intervals' is None).

    Raises:
        ValueError: If the mode is unknown
    """
    if value is None or isinstance(value, TriadQuality):
        return value
    text = str(value).strip().lower()
    if text in ("intervals", "interval", ""):
        return None
    return TriadQuality.parse(text)


class FretboardEngine:
    """Computes labels, triad shapes and sound plans for a fretboard.

    Args:
        mode: None for plain interval labels, or the TriadQuality to show
        geometry: Board description, standard 22-fret board by default
        use_flats: Spell note names with flats
    """

    def __init__(
        self,
        mode: Optional[TriadQuality] = None,
        geometry: Optional[FretboardGeometry] = None,
        use_flats: bool = False,
    ):
        self.mode = parse_mode(mode)
        self.geometry = geometry or FretboardGeometry()
        self.use_flats = use_flats
        self.selector = TriadShapeSelector(self.geometry)
        self.sound_planner = TriadSoundPlan(self.geometry)

    @property
    def mode_name(self) -> str:
        return self.mode.value if self.mode else "intervals"

    def compute_interval_labels(self, root: int) -> Dict[FretPosition, IntervalLabel]:
        return self.geometry.compute_interval_labels(
            root, quality=self.mode, use_flats=self.use_flats
        )

    def compute_triad_shape(
        self, root: FretPosition, quality: Optional[TriadQuality] = None
    ) -> Optional[TriadShape]:
        """Pick the triad shape for ``root``, in the engine's quality by default.

        Raises:
            ValueError: If no quality is given and the engine is in interval mode
        """
        quality = quality or self.mode
        if quality is None:
            raise ValueError("A triad quality is required in interval mode")
        return self.selector.select(root, quality)

    def sound_plan_for(self, shape: TriadShape) -> List[SoundEvent]:
        return self.sound_planner.plan(shape)

    def sound_plan_for_single_note(self, position: FretPosition) -> float:
        return self.sound_planner.frequency_at(position)

    def empty_view(self) -> FretboardView:
        return FretboardView(mode=self.mode)

    def view_for(self, root: FretPosition) -> FretboardView:
        """Everything the renderer and tone generator need for a clicked root."""
        self.geometry.validate(root.string, root.fret)
        root_pc = self.geometry.pitch_at(root.string, root.fret)
        labels = self.compute_interval_labels(root_pc)

        if self.mode is None:
            frequency = self.sound_plan_for_single_note(root)
            return FretboardView(
                mode=None,
                root=root,
                labels=labels,
                sound_plan=(SoundEvent(frequency, 0.0),),
            )

        shape = self.compute_triad_shape(root)
        if shape is None:
            logger.warning(
                f"No {self.mode_name} shape for {root}, showing matching notes only"
            )
            return FretboardView(mode=self.mode, root=root, labels=labels, degraded=True)

        return FretboardView(
            mode=self.mode,
            root=root,
            labels=labels,
            shape=shape,
            sound_plan=tuple(self.sound_plan_for(shape)),
        )
