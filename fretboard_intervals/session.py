"""Interaction state for a fretboard: Idle or a selected root.

The engine is stateless; the active root lives in a SelectionState value that
callers pass in and get back from every interaction.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .core.events import SelectionEvents
from .engine import FretboardEngine
from .logger import get_logger
from .note_types import FretboardView, FretPosition

logger = get_logger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """The root currently shown, or None when idle."""

    active_root: Optional[FretPosition] = None

    @property
    def is_idle(self) -> bool:
        return self.active_root is None


IDLE = SelectionState()


class FretboardSession:
    """Handles clicks and escape presses for one engine."""

    def __init__(self, engine: FretboardEngine, events: Optional[SelectionEvents] = None):
        self.engine = engine
        self.events = events or SelectionEvents()

    def _is_repeat(self, state: SelectionState, position: FretPosition) -> bool:
        if state.is_idle:
            return False
        if self.engine.mode is None:
            # Every cell with the root's pitch shows the same interval labels
            geometry = self.engine.geometry
            root = state.active_root
            return geometry.pitch_at(root.string, root.fret) == geometry.pitch_at(
                position.string, position.fret
            )
        return state.active_root == position

    def click(
        self, state: SelectionState, position: FretPosition
    ) -> Tuple[SelectionState, FretboardView]:
        """Select ``position`` as the root, or clear on a repeat click.

        Raises:
            InvalidPositionError: If the position is not on the board
        """
        self.engine.geometry.validate(position.string, position.fret)

        if self._is_repeat(state, position):
            return self.escape(state)

        view = self.engine.view_for(position)
        logger.info(f"Root selected at {position} ({self.engine.mode_name})")
        self.events.emit_root_selected(view)
        return SelectionState(active_root=position), view

    def escape(self, state: SelectionState) -> Tuple[SelectionState, FretboardView]:
        """Return to Idle."""
        if not state.is_idle:
            logger.info(f"Selection cleared ({self.engine.mode_name})")
            self.events.emit_selection_cleared()
        return IDLE, self.engine.empty_view()
