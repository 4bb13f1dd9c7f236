"""Event system for Fretboard Intervals components."""

from typing import Dict, List, Callable, Any
from enum import Enum, auto

from ..logger import get_logger

logger = get_logger(__name__)


class SelectionEventType(Enum):
    """Event types for root selection on the fretboard."""

    ROOT_SELECTED = auto()
    SELECTION_CLEARED = auto()


class EventEmitter:
    """Event emitter for Fretboard Intervals components."""

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners: Dict[Any, List[Callable]] = {}

    def on(self, event_type: Any, callback: Callable) -> None:
        """Register a callback for an event type.

        Args:
            event_type: Event type to listen for
            callback: Function to call when the event occurs
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []

        if callback not in self._listeners[event_type]:
            self._listeners[event_type].append(callback)
            logger.debug(f"Added listener for event {event_type}")

    def emit(self, event_type: Any, *args, **kwargs) -> None:
        """Emit an event.

        A failing listener is logged and does not stop the others.

        Args:
            event_type: Event type to emit
            *args: Positional arguments to pass to listeners
            **kwargs: Keyword arguments to pass to listeners
        """
        for callback in self._listeners.get(event_type, []):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in event listener for {event_type}: {e}")

    def clear(self) -> None:
        """Remove all event listeners."""
        self._listeners = {}
        logger.debug("Cleared all event listeners")


class SelectionEvents:
    """Event emitter specifically for root selection events."""

    def __init__(self):
        self._emitter = EventEmitter()

    def on_root_selected(self, callback: Callable) -> None:
        """Register a callback taking the FretboardView of the new root."""
        self._emitter.on(SelectionEventType.ROOT_SELECTED, callback)

    def on_selection_cleared(self, callback: Callable) -> None:
        """Register a callback taking no arguments."""
        self._emitter.on(SelectionEventType.SELECTION_CLEARED, callback)

    def emit_root_selected(self, view) -> None:
        self._emitter.emit(SelectionEventType.ROOT_SELECTED, view)

    def emit_selection_cleared(self) -> None:
        self._emitter.emit(SelectionEventType.SELECTION_CLEARED)

    def clear(self) -> None:
        """Remove all event listeners."""
        self._emitter.clear()
