"""Centralized logging configuration for Fretboard Intervals.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "fretboard_intervals": logging.INFO,
    "fretboard_intervals.note_utils": logging.INFO,
    "fretboard_intervals.fretboard": logging.INFO,
    "fretboard_intervals.triads": logging.INFO,  # Set to DEBUG to trace voicing choices
    "fretboard_intervals.sound_plan": logging.INFO,
    "fretboard_intervals.engine": logging.INFO,
    "fretboard_intervals.session": logging.INFO,
    "fretboard_intervals.core": logging.INFO,
    # Collaborators
    "fretboard_intervals.audio": logging.INFO,
    "fretboard_intervals.ui": logging.WARNING,
    "fretboard_intervals.cli": logging.INFO,
    "fretboard_intervals.logger": logging.WARNING,  # Logger module itself should be quiet
    # Libraries/third-party
    "sounddevice": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'fretboard_intervals' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler if it doesn't exist
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("fretboard_intervals"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels. Submodules propagate to the package
    # logger, so only the top-level entries carry the handler.
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        if module_name in ("fretboard_intervals", "sounddevice", ""):
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.addHandler(_console_handler)
            logger.propagate = False

    logging.getLogger("fretboard_intervals").debug("Logging configuration complete")
