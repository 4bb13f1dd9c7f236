"""Main entry point for the Fretboard Intervals CLI."""

import sys
import argparse
from typing import List, Optional

from ..core.config import ConfigManager
from ..engine import FretboardEngine
from ..fretboard import OPEN_PITCH_CLASSES, STRING_COUNT, InvalidPositionError
from ..logger import get_logger
from ..logging_config import setup_logging
from ..note_types import FretPosition, SoundEvent, TriadQuality
from ..note_utils import get_note_name, interval_steps, parse_pitch_class
from ..session import IDLE, FretboardSession
from ..ui import TextFretboardRenderer, render_sound_plan

logger = get_logger(__name__)

LOW_E_STRING = STRING_COUNT - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fretboard-intervals",
        description="Fretboard Intervals - intervals and triad shapes on a guitar neck",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--flats", action="store_true", default=None, help="Spell notes with flats"
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Configuration directory (default: ~/.config/fretboard_intervals)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_position(sub, required=True):
        sub.add_argument(
            "--string",
            type=int,
            required=required,
            help="String index, 0 = high e (top) to 5 = low E (bottom)",
        )
        sub.add_argument("--fret", type=int, required=required, help="Fret, 0 = open")

    def add_play(sub):
        sub.add_argument("--play", action="store_true", help="Play the notes")

    # Interval labels for every cell
    intervals_parser = subparsers.add_parser(
        "intervals", help="Show every interval relative to a root"
    )
    intervals_parser.add_argument("--root", help="Root note name, e.g. C or F#")
    add_position(intervals_parser, required=False)
    add_play(intervals_parser)

    # One triad shape
    triad_parser = subparsers.add_parser(
        "triad", help="Show the playable triad shape for a root position"
    )
    add_position(triad_parser)
    triad_parser.add_argument(
        "--quality",
        default="major",
        choices=[q.value for q in TriadQuality],
        help="Triad quality (default: major)",
    )
    add_play(triad_parser)

    # A single note
    note_parser = subparsers.add_parser("note", help="Show the pitch of one position")
    add_position(note_parser)
    add_play(note_parser)

    return parser


def _root_position(args) -> FretPosition:
    if getattr(args, "root", None):
        # The lowest-fret occurrence on the low E string
        pitch = parse_pitch_class(args.root)
        fret = interval_steps(pitch, OPEN_PITCH_CLASSES[LOW_E_STRING])
        return FretPosition(LOW_E_STRING, fret)
    if args.string is None or args.fret is None:
        raise ValueError("Give either --root or both --string and --fret")
    return FretPosition(args.string, args.fret)


def _tone_player(playback: dict):
    # Imported here so the board can be shown without an audio backend
    from ..audio.tone_player import SoundDeviceTonePlayer

    return SoundDeviceTonePlayer(
        device_id=playback.get("device_id"),
        sample_rate=playback.get("sample_rate", 44100),
        note_duration=playback.get("note_duration", 1.5),
        volume=playback.get("volume", 0.3),
    )


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(level="DEBUG" if parsed_args.debug else None)

    if parsed_args.command is None:
        parser.print_help()
        return 1

    config = ConfigManager(parsed_args.config_dir)
    display = config.get_config("display")
    playback = config.get_config("playback")
    use_flats = (
        parsed_args.flats if parsed_args.flats is not None else display.get("use_flats", False)
    )

    mode = parsed_args.quality if parsed_args.command == "triad" else "intervals"
    engine = FretboardEngine(mode=mode, use_flats=use_flats)
    renderer = TextFretboardRenderer(engine.geometry, use_flats=use_flats)

    try:
        position = _root_position(parsed_args)
        engine.geometry.validate(position.string, position.fret)
    except (ValueError, InvalidPositionError) as e:
        logger.error(f"Invalid root: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if parsed_args.command == "note":
        frequency = engine.sound_plan_for_single_note(position)
        print(f"{position}: {get_note_name(frequency, use_flats)} {frequency:.2f} Hz")
        plan = [SoundEvent(frequency, 0.0)]
    else:
        session = FretboardSession(engine)
        _state, view = session.click(IDLE, position)
        print(renderer.render(view))
        plan = list(view.sound_plan)
        for line in render_sound_plan(plan):
            print(line)

    if parsed_args.play and plan:
        player = _tone_player(playback)
        player.play(plan)
        player.wait()

    return 0


if __name__ == "__main__":
    sys.exit(main())
