#!/usr/bin/env python3
"""
Terminal NxNxN puzzle cube simulator
Main entry point
"""

import argparse
import curses
import logging
import sys
import time
from typing import List, Optional

import colorama

from config import (
    DEFAULT_SIDE_LENGTH, KEY_ESCAPE, KEY_RESET, KEY_SEQUENCE, KEY_SHUFFLE, KEY_UNDO,
    LOG_FILE, LOG_FORMAT, SHUFFLE_MOVES, log_level,
)
from cube_state import Cube
from cubies import LabelMode
from display import render_net
from errors import CubeError
from history import MoveHistory
from known_transforms import KNOWN_TRANSFORMS, apply_known_transform, list_transforms
from notation import apply_sequence, format_sequence
from shuffle import shuffle_cube
from ui import init_colors, key_to_token, prompt, redraw_screen

logger = logging.getLogger(__name__)


def configure_logging(to_file: bool):
    """Log to a file while curses owns the terminal, to stderr otherwise"""
    if to_file:
        handlers = [logging.FileHandler(LOG_FILE)]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(level=log_level(), format=LOG_FORMAT, handlers=handlers)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NxNxN puzzle cube simulator")
    parser.add_argument("-n", "--size", type=int, default=DEFAULT_SIDE_LENGTH,
                        help="cubies along each edge (default: %(default)s)")
    parser.add_argument("--unique", action="store_true",
                        help="label every cubie with its own character (size <= 8)")
    parser.add_argument("-m", "--moves", help="apply a notation sequence, e.g. \"R U R' U'\"")
    parser.add_argument("-t", "--transform", choices=sorted(KNOWN_TRANSFORMS),
                        help="apply a known transform")
    parser.add_argument("--shuffle", type=int, nargs="?", const=SHUFFLE_MOVES,
                        help="scramble with this many random turns first")
    parser.add_argument("--colour", action="store_true", help="print with ANSI colours")
    parser.add_argument("--list-transforms", action="store_true",
                        help="list known transforms and exit")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="open the curses viewer")
    return parser


def run_once(args: argparse.Namespace, out=None) -> int:
    """Non-interactive mode: build, move, print. Returns the exit status."""
    out = out or sys.stdout
    if args.list_transforms:
        for transform in list_transforms():
            print(f"{transform.key:<22} {transform.notation}", file=out)
            print(f"{'':<22} {transform.description}", file=out)
        return 0

    mode = LabelMode.UNIQUE if args.unique else LabelMode.COLOUR
    try:
        cube = Cube(args.size, mode)
        if args.shuffle:
            tokens = shuffle_cube(cube, args.shuffle)
            print(f"Shuffle: {format_sequence(tokens)}", file=out)
        if args.transform:
            apply_known_transform(args.transform, cube)
    except CubeError as e:
        logger.info("Could not prepare cube: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    status = 0
    if args.moves:
        result = apply_sequence(args.moves, cube)
        if not result.ok:
            logger.info("Sequence failed after %d moves", result.applied)
            print(f"Error: {result.error} (applied {result.applied} moves)", file=sys.stderr)
            status = 1

    print(render_net(cube, coloured=args.colour), end="", file=out)
    return status


def handle_key(view_state: dict, char: str) -> bool:
    """Apply the action bound to a key. Returns False when the key is unbound."""
    cube: Cube = view_state["cube"]
    history: MoveHistory = view_state["history"]

    token = key_to_token(char)
    if token is not None:
        result = apply_sequence(token, cube)
        history.record(result.tokens)
        view_state["status"], view_state["status_ok"] = f"Moved {token}", True
        return True

    if char.lower() == KEY_SHUFFLE:
        tokens = shuffle_cube(cube)
        history.record(tokens)
        view_state["status"], view_state["status_ok"] = f"Shuffled {len(tokens)} moves", True
    elif char.lower() == KEY_UNDO:
        undone = history.undo(cube)
        view_state["status"] = f"Undo: {undone}" if undone else "Nothing to undo"
        view_state["status_ok"] = undone is not None
    elif char.lower() == KEY_RESET:
        cube.reset()
        history.clear()
        view_state["status"], view_state["status_ok"] = "Reset", True
    elif char in "123456789" and int(char) <= len(list_transforms()):
        transform = list_transforms()[int(char) - 1]
        try:
            result = apply_known_transform(transform, cube)
        except CubeError as e:
            view_state["status"], view_state["status_ok"] = str(e), False
        else:
            history.record(result.tokens)
            view_state["status"], view_state["status_ok"] = transform.name, True
    else:
        return False
    return True


def apply_typed_sequence(view_state: dict, text: str):
    cube: Cube = view_state["cube"]
    result = apply_sequence(text, cube)
    view_state["history"].record(result.tokens)
    if result.ok:
        view_state["status"], view_state["status_ok"] = f"Applied {result.applied} moves", True
    else:
        view_state["status"] = f"{result.error} (applied {result.applied} moves)"
        view_state["status_ok"] = False


def main(stdscr, cube: Cube):
    """Main viewer loop"""
    curses.curs_set(0)
    curses.start_color()
    init_colors()
    stdscr.nodelay(True)

    view_state = {
        "cube": cube,
        "history": MoveHistory(),
        "status": "Ready",
        "status_ok": True,
    }
    redraw_screen(stdscr, view_state)

    while True:
        try:
            key = stdscr.getch()
            if key == -1:
                time.sleep(0.05)
                continue
            if key == KEY_ESCAPE:
                break
            if key == curses.KEY_RESIZE:
                redraw_screen(stdscr, view_state)
                continue

            char = chr(key) if key < 256 else ""
            if char == KEY_SEQUENCE:
                h, _ = stdscr.getmaxyx()
                text = prompt(stdscr, h - 1, "Sequence: ")
                apply_typed_sequence(view_state, text)
            elif not char or not handle_key(view_state, char):
                continue
            redraw_screen(stdscr, view_state)
        except curses.error:
            pass


def cli(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(to_file=args.interactive)

    if not args.interactive:
        colorama.just_fix_windows_console()
        return run_once(args)

    try:
        cube = Cube(args.size, LabelMode.UNIQUE if args.unique else LabelMode.COLOUR)
    except CubeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    curses.wrapper(main, cube)
    return 0


if __name__ == "__main__":
    sys.exit(cli())
