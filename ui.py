"""
UI components - curses colours, cube net drawing, instructions and status
"""

import curses
from typing import Dict, Optional, Tuple

from config import (
    COLOUR_PAIRS, FACE_KEYS, KEY_RESET, KEY_SEQUENCE, KEY_SHUFFLE, KEY_UNDO,
    PAIR_ERROR, PAIR_OK, PAIR_TEXT,
)
from cube_state import Cube
from faces import Face
from known_transforms import list_transforms

CELL_WIDTH = 2

# Where each face sits in the unfolded net, in units of whole faces
NET_LAYOUT: Dict[Face, Tuple[int, int]] = {
    Face.UP: (0, 1),
    Face.LEFT: (1, 0),
    Face.FRONT: (1, 1),
    Face.RIGHT: (1, 2),
    Face.BACK: (1, 3),
    Face.DOWN: (2, 1),
}


def init_colors():
    """Initialize curses color pairs with proper orange color"""
    curses.init_pair(COLOUR_PAIRS["W"], curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(COLOUR_PAIRS["Y"], curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(COLOUR_PAIRS["B"], curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(COLOUR_PAIRS["G"], curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(COLOUR_PAIRS["R"], curses.COLOR_BLACK, curses.COLOR_RED)

    # Try to use 256-color orange
    if curses.COLORS >= 256:
        curses.init_pair(COLOUR_PAIRS["O"], curses.COLOR_BLACK, 208)
    else:
        curses.init_pair(COLOUR_PAIRS["O"], curses.COLOR_BLACK, curses.COLOR_MAGENTA)

    curses.init_pair(PAIR_OK, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(PAIR_ERROR, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(PAIR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)


def cell_origin(side_length: int, face: Face, row: int, col: int) -> Tuple[int, int]:
    """Screen offset (y, x) of one cell relative to the top-left of the net"""
    face_row, face_col = NET_LAYOUT[face]
    y = face_row * side_length + row
    x = (face_col * side_length + col) * CELL_WIDTH + face_col
    return y, x


def net_size(side_length: int) -> Tuple[int, int]:
    """Height and width the net needs on screen"""
    return 3 * side_length, 4 * side_length * CELL_WIDTH + 3


def key_to_token(char: str) -> Optional[str]:
    """Map a face key to notation: lower case clockwise, upper case anticlockwise"""
    if char in FACE_KEYS:
        return FACE_KEYS[char]
    if char.lower() in FACE_KEYS:
        return FACE_KEYS[char.lower()] + "'"
    return None


def draw_cube(stdscr, cube: Cube, start_row: int, start_col: int):
    """Draw the unfolded cube with one coloured block per cubie"""
    n = cube.side_length
    for face, grid in cube.snapshot().items():
        for r, cubie_row in enumerate(grid):
            for c, cubie in enumerate(cubie_row):
                y, x = cell_origin(n, face, r, c)
                text = (cubie.char or " ").ljust(CELL_WIDTH)
                try:
                    stdscr.addstr(start_row + y, start_col + x, text,
                                  curses.color_pair(COLOUR_PAIRS[cubie.colour.initial]))
                except curses.error:
                    pass


def draw_status_bar(stdscr, width: int, row: int, status: str, ok: bool = True):
    """Draw the last action or error, centred"""
    color = curses.color_pair(PAIR_OK if ok else PAIR_ERROR)
    col = max(0, width // 2 - len(status) // 2)
    try:
        stdscr.addstr(row, col, status[:max(0, width - 1)], color)
    except curses.error:
        pass


def draw_instructions(stdscr, start_row: int):
    """Draw control instructions"""
    h, w = stdscr.getmaxyx()

    # Draw separator line
    try:
        stdscr.addstr(start_row, 0, "-" * (w - 1), curses.A_DIM)
    except curses.error:
        pass

    faces = " ".join(key for key in FACE_KEYS)
    transforms = "  ".join(
        f"{i}={transform.name}" for i, transform in enumerate(list_transforms(), start=1)
    )
    lines = [
        ("KEYBOARD MODE", curses.A_BOLD),
        (f"Faces {faces}   lower case clockwise, upper case anticlockwise", 0),
        (f"{KEY_SEQUENCE.upper()} Type a sequence   "
         f"{KEY_SHUFFLE.upper()}=Shuffle  {KEY_UNDO.upper()}=Undo  "
         f"{KEY_RESET.upper()}=Reset  Esc=Quit", 0),
        (transforms, curses.A_DIM),
    ]

    for i, (line, attr) in enumerate(lines):
        try:
            stdscr.addstr(start_row + 1 + i, 2, line[:max(0, w - 3)], attr)
        except curses.error:
            pass


def prompt(stdscr, row: int, label: str) -> str:
    """Read one line of text at the bottom of the screen"""
    curses.echo()
    curses.curs_set(1)
    stdscr.nodelay(False)
    try:
        stdscr.move(row, 0)
        stdscr.clrtoeol()
        stdscr.addstr(row, 2, label)
        text = stdscr.getstr(row, 2 + len(label)).decode(errors="replace")
    finally:
        curses.noecho()
        curses.curs_set(0)
        stdscr.nodelay(True)
    return text


def redraw_screen(stdscr, view_state: dict):
    """Redraw the entire screen"""
    h, w = stdscr.getmaxyx()
    cube = view_state["cube"]
    net_h, net_w = net_size(cube.side_length)
    stdscr.clear()

    title = f" {cube.side_length}x{cube.side_length}x{cube.side_length} "
    if cube.is_solved():
        title += "[SOLVED] "
    try:
        stdscr.addstr(0, max(0, w // 2 - len(title) // 2), title,
                      curses.color_pair(PAIR_TEXT) | curses.A_BOLD)
    except curses.error:
        pass

    draw_cube(stdscr, cube, 2, max(0, w // 2 - net_w // 2))
    draw_instructions(stdscr, h - 7)
    draw_status_bar(stdscr, w, h - 2, view_state["status"], view_state["status_ok"])
    stdscr.refresh()
