"""
Configuration constants for the puzzle cube simulator
"""

import logging
import os

# Cube construction
DEFAULT_SIDE_LENGTH = 3

# Unique-character labelling draws from this printable ASCII run ('0' .. '~').
# Each face is numbered independently, so N*N must fit in the alphabet (N <= 8).
UNIQUE_ALPHABET = "".join(chr(code) for code in range(ord("0"), ord("~") + 1))
MAX_UNIQUE_SIDE_LENGTH = 8

# Shuffle
SHUFFLE_MOVES = 25

# Printing
DEFAULT_CUBIE_CHAR = "■"
CELL_SEPARATOR = " "

# Curses colour pair ids per cubie colour (see ui.init_colors)
COLOUR_PAIRS = {
    "W": 1,  # White
    "Y": 2,  # Yellow
    "B": 3,  # Blue
    "O": 4,  # Orange
    "G": 5,  # Green
    "R": 6,  # Red
}
PAIR_OK = 7      # Green text
PAIR_ERROR = 8   # Red text
PAIR_TEXT = 9    # White text

# Keyboard bindings for the viewer: lower case turns clockwise, upper case
# anticlockwise.
FACE_KEYS = {
    "f": "F", "r": "R", "u": "U",
    "l": "L", "b": "B", "d": "D",
}
KEY_SHUFFLE = "x"
KEY_UNDO = "z"
KEY_RESET = "c"
KEY_SEQUENCE = ":"
KEY_ESCAPE = 27

# Logging
LOG_LEVEL = os.environ.get("PUZZLE_CUBE_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("PUZZLE_CUBE_LOG_FILE", "puzzle_cube.log")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level() -> int:
    """Resolve LOG_LEVEL to a logging constant, falling back to WARNING"""
    return getattr(logging, LOG_LEVEL, logging.WARNING)
