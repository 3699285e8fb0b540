"""
Face identities and the fixed adjacency table used by every rotation
"""

import enum
from typing import Dict, Tuple

from cubies import Colour


class Face(enum.IntEnum):
    """The six sides of the cube; the value indexes the cube's grid list"""
    UP = 0
    DOWN = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    LEFT = 5

    @property
    def letter(self) -> str:
        return FACE_LETTERS[self]

    @property
    def opposite(self) -> "Face":
        return OPPOSITE_FACES[self]

    @property
    def home_colour(self) -> Colour:
        return HOME_COLOURS[self]

    @classmethod
    def from_letter(cls, letter: str) -> "Face":
        """Look up a face by its notation letter (U D F R B L)"""
        try:
            return LETTER_FACES[letter]
        except KeyError:
            raise ValueError(f"No face uses the letter [{letter}]") from None


class Edge(enum.Enum):
    """
    A strip of cells along one edge of a side, counted inward by depth.

    Given a 3x3 side numbered row-major:

        0 1 2
        3 4 5
        6 7 8

    at depth 0, TOP_ROW is 0 1 2, BOTTOM_ROW is 6 7 8, LEFT_COLUMN is 0 3 6
    and RIGHT_COLUMN is 2 5 8.
    """
    TOP_ROW = "top_row"
    BOTTOM_ROW = "bottom_row"
    LEFT_COLUMN = "left_column"
    RIGHT_COLUMN = "right_column"


FACE_LETTERS: Dict[Face, str] = {
    Face.UP: "U",
    Face.DOWN: "D",
    Face.FRONT: "F",
    Face.RIGHT: "R",
    Face.BACK: "B",
    Face.LEFT: "L",
}

LETTER_FACES: Dict[str, Face] = {letter: face for face, letter in FACE_LETTERS.items()}

OPPOSITE_FACES: Dict[Face, Face] = {
    Face.UP: Face.DOWN,
    Face.DOWN: Face.UP,
    Face.FRONT: Face.BACK,
    Face.BACK: Face.FRONT,
    Face.RIGHT: Face.LEFT,
    Face.LEFT: Face.RIGHT,
}

HOME_COLOURS: Dict[Face, Colour] = {
    Face.UP: Colour.WHITE,
    Face.DOWN: Colour.YELLOW,
    Face.FRONT: Colour.BLUE,
    Face.RIGHT: Colour.ORANGE,
    Face.BACK: Colour.GREEN,
    Face.LEFT: Colour.RED,
}

# The four neighbours of each face in clockwise order (looking at the face),
# with the edge of the neighbour that borders it. A clockwise turn moves the
# strip of entry i onto entry i + 1.
ADJACENT_FACES: Dict[Face, Tuple[Tuple[Face, Edge], ...]] = {
    Face.UP: (
        (Face.FRONT, Edge.TOP_ROW),
        (Face.LEFT, Edge.TOP_ROW),
        (Face.BACK, Edge.TOP_ROW),
        (Face.RIGHT, Edge.TOP_ROW),
    ),
    Face.DOWN: (
        (Face.FRONT, Edge.BOTTOM_ROW),
        (Face.RIGHT, Edge.BOTTOM_ROW),
        (Face.BACK, Edge.BOTTOM_ROW),
        (Face.LEFT, Edge.BOTTOM_ROW),
    ),
    Face.FRONT: (
        (Face.UP, Edge.BOTTOM_ROW),
        (Face.RIGHT, Edge.LEFT_COLUMN),
        (Face.DOWN, Edge.TOP_ROW),
        (Face.LEFT, Edge.RIGHT_COLUMN),
    ),
    Face.RIGHT: (
        (Face.UP, Edge.RIGHT_COLUMN),
        (Face.BACK, Edge.LEFT_COLUMN),
        (Face.DOWN, Edge.RIGHT_COLUMN),
        (Face.FRONT, Edge.RIGHT_COLUMN),
    ),
    Face.BACK: (
        (Face.UP, Edge.TOP_ROW),
        (Face.LEFT, Edge.LEFT_COLUMN),
        (Face.DOWN, Edge.BOTTOM_ROW),
        (Face.RIGHT, Edge.RIGHT_COLUMN),
    ),
    Face.LEFT: (
        (Face.UP, Edge.LEFT_COLUMN),
        (Face.FRONT, Edge.LEFT_COLUMN),
        (Face.DOWN, Edge.LEFT_COLUMN),
        (Face.BACK, Edge.RIGHT_COLUMN),
    ),
}
