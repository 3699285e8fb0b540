"""
Cubie labels - colours, unique display characters and initial face layouts
"""

import enum
from dataclasses import dataclass
from typing import List, Optional

from config import MAX_UNIQUE_SIDE_LENGTH, UNIQUE_ALPHABET
from errors import ConstructionError


class Colour(enum.Enum):
    """The six sticker colours, valued by their single-letter initial"""
    WHITE = "W"
    YELLOW = "Y"
    BLUE = "B"
    ORANGE = "O"
    GREEN = "G"
    RED = "R"

    @property
    def initial(self) -> str:
        return self.value


class LabelMode(enum.Enum):
    COLOUR = "colour"
    UNIQUE = "unique"


@dataclass(frozen=True)
class Cubie:
    """One face of one cubie: a colour, plus a display char in unique mode"""
    colour: Colour
    char: Optional[str] = None

    def display_char(self) -> str:
        return self.char if self.char is not None else self.colour.initial

    def __repr__(self):
        if self.char is None:
            return f"Cubie({self.colour.name})"
        return f"Cubie({self.colour.name}, {self.char!r})"


Side = List[List[Cubie]]


def validate_side_length(side_length, mode: LabelMode = LabelMode.COLOUR) -> int:
    """Check a side length is usable for the given labelling mode"""
    if isinstance(side_length, bool) or not isinstance(side_length, int):
        raise ConstructionError(f"Side length must be an integer, got {side_length!r}")
    if side_length < 1:
        raise ConstructionError("Cannot have a side length of less than 1")
    if mode is LabelMode.UNIQUE and side_length * side_length > len(UNIQUE_ALPHABET):
        raise ConstructionError(
            "Cannot have a side length of greater than "
            f"{MAX_UNIQUE_SIDE_LENGTH} when using unique display chars"
        )
    return side_length


def create_side(side_length: int, colour: Colour) -> Side:
    """Every cell of the side carries the same colour"""
    return [[Cubie(colour) for _ in range(side_length)] for _ in range(side_length)]


def create_side_with_unique_characters(side_length: int, colour: Colour) -> Side:
    """Cells are numbered row-major through UNIQUE_ALPHABET"""
    if side_length * side_length > len(UNIQUE_ALPHABET):
        raise ConstructionError(
            f"Unique alphabet has {len(UNIQUE_ALPHABET)} characters, "
            f"{side_length * side_length} needed"
        )
    return [
        [Cubie(colour, UNIQUE_ALPHABET[row * side_length + col]) for col in range(side_length)]
        for row in range(side_length)
    ]


def create_labels(side_length: int, colour: Colour, mode: LabelMode) -> Side:
    if mode is LabelMode.UNIQUE:
        return create_side_with_unique_characters(side_length, colour)
    return create_side(side_length, colour)
