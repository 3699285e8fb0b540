"""
Text rendering of the cube as an unfolded net

      U
    L F R B
      D
"""

from typing import List

from colorama import Back, Fore, Style

from config import CELL_SEPARATOR, DEFAULT_CUBIE_CHAR
from cube_state import Cube
from cubies import Colour, Cubie
from faces import Face

# Terminals have no orange, magenta stands in for it
ANSI_COLOURS = {
    Colour.WHITE: Fore.WHITE,
    Colour.YELLOW: Fore.YELLOW,
    Colour.BLUE: Fore.BLUE,
    Colour.ORANGE: Fore.MAGENTA,
    Colour.GREEN: Fore.GREEN,
    Colour.RED: Fore.RED,
}

MIDDLE_BAND = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)


def cubie_text(cubie: Cubie, coloured: bool = False) -> str:
    if not coloured:
        return cubie.display_char()
    char = cubie.char if cubie.char is not None else DEFAULT_CUBIE_CHAR
    return f"{ANSI_COLOURS[cubie.colour]}{Back.BLACK}{char}{Style.RESET_ALL}"


def render_row(row: List[Cubie], coloured: bool = False) -> str:
    return CELL_SEPARATOR.join(cubie_text(cubie, coloured) for cubie in row)


def render_lines(cube: Cube, coloured: bool = False) -> List[str]:
    """One string per printed line of the net"""
    sides = cube.snapshot()
    indent = (" " + CELL_SEPARATOR) * cube.side_length
    lines = [indent + render_row(row, coloured) for row in sides[Face.UP]]
    for rows in zip(*(sides[face] for face in MIDDLE_BAND)):
        lines.append(CELL_SEPARATOR.join(render_row(row, coloured) for row in rows))
    lines.extend(indent + render_row(row, coloured) for row in sides[Face.DOWN])
    return lines


def render_net(cube: Cube, coloured: bool = False) -> str:
    return "\n".join(render_lines(cube, coloured)) + "\n"


def print_cube(cube: Cube, coloured: bool = True):
    print(render_net(cube, coloured), end="")
