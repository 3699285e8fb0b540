import pytest

from cube_state import Cube
from cubies import Colour, Cubie
from faces import Face


def colour_rows(cube: Cube, face: Face):
    """Rows of colour initials, e.g. ["WYW", "YWY", "WYW"]"""
    return ["".join(cubie.colour.initial for cubie in row) for row in cube.side(face)]


def label_rows(cube: Cube, face: Face):
    """Rows of colour initial plus unique char, e.g. [["R2", "R0"], ["W2", "W3"]]"""
    return [[cubie.colour.initial + cubie.char for cubie in row] for row in cube.side(face)]


def side_from(*rows: str):
    return [[Cubie(Colour(initial)) for initial in row] for row in rows]


@pytest.fixture
def cube():
    return Cube(3)


@pytest.fixture
def colours():
    return colour_rows


@pytest.fixture
def labels():
    return label_rows


@pytest.fixture
def make_side():
    return side_from
