import pytest

from cube_state import Cube
from cubies import Colour, Cubie, LabelMode
from errors import GridInvariantError, RangeError
from faces import ADJACENT_FACES, Edge, Face


def test_new_cube_is_solved_with_home_colours(colours):
    cube = Cube(3)
    assert cube.is_solved()
    assert colours(cube, Face.UP) == ["WWW"] * 3
    assert colours(cube, Face.DOWN) == ["YYY"] * 3
    assert colours(cube, Face.FRONT) == ["BBB"] * 3
    assert colours(cube, Face.RIGHT) == ["OOO"] * 3
    assert colours(cube, Face.BACK) == ["GGG"] * 3
    assert colours(cube, Face.LEFT) == ["RRR"] * 3


def test_side_returns_a_copy():
    cube = Cube(2)
    grid = cube.side(Face.UP)
    grid[0][0] = Cubie(Colour.RED)
    assert cube.cubie(Face.UP, 0, 0) == Cubie(Colour.WHITE)


def test_strip_reading_order():
    cube = Cube(3, LabelMode.UNIQUE)
    chars = lambda cubies: "".join(cubie.char for cubie in cubies)
    assert chars(cube.strip(Face.FRONT, Edge.LEFT_COLUMN)) == "036"
    assert chars(cube.strip(Face.FRONT, Edge.RIGHT_COLUMN)) == "852"
    assert chars(cube.strip(Face.FRONT, Edge.TOP_ROW)) == "210"
    assert chars(cube.strip(Face.FRONT, Edge.BOTTOM_ROW)) == "678"
    assert chars(cube.strip(Face.FRONT, Edge.LEFT_COLUMN, 1)) == "147"
    assert chars(cube.strip(Face.FRONT, Edge.BOTTOM_ROW, 1)) == "345"


@pytest.mark.parametrize("edge", list(Edge))
@pytest.mark.parametrize("depth", [0, 1, 3])
def test_replace_strip_round_trips(edge, depth):
    cube = Cube(4, LabelMode.UNIQUE)
    before = cube.copy()
    values = cube.strip(Face.RIGHT, edge, depth)
    cube.replace_strip(Face.RIGHT, edge, depth, values)
    assert cube == before


def test_replace_strip_of_wrong_length():
    cube = Cube(3)
    with pytest.raises(GridInvariantError):
        cube.replace_strip(Face.UP, Edge.TOP_ROW, 0, [Cubie(Colour.RED)] * 2)


def test_replace_side_must_be_square(make_side):
    cube = Cube(3)
    with pytest.raises(GridInvariantError):
        cube.replace_side(Face.UP, make_side("WWW", "WWW"))
    with pytest.raises(GridInvariantError):
        cube.replace_side(Face.UP, make_side("WWW", "WW", "WWW"))


def test_strip_depth_out_of_range():
    cube = Cube(3)
    with pytest.raises(RangeError):
        cube.strip(Face.UP, Edge.TOP_ROW, 3)
    with pytest.raises(IndexError):
        cube.strip(Face.UP, Edge.TOP_ROW, -1)


def test_adjacency_is_symmetric():
    for face, adjacents in ADJACENT_FACES.items():
        neighbours = {adj_face for adj_face, _ in adjacents}
        assert len(neighbours) == 4
        assert face not in neighbours
        assert face.opposite not in neighbours
        for neighbour in neighbours:
            assert face in {adj_face for adj_face, _ in ADJACENT_FACES[neighbour]}


def test_from_sides_and_is_solved(make_side):
    cube = Cube.from_sides(
        up=make_side("WW", "WW"),
        down=make_side("YY", "YY"),
        front=make_side("BB", "BR"),
        right=make_side("OO", "OO"),
        back=make_side("GG", "GG"),
        left=make_side("RR", "RB"),
    )
    assert cube.side_length == 2
    assert cube.mode is LabelMode.COLOUR
    assert not cube.is_solved()


def test_reset_and_recreate():
    cube = Cube(3, LabelMode.UNIQUE)
    cube.replace_side(Face.UP, cube.side(Face.DOWN))
    assert not cube.is_solved()
    cube.reset()
    assert cube == Cube(3, LabelMode.UNIQUE)

    bigger = cube.recreate_at_size(5)
    assert bigger.side_length == 5
    assert bigger.mode is LabelMode.UNIQUE
    assert cube.side_length == 3


def test_copy_is_independent():
    cube = Cube(2)
    clone = cube.copy()
    clone.replace_side(Face.UP, clone.side(Face.DOWN))
    assert cube.is_solved()
    assert cube != clone


def test_snapshot_has_all_faces():
    snapshot = Cube(2).snapshot()
    assert set(snapshot) == set(Face)


def test_repeated_face_colour_is_not_solved():
    cube = Cube(2)
    cube.replace_side(Face.UP, cube.side(Face.DOWN))
    assert all(len({cubie.colour for row in grid for cubie in row}) == 1
               for grid in cube.snapshot().values())
    assert not cube.is_solved()


def test_from_sides_keeps_unique_mode_from_any_cell():
    plain = Cube(2).snapshot()
    unique = Cube(2, LabelMode.UNIQUE).snapshot()
    cube = Cube.from_sides(
        up=plain[Face.UP],
        down=plain[Face.DOWN],
        front=unique[Face.FRONT],
        right=plain[Face.RIGHT],
        back=plain[Face.BACK],
        left=plain[Face.LEFT],
    )
    assert cube.mode is LabelMode.UNIQUE
    cube.reset()
    assert cube == Cube(2, LabelMode.UNIQUE)


def test_from_sides_with_explicit_mode():
    sides = Cube(2, LabelMode.UNIQUE).snapshot()
    cube = Cube.from_sides(*(sides[face] for face in Face), mode=LabelMode.COLOUR)
    assert cube.mode is LabelMode.COLOUR
    cube.reset()
    assert cube == Cube(2)


@pytest.mark.parametrize("letter, face", [("U", Face.UP), ("F", Face.FRONT), ("L", Face.LEFT)])
def test_face_from_letter(letter, face):
    assert Face.from_letter(letter) is face
    assert face.letter == letter


@pytest.mark.parametrize("letter", ["f", "X", ""])
def test_face_from_unknown_letter(letter):
    with pytest.raises(ValueError):
        Face.from_letter(letter)
