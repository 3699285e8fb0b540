import pytest
from hypothesis import given
from hypothesis import strategies as st

from cube_state import Cube
from cubies import LabelMode
from errors import (
    CubeError, DepthOutOfRangeError, MalformedTokenError, ParseError, RangeError,
    UnknownFaceError,
)
from faces import Face
from moves import Direction, Rotation, rotate
from notation import (
    MoveToken, apply_sequence, format_sequence, invert_sequence, parse_sequence,
    parse_token, perform_sequence, validate_sequence,
)

EVERY_TOKEN = "F R U L B D F2 R2 U2 L2 B2 D2 F' R' U' L' B' D'"


@pytest.mark.parametrize("token, expected", [
    ("F", MoveToken(Face.FRONT)),
    ("R'", MoveToken(Face.RIGHT, Direction.ANTICLOCKWISE)),
    ("U2", MoveToken(Face.UP, repeat=2)),
    ("2F", MoveToken(Face.FRONT, depth=2)),
    ("3L'", MoveToken(Face.LEFT, Direction.ANTICLOCKWISE, depth=3)),
    ("Fw", MoveToken(Face.FRONT, depth=2, wide=True)),
    ("3Uw2", MoveToken(Face.UP, repeat=2, depth=3, wide=True)),
    ("Dw'", MoveToken(Face.DOWN, Direction.ANTICLOCKWISE, depth=2, wide=True)),
    ("12B", MoveToken(Face.BACK, depth=12)),
])
def test_parse_token(token, expected):
    assert parse_token(token) == expected


@pytest.mark.parametrize("token", ["X", "f", "2", "33", "2x", "w"])
def test_unknown_face(token):
    with pytest.raises(UnknownFaceError) as exc_info:
        parse_token(token)
    assert exc_info.value.token == token


@pytest.mark.parametrize("token", ["F2'", "F'2", "FF", "F3", "F1", "1F", "0F", "F''", "Fww", "F w"])
def test_malformed_modifiers(token):
    with pytest.raises(MalformedTokenError):
        parse_token(token)


def test_parse_errors_share_a_base():
    for error in (UnknownFaceError, MalformedTokenError, DepthOutOfRangeError):
        assert issubclass(error, ParseError)
        assert issubclass(error, CubeError)
    assert issubclass(DepthOutOfRangeError, RangeError)


def test_depth_checked_against_side_length():
    assert parse_token("2F", side_length=3) == MoveToken(Face.FRONT, depth=2)
    with pytest.raises(DepthOutOfRangeError):
        parse_token("3F", side_length=3)
    with pytest.raises(RangeError):
        parse_token("2F", side_length=2)
    # A wide turn may cover the whole cube
    assert parse_token("3Fw", side_length=3).depth == 3
    with pytest.raises(DepthOutOfRangeError):
        parse_token("4Fw", side_length=3)
    with pytest.raises(DepthOutOfRangeError):
        parse_token("Fw", side_length=1)


def test_token_to_rotation():
    assert MoveToken(Face.FRONT).to_rotation() == Rotation(Face.FRONT)
    assert parse_token("3Rw'").to_rotation() == Rotation(
        Face.RIGHT, Direction.ANTICLOCKWISE, depth=2, wide=True
    )
    assert parse_token("U2").to_rotation().repeat == 2


@pytest.mark.parametrize("text", ["F", "R'", "U2", "2F", "3L'", "Fw", "3Uw2", "Dw'", "4B2"])
def test_token_str_is_canonical(text):
    assert str(parse_token(text)) == text


def test_token_inverse():
    assert str(parse_token("F").inverse()) == "F'"
    assert str(parse_token("2R'").inverse()) == "2R"
    assert parse_token("U2").inverse() == parse_token("U2")


def test_unknown_face_leaves_cube_unchanged():
    cube = Cube(3)
    result = apply_sequence("X", cube)
    assert not result.ok
    assert isinstance(result.error, UnknownFaceError)
    assert result.failed_index == 0
    assert result.applied == 0
    assert cube.is_solved()


def test_sequence_stops_at_first_bad_token():
    cube = Cube(3)
    result = apply_sequence("F R X U", cube)
    assert result.applied == 2
    assert result.failed_index == 2
    assert result.error.token == "X"
    assert "position 2" in str(result.error)

    expected = Cube(3)
    rotate(expected, Rotation(Face.FRONT))
    rotate(expected, Rotation(Face.RIGHT))
    assert cube == expected


def test_empty_and_whitespace_sequences():
    cube = Cube(3)
    for text in ("", "   ", "\t\n"):
        result = apply_sequence(text, cube)
        assert result.ok and result.applied == 0
    assert cube.is_solved()


def test_whitespace_runs_are_one_separator():
    a, b = Cube(3), Cube(3)
    apply_sequence("F  R\tU\n", a)
    apply_sequence("F R U", b)
    assert a == b


def test_double_turn_is_one_rotation(monkeypatch):
    import notation
    calls = []
    real_rotate = notation.rotate

    def counting_rotate(cube, rotation):
        calls.append(rotation)
        real_rotate(cube, rotation)

    monkeypatch.setattr(notation, "rotate", counting_rotate)
    cube = Cube(3)
    result = apply_sequence("F2", cube)
    assert result.applied == 1
    assert len(calls) == 1

    other = Cube(3)
    apply_sequence("F F", other)
    assert cube == other


def test_validate_sequence_does_not_touch_cube():
    cube = Cube(3)
    result = validate_sequence("F R 3F U", cube.side_length)
    assert not result.ok
    assert result.applied == 2
    assert isinstance(result.error, DepthOutOfRangeError)
    assert cube.is_solved()

    result = validate_sequence("F R 2F U", 3)
    assert result.ok and result.applied == 4
    assert [str(token) for token in result.tokens] == ["F", "R", "2F", "U"]


def test_perform_sequence_raises():
    cube = Cube(3)
    with pytest.raises(MalformedTokenError):
        perform_sequence("F F3", cube)
    assert not cube.is_solved()


def test_parse_sequence_reports_position():
    with pytest.raises(UnknownFaceError) as exc_info:
        parse_sequence("F R U Q")
    assert exc_info.value.index == 3


def test_format_sequence():
    assert format_sequence(parse_sequence("F  R'  2U2 Lw")) == "F R' 2U2 Lw"


def test_every_token_on_three_by_three(colours):
    cube = Cube(3)
    result = apply_sequence(EVERY_TOKEN, cube)
    assert result.ok and result.applied == 18
    assert colours(cube, Face.UP) == ["GOG", "WWY", "BRW"]
    assert colours(cube, Face.DOWN) == ["OYY", "WYB", "WRB"]
    assert colours(cube, Face.FRONT) == ["OYG", "WBG", "WBR"]
    assert colours(cube, Face.RIGHT) == ["RGY", "ROY", "BOR"]
    assert colours(cube, Face.BACK) == ["RGO", "OGW", "WBG"]
    assert colours(cube, Face.LEFT) == ["YOY", "BRG", "ORB"]


def test_middle_slice_on_three_by_three(labels):
    cube = Cube(3, LabelMode.UNIQUE)
    apply_sequence("2F", cube)
    assert labels(cube, Face.UP)[1] == ["R7", "R4", "R1"]


tokens = st.builds(
    lambda prefix, face, suffix: f"{prefix}{face}{suffix}",
    st.sampled_from(["", "2", "3"]),
    st.sampled_from("UDFRBL"),
    st.sampled_from(["", "'", "2", "w", "w'", "w2"]),
)


@given(st.lists(tokens, max_size=12))
def test_sequence_then_inverse_is_identity(sequence):
    text = " ".join(sequence)
    cube = Cube(4, LabelMode.UNIQUE)
    assert apply_sequence(text, cube).ok
    assert apply_sequence(invert_sequence(text), cube).ok
    assert cube == Cube(4, LabelMode.UNIQUE)


@given(st.text(max_size=20))
def test_arbitrary_text_never_crashes(text):
    cube = Cube(3)
    result = apply_sequence(text, cube)
    assert result.ok or isinstance(result.error, ParseError)
    assert result.applied <= len(text.split())
