"""
Singmaster-style notation - parse move strings and apply them to a cube

Tokens are whitespace separated. Each token is an optional layer depth
(2 or more), a face letter, an optional 'w' for a wide turn, and at most one
of ' (anticlockwise) or 2 (double turn):

    F  R'  U2  2F  3R'  Fw  3Uw2
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cube_state import Cube
from errors import (
    CubeError, DepthOutOfRangeError, MalformedTokenError, ParseError, UnknownFaceError,
)
from faces import Face
from moves import Direction, Rotation, rotate

logger = logging.getLogger(__name__)

CHAR_FOR_ANTICLOCKWISE = "'"
CHAR_FOR_TURN_TWICE = "2"
CHAR_FOR_WIDE = "w"


@dataclass(frozen=True)
class MoveToken:
    """
    One parsed move.

    depth is the notation depth: for a plain token the layer counted from
    the face starting at 1 (so `2F` has depth 2), for a wide token the number
    of layers turned together. A token with no prefix has depth 1.
    """
    face: Face
    direction: Direction = Direction.CLOCKWISE
    repeat: int = 1
    depth: int = 1
    wide: bool = False

    def to_rotation(self) -> Rotation:
        return Rotation(self.face, self.direction, self.depth - 1, self.repeat, self.wide)

    def inverse(self) -> "MoveToken":
        if self.repeat == 2:
            return self
        return MoveToken(self.face, ~self.direction, self.repeat, self.depth, self.wide)

    def __str__(self):
        prefix = ""
        if self.depth > 2 or (self.depth == 2 and not self.wide):
            prefix = str(self.depth)
        suffix = CHAR_FOR_WIDE if self.wide else ""
        if self.repeat == 2:
            suffix += CHAR_FOR_TURN_TWICE
        elif self.direction is Direction.ANTICLOCKWISE:
            suffix += CHAR_FOR_ANTICLOCKWISE
        return f"{prefix}{self.face.letter}{suffix}"


@dataclass
class SequenceResult:
    """
    Outcome of validating or applying a notation sequence.

    applied counts the tokens that went through before the first error; on a
    failed apply the cube is left with exactly those tokens performed.
    """
    applied: int = 0
    tokens: List[MoveToken] = field(default_factory=list)
    error: Optional[CubeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed_index(self) -> Optional[int]:
        if isinstance(self.error, ParseError):
            return self.error.index
        return None

    def __bool__(self):
        return self.ok


def split_tokens(token_sequence: str) -> List[str]:
    return token_sequence.split()


def parse_token(token: str, side_length: Optional[int] = None, index: int = 0) -> MoveToken:
    """
    Parse a single token.

    With a side_length the depth prefix is checked against the cube size;
    without one only the syntax is checked.
    """
    digits = 0
    while digits < len(token) and token[digits] in "0123456789":
        digits += 1
    if digits == len(token):
        raise UnknownFaceError(token, index, "no face letter")

    depth = None
    if digits:
        depth = int(token[:digits])
        if depth < 2:
            raise MalformedTokenError(token, index, "layer depth must be 2 or more")

    try:
        face = Face.from_letter(token[digits])
    except ValueError:
        raise UnknownFaceError(token, index) from None

    rest = token[digits + 1:]
    wide = rest.startswith(CHAR_FOR_WIDE)
    if wide:
        rest = rest[1:]

    direction = Direction.CLOCKWISE
    repeat = 1
    if rest == CHAR_FOR_ANTICLOCKWISE:
        direction = Direction.ANTICLOCKWISE
    elif rest == CHAR_FOR_TURN_TWICE:
        repeat = 2
    elif rest:
        raise MalformedTokenError(token, index)

    if depth is None:
        depth = 2 if wide else 1

    if side_length is not None:
        _check_depth(token, index, depth, wide, side_length)

    return MoveToken(face, direction, repeat, depth, wide)


def _check_depth(token: str, index: int, depth: int, wide: bool, side_length: int):
    n = side_length
    # A wide turn may take in the whole cube, a single layer stops before the far face
    deepest = n if wide else n - 1
    if depth > 1 and depth > deepest:
        raise DepthOutOfRangeError(
            token, index,
            f"{'wide turns' if wide else 'slices'} on a {n}x{n}x{n} cube go up to depth {deepest}"
        )


def parse_sequence(token_sequence: str, side_length: Optional[int] = None) -> List[MoveToken]:
    """Parse a whole sequence, raising the first ParseError met"""
    return [
        parse_token(token, side_length, index)
        for index, token in enumerate(split_tokens(token_sequence))
    ]


def validate_sequence(token_sequence: str, side_length: int) -> SequenceResult:
    """Syntax-check a sequence for a given cube size without touching any cube"""
    result = SequenceResult()
    for index, token in enumerate(split_tokens(token_sequence)):
        try:
            result.tokens.append(parse_token(token, side_length, index))
        except ParseError as e:
            logger.info("Sequence rejected: %s", e)
            result.error = e
            break
        result.applied += 1
    return result


def apply_sequence(token_sequence: str, cube: Cube) -> SequenceResult:
    """
    Parse and perform a sequence token by token.

    Each valid token is one rotation (a double turn is one rotation with
    repeat=2). Execution stops at the first bad token; earlier tokens stay
    applied. Use validate_sequence first for all-or-nothing behaviour.
    """
    result = SequenceResult()
    for index, token in enumerate(split_tokens(token_sequence)):
        try:
            move = parse_token(token, cube.side_length, index)
        except ParseError as e:
            logger.info("Stopped after %d of the tokens in [%s]: %s",
                        result.applied, token_sequence, e)
            result.error = e
            break
        rotate(cube, move.to_rotation())
        result.tokens.append(move)
        result.applied += 1
    return result


def perform_sequence(token_sequence: str, cube: Cube) -> None:
    """Apply a sequence, raising its error instead of returning it"""
    result = apply_sequence(token_sequence, cube)
    if result.error is not None:
        raise result.error


def format_sequence(tokens: List[MoveToken]) -> str:
    return " ".join(str(token) for token in tokens)


def invert_sequence(token_sequence: str) -> str:
    """The sequence that undoes `token_sequence`"""
    tokens = parse_sequence(token_sequence)
    return format_sequence([token.inverse() for token in reversed(tokens)])
