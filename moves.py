"""
Cube movement logic - face, slice and wide rotations for any side length
"""

import enum
import logging
import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from cube_state import Cube
from errors import RangeError
from faces import ADJACENT_FACES, Face

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"

    def __invert__(self) -> "Direction":
        if self is Direction.CLOCKWISE:
            return Direction.ANTICLOCKWISE
        return Direction.CLOCKWISE


@dataclass(frozen=True)
class Rotation:
    """
    A single turn relative to one face.

    depth is the layer index counted in from `face` (0 is the face itself).
    With wide set, every layer from 0 to depth turns together.
    """
    face: Face
    direction: Direction = Direction.CLOCKWISE
    depth: int = 0
    repeat: int = 1
    wide: bool = False

    @classmethod
    def clockwise(cls, face: Face, depth: int = 0) -> "Rotation":
        return cls(face, Direction.CLOCKWISE, depth)

    @classmethod
    def anticlockwise(cls, face: Face, depth: int = 0) -> "Rotation":
        return cls(face, Direction.ANTICLOCKWISE, depth)

    def inverse(self) -> "Rotation":
        return replace(self, direction=~self.direction)


# Grid rotation of a single face

def rotate_grid_cw(cube: Cube, face: Face):
    """Cell (row, col) moves to (col, N-1-row)"""
    grid = cube.side(face)
    cube.replace_side(face, [list(row) for row in zip(*reversed(grid))])


def rotate_grid_ccw(cube: Cube, face: Face):
    """Exact inverse of rotate_grid_cw"""
    grid = cube.side(face)
    cube.replace_side(face, [list(row) for row in reversed(list(zip(*grid)))])


# Belt of four strips around a face

def cycle_adjacents(cube: Cube, face: Face, depth: int, direction: Direction):
    """Move the four strips bordering `face` one neighbour along, `depth` layers in"""
    adjacents = ADJACENT_FACES[face]
    strips = [cube.strip(adj_face, edge, depth) for adj_face, edge in adjacents]
    step = 1 if direction is Direction.CLOCKWISE else -1
    for i, values in enumerate(strips):
        target_face, target_edge = adjacents[(i + step) % 4]
        cube.replace_strip(target_face, target_edge, depth, values)


# Primitives

def rotate_face(cube: Cube, face: Face, direction: Direction = Direction.CLOCKWISE,
                repeat: int = 1):
    """Turn an outer face: its own grid plus the border strips of its neighbours"""
    _check_repeat(repeat)
    rotate_grid = rotate_grid_cw if direction is Direction.CLOCKWISE else rotate_grid_ccw
    for _ in range(repeat):
        rotate_grid(cube, face)
        cycle_adjacents(cube, face, 0, direction)


def rotate_slice(cube: Cube, face: Face, depth: int,
                 direction: Direction = Direction.CLOCKWISE, repeat: int = 1):
    """
    Turn an internal layer parallel to `face`, `depth` layers in.

    Only the belt moves; neither `face` nor its opposite is touched. depth
    must name an internal layer (1 .. N-2).
    """
    _check_repeat(repeat)
    n = cube.side_length
    if not 1 <= depth <= n - 2:
        raise RangeError(
            f"Slice depth {depth} is not an internal layer of a "
            f"{n}x{n}x{n} cube (expected 1..{n - 2})"
        )
    for _ in range(repeat):
        cycle_adjacents(cube, face, depth, direction)


def rotate(cube: Cube, rotation: Rotation):
    """Perform one Rotation, validating its depth before anything moves"""
    n = cube.side_length
    _check_repeat(rotation.repeat)
    if not 0 <= rotation.depth <= n - 1:
        raise RangeError(
            f"Requested layer {rotation.depth} of {rotation.face.name} is outside "
            f"0..{n - 1} for a {n}x{n}x{n} cube"
        )

    logger.debug("Rotating %s", rotation)
    layers = range(rotation.depth + 1) if rotation.wide else (rotation.depth,)
    for layer in layers:
        _rotate_layer(cube, rotation.face, layer, rotation.direction, rotation.repeat)


def _rotate_layer(cube: Cube, face: Face, layer: int, direction: Direction, repeat: int):
    n = cube.side_length
    if layer == 0:
        rotate_face(cube, face, direction, repeat)
    elif layer == n - 1:
        # The far layer is the opposite face, seen from behind
        rotate_face(cube, face.opposite, ~direction, repeat)
    else:
        rotate_slice(cube, face, layer, direction, repeat)


def _check_repeat(repeat: int):
    if repeat not in (1, 2):
        raise RangeError(f"Repeat count must be 1 or 2, got {repeat}")


def apply_move(cube: Cube, face: Face, direction: Direction = Direction.CLOCKWISE,
               depth: int = 0, repeat: int = 1, wide: bool = False) -> Rotation:
    """Single-move entry point for callers that already know what to turn"""
    rotation = Rotation(face, direction, depth, repeat, wide)
    rotate(cube, rotation)
    return rotation


def rotate_seq(cube: Cube, rotations: Iterable[Rotation]):
    for rotation in rotations:
        rotate(cube, rotation)


def random_rotation(side_length: int, rng: Optional[random.Random] = None) -> Rotation:
    """A random single-layer quarter turn"""
    rng = rng or random.Random()
    face = rng.choice(list(Face))
    direction = rng.choice(list(Direction))
    depth = rng.randrange(side_length)
    return Rotation(face, direction, depth)


def get_inverse_rotations(rotations: Iterable[Rotation]) -> List[Rotation]:
    """Rotations that undo `rotations` when applied in order"""
    return [rotation.inverse() for rotation in reversed(list(rotations))]
