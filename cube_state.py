"""
Cube state management - the six face grids and strip access used by rotations
"""

import copy
import logging
from typing import Dict, List, Optional, Sequence

from config import DEFAULT_SIDE_LENGTH
from cubies import Colour, Cubie, LabelMode, Side, create_labels, validate_side_length
from errors import GridInvariantError, RangeError
from faces import Edge, Face

logger = logging.getLogger(__name__)


class Cube:
    """
    An NxNxN puzzle cube.

    Each face is an N x N grid of Cubie labels stored row-major, in a list
    indexed by Face. The side length and labelling mode are fixed at
    construction; rotations (see moves.py) only permute existing labels.
    """

    def __init__(self, side_length: int = DEFAULT_SIDE_LENGTH,
                 mode: LabelMode = LabelMode.COLOUR):
        self._side_length = validate_side_length(side_length, mode)
        self._mode = mode
        self._sides: List[Side] = [
            create_labels(self._side_length, face.home_colour, mode) for face in Face
        ]
        logger.debug("Created %dx%dx%d cube (%s labels)",
                     side_length, side_length, side_length, mode.value)

    @classmethod
    def from_sides(cls, up: Side, down: Side, front: Side, right: Side,
                   back: Side, left: Side, mode: Optional[LabelMode] = None) -> "Cube":
        """
        Build a cube in a custom state, mostly useful for tests.

        Without an explicit mode, any cell carrying a unique char makes the
        cube unique-labelled, so reset() restores unique labels.
        """
        grids = (up, down, front, right, back, left)
        if mode is None:
            labelled = any(cubie.char is not None
                           for grid in grids for row in grid for cubie in row)
            mode = LabelMode.UNIQUE if labelled else LabelMode.COLOUR
        cube = cls(len(up), mode)
        for face, grid in zip(Face, grids):
            cube.replace_side(face, grid)
        return cube

    @property
    def side_length(self) -> int:
        return self._side_length

    @property
    def mode(self) -> LabelMode:
        return self._mode

    # Read access

    def side(self, face: Face) -> Side:
        """A copy of one face's grid"""
        return [list(row) for row in self._sides[face]]

    def snapshot(self) -> Dict[Face, Side]:
        """Copies of all six grids, for renderers and printers"""
        return {face: self.side(face) for face in Face}

    def cubie(self, face: Face, row: int, col: int) -> Cubie:
        return self._sides[face][row][col]

    def strip(self, face: Face, edge: Edge, depth: int = 0) -> List[Cubie]:
        """
        Read one row or column of `face`, `depth` cells in from `edge`.

        Strips are ordered clockwise around the face being turned, so that
        copying a strip read from one neighbour onto the next neighbour
        keeps every cell in its physical place.
        """
        index = self._layer_index(edge, depth)
        grid = self._sides[face]
        if edge is Edge.LEFT_COLUMN:
            return [row[index] for row in grid]
        if edge is Edge.RIGHT_COLUMN:
            return [row[index] for row in reversed(grid)]
        if edge is Edge.TOP_ROW:
            return list(reversed(grid[index]))
        return list(grid[index])

    # Mutation

    def replace_strip(self, face: Face, edge: Edge, depth: int,
                      values: Sequence[Cubie]) -> None:
        """Write `values` back in the order `strip` reads them"""
        if len(values) != self._side_length:
            raise GridInvariantError(
                f"Strip for {face.name} {edge.value} needs {self._side_length} "
                f"cubies, got {len(values)}"
            )
        index = self._layer_index(edge, depth)
        grid = self._sides[face]
        if edge is Edge.LEFT_COLUMN:
            for row, value in zip(grid, values):
                row[index] = value
        elif edge is Edge.RIGHT_COLUMN:
            for row, value in zip(reversed(grid), values):
                row[index] = value
        elif edge is Edge.TOP_ROW:
            grid[index] = list(reversed(values))
        else:
            grid[index] = list(values)

    def replace_side(self, face: Face, grid: Sequence[Sequence[Cubie]]) -> None:
        """Replace a whole face; the grid must be exactly N x N"""
        n = self._side_length
        if len(grid) != n or any(len(row) != n for row in grid):
            raise GridInvariantError(
                f"Side {face.name} must be {n}x{n}, got "
                f"{[len(row) for row in grid]}"
            )
        self._sides[face] = [list(row) for row in grid]

    def _layer_index(self, edge: Edge, depth: int) -> int:
        if not 0 <= depth < self._side_length:
            raise RangeError(
                f"Requested layer {depth} of a cube with side length {self._side_length}"
            )
        if edge in (Edge.LEFT_COLUMN, Edge.TOP_ROW):
            return depth
        return self._side_length - 1 - depth

    # State checks

    def is_solved(self) -> bool:
        """Every face shows a single colour and no two faces share one"""
        face_colours = set()
        for grid in self._sides:
            colour = grid[0][0].colour
            if any(cubie.colour is not colour for row in grid for cubie in row):
                return False
            face_colours.add(colour)
        return len(face_colours) == len(Colour)

    def reset(self) -> None:
        """Return to the solved state at the current size and mode"""
        self._sides = [
            create_labels(self._side_length, face.home_colour, self._mode) for face in Face
        ]

    def recreate_at_size(self, side_length: int) -> "Cube":
        """A fresh solved cube of another size, with the same labelling mode"""
        return Cube(side_length, self._mode)

    def copy(self) -> "Cube":
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self._side_length == other._side_length and self._sides == other._sides

    def __repr__(self):
        n = self._side_length
        return f"Cube({n}x{n}x{n}, {self._mode.value})"

    def __str__(self):
        from display import render_net
        return render_net(self)
