"""
Known transforms - named move sequences that produce recognisable patterns
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from cube_state import Cube
from errors import UnsupportedSizeError
from notation import MoveToken, SequenceResult, apply_sequence, parse_sequence

logger = logging.getLogger(__name__)

CHECKERBOARD_CORNERS_3X3X3 = "R2 L2 F2 B2 U2 D2"
CROSSES_3X3X3 = "R2 L' D F2 R' D' R' L U' D R D B2 R' U D2"
NESTED_CUBE_3X3X3 = "F R' U' F' U L' B U' B2 U' F' R' B R2 F U L U"
NESTED_CUBE_4X4X4 = (
    "B' Lw2 L2 Rw2 R2 U2 Lw2 L2 Rw2 R2 B F2 R U' R U R2 U R2 "
    "F' U F' Uw Lw Uw' Fw2 Dw Rw' Uw Fw Dw2 Rw2"
)


@dataclass(frozen=True)
class KnownTransform:
    """
    A named sequence and the cube sizes it is meant for.

    outer_only transforms use nothing but outer-face moves, so they run on
    any side length even though they are designed for the sizes in
    side_lengths. Others need at least minimum_side_length.
    """
    key: str
    name: str
    description: str
    notation: str
    side_lengths: Tuple[int, ...]
    outer_only: bool = True
    minimum_side_length: int = 1

    def supports(self, side_length: int) -> bool:
        if side_length in self.side_lengths:
            return True
        if self.outer_only:
            return side_length >= 1
        return side_length >= self.minimum_side_length

    def sequence(self, side_length: Optional[int] = None) -> List[MoveToken]:
        """The parsed notation, checked against side_length when given"""
        if side_length is not None and not self.supports(side_length):
            raise UnsupportedSizeError(self.key, side_length)
        return parse_sequence(self.notation, side_length)


_CATALOG = (
    KnownTransform(
        key="checkerboard_corners",
        name="Checkerboard Corners",
        description="Designed for 3x3x3 cubes, can run on any size cube",
        notation=CHECKERBOARD_CORNERS_3X3X3,
        side_lengths=(3,),
    ),
    KnownTransform(
        key="crosses",
        name="Crosses",
        description="Puts a cross on each side; designed for 3x3x3 cubes, can run on any size cube",
        notation=CROSSES_3X3X3,
        side_lengths=(3,),
    ),
    KnownTransform(
        key="nested_cube_3x3x3",
        name="Nested Cubes (3)",
        description="Cube in a cube in a cube; designed for 3x3x3 cubes, can run on any size cube",
        notation=NESTED_CUBE_3X3X3,
        side_lengths=(3,),
    ),
    KnownTransform(
        key="nested_cube_4x4x4",
        name="Nested Cubes (4)",
        description="Designed for 4x4x4 cubes, uses wide turns so needs a cube of 4x4x4 or larger",
        notation=NESTED_CUBE_4X4X4,
        side_lengths=(4,),
        outer_only=False,
        minimum_side_length=4,
    ),
)

KNOWN_TRANSFORMS: Mapping[str, KnownTransform] = MappingProxyType(
    {transform.key: transform for transform in _CATALOG}
)


def list_transforms() -> List[KnownTransform]:
    return list(KNOWN_TRANSFORMS.values())


def get_transform(key: str) -> KnownTransform:
    try:
        return KNOWN_TRANSFORMS[key]
    except KeyError:
        raise KeyError(f"No known transform called [{key}]") from None


def apply_known_transform(transform: Union[str, KnownTransform], cube: Cube) -> SequenceResult:
    """Apply a catalogued transform, refusing cube sizes it does not support"""
    if isinstance(transform, str):
        transform = get_transform(transform)
    if not transform.supports(cube.side_length):
        logger.info("Refusing %s on side length %d", transform.key, cube.side_length)
        raise UnsupportedSizeError(transform.key, cube.side_length)
    result = apply_sequence(transform.notation, cube)
    if result.error is not None:
        raise result.error
    return result
