"""
Shuffle functionality for the cube
"""

import logging
import random
from typing import List, Optional

from config import SHUFFLE_MOVES
from cube_state import Cube
from moves import random_rotation, rotate
from notation import MoveToken

logger = logging.getLogger(__name__)


def random_token(side_length: int, rng: Optional[random.Random] = None) -> MoveToken:
    """A random single-layer quarter turn, expressed as notation"""
    rotation = random_rotation(side_length, rng)
    layer = rotation.depth
    face, direction = rotation.face, rotation.direction
    if layer == side_length - 1 and side_length > 1:
        # Name the far layer from its own face so the token parses on this cube
        face, direction, layer = face.opposite, ~direction, 0
    return MoveToken(face, direction, depth=layer + 1)


def scramble_sequence(side_length: int, moves: int = SHUFFLE_MOVES,
                      rng: Optional[random.Random] = None) -> List[MoveToken]:
    """A scramble of `moves` random turns that never undoes its previous turn"""
    rng = rng or random.Random()
    tokens: List[MoveToken] = []
    while len(tokens) < moves:
        token = random_token(side_length, rng)
        if tokens and token == tokens[-1].inverse():
            continue
        tokens.append(token)
    return tokens


def shuffle_cube(cube: Cube, moves: int = SHUFFLE_MOVES,
                 rng: Optional[random.Random] = None) -> List[MoveToken]:
    """Scramble the cube in place and return the turns that were made"""
    tokens = scramble_sequence(cube.side_length, moves, rng)
    for token in tokens:
        rotate(cube, token.to_rotation())
    logger.debug("Shuffled with %s", " ".join(str(token) for token in tokens))
    return tokens

