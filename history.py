"""
Move history management - what has been applied to a cube, and undo
"""

import logging
from typing import Iterable, List, Optional

from cube_state import Cube
from moves import rotate
from notation import MoveToken, format_sequence

logger = logging.getLogger(__name__)

MAX_HISTORY = 1000  # Keep last N moves


class MoveHistory:
    """In-memory record of the tokens applied to one cube"""

    def __init__(self, max_moves: int = MAX_HISTORY):
        self.max_moves = max_moves
        self._moves: List[MoveToken] = []

    def record(self, tokens: Iterable[MoveToken]):
        self._moves.extend(tokens)
        # Keep only last max_moves entries
        if self.max_moves < 1:
            self._moves.clear()
        else:
            del self._moves[:-self.max_moves]

    def undo(self, cube: Cube) -> Optional[MoveToken]:
        """Undo the latest move on `cube`, returning the inverse that was applied"""
        if not self._moves:
            return None
        inverse = self._moves.pop().inverse()
        rotate(cube, inverse.to_rotation())
        logger.debug("Undo with %s", inverse)
        return inverse

    def clear(self):
        self._moves.clear()

    def as_notation(self) -> str:
        return format_sequence(self._moves)

    @property
    def moves(self) -> List[MoveToken]:
        return list(self._moves)

    def __len__(self):
        return len(self._moves)
