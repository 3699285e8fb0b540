"""
Error types raised and reported by the cube model and notation layer
"""

from typing import Optional


class CubeError(Exception):
    """Base class for every recoverable cube error"""


class ConstructionError(CubeError, ValueError):
    """Invalid side length, or unique-character alphabet exhausted"""


class RangeError(CubeError, IndexError):
    """A layer depth outside what the cube (or the face) supports"""


class UnsupportedSizeError(CubeError):
    """A known transform applied to a cube size it is not defined for"""

    def __init__(self, transform: str, side_length: int):
        self.transform = transform
        self.side_length = side_length
        super().__init__(
            f"Transform [{transform}] does not support a "
            f"{side_length}x{side_length}x{side_length} cube"
        )


class ParseError(CubeError):
    """
    A notation token that could not be understood.

    Carries the offending token and its zero-based position in the sequence.
    """

    reason = "Unsupported token in notation string"

    def __init__(self, token: str, index: int = 0, detail: Optional[str] = None):
        self.token = token
        self.index = index
        self.detail = detail
        message = f"{self.reason}: [{token}] at position {index}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownFaceError(ParseError):
    reason = "Unknown face in notation string"


class MalformedTokenError(ParseError):
    reason = "Malformed modifier in notation string"


class DepthOutOfRangeError(ParseError, RangeError):
    reason = "Layer depth out of range in notation string"


class GridInvariantError(AssertionError):
    """
    A rotation tried to write a strip or side of the wrong length.

    This signals a bug in a rotation primitive rather than bad input and is
    not a CubeError.
    """
