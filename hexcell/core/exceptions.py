"""
HexCell Exceptions

Exception hierarchy for failures raised at the grid engine boundary.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcell.core.index import H3Index


class HexCellError(Exception):
    """Base exception for HexCell"""

    pass


class InvalidIndexError(HexCellError, ValueError):
    """Raw integer rejected by the engine's validity predicate"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid H3 index: {value:#x}")


class InvalidStringError(HexCellError, ValueError):
    """Text could not be parsed into an H3 index"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid H3 index string: {value!r}")


class FailedConversionError(HexCellError):
    """Engine returned the zero sentinel for an indexing or parent request"""

    def __init__(self):
        super().__init__("Failed to convert to an H3 index")


class IncompatibleIndexesError(HexCellError):
    """
    Grid distance could not be computed between two indexes

    Raised for differing resolutions, pairs further apart than the engine's
    search radius, or paths the engine cannot unfold across a pentagon.
    """

    def __init__(self, left: "H3Index", right: "H3Index"):
        self.left = left
        self.right = right
        super().__init__(f"Incompatible H3 indexes: {left!r} and {right!r}")
