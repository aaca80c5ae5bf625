"""
Grid Engine Protocol

Function-level contract of the hexagonal grid engine that HexCell wraps.

The engine is radian-based and signals failure with sentinels instead of
raising: ``0`` for identifier-producing calls and a negative number for
grid distance. HexCell translates those sentinels into exceptions; engine
implementations must not raise for ordinary failures.

Thread safety is whatever the engine provides. HexCell holds no locks and
shares no mutable state between calls.
"""

from dataclasses import dataclass, field
from typing import Protocol, Tuple

import numpy as np
from numpy.typing import NDArray

# Worst case: pentagon (5 vertices) plus 5 distortion vertices on edges
# crossing icosahedron faces.
MAX_CELL_BNDRY_VERTS = 10

# 15 hex digits + NUL, rounded up by the engine to 17 bytes.
FORMAT_BUFFER_SIZE = 17

MIN_RESOLUTION = 0
MAX_RESOLUTION = 15


def _empty_verts() -> NDArray[np.float64]:
    return np.zeros((MAX_CELL_BNDRY_VERTS, 2), dtype=np.float64)


@dataclass
class RawBoundary:
    """
    Fixed-capacity boundary buffer filled by the engine

    Attributes:
        num_verts: Number of populated rows in ``verts``
        verts: Array of shape (MAX_CELL_BNDRY_VERTS, 2) holding (lat, lng)
               radians; rows at or past ``num_verts`` are undefined
    """

    num_verts: int = 0
    verts: NDArray[np.float64] = field(default_factory=_empty_verts)

    @property
    def capacity(self) -> int:
        return len(self.verts)


class GridEngine(Protocol):
    """
    Hexagonal grid engine contract

    All coordinates are in radians and all identifiers are raw 64-bit
    unsigned integers.
    """

    def index_for(self, lat_rad: float, lng_rad: float, res: int) -> int:
        """
        Index a point at a resolution

        Returns:
            Identifier of the containing cell, or 0 on failure
        """
        ...

    def centroid_of(self, index: int) -> Tuple[float, float]:
        """Return the (lat, lng) radian centroid of a valid cell"""
        ...

    def boundary_of(self, index: int) -> RawBoundary:
        """Return the radian boundary buffer of a valid cell"""
        ...

    def resolution_of(self, index: int) -> int:
        ...

    def base_cell_of(self, index: int) -> int:
        ...

    def parse(self, text: bytes) -> int:
        """
        Parse hexadecimal text (no embedded NUL bytes)

        Returns:
            Parsed identifier, or 0 if the text is not a number
        """
        ...

    def format(self, index: int, buffer: bytearray) -> None:
        """
        Write the lowercase hex form of ``index`` into ``buffer``

        ``buffer`` is at least FORMAT_BUFFER_SIZE bytes; unused trailing
        bytes are left as NUL.
        """
        ...

    def is_valid(self, index: int) -> bool:
        ...

    def is_pentagon(self, index: int) -> int:
        """Nonzero if the cell is one of the 12 pentagons (or a descendant)"""
        ...

    def is_class3(self, index: int) -> int:
        """Nonzero if the cell's resolution has Class III orientation"""
        ...

    def grid_distance(self, a: int, b: int) -> int:
        """
        Grid hops between two cells

        Returns:
            Non-negative distance, or a negative number if not computable
        """
        ...

    def parent_at(self, index: int, res: int) -> int:
        """
        Ancestor of ``index`` at the coarser resolution ``res``

        Returns:
            Parent identifier, or 0 if ``res`` is not a valid ancestor level
        """
        ...
