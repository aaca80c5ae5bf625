"""
HexCell Engine Module

Grid engine contract and the default H3-backed implementation.
"""

from functools import lru_cache

from hexcell.engine.base import (
    FORMAT_BUFFER_SIZE,
    MAX_CELL_BNDRY_VERTS,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
    GridEngine,
    RawBoundary,
)
from hexcell.engine.h3_engine import H3Engine


@lru_cache(maxsize=None)
def default_engine() -> GridEngine:
    """Process-wide engine used when no ``engine`` argument is given"""
    return H3Engine()


__all__ = [
    "FORMAT_BUFFER_SIZE",
    "GridEngine",
    "H3Engine",
    "MAX_CELL_BNDRY_VERTS",
    "MAX_RESOLUTION",
    "MIN_RESOLUTION",
    "RawBoundary",
    "default_engine",
]
