"""
HexCell - Typed, validated access to the H3 hexagonal grid

Degree-based coordinates in, validated cell identifiers out. The grid
mathematics is delegated to a pluggable engine (H3 by default).

Quick Start:
    >>> import hexcell as hc
    >>>
    >>> cell = hc.latlng_to_index(67.150926864, -168.390888581, 5)
    >>> str(cell)
    '850dab63fffffff'
    >>> cell.centroid()
    LatLng(lat=67.15092686397712, lng=-168.39088858096966)
    >>>
    >>> # Hierarchy and topology
    >>> cell.parent(3).resolution()
    3
    >>> hc.parse("821c07fffffffff").is_pentagon()
    True
"""

from hexcell.core import (
    DEG_TO_RAD,
    FALLBACK_TEXT,
    RAD_TO_DEG,
    Boundary,
    FailedConversionError,
    H3Index,
    HexCellError,
    IncompatibleIndexesError,
    InvalidIndexError,
    InvalidStringError,
    LatLng,
    base_cell,
    boundary,
    centroid,
    degrees_to_radians,
    distance,
    from_int,
    is_pentagon,
    is_res_class_3,
    is_valid,
    latlng_to_index,
    parent,
    parse,
    radians_to_degrees,
    resolution,
    to_text,
)
from hexcell.engine import (
    MAX_CELL_BNDRY_VERTS,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
    GridEngine,
    H3Engine,
    default_engine,
)

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "DEG_TO_RAD",
    "FALLBACK_TEXT",
    "FailedConversionError",
    "GridEngine",
    "H3Engine",
    "H3Index",
    "HexCellError",
    "IncompatibleIndexesError",
    "InvalidIndexError",
    "InvalidStringError",
    "LatLng",
    "MAX_CELL_BNDRY_VERTS",
    "MAX_RESOLUTION",
    "MIN_RESOLUTION",
    "RAD_TO_DEG",
    "__version__",
    "base_cell",
    "boundary",
    "centroid",
    "default_engine",
    "degrees_to_radians",
    "distance",
    "from_int",
    "is_pentagon",
    "is_res_class_3",
    "is_valid",
    "latlng_to_index",
    "parent",
    "parse",
    "radians_to_degrees",
    "resolution",
    "to_text",
]
