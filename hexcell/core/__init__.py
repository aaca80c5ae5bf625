"""
HexCell Core Module

Coordinate model, index type, boundary model, exceptions and API functions.
"""

from hexcell.core.coords import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    LatLng,
    degrees_to_radians,
    radians_to_degrees,
)
from hexcell.core.geometry import Boundary
from hexcell.core.index import FALLBACK_TEXT, H3Index
from hexcell.core.exceptions import (
    HexCellError,
    InvalidIndexError,
    InvalidStringError,
    FailedConversionError,
    IncompatibleIndexesError,
)
from hexcell.core.api import (
    latlng_to_index,
    from_int,
    parse,
    is_valid,
    centroid,
    boundary,
    resolution,
    base_cell,
    is_pentagon,
    is_res_class_3,
    parent,
    distance,
    to_text,
)

__all__ = [
    # Types
    "LatLng",
    "H3Index",
    "Boundary",
    # Constants
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "FALLBACK_TEXT",
    # Conversions
    "degrees_to_radians",
    "radians_to_degrees",
    # Functions
    "latlng_to_index",
    "from_int",
    "parse",
    "is_valid",
    "centroid",
    "boundary",
    "resolution",
    "base_cell",
    "is_pentagon",
    "is_res_class_3",
    "parent",
    "distance",
    "to_text",
    # Exceptions
    "HexCellError",
    "InvalidIndexError",
    "InvalidStringError",
    "FailedConversionError",
    "IncompatibleIndexesError",
]
