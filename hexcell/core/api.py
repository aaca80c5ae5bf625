"""
HexCell Public API Functions

Function-style access to the H3Index query surface (h3-py-inspired).
Each function takes an optional ``engine``; the default is the shared
H3Engine.
"""

from typing import Optional

from hexcell.core.geometry import Boundary
from hexcell.core.coords import LatLng
from hexcell.core.index import H3Index
from hexcell.engine import GridEngine, default_engine


def latlng_to_index(
    lat: float,
    lng: float,
    resolution: int,
    engine: Optional[GridEngine] = None,
) -> H3Index:
    """
    Index a point at a resolution

    Args:
        lat: Latitude in decimal degrees
        lng: Longitude in decimal degrees
        resolution: H3 resolution (0-15)
        engine: Grid engine (default: H3Engine)

    Returns:
        H3Index of the containing cell

    Raises:
        FailedConversionError: If the engine cannot index the point

    Examples:
        >>> import hexcell as hc
        >>> hc.latlng_to_index(67.150926864, -168.390888581, 5)
        H3Index(0x850dab63fffffff)
    """
    return H3Index.from_latlng(LatLng(lat, lng), resolution, engine=engine)


def from_int(value: int, engine: Optional[GridEngine] = None) -> H3Index:
    """Validate a raw integer (raises InvalidIndexError)"""
    return H3Index.from_int(value, engine=engine)


def parse(text: str, engine: Optional[GridEngine] = None) -> H3Index:
    """
    Parse an index from its hex text form (raises InvalidStringError)

    Examples:
        >>> hc.parse("0x850dab63fffffff") == hc.from_int(0x850dab63fffffff)
        True
    """
    return H3Index.from_str(text, engine=engine)


def is_valid(value: int, engine: Optional[GridEngine] = None) -> bool:
    """Check a raw integer against the engine's validity predicate without raising"""
    engine = engine or default_engine()
    return bool(engine.is_valid(value))


def centroid(index: H3Index) -> LatLng:
    return index.centroid()


def boundary(index: H3Index) -> Boundary:
    return index.boundary()


def resolution(index: H3Index) -> int:
    return index.resolution()


def base_cell(index: H3Index) -> int:
    return index.base_cell()


def is_pentagon(index: H3Index) -> bool:
    return index.is_pentagon()


def is_res_class_3(index: H3Index) -> bool:
    return index.is_res_class_3()


def parent(index: H3Index, resolution: int) -> H3Index:
    """Ancestor at a coarser resolution (raises FailedConversionError)"""
    return index.parent(resolution)


def distance(a: H3Index, b: H3Index) -> int:
    """Grid distance in cells (raises IncompatibleIndexesError)"""
    return a.distance(b)


def to_text(index: H3Index) -> str:
    """Hex text form of an index; never raises"""
    return index.to_text()
