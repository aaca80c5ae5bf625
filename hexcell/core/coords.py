"""
Coordinate Model

Public coordinates are in decimal degrees. The grid engine speaks radians
only, so every call into it goes through ``degrees_to_radians`` and every
answer comes back through ``radians_to_degrees``.

No range checking happens here: out-of-range latitudes and longitudes are
handed to the engine unchanged and its answer is authoritative.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi


@dataclass(frozen=True)
class LatLng:
    """
    Geographic point in decimal degrees

    Attributes:
        lat: Latitude in degrees
        lng: Longitude in degrees

    Examples:
        >>> point = LatLng(67.150926864, -168.390888581)
        >>> lat, lng = point
    """

    lat: float
    lng: float

    def __iter__(self) -> Iterator[float]:
        yield self.lat
        yield self.lng

    @classmethod
    def coerce(cls, point: Union["LatLng", Tuple[float, float]]) -> "LatLng":
        """Accept a LatLng or any (lat, lng) pair"""
        if isinstance(point, cls):
            return point
        lat, lng = point
        return cls(float(lat), float(lng))


@dataclass(frozen=True)
class _LatLngRad:
    # Radian twin of LatLng, only used to cross into the engine.
    lat: float
    lng: float


def degrees_to_radians(coord: LatLng) -> _LatLngRad:
    return _LatLngRad(coord.lat * DEG_TO_RAD, coord.lng * DEG_TO_RAD)


def radians_to_degrees(coord: _LatLngRad) -> LatLng:
    return LatLng(coord.lat * RAD_TO_DEG, coord.lng * RAD_TO_DEG)
