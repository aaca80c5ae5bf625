"""
Cell Geometry

Polygon footprint of a cell as an ordered list of degree coordinates.
"""

from typing import Iterable, Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from hexcell.core.coords import LatLng, _LatLngRad, radians_to_degrees
from hexcell.engine.base import MAX_CELL_BNDRY_VERTS, RawBoundary


class Boundary(Sequence[LatLng]):
    """
    Ordered cell boundary, at most MAX_CELL_BNDRY_VERTS vertices

    Vertex order is the engine's winding order and defines the polygon
    walk. The ring is open: the first vertex is not repeated at the end.

    Examples:
        >>> boundary = H3Index.from_int(0x850dab63fffffff).boundary()
        >>> polygon = boundary.to_polygon()
    """

    capacity = MAX_CELL_BNDRY_VERTS

    __slots__ = ("_verts",)

    def __init__(self, verts: Iterable[LatLng] = ()):
        verts = tuple(verts)
        if len(verts) > self.capacity:
            raise ValueError(
                f"Boundary holds at most {self.capacity} vertices, got {len(verts)}"
            )
        self._verts = verts

    @classmethod
    def from_raw(cls, raw: RawBoundary) -> "Boundary":
        """Copy the populated prefix of an engine buffer, converting to degrees"""
        count = min(raw.num_verts, raw.capacity)
        return cls(
            radians_to_degrees(_LatLngRad(float(lat), float(lng)))
            for lat, lng in raw.verts[:count]
        )

    def __getitem__(self, i: Union[int, slice]):
        return self._verts[i]

    def __len__(self) -> int:
        return len(self._verts)

    def __iter__(self) -> Iterator[LatLng]:
        return iter(self._verts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Boundary):
            return NotImplemented
        return self._verts == other._verts

    def __hash__(self) -> int:
        return hash(self._verts)

    def __repr__(self) -> str:
        return f"Boundary({list(self._verts)!r})"

    def to_numpy(self) -> NDArray[np.float64]:
        """
        Vertices as an array of shape (n, 2) with (lat, lng) degree columns
        """
        return np.array([(v.lat, v.lng) for v in self._verts], dtype=np.float64).reshape(-1, 2)

    def to_polygon(self) -> Polygon:
        """
        Shapely polygon in (lng, lat) axis order

        Shapely closes the ring itself.
        """
        return Polygon([(v.lng, v.lat) for v in self._verts])
