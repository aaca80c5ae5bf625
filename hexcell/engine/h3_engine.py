"""
H3 Engine

GridEngine implementation backed by Uber's H3 library (h3-py, v4 API).

h3-py is degree-based and raises on failure; this adapter fronts it with
the radian, sentinel-returning contract of ``GridEngine``.
"""

import logging
import math
from typing import Tuple

import h3
import numpy as np
from h3.api import basic_int as h3int

from hexcell.engine.base import RawBoundary

logger = logging.getLogger(__name__)

_UINT64_LIMIT = 1 << 64


class H3Engine:
    """
    Grid engine over ``h3.api.basic_int``

    Identifiers cross this boundary as plain Python ints.

    Examples:
        >>> engine = H3Engine()
        >>> engine.index_for(math.radians(67.150926864), math.radians(-168.390888581), 5)
        599219226732920831
        >>> engine.base_cell_of(0x850dab63fffffff)
        6
    """

    def index_for(self, lat_rad: float, lng_rad: float, res: int) -> int:
        lat = math.degrees(lat_rad)
        lng = math.degrees(lng_rad)
        try:
            return h3int.latlng_to_cell(lat, lng, res)
        except (h3.H3BaseException, OverflowError) as e:
            logger.debug("latlng_to_cell(%s, %s, %s) failed: %s", lat, lng, res, e)
            return 0

    def centroid_of(self, index: int) -> Tuple[float, float]:
        lat, lng = h3int.cell_to_latlng(index)
        return (math.radians(lat), math.radians(lng))

    def boundary_of(self, index: int) -> RawBoundary:
        verts = h3int.cell_to_boundary(index)
        raw = RawBoundary()
        if len(verts) > raw.capacity:
            raise RuntimeError(
                f"h3 returned {len(verts)} boundary vertices for {index:#x}, "
                f"capacity is {raw.capacity}"
            )
        raw.num_verts = len(verts)
        raw.verts[: raw.num_verts] = np.radians(np.asarray(verts, dtype=np.float64))
        return raw

    def resolution_of(self, index: int) -> int:
        return h3int.get_resolution(index)

    def base_cell_of(self, index: int) -> int:
        return h3int.get_base_cell_number(index)

    def parse(self, text: bytes) -> int:
        try:
            value = h3int.str_to_int(text.decode("ascii"))
        except (ValueError, OverflowError) as e:
            # UnicodeDecodeError is a ValueError
            logger.debug("str_to_int(%r) failed: %s", text, e)
            return 0
        if not 0 <= value < _UINT64_LIMIT:
            logger.debug("str_to_int(%r) out of 64-bit range", text)
            return 0
        return value

    def format(self, index: int, buffer: bytearray) -> None:
        encoded = h3int.int_to_str(index).encode("ascii")
        # Leave room for the terminating NUL
        size = min(len(encoded), len(buffer) - 1)
        buffer[:size] = encoded[:size]

    def is_valid(self, index: int) -> bool:
        if not 0 <= index < _UINT64_LIMIT:
            return False
        return bool(h3int.is_valid_cell(index))

    def is_pentagon(self, index: int) -> int:
        return int(h3int.is_pentagon(index))

    def is_class3(self, index: int) -> int:
        return int(h3int.is_res_class_III(index))

    def grid_distance(self, a: int, b: int) -> int:
        try:
            return h3int.grid_distance(a, b)
        except h3.H3BaseException as e:
            logger.debug("grid_distance(%#x, %#x) failed: %s", a, b, e)
            return -1

    def parent_at(self, index: int, res: int) -> int:
        try:
            return h3int.cell_to_parent(index, res)
        except (h3.H3BaseException, OverflowError) as e:
            logger.debug("cell_to_parent(%#x, %s) failed: %s", index, res, e)
            return 0
