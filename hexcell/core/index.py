"""
H3 Index

Validated, immutable wrapper around a 64-bit H3 cell identifier.

Every way of obtaining an ``H3Index`` is a validation gate:
- ``H3Index(value)`` / ``H3Index.from_int(value)``: the engine's validity
  predicate must accept the integer
- ``H3Index.from_str(text)``: the engine's parser must produce a nonzero id
- ``H3Index.from_latlng(point, res)``: the engine's indexing call must
  produce a nonzero id

Equality, hashing and ordering use the raw integer. Numeric order of H3
identifiers carries no spatial meaning.
"""

import functools
import logging
from typing import Optional, Tuple, Union

from hexcell.core.geometry import Boundary
from hexcell.core.coords import LatLng, _LatLngRad, degrees_to_radians, radians_to_degrees
from hexcell.core.exceptions import (
    FailedConversionError,
    IncompatibleIndexesError,
    InvalidIndexError,
    InvalidStringError,
)
from hexcell.engine import FORMAT_BUFFER_SIZE, GridEngine, default_engine

logger = logging.getLogger(__name__)

# Returned by to_text() if the engine writes something that is not ASCII
FALLBACK_TEXT = "<invalid index>"


@functools.total_ordering
class H3Index:
    """
    H3 cell identifier

    Args:
        value: Raw 64-bit identifier
        engine: Grid engine to validate and query with (default: H3Engine)

    Raises:
        InvalidIndexError: If the engine does not recognise ``value`` as a cell

    Examples:
        >>> cell = H3Index.from_latlng(LatLng(67.150926864, -168.390888581), 5)
        >>> str(cell)
        '850dab63fffffff'
        >>> cell.base_cell()
        6
        >>> cell.parent(3).resolution()
        3
    """

    __slots__ = ("_value", "_engine")

    def __init__(self, value: int, engine: Optional[GridEngine] = None):
        engine = engine or default_engine()
        if not engine.is_valid(value):
            raise InvalidIndexError(value)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_engine", engine)

    @classmethod
    def _wrap(cls, value: int, engine: GridEngine) -> "H3Index":
        # Trusted path for ids the engine has just produced.
        index = object.__new__(cls)
        object.__setattr__(index, "_value", value)
        object.__setattr__(index, "_engine", engine)
        return index

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int, engine: Optional[GridEngine] = None) -> "H3Index":
        """
        Validate a raw integer as an H3 index

        Use this for any integer that did not come straight out of the
        engine; not every 64-bit pattern is a cell.
        """
        return cls(value, engine)

    @classmethod
    def from_str(cls, text: str, engine: Optional[GridEngine] = None) -> "H3Index":
        """
        Parse the hexadecimal text form of an index

        Args:
            text: Hex digits, optionally ``0x``-prefixed (e.g. "850dab63fffffff")
            engine: Grid engine (default: H3Engine)

        Raises:
            InvalidStringError: If ``text`` contains a NUL character or the
                engine cannot parse it
        """
        engine = engine or default_engine()
        if "\0" in text:
            logger.debug("Rejected index string with embedded NUL: %r", text)
            raise InvalidStringError(text)

        value = engine.parse(text.encode("utf-8"))
        if value == 0:
            logger.debug("Engine could not parse index string %r", text)
            raise InvalidStringError(text)
        return cls._wrap(value, engine)

    @classmethod
    def from_latlng(
        cls,
        point: Union[LatLng, Tuple[float, float]],
        resolution: int,
        engine: Optional[GridEngine] = None,
    ) -> "H3Index":
        """
        Index a point at the given resolution

        Args:
            point: LatLng or (lat, lng) pair in decimal degrees
            resolution: H3 resolution (0-15)
            engine: Grid engine (default: H3Engine)

        Raises:
            FailedConversionError: If the engine cannot index the point,
                e.g. because ``resolution`` is out of range
        """
        engine = engine or default_engine()
        rad = degrees_to_radians(LatLng.coerce(point))
        value = engine.index_for(rad.lat, rad.lng, resolution)
        if value == 0:
            logger.debug("Engine could not index %r at resolution %s", point, resolution)
            raise FailedConversionError()
        return cls._wrap(value, engine)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        """Raw 64-bit identifier"""
        return self._value

    @property
    def engine(self) -> GridEngine:
        return self._engine

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "H3Index":
        return self

    def __deepcopy__(self, memo) -> "H3Index":
        return self

    def __reduce__(self):
        return (H3Index._wrap, (self._value, self._engine))

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, H3Index):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, H3Index):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"H3Index({self._value:#x})"

    def __str__(self) -> str:
        return self.to_text()

    # -------------------------------------------------------------------------
    # Geo queries
    # -------------------------------------------------------------------------

    def centroid(self) -> LatLng:
        """Cell center in decimal degrees"""
        lat, lng = self._engine.centroid_of(self._value)
        return radians_to_degrees(_LatLngRad(lat, lng))

    def boundary(self) -> Boundary:
        """Cell polygon in decimal degrees, freshly built on every call"""
        return Boundary.from_raw(self._engine.boundary_of(self._value))

    # -------------------------------------------------------------------------
    # Hierarchy & topology
    # -------------------------------------------------------------------------

    def resolution(self) -> int:
        return self._engine.resolution_of(self._value)

    def base_cell(self) -> int:
        return self._engine.base_cell_of(self._value)

    def is_pentagon(self) -> bool:
        return bool(self._engine.is_pentagon(self._value))

    def is_res_class_3(self) -> bool:
        """True if this resolution uses the Class III (rotated) grid orientation"""
        return bool(self._engine.is_class3(self._value))

    def parent(self, resolution: int) -> "H3Index":
        """
        Ancestor at a coarser (or the same) resolution

        Raises:
            FailedConversionError: If ``resolution`` is finer than this
                index's resolution or outside the valid range
        """
        value = self._engine.parent_at(self._value, resolution)
        if value == 0:
            logger.debug("No parent of %r at resolution %s", self, resolution)
            raise FailedConversionError()
        return H3Index._wrap(value, self._engine)

    def distance(self, other: "H3Index") -> int:
        """
        Grid distance in cells to ``other``

        Raises:
            IncompatibleIndexesError: If the engine cannot compute a distance,
                e.g. the indexes have different resolutions
        """
        result = self._engine.grid_distance(self._value, other._value)
        if result < 0:
            logger.debug("Engine returned %s for distance %r -> %r", result, self, other)
            raise IncompatibleIndexesError(self, other)
        return result

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """
        Lowercase hexadecimal form without prefix, e.g. "850dab63fffffff"

        Never raises; returns FALLBACK_TEXT if the engine output is not ASCII.
        """
        buffer = bytearray(FORMAT_BUFFER_SIZE)
        self._engine.format(self._value, buffer)
        raw = bytes(buffer).rstrip(b"\0")
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError:
            logger.warning("Engine produced non-ASCII text for %#x: %r", self._value, raw)
            return FALLBACK_TEXT
