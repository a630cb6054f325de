"""
Construction protocol every geometry backend implements.

A backend is driven incrementally by the geometry factory:

- point: ``make_point``
- linestring: ``linestring_start``, ``linestring_add_location``...,
  ``linestring_finish``
- polygon: ``polygon_start``, ``polygon_add_location``..., ``polygon_finish``
- multipolygon: ``multipolygon_start``, then for every polygon
  ``multipolygon_polygon_start``, an outer ring, any number of inner rings
  and ``multipolygon_polygon_finish``, then ``multipolygon_finish``. Rings
  are opened with ``multipolygon_outer_ring_start`` or
  ``multipolygon_inner_ring_start``, filled with
  ``multipolygon_add_location`` and closed with the matching ``*_finish``.

The base class tracks where in this sequence the backend is and raises
BackendStateError for calls made out of order. It buffers the points and
rings; subclasses only turn the buffered coordinates into their output type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import BackendStateError, GeometryError

Ring = list[Coordinates]
PolygonRings = tuple[Ring, list[Ring]]


class BackendState(Enum):
    IDLE = "idle"
    LINESTRING = "linestring"
    POLYGON = "polygon"
    MULTIPOLYGON = "multipolygon"
    MP_POLYGON = "multipolygon polygon"
    MP_OUTER_RING = "multipolygon outer ring"
    MP_RINGS = "multipolygon polygon with outer ring"
    MP_INNER_RING = "multipolygon inner ring"


_S = BackendState

# (state, operation) -> next state
TRANSITIONS: dict[tuple[BackendState, str], BackendState] = {
    (_S.IDLE, "make_point"): _S.IDLE,
    (_S.IDLE, "linestring_start"): _S.LINESTRING,
    (_S.LINESTRING, "linestring_add_location"): _S.LINESTRING,
    (_S.LINESTRING, "linestring_finish"): _S.IDLE,
    (_S.IDLE, "polygon_start"): _S.POLYGON,
    (_S.POLYGON, "polygon_add_location"): _S.POLYGON,
    (_S.POLYGON, "polygon_finish"): _S.IDLE,
    (_S.IDLE, "multipolygon_start"): _S.MULTIPOLYGON,
    (_S.MULTIPOLYGON, "multipolygon_polygon_start"): _S.MP_POLYGON,
    (_S.MP_POLYGON, "multipolygon_outer_ring_start"): _S.MP_OUTER_RING,
    (_S.MP_OUTER_RING, "multipolygon_add_location"): _S.MP_OUTER_RING,
    (_S.MP_OUTER_RING, "multipolygon_outer_ring_finish"): _S.MP_RINGS,
    (_S.MP_RINGS, "multipolygon_inner_ring_start"): _S.MP_INNER_RING,
    (_S.MP_INNER_RING, "multipolygon_add_location"): _S.MP_INNER_RING,
    (_S.MP_INNER_RING, "multipolygon_inner_ring_finish"): _S.MP_RINGS,
    (_S.MP_RINGS, "multipolygon_polygon_finish"): _S.MULTIPOLYGON,
    (_S.MULTIPOLYGON, "multipolygon_finish"): _S.IDLE,
}


class GeometryBackend(ABC):
    """
    Base class of all geometry backends.

    Backends are stateful and build one geometry at a time. They are not safe
    to share between threads.

    Args:
        srid: EPSG code of the coordinates the backend receives
    """

    name = "abstract"

    def __init__(self, srid: int):
        self.srid = srid
        self._state = BackendState.IDLE
        self._points: Ring = []
        self._outer: Ring = []
        self._inners: list[Ring] = []
        self._polygons: list[PolygonRings] = []

    @property
    def state(self) -> BackendState:
        return self._state

    def _transition(self, operation: str) -> None:
        try:
            self._state = TRANSITIONS[(self._state, operation)]
        except KeyError:
            raise BackendStateError(
                f"{operation}() not allowed in state '{self._state.value}'"
            ) from None

    def reset(self) -> None:
        """Discard any partially built geometry and return to the idle state."""
        self._state = BackendState.IDLE
        self._points = []
        self._outer = []
        self._inners = []
        self._polygons = []

    @staticmethod
    def _check(coords: Coordinates) -> Coordinates:
        if not coords.valid():
            raise GeometryError(f"invalid coordinates ({coords.x}, {coords.y})")
        return coords

    def _check_ring(self) -> None:
        if not self._points:
            raise GeometryError("empty ring in multipolygon")

    def _take_points(self, num_points: int, operation: str) -> Ring:
        points = self._points
        self._points = []
        if num_points != len(points):
            self.reset()
            raise BackendStateError(
                f"{operation}() called with {num_points} points, {len(points)} were added"
            )
        return points

    # Point

    def make_point(self, coords: Coordinates) -> Any:
        self._transition("make_point")
        return self._build_point(self._check(coords))

    # LineString

    def linestring_start(self) -> None:
        self._transition("linestring_start")
        self._points = []

    def linestring_add_location(self, coords: Coordinates) -> None:
        self._transition("linestring_add_location")
        self._points.append(self._check(coords))

    def linestring_finish(self, num_points: int) -> Any:
        self._transition("linestring_finish")
        return self._build_linestring(self._take_points(num_points, "linestring_finish"))

    # Polygon

    def polygon_start(self) -> None:
        self._transition("polygon_start")
        self._points = []

    def polygon_add_location(self, coords: Coordinates) -> None:
        self._transition("polygon_add_location")
        self._points.append(self._check(coords))

    def polygon_finish(self, num_points: int) -> Any:
        self._transition("polygon_finish")
        return self._build_polygon(self._take_points(num_points, "polygon_finish"))

    # MultiPolygon

    def multipolygon_start(self) -> None:
        self._transition("multipolygon_start")
        self._polygons = []

    def multipolygon_polygon_start(self) -> None:
        self._transition("multipolygon_polygon_start")
        self._outer = []
        self._inners = []

    def multipolygon_outer_ring_start(self) -> None:
        self._transition("multipolygon_outer_ring_start")
        self._points = []

    def multipolygon_outer_ring_finish(self) -> None:
        self._transition("multipolygon_outer_ring_finish")
        self._check_ring()
        self._outer = self._points
        self._points = []

    def multipolygon_inner_ring_start(self) -> None:
        self._transition("multipolygon_inner_ring_start")
        self._points = []

    def multipolygon_inner_ring_finish(self) -> None:
        self._transition("multipolygon_inner_ring_finish")
        self._check_ring()
        self._inners.append(self._points)
        self._points = []

    def multipolygon_add_location(self, coords: Coordinates) -> None:
        self._transition("multipolygon_add_location")
        self._points.append(self._check(coords))

    def multipolygon_polygon_finish(self) -> None:
        self._transition("multipolygon_polygon_finish")
        self._polygons.append((self._outer, self._inners))
        self._outer = []
        self._inners = []

    def multipolygon_finish(self) -> Any:
        self._transition("multipolygon_finish")
        polygons = self._polygons
        self._polygons = []
        return self._build_multipolygon(polygons)

    # Output

    @abstractmethod
    def _build_point(self, coords: Coordinates) -> Any: ...

    @abstractmethod
    def _build_linestring(self, points: Ring) -> Any: ...

    @abstractmethod
    def _build_polygon(self, ring: Ring) -> Any: ...

    @abstractmethod
    def _build_multipolygon(self, polygons: list[PolygonRings]) -> Any: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(srid={self.srid})"
