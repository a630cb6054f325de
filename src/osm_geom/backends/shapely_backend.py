"""Geometry backend producing shapely geometries."""

from __future__ import annotations

import shapely
from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry

from osm_geom.backends.base import GeometryBackend, PolygonRings, Ring
from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import GeometryError


def _coords(ring: Ring) -> list[tuple[float, float]]:
    return [c.as_tuple() for c in ring]


class ShapelyBackend(GeometryBackend):
    """
    Builds shapely geometries tagged with the SRID of the projection.

    Subclasses can override ``_output`` to encode the finished geometry.
    """

    name = "shapely"

    def _output(self, geom: BaseGeometry):
        return geom

    def _finish(self, build, *args):
        try:
            geom = build(*args)
        except (GEOSException, ValueError, TypeError) as e:
            raise GeometryError(f"Failed to build {build.__name__}: {e}") from e
        return self._output(shapely.set_srid(geom, self.srid))

    def _build_point(self, coords: Coordinates):
        return self._finish(Point, coords.x, coords.y)

    def _build_linestring(self, points: Ring):
        return self._finish(LineString, _coords(points))

    def _build_polygon(self, ring: Ring):
        return self._finish(Polygon, _coords(ring))

    def _build_multipolygon(self, polygons: list[PolygonRings]):
        parts = [
            (_coords(outer), [_coords(inner) for inner in inners]) for outer, inners in polygons
        ]
        return self._finish(MultiPolygon, parts)
