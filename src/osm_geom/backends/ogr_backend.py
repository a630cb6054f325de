"""
Geometry backend producing OGR geometries.

Note: This module requires GDAL to be installed.
Install with: pip install osm-geom[geo]
"""

from __future__ import annotations

from osm_geom.backends.base import GeometryBackend, PolygonRings, Ring
from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import GeometryError

try:
    from osgeo import ogr, osr

    HAS_OGR = True
except ImportError:
    HAS_OGR = False
    ogr = None
    osr = None


def _check_ogr_available():
    """Check if GDAL/OGR is available."""
    if not HAS_OGR:
        raise ImportError("GDAL is not installed. Install with: pip install osm-geom[geo]")


class OGRBackend(GeometryBackend):
    """
    Builds ``ogr.Geometry`` objects with a spatial reference for the SRID.

    Raises:
        ImportError: If GDAL is not installed
    """

    name = "ogr"

    def __init__(self, srid: int):
        _check_ogr_available()
        super().__init__(srid)
        self.srs = osr.SpatialReference()
        self.srs.ImportFromEPSG(srid)
        self.srs.SetAxisMappingStrategy(osr.OAMS_TRADITIONAL_GIS_ORDER)

    def _ring(self, points: Ring) -> ogr.Geometry:
        ring = ogr.Geometry(ogr.wkbLinearRing)
        for c in points:
            ring.AddPoint_2D(c.x, c.y)
        return ring

    def _polygon(self, outer: Ring, inners: list[Ring]) -> ogr.Geometry:
        polygon = ogr.Geometry(ogr.wkbPolygon)
        polygon.AddGeometry(self._ring(outer))
        for inner in inners:
            polygon.AddGeometry(self._ring(inner))
        return polygon

    def _assign(self, geom: ogr.Geometry) -> ogr.Geometry:
        geom.AssignSpatialReference(self.srs)
        return geom

    def _build_point(self, coords: Coordinates) -> ogr.Geometry:
        point = ogr.Geometry(ogr.wkbPoint)
        point.AddPoint_2D(coords.x, coords.y)
        return self._assign(point)

    def _build_linestring(self, points: Ring) -> ogr.Geometry:
        linestring = ogr.Geometry(ogr.wkbLineString)
        for c in points:
            linestring.AddPoint_2D(c.x, c.y)
        return self._assign(linestring)

    def _build_polygon(self, ring: Ring) -> ogr.Geometry:
        return self._assign(self._polygon(ring, []))

    def _build_multipolygon(self, polygons: list[PolygonRings]) -> ogr.Geometry:
        multipolygon = ogr.Geometry(ogr.wkbMultiPolygon)
        for outer, inners in polygons:
            if multipolygon.AddGeometry(self._polygon(outer, inners)) != 0:
                raise GeometryError("Failed to add polygon to multipolygon")
        return self._assign(multipolygon)
