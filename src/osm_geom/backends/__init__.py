"""Geometry backends turning projected coordinates into output geometries."""

from osm_geom.backends.base import BackendState, GeometryBackend
from osm_geom.backends.ogr_backend import HAS_OGR, OGRBackend
from osm_geom.backends.shapely_backend import ShapelyBackend
from osm_geom.backends.text import GeoJSONBackend, WKBBackend, WKTBackend

__all__ = [
    "BackendState",
    "GeometryBackend",
    "ShapelyBackend",
    "WKTBackend",
    "WKBBackend",
    "GeoJSONBackend",
    "OGRBackend",
    "HAS_OGR",
]
