"""osm-geom: build points, linestrings and multipolygons from OSM objects."""

__version__ = "0.1.0"

from .backends import GeoJSONBackend, GeometryBackend, ShapelyBackend, WKBBackend, WKTBackend
from .config import Direction, FactoryConfig, UseNodes
from .exceptions import BackendStateError, GeometryError, OsmGeomError, ProjectionError
from .factory import GeometryFactory
from .projection import IdentityProjection, MercatorProjection, ProjProjection

__all__ = [
    "__version__",
    "GeometryFactory",
    "FactoryConfig",
    "UseNodes",
    "Direction",
    "GeometryBackend",
    "ShapelyBackend",
    "WKTBackend",
    "WKBBackend",
    "GeoJSONBackend",
    "IdentityProjection",
    "ProjProjection",
    "MercatorProjection",
    "OsmGeomError",
    "GeometryError",
    "ProjectionError",
    "BackendStateError",
]
