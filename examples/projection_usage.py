"""Projection examples for osm-geom."""

from osm_geom import GeometryFactory, MercatorProjection, ProjProjection, ShapelyBackend
from osm_geom.osm import NodeRefList, Way
from osm_geom.runner import build_geometries

way = Way(1, NodeRefList.from_coords([(-0.1276, 51.5074), (2.3522, 48.8566)]))

# Web mercator
factory = GeometryFactory(ShapelyBackend, projection=MercatorProjection())
line = factory.create_linestring(way)
print(f"EPSG:{factory.epsg} length: {line.length:.0f} m")

# UTM zone 31N
factory = GeometryFactory(ShapelyBackend, projection=ProjProjection(32631))
result = build_geometries(factory, [way], verbose=True)
print(f"EPSG:{factory.epsg} length: {result.ways[1].length:.0f} m")
