"""Basic usage examples for osm-geom."""

from osm_geom import GeometryFactory, GeometryError, WKTBackend
from osm_geom.core import display_info
from osm_geom.osm import Area, InnerRing, Location, NodeRefList, OuterRing, Way

factory = GeometryFactory(WKTBackend, precision=5)

# Display factory information with rich formatting
display_info(factory)

print(factory.create_point(Location(8.5417, 47.3769)))

way = Way(17, NodeRefList.from_coords([(8.54, 47.37), (8.55, 47.37), (8.55, 47.38)]))
print(factory.create_linestring(way))

area = Area.from_way_id(
    17,
    [
        OuterRing.from_coords([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]),
        InnerRing.from_coords([(2, 2), (4, 2), (4, 4), (2, 2)]),
    ],
)
print(factory.create_multipolygon(area))

# Errors name the object that could not be built
try:
    factory.create_linestring(Way(18, NodeRefList.from_coords([(8.54, 47.37)])))
except GeometryError as e:
    print(f"✖ {e}")
