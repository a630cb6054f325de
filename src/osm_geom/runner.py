"""Build geometries for a batch of OSM objects and report the failures."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from rich.table import Table

from osm_geom.core import console
from osm_geom.exceptions import GeometryError
from osm_geom.factory import GeometryFactory
from osm_geom.osm import Area, Node, Way


@dataclass
class BuildResult:
    """
    Geometries and errors collected by build_geometries.

    Attributes:
        nodes: Node id to point
        ways: Way id to linestring or polygon
        areas: Area id to multipolygon
        errors: Errors of the objects that could not be built
    """

    nodes: dict[int, Any] = field(default_factory=dict)
    ways: dict[int, Any] = field(default_factory=dict)
    areas: dict[int, Any] = field(default_factory=dict)
    errors: list[GeometryError] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.areas)


def build_geometries(
    factory: GeometryFactory,
    objects: Iterable[Node | Way | Area],
    ways_as_polygons: bool = False,
    verbose: bool = False,
) -> BuildResult:
    """
    Build a geometry for every node, way and area.

    Nodes become points and areas multipolygons. Ways become linestrings, or
    polygons for closed ways when ``ways_as_polygons`` is set. Objects that
    fail are recorded in ``errors`` and skipped.

    Args:
        factory: Factory used for all geometries
        objects: Nodes, ways and areas in any order
        ways_as_polygons: Build closed ways as polygons
        verbose: Print progress and a table of the failures

    Returns:
        BuildResult with the geometries by object id and the errors

    Raises:
        TypeError: If an object is not a Node, Way or Area
    """
    result = BuildResult()

    for obj in objects:
        try:
            if isinstance(obj, Node):
                result.nodes[obj.id] = factory.create_point(obj)
            elif isinstance(obj, Way):
                if ways_as_polygons and obj.is_closed():
                    result.ways[obj.id] = factory.create_polygon(obj)
                else:
                    result.ways[obj.id] = factory.create_linestring(obj)
            elif isinstance(obj, Area):
                result.areas[obj.id] = factory.create_multipolygon(obj)
            else:
                raise TypeError(f"Cannot build a geometry from {type(obj).__name__}")
        except GeometryError as e:
            result.errors.append(e)

    if verbose:
        print(
            f"Built {len(result.nodes)} points, {len(result.ways)} way geometries "
            f"and {len(result.areas)} multipolygons"
        )
        if result.errors:
            print_errors(result.errors)

    return result


def print_errors(errors: list[GeometryError]) -> None:
    """Print geometry errors as a rich table."""
    table = Table(title=f"Geometry errors ({len(errors)})")

    table.add_column("Object", style="cyan", no_wrap=True)
    table.add_column("Id", style="cyan")
    table.add_column("Error", style="red")

    for error in errors:
        table.add_row(error.object_type or "-", str(error.id or "-"), error.message)

    console.print(table)
