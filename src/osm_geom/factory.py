"""Geometry factory building points, linestrings and (multi)polygons from OSM objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from osm_geom.backends.base import GeometryBackend
from osm_geom.config import Direction, FactoryConfig, UseNodes
from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import GeometryError
from osm_geom.osm import Area, ItemType, Location, Node, NodeRef, NodeRefList, Way
from osm_geom.projection import IdentityProjection, Projection

# Sentinel for "no point streamed yet", distinct from every location.
_NO_LOCATION = object()


class GeometryFactory:
    """
    Builds geometries from OSM objects with a projection and a backend.

    The factory owns both for its whole lifetime. The backend is created here
    from its class, receiving the EPSG code of the projection followed by any
    extra arguments. A factory builds one geometry at a time and must not be
    used from several threads at once.

    Errors raised while building carry the type and id of the innermost OSM
    object involved: a node with an invalid location inside a way is reported
    with the node id, a way with too few points with the way id.

    Args:
        backend_cls: GeometryBackend subclass producing the output geometries
        *backend_args: Extra positional arguments for the backend
        projection: Projection applied to every location (identity by default)
        config: Default node and direction policies
        **backend_kwargs: Extra keyword arguments for the backend

    Example:
        >>> factory = GeometryFactory(WKTBackend, precision=3)
        >>> factory.create_point(Location(8.5, 47.3))
        'POINT (8.5 47.3)'
    """

    def __init__(
        self,
        backend_cls: type[GeometryBackend],
        *backend_args,
        projection: Projection | None = None,
        config: FactoryConfig | None = None,
        **backend_kwargs,
    ):
        self._projection = projection if projection is not None else IdentityProjection()
        self._backend = backend_cls(self._projection.epsg, *backend_args, **backend_kwargs)
        self.config = config if config is not None else FactoryConfig()

    @property
    def projection(self) -> Projection:
        return self._projection

    @property
    def backend(self) -> GeometryBackend:
        return self._backend

    @property
    def epsg(self) -> int:
        return self._projection.epsg

    @property
    def proj_string(self) -> str:
        return self._projection.proj_string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._backend!r}, projection={self._projection!r})"

    def _resolve(
        self, use_nodes: UseNodes | None, direction: Direction | None
    ) -> tuple[UseNodes, Direction]:
        return (
            use_nodes if use_nodes is not None else self.config.use_nodes,
            direction if direction is not None else self.config.direction,
        )

    def _fill(
        self,
        add_location: Callable[[Coordinates], None],
        node_refs: Iterable[NodeRef],
        unique: bool,
    ) -> int:
        """
        Project node locations and hand them to the backend.

        With ``unique`` set, a node whose location equals the location of the
        previously added node is skipped. Only direct neighbours are compared.
        If a node cannot be added the backend is reset, discarding the
        geometry started by the caller.

        Returns:
            Number of points added
        """
        num_points = 0
        last_location = _NO_LOCATION
        for node_ref in node_refs:
            location = node_ref.location
            if unique and location == last_location:
                continue
            last_location = location
            try:
                add_location(self._projection(location))
            except GeometryError as e:
                self._backend.reset()
                e.set_id("node", node_ref.ref)
                raise
            num_points += 1
        return num_points

    @staticmethod
    def _ordered(nodes: NodeRefList, direction: Direction) -> Iterable[NodeRef]:
        if direction is Direction.BACKWARD:
            return reversed(nodes)
        return nodes

    # Point

    def create_point(self, obj: Location | Node | NodeRef) -> Any:
        """
        Create a point from a location, a node or a node reference.

        Raises:
            GeometryError: If the location is invalid; node and node reference
                errors carry the node id
        """
        if isinstance(obj, Location):
            try:
                return self._backend.make_point(self._projection(obj))
            except GeometryError:
                self._backend.reset()
                raise
        node_id = obj.id if isinstance(obj, Node) else obj.ref
        try:
            return self.create_point(obj.location)
        except GeometryError as e:
            e.set_id("node", node_id)
            raise

    # LineString

    def linestring_start(self) -> None:
        self._backend.linestring_start()

    def fill_linestring(self, node_refs: Iterable[NodeRef]) -> int:
        return self._fill(self._backend.linestring_add_location, node_refs, unique=False)

    def fill_linestring_unique(self, node_refs: Iterable[NodeRef]) -> int:
        return self._fill(self._backend.linestring_add_location, node_refs, unique=True)

    def linestring_finish(self, num_points: int) -> Any:
        return self._backend.linestring_finish(num_points)

    def create_linestring(
        self,
        obj: NodeRefList | Way,
        use_nodes: UseNodes | None = None,
        direction: Direction | None = None,
    ) -> Any:
        """
        Create a linestring from a node list or a way.

        Args:
            obj: Nodes of the linestring, or a way
            use_nodes: UNIQUE drops consecutive nodes with the same location
            direction: BACKWARD builds the linestring against the node order

        Raises:
            GeometryError: If fewer than two points remain
        """
        if isinstance(obj, Way):
            try:
                return self.create_linestring(obj.nodes, use_nodes, direction)
            except GeometryError as e:
                e.set_id("way", obj.id)
                raise

        use_nodes, direction = self._resolve(use_nodes, direction)
        try:
            self.linestring_start()
            node_refs = self._ordered(obj, direction)
            if use_nodes is UseNodes.UNIQUE:
                num_points = self.fill_linestring_unique(node_refs)
            else:
                num_points = self.fill_linestring(node_refs)

            if num_points < 2:
                raise GeometryError("need at least two points for linestring")

            return self.linestring_finish(num_points)
        except GeometryError:
            self._backend.reset()
            raise

    # Polygon

    def polygon_start(self) -> None:
        self._backend.polygon_start()

    def fill_polygon(self, node_refs: Iterable[NodeRef]) -> int:
        return self._fill(self._backend.polygon_add_location, node_refs, unique=False)

    def fill_polygon_unique(self, node_refs: Iterable[NodeRef]) -> int:
        return self._fill(self._backend.polygon_add_location, node_refs, unique=True)

    def polygon_finish(self, num_points: int) -> Any:
        return self._backend.polygon_finish(num_points)

    def create_polygon(
        self,
        obj: NodeRefList | Way,
        use_nodes: UseNodes | None = None,
        direction: Direction | None = None,
    ) -> Any:
        """
        Create a polygon from a closed node list or way.

        Raises:
            GeometryError: If fewer than four points remain
        """
        if isinstance(obj, Way):
            try:
                return self.create_polygon(obj.nodes, use_nodes, direction)
            except GeometryError as e:
                e.set_id("way", obj.id)
                raise

        use_nodes, direction = self._resolve(use_nodes, direction)
        try:
            self.polygon_start()
            node_refs = self._ordered(obj, direction)
            if use_nodes is UseNodes.UNIQUE:
                num_points = self.fill_polygon_unique(node_refs)
            else:
                num_points = self.fill_polygon(node_refs)

            if num_points < 4:
                raise GeometryError("need at least four points for polygon")

            return self.polygon_finish(num_points)
        except GeometryError:
            self._backend.reset()
            raise

    # MultiPolygon

    def create_multipolygon(self, area: Area) -> Any:
        """
        Create a multipolygon from the rings of an area.

        Every outer ring starts a new polygon, the inner rings following it
        become its holes. Members that are not rings are ignored. The backend
        is not touched for an area without rings.

        Raises:
            GeometryError: If the area has no rings or starts with an inner
                ring; errors carry the area id unless a node id is attached
        """
        backend = self._backend
        try:
            num_polygons = 0
            num_rings = 0
            for member in area:
                item_type = getattr(member, "item_type", None)
                if item_type is ItemType.OUTER_RING:
                    if num_polygons > 0:
                        backend.multipolygon_polygon_finish()
                    else:
                        backend.multipolygon_start()
                    backend.multipolygon_polygon_start()
                    backend.multipolygon_outer_ring_start()
                    self._fill(backend.multipolygon_add_location, member, unique=True)
                    backend.multipolygon_outer_ring_finish()
                    num_rings += 1
                    num_polygons += 1
                elif item_type is ItemType.INNER_RING:
                    if num_polygons == 0:
                        raise GeometryError("inner ring without outer ring")
                    backend.multipolygon_inner_ring_start()
                    self._fill(backend.multipolygon_add_location, member, unique=True)
                    backend.multipolygon_inner_ring_finish()
                    num_rings += 1

            if num_rings == 0:
                raise GeometryError("invalid area")

            backend.multipolygon_polygon_finish()
            return backend.multipolygon_finish()
        except GeometryError as e:
            backend.reset()
            e.set_id("area", area.id)
            raise
