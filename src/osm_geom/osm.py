"""
Read-only OSM entity model consumed by the geometry factory.

Only what geometry building needs is modelled here: locations, node
references, node lists that can be walked in both directions, nodes, ways and
areas made of tagged rings.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from osm_geom.exceptions import InvalidLocationError


class ItemType(Enum):
    """Type tags of the items an area is made of."""

    OUTER_RING = "outer_ring"
    INNER_RING = "inner_ring"
    TAG_LIST = "tag_list"


@dataclass(frozen=True)
class Location:
    """
    Geographic location in WGS84 degrees.

    ``Location()`` is the undefined location. Undefined locations compare equal
    to each other and unequal to every defined location.
    """

    x: float | None = None
    y: float | None = None

    def is_defined(self) -> bool:
        return self.x is not None and self.y is not None

    def is_undefined(self) -> bool:
        return not self.is_defined()

    @property
    def lon(self) -> float:
        """
        Longitude in degrees.

        Raises:
            InvalidLocationError: If the location is undefined
        """
        if self.x is None:
            raise InvalidLocationError("invalid location")
        return self.x

    @property
    def lat(self) -> float:
        """
        Latitude in degrees.

        Raises:
            InvalidLocationError: If the location is undefined
        """
        if self.y is None:
            raise InvalidLocationError("invalid location")
        return self.y

    def __bool__(self) -> bool:
        return self.is_defined()


@dataclass(frozen=True)
class NodeRef:
    """Reference to a node by id, together with the node's location."""

    ref: int
    location: Location = field(default_factory=Location)


class NodeRefList(Sequence):
    """
    Ordered, immutable list of node references.

    Supports ``reversed()`` without copying, which the factory uses to build
    geometries against the direction of a way.
    """

    item_type: ItemType | None = None

    def __init__(self, node_refs: Iterable[NodeRef] = ()):
        self._node_refs = tuple(node_refs)

    def __getitem__(self, index):
        return self._node_refs[index]

    def __len__(self) -> int:
        return len(self._node_refs)

    def __iter__(self) -> Iterator[NodeRef]:
        return iter(self._node_refs)

    def __reversed__(self) -> Iterator[NodeRef]:
        return reversed(self._node_refs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NodeRefList):
            return NotImplemented
        return type(self) is type(other) and self._node_refs == other._node_refs

    def __hash__(self) -> int:
        return hash((type(self), self._node_refs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._node_refs)!r})"

    def is_closed(self) -> bool:
        """Return True if the first and last node are the same node."""
        return len(self) > 0 and self[0].ref == self[-1].ref

    @classmethod
    def from_coords(
        cls, coords: Iterable[tuple[float, float]], first_ref: int = 1
    ) -> NodeRefList:
        """Build a list with consecutive node ids from (lon, lat) pairs."""
        return cls(
            NodeRef(ref, Location(lon, lat))
            for ref, (lon, lat) in enumerate(coords, start=first_ref)
        )


class OuterRing(NodeRefList):
    """Outer ring of an area, starts a new polygon."""

    item_type = ItemType.OUTER_RING


class InnerRing(NodeRefList):
    """Inner ring of an area, a hole in the most recent outer ring."""

    item_type = ItemType.INNER_RING


@dataclass(frozen=True)
class TagList:
    """Tags of an OSM object. Ignored when building geometries."""

    tags: dict[str, str] = field(default_factory=dict)
    item_type: ItemType = field(default=ItemType.TAG_LIST, init=False)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.tags.items())))


@dataclass(frozen=True)
class Node:
    id: int
    location: Location = field(default_factory=Location)


@dataclass(frozen=True)
class Way:
    id: int
    nodes: NodeRefList = field(default_factory=NodeRefList)

    def is_closed(self) -> bool:
        return self.nodes.is_closed()


@dataclass(frozen=True)
class Area:
    """
    Area assembled from a closed way or a multipolygon relation.

    Members are kept in order: every outer ring starts a new polygon and the
    inner rings that follow it are its holes. Area ids encode their origin:
    ``way_id * 2`` for ways and ``relation_id * 2 + 1`` for relations.
    """

    id: int
    members: tuple = ()

    @classmethod
    def from_way_id(cls, way_id: int, members: Iterable = ()) -> Area:
        return cls(way_id * 2, tuple(members))

    @classmethod
    def from_relation_id(cls, relation_id: int, members: Iterable = ()) -> Area:
        return cls(relation_id * 2 + 1, tuple(members))

    def from_way(self) -> bool:
        """Return True if the area was created from a way."""
        return (self.id & 1) == 0

    def orig_id(self) -> int:
        """Id of the way or relation this area was created from."""
        return self.id // 2

    def __iter__(self) -> Iterator:
        return iter(self.members)
