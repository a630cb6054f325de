# src/osm_geom/config.py
from dataclasses import dataclass
from enum import Enum


class UseNodes(Enum):
    """Which nodes of a way to use for a linestring or polygon."""

    UNIQUE = "unique"  # Remove consecutive nodes with the same location
    ALL = "all"


class Direction(Enum):
    """Direction of the geometry relative to the way."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass
class FactoryConfig:
    """Defaults used by GeometryFactory when a call does not set them."""

    use_nodes: UseNodes = UseNodes.UNIQUE
    direction: Direction = Direction.FORWARD
