"""Custom exceptions for osm-geom."""

from __future__ import annotations


class OsmGeomError(Exception):
    """Base exception for osm-geom."""

    pass


class GeometryError(OsmGeomError):
    """
    Raised when a geometry cannot be built from its source data.

    An example would be a linestring with less than two points. The error can
    carry the type and id of the OSM object it was raised for. Only the first
    id attached is kept, so an error raised for a node inside a way keeps
    reporting the node.

    Attributes:
        message: Human readable message including the object id, if any
        object_type: Type of the offending object ("node", "way", "area")
        id: Id of the offending object, None while unset
    """

    def __init__(self, message: str, object_type: str = "", id: int | None = None):
        super().__init__(message)
        self.message = message
        self.object_type = ""
        self.id = None
        if id:
            self.set_id(object_type, id)

    def set_id(self, object_type: str, id: int) -> None:
        """
        Attach the offending object, unless one is attached already.

        Args:
            object_type: Object type name used in the message
            id: Object id, zero is treated as "no id"
        """
        if self.id is not None or not id:
            return
        self.object_type = object_type
        self.id = id
        self.message = f"{self.message} ({object_type}_id={id})"
        self.args = (self.message,)

    def __str__(self) -> str:
        return self.message


class InvalidLocationError(GeometryError):
    """Raised when the coordinates of an undefined location are read."""

    pass


class ProjectionError(GeometryError):
    """Raised when a location cannot be projected."""

    pass


class BackendStateError(OsmGeomError):
    """Raised when a geometry backend is driven out of protocol order."""

    pass
