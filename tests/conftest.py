"""Shared fixtures for the osm-geom tests."""

import pytest

from osm_geom.backends.base import GeometryBackend
from osm_geom.factory import GeometryFactory


class ListBackend(GeometryBackend):
    """Backend returning plain coordinate tuples and lists."""

    name = "list"

    def _build_point(self, coords):
        return coords.as_tuple()

    def _build_linestring(self, points):
        return [c.as_tuple() for c in points]

    def _build_polygon(self, ring):
        return [c.as_tuple() for c in ring]

    def _build_multipolygon(self, polygons):
        return [
            ([c.as_tuple() for c in outer], [[c.as_tuple() for c in inner] for inner in inners])
            for outer, inners in polygons
        ]


@pytest.fixture
def list_backend():
    return ListBackend(4326)


@pytest.fixture
def factory():
    return GeometryFactory(ListBackend)


@pytest.fixture
def list_backend_cls():
    return ListBackend
