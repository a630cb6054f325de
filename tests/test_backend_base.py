"""Tests for the backend construction protocol."""

import pytest

from osm_geom.backends.base import TRANSITIONS, BackendState, GeometryBackend
from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import BackendStateError, GeometryError

P0 = Coordinates(0.0, 0.0)
P1 = Coordinates(1.0, 0.0)
P2 = Coordinates(1.0, 1.0)


def add_ring(backend, outer, points):
    if outer:
        backend.multipolygon_outer_ring_start()
    else:
        backend.multipolygon_inner_ring_start()
    for p in points:
        backend.multipolygon_add_location(p)
    if outer:
        backend.multipolygon_outer_ring_finish()
    else:
        backend.multipolygon_inner_ring_finish()


class TestProtocol:
    """Test the protocol in the allowed order."""

    def test_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            GeometryBackend(4326)

    def test_point(self, list_backend):
        """Test point creation in the idle state."""
        assert list_backend.make_point(P1) == (1.0, 0.0)
        assert list_backend.state is BackendState.IDLE

    def test_linestring(self, list_backend):
        """Test start/add/finish for a linestring."""
        list_backend.linestring_start()
        assert list_backend.state is BackendState.LINESTRING
        list_backend.linestring_add_location(P0)
        list_backend.linestring_add_location(P1)

        assert list_backend.linestring_finish(2) == [(0.0, 0.0), (1.0, 0.0)]
        assert list_backend.state is BackendState.IDLE

    def test_polygon(self, list_backend):
        """Test start/add/finish for a polygon."""
        list_backend.polygon_start()
        for p in (P0, P1, P2, P0):
            list_backend.polygon_add_location(p)

        assert len(list_backend.polygon_finish(4)) == 4

    def test_multipolygon_several_polygons(self, list_backend):
        """Test a multipolygon with a hole in the first of two polygons."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()
        add_ring(list_backend, True, [P0, P1, P2, P0])
        add_ring(list_backend, False, [P1, P2, P0, P1])
        list_backend.multipolygon_polygon_finish()
        list_backend.multipolygon_polygon_start()
        add_ring(list_backend, True, [P2, P1, P0, P2])
        list_backend.multipolygon_polygon_finish()

        result = list_backend.multipolygon_finish()

        assert len(result) == 2
        assert len(result[0][1]) == 1
        assert result[1][1] == []
        assert list_backend.state is BackendState.IDLE

    def test_backend_is_reusable(self, list_backend):
        """Test that geometries can be built one after another."""
        list_backend.linestring_start()
        list_backend.linestring_add_location(P0)
        list_backend.linestring_add_location(P1)
        list_backend.linestring_finish(2)

        list_backend.linestring_start()
        list_backend.linestring_add_location(P2)
        list_backend.linestring_add_location(P0)

        assert list_backend.linestring_finish(2) == [(1.0, 1.0), (0.0, 0.0)]


class TestOutOfOrder:
    """Test that calls out of order are rejected."""

    def test_add_without_start(self, list_backend):
        """Test adding a point before starting."""
        with pytest.raises(BackendStateError, match="linestring_add_location"):
            list_backend.linestring_add_location(P0)

    def test_point_while_building(self, list_backend):
        """Test that a point cannot be made during a linestring."""
        list_backend.linestring_start()

        with pytest.raises(BackendStateError):
            list_backend.make_point(P0)

    def test_mixed_kinds(self, list_backend):
        """Test that polygon points cannot go into a linestring."""
        list_backend.linestring_start()

        with pytest.raises(BackendStateError):
            list_backend.polygon_add_location(P0)

    def test_inner_before_outer(self, list_backend):
        """Test that inner rings need the outer ring first."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()

        with pytest.raises(BackendStateError):
            list_backend.multipolygon_inner_ring_start()

    def test_polygon_finish_with_open_ring(self, list_backend):
        """Test that a polygon cannot be finished with a ring open."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()
        list_backend.multipolygon_outer_ring_start()

        with pytest.raises(BackendStateError):
            list_backend.multipolygon_polygon_finish()

    def test_multipolygon_finish_with_open_polygon(self, list_backend):
        """Test that a multipolygon cannot be finished with a polygon open."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()
        add_ring(list_backend, True, [P0, P1, P2, P0])

        with pytest.raises(BackendStateError):
            list_backend.multipolygon_finish()

    def test_empty_ring(self, list_backend):
        """Test that rings without points are rejected."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()
        list_backend.multipolygon_outer_ring_start()

        with pytest.raises(GeometryError, match="empty ring in multipolygon"):
            list_backend.multipolygon_outer_ring_finish()

    def test_wrong_point_count(self, list_backend):
        """Test that finish checks the number of points added."""
        list_backend.linestring_start()
        list_backend.linestring_add_location(P0)
        list_backend.linestring_add_location(P1)

        with pytest.raises(BackendStateError, match="3 points, 2 were added"):
            list_backend.linestring_finish(3)
        assert list_backend.state is BackendState.IDLE

    def test_reset(self, list_backend):
        """Test that reset abandons a half built geometry."""
        list_backend.multipolygon_start()
        list_backend.multipolygon_polygon_start()

        list_backend.reset()

        assert list_backend.state is BackendState.IDLE
        assert list_backend.make_point(P0) == (0.0, 0.0)

    def test_every_state_reachable(self):
        """Test that the transition table covers every state."""
        reached = {state for state in TRANSITIONS.values()}

        assert reached == set(BackendState)


class TestCoordinates:
    """Test coordinate checks."""

    @pytest.mark.parametrize("x,y", [(float("nan"), 0.0), (0.0, float("inf"))])
    def test_invalid_coordinates(self, list_backend, x, y):
        """Test that non-finite coordinates are rejected."""
        with pytest.raises(GeometryError, match="invalid coordinates"):
            list_backend.make_point(Coordinates(x, y))

        list_backend.linestring_start()
        with pytest.raises(GeometryError, match="invalid coordinates"):
            list_backend.linestring_add_location(Coordinates(x, y))
