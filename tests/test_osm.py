"""Tests for the OSM entity model."""

import pytest

from osm_geom.exceptions import InvalidLocationError
from osm_geom.osm import (
    Area,
    InnerRing,
    ItemType,
    Location,
    NodeRef,
    NodeRefList,
    OuterRing,
    TagList,
    Way,
)


class TestLocation:
    """Test Location."""

    def test_defined(self):
        """Test a defined location."""
        location = Location(8.5, 47.3)

        assert location.is_defined()
        assert location.lon == 8.5
        assert location.lat == 47.3
        assert bool(location)

    def test_undefined(self):
        """Test the undefined location."""
        location = Location()

        assert location.is_undefined()
        assert not location
        with pytest.raises(InvalidLocationError):
            location.lon
        with pytest.raises(InvalidLocationError):
            location.lat

    def test_equality(self):
        """Test location comparison."""
        assert Location(1.0, 2.0) == Location(1.0, 2.0)
        assert Location(1.0, 2.0) != Location(2.0, 1.0)
        assert Location() == Location()
        assert Location() != Location(0.0, 0.0)


class TestNodeRefList:
    """Test NodeRefList."""

    def test_forward_and_reverse(self):
        """Test iteration in both directions."""
        node_list = NodeRefList.from_coords([(0, 0), (1, 0), (2, 0)])

        assert [n.ref for n in node_list] == [1, 2, 3]
        assert [n.ref for n in reversed(node_list)] == [3, 2, 1]
        assert len(node_list) == 3
        assert node_list[1].location == Location(1, 0)

    def test_closed(self):
        """Test closed detection."""
        closed = NodeRefList(
            [NodeRef(1, Location(0, 0)), NodeRef(2, Location(1, 0)), NodeRef(1, Location(0, 0))]
        )
        open_list = NodeRefList.from_coords([(0, 0), (1, 0), (0, 0)])

        assert closed.is_closed()
        assert not open_list.is_closed()
        assert not NodeRefList().is_closed()

    def test_ring_types(self):
        """Test ring item types."""
        assert OuterRing().item_type is ItemType.OUTER_RING
        assert InnerRing().item_type is ItemType.INNER_RING
        assert NodeRefList().item_type is None
        assert OuterRing.from_coords([(0, 0)]) != InnerRing.from_coords([(0, 0)])

    def test_way_closed(self):
        """Test closed ways."""
        nodes = NodeRefList([NodeRef(1), NodeRef(2), NodeRef(1)])

        assert Way(1, nodes).is_closed()


class TestArea:
    """Test Area."""

    def test_ids(self):
        """Test area id encoding."""
        from_way = Area.from_way_id(17)
        from_relation = Area.from_relation_id(17)

        assert from_way.id == 34
        assert from_way.from_way()
        assert from_way.orig_id() == 17
        assert from_relation.id == 35
        assert not from_relation.from_way()
        assert from_relation.orig_id() == 17

    def test_members_in_order(self):
        """Test that iterating an area yields its members in order."""
        outer1 = OuterRing.from_coords([(0, 0), (1, 0), (1, 1), (0, 0)])
        inner1 = InnerRing.from_coords([(0.1, 0.1), (0.2, 0.1), (0.2, 0.2), (0.1, 0.1)])
        outer2 = OuterRing.from_coords([(5, 5), (6, 5), (6, 6), (5, 5)])
        area = Area(10, (TagList({"landuse": "forest"}), outer1, inner1, outer2))

        assert list(area) == [area.members[0], outer1, inner1, outer2]
