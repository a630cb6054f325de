"""Tests for core functionality."""

from osm_geom import __version__
from osm_geom.backends.text import WKTBackend
from osm_geom.core import console, display_info
from osm_geom.factory import GeometryFactory
from osm_geom.projection import MercatorProjection


class TestDisplayInfo:
    """Tests for display_info."""

    def test_identity_factory(self):
        """Test the table for a factory with the default projection."""
        factory = GeometryFactory(WKTBackend)

        with console.capture() as capture:
            display_info(factory)
        output = capture.get()

        assert "osm-geom Information" in output
        assert __version__ in output
        assert "WKTBackend" in output
        assert "IdentityProjection" in output
        assert "4326" in output

    def test_mercator_factory(self):
        """Test the table for a mercator factory."""
        factory = GeometryFactory(WKTBackend, projection=MercatorProjection())

        with console.capture() as capture:
            display_info(factory)

        assert "3857" in capture.get()
