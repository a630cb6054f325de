"""Backends encoding geometries as WKT, WKB or GeoJSON."""

from __future__ import annotations

import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry

from osm_geom.backends.shapely_backend import ShapelyBackend


class WKTBackend(ShapelyBackend):
    """
    Well Known Text output.

    Args:
        srid: EPSG code of the coordinates
        precision: Number of decimal places written
        ewkt: Prefix the output with ``SRID=<srid>;`` (PostGIS extended WKT)
    """

    name = "wkt"

    def __init__(self, srid: int, precision: int = 7, ewkt: bool = False):
        super().__init__(srid)
        self.precision = precision
        self.ewkt = ewkt

    def _output(self, geom: BaseGeometry) -> str:
        wkt = shapely.to_wkt(geom, rounding_precision=self.precision, trim=True)
        if self.ewkt:
            return f"SRID={self.srid};{wkt}"
        return wkt


class WKBBackend(ShapelyBackend):
    """
    Well Known Binary output.

    Args:
        srid: EPSG code of the coordinates
        hex: Return hex encoded strings instead of bytes
        ewkb: Embed the SRID (PostGIS extended WKB)
    """

    name = "wkb"

    def __init__(self, srid: int, hex: bool = True, ewkb: bool = False):
        super().__init__(srid)
        self.hex = hex
        self.ewkb = ewkb

    def _output(self, geom: BaseGeometry) -> bytes | str:
        return shapely.to_wkb(geom, hex=self.hex, include_srid=self.ewkb)


class GeoJSONBackend(ShapelyBackend):
    """
    GeoJSON geometry output, coordinates rounded to ``precision`` decimals.

    Args:
        srid: EPSG code of the coordinates
        precision: Number of decimal places kept
    """

    name = "geojson"

    def __init__(self, srid: int, precision: int = 7):
        super().__init__(srid)
        self.precision = precision

    def _output(self, geom: BaseGeometry) -> str:
        rounded = shapely.transform(geom, lambda coords: np.round(coords, self.precision))
        return shapely.to_geojson(rounded)
