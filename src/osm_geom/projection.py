"""Projections from WGS84 locations to the coordinate system of the output."""

from __future__ import annotations

import math
import warnings
from abc import ABC, abstractmethod

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from osm_geom.coordinates import Coordinates
from osm_geom.exceptions import ProjectionError
from osm_geom.osm import Location

WGS84_EPSG = 4326
WEB_MERCATOR_EPSG = 3857
MERCATOR_MAX_LATITUDE = 85.0511287798


class Projection(ABC):
    """
    Maps a location to projected coordinates.

    Implementations report the EPSG code and the PROJ string of the
    coordinate system they project into. A location that cannot be projected
    raises a GeometryError subclass without an object id; the factory attaches
    the id of the object being built.
    """

    @abstractmethod
    def __call__(self, location: Location) -> Coordinates: ...

    @property
    @abstractmethod
    def epsg(self) -> int: ...

    @property
    @abstractmethod
    def proj_string(self) -> str: ...


class IdentityProjection(Projection):
    """Pseudo projection returning its WGS84 input unchanged."""

    def __call__(self, location: Location) -> Coordinates:
        return Coordinates(location.lon, location.lat)

    @property
    def epsg(self) -> int:
        return WGS84_EPSG

    @property
    def proj_string(self) -> str:
        return "+proj=longlat +datum=WGS84 +no_defs"


class ProjProjection(Projection):
    """
    Projection into any CRS known to PROJ, identified by its EPSG code.

    Args:
        epsg: EPSG code of the target coordinate system

    Raises:
        ProjectionError: If the CRS or the transformer cannot be created
    """

    def __init__(self, epsg: int):
        try:
            self._crs = CRS.from_epsg(epsg)
            self._transformer = Transformer.from_crs(
                CRS.from_epsg(WGS84_EPSG), self._crs, always_xy=True
            )
        except (CRSError, ProjError) as e:
            raise ProjectionError(f"Failed to create projection for EPSG:{epsg}: {e}") from e
        self._epsg = epsg

    def __call__(self, location: Location) -> Coordinates:
        lon, lat = location.lon, location.lat
        try:
            x, y = self._transformer.transform(lon, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"Failed to project ({lon}, {lat}): {e}") from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(f"Failed to project ({lon}, {lat})")
        return Coordinates(x, y)

    @property
    def epsg(self) -> int:
        return self._epsg

    @property
    def proj_string(self) -> str:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            return self._crs.to_proj4()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(epsg={self._epsg})"


class MercatorProjection(ProjProjection):
    """Spherical (web) mercator, EPSG:3857."""

    def __init__(self):
        super().__init__(WEB_MERCATOR_EPSG)

    def __call__(self, location: Location) -> Coordinates:
        if abs(location.lat) > MERCATOR_MAX_LATITUDE:
            raise ProjectionError(
                f"Latitude {location.lat} is outside the mercator range "
                f"(+/-{MERCATOR_MAX_LATITUDE})"
            )
        return super().__call__(location)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
