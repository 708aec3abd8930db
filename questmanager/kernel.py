"""Geographic coordinates and bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE = 111.32
_EPSILON = 1e-12


@dataclass(frozen=True)
class BoundingBox:
    """A rectangular area in latitude and longitude."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


@dataclass(frozen=True)
class GeoCoordinate:
    """A point on the Earth's surface in degrees."""

    lat: float
    lon: float

    @property
    def latitude(self) -> float:
        return self.lat

    @property
    def longitude(self) -> float:
        return self.lon

    def distance_to(self, other: GeoCoordinate) -> float:
        """Great-circle distance to other, in kilometres."""
        d_lat = math.radians(other.lat - self.lat)
        d_lon = math.radians(other.lon - self.lon)
        lat1 = math.radians(self.lat)
        lat2 = math.radians(other.lat)
        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def bounding_box_for_radius(self, radius_km: float) -> BoundingBox:
        """Approximate box enclosing every point within radius_km.

        At the poles the longitude span is set to a full 180 degrees either way.
        """
        lat_radius = radius_km / KM_PER_DEGREE
        cos_lat = math.cos(math.radians(self.lat))
        if abs(cos_lat) < _EPSILON:
            lon_radius = 180.0
        else:
            lon_radius = radius_km / (KM_PER_DEGREE * cos_lat)
        return BoundingBox(
            min_lat=self.lat - lat_radius,
            max_lat=self.lat + lat_radius,
            min_lon=self.lon - lon_radius,
            max_lon=self.lon + lon_radius,
        )

    def equals(self, other: GeoCoordinate) -> bool:
        return self.lat == other.lat and self.lon == other.lon


def new_geo_coordinate(lat: float, lon: float) -> GeoCoordinate:
    """Create a coordinate, raising ValueError when it is out of range."""
    if lat < MIN_LATITUDE or lat > MAX_LATITUDE:
        raise ValueError(
            f"latitude {lat:.6f} is out of range ({MIN_LATITUDE:f}–{MAX_LATITUDE:f})"
        )
    if lon < MIN_LONGITUDE or lon > MAX_LONGITUDE:
        raise ValueError(
            f"longitude {lon:.6f} is out of range ({MIN_LONGITUDE:f}–{MAX_LONGITUDE:f})"
        )
    return GeoCoordinate(lat=lat, lon=lon)