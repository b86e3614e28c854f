"""Great-circle distance helpers on a spherical Earth (degrees in, km out)."""

from __future__ import annotations

from dataclasses import dataclass
import math

EARTH_RADIUS_KM = 6371
EARTH_CIRCUMFERENCE_KM = 40007
RAD = math.pi / 180


@dataclass(frozen=True)
class QueryPoint:
    """Query location with the trigonometric terms reused by every evaluation."""

    lng: float
    lat: float
    cos_lat: float
    sin_lat: float

    @staticmethod
    def at(lng: float, lat: float) -> "QueryPoint":
        """Build a query point, computing cos/sin of latitude once."""
        return QueryPoint(
            lng=lng,
            lat=lat,
            cos_lat=math.cos(lat * RAD),
            sin_lat=math.sin(lat * RAD),
        )


def great_circle_distance_part(lat: float, cos_lat: float, sin_lat: float, cos_lng_delta: float) -> float:
    """Return the cosine-domain term of the spherical law of cosines for a target latitude.

    `cos_lat`/`sin_lat` belong to the query point and `cos_lng_delta` is the
    cosine of the longitude difference. The result is capped at 1.0 because
    rounding can push it above for near-identical points.
    """
    d = sin_lat * math.sin(lat * RAD) + cos_lat * math.cos(lat * RAD) * cos_lng_delta
    return min(d, 1.0)


def arc_km(distance_part: float) -> float:
    """Convert a cosine-domain value into kilometres along the surface."""
    # Lower clamp keeps acos defined for antipodal rounding as well.
    return EARTH_RADIUS_KM * math.acos(max(distance_part, -1.0))


def great_circle_distance(query: QueryPoint, lng: float, lat: float) -> float:
    """Return distance in km from `query` to (lng, lat)."""
    cos_lng_delta = math.cos((lng - query.lng) * RAD)
    return arc_km(great_circle_distance_part(lat, query.cos_lat, query.sin_lat, cos_lng_delta))


def distance(lng: float, lat: float, lng2: float, lat2: float) -> float:
    """Return great-circle distance in kilometres between two lon/lat points."""
    return great_circle_distance(QueryPoint.at(lng, lat), lng2, lat2)
