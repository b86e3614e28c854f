"""Admissible lower bound on the great-circle distance from a point to a lon/lat box."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .geometry import EARTH_CIRCUMFERENCE_KM, RAD, arc_km, great_circle_distance_part


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lon/lat extent of one k-d tree range, in degrees."""

    min_lng: float
    min_lat: float
    max_lng: float
    max_lat: float

    def contains(self, lng: float, lat: float) -> bool:
        """Return True if (lng, lat) lies inside or on the box edges."""
        return self.min_lng <= lng <= self.max_lng and self.min_lat <= lat <= self.max_lat

    def clipped(self, axis: int, value: float, upper: bool) -> "BoundingBox":
        """Return a copy with one edge on `axis` moved to `value`.

        `upper=True` replaces the max edge (left child of a split), otherwise
        the min edge (right child).
        """
        if axis == 0:
            if upper:
                return BoundingBox(self.min_lng, self.min_lat, value, self.max_lat)
            return BoundingBox(value, self.min_lat, self.max_lng, self.max_lat)

        if upper:
            return BoundingBox(self.min_lng, self.min_lat, self.max_lng, value)
        return BoundingBox(self.min_lng, value, self.max_lng, self.max_lat)


WHOLE_EARTH = BoundingBox(min_lng=-180.0, min_lat=-90.0, max_lng=180.0, max_lat=90.0)


def box_lower_bound(lng: float, lat: float, box: BoundingBox, cos_lat: float, sin_lat: float) -> float:
    """Return a lower bound in km on the distance from (lng, lat) to any point in `box`.

    The result never exceeds the true great-circle distance to an enclosed
    point, including when the query lies inside the box (bound is 0 then).
    """
    if box.min_lng <= lng <= box.max_lng:
        if lat <= box.min_lat:
            return EARTH_CIRCUMFERENCE_KM * (box.min_lat - lat) / 360  # south
        if lat >= box.max_lat:
            return EARTH_CIRCUMFERENCE_KM * (lat - box.max_lat) / 360  # north
        return 0.0

    # West or east of the box: the near edge is the circularly closer meridian.
    if (box.min_lng - lng + 360) % 360 <= (lng - box.max_lng + 360) % 360:
        closest_lng = box.min_lng
    else:
        closest_lng = box.max_lng

    cos_lng_delta = math.cos((closest_lng - lng) * RAD)
    denominator = cos_lat * cos_lng_delta
    if denominator == 0:
        extremum_lat = math.copysign(90.0, sin_lat)
    else:
        extremum_lat = math.atan(sin_lat / denominator) / RAD

    # Minimum along the edge is at a corner or at the interior extremum.
    d = max(
        great_circle_distance_part(box.min_lat, cos_lat, sin_lat, cos_lng_delta),
        great_circle_distance_part(box.max_lat, cos_lat, sin_lat, cos_lng_delta),
    )
    if box.min_lat < extremum_lat < box.max_lat:
        d = max(d, great_circle_distance_part(extremum_lat, cos_lat, sin_lat, cos_lng_delta))

    return arc_km(d)
