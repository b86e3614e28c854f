"""Public API for geographic nearest-neighbour search over flat k-d trees."""

from .bounds import WHOLE_EARTH, BoundingBox, box_lower_bound
from .config import ConfigError, SearchConfig, load_search_config
from .geometry import (
    EARTH_CIRCUMFERENCE_KM,
    EARTH_RADIUS_KM,
    QueryPoint,
    distance,
    great_circle_distance,
    great_circle_distance_part,
)
from .models import Candidate, PointCandidate, RangeCandidate
from .search import around, around_with_config
from .spatial_index import FlatIndex, SpatialIndex

__all__ = [
    "BoundingBox",
    "Candidate",
    "ConfigError",
    "EARTH_CIRCUMFERENCE_KM",
    "EARTH_RADIUS_KM",
    "FlatIndex",
    "PointCandidate",
    "QueryPoint",
    "RangeCandidate",
    "SearchConfig",
    "SpatialIndex",
    "WHOLE_EARTH",
    "around",
    "around_with_config",
    "box_lower_bound",
    "distance",
    "great_circle_distance",
    "great_circle_distance_part",
    "load_search_config",
]
