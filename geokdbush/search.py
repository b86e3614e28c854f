"""Best-first nearest-neighbour search over a flat k-d tree of lon/lat points."""

from __future__ import annotations

from collections.abc import Callable
import heapq
import itertools
import logging
import math
import sys
from typing import Any, TypeVar

from .bounds import box_lower_bound
from .config import SearchConfig
from .geometry import QueryPoint, great_circle_distance
from .models import Candidate, PointCandidate, RangeCandidate
from .spatial_index import SpatialIndex

logger = logging.getLogger(__name__)

T = TypeVar("T")


def around(
    index: SpatialIndex,
    lng: float,
    lat: float,
    max_results: int | None = None,
    max_distance: float | None = None,
    predicate: Callable[[T], bool] | None = None,
) -> list[T]:
    """Return indexed items nearest to (lng, lat), ordered by great-circle distance.

    Args:
        index: Already-built flat k-d tree; read only.
        lng, lat: Query location in degrees.
        max_results: Stop after this many items (`None` = unbounded, <= 0 = empty).
        max_distance: Skip items farther than this many km (`None` = unbounded).
        predicate: Only items for which this returns True are considered.
            Exceptions raised by it propagate to the caller.

    Items come out in non-decreasing distance; order among equal distances is
    insertion order into the queue and carries no meaning.
    """
    limit = sys.maxsize if max_results is None else max_results
    cap_km = math.inf if max_distance is None else max_distance

    result: list[T] = []
    if limit <= 0:
        return result

    query = QueryPoint.at(lng, lat)
    ids = index.ids
    coords = index.coords
    points = index.points
    node_size = index.node_size

    # Heap entries are (priority, sequence, candidate); the sequence keeps
    # payloads out of comparisons.
    queue: list[tuple[float, int, Candidate]] = []
    counter = itertools.count()

    def push(candidate: Candidate) -> None:
        heapq.heappush(queue, (candidate.priority, next(counter), candidate))

    def push_point(position: int, item: Any) -> None:
        dist = great_circle_distance(query, float(coords[2 * position]), float(coords[2 * position + 1]))
        push(PointCandidate(item=item, distance=dist))

    n_ranges = 0
    n_scored = 0
    node: RangeCandidate | None = RangeCandidate.whole_index(len(ids))

    while node is not None:
        n_ranges += 1
        left = node.left
        right = node.right

        if node.is_leaf(node_size):
            for i in range(left, right + 1):
                item = points[int(ids[i])]
                if predicate is None or predicate(item):
                    push_point(i, item)
                    n_scored += 1
        else:
            m = node.median
            mid_lng = float(coords[2 * m])
            mid_lat = float(coords[2 * m + 1])

            item = points[int(ids[m])]
            if predicate is None or predicate(item):
                push_point(m, item)
                n_scored += 1

            split_value = mid_lng if node.axis == 0 else mid_lat
            next_axis = node.next_axis
            for child_left, child_right, upper in ((left, m - 1, True), (m + 1, right, False)):
                box = node.box.clipped(node.axis, split_value, upper=upper)
                bound = box_lower_bound(lng, lat, box, query.cos_lat, query.sin_lat)
                push(RangeCandidate(left=child_left, right=child_right, axis=next_axis, box=box, bound=bound))

        # Points ahead of every pending range can no longer be beaten.
        while queue and queue[0][2].is_point:
            candidate = heapq.heappop(queue)[2]
            if candidate.distance > cap_km:
                _log_summary(n_ranges, n_scored, len(result), "max_distance")
                return result
            result.append(candidate.item)
            if len(result) >= limit:
                _log_summary(n_ranges, n_scored, len(result), "max_results")
                return result

        node = heapq.heappop(queue)[2] if queue else None

    _log_summary(n_ranges, n_scored, len(result), "exhausted")
    return result


def around_with_config(
    index: SpatialIndex,
    lng: float,
    lat: float,
    config: SearchConfig,
    predicate: Callable[[T], bool] | None = None,
) -> list[T]:
    """Run `around` with the caps from a `SearchConfig`."""
    return around(
        index,
        lng,
        lat,
        max_results=config.resolve_max_results(),
        max_distance=config.resolve_max_distance(),
        predicate=predicate,
    )


def _log_summary(n_ranges: int, n_scored: int, n_results: int, reason: str) -> None:
    logger.debug(
        "around: expanded %d ranges, scored %d points, returned %d (%s)",
        n_ranges,
        n_scored,
        n_results,
        reason,
    )
