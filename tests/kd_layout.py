"""Test-only builder for flat k-d layouts consumed by `geokdbush.FlatIndex`."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from geokdbush import FlatIndex


def build_flat_index(
    points: Sequence[Any],
    get_lng: Callable[[Any], float],
    get_lat: Callable[[Any], float],
    node_size: int = 10,
) -> FlatIndex:
    """Sort points into a flat k-d layout, splitting each range at its median.

    Axis alternates lng/lat with depth and ranges of at most `node_size`
    span stay unsorted, matching what the search expects.
    """
    xy = np.asarray([(get_lng(p), get_lat(p)) for p in points], dtype=np.float64).reshape(-1, 2)
    perm = np.arange(len(points), dtype=np.int64)

    stack = [(0, len(points) - 1, 0)]
    while stack:
        left, right, axis = stack.pop()
        if right - left <= node_size:
            continue

        segment = perm[left : right + 1]
        order = np.argsort(xy[segment, axis], kind="stable")
        perm[left : right + 1] = segment[order]

        m = (left + right) >> 1
        stack.append((left, m - 1, 1 - axis))
        stack.append((m + 1, right, 1 - axis))

    return FlatIndex(ids=perm, coords=xy[perm].reshape(-1), node_size=node_size, points=list(points))


def random_places(n_points: int, seed: int) -> list[dict[str, Any]]:
    """Generate `n_points` payload dicts spread uniformly over the sphere."""
    rng = np.random.default_rng(seed)
    lngs = rng.uniform(-180.0, 180.0, size=n_points)
    lats = np.degrees(np.arcsin(rng.uniform(-1.0, 1.0, size=n_points)))
    weights = rng.integers(low=0, high=1000, size=n_points)

    return [
        {"id": i, "lng": float(lngs[i]), "lat": float(lats[i]), "weight": int(weights[i])}
        for i in range(n_points)
    ]


def place_index(places: Sequence[dict[str, Any]], node_size: int = 10) -> FlatIndex:
    return build_flat_index(places, lambda p: p["lng"], lambda p: p["lat"], node_size=node_size)
