"""Read-only view of an already-built flat k-d tree over lon/lat points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np


class SpatialIndex(Protocol):
    """Contract the search consumes; building and reordering happen elsewhere.

    - `ids[i]` maps sorted position `i` to an integer point identity.
    - `coords` holds `2 * n` doubles, interleaved `(lng, lat)` and aligned to `ids`.
    - `node_size` is the leaf-size threshold (>= 1).
    - `points[identity]` returns the payload for a point identity; it is
      indexed with a Python `int`, so a list or an int-keyed mapping both work.
    """

    ids: Any
    coords: Any
    node_size: int
    points: Any


@dataclass(frozen=True)
class FlatIndex:
    """Validated container for a flat k-d layout produced by an external builder.

    Arrays are normalized once at construction and never mutated afterwards, so
    one instance can be shared by concurrent searches.
    """

    ids: np.ndarray
    coords: np.ndarray
    node_size: int
    points: Any

    def __post_init__(self) -> None:
        """Normalize arrays and validate shape consistency."""
        ids = np.array(self.ids, dtype=np.int64)
        coords = np.array(self.coords, dtype=np.float64)

        if ids.ndim != 1:
            raise ValueError("ids must be a 1D permutation array")

        # Accept either interleaved (2n,) or paired (n, 2) coordinates.
        if coords.ndim == 2 and coords.shape[1] == 2:
            coords = coords.reshape(-1)

        if coords.shape != (2 * ids.shape[0],):
            raise ValueError("coords must hold exactly 2 values (lng, lat) per id")

        if int(self.node_size) < 1:
            raise ValueError("node_size must be >= 1")

        ids.setflags(write=False)
        coords.setflags(write=False)
        object.__setattr__(self, "ids", ids)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "node_size", int(self.node_size))

    def __len__(self) -> int:
        return int(self.ids.shape[0])

    def lng_at(self, position: int) -> float:
        """Return longitude of the point at sorted position `position`."""
        return float(self.coords[2 * position])

    def lat_at(self, position: int) -> float:
        """Return latitude of the point at sorted position `position`."""
        return float(self.coords[2 * position + 1])

    def item_at(self, position: int) -> Any:
        """Return payload of the point at sorted position `position`."""
        return self.points[int(self.ids[position])]
