"""Search caps and their YAML loader."""

from __future__ import annotations

from dataclasses import dataclass
import math
from pathlib import Path
import sys
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when a search config file is invalid."""


@dataclass(frozen=True)
class SearchConfig:
    """Caps applied to one `around` query.

    `None` means unbounded. A non-positive `max_results` is allowed and makes
    the search return nothing.
    """

    # Maximum number of returned items.
    max_results: int | None = None

    # Maximum great-circle distance (km) of returned items.
    max_distance_km: float | None = None

    def __post_init__(self) -> None:
        """Validate config values once at construction time."""
        if self.max_results is not None and (
            isinstance(self.max_results, bool) or not isinstance(self.max_results, int)
        ):
            raise ValueError("max_results must be an integer when provided")

        if self.max_distance_km is not None and math.isnan(self.max_distance_km):
            raise ValueError("max_distance_km must not be NaN")

    def resolve_max_results(self) -> int:
        """Return the effective result cap."""
        if self.max_results is None:
            return sys.maxsize
        return self.max_results

    def resolve_max_distance(self) -> float:
        """Return the effective distance cap in km."""
        if self.max_distance_km is None:
            return math.inf
        return float(self.max_distance_km)

    def to_serializable_dict(self) -> dict[str, Any]:
        """Return config as plain Python types for YAML output."""
        return {
            "search": {
                "max_results": self.max_results,
                "max_distance_km": self.max_distance_km,
            }
        }


def load_search_config(config_path: str | Path) -> SearchConfig:
    """Load and validate a YAML config with a `search:` section."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("config root must be a mapping")

    search = raw.get("search")
    if search is None:
        search = {}
    if not isinstance(search, dict):
        raise ConfigError("search must be a mapping")

    unknown = set(search) - {"max_results", "max_distance_km"}
    if unknown:
        raise ConfigError(f"unknown keys in section 'search': {sorted(unknown)}")

    # YAML floats such as 2.7 are rejected rather than truncated.
    max_results = search.get("max_results")
    if max_results is not None and (isinstance(max_results, bool) or not isinstance(max_results, int)):
        raise ConfigError(f"search.max_results must be an integer, got {max_results!r}")

    max_distance_raw = search.get("max_distance_km")
    try:
        max_distance_km = None if max_distance_raw is None else float(max_distance_raw)
        return SearchConfig(max_results=max_results, max_distance_km=max_distance_km)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid search config in {path}: {exc}") from exc
