# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Layout result memoization.

``LayoutCache`` holds exactly one (key, result) pair. The key combines
the view mode, the pause flag and each body's (id, physical radius,
parent id); a matching key returns the cached mapping unchanged, any
other key recomputes and replaces the slot.

Only the check and the store are serialized. The layout itself runs
outside the lock, so two threads racing on different keys may both
compute; whichever stores last owns the slot.

``OrbitalLayoutEngine`` is the stateful front door used by renderers:
it owns a cache (injectable for tests) and exposes ``calculate`` and
``clear_cache``.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from .celestial_body import CelestialBody
from .layout import compute_system_layout
from .placement import LayoutResult
from .view_mode import ViewMode, parse_view_mode

logger = logging.getLogger(__name__)

LayoutMap = Mapping[str, LayoutResult]


def layout_cache_key(
    bodies: Iterable[CelestialBody],
    view_mode: ViewMode,
    paused: bool = False,
) -> str:
    """
    Deterministic cache key for one layout request.

    Orbit elements are not part of the key: two requests that differ
    only in semi-major axes or periods share a cache entry.
    """
    parts = [
        f"{body.id}-{body.physical_radius}-{body.parent_id or 'root'}"
        for body in bodies
    ]
    return f"{view_mode.value}-{paused}-" + "|".join(parts)


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache usage counters."""
    hits: int
    misses: int
    has_entry: bool

    @property
    def requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of requests served from the cache (0.0 when unused)."""
        if self.requests == 0:
            return 0.0
        return self.hits / self.requests


class LayoutCache:
    """Thread-safe single-slot cache of the most recent layout."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: str | None = None
        self._value: LayoutMap | None = None
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> LayoutMap | None:
        """Cached layout for ``key``, or None. Counts a hit or a miss."""
        with self._lock:
            if self._key == key and self._value is not None:
                self._hits += 1
                return self._value
            self._misses += 1
            return None

    def put(self, key: str, value: LayoutMap) -> None:
        """Replace the slot; the last writer wins."""
        with self._lock:
            self._key = key
            self._value = value

    def get_or_compute(self, key: str, compute: Callable[[], LayoutMap]) -> LayoutMap:
        cached = self.get(key)
        if cached is not None:
            logger.debug("Layout cache hit")
            return cached

        logger.debug("Layout cache miss; recomputing")
        value = compute()
        self.put(key, value)
        return value

    def clear(self) -> None:
        """Empty the slot. Usage counters are kept."""
        with self._lock:
            self._key = None
            self._value = None

    def reset_stats(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                has_entry=self._value is not None,
            )


class OrbitalLayoutEngine:
    """Memoizing entry point for system layouts."""

    def __init__(self, cache: LayoutCache | None = None) -> None:
        self._cache = cache if cache is not None else LayoutCache()

    @property
    def cache(self) -> LayoutCache:
        return self._cache

    def calculate(
        self,
        bodies: Iterable[CelestialBody],
        view_mode: ViewMode | str = ViewMode.EXPLORATIONAL,
        paused: bool = False,
    ) -> LayoutMap:
        """
        Layout for a system, served from the cache when the key matches.

        Args:
            bodies: Flat sequence of bodies.
            view_mode: Mode enum or identifier string.
            paused: Animation pause flag. Affects only the cache key.

        Returns:
            Read-only mapping of body id to LayoutResult.
        """
        bodies = list(bodies)
        mode = parse_view_mode(view_mode)
        key = layout_cache_key(bodies, mode, paused)
        return self._cache.get_or_compute(
            key, lambda: compute_system_layout(bodies, mode),
        )

    def clear_cache(self) -> None:
        """Drop the cached layout, e.g. after the data source changed."""
        self._cache.clear()
