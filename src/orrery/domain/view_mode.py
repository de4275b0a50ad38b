# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
View mode configuration.

A view mode selects how physical sizes and distances map to render
space. Each mode carries size bounds, orbit scaling and clearance
parameters, plus exactly one sizing policy:

    ContinuousSizing: log-compressed sizes between the mode's min and
        max visual size, moons proportional to their parent.
    FixedSizing: per-classification lookup table.

Mode identifiers are shared with the camera-settings collaborator, which
keeps its own per-mode parameters.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .celestial_body import Classification

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Named scaling philosophy for a system layout."""
    EXPLORATIONAL = "explorational"
    SCIENTIFIC = "scientific"
    NAVIGATIONAL = "navigational"
    PROFILE = "profile"


_MODE_ALIASES = {
    "realistic": ViewMode.EXPLORATIONAL,
}

DEFAULT_VIEW_MODE = ViewMode.EXPLORATIONAL


@dataclass(frozen=True)
class ContinuousSizing:
    """Log-compression sizing; stars are never grown past ``star_size_ceiling``."""
    star_size_ceiling: float


@dataclass(frozen=True)
class FixedSizing:
    """Lookup-table sizing keyed by classification.

    Classifications missing from ``sizes`` resolve to ``default_size``
    (the asteroid size).
    """
    sizes: Mapping[Classification, float]
    default_size: float
    gas_giant_factor: float = 1.5

    def size_for(self, classification: Classification) -> float:
        return self.sizes.get(classification, self.default_size)


@dataclass(frozen=True)
class ViewModeSettings:
    """Immutable scaling parameters for one view mode."""
    mode: ViewMode
    min_visual_size: float
    max_visual_size: float
    orbit_scaling: float
    safety_multiplier: float
    min_distance: float
    sizing: ContinuousSizing | FixedSizing = field(repr=False)

    @property
    def is_continuous(self) -> bool:
        return isinstance(self.sizing, ContinuousSizing)


def _size_table(**sizes: float) -> Mapping[Classification, float]:
    table = {Classification(key.replace("_", "-")): value for key, value in sizes.items()}
    return MappingProxyType(table)


_VIEW_MODE_SETTINGS: dict[ViewMode, ViewModeSettings] = {
    ViewMode.EXPLORATIONAL: ViewModeSettings(
        mode=ViewMode.EXPLORATIONAL,
        min_visual_size=0.02,
        max_visual_size=0.8,
        orbit_scaling=8.0,
        safety_multiplier=2.5,
        min_distance=0.1,
        sizing=ContinuousSizing(star_size_ceiling=1.0),
    ),
    ViewMode.SCIENTIFIC: ViewModeSettings(
        mode=ViewMode.SCIENTIFIC,
        min_visual_size=0.1,
        max_visual_size=40.0,
        orbit_scaling=80.0,
        safety_multiplier=1.1,
        min_distance=0.1,
        sizing=ContinuousSizing(star_size_ceiling=40.0),
    ),
    ViewMode.NAVIGATIONAL: ViewModeSettings(
        mode=ViewMode.NAVIGATIONAL,
        min_visual_size=0.2,
        max_visual_size=6.0,
        orbit_scaling=40.0,
        safety_multiplier=3.0,
        min_distance=1.0,
        sizing=FixedSizing(
            sizes=_size_table(
                star=2.0, compact_object=1.6, planet=1.2, dwarf_planet=0.8,
                moon=0.6, belt=0.8, ring=0.8,
            ),
            default_size=0.3,
        ),
    ),
    ViewMode.PROFILE: ViewModeSettings(
        mode=ViewMode.PROFILE,
        min_visual_size=0.03,
        max_visual_size=1.5,
        orbit_scaling=0.3,
        safety_multiplier=3.5,
        min_distance=0.3,
        sizing=FixedSizing(
            sizes=_size_table(
                star=1.5, compact_object=1.2, planet=0.8, dwarf_planet=0.5,
                moon=0.4, belt=0.6, ring=0.6,
            ),
            default_size=0.2,
        ),
    ),
}


def get_view_mode_settings(mode: ViewMode) -> ViewModeSettings:
    """Scaling parameters for a view mode."""
    return _VIEW_MODE_SETTINGS[mode]


def parse_view_mode(key: str | ViewMode) -> ViewMode:
    """
    Resolve a view mode identifier.

    Accepts enum members, their string values and known aliases
    (``"realistic"``). Unknown keys fall back to the explorational mode.
    """
    if isinstance(key, ViewMode):
        return key
    normalized = key.strip().lower()
    if normalized in _MODE_ALIASES:
        return _MODE_ALIASES[normalized]
    try:
        return ViewMode(normalized)
    except ValueError:
        logger.warning(
            "View mode %r not recognised, using %s", key, DEFAULT_VIEW_MODE.value,
        )
        return DEFAULT_VIEW_MODE
