# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orrery

Deterministic render-space layouts for hierarchical orbital systems.
Maps physical radii and orbits of stars, planets, moons, belts and rings
to visual radii and orbital distances that never overlap, keep parents
larger than their children and follow one of several view modes
(log-compressed, scientific, or fixed schematic sizes).
"""

from orrery.domain.celestial_body import (
    BeltOrbit,
    CelestialBody,
    Classification,
    PointOrbit,
    find_root_bodies,
    group_by_parent,
)
from orrery.domain.view_mode import (
    ContinuousSizing,
    FixedSizing,
    ViewMode,
    ViewModeSettings,
    get_view_mode_settings,
    parse_view_mode,
)
from orrery.domain.constants import LayoutConstants
from orrery.domain.placement import BeltGeometry, LayoutResult
from orrery.domain.size_analysis import SizeRange, analyze_system_sizes
from orrery.domain.visual_radius import resolve_visual_radii, resolve_visual_radius
from orrery.domain.layout import animation_speed, compute_system_layout
from orrery.domain.layout_cache import (
    CacheStats,
    LayoutCache,
    OrbitalLayoutEngine,
    layout_cache_key,
)
from orrery.domain.verification import (
    HierarchyViolation,
    LayoutReport,
    SiblingOverlap,
    find_hierarchy_violations,
    find_missing_results,
    find_sibling_overlaps,
    verify_layout,
)

__all__ = [
    "BeltGeometry",
    "BeltOrbit",
    "CacheStats",
    "CelestialBody",
    "Classification",
    "ContinuousSizing",
    "FixedSizing",
    "HierarchyViolation",
    "LayoutCache",
    "LayoutConstants",
    "LayoutReport",
    "LayoutResult",
    "OrbitalLayoutEngine",
    "PointOrbit",
    "SiblingOverlap",
    "SizeRange",
    "ViewMode",
    "ViewModeSettings",
    "analyze_system_sizes",
    "animation_speed",
    "compute_system_layout",
    "find_hierarchy_violations",
    "find_missing_results",
    "find_root_bodies",
    "find_sibling_overlaps",
    "get_view_mode_settings",
    "group_by_parent",
    "layout_cache_key",
    "parse_view_mode",
    "resolve_visual_radii",
    "resolve_visual_radius",
    "verify_layout",
]
