# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
System layout pipeline.

Pure, deterministic computation of render-space geometry for a tree of
celestial bodies under one view mode:

    1. size analysis       (log radius span)
    2. visual radii        (non-moons, then moons)
    3. orbit placement     (moons, then planets and belts)
    4. collision repair    (sibling sweep on actual positions)
    5. size hierarchy      (parents larger than children, clearance re-check)

Stages only read the output of earlier stages, which is what breaks the
moon-footprint/planet-placement dependency. Memoization lives in
``layout_cache``; nothing here keeps state between calls.
"""
import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from .celestial_body import CelestialBody, PointOrbit, group_by_parent, index_bodies
from .collision import resolve_global_collisions
from .constants import LayoutConstants
from .hierarchy import enforce_size_hierarchy, recheck_orbit_clearance
from .orbit_placement import place_moon_orbits, place_sibling_orbits
from .placement import LayoutResult, Placement
from .size_analysis import analyze_system_sizes
from .view_mode import ViewMode, get_view_mode_settings, parse_view_mode
from .visual_radius import resolve_visual_radii

logger = logging.getLogger(__name__)


def animation_speed(body: CelestialBody) -> float | None:
    """Angular speed relative to Earth's year, or None without a usable period."""
    orbit = body.orbit
    if not isinstance(orbit, PointOrbit) or not orbit.orbital_period:
        return None
    if orbit.orbital_period <= 0:
        return None
    return LayoutConstants.BASE_ANIMATION_SPEED * (
        LayoutConstants.EARTH_ORBITAL_PERIOD_DAYS / orbit.orbital_period
    )


def compute_system_layout(
    bodies: Iterable[CelestialBody],
    view_mode: ViewMode | str = ViewMode.EXPLORATIONAL,
) -> Mapping[str, LayoutResult]:
    """
    Collision-free render layout for one system.

    Args:
        bodies: Flat sequence of bodies; not modified. For a repeated
            id only the first body is laid out.
        view_mode: Mode enum or identifier string.

    Returns:
        Read-only mapping of body id to LayoutResult, one entry per id.
    """
    settings = get_view_mode_settings(parse_view_mode(view_mode))
    index = index_bodies(list(bodies))
    bodies = list(index.values())
    children = group_by_parent(bodies)

    size_range = analyze_system_sizes(bodies)
    radii = resolve_visual_radii(bodies, settings, size_range)
    placements = {bid: Placement(visual_radius=r) for bid, r in radii.items()}

    place_moon_orbits(placements, settings, children, index)
    place_sibling_orbits(placements, settings, children, index)
    shifted = resolve_global_collisions(placements, settings, children, index)
    enforce_size_hierarchy(placements, settings, children, index)
    moved = recheck_orbit_clearance(placements, settings, children, index)

    logger.info(
        "Laid out %d bodies in %s mode (%d collision shifts, %d clearance pushes)",
        len(index), settings.mode.value, shifted, moved,
    )

    results: dict[str, LayoutResult] = {}
    for body_id, body in index.items():
        placement = placements[body_id]
        anchored = body.parent_id is not None and body.parent_id in index
        results[body_id] = LayoutResult(
            visual_radius=placement.visual_radius,
            orbit_distance=placement.orbit_distance,
            belt_geometry=placement.belt,
            animation_speed=animation_speed(body) if anchored else None,
        )
    return MappingProxyType(results)
