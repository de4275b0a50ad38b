# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Visual radius resolution.

Maps physical radius to render-space radius. Policies, in order:

    1. Fixed sizing: table lookup by classification; planets with a
       gas-giant geometry hint get ``gas_giant_factor`` times the
       planet size.
    2. Proportional moons (continuous modes): a moon keeps its physical
       ratio to an already-resolved parent, floored at twice the mode
       minimum.
    3. Continuous: log-normalized radius interpolated between the mode's
       minimum and maximum visual size.

A missing or non-positive physical radius resolves to the mode minimum.
"""
import logging

from .celestial_body import CelestialBody, Classification, index_bodies
from .constants import LayoutConstants
from .size_analysis import SizeRange, analyze_system_sizes
from .view_mode import FixedSizing, ViewModeSettings

logger = logging.getLogger(__name__)

_GAS_GIANT_HINTS = frozenset({"gas_giant", "gas-giant", "gasgiant"})


def _has_radius(body: CelestialBody) -> bool:
    return body.physical_radius is not None and body.physical_radius > 0


def _fixed_radius(body: CelestialBody, sizing: FixedSizing) -> float:
    size = sizing.size_for(body.classification)
    if (body.classification is Classification.PLANET
            and body.geometry is not None
            and body.geometry.lower() in _GAS_GIANT_HINTS):
        size *= sizing.gas_giant_factor
    return size


def resolve_visual_radius(
    body: CelestialBody,
    settings: ViewModeSettings,
    size_range: SizeRange,
    parent: CelestialBody | None = None,
    parent_visual_radius: float | None = None,
) -> float:
    """
    Visual radius of a single body.

    Args:
        body: Body to size.
        settings: Active view mode.
        size_range: Log span of the whole system.
        parent: Parent body, used by the proportional moon policy.
        parent_visual_radius: Already-resolved radius of ``parent``.

    Returns:
        Render-space radius (> 0).
    """
    if isinstance(settings.sizing, FixedSizing):
        return _fixed_radius(body, settings.sizing)

    if not _has_radius(body):
        return settings.min_visual_size

    if (body.is_moon
            and parent is not None
            and parent_visual_radius is not None
            and _has_radius(parent)):
        proportional = parent_visual_radius * (body.physical_radius / parent.physical_radius)
        return max(
            proportional, LayoutConstants.MOON_MIN_SIZE_FACTOR * settings.min_visual_size,
        )

    fraction = size_range.normalize(body.physical_radius)
    return settings.min_visual_size + fraction * (
        settings.max_visual_size - settings.min_visual_size
    )


def resolve_visual_radii(
    bodies: list[CelestialBody],
    settings: ViewModeSettings,
    size_range: SizeRange | None = None,
) -> dict[str, float]:
    """
    Visual radius for every body.

    Non-moon bodies are resolved first so that every moon can read its
    parent's result.
    """
    if size_range is None:
        size_range = analyze_system_sizes(bodies)
    index = index_bodies(bodies)
    radii: dict[str, float] = {}

    for body in bodies:
        if not body.is_moon or body.parent_id is None:
            radii[body.id] = resolve_visual_radius(body, settings, size_range)

    for body in bodies:
        if body.is_moon and body.parent_id is not None:
            parent = index.get(body.parent_id)
            radii[body.id] = resolve_visual_radius(
                body, settings, size_range,
                parent=parent,
                parent_visual_radius=radii.get(body.parent_id),
            )

    clamped = [bid for bid, r in radii.items() if r == settings.min_visual_size]
    if clamped:
        logger.debug(
            "%d bod%s at minimum visual size in %s mode",
            len(clamped), "y" if len(clamped) == 1 else "ies", settings.mode.value,
        )
    return radii
