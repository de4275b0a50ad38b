# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Parent/child size hierarchy.

Every parent must render strictly larger than each of its children,
belts and rings excepted. Parents are processed deepest first. A parent
that is not larger grows to 1.2x its largest child. In continuous modes
growth is capped (stars at the mode's star ceiling, other parents at the
mode maximum); when the cap is hit the children, with everything below
them, shrink uniformly instead.

Runs after collision repair. Growth can bring a parent's surface into
its moons or rings, so ``recheck_orbit_clearance`` pushes them back out
and restores sibling spacing around every parent.
"""
import logging

from .celestial_body import CelestialBody, Classification
from .collision import resolve_sibling_collisions
from .constants import LayoutConstants
from .orbit_placement import parents_deepest_first
from .placement import Placement
from .view_mode import ContinuousSizing, ViewModeSettings

logger = logging.getLogger(__name__)


def _growth_ceiling(parent: CelestialBody, settings: ViewModeSettings) -> float | None:
    if not isinstance(settings.sizing, ContinuousSizing):
        return None
    if parent.classification is Classification.STAR:
        return settings.sizing.star_size_ceiling
    return settings.max_visual_size


def _shrink_subtree(
    body: CelestialBody,
    factor: float,
    placements: dict[str, Placement],
    children: dict[str, list[CelestialBody]],
    floor: float,
    seen: set[str],
) -> None:
    if body.id in seen:
        return
    seen.add(body.id)
    placement = placements[body.id]
    placement.visual_radius = max(placement.visual_radius * factor, floor)
    for child in children.get(body.id, ()):
        if not child.is_hierarchy_exempt and child.id in placements:
            _shrink_subtree(child, factor, placements, children, floor, seen)


def enforce_size_hierarchy(
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> None:
    """
    Make every parent strictly larger than its non-exempt children.

    Args:
        placements: Working placements, visual radii updated in place.
        settings: Active view mode.
        children: Parent id to children.
        index: Body id to body.
    """
    for parent_id in parents_deepest_first(children, index):
        parent = index[parent_id]
        kids = [
            c for c in children[parent_id]
            if not c.is_hierarchy_exempt and c.id in placements
        ]
        if not kids:
            continue

        parent_placement = placements[parent_id]
        largest = max(placements[c.id].visual_radius for c in kids)
        if parent_placement.visual_radius > largest:
            continue

        required = largest * LayoutConstants.HIERARCHY_GROWTH_FACTOR
        ceiling = _growth_ceiling(parent, settings)
        if ceiling is None or required <= ceiling:
            logger.debug(
                "Grew %r from %.6g to %.6g to exceed its children",
                parent_id, parent_placement.visual_radius, required,
            )
            parent_placement.visual_radius = required
            continue

        parent_placement.visual_radius = ceiling
        is_star = parent.classification is Classification.STAR
        if not is_star and ceiling > largest:
            continue

        factor = (ceiling / required) * LayoutConstants.HIERARCHY_SHRINK_SAFETY
        logger.debug(
            "Capped %r at %.6g; shrinking its children by %.4f",
            parent_id, ceiling, factor,
        )
        seen = {parent_id}
        for kid in kids:
            _shrink_subtree(
                kid, factor, placements, children, settings.min_visual_size, seen,
            )


def recheck_orbit_clearance(
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> int:
    """
    Push children that no longer clear their grown parent back outward.

    Each parent's children are swept in order of position: a child whose
    inner edge sits inside the parent's surface moves out to
    ``parentVR + effective radius + min_distance`` and every sibling
    beyond it is carried along, rings and belts included. Parents are
    revisited deepest first, so a planet whose moons moved is cleared
    again against its own siblings.

    Returns:
        Number of bodies moved.
    """
    moved = 0
    for parent_id in parents_deepest_first(children, index):
        moved += resolve_sibling_collisions(
            children[parent_id], placements, settings, children,
            parent_radius=placements[parent_id].visual_radius,
        )
    return moved
