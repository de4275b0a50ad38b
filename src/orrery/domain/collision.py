# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Global sibling collision repair.

Second, authoritative sweep over each parent's children. It
works from the positions actually computed by the placement passes,
sorted ascending, and pushes any sibling that sits closer than
``previous outer edge + min_distance + own inner clearance`` outward
by the shortfall. Belts move as a whole and keep their width.
"""
import logging
from dataclasses import dataclass

from .celestial_body import CelestialBody
from .orbit_placement import effective_orbital_radius, parents_deepest_first
from .placement import Placement
from .view_mode import ViewModeSettings

logger = logging.getLogger(__name__)


@dataclass
class _Orbiter:
    body: CelestialBody
    position: float
    clearance: float


def _position(placement: Placement) -> float | None:
    if placement.belt is not None:
        return placement.belt.center_radius
    return placement.orbit_distance


def _shift(placement: Placement, delta: float) -> None:
    if placement.belt is not None:
        placement.belt = placement.belt.shifted(delta)
    else:
        placement.orbit_distance += delta


def resolve_sibling_collisions(
    siblings: list[CelestialBody],
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    parent_radius: float | None = None,
) -> int:
    """
    Push overlapping siblings of one parent outward.

    Args:
        siblings: Bodies sharing a parent.
        placements: Working placements, updated in place.
        settings: Active view mode.
        children: Parent id to children, for effective radii.
        parent_radius: When given, a sibling whose inner edge does not
            clear this radius is first pushed out to
            ``parent_radius + min_distance``.

    Returns:
        Number of bodies shifted.
    """
    orbiters: list[_Orbiter] = []
    for body in siblings:
        placement = placements.get(body.id)
        if placement is None:
            continue
        position = _position(placement)
        if position is None:
            continue
        orbiters.append(_Orbiter(
            body=body,
            position=position,
            clearance=effective_orbital_radius(body, placements, children),
        ))

    orbiters.sort(key=lambda o: o.position)

    shifted = 0
    previous: _Orbiter | None = None
    for current in orbiters:
        required, blocker = current.position, None
        if (parent_radius is not None
                and current.position - current.clearance <= parent_radius):
            required = parent_radius + settings.min_distance + current.clearance
            blocker = "its parent"
        if previous is not None:
            after_previous = (
                previous.position + previous.clearance
                + settings.min_distance + current.clearance
            )
            if after_previous > required:
                required, blocker = after_previous, repr(previous.body.id)
        previous = current
        if current.position >= required:
            continue

        delta = required - current.position
        _shift(placements[current.body.id], delta)
        logger.debug(
            "Shifted %r outward by %.6g to clear %s",
            current.body.id, delta, blocker,
        )
        current.position = required
        current.clearance = effective_orbital_radius(current.body, placements, children)
        shifted += 1

    return shifted


def resolve_global_collisions(
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> int:
    """Repair sibling overlaps around every known parent; returns bodies shifted."""
    total = 0
    for parent_id in parents_deepest_first(children, index):
        total += resolve_sibling_collisions(
            children[parent_id], placements, settings, children,
        )
    return total
