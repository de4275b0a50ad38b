# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Two-pass orbit placement.

A planet's clearance depends on the extent of its moon system, while
the moon system is laid out relative to the planet. The dependency is
broken by ordering, not iteration:

    Pass 1 (moons): every parent's moons are placed outward from the
        parent's safe zone, sorted by semi-major axis.
    Pass 2 (planets, belts, rings): with all moon systems known, the
        children of each parent are placed outward in order of original
        distance using each body's effective orbital radius. Moons that
        share a parent with rings or planets are swept again with them.
        Deeper parents go first so that ring systems are known before
        their planet is placed.

All distances are render-space units measured from the parent center.
"""
from .celestial_body import BeltOrbit, CelestialBody, PointOrbit, depth_of
from .constants import LayoutConstants
from .placement import BeltGeometry, Placement
from .view_mode import ViewModeSettings


def is_moon_pass_body(body: CelestialBody) -> bool:
    """True for bodies placed by the moon pass."""
    return body.is_moon and isinstance(body.orbit, PointOrbit)


def effective_orbital_radius(
    body: CelestialBody,
    placements: dict[str, Placement],
    children: dict[str, list[CelestialBody]],
) -> float:
    """
    Radius a sibling must clear around this body's orbit.

    Belts use half their width. Point bodies use the larger of their own
    visual radius and the outer edge of anything already placed around
    them (moons, rings).
    """
    placement = placements[body.id]
    if placement.belt is not None:
        return placement.belt.width / 2.0

    extent = placement.visual_radius
    for child in children.get(body.id, ()):
        child_placement = placements.get(child.id)
        if child_placement is None:
            continue
        if child_placement.belt is not None:
            extent = max(extent, child_placement.belt.outer_radius)
        elif child_placement.orbit_distance is not None:
            extent = max(
                extent,
                child_placement.orbit_distance + child_placement.visual_radius,
            )
    return extent


def footprint(
    body: CelestialBody,
    placements: dict[str, Placement],
    children: dict[str, list[CelestialBody]],
) -> tuple[float, float] | None:
    """(inner, outer) interval a body occupies around its parent, or None if unplaced."""
    placement = placements.get(body.id)
    if placement is None:
        return None
    if placement.belt is not None:
        return placement.belt.inner_radius, placement.belt.outer_radius
    if placement.orbit_distance is None:
        return None
    radius = effective_orbital_radius(body, placements, children)
    return placement.orbit_distance - radius, placement.orbit_distance + radius


def _start_distance(parent_radius: float, settings: ViewModeSettings) -> float:
    return max(parent_radius * settings.safety_multiplier, settings.min_distance)


def _place_in_order(
    parent_id: str,
    ordered: list[CelestialBody],
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
) -> None:
    """
    Place one parent's children outward in the given order.

    Every body clears the outer edge of the one placed before it by
    ``min_distance``. Moons also keep the surface floor and spacing
    cursor of the moon rule; belts keep their scaled width.
    """
    parent_radius = placements[parent_id].visual_radius
    moon_safety = max(settings.safety_multiplier, LayoutConstants.MOON_MIN_SAFETY_FACTOR)
    start = _start_distance(parent_radius, settings)
    cursor = start
    previous_edge: float | None = None

    for body in ordered:
        if previous_edge is None:
            required_inner = start
        else:
            required_inner = previous_edge + settings.min_distance

        if isinstance(body.orbit, BeltOrbit):
            desired_inner = body.orbit.inner_radius * settings.orbit_scaling
            width = max(body.orbit.outer_radius - body.orbit.inner_radius, 0.0)
            width *= settings.orbit_scaling
            inner = max(desired_inner, required_inner)
            belt = BeltGeometry(inner_radius=inner, outer_radius=inner + width)
            placements[body.id].belt = belt
            previous_edge = belt.outer_radius
            continue

        radius = effective_orbital_radius(body, placements, children)
        desired = body.orbit.semi_major_axis * settings.orbit_scaling

        if is_moon_pass_body(body):
            floor = parent_radius + radius + settings.min_distance
            if previous_edge is not None:
                floor = max(floor, required_inner + radius)
            actual = max(desired, cursor, floor)
            cursor = actual + radius * moon_safety + settings.min_distance
        else:
            actual = max(desired, required_inner + radius)

        placements[body.id].orbit_distance = actual
        previous_edge = actual + radius


def parents_deepest_first(
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> list[str]:
    """Known parent ids ordered by descending depth, input order among equals."""
    known = [pid for pid in children if pid in index]
    return sorted(known, key=lambda pid: -depth_of(index[pid], index))


def place_moon_orbits(
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> None:
    """
    Pass 1: place every moon relative to its parent.

    Each moon sits at the larger of its scaled semi-major axis, the
    running cursor and the distance at which it clears both the parent's
    surface and the previous moon's outer edge. Spacing uses effective
    radii, so a moon carrying its own moons is cleared as a whole; deeper
    parents go first for that reason.
    """
    for parent_id in parents_deepest_first(children, index):
        moons = sorted(
            (b for b in children[parent_id] if is_moon_pass_body(b)),
            key=lambda b: b.orbit.semi_major_axis,
        )
        if moons:
            _place_in_order(parent_id, moons, placements, settings, children)


def place_sibling_orbits(
    placements: dict[str, Placement],
    settings: ViewModeSettings,
    children: dict[str, list[CelestialBody]],
    index: dict[str, CelestialBody],
) -> None:
    """
    Pass 2: place planets, belts and rings around each parent.

    Siblings are taken in order of original semi-major axis (belts by
    inner radius). Each point body is centered at the larger of its
    scaled distance and the first position at which its effective
    radius clears the previous sibling. Belts keep their scaled physical
    width and are pushed outward as a whole by the same rule.

    Around a parent that has moons as well, the moons are placed again
    in the same sweep so that the whole group keeps its original order.
    Parents whose children are all moons keep their Pass 1 layout.
    """
    for parent_id in parents_deepest_first(children, index):
        siblings = [b for b in children[parent_id] if b.orbit is not None]
        if all(is_moon_pass_body(b) for b in siblings):
            continue
        siblings.sort(key=lambda b: b.orbital_sort_key)
        _place_in_order(parent_id, siblings, placements, settings, children)
