# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Layout verification.

Read-only checks of a finished layout against its input bodies:
missing results, parent/child size ordering and sibling footprint
overlaps. Footprints follow the placement rules: a point body occupies
``[d - eff, d + eff]`` where ``eff`` includes its moons and rings, a
belt occupies ``[inner, outer]``.
"""
from dataclasses import dataclass
from typing import Mapping

import numpy as np

from .celestial_body import CelestialBody, group_by_parent, index_bodies
from .placement import LayoutResult

# Absolute slack for floating-point comparisons of render-space values.
_OVERLAP_TOLERANCE = 1e-9


@dataclass(frozen=True)
class HierarchyViolation:
    """A non-exempt child rendered at least as large as its parent."""
    parent_id: str
    child_id: str
    parent_radius: float
    child_radius: float


@dataclass(frozen=True)
class SiblingOverlap:
    """Two siblings whose footprints intersect."""
    parent_id: str
    first_id: str
    second_id: str
    overlap: float


@dataclass(frozen=True)
class LayoutReport:
    """Outcome of ``verify_layout``."""
    missing: tuple[str, ...]
    hierarchy_violations: tuple[HierarchyViolation, ...]
    sibling_overlaps: tuple[SiblingOverlap, ...]

    @property
    def is_valid(self) -> bool:
        return not (self.missing or self.hierarchy_violations or self.sibling_overlaps)


def find_missing_results(
    bodies: list[CelestialBody],
    layout: Mapping[str, LayoutResult],
) -> list[str]:
    """Ids of input bodies with no layout entry, in input order."""
    return [bid for bid in index_bodies(bodies) if bid not in layout]


def find_hierarchy_violations(
    bodies: list[CelestialBody],
    layout: Mapping[str, LayoutResult],
) -> list[HierarchyViolation]:
    """Parent/child edges where the parent does not render strictly larger."""
    index = index_bodies(bodies)
    violations = []
    for body in index.values():
        parent_id = body.parent_id
        if parent_id is None or parent_id not in index or body.is_hierarchy_exempt:
            continue
        if body.id not in layout or parent_id not in layout:
            continue
        parent_radius = layout[parent_id].visual_radius
        child_radius = layout[body.id].visual_radius
        if parent_radius <= child_radius:
            violations.append(HierarchyViolation(
                parent_id=parent_id,
                child_id=body.id,
                parent_radius=parent_radius,
                child_radius=child_radius,
            ))
    return violations


def _effective_radius(
    body: CelestialBody,
    layout: Mapping[str, LayoutResult],
    children: dict[str, list[CelestialBody]],
) -> float:
    result = layout[body.id]
    if result.belt_geometry is not None:
        return result.belt_geometry.width / 2.0
    extent = result.visual_radius
    for child in children.get(body.id, ()):
        child_result = layout.get(child.id)
        if child_result is None:
            continue
        if child_result.belt_geometry is not None:
            extent = max(extent, child_result.belt_geometry.outer_radius)
        elif child_result.orbit_distance is not None:
            extent = max(extent, child_result.orbit_distance + child_result.visual_radius)
    return extent


def _footprints(
    siblings: list[CelestialBody],
    layout: Mapping[str, LayoutResult],
    children: dict[str, list[CelestialBody]],
) -> tuple[list[str], np.ndarray]:
    ids: list[str] = []
    intervals: list[tuple[float, float]] = []
    for body in siblings:
        result = layout.get(body.id)
        if result is None:
            continue
        if result.belt_geometry is not None:
            belt = result.belt_geometry
            intervals.append((belt.inner_radius, belt.outer_radius))
        elif result.orbit_distance is not None:
            eff = _effective_radius(body, layout, children)
            intervals.append((result.orbit_distance - eff, result.orbit_distance + eff))
        else:
            continue
        ids.append(body.id)
    return ids, np.array(intervals, dtype=float).reshape(-1, 2)


def find_sibling_overlaps(
    bodies: list[CelestialBody],
    layout: Mapping[str, LayoutResult],
) -> list[SiblingOverlap]:
    """
    Sibling pairs around a known parent whose footprints intersect.

    Args:
        bodies: Input bodies of the layout.
        layout: Result of a layout computation.

    Returns:
        One SiblingOverlap per intersecting pair, with the overlap depth.
    """
    index = index_bodies(bodies)
    children = group_by_parent(list(index.values()))
    overlaps = []
    for parent_id, siblings in children.items():
        if parent_id not in index:
            continue
        ids, intervals = _footprints(siblings, layout, children)
        if len(ids) < 2:
            continue

        inner = intervals[:, 0]
        outer = intervals[:, 1]
        # depth[i, j] > 0 when interval i and interval j intersect
        depth = np.minimum(outer[:, None], outer[None, :]) - np.maximum(
            inner[:, None], inner[None, :],
        )
        rows, cols = np.nonzero(np.triu(depth > _OVERLAP_TOLERANCE, k=1))
        for i, j in zip(rows, cols):
            overlaps.append(SiblingOverlap(
                parent_id=parent_id,
                first_id=ids[i],
                second_id=ids[j],
                overlap=float(depth[i, j]),
            ))
    return overlaps


def verify_layout(
    bodies: list[CelestialBody],
    layout: Mapping[str, LayoutResult],
) -> LayoutReport:
    """Run every layout check and collect the findings."""
    bodies = list(bodies)
    return LayoutReport(
        missing=tuple(find_missing_results(bodies, layout)),
        hierarchy_violations=tuple(find_hierarchy_violations(bodies, layout)),
        sibling_overlaps=tuple(find_sibling_overlaps(bodies, layout)),
    )
