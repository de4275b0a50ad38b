# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Celestial body input model.

Immutable description of one body in a hierarchical orbital system:
a physical radius plus an optional orbit relative to a parent body.
Bodies without an orbit (or whose parent is unknown) are roots anchored
at the coordinate origin.
"""
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Classification(Enum):
    """Kind of celestial body."""
    STAR = "star"
    PLANET = "planet"
    DWARF_PLANET = "dwarf-planet"
    MOON = "moon"
    BELT = "belt"
    RING = "ring"
    BARYCENTER = "barycenter"
    COMPACT_OBJECT = "compact-object"


# Belts and rings are exempt from the parent-larger-than-child rule.
HIERARCHY_EXEMPT = frozenset({Classification.BELT, Classification.RING})


@dataclass(frozen=True)
class PointOrbit:
    """Orbit of a point-like body (star with parent, planet, moon)."""
    parent_id: str
    semi_major_axis: float
    eccentricity: float = 0.0
    inclination: float = 0.0
    orbital_period: float | None = None


@dataclass(frozen=True)
class BeltOrbit:
    """Ring-shaped region around a parent, in the same unit as semi-major axes."""
    parent_id: str
    inner_radius: float
    outer_radius: float
    inclination: float = 0.0
    eccentricity: float = 0.0


@dataclass(frozen=True)
class CelestialBody:
    """A body in an orbital system.

    ``geometry`` is an optional rendering hint (``"gas_giant"``,
    ``"terrestrial"``, ...) used to disambiguate planet sizes in
    fixed-size view modes.
    """
    id: str
    classification: Classification
    physical_radius: float | None = None
    orbit: PointOrbit | BeltOrbit | None = None
    geometry: str | None = None
    name: str | None = None

    @property
    def parent_id(self) -> str | None:
        return self.orbit.parent_id if self.orbit is not None else None

    @property
    def is_moon(self) -> bool:
        return self.classification is Classification.MOON

    @property
    def is_hierarchy_exempt(self) -> bool:
        if self.classification in HIERARCHY_EXEMPT:
            return True
        return self.geometry in ("belt", "ring")

    @property
    def orbital_sort_key(self) -> float:
        """Original physical distance used to order siblings."""
        if isinstance(self.orbit, PointOrbit):
            return self.orbit.semi_major_axis
        if isinstance(self.orbit, BeltOrbit):
            return self.orbit.inner_radius
        return 0.0


def index_bodies(bodies: list[CelestialBody]) -> dict[str, CelestialBody]:
    """Map body id to body; the first occurrence of a duplicated id wins."""
    index: dict[str, CelestialBody] = {}
    for body in bodies:
        index.setdefault(body.id, body)
    return index


def find_root_bodies(bodies: list[CelestialBody]) -> list[CelestialBody]:
    """Bodies anchored at the origin: no orbit, or an orbit around an unknown parent."""
    known = {b.id for b in bodies}
    return [b for b in bodies if b.parent_id is None or b.parent_id not in known]


def group_by_parent(bodies: list[CelestialBody]) -> dict[str, list[CelestialBody]]:
    """
    Group orbiting bodies by parent id, preserving input order.

    Parent ids that do not resolve to a body in the input are kept as
    their own groups and logged once each.
    """
    known = {b.id for b in bodies}
    groups: dict[str, list[CelestialBody]] = {}
    for body in bodies:
        parent_id = body.parent_id
        if parent_id is None:
            continue
        if parent_id not in known and parent_id not in groups:
            logger.warning(
                "Body %r orbits unknown parent %r; treating it as a root",
                body.id, parent_id,
            )
        groups.setdefault(parent_id, []).append(body)
    return groups


def depth_of(body: CelestialBody, index: dict[str, CelestialBody]) -> int:
    """Number of known ancestors above a body."""
    depth = 0
    seen = {body.id}
    current = body
    while current.parent_id is not None and current.parent_id in index:
        if current.parent_id in seen:
            break
        seen.add(current.parent_id)
        current = index[current.parent_id]
        depth += 1
    return depth
