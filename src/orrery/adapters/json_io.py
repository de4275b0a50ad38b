# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON system reader and layout writer.

Reads the orbital-system file format::

    {"objects": [
        {"id": "earth", "name": "Earth", "classification": "planet",
         "geometry_type": "terrestrial",
         "properties": {"radius": 6371},
         "orbit": {"parent": "sol", "semi_major_axis": 1.0,
                   "eccentricity": 0.017, "inclination": 0.0,
                   "orbital_period": 365.25}},
        ...
    ]}

Belt and ring orbits carry ``inner_radius`` / ``outer_radius`` instead of
``semi_major_axis``. Objects without an orbit are roots.

External dependencies (json, file I/O) are confined to this adapter.
"""
import json
import logging
import math
from typing import Any, Mapping

from orrery.domain.celestial_body import (
    BeltOrbit,
    CelestialBody,
    Classification,
    PointOrbit,
)
from orrery.domain.placement import LayoutResult
from orrery.domain.view_mode import ViewMode
from orrery.ports import LayoutExporter, SystemReader

logger = logging.getLogger(__name__)


def _number(value: Any, field: str, body_id: str, required: bool = True) -> float | None:
    if value is None:
        if required:
            raise ValueError(f"Body '{body_id}': missing '{field}'")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Body '{body_id}': '{field}' must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"Body '{body_id}': '{field}' must be finite, got {value!r}")
    return result


def _parse_orbit(data: Mapping[str, Any], body_id: str) -> PointOrbit | BeltOrbit:
    parent = data.get('parent')
    if not isinstance(parent, str) or not parent:
        raise ValueError(f"Body '{body_id}': orbit has no 'parent'")

    if 'semi_major_axis' in data:
        return PointOrbit(
            parent_id=parent,
            semi_major_axis=_number(data['semi_major_axis'], 'semi_major_axis', body_id),
            eccentricity=_number(data.get('eccentricity', 0.0), 'eccentricity', body_id),
            inclination=_number(data.get('inclination', 0.0), 'inclination', body_id),
            orbital_period=_number(
                data.get('orbital_period'), 'orbital_period', body_id, required=False,
            ),
        )

    if 'inner_radius' in data:
        inner = _number(data['inner_radius'], 'inner_radius', body_id)
        outer = _number(data.get('outer_radius'), 'outer_radius', body_id)
        if outer < inner:
            raise ValueError(
                f"Body '{body_id}': outer_radius {outer} is smaller than inner_radius {inner}"
            )
        return BeltOrbit(
            parent_id=parent,
            inner_radius=inner,
            outer_radius=outer,
            inclination=_number(data.get('inclination', 0.0), 'inclination', body_id),
            eccentricity=_number(data.get('eccentricity', 0.0), 'eccentricity', body_id),
        )

    raise ValueError(
        f"Body '{body_id}': orbit needs 'semi_major_axis' or 'inner_radius'"
    )


def parse_body(entry: Mapping[str, Any]) -> CelestialBody:
    """
    Build a CelestialBody from one ``objects`` entry.

    Raises:
        ValueError: If a required field is missing or has the wrong type.
    """
    if not isinstance(entry, Mapping):
        raise ValueError(f"System object must be a JSON object, got {type(entry).__name__}")

    body_id = entry.get('id')
    if not isinstance(body_id, str) or not body_id:
        raise ValueError(f"System object without a valid 'id': {entry!r}")

    try:
        classification = Classification(entry.get('classification'))
    except ValueError:
        raise ValueError(
            f"Body '{body_id}': unknown classification {entry.get('classification')!r}"
        ) from None

    properties = entry.get('properties') or {}
    if not isinstance(properties, Mapping):
        raise ValueError(f"Body '{body_id}': 'properties' must be an object")
    radius = _number(properties.get('radius'), 'radius', body_id, required=False)

    orbit_data = entry.get('orbit')
    orbit = None
    if orbit_data is not None:
        if not isinstance(orbit_data, Mapping):
            raise ValueError(f"Body '{body_id}': 'orbit' must be an object")
        orbit = _parse_orbit(orbit_data, body_id)

    return CelestialBody(
        id=body_id,
        classification=classification,
        physical_radius=radius,
        orbit=orbit,
        geometry=entry.get('geometry_type'),
        name=entry.get('name'),
    )


class JsonSystemReader(SystemReader):
    """Reads orbital systems from JSON files."""

    def read_system(self, path: str) -> list[CelestialBody]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return self.parse_system(data)

    def parse_system(self, data: Any) -> list[CelestialBody]:
        """Bodies of an already-decoded system document, in file order."""
        if not isinstance(data, Mapping) or not isinstance(data.get('objects'), list):
            raise ValueError("System data must be an object with an 'objects' list")

        bodies = [parse_body(entry) for entry in data['objects']]

        seen: set[str] = set()
        for body in bodies:
            if body.id in seen:
                logger.warning("Duplicate body id %r; the first occurrence is used", body.id)
            seen.add(body.id)

        logger.info("Read %d bodies", len(bodies))
        return bodies


def layout_to_dict(result: LayoutResult) -> dict[str, Any]:
    """JSON-ready representation of one LayoutResult."""
    belt = None
    if result.belt_geometry is not None:
        belt = {
            'inner_radius': result.belt_geometry.inner_radius,
            'outer_radius': result.belt_geometry.outer_radius,
            'center_radius': result.belt_geometry.center_radius,
        }
    return {
        'visual_radius': result.visual_radius,
        'orbit_distance': result.orbit_distance,
        'belt_geometry': belt,
        'animation_speed': result.animation_speed,
    }


class JsonLayoutWriter(LayoutExporter):
    """Writes a computed layout to a JSON file keyed by body id."""

    def __init__(self, view_mode: ViewMode = ViewMode.EXPLORATIONAL) -> None:
        self._view_mode = view_mode

    def export(
        self,
        bodies: list[CelestialBody],
        layout: Mapping[str, LayoutResult],
        path: str,
    ) -> int:
        entries: dict[str, Any] = {}
        for body in bodies:
            if body.id in layout and body.id not in entries:
                entries[body.id] = layout_to_dict(layout[body.id])

        document = {
            'view_mode': self._view_mode.value,
            'bodies': entries,
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        return len(entries)
