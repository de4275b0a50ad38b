# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV layout exporter.

Exports one row per body with its render-space geometry. Empty cells
mark values a body does not have (no orbit distance for roots and
belts, no belt radii for point bodies).
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
from typing import Mapping

from orrery.domain.celestial_body import CelestialBody
from orrery.domain.placement import LayoutResult
from orrery.ports import LayoutExporter


_HEADER = [
    'id', 'name', 'classification', 'parent_id',
    'visual_radius', 'orbit_distance',
    'belt_inner_radius', 'belt_outer_radius', 'animation_speed',
]


def _fmt(value: float | None) -> str:
    return '' if value is None else f'{value:.6f}'


class CsvLayoutExporter(LayoutExporter):
    """Exports a computed layout to CSV."""

    def export(
        self,
        bodies: list[CelestialBody],
        layout: Mapping[str, LayoutResult],
        path: str,
    ) -> int:
        written = 0
        seen: set[str] = set()
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for body in bodies:
                result = layout.get(body.id)
                if result is None or body.id in seen:
                    continue
                seen.add(body.id)
                belt = result.belt_geometry

                writer.writerow([
                    body.id,
                    body.name or '',
                    body.classification.value,
                    body.parent_id or '',
                    _fmt(result.visual_radius),
                    _fmt(result.orbit_distance),
                    _fmt(belt.inner_radius if belt is not None else None),
                    _fmt(belt.outer_radius if belt is not None else None),
                    _fmt(result.animation_speed),
                ])
                written += 1

        return written
