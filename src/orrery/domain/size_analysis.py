# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
System size analysis.

Finds the base-10 logarithmic span of physical radii in a system so that
continuous view modes can normalize every body into [0, 1].
"""
from dataclasses import dataclass

import numpy as np

from .celestial_body import CelestialBody
from .constants import LayoutConstants


@dataclass(frozen=True)
class SizeRange:
    """Logarithmic radius span of a system."""
    log_min: float
    log_range: float

    def normalize(self, radius: float) -> float:
        """Position of a radius within the span, clamped to [0, 1]."""
        fraction = (float(np.log10(radius)) - self.log_min) / self.log_range
        return min(max(fraction, 0.0), 1.0)


def analyze_system_sizes(bodies: list[CelestialBody]) -> SizeRange:
    """
    Compute (log_min, log_range) over the positive physical radii.

    Missing or non-positive radii are skipped. An empty system uses a
    1..1000 span. Spans narrower than one order of magnitude are widened
    so that log_range >= 1.

    Args:
        bodies: All bodies of one system.

    Returns:
        SizeRange for normalization.
    """
    radii = np.array(
        [b.physical_radius for b in bodies
         if b.physical_radius is not None and b.physical_radius > 0],
        dtype=float,
    )

    if radii.size == 0:
        min_radius = LayoutConstants.EMPTY_SYSTEM_MIN_RADIUS
        max_radius = LayoutConstants.EMPTY_SYSTEM_MAX_RADIUS
    else:
        min_radius, max_radius = float(radii.min()), float(radii.max())

    if max_radius / min_radius < 10.0:
        max_radius = min_radius * 10.0

    log_min = float(np.log10(min_radius))
    log_range = max(
        float(np.log10(max_radius)) - log_min, LayoutConstants.MIN_LOG_RANGE,
    )
    return SizeRange(log_min=log_min, log_range=log_range)
