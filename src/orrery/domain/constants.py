# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Layout engine constants.

Mode-independent factors shared by the layout stages. Per-mode
parameters live in ``view_mode``.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class _LayoutConstants:
    """Fixed factors of the layout rules."""
    EARTH_ORBITAL_PERIOD_DAYS: float = 365.0
    BASE_ANIMATION_SPEED: float = 1.0
    MOON_MIN_SIZE_FACTOR: float = 2.0        # moon floor, x mode minimum size
    MOON_MIN_SAFETY_FACTOR: float = 2.0      # lower bound on moon spacing multiplier
    HIERARCHY_GROWTH_FACTOR: float = 1.2     # parent size, x largest child
    HIERARCHY_SHRINK_SAFETY: float = 0.8
    EMPTY_SYSTEM_MIN_RADIUS: float = 1.0     # physical units
    EMPTY_SYSTEM_MAX_RADIUS: float = 1000.0  # physical units
    MIN_LOG_RANGE: float = 1.0               # decades


LayoutConstants: _LayoutConstants = _LayoutConstants()
