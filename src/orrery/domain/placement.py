# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Layout records.

``Placement`` is the working record each pipeline stage refines in
place during one run. ``LayoutResult`` is the frozen per-body output
handed to callers.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class BeltGeometry:
    """Render-space extent of a belt or ring around its parent."""
    inner_radius: float
    outer_radius: float

    @property
    def center_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2.0

    @property
    def width(self) -> float:
        return self.outer_radius - self.inner_radius

    def shifted(self, delta: float) -> "BeltGeometry":
        return BeltGeometry(self.inner_radius + delta, self.outer_radius + delta)


@dataclass
class Placement:
    """Mutable per-body state while a layout is being computed."""
    visual_radius: float
    orbit_distance: float | None = None
    belt: BeltGeometry | None = None


@dataclass(frozen=True)
class LayoutResult:
    """Render-space geometry for one body."""
    visual_radius: float
    orbit_distance: float | None = None
    belt_geometry: BeltGeometry | None = None
    animation_speed: float | None = None

    @property
    def position(self) -> float:
        """Distance of the body's center (or belt mid-line) from its parent."""
        if self.belt_geometry is not None:
            return self.belt_geometry.center_radius
        return self.orbit_distance or 0.0
