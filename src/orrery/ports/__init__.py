# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for system input and layout export.

Adapters implement these to handle different file formats.
"""
from typing import Mapping, Protocol, runtime_checkable

from orrery.domain.celestial_body import CelestialBody
from orrery.domain.placement import LayoutResult


@runtime_checkable
class SystemReader(Protocol):
    """Port for reading an orbital system description."""

    def read_system(self, path: str) -> list[CelestialBody]:
        """
        Read and parse a system file.

        Args:
            path: Input file path.

        Returns:
            Bodies in file order.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If an entry cannot be turned into a body.
        """
        ...


@runtime_checkable
class LayoutExporter(Protocol):
    """Port for writing a computed layout to file."""

    def export(
        self,
        bodies: list[CelestialBody],
        layout: Mapping[str, LayoutResult],
        path: str,
    ) -> int:
        """
        Export a layout.

        Args:
            bodies: Bodies the layout was computed for, in output order.
            layout: Body id to LayoutResult.
            path: Output file path.

        Returns:
            Number of bodies exported.
        """
        ...
