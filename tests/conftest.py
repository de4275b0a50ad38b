# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared fixtures: a Sol-like system with moons, a belt and a ring."""
import pytest

from orrery.domain.celestial_body import (
    BeltOrbit,
    CelestialBody,
    Classification,
    PointOrbit,
)

STAR = Classification.STAR
PLANET = Classification.PLANET
MOON = Classification.MOON


def _planet(body_id, radius, sma, period, geometry="terrestrial"):
    return CelestialBody(
        id=body_id, classification=PLANET, physical_radius=radius,
        orbit=PointOrbit("sol", sma, orbital_period=period), geometry=geometry,
        name=body_id.capitalize(),
    )


def _moon(body_id, parent, radius, sma, period):
    return CelestialBody(
        id=body_id, classification=MOON, physical_radius=radius,
        orbit=PointOrbit(parent, sma, orbital_period=period), geometry="rocky",
        name=body_id.capitalize(),
    )


@pytest.fixture
def sol_system():
    """Sun, inner planets, asteroid belt, Jupiter and Saturn with moons and rings.

    Radii in km, distances in AU, periods in days.
    """
    return [
        CelestialBody(id="sol", classification=STAR, physical_radius=695700.0,
                      geometry="star", name="Sol"),
        _planet("mercury", 2439.7, 0.387, 88.0),
        _planet("venus", 6051.8, 0.723, 224.7),
        _planet("earth", 6371.0, 1.0, 365.25),
        _moon("luna", "earth", 1737.4, 0.00257, 27.32),
        _planet("mars", 3389.5, 1.524, 687.0),
        _moon("phobos", "mars", 11.3, 0.0000627, 0.319),
        _moon("deimos", "mars", 6.2, 0.000157, 1.263),
        CelestialBody(
            id="asteroid-belt", classification=Classification.BELT,
            orbit=BeltOrbit("sol", 2.2, 3.2), geometry="belt", name="Main Belt",
        ),
        _planet("jupiter", 69911.0, 5.203, 4332.6, geometry="gas_giant"),
        _moon("io", "jupiter", 1821.6, 0.00282, 1.769),
        _moon("europa", "jupiter", 1560.8, 0.00449, 3.551),
        _moon("ganymede", "jupiter", 2634.1, 0.00716, 7.155),
        _moon("callisto", "jupiter", 2410.3, 0.01259, 16.69),
        _planet("saturn", 58232.0, 9.537, 10759.2, geometry="gas_giant"),
        CelestialBody(
            id="saturn-rings", classification=Classification.RING,
            orbit=BeltOrbit("saturn", 0.000447, 0.000937), geometry="ring",
            name="Saturn Rings",
        ),
        _moon("titan", "saturn", 2574.7, 0.00817, 15.95),
    ]
