# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for parent/child size hierarchy enforcement."""
import pytest

from orrery.domain.celestial_body import (
    BeltOrbit,
    CelestialBody,
    Classification,
    PointOrbit,
    group_by_parent,
    index_bodies,
)
from orrery.domain.hierarchy import enforce_size_hierarchy, recheck_orbit_clearance
from orrery.domain.layout import compute_system_layout
from orrery.domain.verification import find_sibling_overlaps, verify_layout
from orrery.domain.placement import BeltGeometry, Placement
from orrery.domain.view_mode import ViewMode, get_view_mode_settings


EXPLORATIONAL = get_view_mode_settings(ViewMode.EXPLORATIONAL)
SCIENTIFIC = get_view_mode_settings(ViewMode.SCIENTIFIC)
NAVIGATIONAL = get_view_mode_settings(ViewMode.NAVIGATIONAL)


def _enforce(bodies, placements, settings):
    enforce_size_hierarchy(
        placements, settings, group_by_parent(bodies), index_bodies(bodies),
    )


# ── Growth ──────────────────────────────────────────────────────────

class TestParentGrowth:

    def test_parent_already_larger_untouched(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        child = CelestialBody("c", Classification.MOON, 1.0, orbit=PointOrbit("p", 1.0))
        placements = {"p": Placement(0.5), "c": Placement(0.2)}
        _enforce([parent, child], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == 0.5

    def test_parent_grows_past_largest_child(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        small = CelestialBody("c1", Classification.MOON, 1.0, orbit=PointOrbit("p", 1.0))
        large = CelestialBody("c2", Classification.MOON, 1.0, orbit=PointOrbit("p", 2.0))
        placements = {"p": Placement(0.2), "c1": Placement(0.1), "c2": Placement(0.3)}
        _enforce([parent, small, large], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == pytest.approx(0.36)
        assert placements["c2"].visual_radius == 0.3

    def test_equal_sizes_grow(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        child = CelestialBody("c", Classification.PLANET, 1.0, orbit=PointOrbit("p", 1.0))
        placements = {"p": Placement(0.4), "c": Placement(0.4)}
        _enforce([parent, child], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius > placements["c"].visual_radius

    def test_barycenter_grows_over_stars_in_fixed_mode(self):
        bodies = [
            CelestialBody("ab", Classification.BARYCENTER),
            CelestialBody("a", Classification.STAR, 854000.0, orbit=PointOrbit("ab", 11.2)),
            CelestialBody("b", Classification.STAR, 602000.0, orbit=PointOrbit("ab", 12.4)),
        ]
        layout = compute_system_layout(bodies, ViewMode.NAVIGATIONAL)
        assert layout["ab"].visual_radius == pytest.approx(2.0 * 1.2)

    def test_exempt_children_ignored(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        ring = CelestialBody("r", Classification.RING, orbit=BeltOrbit("p", 1.0, 2.0))
        placements = {"p": Placement(0.1), "r": Placement(0.8, belt=BeltGeometry(1.0, 2.0))}
        _enforce([parent, ring], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == 0.1

    def test_deepest_parent_first(self):
        """A grown planet is then cleared by its star."""
        star = CelestialBody("s", Classification.STAR, 1.0)
        planet = CelestialBody("p", Classification.PLANET, 1.0, orbit=PointOrbit("s", 1.0))
        moon = CelestialBody("m", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.1))
        placements = {"s": Placement(0.3), "p": Placement(0.2), "m": Placement(0.3)}
        _enforce([star, planet, moon], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == pytest.approx(0.36)
        assert placements["s"].visual_radius == pytest.approx(0.432)


# ── Capped growth ───────────────────────────────────────────────────

class TestCappedGrowth:

    def test_star_capped_shrinks_children(self):
        star = CelestialBody("s", Classification.STAR, 10000.0)
        planet = CelestialBody("p", Classification.PLANET, 140000.0, orbit=PointOrbit("s", 1.0))
        moon = CelestialBody("m", Classification.MOON, 5000.0, orbit=PointOrbit("p", 0.01))
        placements = {"s": Placement(0.1), "p": Placement(40.0), "m": Placement(1.5)}
        _enforce([star, planet, moon], placements, SCIENTIFIC)

        factor = (40.0 / 48.0) * 0.8
        assert placements["s"].visual_radius == 40.0
        assert placements["p"].visual_radius == pytest.approx(40.0 * factor)
        assert placements["m"].visual_radius == pytest.approx(1.5 * factor)

    def test_shrink_floored_at_min_size(self):
        star = CelestialBody("s", Classification.STAR, 1.0)
        planet = CelestialBody("p", Classification.PLANET, 1.0, orbit=PointOrbit("s", 1.0))
        moon = CelestialBody("m", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.01))
        placements = {"s": Placement(0.1), "p": Placement(40.0), "m": Placement(0.11)}
        _enforce([star, planet, moon], placements, SCIENTIFIC)
        assert placements["m"].visual_radius == SCIENTIFIC.min_visual_size

    def test_capped_planet_above_child_keeps_children(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        child = CelestialBody("c", Classification.DWARF_PLANET, 1.0, orbit=PointOrbit("p", 1.0))
        placements = {"p": Placement(0.5), "c": Placement(0.75)}
        _enforce([parent, child], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == 0.8
        assert placements["c"].visual_radius == 0.75

    def test_capped_planet_at_child_size_shrinks(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        child = CelestialBody("c", Classification.DWARF_PLANET, 1.0, orbit=PointOrbit("p", 1.0))
        placements = {"p": Placement(0.5), "c": Placement(0.8)}
        _enforce([parent, child], placements, EXPLORATIONAL)
        assert placements["p"].visual_radius == 0.8
        assert placements["c"].visual_radius == pytest.approx(0.8 * (0.8 / 0.96) * 0.8)

    def test_fixed_mode_never_capped(self):
        parent = CelestialBody("p", Classification.STAR, 1.0)
        child = CelestialBody("c", Classification.STAR, 1.0, orbit=PointOrbit("p", 1.0))
        placements = {"p": Placement(2.0), "c": Placement(7.0)}
        _enforce([parent, child], placements, NAVIGATIONAL)
        assert placements["p"].visual_radius == pytest.approx(8.4)


# ── Moon re-check ───────────────────────────────────────────────────

class TestRecheckOrbitClearance:

    def test_moons_pushed_out_of_grown_parent(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        m1 = CelestialBody("m1", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.1))
        m2 = CelestialBody("m2", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.2))
        bodies = [parent, m1, m2]
        placements = {
            "p": Placement(2.0),
            "m1": Placement(0.1, orbit_distance=1.5),
            "m2": Placement(0.1, orbit_distance=1.9),
        }
        moved = recheck_orbit_clearance(
            placements, EXPLORATIONAL, group_by_parent(bodies), index_bodies(bodies),
        )
        assert moved == 2
        assert placements["m1"].orbit_distance == pytest.approx(2.2)
        assert placements["m2"].orbit_distance == pytest.approx(2.5)

    def test_clear_moons_untouched(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        moon = CelestialBody("m", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.1))
        placements = {"p": Placement(0.5), "m": Placement(0.1, orbit_distance=3.0)}
        moved = recheck_orbit_clearance(
            placements, EXPLORATIONAL,
            group_by_parent([parent, moon]), index_bodies([parent, moon]),
        )
        assert moved == 0
        assert placements["m"].orbit_distance == 3.0

    def test_ring_carried_past_pushed_moon(self):
        parent = CelestialBody("p", Classification.PLANET, 1.0)
        moon = CelestialBody("m", Classification.MOON, 1.0, orbit=PointOrbit("p", 0.1))
        ring = CelestialBody("r", Classification.RING, orbit=BeltOrbit("p", 0.15, 0.16))
        bodies = [parent, moon, ring]
        placements = {
            "p": Placement(2.0),
            "m": Placement(0.1, orbit_distance=1.5),
            "r": Placement(0.8, belt=BeltGeometry(1.7, 1.8)),
        }
        moved = recheck_orbit_clearance(
            placements, EXPLORATIONAL, group_by_parent(bodies), index_bodies(bodies),
        )
        assert moved == 2
        assert placements["m"].orbit_distance == pytest.approx(2.2)
        assert placements["r"].belt.inner_radius == pytest.approx(2.4)
        assert placements["r"].belt.width == pytest.approx(0.1)

    def test_grown_moon_system_cleared_against_siblings(self):
        star = CelestialBody("s", Classification.STAR, 1.0)
        a = CelestialBody("a", Classification.PLANET, 1.0, orbit=PointOrbit("s", 1.0))
        moon = CelestialBody("am", Classification.MOON, 1.0, orbit=PointOrbit("a", 0.1))
        b = CelestialBody("b", Classification.PLANET, 1.0, orbit=PointOrbit("s", 2.0))
        bodies = [star, a, moon, b]
        placements = {
            "s": Placement(1.0),
            "a": Placement(1.5, orbit_distance=5.0),
            "am": Placement(0.1, orbit_distance=1.0),
            "b": Placement(0.5, orbit_distance=6.5),
        }
        moved = recheck_orbit_clearance(
            placements, EXPLORATIONAL, group_by_parent(bodies), index_bodies(bodies),
        )
        assert moved == 2
        assert placements["am"].orbit_distance == pytest.approx(1.7)
        assert placements["b"].orbit_distance == pytest.approx(7.4)

    def test_grown_dwarf_keeps_moon_and_ring_apart(self):
        bodies = [
            CelestialBody("sun", Classification.STAR, 695700.0),
            CelestialBody("pluto", Classification.DWARF_PLANET, 1000.0,
                          orbit=PointOrbit("sun", 39.5)),
            CelestialBody("charon", Classification.MOON, 1000.0,
                          orbit=PointOrbit("pluto", 0.00013)),
            CelestialBody("haze", Classification.RING,
                          orbit=BeltOrbit("pluto", 0.0001, 0.00011)),
        ]
        layout = compute_system_layout(bodies, ViewMode.SCIENTIFIC)

        assert layout["pluto"].visual_radius == pytest.approx(0.24)
        assert find_sibling_overlaps(bodies, layout) == []
        assert verify_layout(bodies, layout).is_valid
        charon = layout["charon"]
        haze = layout["haze"].belt_geometry
        assert haze.inner_radius > layout["pluto"].visual_radius
        assert haze.outer_radius < charon.orbit_distance - charon.visual_radius
