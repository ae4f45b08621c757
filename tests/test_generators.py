import math
from pathlib import Path
import warnings

import numpy as np
import pytest

from ringfields.base.color import Color
from ringfields.base.config import RingConfiguration, RingType
from ringfields.exceptions import DegenerateInputWarning
from ringfields.factory import generate_elements, get_generator
from ringfields.generators import (
    AccretionDiskGenerator,
    DebrisDiskGenerator,
    DustCloudGenerator,
    PlanetaryRingGenerator,
)


def attr(elements, name):
    return np.array([getattr(el, name) for el in elements])


def test_count_and_bounds(preset_config):
    elements = generate_elements(preset_config, rng=42)
    assert len(elements) == preset_config.num_elements

    a = attr(elements, "semi_major_axis")
    e = attr(elements, "eccentricity")
    size = attr(elements, "size")
    inc = attr(elements, "inclination")
    assert np.all(a >= preset_config.inner_radius)
    assert np.all(a <= preset_config.outer_radius)
    assert np.all(e >= 0)
    assert np.all(e < preset_config.max_eccentricity)
    assert np.all(size >= preset_config.min_size)
    assert np.all(size <= preset_config.max_size)
    assert np.all(np.abs(inc) <= math.radians(preset_config.max_inclination_deg) + 1e-12)


def test_positions_are_finite(preset_config):
    elements = generate_elements(preset_config, rng=3)
    xyz = np.array([el.position for el in elements])
    assert np.all(np.isfinite(xyz))


def test_same_seed_gives_identical_elements(preset_config):
    first = generate_elements(preset_config, rng=42)
    second = generate_elements(preset_config, rng=42)
    assert [el.dump_params() for el in first] == [el.dump_params() for el in second]
    assert [el.color for el in first] == [el.color for el in second]


def test_different_seeds_differ(preset_config):
    first = generate_elements(preset_config, rng=1)
    second = generate_elements(preset_config, rng=2)
    assert attr(first, "semi_major_axis").tolist() != attr(second, "semi_major_axis").tolist()


def test_every_ring_type_generates(ring_type):
    config = RingConfiguration(ring_type=ring_type, num_elements=200)
    elements = get_generator(ring_type).generate(config, np.random.default_rng(0))
    assert len(elements) == 200


def test_saturn_end_to_end(saturn_config):
    config = RingConfiguration(
        ring_type=RingType.PLANETARY_RING,
        inner_radius=15,
        outer_radius=45,
        num_elements=10000,
        max_eccentricity=0.01,
        max_inclination_deg=0.5,
    )
    elements = generate_elements(config, rng=42)
    assert len(elements) == 10000
    for el in elements:
        assert 15 <= el.semi_major_axis <= 45
        assert el.eccentricity < 0.01 * 0.05
    before = [el.angle for el in elements]
    for el in elements:
        el.advance(1.0)
    for start, el in zip(before, elements):
        assert el.angle == start + el.angular_speed


def test_planetary_ring_is_flat_and_keplerian(saturn_config):
    elements = generate_elements(saturn_config.with_num_elements(2000), rng=5)
    inc = attr(elements, "inclination")
    cap = math.radians(saturn_config.max_inclination_deg)
    assert np.all(np.abs(inc) <= cap * PlanetaryRingGenerator.INCLINATION_SCALE)

    a = attr(elements, "semi_major_axis")
    speed = attr(elements, "angular_speed")
    expected = saturn_config.base_angular_speed * np.sqrt(saturn_config.inner_radius / a)
    np.testing.assert_allclose(speed, expected, rtol=1e-9)


def test_asteroid_belt_inclinations_scatter_around_plane():
    config = RingConfiguration(
        ring_type=RingType.ASTEROID_BELT, num_elements=4000, max_inclination_deg=12
    )
    inc = attr(generate_elements(config, rng=9), "inclination")
    cap = math.radians(12)
    assert np.all(np.abs(inc) <= cap)
    assert abs(np.mean(inc)) < 0.1 * cap
    assert np.std(inc) > 0.2 * cap


def test_debris_disk_sizes_are_bimodal():
    config = RingConfiguration(
        ring_type=RingType.DEBRIS_DISK, num_elements=5000, min_size=1.0, max_size=3.0
    )
    size = attr(generate_elements(config, rng=11), "size")
    frac = (size - 1.0) / 2.0
    dust = frac <= DebrisDiskGenerator.DUST_SIZE_SCALE + 1e-9
    planetesimal = frac >= DebrisDiskGenerator.PLANETESIMAL_SIZE_FLOOR - 1e-9
    assert np.all(dust | planetesimal)
    assert 0.75 < dust.mean() < 0.85


def test_debris_disk_eccentricities_are_bimodal():
    config = RingConfiguration(
        ring_type=RingType.DEBRIS_DISK, num_elements=5000, max_eccentricity=0.1
    )
    e = attr(generate_elements(config, rng=12), "eccentricity")
    low = e <= 0.1 * DebrisDiskGenerator.CIRCULAR_ECCENTRICITY_SCALE
    # 60 % are drawn below the low cap, plus the share of the wide draws that land there
    assert low.mean() == pytest.approx(0.6 + 0.4 * 0.3, abs=0.03)


def test_dust_cloud_drifts_slowly_both_ways():
    config = RingConfiguration(
        ring_type=RingType.DUST_CLOUD,
        num_elements=3000,
        base_angular_speed=0.001,
        max_inclination_deg=90,
        max_eccentricity=0.5,
    )
    elements = generate_elements(config, rng=13)
    speed = attr(elements, "angular_speed")
    assert np.all(np.abs(speed) >= 0.001 * DustCloudGenerator.SPEED_SCALE * 0.5)
    assert np.all(np.abs(speed) < 0.001 * DustCloudGenerator.SPEED_SCALE * 1.5)
    assert (speed > 0).any() and (speed < 0).any()
    assert np.all(attr(elements, "eccentricity") < DustCloudGenerator.MAX_ECCENTRICITY)
    opacity = np.array([el.color.opacity for el in elements])
    assert np.all((opacity >= 0.1) & (opacity <= 1.0))
    assert opacity.std() > 0


def test_dust_cloud_fills_three_dimensions():
    config = RingConfiguration(
        ring_type=RingType.DUST_CLOUD, num_elements=3000, max_inclination_deg=90
    )
    inc = attr(generate_elements(config, rng=14), "inclination")
    # Uniform directions on the sphere give |inc| above 45 degrees for ~29 %
    assert (np.abs(inc) > math.pi / 4).mean() > 0.2


def test_dust_cloud_respects_inclination_cap():
    config = RingConfiguration(
        ring_type=RingType.DUST_CLOUD, num_elements=1000, max_inclination_deg=10
    )
    inc = attr(generate_elements(config, rng=15), "inclination")
    assert np.all(np.abs(inc) <= math.radians(10) + 1e-12)


def test_accretion_disk_inner_elements_orbit_faster():
    config = RingConfiguration(
        ring_type=RingType.ACCRETION_DISK,
        inner_radius=8,
        outer_radius=50,
        num_elements=4000,
        base_angular_speed=0.008,
    )
    elements = generate_elements(config, rng=16)
    a = attr(elements, "semi_major_axis")
    speed = attr(elements, "angular_speed")

    expected = (
        config.base_angular_speed
        * AccretionDiskGenerator.SPEED_BOOST
        * np.sqrt(config.inner_radius / a)
    )
    ratio = speed / expected
    assert np.all(ratio >= 1 - AccretionDiskGenerator.SPEED_JITTER - 1e-9)
    assert np.all(ratio <= 1 + AccretionDiskGenerator.SPEED_JITTER + 1e-9)

    order = np.argsort(a)
    inner_half = speed[order[: len(order) // 2]]
    outer_half = speed[order[len(order) // 2:]]
    assert inner_half.mean() > outer_half.mean()
    # expected speed is monotonic in a
    assert np.all(np.diff(expected[order]) <= 0)


def test_accretion_disk_is_denser_towards_center():
    config = RingConfiguration(
        ring_type=RingType.ACCRETION_DISK, inner_radius=0, outer_radius=100, num_elements=4000
    )
    a = attr(generate_elements(config, rng=17), "semi_major_axis")
    assert np.median(a) < 50


def test_accretion_disk_colors_cool_outwards():
    config = RingConfiguration(
        ring_type=RingType.ACCRETION_DISK,
        num_elements=2000,
        primary_color=Color(0.0, 0.0, 1.0),
        secondary_color=Color(1.0, 0.0, 0.0),
    )
    elements = generate_elements(config, rng=18)
    a = attr(elements, "semi_major_axis")
    red = np.array([el.color.red for el in elements])
    order = np.argsort(a)
    assert red[order[:200]].mean() < red[order[-200:]].mean()


def test_zero_eccentricity_cap_gives_circular_orbits():
    config = RingConfiguration(ring_type=RingType.ASTEROID_BELT, max_eccentricity=0.0, num_elements=100)
    for el in generate_elements(config, rng=1):
        assert el.eccentricity == 0.0
        assert el.radius == el.semi_major_axis


@pytest.mark.parametrize("num_elements", [0, -5])
def test_no_elements_requested(ring_type, num_elements):
    config = RingConfiguration(ring_type=ring_type, num_elements=num_elements)
    with pytest.warns(DegenerateInputWarning):
        assert generate_elements(config) == []


def test_inverted_radii_give_empty_field(ring_type):
    config = RingConfiguration(ring_type=ring_type, inner_radius=60, outer_radius=40)
    with pytest.warns(DegenerateInputWarning):
        assert generate_elements(config) == []


def test_zero_width_field(ring_type):
    config = RingConfiguration(
        ring_type=ring_type, inner_radius=30, outer_radius=30, num_elements=50
    )
    with pytest.warns(DegenerateInputWarning):
        elements = generate_elements(config)
    assert len(elements) == 50
    assert all(el.semi_major_axis == 30 for el in elements)


def test_inverted_size_range_is_swapped(ring_type):
    config = RingConfiguration(ring_type=ring_type, min_size=3.0, max_size=1.0, num_elements=200)
    with pytest.warns(DegenerateInputWarning):
        elements = generate_elements(config)
    size = attr(elements, "size")
    assert np.all((size >= 1.0) & (size <= 3.0))


def test_out_of_range_caps_are_clamped(ring_type):
    config = RingConfiguration(
        ring_type=ring_type,
        max_eccentricity=1.5,
        max_inclination_deg=270,
        thickness=-2,
        num_elements=300,
    )
    with pytest.warns(DegenerateInputWarning):
        elements = generate_elements(config)
    e = attr(elements, "eccentricity")
    assert np.all((e >= 0) & (e < 1))
    assert np.all(np.abs(attr(elements, "inclination")) <= math.pi + 1e-12)
    assert np.all(attr(elements, "vertical_offset") == 0)


def test_zero_inner_radius_is_well_behaved(ring_type):
    config = RingConfiguration(ring_type=ring_type, inner_radius=0.0, outer_radius=10, num_elements=500)
    elements = generate_elements(config, rng=4)
    speed = attr(elements, "angular_speed")
    xyz = np.array([el.position for el in elements])
    assert np.all(np.isfinite(speed))
    assert np.all(np.isfinite(xyz))


def test_well_formed_config_does_not_warn(saturn_config):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DegenerateInputWarning)
        generate_elements(saturn_config.with_num_elements(100))


def test_dust_cloud_inclinations_keep_their_spread():
    config = RingConfiguration(
        ring_type=RingType.DUST_CLOUD, num_elements=5000, max_inclination_deg=10.0
    )
    inc = attr(generate_elements(config, rng=42), "inclination")
    cap = math.radians(config.max_inclination_deg)
    assert np.all(np.abs(inc) <= cap + 1e-12)
    assert np.isclose(np.abs(inc), cap, rtol=0, atol=1e-12).mean() < 0.01
    # Uniform directions put ~71 % of particles within half the cap
    assert (np.abs(inc) < cap / 2).mean() > 0.6


def test_degenerate_warnings_point_at_the_caller():
    config = RingConfiguration(num_elements=0)
    with pytest.warns(DegenerateInputWarning) as direct:
        get_generator(config.ring_type).generate(config, np.random.default_rng(0))
    with pytest.warns(DegenerateInputWarning) as via_factory:
        generate_elements(config)
    for record in (direct, via_factory):
        assert Path(record[0].filename).name == Path(__file__).name
