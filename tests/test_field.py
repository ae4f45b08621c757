import astropy.units as u
import numpy as np
import pytest

from ringfields import ParticleField
from ringfields.base.config import RingConfiguration, RingType
from ringfields.constants import MAX_DELTA_SECONDS, TARGET_FRAME_SECONDS


@pytest.fixture
def field():
    return ParticleField(
        RingConfiguration(ring_type=RingType.PLANETARY_RING, num_elements=300, name="Test Ring"),
        rng=42,
    )


def test_field_holds_generated_elements(field):
    assert len(field) == 300
    assert list(field) == field.elements
    assert field.time == 0.0


def test_from_preset():
    field = ParticleField.from_preset("Dark Nebula", rng=1)
    assert field.config.ring_type is RingType.DUST_CLOUD
    assert len(field) == 5000


def test_update_advances_every_element(field):
    before = field.getpattr("angle")
    field.update(2.5)
    after = field.getpattr("angle")
    np.testing.assert_allclose(after, before + field.getpattr("angular_speed") * 2.5)
    assert field.time == 2.5


def test_update_elapsed_clamps_long_pauses(field):
    assert field.update_elapsed(TARGET_FRAME_SECONDS) == pytest.approx(1.0)
    scale = field.update_elapsed(10.0)
    assert scale == pytest.approx(MAX_DELTA_SECONDS / TARGET_FRAME_SECONDS)
    assert field.time == pytest.approx(1.0 + scale)


def test_switch_preset_regenerates(field):
    field.update(1.0)
    field.switch_preset("Kuiper Belt", rng=3)
    assert field.config.name == "Kuiper Belt"
    assert len(field) == 3000
    assert field.time == 0.0
    a = field.getpattr("semi_major_axis")
    assert a.min() >= 150 and a.max() <= 250


def test_get_df(field):
    df = field.get_df()
    assert len(df) == 300
    for column in ["a", "e", "inc", "x", "y", "z", "color", "opacity"]:
        assert column in df.columns
    assert df["color"].str.startswith("#").all()


def test_repr(field):
    assert "Test Ring" in repr(field)


def test_positions_shape_and_frames(field):
    r = field.positions()
    assert r.shape == (300, 3)
    sky = field.positions("sky", inclination=40 * u.deg, position_angle=10 * u.deg)
    np.testing.assert_allclose(
        np.linalg.norm(sky, axis=1), np.linalg.norm(r, axis=1), rtol=1e-12
    )
    with pytest.raises(ValueError):
        field.positions("galactic")


def test_bounds_contain_positions(field):
    lo, hi = field.bounds()
    r = field.positions()
    assert np.all(r >= lo) and np.all(r <= hi)
    assert hi[0] <= field.config.outer_radius * 1.01


def test_propagate_matches_element_motion(field):
    ds = field.propagate(4, time_scale=3.0)
    assert dict(ds.sizes) == {"step": 4, "element": 300, "ref_frame": 2}
    assert ds.attrs["ring_type"] == "PLANETARY_RING"

    start = field.positions()
    np.testing.assert_allclose(
        np.stack([ds[v].sel(step=0, ref_frame="field").values for v in "xyz"], axis=1),
        start,
        atol=1e-9,
    )
    # propagation leaves the elements where they were
    np.testing.assert_array_equal(field.positions(), start)
    assert np.isnan(ds["x"].sel(ref_frame="sky").values).all()

    field.update(3.0)
    field.update(3.0)
    np.testing.assert_allclose(
        np.stack([ds[v].sel(step=2, ref_frame="field").values for v in "xyz"], axis=1),
        field.positions(),
        atol=1e-9,
    )


def test_propagate_sky_frame(field):
    ds = field.propagate(2, ref_frame="sky", inclination=30 * u.deg)
    sky = field.positions("sky", inclination=30 * u.deg)
    np.testing.assert_allclose(
        np.stack([ds[v].sel(step=0, ref_frame="sky").values for v in "xyz"], axis=1),
        sky,
        atol=1e-9,
    )


def test_empty_field():
    with pytest.warns(RuntimeWarning):
        field = ParticleField(RingConfiguration(num_elements=0))
    assert len(field) == 0
    assert field.bounds() is None
    assert field.positions().shape == (0, 3)
    assert field.positions("sky").shape == (0, 3)
    assert field.get_df().empty
    assert "no elements" in field.diagnostic_summary()
    field.update(1.0)
    assert field.propagate(3).sizes["element"] == 0


def test_diagnostic_summary(field):
    field.update(0.5)
    summary = field.diagnostic_summary()
    assert summary.startswith("Test Ring: elements=300")
    assert "time=0.50" in summary
