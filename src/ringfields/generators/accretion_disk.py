import numpy as np

from ringfields.base.config import RingType
from ringfields.base.generator import ElementGenerator
from ringfields.registry import register_generator


@register_generator
class AccretionDiskGenerator(ElementGenerator):
    """
    Accretion disks around compact objects.

    The disk is thin and flat, densest towards the center, and flares
    slightly with radius. Pressure support speeds the orbits up to twice the
    Keplerian rate. Colors follow a temperature gradient from the hot primary
    color at the inner edge to the cool secondary color at the outer edge,
    gamma corrected and brightened towards the hot end.
    """

    RING_TYPE = RingType.ACCRETION_DISK
    description = "Hot, thin, fast accretion disk with a temperature gradient"

    ECCENTRICITY_SCALE = 0.05
    INCLINATION_SCALE = 0.1
    SPEED_BOOST = 2.0
    SPEED_JITTER = 0.05
    THICKNESS_SCALE = 0.05
    FLARE_BASE = 0.2
    COLOR_GAMMA = 0.7
    BRIGHTNESS_BOOST = 0.3

    def sample(self, config, bounds, rng):
        n = bounds.count
        # 1 - sqrt(u) has density 2(1 - x), so particles crowd the inner edge
        a = bounds.inner_radius + bounds.radial_range * (1 - rng.random(n) ** 0.5)
        frac = self.radial_fraction(bounds, a)

        e = rng.random(n) * bounds.max_eccentricity * self.ECCENTRICITY_SCALE
        inc = self.symmetric_uniform(
            rng, n, bounds.max_inclination * self.INCLINATION_SCALE
        )
        w = self.random_angles(rng, n)
        W = self.random_angles(rng, n)
        angle = self.random_angles(rng, n)

        jitter = 1 + (rng.random(n) * 2 - 1) * self.SPEED_JITTER
        speed = self.keplerian_speed(bounds, a) * self.SPEED_BOOST * jitter

        offset = (
            rng.standard_normal(n)
            * bounds.thickness
            * self.THICKNESS_SCALE
            * (self.FLARE_BASE + frac)
        )
        size = self.uniform_sizes(bounds, rng)

        temperature = frac**self.COLOR_GAMMA
        color = self.blend_colors(
            config.primary_color,
            config.secondary_color,
            temperature,
            brightness=1 + self.BRIGHTNESS_BOOST * (1 - temperature),
        )
        return {
            "a": a,
            "e": e,
            "inc": inc,
            "w": w,
            "W": W,
            "angle": angle,
            "speed": speed,
            "size": size,
            "offset": offset,
            "color": color,
        }
