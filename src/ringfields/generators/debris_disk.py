import numpy as np

from ringfields.base.config import RingType
from ringfields.base.generator import ElementGenerator
from ringfields.registry import register_generator


@register_generator
class DebrisDiskGenerator(ElementGenerator):
    """
    Debris and protoplanetary disks.

    Radii are uniform with a sinusoidal density wave laid over them, giving
    faint banding across the disk. The population is bimodal in both orbit
    and size: most orbits are near circular while the rest reach the full
    eccentricity cap, and most particles are dust with a minority of much
    larger planetesimals. Color follows size, so dust takes the primary color
    and planetesimals lean towards the secondary.
    """

    RING_TYPE = RingType.DEBRIS_DISK
    description = "Debris disk with density waves and bimodal dust/planetesimal sizes"

    WAVE_AMPLITUDE = 0.05
    WAVE_CYCLES = 8
    CIRCULAR_FRACTION = 0.6
    CIRCULAR_ECCENTRICITY_SCALE = 0.3
    INCLINATION_SIGMA = 0.4
    SPEED_JITTER = 0.1
    THICKNESS_SCALE = 0.3
    DUST_FRACTION = 0.8
    DUST_SIZE_SCALE = 0.3
    PLANETESIMAL_SIZE_FLOOR = 0.5

    def sample(self, config, bounds, rng):
        n = bounds.count
        u_r = rng.random(n)
        wave = (
            self.WAVE_AMPLITUDE
            * bounds.radial_range
            * np.sin(2 * np.pi * self.WAVE_CYCLES * u_r)
        )
        a = np.clip(
            bounds.inner_radius + u_r * bounds.radial_range + wave,
            bounds.inner_radius,
            bounds.outer_radius,
        )

        near_circular = rng.random(n) < self.CIRCULAR_FRACTION
        e_cap = np.where(
            near_circular,
            bounds.max_eccentricity * self.CIRCULAR_ECCENTRICITY_SCALE,
            bounds.max_eccentricity,
        )
        e = rng.random(n) * e_cap

        inc = self.clipped_gaussian(
            rng, n, bounds.max_inclination * self.INCLINATION_SIGMA,
            bounds.max_inclination,
        )
        w = self.random_angles(rng, n)
        W = self.random_angles(rng, n)
        angle = self.random_angles(rng, n)

        jitter = 1 + (rng.random(n) * 2 - 1) * self.SPEED_JITTER
        speed = self.keplerian_speed(bounds, a) * jitter

        offset = rng.standard_normal(n) * bounds.thickness * self.THICKNESS_SCALE

        dust = rng.random(n) < self.DUST_FRACTION
        u_s = rng.random(n)
        size_frac = np.where(
            dust,
            u_s * self.DUST_SIZE_SCALE,
            self.PLANETESIMAL_SIZE_FLOOR + u_s * (1 - self.PLANETESIMAL_SIZE_FLOOR),
        )
        size = np.clip(
            bounds.min_size + size_frac * bounds.size_range,
            bounds.min_size,
            bounds.max_size,
        )
        color = self.blend_colors(
            config.primary_color, config.secondary_color, size_frac
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
