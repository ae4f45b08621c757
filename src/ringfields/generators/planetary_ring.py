from ringfields.base.config import RingType
from ringfields.base.generator import ElementGenerator
from ringfields.registry import register_generator


@register_generator
class PlanetaryRingGenerator(ElementGenerator):
    """
    Thin, flat, dense rings of icy particles (Saturn, Uranus). Radii are
    uniform across the ring, orbits are almost circular and almost coplanar,
    and speeds follow the Keplerian falloff.
    """

    RING_TYPE = RingType.PLANETARY_RING
    description = "Thin planetary ring with near-circular, coplanar orbits"

    ECCENTRICITY_SCALE = 0.05
    INCLINATION_SCALE = 0.1
    THICKNESS_SCALE = 0.1

    def sample(self, config, bounds, rng):
        n = bounds.count
        a = self.uniform_radii(bounds, rng)
        e = rng.random(n) * bounds.max_eccentricity * self.ECCENTRICITY_SCALE
        inc = self.symmetric_uniform(
            rng, n, bounds.max_inclination * self.INCLINATION_SCALE
        )
        w = self.random_angles(rng, n)
        W = self.random_angles(rng, n)
        angle = self.random_angles(rng, n)
        size = self.uniform_sizes(bounds, rng)
        offset = rng.standard_normal(n) * bounds.thickness * self.THICKNESS_SCALE
        color = self.blend_colors(
            config.primary_color, config.secondary_color, rng.random(n)
        )
        return {
            "a": a,
            "e": e,
            "inc": inc,
            "w": w,
            "W": W,
            "angle": angle,
            "speed": self.keplerian_speed(bounds, a),
            "size": size,
            "offset": offset,
            "color": color,
        }
