from ringfields.base.config import RingType
from ringfields.base.generator import ElementGenerator
from ringfields.registry import register_generator


@register_generator
class AsteroidBeltGenerator(ElementGenerator):
    """
    Thick belt of rocky bodies (main belt, Kuiper belt). Eccentricities go up
    to the cap, inclinations are Gaussian around the plane and the vertical
    scatter is wide.
    """

    RING_TYPE = RingType.ASTEROID_BELT
    description = "Thick asteroid belt with scattered inclinations"

    INCLINATION_SIGMA = 0.5
    THICKNESS_SCALE = 0.5
    BRIGHTNESS_VARIATION = 0.15

    def sample(self, config, bounds, rng):
        n = bounds.count
        a = self.uniform_radii(bounds, rng)
        e = rng.random(n) * bounds.max_eccentricity
        inc = self.clipped_gaussian(
            rng, n, bounds.max_inclination * self.INCLINATION_SIGMA,
            bounds.max_inclination,
        )
        w = self.random_angles(rng, n)
        W = self.random_angles(rng, n)
        angle = self.random_angles(rng, n)
        size = self.uniform_sizes(bounds, rng)
        offset = rng.standard_normal(n) * bounds.thickness * self.THICKNESS_SCALE

        # Rocky look, each body a touch lighter or darker than its blend
        brightness = 1 + (rng.random(n) * 2 - 1) * self.BRIGHTNESS_VARIATION
        color = self.blend_colors(
            config.primary_color,
            config.secondary_color,
            rng.random(n),
            brightness=brightness,
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
