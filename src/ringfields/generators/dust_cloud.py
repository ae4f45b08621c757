import numpy as np

from ringfields.base.config import ColorGradientMode, RingType
from ringfields.base.generator import ElementGenerator
from ringfields.registry import register_generator
from ringfields.util.noise import NoiseField


@register_generator
class DustCloudGenerator(ElementGenerator):
    """
    Diffuse dust clouds and nebulae. Particles fill a sphere instead of a
    disk: the direction from the center is uniform on the sphere and the
    distance is a half-Gaussian outward from the inner radius, or a power law
    when the configuration sets radial_power. Motion is a slow drift in
    either direction rather than organized rotation.

    With a positive noise_strength the sampled points are displaced along a
    seeded noise field, which gathers them into filaments and modulates
    their opacity. Colors follow config.color_gradient, and the core can be
    brightened with config.core_brightness.
    """

    RING_TYPE = RingType.DUST_CLOUD
    description = "Three-dimensional dust cloud with slow turbulent drift"

    RADIAL_SPREAD = 0.4
    MAX_ECCENTRICITY = 0.02
    SPEED_SCALE = 0.1
    THICKNESS_SCALE = 0.3
    FILAMENT_SCALE = 0.15
    TEMPERATURE_GAMMA = 0.7
    COLOR_ZONES = 3

    def sample(self, config, bounds, rng):
        n = bounds.count
        if config.radial_power is None:
            r = np.minimum(
                bounds.inner_radius
                + np.abs(rng.standard_normal(n)) * self.RADIAL_SPREAD * bounds.radial_range,
                bounds.outer_radius,
            )
        else:
            r = bounds.inner_radius + bounds.radial_range * rng.random(n) ** max(
                float(config.radial_power), 0.0
            )

        azimuth = self.random_angles(rng, n)
        polar = np.arccos(2 * rng.random(n) - 1)

        noise = None
        if (
            config.noise_strength > 0
            or config.color_gradient is ColorGradientMode.NOISE_BASED
        ):
            noise = NoiseField(
                rng.integers(2**31),
                config.noise_persistence,
                config.noise_lacunarity,
            )

        px = r * np.sin(polar) * np.cos(azimuth)
        py = r * np.sin(polar) * np.sin(azimuth)
        pz = r * np.cos(polar)
        if config.noise_strength > 0:
            px, py, pz = self.displace(config, bounds, noise, px, py, pz)
            r = np.clip(
                np.sqrt(px**2 + py**2 + pz**2),
                bounds.inner_radius,
                bounds.outer_radius,
            )
            azimuth = np.arctan2(py, px)
            polar = np.arctan2(np.hypot(px, py), pz)

        # The direction sets the orbit plane, scaled so the cap still binds
        cap = min(bounds.max_inclination, np.pi / 2)
        inc = (polar - np.pi / 2) * cap / (np.pi / 2)
        W = azimuth

        e = rng.random(n) * min(self.MAX_ECCENTRICITY, bounds.max_eccentricity)
        w = self.random_angles(rng, n)
        angle = self.random_angles(rng, n)

        speed = bounds.base_angular_speed * self.SPEED_SCALE * (0.5 + rng.random(n))
        speed = np.where(rng.random(n) < 0.5, -speed, speed)

        offset = rng.standard_normal(n) * bounds.thickness * self.THICKNESS_SCALE

        # 1 at the inner radius, 0 at the outer radius
        core = 1 - self.radial_fraction(bounds, r)
        size = bounds.min_size + rng.random(n) * bounds.size_range * (0.3 + 0.2 * core)

        opacity = 0.3 + core * 0.4 + rng.random(n) * 0.3
        if config.noise_strength > 0:
            density = (noise.layered(px * 0.3, py * 0.3, pz * 0.3, 2) + 1) * 0.5
            opacity = opacity * (0.7 + density * 0.3)
        opacity = np.clip(opacity, 0.1, 1.0)

        color = self.blend_colors(
            config.primary_color,
            config.secondary_color,
            self.color_fraction(config, rng, noise, core, px, py, pz),
            brightness=1 + core * config.core_brightness,
            opacity=opacity,
        )
        return {
            "a": r,
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

    def displace(self, config, bounds, noise, px, py, pz):
        """
        Move points along the noise field. Larger clouds sample the noise
        more coarsely so the filaments keep their size relative to the cloud.
        """
        scale = 0.8 / max(1.0, bounds.radial_range * 0.01)
        dx, dy, dz = noise.filament_displacement(
            px * scale,
            py * scale,
            pz * scale,
            config.noise_octaves,
            bounds.radial_range * self.FILAMENT_SCALE * config.noise_strength,
            anisotropy=config.filament_anisotropy,
        )
        return px + dx, py + dy, pz + dz

    def color_fraction(self, config, rng, noise, core, px, py, pz):
        """
        Position of each particle on the primary to secondary color range
        """
        mode = config.color_gradient
        if mode is ColorGradientMode.RADIAL:
            return 1 - core
        if mode is ColorGradientMode.TEMPERATURE:
            return (1 - core) ** self.TEMPERATURE_GAMMA
        if mode is ColorGradientMode.MULTI_ZONE:
            zone = np.minimum(np.floor((1 - core) * self.COLOR_ZONES), self.COLOR_ZONES - 1)
            return zone / (self.COLOR_ZONES - 1)
        if mode is ColorGradientMode.NOISE_BASED:
            return (noise.layered(px * 0.5, py * 0.5, pz * 0.5, 2) + 1) * 0.5
        return rng.random(len(core))
