from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

import astropy.units as u
import pandas as pd

from ringfields.base.color import DARK_GRAY, LIGHT_GRAY, Color


class RingType(enum.Enum):
    """
    The closed set of ring/disk archetypes, each paired with one generator
    """

    PLANETARY_RING = "Planetary Ring"
    ASTEROID_BELT = "Asteroid Belt"
    DEBRIS_DISK = "Debris Disk"
    DUST_CLOUD = "Dust Cloud / Nebula"
    ACCRETION_DISK = "Accretion Disk"

    @property
    def label(self):
        return self.value

    def __str__(self):
        return self.value


class ColorGradientMode(enum.Enum):
    """
    How dust clouds map particles onto the primary to secondary color range
    """

    LINEAR = "linear"  # random blend per particle
    RADIAL = "radial"  # primary at the core, secondary at the edge
    NOISE_BASED = "noise"  # follows the noise field
    TEMPERATURE = "temperature"  # radial with the accretion disk gamma
    MULTI_ZONE = "multi-zone"  # three radial bands

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RingConfiguration:
    """
    Immutable parameter bundle describing one ring or disk. Distances and
    sizes are in visual units. Values are not range checked here, the
    generators clamp whatever cannot be used as-is.

    Args:
        ring_type (RingType):
            Archetype, selects the generator
        inner_radius (float):
            Inner radius of the field
        outer_radius (float):
            Outer radius of the field
        num_elements (int):
            Number of particles to generate
        min_size (float):
            Smallest particle size
        max_size (float):
            Largest particle size
        thickness (float):
            Vertical spread scale
        max_inclination_deg (float):
            Inclination cap in degrees, 0 is a perfectly flat field
        max_eccentricity (float):
            Eccentricity cap, 0 is circular
        base_angular_speed (float):
            Angular speed in radians per time unit at the inner radius
        central_body_radius (float):
            Radius of the hosted body, which is not itself a particle
        primary_color (Color):
            First color of the gradient/variation
        secondary_color (Color):
            Second color of the gradient/variation
        name (str):
            Display name
        seed (int or None):
            Seed used when the caller does not supply a random source

    The remaining fields shape dust clouds and are ignored by the other
    generators. Their defaults give a smooth cloud.

        radial_power (float or None):
            Radii are drawn as inner + range * U**radial_power. 1/3 fills the
            sphere evenly by volume, larger powers concentrate particles at
            the core and smaller ones push them out into a shell. None keeps
            the half-Gaussian falloff
        noise_strength (float):
            Filament displacement strength, 0 disables the noise
        noise_octaves (int):
            Detail levels of the noise
        noise_persistence (float):
            Amplitude kept from one octave to the next
        noise_lacunarity (float):
            Frequency multiplier from one octave to the next
        filament_anisotropy (tuple of float):
            Displacement scale along x, y and z, uneven values stretch the
            filaments
        color_gradient (ColorGradientMode):
            Mapping of particles onto the color range
        core_brightness (float):
            Extra brightness at the cloud core, 0.4 makes the core 40 %
            brighter than the edge
    """

    ring_type: RingType = RingType.ASTEROID_BELT
    inner_radius: float = 50.0
    outer_radius: float = 100.0
    num_elements: int = 5000
    min_size: float = 0.5
    max_size: float = 2.0
    thickness: float = 5.0
    max_inclination_deg: float = 10.0
    max_eccentricity: float = 0.05
    base_angular_speed: float = 0.002
    central_body_radius: float = 8.0
    primary_color: Color = field(default=LIGHT_GRAY)
    secondary_color: Color = field(default=DARK_GRAY)
    name: str = "Ring Field"
    seed: Optional[int] = None
    radial_power: Optional[float] = None
    noise_strength: float = 0.0
    noise_octaves: int = 3
    noise_persistence: float = 0.5
    noise_lacunarity: float = 2.2
    filament_anisotropy: Tuple[float, float, float] = (1.0, 0.7, 0.4)
    color_gradient: ColorGradientMode = ColorGradientMode.LINEAR
    core_brightness: float = 0.0

    def __repr__(self):
        params = {
            key: (
                str(val)
                if isinstance(val, (Color, RingType, ColorGradientMode, tuple))
                else val
            )
            for key, val in self.dump_params().items()
        }
        p_df = pd.DataFrame(params, index=[0])
        return f"{type(self).__name__} {self.name!r}\n{p_df}"

    def dump_params(self):
        params = dataclasses.asdict(self)
        # asdict recurses into the colors, keep the objects instead
        params["primary_color"] = self.primary_color
        params["secondary_color"] = self.secondary_color
        return params

    @property
    def max_inclination(self):
        return self.max_inclination_deg * u.deg

    @property
    def radial_range(self):
        return self.outer_radius - self.inner_radius

    @property
    def size_range(self):
        return self.max_size - self.min_size

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def with_seed(self, seed):
        """
        Copy of this configuration with a new seed, for variations of one field
        """
        return self.replace(seed=seed)

    def with_num_elements(self, num_elements):
        """
        Copy of this configuration with a different particle count (level of detail)
        """
        return self.replace(num_elements=num_elements)
