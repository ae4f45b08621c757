from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import astropy.units as u
import numpy as np

from ringfields.base.config import RingConfiguration, RingType
from ringfields.base.element import RingElement
from ringfields.exceptions import DegenerateInputWarning

logger = logging.getLogger(__name__)

# Largest eccentricity that still satisfies e < 1
_MAX_ECCENTRICITY = np.nextafter(1.0, 0.0)


@dataclass(frozen=True)
class SamplingBounds:
    """
    Usable sampling ranges derived from a configuration after clamping the
    values a generator cannot work with directly.
    """

    count: int
    inner_radius: float
    outer_radius: float
    min_size: float
    max_size: float
    thickness: float
    max_inclination: float
    max_eccentricity: float
    base_angular_speed: float

    @property
    def radial_range(self):
        return self.outer_radius - self.inner_radius

    @property
    def size_range(self):
        return self.max_size - self.min_size

    @classmethod
    def from_config(cls, config: RingConfiguration, stacklevel=1):
        """
        Returns None when the configuration cannot produce any element. Every
        adjustment is reported with a DegenerateInputWarning, attributed
        stacklevel frames above this call (1 is the direct caller).
        """

        def warn(msg):
            warnings.warn(msg, DegenerateInputWarning, stacklevel=stacklevel + 2)

        if config.num_elements <= 0:
            warn(f"num_elements={config.num_elements}, generating no elements")
            return None

        inner = float(config.inner_radius)
        outer = float(config.outer_radius)
        if inner < 0:
            warn(f"inner_radius={inner} is negative, clamping to 0")
            inner = 0.0
        if outer < inner:
            warn(
                f"inner_radius={inner} exceeds outer_radius={outer}, "
                "generating no elements"
            )
            return None
        if outer == inner:
            warn(f"inner_radius equals outer_radius ({inner}), field has no width")

        min_size = float(config.min_size)
        max_size = float(config.max_size)
        if min_size > max_size:
            warn(f"min_size={min_size} exceeds max_size={max_size}, swapping")
            min_size, max_size = max_size, min_size
        if min_size < 0:
            warn(f"min_size={min_size} is negative, clamping to 0")
            min_size = 0.0
            max_size = max(max_size, 0.0)

        thickness = float(config.thickness)
        if thickness < 0:
            warn(f"thickness={thickness} is negative, clamping to 0")
            thickness = 0.0

        inc_deg = float(config.max_inclination_deg)
        if not 0 <= inc_deg <= 180:
            warn(f"max_inclination_deg={inc_deg} outside [0, 180], clamping")
            inc_deg = float(np.clip(inc_deg, 0, 180))

        max_e = float(config.max_eccentricity)
        if not 0 <= max_e < 1:
            warn(f"max_eccentricity={max_e} outside [0, 1), clamping")
            max_e = float(np.clip(max_e, 0.0, _MAX_ECCENTRICITY))

        return cls(
            count=int(config.num_elements),
            inner_radius=inner,
            outer_radius=outer,
            min_size=min_size,
            max_size=max_size,
            thickness=thickness,
            max_inclination=(inc_deg * u.deg).to_value(u.rad),
            max_eccentricity=max_e,
            base_angular_speed=float(config.base_angular_speed),
        )


class ElementGenerator:
    """
    Base class for the per-archetype generators. Subclasses set RING_TYPE and
    implement sample(), which draws every per-element quantity as arrays from
    the random source. Element construction, and with it the position math, is
    shared here.
    """

    RING_TYPE: RingType = None
    description = ""

    def __repr__(self):
        return f"{type(self).__name__}({self.RING_TYPE})"

    def generate(self, config: RingConfiguration, rng: np.random.Generator, stacklevel=1):
        """
        Generate config.num_elements elements. The same configuration and an
        identically seeded rng give identical elements.

        Args:
            config (RingConfiguration):
                Field parameters
            rng (np.random.Generator):
                Seeded random source, consumed sequentially
            stacklevel (int):
                Frame that DegenerateInputWarnings point at, 1 is the caller
                of generate

        Returns:
            elements (list of RingElement):
                The generated population, empty for degenerate configurations
        """
        bounds = SamplingBounds.from_config(config, stacklevel=stacklevel + 1)
        if bounds is None:
            return []

        s = self.sample(config, bounds, rng)
        # Guard the field bounds against rounding at the range edges
        a = np.clip(s["a"], bounds.inner_radius, bounds.outer_radius)
        size = np.clip(s["size"], bounds.min_size, bounds.max_size)
        elements = [
            RingElement(
                semi_major_axis=float(a[i]),
                eccentricity=float(s["e"][i]),
                inclination=float(s["inc"][i]),
                argument_of_periapsis=float(s["w"][i]),
                longitude_of_ascending_node=float(s["W"][i]),
                angle=float(s["angle"][i]),
                angular_speed=float(s["speed"][i]),
                size=float(size[i]),
                vertical_offset=float(s["offset"][i]),
                color=s["color"][i],
            )
            for i in range(bounds.count)
        ]
        logger.debug(
            f"{type(self).__name__} generated {len(elements)} elements "
            f"for {config.name!r}"
        )
        return elements

    def sample(self, config, bounds, rng):
        """
        Draw the orbital elements of bounds.count particles. Returns a dict
        of arrays keyed a, e, inc, w, W, angle, speed, size, offset, and a
        list of colors under color.
        """
        raise NotImplementedError

    # Shared sampling helpers

    @staticmethod
    def random_angles(rng, n):
        return rng.random(n) * 2 * np.pi

    @staticmethod
    def uniform_radii(bounds, rng):
        return bounds.inner_radius + rng.random(bounds.count) * bounds.radial_range

    @staticmethod
    def uniform_sizes(bounds, rng):
        return bounds.min_size + rng.random(bounds.count) * bounds.size_range

    @staticmethod
    def symmetric_uniform(rng, n, limit):
        """
        Uniform values in [-limit, limit)
        """
        return (rng.random(n) * 2 - 1) * limit

    @staticmethod
    def clipped_gaussian(rng, n, sigma, limit):
        return np.clip(rng.standard_normal(n) * sigma, -limit, limit)

    @staticmethod
    def keplerian_speed(bounds, a):
        """
        Angular speed falling off as sqrt(inner / a) from the base speed at
        the inner radius. Without a positive inner radius every element gets
        the base speed.
        """
        a = np.asarray(a, dtype=float)
        if bounds.inner_radius <= 0:
            return np.full(a.shape, bounds.base_angular_speed)
        ratio = np.divide(
            bounds.inner_radius, a, out=np.ones_like(a), where=a > 0
        )
        return bounds.base_angular_speed * np.sqrt(ratio)

    @staticmethod
    def radial_fraction(bounds, a):
        """
        Position of each radius within the field, 0 at inner and 1 at outer
        """
        if bounds.radial_range <= 0:
            return np.zeros_like(a)
        return np.clip((a - bounds.inner_radius) / bounds.radial_range, 0.0, 1.0)

    @staticmethod
    def blend_colors(primary, secondary, t, brightness=None, opacity=None):
        colors = []
        for i, frac in enumerate(t):
            c = primary.interpolate(secondary, frac)
            if brightness is not None:
                c = c.brighter(brightness[i])
            if opacity is not None:
                c = c.with_opacity(opacity[i])
            colors.append(c)
        return colors
