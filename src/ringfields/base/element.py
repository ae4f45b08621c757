from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from ringfields.base.color import Color
from ringfields.constants import CIRCULAR_ECCENTRICITY_THRESHOLD


def orbital_radius(a, e, theta):
    """
    Radius of a conic orbit at true anomaly theta. Orbits with an eccentricity
    below CIRCULAR_ECCENTRICITY_THRESHOLD return exactly a.

    Args:
        a (float or np.ndarray):
            Semi-major axis
        e (float or np.ndarray):
            Eccentricity, in [0, 1)
        theta (float or np.ndarray):
            True anomaly (radians)

    Returns:
        r (np.ndarray):
            Orbital radius, broadcast over the inputs
    """
    a = np.asarray(a, dtype=float)
    e = np.asarray(e, dtype=float)
    circular = e < CIRCULAR_ECCENTRICITY_THRESHOLD
    # Swap in e=0 where circular so the conic branch never sees the tiny values
    e_safe = np.where(circular, 0.0, e)
    conic = a * (1 - e_safe**2) / (1 + e_safe * np.cos(theta))
    return np.where(circular, a, conic)


def orbital_position(a, e, inc, w, W, theta, vertical_offset=0.0):
    """
    Cartesian position of a particle on its orbit. This is the only place
    positions are computed, for single elements and whole fields alike.

    The point is placed in the orbital plane at (r cos(theta), r sin(theta)),
    rotated by the argument of periapsis, tilted about the x axis by the
    inclination, rotated about the z axis by the longitude of the ascending
    node, and finally shifted vertically by vertical_offset.

    Args:
        a (float or np.ndarray):
            Semi-major axis
        e (float or np.ndarray):
            Eccentricity
        inc (float or np.ndarray):
            Inclination (radians)
        w (float or np.ndarray):
            Argument of periapsis (radians)
        W (float or np.ndarray):
            Longitude of the ascending node (radians)
        theta (float or np.ndarray):
            True anomaly (radians)
        vertical_offset (float or np.ndarray):
            Fixed offset added to z

    Returns:
        x, y, z (np.ndarray):
            Position components
    """
    r = orbital_radius(a, e, theta)
    x_orb = r * np.cos(theta)
    y_orb = r * np.sin(theta)

    sinw, cosw = np.sin(w), np.cos(w)
    x_peri = x_orb * cosw - y_orb * sinw
    y_peri = x_orb * sinw + y_orb * cosw

    y_tilt = y_peri * np.cos(inc)
    z_tilt = y_peri * np.sin(inc)

    sinO, cosO = np.sin(W), np.cos(W)
    x = x_peri * cosO - y_tilt * sinO
    y = x_peri * sinO + y_tilt * cosO
    z = z_tilt + vertical_offset
    return x, y, z


_FIXED_FIELDS = frozenset(
    (
        "semi_major_axis",
        "eccentricity",
        "inclination",
        "argument_of_periapsis",
        "longitude_of_ascending_node",
        "angular_speed",
        "size",
        "vertical_offset",
        "color",
    )
)


@dataclass(repr=False)
class RingElement:
    """
    A single particle of a ring field. The orbital elements are fixed when the
    element is created; only the orbital phase and the cached position change,
    on every call to advance.

    Angles are in radians, distances in visual units.
    """

    semi_major_axis: float
    eccentricity: float
    inclination: float
    argument_of_periapsis: float
    longitude_of_ascending_node: float
    angle: float
    angular_speed: float
    size: float
    vertical_offset: float
    color: Color
    x: float = field(init=False, default=0.0)
    y: float = field(init=False, default=0.0)
    z: float = field(init=False, default=0.0)

    def __post_init__(self):
        self.update_position()

    def __setattr__(self, name, value):
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} is fixed once the element is created")
        object.__setattr__(self, name, value)

    def __repr__(self):
        p_df = pd.DataFrame(self.dump_params(), index=[0])
        return f"{type(self).__name__} object\n{p_df}"

    def dump_params(self):
        return {
            "a": self.semi_major_axis,
            "e": self.eccentricity,
            "inc": self.inclination,
            "w": self.argument_of_periapsis,
            "W": self.longitude_of_ascending_node,
            "angle": self.angle,
            "speed": self.angular_speed,
            "size": self.size,
            "offset": self.vertical_offset,
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def radius(self):
        """
        Current distance from the focus along the orbit
        """
        return float(
            orbital_radius(self.semi_major_axis, self.eccentricity, self.angle)
        )

    def advance(self, time_scale):
        """
        Move the element along its orbit by angular_speed * time_scale and
        recompute its position. A time_scale of 0 leaves it untouched.
        """
        self.angle += self.angular_speed * time_scale
        self.update_position()

    def update_position(self):
        x, y, z = orbital_position(
            self.semi_major_axis,
            self.eccentricity,
            self.inclination,
            self.argument_of_periapsis,
            self.longitude_of_ascending_node,
            self.angle,
            self.vertical_offset,
        )
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
