from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _unit(value):
    return float(np.clip(value, 0.0, 1.0))


@dataclass(frozen=True)
class Color:
    """
    RGBA color with every channel in [0, 1]
    """

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    def __post_init__(self):
        for channel in ("red", "green", "blue", "opacity"):
            object.__setattr__(self, channel, _unit(getattr(self, channel)))

    @classmethod
    def rgb(cls, red, green, blue, opacity=1.0):
        """
        Build a color from 0-255 integer channels
        """
        return cls(red / 255.0, green / 255.0, blue / 255.0, opacity)

    def interpolate(self, other, t):
        """
        Linear blend towards other, t is clamped to [0, 1]
        """
        t = _unit(t)
        return Color(
            self.red + (other.red - self.red) * t,
            self.green + (other.green - self.green) * t,
            self.blue + (other.blue - self.blue) * t,
            self.opacity + (other.opacity - self.opacity) * t,
        )

    def brighter(self, factor):
        """
        Scale the color channels by factor, saturating at 1
        """
        return Color(
            self.red * factor, self.green * factor, self.blue * factor, self.opacity
        )

    def with_opacity(self, opacity):
        return Color(self.red, self.green, self.blue, opacity)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.opacity)

    def to_hex(self):
        r, g, b = (int(round(c * 255)) for c in (self.red, self.green, self.blue))
        return f"#{r:02x}{g:02x}{b:02x}"


LIGHT_GRAY = Color.rgb(211, 211, 211)
DARK_GRAY = Color.rgb(169, 169, 169)
