__all__ = [
    "Color",
    "ColorGradientMode",
    "ElementGenerator",
    "RingConfiguration",
    "RingElement",
    "RingType",
    "SamplingBounds",
    "orbital_position",
    "orbital_radius",
]

from .color import Color
from .config import ColorGradientMode, RingConfiguration, RingType
from .element import RingElement, orbital_position, orbital_radius
from .generator import ElementGenerator, SamplingBounds
