"""Procedural orbital particle fields: rings, belts, disks and dust clouds.

>>> from ringfields import get_preset, generate_elements
>>> elements = generate_elements(get_preset("Saturn Ring"), rng=42)
"""

__all__ = [
    "Color",
    "ColorGradientMode",
    "ConfigurationError",
    "DegenerateInputWarning",
    "ParticleField",
    "PresetNotFoundError",
    "RingConfiguration",
    "RingElement",
    "RingFieldError",
    "RingType",
    "generate_elements",
    "get_generator",
    "get_preset",
    "list_preset_names",
    "setup_logging",
]

from ringfields.base import (
    Color,
    ColorGradientMode,
    RingConfiguration,
    RingElement,
    RingType,
)
from ringfields.exceptions import (
    ConfigurationError,
    DegenerateInputWarning,
    PresetNotFoundError,
    RingFieldError,
)
from ringfields.factory import generate_elements, get_generator
from ringfields.field import ParticleField
from ringfields.logging_config import setup_logging
from ringfields.presets import get_preset, list_preset_names
