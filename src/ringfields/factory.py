"""
Generator dispatch. Importing this module registers every generator and
checks that each ring type has one.
"""

from __future__ import annotations

import logging
import numbers

import numpy as np

import ringfields.generators  # noqa: F401  registers the generators
from ringfields import registry
from ringfields.base.config import RingConfiguration, RingType
from ringfields.base.generator import ElementGenerator
from ringfields.constants import DEFAULT_SEED
from ringfields.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def check_registry():
    """
    Raise ConfigurationError unless every RingType has a generator
    """
    missing = [t for t in RingType if registry.lookup(t) is None]
    if missing:
        raise ConfigurationError(
            "No generator registered for: " + ", ".join(t.name for t in missing)
        )


def get_generator(ring_type: RingType) -> ElementGenerator:
    generator = registry.lookup(ring_type)
    if generator is None:
        raise ConfigurationError(f"No generator registered for type: {ring_type}")
    return generator


def make_rng(rng=None, config: RingConfiguration | None = None):
    """
    Resolve the random source for a generation call.

    Args:
        rng (np.random.Generator, int, or None):
            A generator is used as-is, an integer is used as a seed. With None
            the configuration's seed is used, falling back to DEFAULT_SEED.

    Returns:
        rng (np.random.Generator)
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        seed = DEFAULT_SEED
        if config is not None and config.seed is not None:
            seed = config.seed
        return np.random.default_rng(seed)
    if isinstance(rng, numbers.Integral):
        return np.random.default_rng(int(rng))
    raise TypeError(f"rng must be a numpy Generator, an int seed, or None, got {rng!r}")


def generate_elements(config: RingConfiguration, rng=None):
    """
    Generate the elements of a ring field with the generator matching
    config.ring_type.

    Args:
        config (RingConfiguration):
            Field parameters
        rng (np.random.Generator, int, or None):
            Random source or seed, see make_rng

    Returns:
        elements (list of RingElement)
    """
    generator = get_generator(config.ring_type)
    rng = make_rng(rng, config)
    logger.debug(
        f"Generating {config.num_elements} elements for {config.name!r} "
        f"with {type(generator).__name__}"
    )
    return generator.generate(config, rng, stacklevel=2)


check_registry()
