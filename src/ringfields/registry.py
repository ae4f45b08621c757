from __future__ import annotations

from ringfields.base.config import RingType
from ringfields.base.generator import ElementGenerator

_REGISTRY: dict[RingType, ElementGenerator] = {}


def register_generator(cls: type[ElementGenerator]) -> type[ElementGenerator]:
    """Class decorator to register a generator under its RING_TYPE."""
    key = getattr(cls, "RING_TYPE", None)
    if not isinstance(key, RingType):
        raise ValueError(f"{cls.__name__} must define RING_TYPE")
    if key in _REGISTRY and type(_REGISTRY[key]) is not cls:
        raise ValueError(
            f"{key} already has a generator: {type(_REGISTRY[key]).__name__}"
        )
    _REGISTRY[key] = cls()
    return cls


def lookup(ring_type: RingType) -> ElementGenerator | None:
    return _REGISTRY.get(ring_type)


def registered_types() -> list[RingType]:
    return list(_REGISTRY.keys())
