"""
One generator per ring type. Importing this package registers all of them.
"""

__all__ = [
    "AccretionDiskGenerator",
    "AsteroidBeltGenerator",
    "DebrisDiskGenerator",
    "DustCloudGenerator",
    "PlanetaryRingGenerator",
]

from .accretion_disk import AccretionDiskGenerator
from .asteroid_belt import AsteroidBeltGenerator
from .debris_disk import DebrisDiskGenerator
from .dust_cloud import DustCloudGenerator
from .planetary_ring import PlanetaryRingGenerator
