__all__ = [
    "NoiseField",
    "rotate_vectors",
    "gen_rotate_to_sky_coords",
    "gen_rotate_to_field_coords",
    "compute_time_scale",
]

from .misc import (
    rotate_vectors,
    gen_rotate_to_sky_coords,
    gen_rotate_to_field_coords,
    compute_time_scale,
)
from .noise import NoiseField
