"""
Package-wide constants. Generator specific tuning factors live on the
generator classes themselves.
"""

# Seed used when neither the caller nor the configuration supplies one
DEFAULT_SEED = 42

# Below this eccentricity the orbit is treated as a circle, r = a
CIRCULAR_ECCENTRICITY_THRESHOLD = 1e-10

# Animation loop pacing, time_scale = 1.0 is one frame at 60 fps
TARGET_FRAME_SECONDS = 1.0 / 60.0
MAX_DELTA_SECONDS = 0.1
