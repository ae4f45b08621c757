"""
Seeded value noise for the filaments and color structure of dust clouds.

Lattice points get pseudo-random values from an integer hash, and points in
between are blended with a smoothstep, so nearby points get similar values.
Everything is evaluated element-wise on numpy arrays.
"""

import numpy as np

_MASK = np.uint64(0x7FFFFFFF)
_P1 = np.uint64(15731)
_P2 = np.uint64(789221)
_P3 = np.uint64(1376312589)
_SHIFT = np.uint64(13)

# Sampling offsets that decorrelate the three displacement axes
_AXIS_OFFSETS = (0.0, 1000.0, 2000.0)


def _smooth(t):
    return t * t * (3.0 - 2.0 * t)


def _coords(x, y, z):
    return np.broadcast_arrays(
        *(np.atleast_1d(np.asarray(c, dtype=float)) for c in (x, y, z))
    )


class NoiseField:
    """
    Fractal value noise over 3D space. The same seed and parameters always
    give the same field.

    Args:
        seed (int):
            Mixed into the lattice hash
        persistence (float):
            Amplitude kept per octave, clamped to [0.1, 1]
        lacunarity (float):
            Frequency multiplier per octave, clamped to [1, 4]
    """

    def __init__(self, seed, persistence=0.5, lacunarity=2.2) -> None:
        self.seed = int(seed)
        self.persistence = float(np.clip(persistence, 0.1, 1.0))
        self.lacunarity = float(np.clip(lacunarity, 1.0, 4.0))
        self._seed_hash = np.uint64((self.seed * 1013904223) & 0x7FFFFFFF)

    def __repr__(self):
        return (
            f"NoiseField(seed={self.seed}, persistence={self.persistence}, "
            f"lacunarity={self.lacunarity})"
        )

    def _lattice(self, ix, iy, iz):
        # Values in [0, 1) at integer lattice points, uint64 arithmetic wraps
        n = (
            ix.astype(np.uint64) * _P1
            + iy.astype(np.uint64) * _P2
            + iz.astype(np.uint64) * _P3
            + self._seed_hash
        ) & _MASK
        n = ((n << _SHIFT) ^ n) & _MASK
        n = (n * (n * n * _P1 + _P2) + _P3) & _MASK
        return n.astype(float) / 2147483648.0

    def value(self, x, y, z):
        """
        Single octave of noise in [-1, 1)
        """
        x, y, z = _coords(x, y, z)
        x0, y0, z0 = np.floor(x), np.floor(y), np.floor(z)
        u, v, w = _smooth(x - x0), _smooth(y - y0), _smooth(z - z0)
        ix, iy, iz = x0.astype(np.int64), y0.astype(np.int64), z0.astype(np.int64)

        total = np.zeros(x.shape)
        for dx in (0, 1):
            wx = u if dx else 1 - u
            for dy in (0, 1):
                wy = v if dy else 1 - v
                for dz in (0, 1):
                    wz = w if dz else 1 - w
                    total += wx * wy * wz * self._lattice(ix + dx, iy + dy, iz + dz)
        return 2.0 * total - 1.0

    def layered(self, x, y, z, octaves, frequency=1.0):
        """
        Sum of octaves with falling amplitude and rising frequency, normalized
        to [-1, 1]
        """
        x, y, z = _coords(x, y, z)
        total = np.zeros(x.shape)
        amplitude = 1.0
        norm = 0.0
        freq = frequency
        for _ in range(max(1, int(octaves))):
            total += self.value(x * freq, y * freq, z * freq) * amplitude
            norm += amplitude
            amplitude *= self.persistence
            freq *= self.lacunarity
        return total / norm

    def ridged(self, x, y, z, octaves):
        """
        Ridged multifractal in [0, 1]. Squaring 1 - |noise| gives sharp crests,
        and each octave is weighted by the previous one.
        """
        x, y, z = _coords(x, y, z)
        total = np.zeros(x.shape)
        weight = np.ones(x.shape)
        amplitude = 1.0
        norm = 0.0
        freq = 1.0
        for _ in range(max(1, int(octaves))):
            signal = (1.0 - np.abs(self.value(x * freq, y * freq, z * freq))) ** 2
            signal *= weight
            weight = np.minimum(1.0, signal * 2.0)
            total += signal * amplitude
            norm += amplitude
            amplitude *= self.persistence
            freq *= self.lacunarity
        return total / norm

    def filament_displacement(
        self,
        x,
        y,
        z,
        octaves,
        strength,
        anisotropy=(1.0, 0.7, 0.4),
        coarse_weight=0.7,
        fine_weight=0.3,
    ):
        """
        Displacement that pulls particles into filaments, mixing large smooth
        structure with fine ridged detail

        Args:
            x, y, z (np.ndarray):
                Sample positions, already in noise space
            octaves (int):
                Octaves of the fine detail
            strength (float):
                Largest displacement along an axis with anisotropy 1
            anisotropy (tuple of float):
                Per axis scale of the displacement
            coarse_weight (float):
                Share of the large scale structure
            fine_weight (float):
                Share of the ridged detail

        Returns:
            dx, dy, dz (np.ndarray):
                Displacement components
        """
        x, y, z = _coords(x, y, z)
        displacement = []
        for offset, scale in zip(_AXIS_OFFSETS, anisotropy):
            xo, yo, zo = x + offset, y + offset, z + offset
            coarse = self.layered(xo * 0.3, yo * 0.3, zo * 0.3, 2)
            fine = self.ridged(xo * 1.5, yo * 1.5, zo * 1.5, octaves)
            n = coarse * coarse_weight + (fine * 2 - 1) * fine_weight
            displacement.append(n * strength * scale)
        return tuple(displacement)
