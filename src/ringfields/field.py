from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import xarray as xr
from tqdm import tqdm

import ringfields.util.misc as misc
from ringfields.base.config import RingConfiguration
from ringfields.base.element import orbital_position
from ringfields.factory import generate_elements
from ringfields.presets import get_preset

logger = logging.getLogger(__name__)


class ParticleField:
    """
    One generated ring field: its configuration and the elements generated
    from it. The field owns its elements; switching configuration discards
    them and generates a new population.

    Args:
        config (RingConfiguration):
            Field parameters
        rng (np.random.Generator, int, or None):
            Random source or seed used for generation
    """

    def __init__(self, config: RingConfiguration, rng=None) -> None:
        self.config = config
        self.elements = generate_elements(config, rng)
        self.time = 0.0
        logger.info(
            f"Created field {config.name!r} ({config.ring_type}) "
            f"with {len(self.elements)} elements"
        )

    @classmethod
    def from_preset(cls, name, rng=None):
        return cls(get_preset(name), rng)

    def __repr__(self):
        return (
            f"{self.config.name}\tType:{self.config.ring_type}\t"
            f"elements:{len(self.elements)}\n\n{self.get_df().head()}"
        )

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def set_configuration(self, config: RingConfiguration, rng=None):
        """
        Replace the configuration and regenerate every element
        """
        logger.info(f"Switching field {self.config.name!r} to {config.name!r}")
        self.config = config
        self.elements = generate_elements(config, rng)
        self.time = 0.0

    def switch_preset(self, name, rng=None):
        self.set_configuration(get_preset(name), rng)

    def update(self, time_scale):
        """
        Advance every element by one tick of time_scale
        """
        for element in self.elements:
            element.advance(time_scale)
        self.time += time_scale

    def update_elapsed(self, delta_seconds):
        """
        Advance the field by a wall-clock interval, clamped to keep a paused
        loop from jumping. Returns the time_scale used.
        """
        time_scale = misc.compute_time_scale(delta_seconds)
        self.update(time_scale)
        return time_scale

    def getpattr(self, attr):
        # Array of one attribute across all elements, e.g. every semi-major
        # axis
        return np.array([getattr(element, attr) for element in self.elements])

    def get_df(self):
        """
        Table of the elements' orbital elements and current positions
        """
        e_df = pd.DataFrame([element.dump_params() for element in self.elements])
        if self.elements:
            e_df["color"] = [element.color.to_hex() for element in self.elements]
            e_df["opacity"] = [element.color.opacity for element in self.elements]
        return e_df

    def positions(self, coord_system="field", inclination=0.0, position_angle=0.0):
        """
        Current positions of all elements

        Args:
            coord_system (str):
                "field" for coordinates with the field midplane as the xy
                plane, or "sky" to rotate them to the plane of the sky
            inclination (astropy Quantity or float):
                Midplane inclination for the sky frame, floats are radians
            position_angle (astropy Quantity or float):
                Midplane position angle for the sky frame, floats are radians

        Returns:
            r (np.ndarray):
                Nx3 array of positions
        """
        r = np.array([element.position for element in self.elements], dtype=float)
        r = r.reshape(-1, 3)
        if coord_system == "field":
            return r
        if coord_system == "sky":
            if len(r) == 0:
                return r
            return misc.gen_rotate_to_sky_coords(r, inclination, position_angle)
        raise ValueError(f"coord_system must be 'field' or 'sky', got {coord_system!r}")

    def bounds(self):
        """
        Axis-aligned bounding box of the current positions as (min, max)
        arrays, None for an empty field
        """
        if not self.elements:
            return None
        r = self.positions()
        return r.min(axis=0), r.max(axis=0)

    def create_dataset(self, n_steps):
        """
        Create an xarray Dataset for the field's motion
        """
        coords = {
            "step": np.arange(n_steps),
            "element": np.arange(len(self.elements)),
            "ref_frame": ["field", "sky"],
        }
        data_vars = {
            var: (
                ["step", "element", "ref_frame"],
                np.nan * np.ones((n_steps, len(self.elements), 2)),
            )
            for var in ["x", "y", "z"]
        }
        ds = xr.Dataset(data_vars, coords=coords)
        ds["a"] = ("element", self.getpattr("semi_major_axis"))
        ds["size"] = ("element", self.getpattr("size"))
        ds.attrs["name"] = self.config.name
        ds.attrs["ring_type"] = self.config.ring_type.name
        return ds

    def propagate(
        self, n_steps, time_scale=1.0, ref_frame="field", inclination=0.0, position_angle=0.0
    ):
        """
        Predict the positions of every element over n_steps ticks of
        time_scale, starting from the current state. The elements themselves
        are not advanced.

        Args:
            n_steps (int):
                Number of ticks, step 0 is the current state
            time_scale (float):
                time_scale of each tick
            ref_frame (str):
                "field", or "sky" to also fill the sky frame
            inclination (astropy Quantity or float):
                Midplane inclination for the sky frame
            position_angle (astropy Quantity or float):
                Midplane position angle for the sky frame

        Returns:
            ds (xr.Dataset):
                x, y, z over (step, element, ref_frame)
        """
        ds = self.create_dataset(n_steps)
        if not self.elements:
            return ds

        a = self.getpattr("semi_major_axis")
        e = self.getpattr("eccentricity")
        inc = self.getpattr("inclination")
        w = self.getpattr("argument_of_periapsis")
        W = self.getpattr("longitude_of_ascending_node")
        offset = self.getpattr("vertical_offset")
        angle0 = self.getpattr("angle")
        speed = self.getpattr("angular_speed")

        for step in tqdm(range(n_steps), desc="ring field propagation", delay=0.5):
            theta = angle0 + speed * time_scale * step
            x, y, z = orbital_position(a, e, inc, w, W, theta, offset)
            ds["x"].loc[step, :, "field"] = x
            ds["y"].loc[step, :, "field"] = y
            ds["z"].loc[step, :, "field"] = z
            if ref_frame == "sky":
                sky_r = misc.gen_rotate_to_sky_coords(
                    np.stack((x, y, z), axis=1), inclination, position_angle
                ).T
                ds["x"].loc[step, :, "sky"] = sky_r[0]
                ds["y"].loc[step, :, "sky"] = sky_r[1]
                ds["z"].loc[step, :, "sky"] = sky_r[2]
        return ds

    def diagnostic_summary(self):
        if not self.elements:
            summary = f"{self.config.name}: no elements"
        else:
            lo, hi = self.bounds()
            summary = (
                f"{self.config.name}: elements={len(self.elements)}, "
                f"bounds=[{lo[0]:.1f},{lo[1]:.1f},{lo[2]:.1f} to "
                f"{hi[0]:.1f},{hi[1]:.1f},{hi[2]:.1f}], time={self.time:.2f}"
            )
        logger.debug(summary)
        return summary
