"""
Scale adapters between physical units and the visual units ring
configurations are expressed in.

>>> adapter = SolarSystemScaleAdapter(visual_per_unit=100.0)
>>> config = adapter.create_planetary_ring(0.07 * u.AU, 0.14 * u.AU, "Saturn's Rings")
"""

from __future__ import annotations

import astropy.units as u
import numpy as np

from ringfields.base.color import Color
from ringfields.base.config import RingConfiguration, RingType
from ringfields.presets import get_preset


class ScaleAdapter:
    """
    Converts lengths in ``unit`` to visual units by a linear scale.

    Args:
        visual_per_unit (float):
            Visual units per one ``unit``
        zoom_level (float):
            Extra multiplier on top of visual_per_unit
    """

    unit = u.m
    # Fraction of the unit scale applied to particle sizes, and its clamp
    size_scale = 0.01
    size_limits = (0.1, 5.0)

    def __init__(self, visual_per_unit, zoom_level=1.0) -> None:
        self.visual_per_unit = float(visual_per_unit)
        self.zoom_level = float(zoom_level)

    def __repr__(self):
        return (
            f"{type(self).__name__}({self.visual_per_unit} visual units per "
            f"{self.unit}, zoom {self.zoom_level})"
        )

    @property
    def scale_factor(self):
        return self.visual_per_unit * self.zoom_level

    def _in_unit(self, value):
        if isinstance(value, u.Quantity):
            return value.to_value(self.unit)
        return float(value)

    def to_visual_units(self, value):
        """
        Convert a length to visual units. Plain numbers are taken to be in
        ``unit``, Quantities may use any length unit.
        """
        return self._in_unit(value) * self.scale_factor

    def from_visual_units(self, visual_value):
        return (float(visual_value) / self.scale_factor) * self.unit

    def scale_particle_size(self, size):
        scaled = self._in_unit(size) * self.to_visual_units(1.0) * self.size_scale
        return float(np.clip(scaled, *self.size_limits))

    def adapt_configuration(self, config: RingConfiguration) -> RingConfiguration:
        """
        Convert a configuration whose lengths are in ``unit`` to visual units
        """
        return config.replace(
            inner_radius=self.to_visual_units(config.inner_radius),
            outer_radius=self.to_visual_units(config.outer_radius),
            min_size=self.scale_particle_size(config.min_size),
            max_size=self.scale_particle_size(config.max_size),
            thickness=self.to_visual_units(config.thickness),
            central_body_radius=self.to_visual_units(config.central_body_radius),
        )

    def create_adapted_configuration(self, preset_name, inner_radius, outer_radius):
        """
        Re-target a preset to new radii, scaling its other lengths by the
        ratio of the new radial range to the preset's, then convert to
        visual units

        Args:
            preset_name (str):
                Name of the template preset
            inner_radius (float or astropy Quantity):
                New inner radius, floats are in ``unit``
            outer_radius (float or astropy Quantity):
                New outer radius, floats are in ``unit``
        """
        template = get_preset(preset_name)
        inner = self._in_unit(inner_radius)
        outer = self._in_unit(outer_radius)
        relative_scale = (outer - inner) / template.radial_range

        physical = template.replace(
            inner_radius=inner,
            outer_radius=outer,
            min_size=template.min_size * relative_scale,
            max_size=template.max_size * relative_scale,
            thickness=template.thickness * relative_scale,
            central_body_radius=template.central_body_radius * relative_scale,
        )
        return self.adapt_configuration(physical)

    def _visual_span(self, inner_radius, outer_radius):
        inner = self.to_visual_units(inner_radius)
        outer = self.to_visual_units(outer_radius)
        return inner, outer, outer - inner


def _count(width, per_unit, low, high):
    return int(np.clip(int(width * per_unit), low, high))


class SolarSystemScaleAdapter(ScaleAdapter):
    """
    Ring fields inside a planetary system, lengths in AU
    """

    unit = u.AU

    def create_planetary_ring(self, inner_radius, outer_radius, name):
        """
        Thin icy ring around a gas giant, radii measured from the planet
        """
        inner, outer, width = self._visual_span(inner_radius, outer_radius)
        return RingConfiguration(
            ring_type=RingType.PLANETARY_RING,
            inner_radius=inner,
            outer_radius=outer,
            num_elements=_count(width, 200, 2000, 15000),
            min_size=max(0.1, width * 0.005),
            max_size=max(0.3, width * 0.02),
            thickness=width * 0.01,
            max_inclination_deg=0.5,
            max_eccentricity=0.01,
            base_angular_speed=0.004,
            central_body_radius=inner * 0.5,
            primary_color=Color.rgb(230, 220, 200),
            secondary_color=Color.rgb(180, 170, 160),
            name=name,
        )

    def create_asteroid_belt(self, inner_radius, outer_radius, name):
        inner, outer, width = self._visual_span(inner_radius, outer_radius)
        return RingConfiguration(
            ring_type=RingType.ASTEROID_BELT,
            inner_radius=inner,
            outer_radius=outer,
            num_elements=_count(width, 50, 1000, 8000),
            min_size=max(0.3, width * 0.01),
            max_size=max(1.0, width * 0.05),
            thickness=width * 0.15,
            max_inclination_deg=15.0,
            max_eccentricity=0.08,
            base_angular_speed=0.002,
            central_body_radius=self.to_visual_units(0.005 * u.AU),
            primary_color=Color.rgb(140, 130, 120),
            secondary_color=Color.rgb(100, 90, 80),
            name=name,
        )

    def create_debris_disk(self, inner_radius, outer_radius, name):
        inner, outer, width = self._visual_span(inner_radius, outer_radius)
        return RingConfiguration(
            ring_type=RingType.DEBRIS_DISK,
            inner_radius=inner,
            outer_radius=outer,
            num_elements=_count(width, 100, 3000, 12000),
            min_size=max(0.15, width * 0.003),
            max_size=max(0.6, width * 0.015),
            thickness=width * 0.08,
            max_inclination_deg=8.0,
            max_eccentricity=0.05,
            base_angular_speed=0.003,
            central_body_radius=self.to_visual_units(0.01 * u.AU),
            primary_color=Color.rgb(200, 180, 150),
            secondary_color=Color.rgb(180, 140, 100),
            name=name,
        )


class InterstellarScaleAdapter(ScaleAdapter):
    """
    Nebulae and other fields between the stars, lengths in light years
    """

    unit = u.lyr
    size_scale = 0.1
    size_limits = (0.2, 8.0)

    @classmethod
    def for_display_area(cls, max_distance, display_radius):
        """
        Adapter that maps max_distance onto display_radius visual units
        """
        if isinstance(max_distance, u.Quantity):
            max_distance = max_distance.to_value(cls.unit)
        return cls(display_radius / float(max_distance))

    def scale_particle_size(self, size):
        # Sizes follow the base scale only, not the zoom
        scaled = self._in_unit(size) * self.visual_per_unit * self.size_scale
        return float(np.clip(scaled, *self.size_limits))

    def create_emission_nebula(self, inner_radius, outer_radius, name):
        inner, outer, width = self._visual_span(inner_radius, outer_radius)
        return RingConfiguration(
            ring_type=RingType.DUST_CLOUD,
            inner_radius=inner,
            outer_radius=outer,
            num_elements=_count(width, 100, 5000, 15000),
            min_size=max(0.3, width * 0.01),
            max_size=max(1.0, width * 0.03),
            thickness=width * 0.8,
            max_inclination_deg=90.0,
            max_eccentricity=0.02,
            base_angular_speed=0.0002,
            central_body_radius=width * 0.05,
            primary_color=Color.rgb(255, 100, 150),
            secondary_color=Color.rgb(100, 200, 255),
            name=name,
        )

    def create_dark_nebula(self, inner_radius, outer_radius, name):
        inner, outer, width = self._visual_span(inner_radius, outer_radius)
        return RingConfiguration(
            ring_type=RingType.DUST_CLOUD,
            inner_radius=inner,
            outer_radius=outer,
            num_elements=_count(width, 60, 3000, 10000),
            min_size=max(0.5, width * 0.015),
            max_size=max(1.5, width * 0.04),
            thickness=width * 0.6,
            max_inclination_deg=90.0,
            max_eccentricity=0.02,
            base_angular_speed=0.0001,
            central_body_radius=width * 0.03,
            primary_color=Color.rgb(40, 35, 30),
            secondary_color=Color.rgb(20, 18, 15),
            name=name,
        )
