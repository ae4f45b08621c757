"""
Hand-tuned ring field configurations, looked up by display name.
"""

from ringfields.base.color import Color
from ringfields.base.config import RingConfiguration, RingType
from ringfields.exceptions import PresetNotFoundError


def saturn_ring():
    """Saturn-like planetary ring: thin, dense, icy particles."""
    return RingConfiguration(
        ring_type=RingType.PLANETARY_RING,
        inner_radius=15,
        outer_radius=45,
        num_elements=10000,
        min_size=0.2,
        max_size=0.8,
        thickness=0.1,
        max_inclination_deg=0.5,
        max_eccentricity=0.01,
        base_angular_speed=0.004,
        central_body_radius=10,
        primary_color=Color.rgb(230, 220, 200),  # icy white-tan
        secondary_color=Color.rgb(180, 170, 160),  # dusty gray
        name="Saturn-like Ring",
    )


def uranus_ring():
    """Uranus-like planetary ring: thin, dark, narrow bands."""
    return RingConfiguration(
        ring_type=RingType.PLANETARY_RING,
        inner_radius=20,
        outer_radius=35,
        num_elements=6000,
        min_size=0.15,
        max_size=0.5,
        thickness=0.05,
        max_inclination_deg=0.3,
        max_eccentricity=0.008,
        base_angular_speed=0.003,
        central_body_radius=8,
        primary_color=Color.rgb(80, 80, 90),
        secondary_color=Color.rgb(50, 50, 60),
        name="Uranus-like Ring",
    )


def main_asteroid_belt():
    """Main asteroid belt: thick, sparse, rocky bodies."""
    return RingConfiguration(
        ring_type=RingType.ASTEROID_BELT,
        inner_radius=95,
        outer_radius=105,
        num_elements=5000,
        min_size=0.9,
        max_size=2.6,
        thickness=8.0,
        max_inclination_deg=12.0,
        max_eccentricity=0.06,
        base_angular_speed=0.002,
        central_body_radius=8,
        primary_color=Color.rgb(140, 130, 120),  # rocky gray
        secondary_color=Color.rgb(100, 90, 80),  # brown-gray
        name="Asteroid Belt",
    )


def kuiper_belt():
    """Kuiper belt: very wide, sparse, icy bodies."""
    return RingConfiguration(
        ring_type=RingType.ASTEROID_BELT,
        inner_radius=150,
        outer_radius=250,
        num_elements=3000,
        min_size=1.0,
        max_size=3.5,
        thickness=15.0,
        max_inclination_deg=20.0,
        max_eccentricity=0.1,
        base_angular_speed=0.0008,
        central_body_radius=5,
        primary_color=Color.rgb(180, 190, 200),  # icy blue-gray
        secondary_color=Color.rgb(140, 140, 150),
        name="Kuiper Belt",
    )


def protoplanetary_disk():
    """Protoplanetary debris disk around a forming planetary system."""
    return RingConfiguration(
        ring_type=RingType.DEBRIS_DISK,
        inner_radius=10,
        outer_radius=80,
        num_elements=8000,
        min_size=0.3,
        max_size=1.5,
        thickness=3.0,
        max_inclination_deg=5.0,
        max_eccentricity=0.04,
        base_angular_speed=0.003,
        central_body_radius=6,
        primary_color=Color.rgb(200, 180, 150),  # dusty tan
        secondary_color=Color.rgb(180, 140, 100),  # brown
        name="Protoplanetary Disk",
    )


def collision_debris():
    """Debris left over from a planetary collision."""
    return RingConfiguration(
        ring_type=RingType.DEBRIS_DISK,
        inner_radius=20,
        outer_radius=50,
        num_elements=6000,
        min_size=0.2,
        max_size=2.0,
        thickness=5.0,
        max_inclination_deg=8.0,
        max_eccentricity=0.08,
        base_angular_speed=0.0025,
        central_body_radius=7,
        primary_color=Color.rgb(160, 150, 140),
        secondary_color=Color.rgb(120, 100, 90),
        name="Collision Debris",
    )


def emission_nebula():
    """Emission nebula: colorful, glowing gas cloud."""
    return RingConfiguration(
        ring_type=RingType.DUST_CLOUD,
        inner_radius=5,
        outer_radius=100,
        num_elements=8000,
        min_size=0.5,
        max_size=2.0,
        thickness=60.0,
        max_inclination_deg=90.0,  # full 3D distribution
        max_eccentricity=0.02,
        base_angular_speed=0.0003,
        central_body_radius=4,
        primary_color=Color.rgb(255, 100, 150),  # hydrogen alpha
        secondary_color=Color.rgb(100, 200, 255),  # oxygen
        name="Emission Nebula",
        radial_power=0.4,  # mild core concentration
        noise_strength=0.4,  # moderate filaments
        noise_octaves=3,
        core_brightness=0.4,
    )


def dark_nebula():
    """Dark nebula: obscuring dust cloud."""
    return RingConfiguration(
        ring_type=RingType.DUST_CLOUD,
        inner_radius=10,
        outer_radius=80,
        num_elements=5000,
        min_size=0.8,
        max_size=2.5,
        thickness=50.0,
        max_inclination_deg=90.0,
        max_eccentricity=0.02,
        base_angular_speed=0.0002,
        central_body_radius=3,
        primary_color=Color.rgb(40, 35, 30),
        secondary_color=Color.rgb(20, 18, 15),
        name="Dark Nebula",
        radial_power=0.5,
        noise_strength=0.3,
        noise_octaves=3,
        core_brightness=0.4,
    )


def black_hole_accretion():
    """Black hole accretion disk: thin, hot, fast-rotating."""
    return RingConfiguration(
        ring_type=RingType.ACCRETION_DISK,
        inner_radius=8,
        outer_radius=50,
        num_elements=10000,
        min_size=0.2,
        max_size=0.6,
        thickness=0.5,
        max_inclination_deg=1.0,
        max_eccentricity=0.01,
        base_angular_speed=0.008,
        central_body_radius=5,
        primary_color=Color.rgb(200, 220, 255),  # hot blue-white, inner edge
        secondary_color=Color.rgb(255, 150, 50),  # cooler orange, outer edge
        name="Black Hole Accretion Disk",
    )


def neutron_star_accretion():
    """Neutron star accretion disk: very compact, extremely hot."""
    return RingConfiguration(
        ring_type=RingType.ACCRETION_DISK,
        inner_radius=3,
        outer_radius=25,
        num_elements=8000,
        min_size=0.15,
        max_size=0.4,
        thickness=0.3,
        max_inclination_deg=0.5,
        max_eccentricity=0.005,
        base_angular_speed=0.012,
        central_body_radius=2,
        primary_color=Color.rgb(220, 240, 255),
        secondary_color=Color.rgb(255, 200, 100),
        name="Neutron Star Accretion",
    )


_PRESETS = {
    "Saturn Ring": saturn_ring,
    "Uranus Ring": uranus_ring,
    "Main Asteroid Belt": main_asteroid_belt,
    "Kuiper Belt": kuiper_belt,
    "Protoplanetary Disk": protoplanetary_disk,
    "Collision Debris": collision_debris,
    "Emission Nebula": emission_nebula,
    "Dark Nebula": dark_nebula,
    "Black Hole Accretion": black_hole_accretion,
    "Neutron Star Accretion": neutron_star_accretion,
}


def get_preset(name) -> RingConfiguration:
    """
    Look up a preset configuration by name, raising PresetNotFoundError for
    unknown names
    """
    try:
        builder = _PRESETS[name]
    except KeyError:
        raise PresetNotFoundError(name, _PRESETS) from None
    return builder()


def list_preset_names(ring_type=None) -> list[str]:
    """
    Names of all presets, or only those of the given ring type
    """
    if ring_type is None:
        return list(_PRESETS)
    return [name for name, builder in _PRESETS.items() if builder().ring_type == ring_type]
