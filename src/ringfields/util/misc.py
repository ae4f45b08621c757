import astropy.units as u
import numpy as np
from scipy.spatial.transform import Rotation as R

from ringfields.constants import MAX_DELTA_SECONDS, TARGET_FRAME_SECONDS


def _to_rad(angle):
    """
    Accept plain floats as radians and any astropy angle Quantity
    """
    if isinstance(angle, u.Quantity):
        return angle.to_value(u.rad)
    return float(angle)


def rotate_vectors(vectors, axis, angle):
    """
    Rotates a set of Nx3 vectors around a single axis by a single angle
    Args:
        vectors (np.array):
            Nx3 array of vectors
        axis (list):
            3-element array specifying rotation axis (e.g. [0,0,1]
            for z-axis)
        angle (u.Quantity or float):
            Angle to rotate vectors by, floats are radians
    """
    rot = R.from_rotvec(np.array(axis, dtype=float) * _to_rad(angle))
    return rot.apply(vectors)


def gen_rotate_to_sky_coords(vector, inclination, position_angle):
    """
    Rotate field coordinates, with the field midplane as the xy plane, to the
    plane of the sky as seen by an observer looking down the z axis

    Args:
        vector (np.array):
            Nx3 array of [x,y,z] vectors in field coordinates
        inclination (astropy Quantity or float):
            Tilt of the field midplane towards the observer
        position_angle (astropy Quantity or float):
            Rotation of the tilted field within the sky plane

    Returns:
        vector (np.array):
            Nx3 array of vectors in sky coordinates
    """
    vector = rotate_vectors(vector, [1, 0, 0], -_to_rad(inclination))
    vector = rotate_vectors(vector, [0, 0, 1], _to_rad(position_angle))
    # Sky frame has z pointing away from the observer
    vector[:, 2] = -vector[:, 2]
    return vector


def gen_rotate_to_field_coords(vector, inclination, position_angle):
    """
    Inverse of gen_rotate_to_sky_coords

    Args:
        vector (np.array):
            Nx3 array of [x,y,z] vectors in sky coordinates
        inclination (astropy Quantity or float):
            Tilt of the field midplane towards the observer
        position_angle (astropy Quantity or float):
            Rotation of the tilted field within the sky plane

    Returns:
        vector (np.array):
            Nx3 array of vectors in field coordinates
    """
    vector = np.array(vector, dtype=float)
    vector[:, 2] = -vector[:, 2]
    vector = rotate_vectors(vector, [0, 0, 1], -_to_rad(position_angle))
    vector = rotate_vectors(vector, [1, 0, 0], _to_rad(inclination))
    return vector


def compute_time_scale(
    delta_seconds,
    target_frame_seconds=TARGET_FRAME_SECONDS,
    max_delta_seconds=MAX_DELTA_SECONDS,
):
    """
    Convert the wall-clock time since the last frame into the time_scale
    passed to RingElement.advance. The delta is clamped so a stalled or
    paused loop does not make the field jump.

    Args:
        delta_seconds (float):
            Elapsed real time since the previous tick
        target_frame_seconds (float):
            Frame duration that corresponds to a time_scale of 1
        max_delta_seconds (float):
            Largest delta honoured

    Returns:
        time_scale (float)
    """
    delta_seconds = min(max(float(delta_seconds), 0.0), max_delta_seconds)
    return delta_seconds / target_frame_seconds
