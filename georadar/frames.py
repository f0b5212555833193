"""
Rotations between the Earth-Centered, Earth-Fixed frame and local East-North-Up
tangent-plane frames, and the radial reinterpretation of geodetic coordinates
"""

__all__ = [
    'ecef_to_enu', 'enu_rotation_matrix', 'enu_to_ecef',
    'geodetic_as_spherical', 'spherical_as_geodetic',
]

import math

import numpy as np

from georadar.points import Geodetic, Spherical
from georadar.vectors import Cartesian, EnuVector


def enu_rotation_matrix(origin: Geodetic) -> np.ndarray:
    """
    Builds the 3x3 matrix whose columns are the east, north and up unit vectors
    of `origin`'s tangent plane, expressed in ECEF.

    Only the origin's longitude and latitude matter; the up axis is the
    ellipsoid normal at the geodetic latitude.

    Args:
        origin:
            The origin of the local frame

    Returns:
        np.ndarray of shape (3, 3)
    """
    sin_lon, cos_lon = math.sin(origin.lon), math.cos(origin.lon)
    sin_lat, cos_lat = math.sin(origin.lat), math.cos(origin.lat)

    return np.array([
        [-sin_lon, -sin_lat * cos_lon, cos_lat * cos_lon],
        [cos_lon, -sin_lat * sin_lon, cos_lat * sin_lon],
        [0.0, cos_lat, sin_lat],
    ])


def ecef_to_enu(origin: Geodetic, displacement: Cartesian) -> EnuVector:
    """
    Rotates an ECEF displacement into the ENU frame centered on `origin`.

    Args:
        origin:
            The origin of the local frame

        displacement:
            An offset vector in ECEF (e.g. target minus origin)

    Returns:
        EnuVector
    """
    enu = enu_rotation_matrix(origin).T @ displacement.to_array()
    return EnuVector(*enu.tolist())


def enu_to_ecef(origin: Geodetic, displacement: EnuVector) -> Cartesian:
    """
    Rotates a local ENU displacement back into the ECEF frame.

    Args:
        origin:
            The origin of the local frame

        displacement:
            An offset vector in the ENU frame of `origin`

    Returns:
        Cartesian
    """
    ecef = enu_rotation_matrix(origin) @ displacement.to_array()
    return Cartesian(*ecef.tolist())


def geodetic_as_spherical(geodetic: Geodetic, radius: float) -> Spherical:
    """
    Reinterprets a geodetic position as a radial spherical vector from the center
    of a sphere: longitude becomes azimuth, latitude becomes elevation and the
    radius plus altitude becomes the range.

    Args:
        geodetic:
            The position

        radius:
            Radius of the reference sphere, in meters

    Returns:
        Spherical
    """
    return Spherical(geodetic.lon, geodetic.lat, radius + geodetic.alt)


def spherical_as_geodetic(spherical: Spherical, radius: float) -> Geodetic:
    """Inverse of `geodetic_as_spherical`"""
    return Geodetic(spherical.azimuth, spherical.elevation, spherical.range - radius)
