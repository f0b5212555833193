"""
Solvers for the direct and inverse geodesic problems on a sphere (haversine) and
on the WGS84 ellipsoid (Vincenty).

All functions work on plain floats: angles in radians, distances in meters.
Bearings are measured clockwise from north and returned in [0, 2pi).
"""

__all__ = [
    'haversine_bearing', 'haversine_destination', 'haversine_distance',
    'vincenty_direct', 'vincenty_inverse',
]

import math
from typing import Optional, Tuple

from georadar._const import (
    VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE, WGS84_A, WGS84_B, WGS84_F
)

_TWO_PI = 2 * math.pi

# Second eccentricity squared, scales cos^2(alpha) into u^2
_EP2 = (WGS84_A ** 2 - WGS84_B ** 2) / WGS84_B ** 2


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float, radius: float) -> float:
    """Great-circle distance using the haversine formula"""
    hav = (
        math.sin((lat2 - lat1) / 2) ** 2 +
        math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return radius * 2 * math.atan2(math.sqrt(hav), math.sqrt(1 - hav))


def haversine_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial great-circle bearing"""
    delta_lon = lon2 - lon1
    east = math.sin(delta_lon) * math.cos(lat2)
    north = (
        math.cos(lat1) * math.sin(lat2) -
        math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)
    )
    return math.atan2(east, north) % _TWO_PI


def haversine_destination(
        lat1: float,
        lon1: float,
        bearing: float,
        distance: float,
        radius: float,
) -> Tuple[float, float]:
    """
    Destination point along a great circle.

    Returns:
        (latitude, longitude) in radians; the longitude is not wrapped
    """
    delta = distance / radius
    sin_lat1, cos_lat1 = math.sin(lat1), math.cos(lat1)

    sin_lat2 = sin_lat1 * math.cos(delta) + cos_lat1 * math.sin(delta) * math.cos(bearing)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(delta) * cos_lat1,
        math.cos(delta) - sin_lat1 * sin_lat2
    )

    return lat2, lon2


def _reduced_latitude(lat: float) -> Tuple[float, float]:
    """sin and cos of the latitude on the auxiliary sphere"""
    tan_u = (1 - WGS84_F) * math.tan(lat)
    cos_u = 1 / math.sqrt(1 + tan_u ** 2)
    return tan_u * cos_u, cos_u


def _series_coefficients(cos_sq_alpha: float) -> Tuple[float, float]:
    u_sq = cos_sq_alpha * _EP2
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return big_a, big_b


def _delta_sigma(big_b: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    return big_b * sin_sigma * (
        cos_2sigma_m + big_b / 4 * (
            cos_sigma * (2 * cos_2sigma_m ** 2 - 1) -
            big_b / 6 * cos_2sigma_m * (4 * sin_sigma ** 2 - 3) * (4 * cos_2sigma_m ** 2 - 3)
        )
    )


def _lambda_correction(
    sin_alpha: float,
    cos_sq_alpha: float,
    sigma: float,
    sin_sigma: float,
    cos_sigma: float,
    cos_2sigma_m: float,
) -> float:
    """Difference between longitude on the auxiliary sphere and on the ellipsoid"""
    c = WGS84_F / 16 * cos_sq_alpha * (4 + WGS84_F * (4 - 3 * cos_sq_alpha))
    return (1 - c) * WGS84_F * sin_alpha * (
        sigma + c * sin_sigma * (cos_2sigma_m + c * cos_sigma * (2 * cos_2sigma_m ** 2 - 1))
    )


def vincenty_inverse(
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        max_iterations: int = VINCENTY_MAX_ITERATIONS,
        tolerance: float = VINCENTY_TOLERANCE,
) -> Optional[Tuple[float, float]]:
    """
    Solves the inverse problem on the WGS84 ellipsoid using Vincenty's formula.

    Args:
        lat1, lon1:
            The start point, in radians

        lat2, lon2:
            The end point, in radians

        max_iterations:
            (Default 100) Cap on the number of lambda refinements

        tolerance:
            (Default 1e-12) Convergence threshold on the change in lambda

    Returns:
        (distance in meters, initial bearing in radians), or None if the
        iteration did not converge (typically for nearly antipodal points)
    """
    sin_u1, cos_u1 = _reduced_latitude(lat1)
    sin_u2, cos_u2 = _reduced_latitude(lat2)
    delta_lon = lon2 - lon1

    lam = delta_lon
    for _ in range(max_iterations):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.hypot(
            cos_u2 * sin_lam,
            cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam
        )
        if sin_sigma == 0:
            # Coincident points
            return 0.0, 0.0

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha ** 2

        # Geodesics along the equator have cos_sq_alpha == 0
        cos_2sigma_m = 0.0
        if cos_sq_alpha != 0:
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha

        previous = lam
        lam = delta_lon + _lambda_correction(
            sin_alpha, cos_sq_alpha, sigma, sin_sigma, cos_sigma, cos_2sigma_m
        )
        if abs(lam - previous) < tolerance:
            break
    else:
        return None

    big_a, big_b = _series_coefficients(cos_sq_alpha)
    distance = WGS84_B * big_a * (
        sigma - _delta_sigma(big_b, sin_sigma, cos_sigma, cos_2sigma_m)
    )
    bearing = math.atan2(
        cos_u2 * math.sin(lam),
        cos_u1 * sin_u2 - sin_u1 * cos_u2 * math.cos(lam)
    )

    return distance, bearing % _TWO_PI


def vincenty_direct(
        lat1: float,
        lon1: float,
        bearing: float,
        distance: float,
        max_iterations: int = VINCENTY_MAX_ITERATIONS,
        tolerance: float = VINCENTY_TOLERANCE,
) -> Optional[Tuple[float, float]]:
    """
    Solves the direct problem on the WGS84 ellipsoid using Vincenty's formula.

    Args:
        lat1, lon1:
            The start point, in radians

        bearing:
            The initial bearing, in radians clockwise from north

        distance:
            The distance along the geodesic, in meters

        max_iterations:
            (Default 100) Cap on the number of sigma refinements

        tolerance:
            (Default 1e-12) Convergence threshold on the change in sigma

    Returns:
        (latitude, longitude) in radians, the longitude unwrapped; or None if
        the iteration did not converge
    """
    if distance == 0:
        return lat1, lon1

    sin_bearing, cos_bearing = math.sin(bearing), math.cos(bearing)
    sin_u1, cos_u1 = _reduced_latitude(lat1)

    # Angular distance from the equator crossing to the start point
    sigma1 = math.atan2(sin_u1 / cos_u1, cos_bearing)
    sin_alpha = cos_u1 * sin_bearing
    cos_sq_alpha = 1 - sin_alpha ** 2
    big_a, big_b = _series_coefficients(cos_sq_alpha)

    first_guess = distance / (WGS84_B * big_a)
    sigma = first_guess
    for _ in range(max_iterations):
        previous = sigma
        sigma = first_guess + _delta_sigma(
            big_b, math.sin(sigma), math.cos(sigma), math.cos(2 * sigma1 + sigma)
        )
        if abs(sigma - previous) < tolerance:
            break
    else:
        return None

    sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)
    cos_2sigma_m = math.cos(2 * sigma1 + sigma)

    lat2 = math.atan2(
        sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_bearing,
        (1 - WGS84_F) * math.hypot(sin_alpha, sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_bearing)
    )
    lam = math.atan2(
        sin_sigma * sin_bearing,
        cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_bearing
    )
    delta_lon = lam - _lambda_correction(
        sin_alpha, cos_sq_alpha, sigma, sin_sigma, cos_sigma, cos_2sigma_m
    )

    return lat2, lon1 + delta_lon
