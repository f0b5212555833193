"""
Conversions between a sensor's position and its targets, accounting for the
curvature of the earth and atmospheric refraction.

Refraction is modelled with the effective earth radius: the earth radius is
scaled by a k-factor so that radar rays can be treated as straight lines.
Every conversion then reduces to the triangle formed by the center of that
effective earth, the sensor and the target.
"""

__all__ = [
    'TriangleSolution', 'horizon_distance', 'line_of_sight_range', 'solve_refraction_triangle',
    'to_geodetic', 'to_geodetic_from_weather', 'to_geodetics', 'to_observation',
    'to_observations', 'to_spherical', 'to_spherical_from_weather', 'to_sphericals',
]

import math
from typing import Iterable, List, NamedTuple, Optional

from georadar._const import (
    K_FACTOR_MAX_ITERATIONS, K_FACTOR_TOLERANCE, STANDARD_REFRACTION_K,
)
from georadar.atmosphere import STANDARD_ATMOSPHERE, AtmosphereProfile, Weather
from georadar.earth import EarthModel, resolve_earth_model
from georadar.points import Geodetic, Observation, Spherical
from georadar.refraction import k_factor_from_profile
from georadar.typing import Detection, Target
from georadar.utils.functions import clamp
from georadar.utils.logging import LOGGER, warn_once

# Slant ranges shorter than this leave the triangle undefined
_MIN_SLANT_RANGE = 1e-9

# Upper clamp historically applied to cos(central angle) when solving for elevation
_LEGACY_COS_CEILING = 1e-12


class TriangleSolution(NamedTuple):
    """Result of `solve_refraction_triangle`"""
    target_altitude: float
    elevation: float
    central_angle: float


def solve_refraction_triangle(
    effective_radius: float,
    sensor_altitude: float,
    slant_range: float,
    target_altitude: Optional[float] = None,
    elevation: Optional[float] = None,
    legacy_clamp: bool = False,
) -> TriangleSolution:
    """
    Solves the triangle formed by the center of the effective earth, the sensor
    and the target using the law of cosines.

    Given the elevation angle, solves for the target altitude; otherwise,
    given the target altitude, solves for the elevation angle. The central
    angle between sensor and target is solved in both cases.

    Args:
        effective_radius:
            The effective earth radius, in meters

        sensor_altitude:
            Altitude of the sensor, in meters

        slant_range:
            Straight-line distance from sensor to target, in meters

        target_altitude:
            (Optional) Altitude of the target, in meters

        elevation:
            (Optional) Elevation angle of the target, in radians. Takes
            precedence over `target_altitude` when both are given.

        legacy_clamp:
            (Default False) When solving for elevation, clamp the cosine of the
            central angle to [-1, 1e-12] rather than [-1, 1]. This reproduces
            earlier results, where the central angle never drops below ~pi/2.

    Returns:
        TriangleSolution
    """
    if elevation is None and target_altitude is None:
        raise ValueError('Either target altitude or elevation must be provided.')

    if slant_range < _MIN_SLANT_RANGE:
        warn_once(
            'Slant range is zero; elevation angle is undefined and assumed level. '
            '(this warning will not repeat)'
        )
        return TriangleSolution(
            sensor_altitude if elevation is not None else target_altitude,
            0.0,
            0.0,
        )

    sensor_side = effective_radius + sensor_altitude

    if elevation is not None:
        target_side_sq = (
            sensor_side ** 2 + slant_range ** 2 +
            2 * sensor_side * slant_range * math.sin(elevation)
        )
        target_side = math.sqrt(target_side_sq)
        cos_gamma = (
            (sensor_side ** 2 + target_side_sq - slant_range ** 2) /
            (2 * sensor_side * target_side)
        )
        return TriangleSolution(
            target_side - effective_radius,
            elevation,
            math.acos(clamp(cos_gamma, -1.0, 1.0)),
        )

    target_side = effective_radius + target_altitude
    sin_beta = (
        (target_side ** 2 - sensor_side ** 2 - slant_range ** 2) /
        (2 * sensor_side * slant_range)
    )
    cos_gamma = (
        (sensor_side ** 2 + target_side ** 2 - slant_range ** 2) /
        (2 * sensor_side * target_side)
    )
    ceiling = _LEGACY_COS_CEILING if legacy_clamp else 1.0

    return TriangleSolution(
        target_altitude,
        math.asin(clamp(sin_beta, -1.0, 1.0)),
        math.acos(clamp(cos_gamma, -1.0, ceiling)),
    )


def _effective_radius(sensor: Geodetic, k_factor: float, earth: EarthModel) -> float:
    return earth.effective_earth_radius(sensor.lat, k_factor)


def _target_altitude(target: Target) -> float:
    if isinstance(target, Observation):
        return target.altitude

    if isinstance(target, Geodetic):
        return target.alt

    raise ValueError(
        f'Targets must be Geodetic or Observation, got {type(target).__name__}'
    )


def to_spherical(
    sensor: Geodetic,
    target: Target,
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> Spherical:
    """
    The apparent azimuth, elevation and slant range of a target as seen by the
    sensor.

    A Geodetic target is measured with the earth model (chord distance and
    initial bearing). An Observation already carries azimuth and range, and
    only its elevation is derived from the reported altitude.

    Args:
        sensor:
            Position of the sensor

        target:
            A Geodetic position or an Observation

        k_factor:
            (Default 4/3) The refraction k-factor

        earth:
            (Optional) The earth model; defaults to WGS84

    Returns:
        Spherical
    """
    earth = resolve_earth_model(earth)
    target_altitude = _target_altitude(target)

    if isinstance(target, Observation):
        azimuth, slant_range = target.azimuth, target.range
    else:
        azimuth = earth.initial_bearing(sensor, target)
        slant_range = earth.chord_distance(sensor, target)

    solution = solve_refraction_triangle(
        _effective_radius(sensor, k_factor, earth),
        sensor.alt,
        slant_range,
        target_altitude=target_altitude,
    )
    return Spherical(azimuth, solution.elevation, slant_range)


def to_geodetic(
    sensor: Geodetic,
    detection: Detection,
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> Geodetic:
    """
    The position of a detected target.

    The refraction triangle gives the target altitude and the central angle,
    whose arc over the effective earth is the ground distance. The latitude
    and longitude follow from the direct geodesic problem along the detection
    azimuth.

    Args:
        sensor:
            Position of the sensor

        detection:
            A Spherical detection, or an Observation (converted to Spherical
            first)

        k_factor:
            (Default 4/3) The refraction k-factor

        earth:
            (Optional) The earth model; defaults to WGS84

    Returns:
        Geodetic
    """
    earth = resolve_earth_model(earth)
    if isinstance(detection, Observation):
        detection = to_spherical(sensor, detection, k_factor, earth)

    if not isinstance(detection, Spherical):
        raise ValueError(
            f'Detections must be Spherical or Observation, got {type(detection).__name__}'
        )

    effective_radius = _effective_radius(sensor, k_factor, earth)
    solution = solve_refraction_triangle(
        effective_radius,
        sensor.alt,
        detection.range,
        elevation=detection.elevation,
    )
    ground_distance = effective_radius * solution.central_angle

    return earth.destination_point(
        sensor, detection.azimuth, ground_distance
    ).to_geodetic(solution.target_altitude)


def to_observation(
    sensor: Geodetic,
    target: Geodetic,
    earth: Optional[EarthModel] = None,
) -> Observation:
    """The azimuth, slant range and altitude at which the sensor reports a target"""
    earth = resolve_earth_model(earth)
    return Observation(
        earth.initial_bearing(sensor, target),
        earth.chord_distance(sensor, target),
        target.alt,
    )


def to_spherical_from_weather(
    sensor: Geodetic,
    sensor_weather: Weather,
    target: Target,
    target_weather: Optional[Weather] = None,
    earth: Optional[EarthModel] = None,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
) -> Spherical:
    """
    Same as `to_spherical`, with the k-factor derived from the conditions at
    the sensor and at the target.

    Args:
        sensor:
            Position of the sensor

        sensor_weather:
            Conditions at the sensor

        target:
            A Geodetic position or an Observation

        target_weather:
            (Optional) Conditions at the target; taken from `atmosphere` at the
            target altitude when not given

        earth:
            (Optional) The earth model; defaults to WGS84

        atmosphere:
            (Default ISA, 60% RH) Profile used for a missing `target_weather`

    Returns:
        Spherical
    """
    k_factor = k_factor_from_profile(
        sensor.alt, sensor_weather,
        _target_altitude(target), target_weather,
        atmosphere=atmosphere,
    )
    return to_spherical(sensor, target, k_factor, earth)


def to_geodetic_from_weather(
    sensor: Geodetic,
    sensor_weather: Weather,
    detection: Detection,
    earth: Optional[EarthModel] = None,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
    max_iterations: int = K_FACTOR_MAX_ITERATIONS,
    tolerance: float = K_FACTOR_TOLERANCE,
) -> Geodetic:
    """
    Same as `to_geodetic`, with the k-factor derived from the conditions at the
    sensor and the atmospheric profile at the target.

    The target altitude of a Spherical detection depends on the k-factor, which
    in turn depends on the target altitude. Starting from k = 4/3 the target is
    located, the k-factor recomputed at the new altitude, and so on until the
    k-factor changes by less than `tolerance`. When `max_iterations` is reached
    the last position is returned and a warning is logged.

    An Observation carries its own altitude, so its k-factor is computed once.

    Args:
        sensor:
            Position of the sensor

        sensor_weather:
            Conditions at the sensor

        detection:
            A Spherical detection or an Observation

        earth:
            (Optional) The earth model; defaults to WGS84

        atmosphere:
            (Default ISA, 60% RH) Profile giving the conditions at the target

        max_iterations:
            (Default 10) Cap on the number of refinements

        tolerance:
            (Default 1e-6) Convergence threshold on the change in k-factor

    Returns:
        Geodetic
    """
    if isinstance(detection, Observation):
        k_factor = k_factor_from_profile(
            sensor.alt, sensor_weather, detection.altitude, atmosphere=atmosphere
        )
        return to_geodetic(sensor, detection, k_factor, earth)

    if max_iterations < 1:
        raise ValueError(f'max_iterations must be at least 1, got {max_iterations}')

    k_factor = STANDARD_REFRACTION_K
    for iteration in range(max_iterations):
        estimate = to_geodetic(sensor, detection, k_factor, earth)
        new_k_factor = k_factor_from_profile(
            sensor.alt, sensor_weather, estimate.alt, atmosphere=atmosphere
        )
        LOGGER.debug(
            'k-factor iteration %d: k=%.9f, altitude=%.3f m, next k=%.9f',
            iteration, k_factor, estimate.alt, new_k_factor
        )
        if abs(new_k_factor - k_factor) < tolerance:
            break

        k_factor = new_k_factor
    else:
        warn_once(
            f'k-factor did not converge within {max_iterations} iterations; '
            'returning the last estimate. (this warning will not repeat)'
        )

    return estimate


def _check_batch(items, name: str):
    if items is None:
        raise ValueError(f'{name} cannot be None.')


def to_sphericals(
    sensor: Geodetic,
    targets: Iterable[Target],
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> List[Spherical]:
    """Applies `to_spherical` to each target, preserving order"""
    _check_batch(targets, 'Targets')
    return [to_spherical(sensor, target, k_factor, earth) for target in targets]


def to_geodetics(
    sensor: Geodetic,
    detections: Iterable[Detection],
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> List[Geodetic]:
    """Applies `to_geodetic` to each detection, preserving order"""
    _check_batch(detections, 'Detections')
    return [to_geodetic(sensor, detection, k_factor, earth) for detection in detections]


def to_observations(
    sensor: Geodetic,
    targets: Iterable[Geodetic],
    earth: Optional[EarthModel] = None,
) -> List[Observation]:
    """Applies `to_observation` to each target, preserving order"""
    _check_batch(targets, 'Targets')
    return [to_observation(sensor, target, earth) for target in targets]


def horizon_distance(
    altitude: float,
    latitude: float,
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> float:
    """
    Straight-line distance from an antenna to its radar horizon, i.e. the point
    where a ray grazes the effective earth.

    Args:
        altitude:
            Antenna altitude above the surface, in meters (non-negative)

        latitude:
            Latitude of the antenna, in radians

        k_factor:
            (Default 4/3) The refraction k-factor

        earth:
            (Optional) The earth model; defaults to WGS84

    Returns:
        float, in meters
    """
    if altitude < 0:
        raise ValueError(f'Antenna altitude must be non-negative, got {altitude}')

    effective_radius = resolve_earth_model(earth).effective_earth_radius(latitude, k_factor)
    return math.sqrt(2 * effective_radius * altitude + altitude ** 2)


def line_of_sight_range(
    sensor_altitude: float,
    target_altitude: float,
    latitude: float,
    k_factor: float = STANDARD_REFRACTION_K,
    earth: Optional[EarthModel] = None,
) -> float:
    """
    Maximum range at which a target can be seen over a smooth earth: the sum of
    the sensor's and the target's horizon distances.

    Args:
        sensor_altitude:
            Altitude of the sensor, in meters

        target_altitude:
            Altitude of the target, in meters

        latitude:
            Latitude of the sensor, in radians

        k_factor:
            (Default 4/3) The refraction k-factor

        earth:
            (Optional) The earth model; defaults to WGS84

    Returns:
        float, in meters
    """
    return (
        horizon_distance(sensor_altitude, latitude, k_factor, earth) +
        horizon_distance(target_altitude, latitude, k_factor, earth)
    )
