"""
Radio refractivity of the lower atmosphere and the effective earth-radius
k-factor derived from it.

Pressures are in hPa, temperatures in kelvin, relative humidities in percent
and heights in meters. Humidities outside [0, 100] raise a pydantic
ValidationError.
"""

__all__ = [
    'average_modified_refractivity', 'average_modified_refractivity_from_weather',
    'k_factor_from_gradient', 'k_factor_from_profile', 'k_factor_from_standard_atmosphere',
    'modified_refractivity', 'refractive_index', 'refractivity', 'saturation_vapor_pressure',
    'standard_average_modified_refractivity', 'vapor_pressure',
]

import math
from typing import Optional

from pydantic import validate_call

from georadar._const import (
    DUCTING_K_FACTOR, EARTH_MEAN_RADIUS, STANDARD_DM_DH,
)
from georadar._types import HUMIDITY_TYPE
from georadar.atmosphere import STANDARD_ATMOSPHERE, AtmosphereProfile, Weather
from georadar.utils.logging import warn_once

# Tetens coefficients (over water)
_TETENS_A = 6.112  # hPa
_TETENS_B = 17.67
_TETENS_C = 243.5  # degrees C

# ITU-R P.453 refractivity coefficients
_DRY_COEFFICIENT = 77.6  # K/hPa
_WET_COEFFICIENT = 3.732e5  # K^2/hPa

_KELVIN_OFFSET = 273.15


def saturation_vapor_pressure(temperature: float) -> float:
    """
    Saturation vapor pressure over water, using the Tetens equation.

    Args:
        temperature:
            Temperature, in kelvin

    Returns:
        float, in hPa
    """
    celsius = temperature - _KELVIN_OFFSET
    return _TETENS_A * math.exp(_TETENS_B * celsius / (celsius + _TETENS_C))


@validate_call
def vapor_pressure(temperature: float, relative_humidity: HUMIDITY_TYPE) -> float:
    """
    Partial pressure of water vapor.

    Args:
        temperature:
            Temperature, in kelvin

        relative_humidity:
            Relative humidity, in percent [0, 100]

    Returns:
        float, in hPa
    """
    return saturation_vapor_pressure(temperature) * relative_humidity / 100


@validate_call
def refractivity(pressure: float, temperature: float, relative_humidity: HUMIDITY_TYPE) -> float:
    """
    Radio refractivity N = (n - 1) * 1e6, using the ITU-R P.453 two-term formula.

    Args:
        pressure:
            Total pressure, in hPa

        temperature:
            Temperature, in kelvin

        relative_humidity:
            Relative humidity, in percent [0, 100]

    Returns:
        float, in N-units
    """
    e = vapor_pressure(temperature, relative_humidity)
    dry = _DRY_COEFFICIENT * pressure / temperature
    wet = _WET_COEFFICIENT * e / temperature ** 2
    return dry + wet


def refractive_index(n_units: float) -> float:
    """Refractive index from refractivity"""
    return 1 + n_units * 1e-6


def modified_refractivity(
    n_units: float,
    height: float,
    earth_radius: float = EARTH_MEAN_RADIUS
) -> float:
    """
    Modified refractivity M = N + (h / Re) * 1e6, which folds the curvature of
    the earth into the refractivity gradient.

    Args:
        n_units:
            Refractivity, in N-units

        height:
            Height above the surface, in meters

        earth_radius:
            (Default 6371008.8) The true earth radius, in meters

    Returns:
        float, in M-units
    """
    return n_units + height / earth_radius * 1e6


def average_modified_refractivity(
    n_site: float,
    site_height: float,
    n_target: float,
    target_height: float,
    earth_radius: float = EARTH_MEAN_RADIUS,
) -> float:
    """Mean of the modified refractivity at two heights"""
    m_site = modified_refractivity(n_site, site_height, earth_radius)
    m_target = modified_refractivity(n_target, target_height, earth_radius)
    return (m_site + m_target) / 2


def _weather_refractivity(weather: Weather) -> float:
    return refractivity(weather.pressure, weather.temperature, weather.relative_humidity)


def standard_average_modified_refractivity(
    site_height: float,
    target_height: float,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
) -> float:
    """Mean modified refractivity between two heights of an atmospheric profile"""
    return average_modified_refractivity(
        _weather_refractivity(atmosphere.weather(site_height)),
        site_height,
        _weather_refractivity(atmosphere.weather(target_height)),
        target_height,
    )


def average_modified_refractivity_from_weather(
    site_height: float,
    site_weather: Weather,
    target_height: float,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
) -> float:
    """
    Mean modified refractivity between a site with measured weather and a
    target whose conditions are taken from an atmospheric profile.
    """
    return average_modified_refractivity(
        _weather_refractivity(site_weather),
        site_height,
        _weather_refractivity(atmosphere.weather(target_height)),
        target_height,
    )


def k_factor_from_gradient(dm_dh: float, earth_radius: float = EARTH_MEAN_RADIUS) -> float:
    """
    Effective earth-radius factor from a modified refractivity gradient.

    A vanishing gradient means rays follow the curvature of the earth
    (ducting); a large sentinel k-factor of 1000 is returned instead of
    dividing by zero.

    Args:
        dm_dh:
            The gradient, in M-units per meter

        earth_radius:
            (Default 6371008.8) The true earth radius, in meters

    Returns:
        float
    """
    if abs(dm_dh) < 1e-9:
        warn_once(
            'Modified refractivity gradient is near zero (ducting conditions); '
            f'using k-factor {DUCTING_K_FACTOR}. (this warning will not repeat)'
        )
        return DUCTING_K_FACTOR

    return (1e6 / earth_radius) / dm_dh


def k_factor_from_profile(
    height1: float,
    weather1: Weather,
    height2: float,
    weather2: Optional[Weather] = None,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
) -> float:
    """
    Effective earth-radius factor from the conditions at two heights.

    Args:
        height1:
            Height of the first point (usually the sensor), in meters

        weather1:
            Conditions at the first point

        height2:
            Height of the second point (usually the target), in meters

        weather2:
            (Optional) Conditions at the second point; taken from `atmosphere`
            when not given

        atmosphere:
            (Default ISA, 60% RH) Profile used for a missing `weather2`

    Returns:
        float
    """
    if weather2 is None:
        weather2 = atmosphere.weather(height2)

    if abs(height2 - height1) < 1e-6:
        # Standard atmosphere gradient: dN/dh of about -0.039 plus 1e6 / Re
        dm_dh = STANDARD_DM_DH
    else:
        m1 = modified_refractivity(_weather_refractivity(weather1), height1)
        m2 = modified_refractivity(_weather_refractivity(weather2), height2)
        dm_dh = (m2 - m1) / (height2 - height1)

    return k_factor_from_gradient(dm_dh)


def k_factor_from_standard_atmosphere(
    height1: float,
    height2: float,
    atmosphere: AtmosphereProfile = STANDARD_ATMOSPHERE,
) -> float:
    """
    Effective earth-radius factor between two heights of an atmospheric profile.

    Args:
        height1:
            Height of the first point, in meters

        height2:
            Height of the second point, in meters

        atmosphere:
            (Default ISA, 60% RH) The profile

    Returns:
        float
    """
    return k_factor_from_profile(
        height1, atmosphere.weather(height1),
        height2, atmosphere.weather(height2),
    )
