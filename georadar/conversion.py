"""
Module for unit conversions into the base units used throughout georadar
(meters, radians, hectopascals, kelvin)
"""
__all__ = [
    'convert_to_hectopascals', 'convert_to_kelvin', 'convert_to_meters', 'convert_to_radians',
]

import math


def _unknown_unit(unit: str, factors) -> ValueError:
    return ValueError(
        f"Unrecognized unit '{unit}'; must be one of {', '.join(sorted(factors))}"
    )


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer= 'km', mile = 'mi',
        feet ='ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    unit = unit.lower()
    conversion_factors = {
        'm': 1,
        'km': 1000,
        'mi': 1609.344,
        'ft': 0.3048,
        'nmi': 1852,
        'yd': 0.9144,
    }

    if unit not in conversion_factors:
        raise _unknown_unit(unit, conversion_factors)

    return distance * conversion_factors[unit]


def convert_to_radians(angle: float, unit: str) -> float:
    """
    Converts an angle to radians.

    Args:
        angle (float): The angle value.
        unit (str): The unit of angle (radian = 'rad', degree = 'deg',
        gradian = 'grad', arcminute = 'arcmin', arcsecond = 'arcsec').

    Returns:
        float: The angle in radians.
    """
    unit = unit.lower()
    conversion_factors = {
        'rad': 1,
        'deg': math.pi / 180,
        'grad': math.pi / 200,
        'arcmin': math.pi / 10_800,
        'arcsec': math.pi / 648_000,
    }

    if unit not in conversion_factors:
        raise _unknown_unit(unit, conversion_factors)

    return angle * conversion_factors[unit]


def convert_to_hectopascals(pressure: float, unit: str) -> float:
    """
    Converts pressure to hectopascals (equivalently, millibars).

    Args:
        pressure (float): The pressure value.
        unit (str): The unit of pressure (pascal = 'pa', hectopascal = 'hpa',
        kilopascal = 'kpa', millibar = 'mbar', atmosphere = 'atm',
        millimeter of mercury = 'mmhg', inch of mercury = 'inhg', psi = 'psi').

    Returns:
        float: The pressure in hectopascals.
    """
    unit = unit.lower()
    conversion_factors = {
        'pa': 0.01,
        'hpa': 1,
        'kpa': 10,
        'mbar': 1,
        'atm': 1013.25,
        'mmhg': 1.33322387415,
        'inhg': 33.8638866667,
        'psi': 68.9475729318,
    }

    if unit not in conversion_factors:
        raise _unknown_unit(unit, conversion_factors)

    return pressure * conversion_factors[unit]


def convert_to_kelvin(temperature: float, unit: str) -> float:
    """
    Converts temperature to kelvin.

    Args:
        temperature (float): The temperature value.
        unit (str): The unit of temperature (kelvin = 'k', celsius = 'c',
        fahrenheit = 'f', rankine = 'r').

    Returns:
        float: The temperature in kelvin.
    """
    unit = unit.lower()
    conversions = {
        'k': lambda t: t,
        'c': lambda t: t + 273.15,
        'f': lambda t: (t - 32) * 5 / 9 + 273.15,
        'r': lambda t: t * 5 / 9,
    }

    if unit not in conversions:
        raise _unknown_unit(unit, conversions)

    return conversions[unit](temperature)
