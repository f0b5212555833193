import math

import pytest
from georadar.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'km', 1000.0),
        (1.0, 'mi', 1609.344),
        (1.0, 'ft', 0.3048),
        (1.0, 'nmi', 1852.0),
        (1.0, 'yd', 0.9144),
        (2.0, 'KM', 2000.0),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(ValueError):
        convert_to_meters(1.0, 'parsec')


def test_convert_to_radians():
    test_data = [
        (1.0, 'rad', 1.0),
        (180.0, 'deg', math.pi),
        (200.0, 'grad', math.pi),
        (60.0, 'arcmin', math.pi / 180),
        (3600.0, 'arcsec', math.pi / 180),
    ]

    for angle, unit, expected_result in test_data:
        result = convert_to_radians(angle, unit)
        assert result == pytest.approx(expected_result, rel=1e-9)

    with pytest.raises(ValueError):
        convert_to_radians(1.0, 'turn')


def test_convert_to_hectopascals():
    test_data = [
        (101325.0, 'pa', 1013.25),
        (1013.25, 'hpa', 1013.25),
        (101.325, 'kpa', 1013.25),
        (1013.25, 'mbar', 1013.25),
        (1.0, 'atm', 1013.25),
        (760.0, 'mmhg', 1013.25),
        (29.9213, 'inhg', 1013.25),
        (14.6959, 'psi', 1013.25),
    ]

    for pressure, unit, expected_result in test_data:
        result = convert_to_hectopascals(pressure, unit)
        assert result == pytest.approx(expected_result, rel=1e-4)

    with pytest.raises(ValueError):
        convert_to_hectopascals(1.0, 'bar')


def test_convert_to_kelvin():
    test_data = [
        (288.15, 'k', 288.15),
        (15.0, 'c', 288.15),
        (59.0, 'f', 288.15),
        (518.67, 'r', 288.15),
        (-40.0, 'F', 233.15),
    ]

    for temperature, unit, expected_result in test_data:
        result = convert_to_kelvin(temperature, unit)
        assert result == pytest.approx(expected_result, rel=1e-9)

    with pytest.raises(ValueError):
        convert_to_kelvin(1.0, 'delisle')
