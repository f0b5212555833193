"""
Atmospheric profiles: pressure, temperature and humidity as a function of altitude
"""

__all__ = ['AtmosphereProfile', 'StandardAtmosphere', 'Weather', 'STANDARD_ATMOSPHERE']

from abc import ABC, abstractmethod
import math
from typing import Annotated, Iterator

from pydantic import Field, validate_call

from georadar._const import (
    ISA_G, ISA_LAPSE_RATE, ISA_P0, ISA_R, ISA_T0,
    ISA_TROPOPAUSE_ALT, ISA_TROPOPAUSE_TEMP, STANDARD_RELATIVE_HUMIDITY,
)
from georadar._types import HUMIDITY_TYPE


class Weather:
    """
    Atmospheric conditions at a single point.

    Args:
        pressure:
            Total pressure, in hPa

        temperature:
            Temperature, in kelvin

        relative_humidity:
            Relative humidity, in percent [0, 100]
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        pressure: Annotated[float, Field(ge=0)],
        temperature: Annotated[float, Field(gt=0)],
        relative_humidity: HUMIDITY_TYPE,
    ):
        self.pressure = float(pressure)
        self.temperature = float(temperature)
        self.relative_humidity = float(relative_humidity)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Weather):
            return False

        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __iter__(self) -> Iterator[float]:
        return iter((self.pressure, self.temperature, self.relative_humidity))

    def __repr__(self):
        return (
            f'<Weather({self.pressure} hPa, {self.temperature} K, '
            f'{self.relative_humidity}% RH)>'
        )


class AtmosphereProfile(ABC):
    """Base class for atmospheric profiles. Altitudes are in meters."""

    @abstractmethod
    def pressure(self, altitude: float) -> float:
        """
        Pressure at altitude.

        Args:
            altitude:
                Altitude, in meters

        Returns:
            float, in hPa
        """

    @abstractmethod
    def relative_humidity(self, altitude: float) -> float:
        """Relative humidity at altitude, in percent"""

    @abstractmethod
    def temperature(self, altitude: float) -> float:
        """Temperature at altitude, in kelvin"""

    def weather(self, altitude: float) -> Weather:
        """All conditions at altitude, as a single record"""
        return Weather(
            self.pressure(altitude),
            self.temperature(altitude),
            self.relative_humidity(altitude),
        )


class StandardAtmosphere(AtmosphereProfile):
    """
    Two-layer International Standard Atmosphere: a troposphere with a constant
    lapse rate up to 11 km, topped by an isothermal layer.

    The ISA carries no humidity, so a constant relative humidity is used at
    every altitude.

    Args:
        relative_humidity:
            (Default 60.0) Relative humidity in percent, applied at all altitudes
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, relative_humidity: HUMIDITY_TYPE = STANDARD_RELATIVE_HUMIDITY):
        self._relative_humidity = float(relative_humidity)

    def __repr__(self):
        return f'<StandardAtmosphere({self._relative_humidity}% RH)>'

    def pressure(self, altitude: float) -> float:
        if altitude <= ISA_TROPOPAUSE_ALT:
            return ISA_P0 * (self.temperature(altitude) / ISA_T0) ** (
                -ISA_G / (ISA_LAPSE_RATE * ISA_R)
            )

        tropopause_pressure = self.pressure(ISA_TROPOPAUSE_ALT)
        return tropopause_pressure * math.exp(
            -ISA_G * (altitude - ISA_TROPOPAUSE_ALT) / (ISA_R * ISA_TROPOPAUSE_TEMP)
        )

    def relative_humidity(self, altitude: float) -> float:
        return self._relative_humidity

    def temperature(self, altitude: float) -> float:
        if altitude <= ISA_TROPOPAUSE_ALT:
            return ISA_T0 + ISA_LAPSE_RATE * altitude

        return ISA_TROPOPAUSE_TEMP


STANDARD_ATMOSPHERE = StandardAtmosphere()
