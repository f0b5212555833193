"""Module for georadar type hinting"""

__all__ = ['Detection', 'Target']

from typing import Union

from georadar.points import Geodetic, Observation, Spherical

# Anything a sensor can be pointed at
Target = Union[Geodetic, Observation]

# Anything a sensor can report
Detection = Union[Spherical, Observation]
