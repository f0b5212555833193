from georadar._version import __version__  # noqa: F401
from georadar.utils.logging import LOGGER
from georadar.vectors import Cartesian, EnuVector, Geocentric
from georadar.points import Geodetic, LatLon, Observation, Spherical
from georadar.earth import EarthModel, EllipsoidalEarth, SphericalEarth, MEAN_SPHERE, WGS84
from georadar.atmosphere import StandardAtmosphere, Weather, STANDARD_ATMOSPHERE
from georadar.radar import (
    horizon_distance, line_of_sight_range, to_geodetic, to_geodetic_from_weather,
    to_geodetics, to_observation, to_observations, to_spherical,
    to_spherical_from_weather, to_sphericals,
)

__all__ = [
    'Cartesian',
    'EarthModel',
    'EllipsoidalEarth',
    'EnuVector',
    'Geocentric',
    'Geodetic',
    'LatLon',
    'Observation',
    'Spherical',
    'SphericalEarth',
    'StandardAtmosphere',
    'Weather',
    'horizon_distance',
    'line_of_sight_range',
    'to_geodetic',
    'to_geodetic_from_weather',
    'to_geodetics',
    'to_observation',
    'to_observations',
    'to_spherical',
    'to_spherical_from_weather',
    'to_sphericals',
    'LOGGER',
    'MEAN_SPHERE',
    'STANDARD_ATMOSPHERE',
    'WGS84',
]
