"""
Representations of a point on (or above) the earth, and of a target relative to a sensor
"""

__all__ = ['Geodetic', 'LatLon', 'Observation', 'Spherical']

import math
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from pydantic import validate_call

from georadar._const import EPSILON
from georadar.utils.functions import round_half_up, wrap_bounce, wrap_cycle
from georadar.vectors import Cartesian, EnuVector

if TYPE_CHECKING:  # pragma: no cover
    from georadar.earth import EarthModel
    from georadar.vectors import Geocentric

_HALF_PI = math.pi / 2
_TWO_PI = 2 * math.pi


def _wrap_pole_crossing(horizontal: float, vertical: float, h_min: float) -> Tuple[float, float]:
    """
    Reflects a vertical angle back into [-pi/2, pi/2]. Every pass over a pole
    moves the horizontal angle onto the opposite meridian.
    """
    if math.isfinite(vertical) and not -_HALF_PI <= vertical <= _HALF_PI:
        crossings = math.floor((vertical + _HALF_PI) / math.pi)
        vertical = wrap_bounce(vertical, -_HALF_PI, _HALF_PI)
        if crossings % 2:
            horizontal += math.pi

    return wrap_cycle(horizontal, h_min, h_min + _TWO_PI), vertical


def _to_dms(dd: float) -> Tuple[int, int, float]:
    """Converts a Decimal Degree to Degrees Minutes Seconds"""
    minutes, seconds = divmod(abs(dd) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    return int(degrees), int(minutes), round_half_up(seconds, 5)


def _resolve(earth):
    from georadar.earth import resolve_earth_model  # pylint: disable=import-outside-toplevel
    return resolve_earth_model(earth)


class Geodetic:
    """
    A position expressed as longitude, latitude (radians) and altitude (meters)
    above the reference surface of an earth model.

    Longitudes are wrapped to [-pi, pi). Latitudes beyond a pole are reflected
    back and the longitude is moved to the opposite meridian. Altitude may be
    negative.

    Methods which depend on the shape of the earth accept an optional `earth`
    model, defaulting to WGS84.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, lon: float, lat: float, alt: float = 0.0):
        self._lon, self._lat = _wrap_pole_crossing(float(lon), float(lat), -math.pi)
        self._alt = float(alt)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Geodetic):
            return False

        return (
            self._lon == other.lon and
            self._lat == other.lat and
            self._alt == other.alt
        )

    def __hash__(self) -> int:
        return hash((self._lon, self._lat, self._alt))

    def __iter__(self) -> Iterator[float]:
        return iter((self._lon, self._lat, self._alt))

    def __repr__(self):
        return f'<Geodetic({self.longitude}, {self.latitude}, {self._alt})>'

    @property
    def alt(self) -> float:
        """Altitude, in meters"""
        return self._alt

    @property
    def lat(self) -> float:
        """Latitude, in radians"""
        return self._lat

    @property
    def latitude(self) -> float:
        """Latitude, in degrees"""
        return math.degrees(self._lat)

    @property
    def lon(self) -> float:
        """Longitude, in radians"""
        return self._lon

    @property
    def longitude(self) -> float:
        """Longitude, in degrees"""
        return math.degrees(self._lon)

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float, altitude: float = 0.0) -> 'Geodetic':
        """Creates a Geodetic from a longitude and latitude in decimal degrees"""
        return cls(math.radians(longitude), math.radians(latitude), altitude)

    def altitude_difference(self, other: 'Geodetic') -> float:
        """Altitude of `other` minus the altitude of this point, in meters"""
        return other.alt - self._alt

    def bearing_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> float:
        """Initial bearing (radians clockwise from north, [0, 2pi)) towards another point"""
        return _resolve(earth).initial_bearing(self, other)

    def displacement_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> Cartesian:
        """The ECEF vector pointing from this point to another"""
        return _resolve(earth).displacement(self, other)

    def distance_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> float:
        """Straight-line (chord) distance to another point, in meters"""
        return _resolve(earth).chord_distance(self, other)

    def elevation_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> float:
        """Angle of the altitude difference over the surface distance, in radians"""
        return _resolve(earth).elevation_angle(self, other)

    def local_displacement_to(
        self,
        other: 'Geodetic',
        earth: Optional['EarthModel'] = None
    ) -> EnuVector:
        """The vector pointing from this point to another, in this point's ENU frame"""
        return _resolve(earth).local_displacement(self, other)

    def spherical_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> 'Spherical':
        """
        The geometric (unrefracted) azimuth, elevation and range of another point
        as seen from this one.
        """
        return _resolve(earth).relative_spherical(self, other)

    def surface_distance_to(self, other: 'Geodetic', earth: Optional['EarthModel'] = None) -> float:
        """Distance along the surface of the earth model, in meters"""
        return _resolve(earth).surface_distance(self, other)

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the longitude and latitude to tuples of degrees, minutes, seconds,
        hemisphere

        Returns:
            converted values as ((lon d, m, s, hemisphere), (lat d, m, s, hemisphere))
        """
        return (
            (*_to_dms(self.longitude), 'E' if self._lon >= 0 else 'W'),
            (*_to_dms(self.latitude), 'N' if self._lat >= 0 else 'S'),
        )

    def to_geocentric(self, earth: Optional['EarthModel'] = None) -> 'Geocentric':
        return _resolve(earth).to_geocentric(self)

    def to_latlon(self) -> 'LatLon':
        return LatLon(self._lat, self._lon)

    def translate(self, displacement: Cartesian, earth: Optional['EarthModel'] = None) -> 'Geodetic':
        """Moves this point by an ECEF displacement vector"""
        return _resolve(earth).translate(self, displacement)


class LatLon:
    """
    A bare latitude/longitude pair, in radians. This is the result of the direct
    geodesic problem, which does not determine an altitude.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, lat: float, lon: float):
        self._lon, self._lat = _wrap_pole_crossing(float(lon), float(lat), -math.pi)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LatLon):
            return False

        return self._lat == other.lat and self._lon == other.lon

    def __hash__(self) -> int:
        return hash((self._lat, self._lon))

    def __iter__(self) -> Iterator[float]:
        return iter((self._lat, self._lon))

    def __repr__(self):
        return f'<LatLon({self.latitude}, {self.longitude})>'

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def latitude(self) -> float:
        return math.degrees(self._lat)

    @property
    def lon(self) -> float:
        return self._lon

    @property
    def longitude(self) -> float:
        return math.degrees(self._lon)

    def to_geodetic(self, alt: float = 0.0) -> Geodetic:
        """Attaches an altitude"""
        return Geodetic(self._lon, self._lat, alt)


class Spherical:
    """
    An azimuth, elevation (radians) and range (meters) triplet.

    Azimuth is wrapped to [0, 2pi). Elevation beyond the zenith or nadir is
    reflected back and the azimuth turned around. When produced from an ENU
    vector, azimuth is a compass bearing (clockwise from north); when produced
    from a plain Cartesian vector it follows the mathematical convention
    (counter-clockwise from the x axis).
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, azimuth: float, elevation: float, range: float):  # pylint: disable=redefined-builtin
        self._azimuth, self._elevation = _wrap_pole_crossing(float(azimuth), float(elevation), 0.0)
        self._range = float(range)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Spherical):
            return False

        return (
            self._azimuth == other.azimuth and
            self._elevation == other.elevation and
            self._range == other.range
        )

    def __hash__(self) -> int:
        return hash((self._azimuth, self._elevation, self._range))

    def __iter__(self) -> Iterator[float]:
        return iter((self._azimuth, self._elevation, self._range))

    def __repr__(self):
        return f'<Spherical({self.azimuth_degrees}, {self.elevation_degrees}, {self._range})>'

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self._azimuth)

    @property
    def elevation(self) -> float:
        return self._elevation

    @property
    def elevation_degrees(self) -> float:
        return math.degrees(self._elevation)

    @property
    def range(self) -> float:
        return self._range

    @classmethod
    def from_cartesian(cls, vector: Cartesian) -> 'Spherical':
        """
        Creates a Spherical from a vector, measuring azimuth counter-clockwise
        from the x axis. A zero-length vector yields Spherical(0, 0, 0).
        """
        mag = vector.magnitude()
        if mag < EPSILON:
            return cls(0.0, 0.0, 0.0)

        return cls(
            math.atan2(vector.y, vector.x),
            math.asin(max(-1.0, min(1.0, vector.z / mag))),
            mag
        )

    @classmethod
    def from_degrees(cls, azimuth: float, elevation: float, range: float) -> 'Spherical':  # pylint: disable=redefined-builtin
        return cls(math.radians(azimuth), math.radians(elevation), range)

    @classmethod
    def from_enu(cls, vector: EnuVector) -> 'Spherical':
        """
        Creates a Spherical from a local-frame vector, measuring azimuth as a
        compass bearing. A zero-length vector yields Spherical(0, 0, 0).
        """
        mag = vector.magnitude()
        if mag < EPSILON:
            return cls(0.0, 0.0, 0.0)

        return cls(
            math.atan2(vector.east, vector.north),
            math.atan2(vector.up, vector.horizontal),
            mag
        )

    def to_cartesian(self) -> Cartesian:
        """Inverse of `from_cartesian`"""
        horizontal = self._range * math.cos(self._elevation)
        return Cartesian(
            horizontal * math.cos(self._azimuth),
            horizontal * math.sin(self._azimuth),
            self._range * math.sin(self._elevation),
        )

    def to_enu(self) -> EnuVector:
        """Inverse of `from_enu`"""
        horizontal = self._range * math.cos(self._elevation)
        return EnuVector(
            horizontal * math.sin(self._azimuth),
            horizontal * math.cos(self._azimuth),
            self._range * math.sin(self._elevation),
        )


class Observation:
    """
    A sensor-native detection: azimuth (radians, [0, 2pi)), slant range (meters)
    and the target's reported altitude (meters). The third component is an
    altitude, not an elevation angle.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, azimuth: float, range: float, altitude: float):  # pylint: disable=redefined-builtin
        self._azimuth = wrap_cycle(float(azimuth), 0.0, _TWO_PI)
        self._range = float(range)
        self._altitude = float(altitude)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Observation):
            return False

        return (
            self._azimuth == other.azimuth and
            self._range == other.range and
            self._altitude == other.altitude
        )

    def __hash__(self) -> int:
        return hash((self._azimuth, self._range, self._altitude))

    def __iter__(self) -> Iterator[float]:
        return iter((self._azimuth, self._range, self._altitude))

    def __repr__(self):
        return f'<Observation({self.azimuth_degrees}, {self._range}, {self._altitude})>'

    @property
    def altitude(self) -> float:
        return self._altitude

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self._azimuth)

    @property
    def range(self) -> float:
        return self._range

    @classmethod
    def from_degrees(cls, azimuth: float, range: float, altitude: float) -> 'Observation':  # pylint: disable=redefined-builtin
        return cls(math.radians(azimuth), range, altitude)
