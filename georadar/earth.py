"""
Earth models: an ellipsoidal (WGS84) model solved with Vincenty's formulae, and a
spherical model solved with spherical trigonometry.

There is no global "active" model. Functions which depend on the shape of the
earth take the model as an argument, and `None` resolves to the module-level
`WGS84` instance.
"""

__all__ = [
    'EarthModel', 'EllipsoidalEarth', 'SphericalEarth',
    'MEAN_SPHERE', 'WGS84', 'resolve_earth_model',
]

from abc import ABC, abstractmethod
import math
from typing import Optional, Tuple

from pydantic import validate_call

from georadar._const import (
    EARTH_MEAN_RADIUS, ECEF_ITERATIONS, STANDARD_REFRACTION_K,
    VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE,
    WGS84_A, WGS84_B, WGS84_E2,
)
from georadar.frames import ecef_to_enu, geodetic_as_spherical
from georadar.geodesic import (
    haversine_bearing, haversine_destination, haversine_distance,
    vincenty_direct, vincenty_inverse,
)
from georadar.points import Geodetic, LatLon, Spherical
from georadar.utils.mixins import LoggingMixin
from georadar.vectors import Cartesian, EnuVector, Geocentric

# ECEF positions closer than this to the earth's center have no defined latitude
_DEGENERATE_MAGNITUDE = 1e-9


def _degenerate_geodetic() -> Geodetic:
    return Geodetic(0.0, math.nan, math.nan)


class EarthModel(LoggingMixin, ABC):
    """
    Base class for earth models.

    Concrete models define the conversions between geodetic and geocentric
    coordinates, the surface radius and the geodesic solvers. Everything else
    (chord distances, local frames, effective radii) is derived here.
    """

    @abstractmethod
    def destination_point(self, start: Geodetic, bearing: float, distance: float) -> LatLon:
        """
        Solves the direct geodesic problem.

        Args:
            start:
                The starting point

            bearing:
                The initial bearing, in radians clockwise from north

            distance:
                The distance along the surface, in meters

        Returns:
            LatLon
        """

    @abstractmethod
    def earth_radius(self, lat: float) -> float:
        """The distance from the earth's center to the surface at a latitude (radians)"""

    @abstractmethod
    def initial_bearing(self, p1: Geodetic, p2: Geodetic) -> float:
        """The initial bearing from p1 towards p2, in radians [0, 2pi)"""

    @abstractmethod
    def surface_distance(self, p1: Geodetic, p2: Geodetic) -> float:
        """The distance between two points along the surface, in meters"""

    @abstractmethod
    def to_geocentric(self, geodetic: Geodetic) -> Geocentric:
        """Converts geodetic coordinates to ECEF"""

    @abstractmethod
    def to_geodetic(self, geocentric: Geocentric) -> Geodetic:
        """
        Converts ECEF coordinates to geodetic. A position at the earth's center
        yields a NaN latitude and altitude.
        """

    def chord_distance(self, p1: Geodetic, p2: Geodetic) -> float:
        """The straight-line distance between two points, in meters"""
        return self.to_geocentric(p1).distance_to(self.to_geocentric(p2))

    def displacement(self, p1: Geodetic, p2: Geodetic) -> Cartesian:
        """The ECEF vector from p1 to p2"""
        return self.to_geocentric(p2).subtract(self.to_geocentric(p1)).to_cartesian()

    def effective_earth_radius(self, lat: float, k_factor: float = STANDARD_REFRACTION_K) -> float:
        """
        The radius of the fictitious earth over which refracted rays travel in
        straight lines.

        Args:
            lat:
                The latitude, in radians

            k_factor:
                (Default 4/3) The refraction k-factor

        Returns:
            float, in meters
        """
        return self.earth_radius(lat) * k_factor

    def elevation_angle(self, p1: Geodetic, p2: Geodetic) -> float:
        """
        The angle of the altitude difference over the surface distance, in
        radians. Points stacked vertically give +/- pi/2.
        """
        rise = p2.alt - p1.alt
        run = self.surface_distance(p1, p2)
        if run < _DEGENERATE_MAGNITUDE:
            if rise == 0:
                return 0.0
            return math.copysign(math.pi / 2, rise)

        return math.atan2(rise, run)

    def local_displacement(self, p1: Geodetic, p2: Geodetic) -> EnuVector:
        """The vector from p1 to p2, in p1's East-North-Up frame"""
        return ecef_to_enu(p1, self.displacement(p1, p2))

    def relative_spherical(self, p1: Geodetic, p2: Geodetic) -> Spherical:
        """
        The geometric (unrefracted) compass azimuth, elevation and range of p2
        as seen from p1.
        """
        return Spherical.from_enu(self.local_displacement(p1, p2))

    def translate(self, geodetic: Geodetic, displacement: Cartesian) -> Geodetic:
        """Moves a point by an ECEF displacement vector"""
        return self.to_geodetic(self.to_geocentric(geodetic).add(displacement))


class SphericalEarth(EarthModel):
    """
    A spherical earth of constant radius. Altitude is an offset along the radial
    direction.

    Args:
        radius:
            (Default 6371008.8) The radius of the sphere, in meters
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, radius: float = EARTH_MEAN_RADIUS):
        super().__init__()
        if not radius > 0:
            raise ValueError(f'Earth radius must be positive, got {radius}')

        self.radius = float(radius)

    def __repr__(self):
        return f'<SphericalEarth(radius={self.radius})>'

    def destination_point(self, start: Geodetic, bearing: float, distance: float) -> LatLon:
        return LatLon(*haversine_destination(start.lat, start.lon, bearing, distance, self.radius))

    def earth_radius(self, lat: float) -> float:
        return self.radius

    def initial_bearing(self, p1: Geodetic, p2: Geodetic) -> float:
        return haversine_bearing(p1.lat, p1.lon, p2.lat, p2.lon)

    def surface_distance(self, p1: Geodetic, p2: Geodetic) -> float:
        return haversine_distance(p1.lat, p1.lon, p2.lat, p2.lon, self.radius)

    def to_geocentric(self, geodetic: Geodetic) -> Geocentric:
        return Geocentric(*geodetic_as_spherical(geodetic, self.radius).to_cartesian())

    def to_geodetic(self, geocentric: Geocentric) -> Geodetic:
        magnitude = geocentric.magnitude()
        if magnitude < _DEGENERATE_MAGNITUDE:
            return _degenerate_geodetic()

        return Geodetic(
            math.atan2(geocentric.y, geocentric.x),
            math.asin(max(-1.0, min(1.0, geocentric.z / magnitude))),
            magnitude - self.radius,
        )


class EllipsoidalEarth(EarthModel):
    """
    The WGS84 reference ellipsoid.

    Geodesics are solved with Vincenty's formulae. When an iteration fails to
    converge (nearly antipodal points) the calculation is handed to a fallback
    spherical model and a warning is logged once.

    Args:
        inverse_fallback:
            (Optional) Model used when the inverse problem does not converge;
            defaults to a sphere with the semi-major axis as radius

        direct_fallback:
            (Optional) Model used when the direct problem does not converge;
            defaults to a sphere with the mean earth radius

        max_iterations:
            (Default 100) Iteration cap for both Vincenty solvers

        tolerance:
            (Default 1e-12) Convergence threshold for both Vincenty solvers
    """

    def __init__(
        self,
        inverse_fallback: Optional[EarthModel] = None,
        direct_fallback: Optional[EarthModel] = None,
        max_iterations: int = VINCENTY_MAX_ITERATIONS,
        tolerance: float = VINCENTY_TOLERANCE,
    ):
        super().__init__()
        self.inverse_fallback = inverse_fallback or SphericalEarth(WGS84_A)
        self.direct_fallback = direct_fallback or SphericalEarth(EARTH_MEAN_RADIUS)
        self.max_iterations = max_iterations
        self.tolerance = tolerance

    def __repr__(self):
        return '<EllipsoidalEarth(WGS84)>'

    def _inverse(self, p1: Geodetic, p2: Geodetic):
        result = vincenty_inverse(
            p1.lat, p1.lon, p2.lat, p2.lon,
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
        )
        if result is None:
            self.warn_once(
                'Vincenty inverse formula failed to converge; falling back to %s. '
                '(this warning will not repeat)', self.inverse_fallback
            )
        return result

    def destination_point(self, start: Geodetic, bearing: float, distance: float) -> LatLon:
        result = vincenty_direct(
            start.lat, start.lon, bearing, distance,
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
        )
        if result is None:
            self.warn_once(
                'Vincenty direct formula failed to converge; falling back to %s. '
                '(this warning will not repeat)', self.direct_fallback
            )
            return self.direct_fallback.destination_point(start, bearing, distance)

        return LatLon(*result)

    def earth_radius(self, lat: float) -> float:
        """The geocentric radius of the ellipsoid at a geodetic latitude"""
        cos_lat, sin_lat = math.cos(lat), math.sin(lat)

        num = (WGS84_A ** 2 * cos_lat) ** 2 + (WGS84_B ** 2 * sin_lat) ** 2
        den = (WGS84_A * cos_lat) ** 2 + (WGS84_B * sin_lat) ** 2
        if den < 1e-10:
            return WGS84_B

        return math.sqrt(num / den)

    def initial_bearing(self, p1: Geodetic, p2: Geodetic) -> float:
        result = self._inverse(p1, p2)
        if result is None:
            return self.inverse_fallback.initial_bearing(p1, p2)

        return result[1]

    def surface_distance(self, p1: Geodetic, p2: Geodetic) -> float:
        result = self._inverse(p1, p2)
        if result is None:
            return self.inverse_fallback.surface_distance(p1, p2)

        return result[0]

    def to_geocentric(self, geodetic: Geodetic) -> Geocentric:
        sin_lat, cos_lat = math.sin(geodetic.lat), math.cos(geodetic.lat)
        # Prime vertical radius of curvature
        n = WGS84_A / math.sqrt(1.0 - WGS84_E2 * sin_lat ** 2)

        return Geocentric(
            (n + geodetic.alt) * cos_lat * math.cos(geodetic.lon),
            (n + geodetic.alt) * cos_lat * math.sin(geodetic.lon),
            ((1.0 - WGS84_E2) * n + geodetic.alt) * sin_lat,
        )

    def to_geodetic(self, geocentric: Geocentric) -> Geodetic:
        if geocentric.magnitude() < _DEGENERATE_MAGNITUDE:
            return _degenerate_geodetic()

        x, y, z = geocentric
        p = math.hypot(x, y)

        def altitude(lat: float) -> Tuple[float, float]:
            sin_lat, cos_lat = math.sin(lat), math.cos(lat)
            n = WGS84_A / math.sqrt(1.0 - WGS84_E2 * sin_lat ** 2)
            # Stays well-conditioned at the poles, unlike p / cos(lat) - n
            return p * cos_lat + (z + WGS84_E2 * n * sin_lat) * sin_lat - n, n

        lat = math.atan2(z, p * (1.0 - WGS84_E2))
        for _ in range(ECEF_ITERATIONS):
            alt, n = altitude(lat)
            lat = math.atan2(z, p * (1.0 - WGS84_E2 * n / (n + alt)))

        alt, _ = altitude(lat)
        return Geodetic(math.atan2(y, x), lat, alt)


WGS84 = EllipsoidalEarth()
MEAN_SPHERE = SphericalEarth()


def resolve_earth_model(earth: Optional[EarthModel] = None) -> EarthModel:
    """Returns the given earth model, or WGS84 if none is given"""
    if earth is None:
        return WGS84

    if not isinstance(earth, EarthModel):
        raise ValueError(f'Expected an EarthModel, got {type(earth).__name__}')

    return earth
