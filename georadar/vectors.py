"""
Three-dimensional offset vectors, and their geocentric and local-frame specializations
"""

__all__ = ['Cartesian', 'EnuVector', 'Geocentric']

import math
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np
from pydantic import validate_call
from typing_extensions import Self

from georadar._const import EPSILON
from georadar.utils.functions import clamp, wrap

if TYPE_CHECKING:  # pragma: no cover
    from georadar.earth import EarthModel
    from georadar.points import Geodetic, Spherical


class Cartesian:
    """
    A pure offset vector in meters. Carries no reference frame of its own; the
    subclasses attach a meaning to the three components.

    All operations return a new vector of the same concrete type, built through
    `create()`.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, x: float, y: float, z: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    def __add__(self, other):
        if not isinstance(other, Cartesian):
            return NotImplemented
        return self.add(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cartesian):
            return False

        return type(self) is type(other) and tuple(self) == tuple(other)

    def __ge__(self, other) -> bool:
        return all(a >= b for a, b in zip(self, other))

    def __gt__(self, other) -> bool:
        return all(a > b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._x, self._y, self._z))

    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y, self._z))

    def __le__(self, other) -> bool:
        return all(a <= b for a, b in zip(self, other))

    def __lt__(self, other) -> bool:
        return all(a < b for a, b in zip(self, other))

    def __mul__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._x}, {self._y}, {self._z})>'

    def __sub__(self, other):
        if not isinstance(other, Cartesian):
            return NotImplemented
        return self.subtract(other)

    def __truediv__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide(other)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def create(self, x: float, y: float, z: float) -> Self:
        """Factory for a new vector of the same concrete type"""
        return type(self)(float(x), float(y), float(z))

    def add(self, other: 'Cartesian') -> Self:
        return self.create(self._x + other.x, self._y + other.y, self._z + other.z)

    def angle(self, other: 'Cartesian') -> float:
        """
        The angle between two vectors, in radians.

        Raises:
            ValueError if either vector is (nearly) zero-length
        """
        mags = self.magnitude() * other.magnitude()
        if mags < EPSILON:
            raise ValueError('Cannot compute angle with a zero-length vector.')

        return math.acos(clamp(self.dot(other) / mags, -1.0, 1.0))

    def clamp(self, minimum: 'Cartesian', maximum: 'Cartesian', mode: str = 'bound') -> Self:
        """
        Wraps each component into the range given by the matching components
        of `minimum` and `maximum`.

        Args:
            minimum:
                Vector of lower edges

            maximum:
                Vector of upper edges

            mode:
                The wrapping policy; one of 'bound', 'cycle', 'bounce' or 'none'

        Returns:
            A vector of the same type
        """
        return self.create(
            *(wrap(v, lo, hi, mode) for v, lo, hi in zip(self, minimum, maximum))
        )

    def cross(self, other: 'Cartesian') -> Self:
        return self.create(*np.cross(self.to_array(), other.to_array()).tolist())

    def distance_to(self, other: 'Cartesian') -> float:
        """Straight-line distance between the tips of two vectors"""
        return math.sqrt(
            (self._x - other.x) ** 2 + (self._y - other.y) ** 2 + (self._z - other.z) ** 2
        )

    def distance_xy(self, other: 'Cartesian') -> float:
        """Distance between the tips of two vectors, ignoring the z component"""
        return math.hypot(self._x - other.x, self._y - other.y)

    def divide(self, divisor: float) -> Self:
        if abs(divisor) < EPSILON:
            raise ValueError('Division by zero is not allowed.')

        return self.create(self._x / divisor, self._y / divisor, self._z / divisor)

    def dot(self, other: 'Cartesian') -> float:
        return self._x * other.x + self._y * other.y + self._z * other.z

    def invert(self) -> Self:
        """Component-wise reciprocal"""
        if self.is_any_zero():
            raise ValueError('Cannot invert a vector with a zero component.')

        return self.create(1 / self._x, 1 / self._y, 1 / self._z)

    def is_any_zero(self, epsilon: float = EPSILON) -> bool:
        return any(abs(v) <= epsilon for v in self)

    def is_valid(self) -> bool:
        """False if any component is NaN or infinite"""
        return all(math.isfinite(v) for v in self)

    def is_zero(self, epsilon: float = EPSILON) -> bool:
        return all(abs(v) <= epsilon for v in self)

    def isclose(self, other: 'Cartesian', abs_tol: float = 1e-9) -> bool:
        return all(abs(a - b) <= abs_tol for a, b in zip(self, other))

    def magnitude(self) -> float:
        return math.sqrt(self._x ** 2 + self._y ** 2 + self._z ** 2)

    def negate(self) -> Self:
        return self.create(-self._x, -self._y, -self._z)

    def normalize(self) -> Self:
        mag = self.magnitude()
        if mag < EPSILON:
            raise ValueError('Cannot normalize a zero-length vector.')

        return self.create(self._x / mag, self._y / mag, self._z / mag)

    def ratio(self, other: 'Cartesian') -> Self:
        """Component-wise division by another vector"""
        if other.is_any_zero():
            raise ValueError('Cannot divide by a vector with a zero component.')

        return self.create(self._x / other.x, self._y / other.y, self._z / other.z)

    def rsubtract(self, other: 'Cartesian') -> Self:
        """The vector pointing from this vector's tip to the other's (other - self)"""
        return self.create(other.x - self._x, other.y - self._y, other.z - self._z)

    def scale(self, factor: float) -> Self:
        return self.create(self._x * factor, self._y * factor, self._z * factor)

    def subtract(self, other: 'Cartesian') -> Self:
        return self.create(self._x - other.x, self._y - other.y, self._z - other.z)

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y, self._z], dtype=float)

    def to_cartesian(self) -> 'Cartesian':
        """Drops the specialization, returning a plain offset vector"""
        return Cartesian(self._x, self._y, self._z)

    def to_spherical(self) -> 'Spherical':
        """
        Converts to a (mathematical-convention) spherical vector, where azimuth
        is measured counter-clockwise from the x axis. A zero vector yields a
        zero spherical vector.
        """
        from georadar.points import Spherical  # pylint: disable=import-outside-toplevel

        return Spherical.from_cartesian(self)

    def transform(self, other: 'Cartesian', scalar: float) -> Self:
        """Returns self + other * scalar"""
        return self.create(
            self._x + other.x * scalar,
            self._y + other.y * scalar,
            self._z + other.z * scalar,
        )


class Geocentric(Cartesian):
    """
    A position in the Earth-Centered, Earth-Fixed frame, in meters. The origin is
    the center of the Earth, the x axis pierces the equator at the prime meridian
    and the z axis points to the north pole.
    """

    def to_geodetic(self, earth: Optional['EarthModel'] = None) -> 'Geodetic':
        """
        Converts to geodetic coordinates.

        Args:
            earth:
                (Optional) The earth model; defaults to WGS84

        Returns:
            Geodetic
        """
        from georadar.earth import resolve_earth_model  # pylint: disable=import-outside-toplevel

        return resolve_earth_model(earth).to_geodetic(self)


class EnuVector(Cartesian):
    """A displacement in a local East-North-Up tangent-plane frame, in meters"""

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, east: float, north: float, up: float):
        super().__init__(east, north, up)

    def __repr__(self):
        return f'<EnuVector(east={self._x}, north={self._y}, up={self._z})>'

    @property
    def east(self) -> float:
        return self._x

    @property
    def north(self) -> float:
        return self._y

    @property
    def up(self) -> float:
        return self._z

    @property
    def horizontal(self) -> float:
        """Length of the horizontal (east/north) component"""
        return math.hypot(self._x, self._y)

    def to_tuple(self) -> Tuple[float, float, float]:
        return self._x, self._y, self._z
