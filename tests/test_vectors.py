import math

import numpy as np
import pytest
from pydantic import ValidationError
from pytest import approx

from georadar import Cartesian, EnuVector, Geocentric, Geodetic, MEAN_SPHERE


def test_cartesian_init():
    v = Cartesian(1, 2., '3')
    assert (v.x, v.y, v.z) == (1., 2., 3.)
    assert isinstance(v.x, float)

    # Zero components are valid
    assert Cartesian(0., 0., 0.).is_zero()

    with pytest.raises(ValidationError):
        Cartesian(1., None, 3.)

    with pytest.raises(ValueError):
        Cartesian(1., 'a', 3.)


def test_cartesian_eq_hash():
    assert Cartesian(1., 2., 3.) == Cartesian(1., 2., 3.)
    assert Cartesian(1., 2., 3.) != Cartesian(1., 2., 4.)
    assert Cartesian(1., 2., 3.) != (1., 2., 3.)

    # Specializations are not interchangeable
    assert Geocentric(1., 2., 3.) != Cartesian(1., 2., 3.)

    vectors = [Cartesian(1., 2., 3.), Cartesian(1., 2., 3.), Geocentric(1., 2., 3.)]
    assert len(set(vectors)) == 2


def test_cartesian_repr():
    assert repr(Cartesian(1., 2., 3.)) == '<Cartesian(1.0, 2.0, 3.0)>'
    assert repr(Geocentric(1., 2., 3.)) == '<Geocentric(1.0, 2.0, 3.0)>'
    assert repr(EnuVector(1., 2., 3.)) == '<EnuVector(east=1.0, north=2.0, up=3.0)>'


def test_create_preserves_type():
    g = Geocentric(1., 2., 3.)
    assert isinstance(g.scale(2.), Geocentric)
    assert isinstance(g + Cartesian(1., 1., 1.), Geocentric)
    assert isinstance(-g, Geocentric)
    assert isinstance(EnuVector(1., 0., 0.).normalize(), EnuVector)
    assert type(g.to_cartesian()) is Cartesian


def test_arithmetic():
    a, b = Cartesian(1., 2., 3.), Cartesian(4., 5., 6.)

    assert a.add(b) == a + b == Cartesian(5., 7., 9.)
    assert b.subtract(a) == b - a == Cartesian(3., 3., 3.)
    assert a.rsubtract(b) == Cartesian(3., 3., 3.)
    assert a.negate() == -a == Cartesian(-1., -2., -3.)
    assert a.scale(2.) == a * 2 == 2 * a == Cartesian(2., 4., 6.)
    assert b.divide(2.) == b / 2 == Cartesian(2., 2.5, 3.)
    assert a.transform(b, 2.) == Cartesian(9., 12., 15.)
    assert b.ratio(a) == Cartesian(4., 2.5, 2.)
    assert Cartesian(2., 4., 0.5).invert() == Cartesian(0.5, 0.25, 2.)

    with pytest.raises(TypeError):
        a + 1

    with pytest.raises(TypeError):
        a * b


def test_degenerate_operations():
    zero = Cartesian(0., 0., 0.)
    partly_zero = Cartesian(1., 0., 1.)

    with pytest.raises(ValueError):
        zero.normalize()

    with pytest.raises(ValueError):
        partly_zero.invert()

    with pytest.raises(ValueError):
        Cartesian(1., 1., 1.).ratio(partly_zero)

    with pytest.raises(ValueError):
        Cartesian(1., 1., 1.).divide(1e-11)

    with pytest.raises(ValueError):
        zero.angle(Cartesian(1., 0., 0.))

    # Just above the threshold is fine
    assert Cartesian(1e-9, 0., 0.).normalize().isclose(Cartesian(1., 0., 0.))


def test_dot_cross_magnitude():
    x, y, z = Cartesian(1., 0., 0.), Cartesian(0., 1., 0.), Cartesian(0., 0., 1.)

    assert x.dot(y) == 0.
    assert Cartesian(1., 2., 3.).dot(Cartesian(4., 5., 6.)) == 32.
    assert x.cross(y) == z
    assert y.cross(x) == -z
    assert isinstance(Geocentric(1., 0., 0.).cross(y), Geocentric)
    assert Cartesian(3., 4., 12.).magnitude() == 13.

    n = Cartesian(3., 4., 12.).normalize()
    assert n.magnitude() == approx(1.)
    assert n.isclose(Cartesian(3 / 13, 4 / 13, 12 / 13))


def test_angle():
    x, y = Cartesian(1., 0., 0.), Cartesian(0., 2., 0.)
    assert x.angle(y) == approx(math.pi / 2)
    assert x.angle(x.scale(5.)) == approx(0.)
    assert x.angle(-x) == approx(math.pi)
    assert x.angle(Cartesian(1., 1., 0.)) == approx(math.pi / 4)


def test_distances():
    a, b = Cartesian(1., 2., 3.), Cartesian(4., 6., 15.)
    assert a.distance_to(b) == 13.
    assert a.distance_xy(b) == 5.


def test_comparisons():
    a, b = Cartesian(1., 2., 3.), Cartesian(2., 3., 4.)
    assert a < b
    assert b > a
    assert a <= a
    assert a >= a
    assert not Cartesian(1., 5., 3.) < b


def test_clamp():
    lo, hi = Cartesian(0., 0., 0.), Cartesian(10., 10., 10.)
    v = Cartesian(-5., 5., 15.)

    assert v.clamp(lo, hi) == Cartesian(0., 5., 10.)
    assert v.clamp(lo, hi, 'cycle').isclose(Cartesian(5., 5., 5.))
    assert v.clamp(lo, hi, 'bounce').isclose(Cartesian(5., 5., 5.))
    assert Cartesian(-2., 5., 12.).clamp(lo, hi, 'bounce').isclose(Cartesian(2., 5., 8.))
    assert v.clamp(lo, hi, 'none') == v

    with pytest.raises(ValueError):
        v.clamp(hi, lo)


def test_validity():
    assert Cartesian(1., 2., 3.).is_valid()
    assert not Cartesian(math.nan, 2., 3.).is_valid()
    assert not Cartesian(1., math.inf, 3.).is_valid()

    assert Cartesian(0., 1., 1.).is_any_zero()
    assert not Cartesian(0., 1., 1.).is_zero()
    assert Cartesian(1e-11, -1e-11, 0.).is_zero()


def test_to_array():
    arr = Cartesian(1., 2., 3.).to_array()
    assert isinstance(arr, np.ndarray)
    np.testing.assert_array_equal(arr, np.array([1., 2., 3.]))
    assert list(Cartesian(1., 2., 3.)) == [1., 2., 3.]


def test_to_spherical():
    s = Cartesian(0., 10., 0.).to_spherical()
    assert s.azimuth == approx(math.pi / 2)
    assert s.elevation == approx(0.)
    assert s.range == approx(10.)

    s = Cartesian(0., 0., 0.).to_spherical()
    assert tuple(s) == (0., 0., 0.)


def test_enu_vector():
    v = EnuVector(3., 4., 5.)
    assert (v.east, v.north, v.up) == (3., 4., 5.)
    assert v.horizontal == 5.
    assert v.to_tuple() == (3., 4., 5.)

    with pytest.raises(ValidationError):
        EnuVector(None, 4., 5.)


def test_geocentric_to_geodetic():
    g = Geocentric(6378137.0, 0., 0.)
    geodetic = g.to_geodetic()
    assert geodetic.longitude == approx(0.)
    assert geodetic.latitude == approx(0.)
    assert geodetic.alt == approx(0., abs=1e-6)

    geodetic = Geocentric(0., 6_371_108.8, 0.).to_geodetic(earth=MEAN_SPHERE)
    assert geodetic.longitude == approx(90.)
    assert geodetic.alt == approx(100.)

    assert isinstance(geodetic, Geodetic)
