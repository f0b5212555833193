import math

import pytest
from pydantic import ValidationError
from pytest import approx

from georadar import Geodetic, LatLon, Observation, Spherical, EnuVector, Cartesian


def test_geodetic_init():
    g = Geodetic(0.1, 0.2, 300)
    assert (g.lon, g.lat, g.alt) == (0.1, 0.2, 300.)
    assert g.longitude == approx(math.degrees(0.1))
    assert g.latitude == approx(math.degrees(0.2))

    g = Geodetic.from_degrees(10., 45.)
    assert g.lon == approx(math.radians(10.))
    assert g.lat == approx(math.radians(45.))
    assert g.alt == 0.

    # Negative altitudes are valid
    assert Geodetic(0., 0., -50.).alt == -50.

    with pytest.raises(ValidationError):
        Geodetic(None, 0., 0.)

    with pytest.raises(ValueError):
        Geodetic(0., 0., None)


def test_geodetic_wrapping():
    def check(lon, lat, expected_lon, expected_lat):
        g = Geodetic.from_degrees(lon, lat)
        assert g.longitude == approx(expected_lon, abs=1e-9)
        assert g.latitude == approx(expected_lat, abs=1e-9)

    # Longitude adjustment
    check(181., 0., -179., 0.)
    check(361., 0., 1., 0.)
    check(-181., 0., 179., 0.)
    check(-361., 0., -1., 0.)
    check(180., 0., -180., 0.)

    # Latitude adjustment
    check(1., 91., -179., 89.)
    check(1., 271., 1., -89.)
    check(1., -91., -179., -89.)
    check(1., -271., 1., 89.)

    # Invalid values pass through
    g = Geodetic(math.nan, math.nan, math.nan)
    assert math.isnan(g.lon) and math.isnan(g.lat) and math.isnan(g.alt)


def test_geodetic_eq_hash():
    assert Geodetic(0., 0., 0.) == Geodetic(0., 0., 0.)
    assert Geodetic(0., 0., 0.) != Geodetic(0., 0., 1.)
    assert Geodetic(0., 0., 0.) != (0., 0., 0.)
    assert len({Geodetic(0., 0.), Geodetic(0., 0.), Geodetic(1., 0.)}) == 2
    assert tuple(Geodetic(0.1, 0.2, 3.)) == (0.1, 0.2, 3.)


def test_geodetic_repr():
    assert repr(Geodetic(0., 0., 100.)) == '<Geodetic(0.0, 0.0, 100.0)>'


def test_geodetic_to_dms():
    g = Geodetic.from_degrees(-0.51, 45.2575)
    assert g.to_dms() == ((0, 30, 36.0, 'W'), (45, 15, 27.0, 'N'))


def test_geodetic_altitude_difference():
    assert Geodetic(0., 0., 100.).altitude_difference(Geodetic(0., 0., 350.)) == 250.


def test_geodetic_to_latlon():
    ll = Geodetic(0.1, 0.2, 300.).to_latlon()
    assert (ll.lat, ll.lon) == (0.2, 0.1)


def test_latlon():
    ll = LatLon(0.2, 0.1)
    assert tuple(ll) == (0.2, 0.1)
    assert ll.latitude == approx(math.degrees(0.2))
    assert ll.longitude == approx(math.degrees(0.1))
    assert ll == LatLon(0.2, 0.1)
    assert ll != Geodetic(0.1, 0.2)
    assert ll.to_geodetic(50.) == Geodetic(0.1, 0.2, 50.)
    assert ll.to_geodetic() == Geodetic(0.1, 0.2, 0.)
    assert LatLon(0., math.pi).lon == approx(-math.pi)

    with pytest.raises(ValidationError):
        LatLon(None, 0.)


def test_spherical_wrapping():
    s = Spherical.from_degrees(370., 10., 5.)
    assert s.azimuth_degrees == approx(10.)
    assert s.elevation_degrees == approx(10.)
    assert s.range == 5.

    s = Spherical.from_degrees(-90., 0., 5.)
    assert s.azimuth_degrees == approx(270.)

    # Past the zenith, the elevation reflects and the azimuth turns around
    s = Spherical.from_degrees(10., 100., 5.)
    assert s.elevation_degrees == approx(80.)
    assert s.azimuth_degrees == approx(190.)

    with pytest.raises(ValidationError):
        Spherical(0., None, 1.)


def test_spherical_eq_repr():
    assert Spherical(1., 0.5, 10.) == Spherical(1., 0.5, 10.)
    assert Spherical(1., 0.5, 10.) != Observation(1., 0.5, 10.)
    assert repr(Spherical(0., 0., 10.)) == '<Spherical(0.0, 0.0, 10.0)>'
    assert len({Spherical(1., 0.5, 10.), Spherical(1., 0.5, 10.)}) == 1


def test_spherical_from_enu():
    s = Spherical.from_enu(EnuVector(1., 0., 0.))
    assert s.azimuth == approx(math.pi / 2)
    assert s.elevation == approx(0.)
    assert s.range == approx(1.)

    s = Spherical.from_enu(EnuVector(0., 1., 1.))
    assert s.azimuth == approx(0.)
    assert s.elevation == approx(math.pi / 4)
    assert s.range == approx(math.sqrt(2))

    s = Spherical.from_enu(EnuVector(-1., -1., 0.))
    assert s.azimuth_degrees == approx(225.)

    assert tuple(Spherical.from_enu(EnuVector(0., 0., 0.))) == (0., 0., 0.)


def test_spherical_to_enu():
    enu = Spherical.from_degrees(90., 0., 10.).to_enu()
    assert enu.isclose(EnuVector(10., 0., 0.))

    enu = Spherical.from_degrees(0., 30., 10.).to_enu()
    assert enu.isclose(EnuVector(0., 10 * math.cos(math.radians(30)), 5.))

    original = EnuVector(-1200., 3400., 250.)
    assert Spherical.from_enu(original).to_enu().isclose(original, abs_tol=1e-6)


def test_spherical_cartesian():
    # Mathematical convention: azimuth measured from the x axis
    s = Spherical.from_cartesian(Cartesian(0., 1., 0.))
    assert s.azimuth == approx(math.pi / 2)

    c = Spherical.from_degrees(0., 0., 2.).to_cartesian()
    assert c.isclose(Cartesian(2., 0., 0.))

    original = Cartesian(-3., 4., -12.)
    assert Spherical.from_cartesian(original).to_cartesian().isclose(original)


def test_observation():
    o = Observation.from_degrees(400., 1000., 300.)
    assert o.azimuth_degrees == approx(40.)
    assert o.range == 1000.
    assert o.altitude == 300.
    assert tuple(o) == (o.azimuth, 1000., 300.)
    assert o == Observation.from_degrees(400., 1000., 300.)
    assert len({o, Observation.from_degrees(400., 1000., 300.)}) == 1
    assert repr(Observation(0., 1000., 300.)) == '<Observation(0.0, 1000.0, 300.0)>'

    with pytest.raises(ValidationError):
        Observation(0., 1000., None)
