from pytest import approx

from georadar import Geodetic


def assert_geodetics_equal(g1: Geodetic, g2: Geodetic, abs_tol=1e-7, alt_tol=1e-3):
    """
    Asserts that two geodetic positions are equal within a tolerance.

    Args:
        g1: The first Geodetic
        g2: The second Geodetic
        abs_tol: The absolute tolerance on longitude/latitude, in degrees.
                 Default is 1e-7 (approx 1.1cm at the equator).
        alt_tol: The absolute tolerance on altitude, in meters.
    """
    try:
        assert g1.longitude == approx(g2.longitude, abs=abs_tol)
        assert g1.latitude == approx(g2.latitude, abs=abs_tol)
        assert g1.alt == approx(g2.alt, abs=alt_tol)
    except AssertionError as e:
        print(g1)
        print(g2)
        raise e
