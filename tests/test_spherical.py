import pytest
from pytest import approx

from geodatum import Latitude, Longitude, SphericalPoint
from geodatum.spherical import (
    haversine_bearing, haversine_destination, haversine_distance,
    haversine_final_bearing, haversine_midpoint
)


def test_haversine_distance():
    # Sourced from haversine package
    expected = 157.253373
    actual = haversine_distance(0.0, 0.0, 0.001, 0.001)
    assert expected == approx(actual, abs=1e-6)

    expected = 157_249.381271
    actual = haversine_distance(0.0, 0.0, 1.0, 1.0)
    assert expected == approx(actual, abs=1e-6)

    # Antimeridian test
    expected = 222389.853289
    actual = haversine_distance(0., 179., 0., -179.)
    assert expected == approx(actual, abs=1e-6)

    # Radius scales the result
    assert haversine_distance(0., 0., 1., 1., radius=1.) == approx(157_249.381271 / 6_371_000)


def test_haversine_bearing():
    assert haversine_bearing(0.0, 0.0, 0.001, 0.001) == approx(45., abs=1e-6)
    assert haversine_bearing(0., 0., 0., 1.) == approx(90.)
    assert haversine_bearing(0., 0., 0., -1.) == approx(270.)
    assert haversine_bearing(0., 0., -1., 0.) == approx(180.)


def test_haversine_final_bearing():
    # Along the equator the bearing doesn't change
    assert haversine_final_bearing(0., 0., 0., 1.) == approx(90.)

    # Heading north-east from the equator, the great circle turns towards the east
    assert haversine_final_bearing(0., 0., 40., 40.) > haversine_bearing(0., 0., 40., 40.)


def test_haversine_midpoint():
    assert haversine_midpoint(0., 0., 0., 2.) == approx((0., 1.))
    assert haversine_midpoint(-10., 5., 10., 5.) == approx((0., 5.))


def test_haversine_destination():
    lat, lon = haversine_destination(0.0, 0.0, 45., 111_000)
    assert lat == approx(0.7058494, abs=1e-7)
    assert lon == approx(0.7059029, abs=1e-7)


def test_spherical_point_init():
    p = SphericalPoint(51.4778, -0.0016)
    assert p.latitude == Latitude(51.4778)
    assert p.longitude == Longitude(-0.0016)
    assert p.to_float() == (51.4778, -0.0016)

    # Pairs crossing a pole move to the opposite meridian
    assert SphericalPoint(91., 1.).to_float() == (89., -179.)

    with pytest.raises(ValueError):
        SphericalPoint(float('inf'), 0.)


def test_spherical_point_eq_hash_repr():
    assert SphericalPoint(1., 2.) == SphericalPoint(1., 2.)
    assert SphericalPoint(1., 2.) != SphericalPoint(2., 1.)
    assert SphericalPoint(1., 2.) != (1., 2.)
    assert len({SphericalPoint(1., 2.), SphericalPoint(1., 2.)}) == 1
    assert repr(SphericalPoint(1., 2.)) == '<SphericalPoint(1.0, 2.0)>'


def test_spherical_point_methods():
    p1, p2 = SphericalPoint(0., 0.), SphericalPoint(1., 1.)
    assert p1.distance_to(p2) == haversine_distance(0., 0., 1., 1.)
    assert p1.distance_to(p2, radius=6_378_137.) > p1.distance_to(p2)
    assert p1.bearing_to(p2) == haversine_bearing(0., 0., 1., 1.)
    assert p1.final_bearing_to(p2) == haversine_final_bearing(0., 0., 1., 1.)

    assert p1.distance_to(p1) == 0.

    midpoint = SphericalPoint(0., 0.).midpoint_to(SphericalPoint(0., 2.))
    assert midpoint.to_float() == approx((0., 1.))

    dest = p1.destination_point(111_000, 45.)
    assert dest.to_float() == approx((0.7058494, 0.7059029), abs=1e-7)


def test_spherical_point_destination_round_trip():
    start = SphericalPoint(51.4778, -0.0016)
    bearing = 123.4
    dest = start.destination_point(50_000., bearing)
    assert start.distance_to(dest) == approx(50_000., abs=1e-6)
    assert start.bearing_to(dest) == approx(bearing, abs=1e-9)
