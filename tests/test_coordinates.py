import math

import pytest

from geodatum import Coordinate, InvalidCoordinateError, Latitude, Longitude, normalize_lat_lon


def test_coordinate_init():
    c = Coordinate(1.5)
    assert c.degrees == 1.5

    assert Coordinate('1.5') == c
    assert Coordinate(c) == c

    # No range is enforced on bare angles
    assert Coordinate(720.).degrees == 720.


def test_coordinate_invalid():
    for value in (float('nan'), float('inf'), -float('inf'), 'abc', None):
        with pytest.raises(InvalidCoordinateError):
            Coordinate(value)

    # InvalidCoordinateError is a ValueError
    with pytest.raises(ValueError):
        Latitude(float('nan'))


def test_coordinate_radians():
    assert Coordinate(180.).radians == pytest.approx(math.pi, abs=1e-15)
    assert Coordinate(-90.).radians == pytest.approx(-math.pi / 2, abs=1e-15)
    assert Coordinate(0.).radians == 0.


def test_coordinate_conversion_helpers():
    assert Coordinate.pi() == math.pi
    assert Coordinate.to_radians(180.) == pytest.approx(math.pi, abs=1e-15)
    assert Coordinate.to_degrees(math.pi) == pytest.approx(180., abs=1e-12)
    assert Coordinate.to_degrees(Coordinate.to_radians(51.4778)) == pytest.approx(51.4778, abs=1e-12)


def test_longitude_wraparound():
    assert Longitude(0.).degrees == 0.
    assert Longitude(180.).degrees == 180.
    assert Longitude(-180.).degrees == 180.
    assert Longitude(-179.999).degrees == -179.999
    assert Longitude(181.).degrees == -179.
    assert Longitude(-181.).degrees == 179.
    assert Longitude(361.).degrees == 1.
    assert Longitude(-361.).degrees == -1.
    assert Longitude(540.).degrees == 180.


def test_latitude_fold():
    assert Latitude(90.).degrees == 90.
    assert Latitude(-90.).degrees == -90.
    assert Latitude(45.).degrees == 45.
    assert Latitude(91.).degrees == 89.
    assert Latitude(-91.).degrees == -89.
    assert Latitude(180.).degrees == 0.
    assert Latitude(271.).degrees == -89.
    assert Latitude(-271.).degrees == 89.


def test_latitude_fold_warns(caplog, monkeypatch):
    monkeypatch.setattr('geodatum.utils.logging._WARNINGS', set())
    Latitude(95.)
    assert 'folded back across the pole' in caplog.text


def test_normalize_lat_lon():
    assert normalize_lat_lon(0., 0.) == (Latitude(0.), Longitude(0.))
    assert normalize_lat_lon(91., 1.) == (Latitude(89.), Longitude(-179.))
    assert normalize_lat_lon(-91., 1.) == (Latitude(-89.), Longitude(-179.))
    assert normalize_lat_lon(271., 1.) == (Latitude(-89.), Longitude(1.))
    assert normalize_lat_lon(-271., 1.) == (Latitude(89.), Longitude(1.))
    assert normalize_lat_lon(0., 181.) == (Latitude(0.), Longitude(-179.))

    lat, lon = Latitude(10.), Longitude(20.)
    assert normalize_lat_lon(lat, lon) == (lat, lon)


def test_angle_eq_hash():
    assert Latitude(1.) == Latitude(1.)
    assert Latitude(1.) != Latitude(2.)
    assert Latitude(1.) != Longitude(1.)
    assert Latitude(1.) != Coordinate(1.)
    assert Latitude(1.) != 1.

    assert len({Latitude(1.), Latitude(1.), Longitude(1.)}) == 2


def test_angle_repr():
    assert repr(Latitude(1.)) == '<Latitude(1.0)>'
    assert repr(Longitude(-2.5)) == '<Longitude(-2.5)>'
    assert float(Coordinate(3.)) == 3.


def test_angle_immutable():
    lat = Latitude(1.)
    with pytest.raises(AttributeError):
        lat.degrees = 2.


def test_to_dms():
    assert Latitude(51.509865).to_dms() == (51, 30, 35.514, 'N')
    assert Longitude(-0.118092).to_dms() == (0, 7, 5.1312, 'W')
    assert Latitude(-33.5).to_dms() == (33, 30, 0., 'S')


def test_from_dms():
    assert Latitude.from_dms((0, 0, 0., 'N')) == Latitude(0.)
    assert Longitude.from_dms((0, 7, 5.1312, 'W')).degrees == pytest.approx(-0.118092, abs=1e-9)
    assert Latitude.from_dms((51, 30, 35.514, 'n')).degrees == pytest.approx(51.509865, abs=1e-9)

    with pytest.raises(InvalidCoordinateError):
        Latitude.from_dms((1, 0, 0., 'E'))
