import math

import numpy as np
import pytest

from geodatum import InvalidCoordinateError, Vector3d


def test_vector_init():
    v = Vector3d(1, 2., '3')
    assert v.to_float() == (1., 2., 3.)
    assert (v.x, v.y, v.z) == (1., 2., 3.)
    assert list(v) == [1., 2., 3.]

    with pytest.raises(InvalidCoordinateError):
        Vector3d(float('nan'), 0., 0.)

    with pytest.raises(InvalidCoordinateError):
        Vector3d(0., float('inf'), 0.)


def test_vector_arithmetic():
    a, b = Vector3d(1., 2., 3.), Vector3d(4., 5., 6.)
    assert a + b == Vector3d(5., 7., 9.)
    assert b - a == Vector3d(3., 3., 3.)
    assert -a == Vector3d(-1., -2., -3.)
    assert a * 2 == Vector3d(2., 4., 6.)
    assert 2 * a == Vector3d(2., 4., 6.)
    assert b / 2 == Vector3d(2., 2.5, 3.)


def test_vector_products():
    x, y, z = Vector3d(1., 0., 0.), Vector3d(0., 1., 0.), Vector3d(0., 0., 1.)
    assert x.dot(y) == 0.
    assert Vector3d(1., 2., 3.).dot(Vector3d(4., 5., 6.)) == 32.

    assert x.cross(y) == z
    assert y.cross(x) == -z
    assert Vector3d(1., 2., 3.).cross(Vector3d(4., 5., 6.)) == Vector3d(-3., 6., -3.)


def test_vector_norm():
    assert Vector3d(3., 4., 0.).norm() == 5.
    assert Vector3d(0., 0., 0.).norm() == 0.

    unit = Vector3d(1., 1., 1.).unit()
    assert unit.norm() == pytest.approx(1.)
    assert unit.x == pytest.approx(1 / math.sqrt(3))

    assert Vector3d(0., 0., 0.).unit() == Vector3d(0., 0., 0.)


def test_vector_numpy():
    v = Vector3d.from_array(np.array([1., 2., 3.]))
    assert v == Vector3d(1., 2., 3.)
    assert np.array_equal(v.to_array(), np.array([1., 2., 3.]))


def test_vector_eq_hash():
    assert Vector3d(1., 2., 3.) == Vector3d(1., 2., 3.)
    assert Vector3d(1., 2., 3.) != Vector3d(1., 2., 4.)
    assert Vector3d(1., 2., 3.) != (1., 2., 3.)
    assert len({Vector3d(1., 2., 3.), Vector3d(1., 2., 3.)}) == 1


def test_vector_isclose():
    assert Vector3d(1., 2., 3.).isclose(Vector3d(1., 2., 3. + 1e-10))
    assert not Vector3d(1., 2., 3.).isclose(Vector3d(1., 2., 3.1))
    assert Vector3d(1., 2., 3.).isclose(Vector3d(1., 2., 3.1), abs_tol=0.2)


def test_vector_repr():
    assert repr(Vector3d(1., 2., 3.)) == '<Vector3d(1.0, 2.0, 3.0)>'
