"""
Three-component vector, used as the geocentric (ECEF) representation of a position
"""

__all__ = ['Vector3d']

import math
from typing import Iterator, Tuple

import numpy as np
from numpy.linalg import norm

from geodatum.errors import InvalidCoordinateError


class Vector3d:
    """
    A 3d vector. When representing a geocentric position, x/y/z are metres from the earth
    centre: x towards (0N, 0E), y towards (0N, 90E) and z towards the north pole.
    """

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x: float, y: float, z: float):
        x, y, z = float(x), float(y), float(z)
        if not all(map(math.isfinite, (x, y, z))):
            raise InvalidCoordinateError(f'Vector components must be finite; received {(x, y, z)}')

        self._x, self._y, self._z = x, y, z

    def __add__(self, other: 'Vector3d') -> 'Vector3d':
        return Vector3d(self._x + other.x, self._y + other.y, self._z + other.z)

    def __sub__(self, other: 'Vector3d') -> 'Vector3d':
        return Vector3d(self._x - other.x, self._y - other.y, self._z - other.z)

    def __neg__(self) -> 'Vector3d':
        return Vector3d(-self._x, -self._y, -self._z)

    def __mul__(self, scalar: float) -> 'Vector3d':
        return Vector3d(self._x * scalar, self._y * scalar, self._z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector3d':
        return Vector3d(self._x / scalar, self._y / scalar, self._z / scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector3d):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_float())

    def __repr__(self):
        return f'<Vector3d({self._x}, {self._y}, {self._z})>'

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @classmethod
    def from_array(cls, array) -> 'Vector3d':
        """Create a Vector3d from any length-3 sequence or numpy array"""
        x, y, z = (float(v) for v in np.ravel(array))
        return cls(x, y, z)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_float())

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the components as an (x, y, z) tuple"""
        return self._x, self._y, self._z

    def dot(self, other: 'Vector3d') -> float:
        """Dot (scalar) product of this vector and another"""
        return self._x * other.x + self._y * other.y + self._z * other.z

    def cross(self, other: 'Vector3d') -> 'Vector3d':
        """Cross (vector) product of this vector and another"""
        return Vector3d.from_array(np.cross(self.to_array(), other.to_array()))

    def norm(self) -> float:
        """Length (magnitude, Euclidean norm) of the vector"""
        return float(norm(self.to_array()))

    def unit(self) -> 'Vector3d':
        """
        Normalizes the vector to unit length. The zero vector is returned unchanged, as it
        has no direction to preserve.
        """
        length = self.norm()
        if length == 0:
            return self

        return self / length

    def isclose(self, other: 'Vector3d', abs_tol: float = 1e-9) -> bool:
        """Tests whether each component lies within abs_tol of the other vector's"""
        return all(
            math.isclose(a, b, rel_tol=0., abs_tol=abs_tol)
            for a, b in zip(self, other)
        )
