"""
Geodetic points on an ellipsoidal earth model, referenced to a datum.

Provides conversion between geodetic (latitude/longitude/height) and geocentric
Cartesian coordinates, and between datums by way of Helmert transforms through WGS84.
"""

__all__ = ['EllipsoidalPoint']

import math
from typing import Tuple, Union

from pydantic import validate_call

from geodatum._const import BOWRING_MAX_ITERATIONS, BOWRING_TOLERANCE
from geodatum.coordinates import Latitude, Longitude, normalize_lat_lon
from geodatum.datums import Datum, Ellipsoid, get_datum, resolve_datum
from geodatum.errors import ConvergenceError, DatumMismatchError
from geodatum.geodesic import get_algorithm
from geodatum.utils.logging import LOGGER
from geodatum.vector3d import Vector3d


class EllipsoidalPoint:
    """
    A geodetic point: latitude, longitude and height above the ellipsoid of a datum.

    Points are immutable; conversions return new points.

    Example:
        >>> greenwich = EllipsoidalPoint(51.4778, -0.0016, Datum.WGS84)
        >>> greenwich.convert_to_datum(Datum.OSGB36)  # 51.4773N, 0.0000E
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: Union[Latitude, float],
        longitude: Union[Longitude, float],
        datum: Union[Datum, str] = Datum.WGS84,
        height: float = 0.,
    ):
        self._latitude, self._longitude = normalize_lat_lon(latitude, longitude)
        self._datum = resolve_datum(datum)
        self._height = height

    def __eq__(self, other):
        if not isinstance(other, EllipsoidalPoint):
            return False

        return (
            self._latitude == other.latitude and
            self._longitude == other.longitude and
            self._height == other.height and
            self._datum is other.datum
        )

    def __hash__(self):
        return hash((self._latitude, self._longitude, self._height, self._datum))

    def __repr__(self):
        return (
            f'<EllipsoidalPoint({self._latitude.degrees}, {self._longitude.degrees}, '
            f'{self._datum.name}, height={self._height})>'
        )

    @property
    def latitude(self) -> Latitude:
        return self._latitude

    @property
    def longitude(self) -> Longitude:
        return self._longitude

    @property
    def height(self) -> float:
        """Height above the ellipsoid, in meters"""
        return self._height

    @property
    def datum(self) -> Datum:
        return self._datum

    @property
    def ellipsoid(self) -> Ellipsoid:
        return get_datum(self._datum).ellipsoid

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the point as a (latitude, longitude, height) tuple"""
        return self._latitude.degrees, self._longitude.degrees, self._height

    def to_cartesian(self) -> Vector3d:
        """
        Converts this point from geodetic coordinates to geocentric Cartesian (x/y/z)
        coordinates on the same datum.

        Returns:
            Vector3d pointing to this point, with x/y/z in meters from the earth centre
        """
        ellipsoid = self.ellipsoid
        e2 = ellipsoid.e2
        phi, lambda_ = self._latitude.radians, self._longitude.radians
        sin_phi, cos_phi = math.sin(phi), math.cos(phi)

        # radius of curvature in the prime vertical
        nu = ellipsoid.a / math.sqrt(1 - e2 * sin_phi ** 2)

        return Vector3d(
            (nu + self._height) * cos_phi * math.cos(lambda_),
            (nu + self._height) * cos_phi * math.sin(lambda_),
            ((1 - e2) * nu + self._height) * sin_phi,
        )

    @classmethod
    def from_cartesian(
        cls,
        vector: Vector3d,
        datum: Union[Datum, str] = Datum.WGS84,
    ) -> 'EllipsoidalPoint':
        """
        Converts a geocentric Cartesian (x/y/z) vector to geodetic coordinates, using
        Bowring's (1985) iterative formulation for mm precision.

        The vector must already be expressed in the frame of the target datum; no datum
        transform is applied.

        Args:
            vector:
                The geocentric position, in meters

            datum:
                (Default WGS84) The datum the vector is expressed in

        Returns:
            EllipsoidalPoint
        """
        datum = resolve_datum(datum)
        ellipsoid = get_datum(datum).ellipsoid
        e2 = ellipsoid.e2
        x, y, z = vector.to_float()

        p = math.sqrt(x ** 2 + y ** 2)  # distance from minor axis
        if p == 0 and z == 0:
            raise ConvergenceError(
                'Cannot derive geodetic coordinates for a vector at the centre of the earth'
            )

        def nu(phi: float) -> float:
            return ellipsoid.a / math.sqrt(1 - e2 * math.sin(phi) ** 2)

        phi = math.atan2(z, p * (1 - e2))
        for iteration in range(1, BOWRING_MAX_ITERATIONS + 1):
            phi_prev = phi
            phi = math.atan2(z + e2 * nu(phi) * math.sin(phi), p)
            if abs(phi - phi_prev) < BOWRING_TOLERANCE:
                break
        else:
            raise ConvergenceError(
                f'Geodetic latitude of {vector} did not converge within '
                f'{BOWRING_MAX_ITERATIONS} iterations'
            )

        LOGGER.debug('Bowring iteration converged after %d iterations', iteration)

        lambda_ = math.atan2(y, x)

        sin_phi, cos_phi = math.sin(phi), math.cos(phi)
        if abs(cos_phi) >= abs(sin_phi):
            height = p / cos_phi - nu(phi)
        else:
            # near the poles p / cos(phi) is ill-conditioned
            height = z / sin_phi - nu(phi) * (1 - e2)

        return cls(
            Latitude(math.degrees(phi)),
            Longitude(math.degrees(lambda_)),
            datum,
            height,
        )

    def convert_to_datum(self, to_datum: Union[Datum, str]) -> 'EllipsoidalPoint':
        """
        Converts this point to another datum. Conversions go through WGS84: the source
        datum's transform to WGS84 is applied, then the inverse of the destination's.

        Args:
            to_datum:
                The datum to convert to

        Returns:
            A new EllipsoidalPoint on the destination datum; this point is unchanged
        """
        to_datum = resolve_datum(to_datum)
        if to_datum is self._datum:
            return self

        LOGGER.debug('Converting %r to %s', self, to_datum.name)

        cartesian = get_datum(self._datum).to_wgs84.apply(self.to_cartesian())
        cartesian = get_datum(to_datum).to_wgs84.apply_inverse(cartesian)

        return self.from_cartesian(cartesian, to_datum)

    def _assert_same_datum(self, point: 'EllipsoidalPoint'):
        if point.datum is not self._datum:
            raise DatumMismatchError(
                f'Points must share a datum; received {self._datum.name} and {point.datum.name}. '
                'Use convert_to_datum() first.'
            )

    def distance_to(self, point: 'EllipsoidalPoint', algorithm: str = 'vincenty') -> float:
        """
        Distance along the ellipsoid surface to another point on the same datum.

        Args:
            point:
                The destination point

            algorithm:
                (Default 'vincenty') The geodesic algorithm, 'vincenty' or 'karney'

        Returns:
            (float) distance in meters
        """
        self._assert_same_datum(point)
        inverse, _ = get_algorithm(algorithm)
        return inverse(
            self._latitude.degrees, self._longitude.degrees,
            point.latitude.degrees, point.longitude.degrees,
            self.ellipsoid
        )[0]

    def initial_bearing_to(self, point: 'EllipsoidalPoint', algorithm: str = 'vincenty') -> float:
        """Initial bearing (forward azimuth) towards another point, in degrees [0, 360)"""
        self._assert_same_datum(point)
        inverse, _ = get_algorithm(algorithm)
        return inverse(
            self._latitude.degrees, self._longitude.degrees,
            point.latitude.degrees, point.longitude.degrees,
            self.ellipsoid
        )[1]

    def final_bearing_to(self, point: 'EllipsoidalPoint', algorithm: str = 'vincenty') -> float:
        """Bearing on arrival at another point, in degrees [0, 360)"""
        self._assert_same_datum(point)
        inverse, _ = get_algorithm(algorithm)
        return inverse(
            self._latitude.degrees, self._longitude.degrees,
            point.latitude.degrees, point.longitude.degrees,
            self.ellipsoid
        )[2]

    @validate_call
    def destination_point(self, distance: float, bearing: float, algorithm: str = 'vincenty'):
        """
        The point reached by travelling along the ellipsoid from this point.

        Args:
            distance:
                The distance travelled, in meters

            bearing:
                The initial bearing, in degrees clockwise from north

            algorithm:
                (Default 'vincenty') The geodesic algorithm, 'vincenty' or 'karney'

        Returns:
            EllipsoidalPoint on this point's datum, at this point's height
        """
        _, direct = get_algorithm(algorithm)
        lat, lon, _ = direct(
            self._latitude.degrees, self._longitude.degrees, bearing, distance, self.ellipsoid
        )
        return EllipsoidalPoint(lat, lon, self._datum, self._height)
