
from geodatum._version import __version__  # noqa: F401
from geodatum.utils.logging import LOGGER
from geodatum.coordinates import Coordinate, Latitude, Longitude, normalize_lat_lon
from geodatum.datums import DATUMS, Datum, ELLIPSOIDS, Ellipsoid, HelmertTransform, get_datum
from geodatum.ellipsoidal import EllipsoidalPoint
from geodatum.errors import (
    ConvergenceError, DatumMismatchError, GeodesyError, InvalidCoordinateError,
    UnsupportedDatumError
)
from geodatum.spherical import SphericalPoint
from geodatum.vector3d import Vector3d


__all__ = [
    'ConvergenceError',
    'Coordinate',
    'DATUMS',
    'Datum',
    'DatumMismatchError',
    'ELLIPSOIDS',
    'Ellipsoid',
    'EllipsoidalPoint',
    'GeodesyError',
    'HelmertTransform',
    'InvalidCoordinateError',
    'Latitude',
    'Longitude',
    'LOGGER',
    'SphericalPoint',
    'UnsupportedDatumError',
    'Vector3d',
    'get_datum',
    'normalize_lat_lon',
]
