"""Exceptions raised by geodatum"""

__all__ = [
    'ConvergenceError', 'DatumMismatchError', 'GeodesyError',
    'InvalidCoordinateError', 'UnsupportedDatumError',
]


class GeodesyError(Exception):
    """Base class for all geodatum errors"""


class ConvergenceError(GeodesyError, ArithmeticError):
    """
    An iterative geodetic computation failed to converge, typically because the input
    was degenerate (e.g. a geocentric vector at the centre of the Earth).
    """


class UnsupportedDatumError(GeodesyError, ValueError):
    """The requested datum is not part of the datum table"""


class InvalidCoordinateError(GeodesyError, ValueError):
    """An angle or vector component could not be represented (NaN, infinite, malformed)"""


class DatumMismatchError(GeodesyError, ValueError):
    """Two points referenced to different datums were combined"""
