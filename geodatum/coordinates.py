"""
Representation of a single geographic angle: a bare angle, a latitude or a longitude.

Out-of-range input is wrapped rather than rejected:
    - Longitudes wrap modulo 360 degrees into (-180, 180]
    - Latitudes beyond the poles are folded back (91 -> 89). A latitude/longitude pair
      normalized together with `normalize_lat_lon` also rotates the longitude by 180
      degrees when a pole is crossed, so the pair still names the same place.
"""

__all__ = ['Coordinate', 'Latitude', 'Longitude', 'normalize_lat_lon']

import math
from typing import Tuple, Union

from geodatum.errors import InvalidCoordinateError
from geodatum.utils.functions import round_half_up
from geodatum.utils.logging import warn_once


DMS_TYPE = Tuple[int, int, float, str]


def _as_degrees(value: Union['_Angle', float, int, str]) -> float:
    """Coerce an angle object or a numeric value to a finite float of decimal degrees"""
    if isinstance(value, _Angle):
        return value.degrees

    try:
        degrees = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(f'Cannot interpret {value!r} as decimal degrees') from exc

    if not math.isfinite(degrees):
        raise InvalidCoordinateError(f'Angles must be finite; received {value!r}')

    return degrees


def _wrap_180(degrees: float) -> float:
    """Wraps an angle into (-180, 180]"""
    if -180 < degrees <= 180:
        return degrees

    wrapped = degrees % 360
    return wrapped - 360 if wrapped > 180 else wrapped


def _fold_latitude(degrees: float) -> Tuple[float, bool]:
    """
    Folds a latitude back into [-90, 90].

    Returns:
        The folded latitude, and whether an odd number of poles was crossed
    """
    lat = _wrap_180(degrees)
    if lat > 90:
        return 180 - lat, True
    if lat < -90:
        return -180 - lat, True
    return lat, False


class _Angle:
    """Shared storage and unit conversion for angle value types"""

    __slots__ = ('_degrees',)

    # (positive, negative) hemisphere designators used in DMS notation
    _HEMISPHERES: Tuple[str, str] = ('+', '-')

    def __init__(self, degrees: Union['_Angle', float, int, str]):
        self._degrees = self._normalize(_as_degrees(degrees))

    @staticmethod
    def _normalize(degrees: float) -> float:
        return degrees

    def __eq__(self, other):
        if type(other) is not type(self):
            return False

        return self._degrees == other._degrees

    def __hash__(self):
        return hash((type(self).__name__, self._degrees))

    def __float__(self):
        return self._degrees

    def __repr__(self):
        return f'<{type(self).__name__}({self._degrees})>'

    @property
    def degrees(self) -> float:
        """The angle in decimal degrees"""
        return self._degrees

    @property
    def radians(self) -> float:
        """The angle in radians"""
        return self.to_radians(self._degrees)

    @staticmethod
    def pi() -> float:
        return math.pi

    @staticmethod
    def to_degrees(radians: float) -> float:
        """Converts radians to decimal degrees"""
        return radians * 180 / math.pi

    @staticmethod
    def to_radians(degrees: float) -> float:
        """Converts decimal degrees to radians"""
        return degrees * math.pi / 180

    @classmethod
    def from_dms(cls, dms: DMS_TYPE):
        """
        Creates an angle from a Degrees Minutes Seconds tuple.

        The hemisphere should be 'N'/'S' for a Latitude, 'E'/'W' for a Longitude and
        '+'/'-' for a bare Coordinate.

        Args:
            dms:
                A 4-tuple of
                ( <degrees> (float), <minutes> (float), <seconds> (float), <hemisphere> (str) )

        Returns:
            An instance of the calling class
        """
        hemisphere = dms[3].upper()
        if hemisphere not in cls._HEMISPHERES:
            raise InvalidCoordinateError(
                f'Invalid hemisphere {dms[3]!r} for {cls.__name__}; '
                f'expected one of {cls._HEMISPHERES}'
            )

        mult = -1 if hemisphere == cls._HEMISPHERES[1] else 1
        return cls(mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600)))

    def to_dms(self) -> DMS_TYPE:
        """
        Convert this angle to a tuple of degrees, minutes, seconds, hemisphere

        Returns:
            converted value as (degrees, minutes, seconds, hemisphere)
        """
        minutes, seconds = divmod(abs(self._degrees) * 3600, 60)
        degrees, minutes = divmod(minutes, 60)
        hemisphere = self._HEMISPHERES[0] if self._degrees >= 0 else self._HEMISPHERES[1]
        return int(degrees), int(minutes), round_half_up(seconds, 5), hemisphere


class Coordinate(_Angle):
    """A bare angle in decimal degrees. No range is enforced."""

    __slots__ = ()


class Latitude(_Angle):
    """A latitude in decimal degrees, folded into [-90, 90]"""

    __slots__ = ()

    _HEMISPHERES = ('N', 'S')

    @staticmethod
    def _normalize(degrees: float) -> float:
        lat, crossed = _fold_latitude(degrees)
        if crossed:
            warn_once(
                'Latitude outside [-90, 90] was folded back across the pole without adjusting '
                'its longitude; use normalize_lat_lon() to normalize both together. '
                '(this warning will not repeat)'
            )
        return lat


class Longitude(_Angle):
    """A longitude in decimal degrees, wrapped into (-180, 180]"""

    __slots__ = ()

    _HEMISPHERES = ('E', 'W')

    @staticmethod
    def _normalize(degrees: float) -> float:
        return _wrap_180(degrees)


def normalize_lat_lon(
    latitude: Union[Latitude, float, int, str],
    longitude: Union[Longitude, float, int, str],
) -> Tuple[Latitude, Longitude]:
    """
    Normalizes a latitude/longitude pair. A latitude that crosses a pole is folded back
    and the longitude moved to the opposite meridian, e.g. (91, 1) -> (89, -179).

    Args:
        latitude:
            The latitude, in decimal degrees or as a Latitude

        longitude:
            The longitude, in decimal degrees or as a Longitude

    Returns:
        (Latitude, Longitude)
    """
    lat, crossed = _fold_latitude(_as_degrees(latitude))
    lon = _as_degrees(longitude)
    if crossed:
        lon += 180

    return Latitude(lat), Longitude(lon)
