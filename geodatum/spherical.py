"""
Closed-form geodesy on a spherical earth model.

Faster than the ellipsoidal formulas but only accurate to around 0.3%, which is
adequate for most distance and bearing estimates.
"""

__all__ = [
    'SphericalPoint', 'haversine_bearing', 'haversine_destination',
    'haversine_distance', 'haversine_final_bearing', 'haversine_midpoint',
]

import math
from typing import Tuple, Union

from pydantic import validate_call

from geodatum._const import EARTH_RADIUS_METERS
from geodatum.coordinates import Latitude, Longitude, normalize_lat_lon


def haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float,
    radius: float = EARTH_RADIUS_METERS
) -> float:
    """
    Calculate the great-circle distance between two points using the Haversine formula.
    See mathforum.org/library/drmath/view/51879.html for derivation.

    Args:
        lat1, lon1:
            The start point, in decimal degrees

        lat2, lon2:
            The end point, in decimal degrees

        radius:
            (Default mean earth radius) The sphere radius, in meters

    Returns:
        (float) the distance, in the same unit as radius
    """
    phi1, lambda1 = math.radians(lat1), math.radians(lon1)
    phi2, lambda2 = math.radians(lat2), math.radians(lon2)

    d_phi, d_lambda = phi2 - phi1, lambda2 - lambda1
    a = (
        math.sin(d_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c


def haversine_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the initial bearing (forward azimuth) from one point to another, in degrees
    clockwise from north [0, 360). See mathforum.org/library/drmath/view/55417.html
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_lambda = math.radians(lon2 - lon1)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def haversine_final_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the bearing on arrival at the second point, in degrees [0, 360).
    Follows a great circle, so the final bearing generally differs from the initial one.
    """
    # initial bearing from the destination back to the start, reversed
    return (haversine_bearing(lat2, lon2, lat1, lon1) + 180) % 360


def haversine_midpoint(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> Tuple[float, float]:
    """Calculate the great-circle midpoint of two points, as (latitude, longitude)"""
    phi1, lambda1 = math.radians(lat1), math.radians(lon1)
    phi2 = math.radians(lat2)
    d_lambda = math.radians(lon2 - lon1)

    bx = math.cos(phi2) * math.cos(d_lambda)
    by = math.cos(phi2) * math.sin(d_lambda)

    phi3 = math.atan2(
        math.sin(phi1) + math.sin(phi2),
        math.sqrt((math.cos(phi1) + bx) ** 2 + by ** 2)
    )
    lambda3 = lambda1 + math.atan2(by, math.cos(phi1) + bx)

    return math.degrees(phi3), math.degrees(lambda3)


def haversine_destination(
    lat1: float, lon1: float, bearing: float, distance: float,
    radius: float = EARTH_RADIUS_METERS
) -> Tuple[float, float]:
    """
    Calculate the point reached by travelling a distance along a great circle from a start
    point on an initial bearing.

    Args:
        lat1, lon1:
            The start point, in decimal degrees

        bearing:
            The initial bearing, in degrees clockwise from north

        distance:
            The distance travelled, in the same unit as radius

        radius:
            (Default mean earth radius) The sphere radius, in meters

    Returns:
        (latitude, longitude) in decimal degrees
    """
    phi1, lambda1 = math.radians(lat1), math.radians(lon1)
    theta = math.radians(bearing)
    delta = distance / radius

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) +
        math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2)
    )

    return math.degrees(phi2), math.degrees(lambda2)


class SphericalPoint:
    """A latitude/longitude point on a spherical model of the earth"""

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: Union[Latitude, float],
        longitude: Union[Longitude, float],
    ):
        self.latitude, self.longitude = normalize_lat_lon(latitude, longitude)

    def __eq__(self, other):
        if not isinstance(other, SphericalPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<SphericalPoint({self.latitude.degrees}, {self.longitude.degrees})>'

    def to_float(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple of decimal degrees"""
        return self.latitude.degrees, self.longitude.degrees

    def distance_to(self, point: 'SphericalPoint', radius: float = EARTH_RADIUS_METERS) -> float:
        """
        Distance along the surface of the sphere to another point, in the units of radius
        (meters by default)
        """
        return haversine_distance(*self.to_float(), *point.to_float(), radius=radius)

    def bearing_to(self, point: 'SphericalPoint') -> float:
        """Initial bearing towards another point, in degrees [0, 360)"""
        return haversine_bearing(*self.to_float(), *point.to_float())

    def final_bearing_to(self, point: 'SphericalPoint') -> float:
        """Bearing on arrival at another point, in degrees [0, 360)"""
        return haversine_final_bearing(*self.to_float(), *point.to_float())

    def midpoint_to(self, point: 'SphericalPoint') -> 'SphericalPoint':
        """The point halfway along the great circle between this point and another"""
        return SphericalPoint(*haversine_midpoint(*self.to_float(), *point.to_float()))

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def destination_point(
        self, distance: float, bearing: float, radius: float = EARTH_RADIUS_METERS
    ):
        """
        The point reached by travelling a distance (in the units of radius) from this point
        on the given initial bearing (degrees clockwise from north)
        """
        return SphericalPoint(
            *haversine_destination(*self.to_float(), bearing, distance, radius=radius)
        )
