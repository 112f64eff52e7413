"""
Geodesics on an ellipsoid: Vincenty's inverse and direct formulae, with Karney's
algorithm (via geographiclib) available as an alternative.

All functions take and return decimal degrees; distances are in meters.
"""

__all__ = [
    'get_algorithm', 'karney_direct', 'karney_inverse',
    'vincenty_direct', 'vincenty_inverse',
]

from functools import lru_cache
import math
from typing import Callable, Tuple

from geodatum._const import VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
from geodatum.datums import Ellipsoid
from geodatum.errors import ConvergenceError
from geodatum.spherical import (
    haversine_bearing, haversine_distance, haversine_final_bearing
)
from geodatum.utils.logging import warn_once


def _reduced_latitude(phi: float, f: float) -> Tuple[float, float]:
    """Returns (sinU, cosU) of the reduced latitude U, where tanU = (1 - f) * tan(phi)"""
    tan_u = (1 - f) * math.tan(phi)
    cos_u = 1 / math.sqrt(1 + tan_u ** 2)
    return tan_u * cos_u, cos_u


def _normalize_bearing(radians: float) -> float:
    return (math.degrees(radians) + 360) % 360


# -------------------------------------------------------------------------
# Vincenty Implementation
# -------------------------------------------------------------------------

def vincenty_inverse(
    lat1: float, lon1: float, lat2: float, lon2: float, ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Calculate the distance and bearings between two points using Vincenty's inverse
    formula. Falls back to the spherical formulae on the ellipsoid's mean radius if the
    iteration fails to converge (nearly antipodal points).

    Args:
        lat1, lon1:
            The start point

        lat2, lon2:
            The end point

        ellipsoid:
            The ellipsoid both points are referenced to

    Returns:
        (distance, initial bearing, final bearing); bearings in degrees [0, 360)
    """
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    L = math.radians(lon2 - lon1)
    sinU1, cosU1 = _reduced_latitude(math.radians(lat1), f)
    sinU2, cosU2 = _reduced_latitude(math.radians(lat2), f)

    Lambda = L
    for _ in range(VINCENTY_MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return 0., 0., 0.  # Coincident points

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0  # Equatorial line

        # eq. 10, 11
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < VINCENTY_TOLERANCE:
            break
    else:
        warn_once(
            "Vincenty's formula failed to converge (points are nearly antipodal); "
            'falling back to spherical distance and bearings. (this warning will not repeat)'
        )
        return (
            haversine_distance(lat1, lon1, lat2, lon2, radius=ellipsoid.mean_radius),
            haversine_bearing(lat1, lon1, lat2, lon2),
            haversine_final_bearing(lat1, lon1, lat2, lon2),
        )

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )
    distance = b * A * (sigma - deltaSigma)

    # eq. 20, 21
    sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
    alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
    alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

    return distance, _normalize_bearing(alpha1), _normalize_bearing(alpha2)


def vincenty_direct(
    lat1: float, lon1: float, bearing: float, distance: float, ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Calculate the destination reached by travelling a distance from a start point on an
    initial bearing, using Vincenty's direct formula.

    Args:
        lat1, lon1:
            The start point

        bearing:
            The initial bearing, in degrees clockwise from north

        distance:
            The distance travelled, in meters

        ellipsoid:
            The ellipsoid the start point is referenced to

    Returns:
        (latitude, longitude, final bearing)
    """
    if distance == 0:
        return lat1, lon1, bearing % 360

    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    alpha1 = math.radians(bearing)
    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)
    sinU1, cosU1 = _reduced_latitude(math.radians(lat1), f)

    sigma1 = math.atan2(sinU1 / cosU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)

    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

    sigma = distance / (b * A)
    for _ in range(VINCENTY_MAX_ITERATIONS):
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
            )
        )
        sigma_prev = sigma
        sigma = distance / (b * A) + deltaSigma
        if abs(sigma - sigma_prev) < VINCENTY_TOLERANCE:
            break
    else:
        raise ConvergenceError(
            f"Vincenty's direct formula failed to converge after {VINCENTY_MAX_ITERATIONS} "
            'iterations'
        )

    sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
    cos2SigmaM = math.cos(2 * sigma1 + sigma)

    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
    )
    lambda_val = math.atan2(
        sinSigma * sinAlpha1,
        cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
    )
    C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
    L = lambda_val - (1 - C) * f * sinAlpha * (
        sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )
    alpha2 = math.atan2(sinAlpha, -tmp)

    return math.degrees(lat2), lon1 + math.degrees(L), _normalize_bearing(alpha2)


# -------------------------------------------------------------------------
# Karney Implementation (via geographiclib)
# -------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _karney_geodesic(ellipsoid: Ellipsoid):
    from geographiclib.geodesic import Geodesic  # pylint: disable=import-outside-toplevel
    return Geodesic(ellipsoid.a, ellipsoid.f)


def karney_inverse(
    lat1: float, lon1: float, lat2: float, lon2: float, ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Calculate the distance and bearings between two points using Karney's algorithm.
    Robust against antipodal points. Requires geographiclib.

    Returns:
        (distance, initial bearing, final bearing); bearings in degrees [0, 360)
    """
    res = _karney_geodesic(ellipsoid).Inverse(lat1, lon1, lat2, lon2)

    # geographiclib returns azimuths in [-180, 180]; normalize to [0, 360)
    return res['s12'], (res['azi1'] + 360) % 360, (res['azi2'] + 360) % 360


def karney_direct(
    lat1: float, lon1: float, bearing: float, distance: float, ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Calculate the destination point using Karney's algorithm. Requires geographiclib.

    Returns:
        (latitude, longitude, final bearing)
    """
    res = _karney_geodesic(ellipsoid).Direct(lat1, lon1, bearing, distance)
    return res['lat2'], res['lon2'], (res['azi2'] + 360) % 360


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

_ALGORITHMS = {
    'vincenty': (vincenty_inverse, vincenty_direct),
    'karney': (karney_inverse, karney_direct),
}


def get_algorithm(algorithm: str) -> Tuple[Callable, Callable]:
    """
    Look up the (inverse, direct) geodesic functions for an algorithm name.

    Args:
        algorithm: 'vincenty' or 'karney'
    """
    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    return _ALGORITHMS[algorithm]
