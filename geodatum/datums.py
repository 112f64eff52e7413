"""
Reference ellipsoids, datums and the Helmert transforms relating each datum to WGS84.

Note that the precision of the datum transforms varies, and WGS84 itself is not defined
to be accurate to better than about a metre. No conversion between datums should be
assumed to be accurate to better than a metre; for many datums somewhat less.
"""

__all__ = [
    'DATUMS', 'Datum', 'DatumDefinition', 'ELLIPSOIDS', 'Ellipsoid',
    'HelmertTransform', 'get_datum', 'resolve_datum',
]

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

import numpy as np

from geodatum._const import ARCSEC_TO_RADIANS, PPM, WGS84_A, WGS84_INVERSE_F
from geodatum.errors import UnsupportedDatumError
from geodatum.vector3d import Vector3d


class Ellipsoid(NamedTuple):
    """A reference ellipsoid, defined by its semi-major axis and inverse flattening"""
    name: str
    a: float  # semi-major axis (meters)
    inverse_flattening: float

    @property
    def f(self) -> float:
        """Flattening"""
        return 1 / self.inverse_flattening

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self.f - self.f ** 2

    @property
    def mean_radius(self) -> float:
        """IUGG mean radius, (2a + b) / 3"""
        return (2 * self.a + self.b) / 3


class HelmertTransform(NamedTuple):
    """
    A 7-parameter similarity transform between geocentric frames, using the position
    vector rotation convention.

    Translations are in meters, the scale in parts-per-million and the (small) rotations
    in arc-seconds.
    """
    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    s: float = 0.
    rx: float = 0.
    ry: float = 0.
    rz: float = 0.

    @property
    def is_identity(self) -> bool:
        return not any(self)

    @property
    def scale(self) -> float:
        return 1 + self.s * PPM

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.tx, self.ty, self.tz])

    @property
    def rotation(self) -> np.ndarray:
        """Skew-symmetric small-angle rotation matrix R (radians)"""
        rx, ry, rz = (r * ARCSEC_TO_RADIANS for r in (self.rx, self.ry, self.rz))
        return np.array([
            [0., -rz, ry],
            [rz, 0., -rx],
            [-ry, rx, 0.],
        ])

    def apply(self, vector: Vector3d) -> Vector3d:
        """
        Applies the forward transform, v' = scale * (I + R) * v + t

        Args:
            vector:
                A geocentric vector in the source frame

        Returns:
            Vector3d in the target frame
        """
        if self.is_identity:
            return vector

        v = vector.to_array()
        return Vector3d.from_array(
            self.scale * (v + self.rotation @ v) + self.translation
        )

    def apply_inverse(self, vector: Vector3d) -> Vector3d:
        """
        Applies the inverse transform, v = (1 / scale) * (I - R) * (v' - t).

        The rotation is inverted by negating the angles, which is exact only to first order
        and so is valid for the small rotations geodetic transforms use.

        Args:
            vector:
                A geocentric vector in the target frame

        Returns:
            Vector3d in the source frame
        """
        if self.is_identity:
            return vector

        v = vector.to_array() - self.translation
        return Vector3d.from_array(
            (v - self.rotation @ v) / self.scale
        )


class Datum(Enum):
    """Supported geodetic datums"""
    ED50 = 'ED50'
    Irl1975 = 'Irl1975'
    NAD27 = 'NAD27'
    NAD83 = 'NAD83'
    NTF = 'NTF'
    OSGB36 = 'OSGB36'
    Potsdam = 'Potsdam'
    TokyoJapan = 'TokyoJapan'
    WGS72 = 'WGS72'
    WGS84 = 'WGS84'


class DatumDefinition(NamedTuple):
    """A datum's reference ellipsoid and its transform to WGS84"""
    ellipsoid: Ellipsoid
    to_wgs84: HelmertTransform


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    ellipsoid.name: ellipsoid for ellipsoid in (
        Ellipsoid('WGS84', WGS84_A, WGS84_INVERSE_F),
        Ellipsoid('GRS80', 6378137.0, 298.257222101),
        Ellipsoid('WGS72', 6378135.0, 298.26),
        Ellipsoid('Airy1830', 6377563.396, 299.3249646),
        Ellipsoid('AiryModified', 6377340.189, 299.3249646),
        Ellipsoid('Bessel1841', 6377397.155, 299.1528128),
        Ellipsoid('Clarke1866', 6378206.4, 294.978698214),
        Ellipsoid('Clarke1880IGN', 6378249.2, 293.466021294),
        Ellipsoid('Intl1924', 6378388.0, 297.0),
    )
})

# Transforms are FROM the datum TO WGS84; converting the other way uses the inverse
DATUMS: Mapping[Datum, DatumDefinition] = MappingProxyType({
    Datum.ED50: DatumDefinition(
        ELLIPSOIDS['Intl1924'],
        HelmertTransform(-89.5, -93.8, -123.1, 1.2, 0., 0., -0.156),
    ),
    Datum.Irl1975: DatumDefinition(
        ELLIPSOIDS['AiryModified'],
        HelmertTransform(482.530, -130.596, 564.557, 8.150, -1.042, -0.214, -0.631),
    ),
    Datum.NAD27: DatumDefinition(
        ELLIPSOIDS['Clarke1866'],
        HelmertTransform(-8., 160., 176.),
    ),
    Datum.NAD83: DatumDefinition(
        ELLIPSOIDS['GRS80'],
        HelmertTransform(-0.9956, 1.9103, 0.5215, 0.00062, -0.025915, -0.009426, -0.011599),
    ),
    Datum.NTF: DatumDefinition(
        ELLIPSOIDS['Clarke1880IGN'],
        HelmertTransform(-168., -60., 320.),
    ),
    Datum.OSGB36: DatumDefinition(
        ELLIPSOIDS['Airy1830'],
        HelmertTransform(446.448, -125.157, 542.060, -20.4894, 0.1502, 0.2470, 0.8421),
    ),
    Datum.Potsdam: DatumDefinition(
        ELLIPSOIDS['Bessel1841'],
        HelmertTransform(582., 105., 414., 8.3, -1.04, -0.35, 3.08),
    ),
    Datum.TokyoJapan: DatumDefinition(
        ELLIPSOIDS['Bessel1841'],
        HelmertTransform(-148., 507., 685.),
    ),
    Datum.WGS72: DatumDefinition(
        ELLIPSOIDS['WGS72'],
        HelmertTransform(0., 0., 4.5, 0.22, 0., 0., -0.554),
    ),
    Datum.WGS84: DatumDefinition(
        ELLIPSOIDS['WGS84'],
        HelmertTransform(),
    ),
})


def resolve_datum(datum: Union[Datum, str]) -> Datum:
    """
    Resolve a datum identifier to a Datum member.

    Args:
        datum:
            A Datum, or a datum name such as 'OSGB36' (case-insensitive)

    Returns:
        Datum
    """
    if isinstance(datum, Datum):
        return datum

    if isinstance(datum, str):
        for member in Datum:
            if member.name.lower() == datum.lower():
                return member

    raise UnsupportedDatumError(
        f'Unsupported datum {datum!r}. Options: {[member.name for member in Datum]}'
    )


def get_datum(datum: Union[Datum, str]) -> DatumDefinition:
    """Look up the ellipsoid and WGS84 transform of a datum"""
    return DATUMS[resolve_datum(datum)]
