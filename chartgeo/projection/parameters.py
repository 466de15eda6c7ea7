# -*- coding: utf-8 -*-
"""
Projection Parameters - Immutable Lambert Conformal Conic parameter record.

Holds everything the projection engine needs for one chart: pixel
resolution, the map offset of pixel (0, 0), the false origin and standard
parallels in radians, and the three constants derived from them. The
derived constants are computed once, when the record is built, so every
conversion made with the same record is bit-identical.

Formulae follow the LINZ Lambert Conformal Conic to geographic
transformation:

    m(phi) = cos(phi) / sqrt(1 - e^2 sin^2(phi))
    t(phi) = tan(pi/4 - phi/2) / ((1 - e sin(phi)) / (1 + e sin(phi)))^(e/2)
    n      = (ln m1 - ln m2) / (ln t1 - ln t2)
    F      = m1 / (n t1^n)
    rho_0  = a F t0^n

Author
------
chartgeo developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-18
"""

# Standard library
import math
from dataclasses import dataclass, field
from typing import Tuple

# chartgeo internal
from chartgeo.exceptions import DegenerateProjection
from chartgeo.projection.ellipsoid import ECCENTRICITY, SEMI_MAJOR_AXIS

# Distance from a pole, in radians, inside which t(phi) is treated as singular
_POLE_TOLERANCE = 1e-12


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return 180.0 * rad / math.pi


def parallel_radius(phi: float) -> float:
    """Parallel-radius function ``m(phi)``."""
    sin_phi = math.sin(phi)
    return math.cos(phi) / math.sqrt(
        1.0 - ECCENTRICITY * ECCENTRICITY * sin_phi * sin_phi
    )


def isometric_colatitude(phi: float) -> float:
    """Isometric-colatitude function ``t(phi)``."""
    sin_phi = math.sin(phi)
    return math.tan(math.pi / 4.0 - phi / 2.0) / math.pow(
        (1.0 - ECCENTRICITY * sin_phi) / (1.0 + ECCENTRICITY * sin_phi),
        ECCENTRICITY / 2.0,
    )


def derive_constants(
    p0: float,
    p1: float,
    p2: float,
) -> Tuple[float, float, float]:
    """Compute ``(n, f, rho_0)`` from the false-origin latitude and parallels.

    Parameters
    ----------
    p0 : float
        False-origin latitude (radians).
    p1, p2 : float
        Standard parallels (radians).

    Returns
    -------
    Tuple[float, float, float]
        Cone constant ``n``, map scale factor ``f``, and the radius
        ``rho_0`` (meters) to the false origin's parallel.

    Raises
    ------
    DegenerateProjection
        If a latitude lies at or beyond a pole, the parallels coincide or
        are symmetric about the equator, or a constant is not finite.
    """
    for name, phi in (('p0', p0), ('p1', p1), ('p2', p2)):
        if not math.isfinite(phi):
            raise DegenerateProjection(f"{name} is not finite: {phi}")
        if abs(phi) >= math.pi / 2.0 - _POLE_TOLERANCE:
            raise DegenerateProjection(
                f"{name} = {rad_to_deg(phi)} deg lies at or beyond a pole"
            )
    if p1 == p2:
        raise DegenerateProjection(
            f"Standard parallels are equal ({rad_to_deg(p1)} deg); the "
            f"cone constant is undefined"
        )

    m1 = parallel_radius(p1)
    m2 = parallel_radius(p2)
    t0 = isometric_colatitude(p0)
    t1 = isometric_colatitude(p1)
    t2 = isometric_colatitude(p2)

    denominator = math.log(t1) - math.log(t2)
    if denominator == 0.0:
        raise DegenerateProjection(
            "Standard parallels are numerically indistinguishable; the "
            "cone constant is undefined"
        )
    n = (math.log(m1) - math.log(m2)) / denominator
    if n == 0.0:
        raise DegenerateProjection(
            "Standard parallels are symmetric about the equator; the cone "
            "degenerates to a cylinder"
        )

    f = m1 / (n * math.pow(t1, n))
    rho_0 = SEMI_MAJOR_AXIS * f * math.pow(t0, n)

    if not all(math.isfinite(v) for v in (n, f, rho_0)):
        raise DegenerateProjection(
            f"Derived constants are not finite: n={n}, f={f}, rho_0={rho_0}"
        )
    return n, f, rho_0


@dataclass(frozen=True)
class ProjectionParameters:
    """Lambert Conformal Conic parameters for one georeferenced chart.

    Parameters
    ----------
    x_res, y_res : float
        Signed map units per pixel along columns and rows. The sign
        encodes axis direction; neither may be zero.
    easting, northing : float
        Offset of the projection origin relative to pixel (0, 0), already
        negated relative to the raw tag values.
    p0, l0 : float
        False-origin latitude and longitude (radians).
    p1, p2 : float
        Standard parallels (radians).
    width, height : int
        Raster extent in pixels, carried through from the image tags.
        Not used by the projection math.

    Attributes
    ----------
    n : float
        Cone constant.
    f : float
        Map scale factor.
    rho_0 : float
        Radius from the cone apex to the false origin's parallel (meters).

    Raises
    ------
    DegenerateProjection
        If a resolution is zero, an offset, resolution or longitude is not
        finite, or the derived constants are undefined.

    Examples
    --------
    >>> params = ProjectionParameters(
    ...     x_res=-21.168529658732837, y_res=21.16791991605589,
    ...     easting=110334.52652367248, northing=-85146.60133479013,
    ...     p0=0.6870779488684344, l0=-1.6580627893946132,
    ...     p1=0.7853981633974483, p2=0.5759586531581288,
    ... )
    >>> round(params.n, 8)
    0.63049625
    """

    x_res: float
    y_res: float
    easting: float
    northing: float
    p0: float
    l0: float
    p1: float
    p2: float
    width: int = 0
    height: int = 0
    n: float = field(init=False)
    f: float = field(init=False)
    rho_0: float = field(init=False)

    def __post_init__(self) -> None:
        for name in ('x_res', 'y_res', 'easting', 'northing', 'l0'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise DegenerateProjection(f"{name} is not finite: {value}")
        if self.x_res == 0 or self.y_res == 0:
            raise DegenerateProjection(
                f"Pixel resolution must be nonzero, got "
                f"x_res={self.x_res}, y_res={self.y_res}"
            )
        n, f, rho_0 = derive_constants(self.p0, self.p1, self.p2)
        object.__setattr__(self, 'n', n)
        object.__setattr__(self, 'f', f)
        object.__setattr__(self, 'rho_0', rho_0)

    @property
    def shape(self) -> Tuple[int, int]:
        """Raster shape ``(rows, cols)``."""
        return (self.height, self.width)
