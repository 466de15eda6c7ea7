# -*- coding: utf-8 -*-
"""
Lambert Conformal Conic Engine - Forward and inverse chart projections.

Pure functions over a ``ProjectionParameters`` record:

    geographic (lon, lat)  --LCC forward-->  map (E, N)  --resolution-->  pixel (col, row)

and the reverse. The vectorized ``coordinates_to_pixels`` and
``pixels_to_coordinates`` do the work on numpy arrays and return real
values. The scalar ``coordinate_to_pixel`` truncates toward zero;
``pixel_to_coordinate`` returns floats.

No bounds checking is done against the raster extent: points off the
chart produce pixels off the chart. The engine never raises for a record
that was successfully constructed and finite inputs. Cones with parallels
south of the equator (negative ``n``) are handled in both directions.

The inverse approximates latitude with the spherical inverse of the
isometric colatitude and then applies ``refinements`` fixed-point
corrections for eccentricity. One refinement (the default) matches the
reference chart outputs; at mid-latitudes it leaves a latitude error of
order 1e-3 degrees. Each further refinement shrinks the error by roughly
a factor of ``e^2``.

Dependencies
------------
numpy

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
from typing import Tuple, Union

# Third-party
import numpy as np

# chartgeo internal
from chartgeo.projection.ellipsoid import ECCENTRICITY, SEMI_MAJOR_AXIS
from chartgeo.projection.parameters import ProjectionParameters

ArrayLike = Union[float, list, np.ndarray]


def _deg_to_rad(deg: np.ndarray) -> np.ndarray:
    return deg * np.pi / 180.0


def _rad_to_deg(rad: np.ndarray) -> np.ndarray:
    return 180.0 * rad / np.pi


def _isometric_colatitude(phi: np.ndarray) -> np.ndarray:
    esin = ECCENTRICITY * np.sin(phi)
    return np.tan(np.pi / 4.0 - phi / 2.0) / np.power(
        (1.0 - esin) / (1.0 + esin), ECCENTRICITY / 2.0
    )


def _inverse_colatitude(t: np.ndarray) -> np.ndarray:
    return np.pi / 2.0 - 2.0 * np.arctan(t)


def coordinates_to_pixels(
    params: ProjectionParameters,
    lons: ArrayLike,
    lats: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """Project geographic coordinates to real-valued pixel positions.

    Parameters
    ----------
    params : ProjectionParameters
        Chart projection parameters.
    lons, lats : float, list, or np.ndarray
        Longitudes and latitudes in degrees. Broadcast against each other.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(cols, rows)`` float64 arrays, not truncated.
    """
    lam = _deg_to_rad(np.asarray(lons, dtype=np.float64))
    phi = _deg_to_rad(np.asarray(lats, dtype=np.float64))

    gamma = params.n * (lam - params.l0)
    rho = SEMI_MAJOR_AXIS * params.f * np.power(
        _isometric_colatitude(phi), params.n
    )

    east = params.easting + rho * np.sin(gamma)
    north = params.northing + params.rho_0 - rho * np.cos(gamma)

    return east / -params.x_res, north / -params.y_res


def pixels_to_coordinates(
    params: ProjectionParameters,
    cols: ArrayLike,
    rows: ArrayLike,
    refinements: int = 1,
) -> Tuple[np.ndarray, np.ndarray]:
    """Unproject pixel positions to geographic coordinates.

    Parameters
    ----------
    params : ProjectionParameters
        Chart projection parameters.
    cols, rows : float, list, or np.ndarray
        Pixel positions; fractional positions are allowed.
    refinements : int, default=1
        Number of eccentricity corrections applied to the spherical
        first approximation of latitude. Must be at least 1.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(lons, lats)`` float64 arrays in degrees.

    Raises
    ------
    ValueError
        If ``refinements`` is less than 1.
    """
    if refinements < 1:
        raise ValueError(f"refinements must be >= 1, got {refinements}")

    cols = np.asarray(cols, dtype=np.float64)
    rows = np.asarray(rows, dtype=np.float64)

    east = cols * -params.x_res - params.easting
    north = rows * -params.y_res - params.northing

    # rho, f and rho_0 share the sign of n; southern cones have n < 0
    sign = np.copysign(1.0, params.n)
    rho_n = params.rho_0 - north
    rho = sign * np.sqrt(east * east + rho_n * rho_n)
    t = np.power(rho / (SEMI_MAJOR_AXIS * params.f), 1.0 / params.n)
    theta = np.arctan2(sign * east, sign * rho_n)

    # Spherical first approximation, then correct for the ellipsoid
    phi = _inverse_colatitude(t)
    for _ in range(refinements):
        esin = ECCENTRICITY * np.sin(phi)
        phi = _inverse_colatitude(
            t * np.power((1.0 - esin) / (1.0 + esin), ECCENTRICITY / 2.0)
        )

    lons = _rad_to_deg(theta / params.n + params.l0)
    lats = _rad_to_deg(phi)
    return lons, lats


def coordinate_to_pixel(
    params: ProjectionParameters,
    coord: Tuple[float, float],
) -> Tuple[int, int]:
    """Convert ``(longitude, latitude)`` in degrees to an integer pixel.

    The real-valued position is truncated toward zero, not rounded.

    Examples
    --------
    >>> coordinate_to_pixel(params, (-95, 39))
    (5212, 5934)
    """
    lon, lat = coord
    col, row = coordinates_to_pixels(params, lon, lat)
    return int(np.trunc(col)), int(np.trunc(row))


def pixel_to_coordinate(
    params: ProjectionParameters,
    pixel: Tuple[float, float],
    refinements: int = 1,
) -> Tuple[float, float]:
    """Convert a ``(col, row)`` pixel to ``(longitude, latitude)`` in degrees.

    Examples
    --------
    >>> lon, lat = pixel_to_coordinate(params, (5212, 5934))
    >>> round(lat, 5)
    38.99943
    """
    col, row = pixel
    lon, lat = pixels_to_coordinates(params, col, row, refinements)
    return float(lon), float(lat)
