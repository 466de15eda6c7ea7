# -*- coding: utf-8 -*-
"""
Geolocation Base Class - Abstract interface for chart coordinate transforms.

Defines the interface for transforming between image pixel coordinates and
geographic coordinates (latitude/longitude). Concrete implementations supply
two vectorized methods; this base class handles scalar, list, array, and
stacked ``(2, N)`` input dispatch and footprint computation.

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
2026-10-17
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to 1D numpy array of float64."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


def _stacked(points: Any) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] != 2:
        raise ValueError(f"Expected (2, N) array, got shape {pts.shape}")
    return pts


class Geolocation(ABC):
    """
    Abstract base class for geolocation transformations.

    ``image_to_latlon`` and ``latlon_to_image`` accept three input forms:

    - **Scalar:** ``geo.image_to_latlon(500, 1000)``
    - **Separate arrays:** ``geo.image_to_latlon(rows_array, cols_array)``
    - **Stacked (2, N) array:** ``geo.image_to_latlon(points_2xN)``

    Coordinate Conventions
    ----------------------
    - **Image coordinates:** (row, col) with (0, 0) at the top-left corner
      of the top-left pixel. Results are real-valued, not truncated.
    - **Geographic coordinates:** (lat, lon) in degrees on the chart's
      reference ellipsoid.
    - **Height:** passed through unchanged; charts carry no terrain.

    Notes
    -----
    Subclasses implement ``_image_to_latlon_array`` and
    ``_latlon_to_image_array`` which operate on 1D numpy arrays.
    """

    def __init__(self, shape: Tuple[int, int], crs: str = 'WGS84'):
        """
        Initialize geolocation.

        Parameters
        ----------
        shape : Tuple[int, int]
            Image shape (rows, cols).
        crs : str, default='WGS84'
            Geographic reference of the lat/lon outputs.
        """
        self.shape = shape
        self.crs = crs

    @abstractmethod
    def _image_to_latlon_array(
        self,
        rows: np.ndarray,
        cols: np.ndarray,
        height: float = 0.0
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Transform pixel coordinate arrays to geographic coordinate arrays.

        Parameters
        ----------
        rows : np.ndarray
            Row coordinates (1D array, float64).
        cols : np.ndarray
            Column coordinates (1D array, float64).
        height : float, default=0.0
            Height in meters, returned unchanged.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            (lats, lons, heights) arrays.
        """
        pass

    @abstractmethod
    def _latlon_to_image_array(
        self,
        lats: np.ndarray,
        lons: np.ndarray,
        height: Union[float, np.ndarray] = 0.0
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Transform geographic coordinate arrays to pixel coordinate arrays.

        Parameters
        ----------
        lats : np.ndarray
            Latitudes in degrees North (1D array, float64).
        lons : np.ndarray
            Longitudes in degrees East (1D array, float64).
        height : float or np.ndarray, default=0.0
            Height in meters.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            (rows, cols) pixel coordinate arrays.
        """
        pass

    def image_to_latlon(
        self,
        row_or_points: Union[float, list, np.ndarray],
        col: Optional[Union[float, list, np.ndarray]] = None,
        height: float = 0.0
    ) -> Union[Tuple[float, float, float],
               Tuple[np.ndarray, np.ndarray, np.ndarray],
               np.ndarray]:
        """
        Transform image coordinates to geographic coordinates.

        Parameters
        ----------
        row_or_points : float, list, np.ndarray
            Row coordinate(s) when ``col`` is provided, or a ``(2, N)``
            ndarray of stacked ``[rows; cols]`` when ``col`` is None.
        col : float, list, or np.ndarray, optional
            Column coordinate(s).
        height : float, default=0.0
            Height in meters, passed through.

        Returns
        -------
        Tuple[float, float, float]
            ``(lat, lon, height)`` when scalar inputs are given.
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            ``(lats, lons, heights)`` when separate array/list inputs are given.
        np.ndarray
            Shape ``(3, N)`` when a ``(2, N)`` stacked array is given.

        Raises
        ------
        ValueError
            If a stacked input is not shaped ``(2, N)``.

        Examples
        --------
        >>> lat, lon, h = geo.image_to_latlon(5934, 5212)
        >>> result = geo.image_to_latlon(np.array([[0, 100], [0, 200]]))
        """
        if col is None:
            pts = _stacked(row_or_points)
            lats, lons, heights = self._image_to_latlon_array(
                pts[0], pts[1], height
            )
            return np.vstack([lats, lons, heights])
        elif _is_scalar(row_or_points) and _is_scalar(col):
            lats, lons, heights = self._image_to_latlon_array(
                _to_array(row_or_points), _to_array(col), height
            )
            return (float(lats[0]), float(lons[0]), float(heights[0]))
        else:
            return self._image_to_latlon_array(
                _to_array(row_or_points), _to_array(col), height
            )

    def latlon_to_image(
        self,
        lat_or_points: Union[float, list, np.ndarray],
        lon: Optional[Union[float, list, np.ndarray]] = None,
        height: Union[float, np.ndarray] = 0.0
    ) -> Union[Tuple[float, float], Tuple[np.ndarray, np.ndarray], np.ndarray]:
        """
        Transform geographic coordinates to image coordinates.

        Parameters
        ----------
        lat_or_points : float, list, np.ndarray
            Latitude(s) when ``lon`` is provided, or a ``(2, N)`` ndarray
            of stacked ``[lats; lons]`` when ``lon`` is None.
        lon : float, list, or np.ndarray, optional
            Longitude(s).
        height : float or np.ndarray, default=0.0
            Height in meters.

        Returns
        -------
        Tuple[float, float]
            ``(row, col)`` when scalar inputs are given.
        Tuple[np.ndarray, np.ndarray]
            ``(rows, cols)`` when separate array/list inputs are given.
        np.ndarray
            Shape ``(2, N)`` when a ``(2, N)`` stacked array is given.

        Raises
        ------
        ValueError
            If a stacked input is not shaped ``(2, N)``.
        """
        if lon is None:
            pts = _stacked(lat_or_points)
            rows, cols = self._latlon_to_image_array(pts[0], pts[1], height)
            return np.vstack([rows, cols])
        elif _is_scalar(lat_or_points) and _is_scalar(lon):
            rows, cols = self._latlon_to_image_array(
                _to_array(lat_or_points), _to_array(lon), height
            )
            return (float(rows[0]), float(cols[0]))
        else:
            return self._latlon_to_image_array(
                _to_array(lat_or_points), _to_array(lon), height
            )

    def get_footprint(self) -> Dict[str, Any]:
        """
        Calculate image footprint as geographic polygon and bounding box.

        Returns
        -------
        Dict[str, Any]
            Dictionary with keys:
            - 'type': 'Polygon' or 'None'
            - 'coordinates': List of (lon, lat) tuples forming perimeter polygon
            - 'bounds': (min_lon, min_lat, max_lon, max_lat) bounding box

        Notes
        -----
        An image with an unknown (zero) extent has no footprint.
        """
        from chartgeo.geolocation.utils import sample_image_perimeter

        rows, cols = self.shape
        if rows <= 0 or cols <= 0:
            return {'type': 'None', 'coordinates': None, 'bounds': None}

        sample_rows, sample_cols = sample_image_perimeter(
            self.shape, samples_per_edge=10
        )
        lats, lons, _ = self.image_to_latlon(sample_rows, sample_cols)

        valid = ~(np.isnan(lats) | np.isnan(lons))
        if not np.any(valid):
            return {'type': 'None', 'coordinates': None, 'bounds': None}

        valid_lats = lats[valid]
        valid_lons = lons[valid]

        perimeter_coords = list(zip(
            valid_lons.tolist(), valid_lats.tolist()
        ))
        min_lon, max_lon = float(np.min(valid_lons)), float(np.max(valid_lons))
        min_lat, max_lat = float(np.min(valid_lats)), float(np.max(valid_lats))

        return {
            'type': 'Polygon',
            'coordinates': perimeter_coords,
            'bounds': (min_lon, min_lat, max_lon, max_lat)
        }

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """
        Get bounding box of image footprint.

        Returns
        -------
        Tuple[float, float, float, float]
            (min_lon, min_lat, max_lon, max_lat) in degrees

        Raises
        ------
        ValueError
            If the image extent is unknown.
        """
        bounds = self.get_footprint().get('bounds')
        if bounds is None:
            raise ValueError(
                "Footprint unavailable: image extent is unknown"
            )
        return bounds
