# -*- coding: utf-8 -*-
"""
Lambert Conformal Conic Geolocation - Geolocation for LCC-projected charts.

Provides ``LambertConformalGeolocation``, a concrete ``Geolocation`` backed
by a ``ProjectionParameters`` record and the closed-form LCC engine.

Coordinate flow:

    pixel (row, col)  --resolution-->  map (E, N)  --LCC inverse-->  (lat, lon)

Unlike the scalar ``coordinate_to_pixel``, results here are real-valued;
truncate them yourself if integer pixels are needed.

For interoperability the same projection is available as a ``pyproj.CRS``
(``projected_crs``) and the pixel-to-map relationship as a rasterio
``Affine`` (``map_transform``).

Dependencies
------------
numpy
pyproj (projected_crs)
rasterio (map_transform)

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
from pathlib import Path
from typing import Any, Mapping, Tuple, Union, TYPE_CHECKING

# Third-party
import numpy as np

# chartgeo internal
from chartgeo.geolocation._backend import require_pyproj, require_rasterio
from chartgeo.geolocation.base import Geolocation
from chartgeo.projection.ellipsoid import PROJ_ELLIPSOID
from chartgeo.projection.extract import build_parameters
from chartgeo.projection.lcc import coordinates_to_pixels, pixels_to_coordinates
from chartgeo.projection.parameters import ProjectionParameters, rad_to_deg

if TYPE_CHECKING:
    import pyproj
    from rasterio.transform import Affine
    from chartgeo.IO.geotiff import GeoTIFFTagReader


class LambertConformalGeolocation(Geolocation):
    """Geolocation for a chart in the Lambert Conformal Conic projection.

    Parameters
    ----------
    params : ProjectionParameters
        Projection parameters of the chart. ``params.shape`` supplies the
        image shape used for footprints.
    refinements : int, default=1
        Eccentricity corrections applied by the inverse transform. The
        default reproduces ``pixel_to_coordinate``.

    Attributes
    ----------
    params : ProjectionParameters
        The parameter record.
    refinements : int
        Inverse refinement count.
    crs : str
        Reference ellipsoid of the lat/lon outputs, ``'GRS80'``.

    Raises
    ------
    ValueError
        If ``refinements`` is less than 1.

    Examples
    --------
    >>> geo = LambertConformalGeolocation.from_file('chart.tif')
    >>> lat, lon, _ = geo.image_to_latlon(5934, 5212)
    >>> row, col = geo.latlon_to_image(39.0, -95.0)
    """

    def __init__(
        self,
        params: ProjectionParameters,
        refinements: int = 1,
    ) -> None:
        if refinements < 1:
            raise ValueError(f"refinements must be >= 1, got {refinements}")
        self.params = params
        self.refinements = refinements
        super().__init__(params.shape, crs=PROJ_ELLIPSOID)

    def _image_to_latlon_array(
        self,
        rows: np.ndarray,
        cols: np.ndarray,
        height: float = 0.0,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        lons, lats = pixels_to_coordinates(
            self.params, cols, rows, self.refinements
        )
        heights = np.full_like(lats, height)
        return lats, lons, heights

    def _latlon_to_image_array(
        self,
        lats: np.ndarray,
        lons: np.ndarray,
        height: Union[float, np.ndarray] = 0.0,
    ) -> Tuple[np.ndarray, np.ndarray]:
        cols, rows = coordinates_to_pixels(self.params, lons, lats)
        return rows, cols

    @property
    def projected_crs(self) -> 'pyproj.CRS':
        """The chart projection as a ``pyproj.CRS``.

        False easting and northing are zero: the chart's origin offset is
        carried by ``map_transform`` instead.

        Raises
        ------
        DependencyError
            If pyproj is not installed.
        """
        require_pyproj()
        import pyproj

        p = self.params
        return pyproj.CRS.from_dict({
            'proj': 'lcc',
            'lat_0': rad_to_deg(p.p0),
            'lon_0': rad_to_deg(p.l0),
            'lat_1': rad_to_deg(p.p1),
            'lat_2': rad_to_deg(p.p2),
            'x_0': 0.0,
            'y_0': 0.0,
            'ellps': PROJ_ELLIPSOID,
            'units': 'm',
            'no_defs': True,
        })

    @property
    def map_transform(self) -> 'Affine':
        """Affine mapping pixel ``(col, row)`` to map ``(x, y)`` in meters.

        Consistent with the engine: ``x = col * -x_res - easting`` and
        ``y = row * -y_res - northing``, so ``~map_transform`` gives
        real-valued pixels from ``projected_crs`` coordinates.

        Raises
        ------
        DependencyError
            If rasterio is not installed.
        """
        require_rasterio()
        from rasterio.transform import Affine

        p = self.params
        return Affine(
            -p.x_res, 0.0, -p.easting,
            0.0, -p.y_res, -p.northing,
        )

    @classmethod
    def from_tags(
        cls,
        tags: Mapping[str, Any],
        refinements: int = 1,
    ) -> 'LambertConformalGeolocation':
        """Create from decoded tags (see ``build_parameters``)."""
        return cls(build_parameters(tags), refinements=refinements)

    @classmethod
    def from_reader(
        cls,
        reader: 'GeoTIFFTagReader',
        refinements: int = 1,
    ) -> 'LambertConformalGeolocation':
        """Create from an open ``GeoTIFFTagReader``.

        Examples
        --------
        >>> from chartgeo.IO.geotiff import GeoTIFFTagReader
        >>> with GeoTIFFTagReader('chart.tif') as reader:
        ...     geo = LambertConformalGeolocation.from_reader(reader)
        """
        return cls.from_tags(reader.tags, refinements=refinements)

    @classmethod
    def from_file(
        cls,
        filepath: Union[str, Path],
        refinements: int = 1,
    ) -> 'LambertConformalGeolocation':
        """Create from a GeoTIFF chart on disk."""
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        with GeoTIFFTagReader(filepath) as reader:
            return cls.from_reader(reader, refinements=refinements)
