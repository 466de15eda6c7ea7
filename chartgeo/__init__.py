# -*- coding: utf-8 -*-
"""
chartgeo - Georeferencing for Lambert Conformal Conic chart images.

Derives a Lambert Conformal Conic projection model from the GeoTIFF tags of
a chart image and converts between pixel (column, row) and geographic
(longitude, latitude) coordinates on the GRS80 ellipsoid.

    >>> import chartgeo
    >>> params = chartgeo.parse_geotiff_file('chart.tif')
    >>> chartgeo.coordinate_to_pixel(params, (-95.0, 39.0))
    (5212, 5934)

Dependencies
------------
numpy
Pillow
pyproj
rasterio

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

__version__ = "0.1.0"

from chartgeo.exceptions import (
    ChartGeoError,
    ValidationError,
    MalformedKeyDirectory,
    MissingTag,
    MissingProjectionKey,
    UnsupportedGeoreferencing,
    UnsupportedProjection,
    DegenerateProjection,
    DependencyError,
)
from chartgeo.vocabulary import (
    GeoKey,
    GeoTag,
    GeoreferencingMode,
    CoordTransform,
)
from chartgeo.IO.geotiff import GeoTIFFTagReader, parse_geotiff_file
from chartgeo.projection import (
    ProjectionParameters,
    build_parameters,
    coordinate_to_pixel,
    pixel_to_coordinate,
    coordinates_to_pixels,
    pixels_to_coordinates,
)
from chartgeo.geolocation import LambertConformalGeolocation

__all__ = [
    'ChartGeoError',
    'ValidationError',
    'MalformedKeyDirectory',
    'MissingTag',
    'MissingProjectionKey',
    'UnsupportedGeoreferencing',
    'UnsupportedProjection',
    'DegenerateProjection',
    'DependencyError',
    'GeoKey',
    'GeoTag',
    'GeoreferencingMode',
    'CoordTransform',
    'GeoTIFFTagReader',
    'parse_geotiff_file',
    'ProjectionParameters',
    'build_parameters',
    'coordinate_to_pixel',
    'pixel_to_coordinate',
    'coordinates_to_pixels',
    'pixels_to_coordinates',
    'LambertConformalGeolocation',
]
