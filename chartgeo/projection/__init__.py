# -*- coding: utf-8 -*-
"""
Projection Module - Lambert Conformal Conic parameters and transforms.

Key Classes
-----------
- ProjectionParameters: Immutable per-chart parameter record

Key Functions
-------------
- build_parameters: Decoded tags -> ProjectionParameters
- coordinate_to_pixel: (lon, lat) degrees -> integer (col, row)
- pixel_to_coordinate: (col, row) -> (lon, lat) degrees

Usage
-----
    >>> from chartgeo.projection import (
    ...     build_parameters, coordinate_to_pixel, pixel_to_coordinate,
    ... )
    >>> params = build_parameters(tags)
    >>> col, row = coordinate_to_pixel(params, (-95.0, 39.0))
    >>> lon, lat = pixel_to_coordinate(params, (col, row))

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

from chartgeo.projection.parameters import ProjectionParameters, derive_constants
from chartgeo.projection.extract import (
    build_parameters,
    resolve_georeference,
    PixelScaleGeoreference,
    TransformMatrixGeoreference,
)
from chartgeo.projection.lcc import (
    coordinate_to_pixel,
    pixel_to_coordinate,
    coordinates_to_pixels,
    pixels_to_coordinates,
)

__all__ = [
    'ProjectionParameters',
    'derive_constants',
    'build_parameters',
    'resolve_georeference',
    'PixelScaleGeoreference',
    'TransformMatrixGeoreference',
    'coordinate_to_pixel',
    'pixel_to_coordinate',
    'coordinates_to_pixels',
    'pixels_to_coordinates',
]
