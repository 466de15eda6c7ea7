# -*- coding: utf-8 -*-
"""
Geolocation Module - Pixel/geographic transforms for georeferenced charts.

Key Classes
-----------
- Geolocation: Abstract base class for coordinate transformations
- LambertConformalGeolocation: Geolocation for LCC-projected charts

Usage
-----
``image_to_latlon`` and ``latlon_to_image`` accept scalar, list, or ndarray
inputs and return matching types (scalar in -> scalar out, array in ->
array out):

    >>> from chartgeo.geolocation import LambertConformalGeolocation
    >>> geo = LambertConformalGeolocation.from_file('chart.tif')
    >>> lat, lon, height = geo.image_to_latlon(1000, 500)
    >>> lats, lons, heights = geo.image_to_latlon(
    ...     np.array([100, 200, 300]), np.array([400, 500, 600])
    ... )

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

from chartgeo.geolocation.base import Geolocation
from chartgeo.geolocation.lcc import LambertConformalGeolocation

__all__ = [
    'Geolocation',
    'LambertConformalGeolocation',
]
