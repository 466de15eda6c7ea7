# -*- coding: utf-8 -*-
"""
Geolocation Backend Detection - Detect CRS interoperability libraries.

Probes for pyproj and rasterio (specifically ``rasterio.transform.Affine``)
at import time. ``LambertConformalGeolocation`` calls these helpers before
building a ``pyproj.CRS`` or an ``Affine`` so a missing package surfaces as
a single, actionable ``DependencyError``.

Dependencies
------------
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

# chartgeo internal
from chartgeo.exceptions import DependencyError

_HAS_RASTERIO = False
_HAS_PYPROJ = False

try:
    from rasterio.transform import Affine  # noqa: F401
    _HAS_RASTERIO = True
except ImportError:
    pass

try:
    import pyproj  # noqa: F401
    _HAS_PYPROJ = True
except ImportError:
    pass


def require_pyproj() -> None:
    """Raise ``DependencyError`` unless pyproj is installed."""
    if not _HAS_PYPROJ:
        raise DependencyError(
            "projected_crs requires pyproj. Install with: pip install pyproj"
        )


def require_rasterio() -> None:
    """Raise ``DependencyError`` unless rasterio is installed."""
    if not _HAS_RASTERIO:
        raise DependencyError(
            "map_transform requires rasterio. Install with: pip install rasterio"
        )
