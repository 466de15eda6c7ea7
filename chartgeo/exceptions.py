# -*- coding: utf-8 -*-
"""
ChartGeo Exception Hierarchy - Domain-specific exceptions for chart georeferencing.

Lets host applications catch projection-extraction failures distinctly from
Python built-in exceptions. Every exception subclasses both
``ChartGeoError`` and the closest built-in exception so existing
``except ValueError`` / ``except KeyError`` handlers keep working.

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


class ChartGeoError(Exception):
    """Base exception for all chartgeo errors."""


class ValidationError(ChartGeoError, ValueError):
    """Malformed tag payload.

    Raised when a decoded GeoTIFF block is too short or has the wrong
    shape for the positional extraction applied to it.
    """


class MalformedKeyDirectory(ValidationError):
    """GeoKey directory whose length is not a multiple of four."""


class MissingTag(ChartGeoError, KeyError):
    """A tag required by every georeferencing path is absent."""


class MissingProjectionKey(ChartGeoError, KeyError):
    """A required GeoKey is absent or points outside the double params.

    Attributes
    ----------
    key_id : int
        Numeric GeoKey ID that could not be resolved.
    """

    def __init__(self, key_id: int, message: str) -> None:
        super().__init__(message)
        self.key_id = key_id

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class UnsupportedGeoreferencing(ChartGeoError, ValueError):
    """Neither pixel-scale + tiepoint nor transformation-matrix tags present."""


class UnsupportedProjection(ChartGeoError, ValueError):
    """The key directory declares a projection other than two-parallel LCC."""


class DegenerateProjection(ChartGeoError, ValueError):
    """Projection constants are undefined for the given parameters.

    Raised for equal standard parallels, a standard parallel at a pole,
    parallels symmetric about the equator, a zero pixel resolution, or
    any other input that would produce non-finite derived constants.
    """


class DependencyError(ChartGeoError, ImportError):
    """Missing optional dependency required for a specific feature.

    Raised when Pillow (tag reading), pyproj or rasterio (CRS and affine
    interoperability) is not installed.
    """
