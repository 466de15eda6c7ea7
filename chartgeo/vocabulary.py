# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for GeoTIFF georeferencing.

Single source of truth for the numeric GeoKey IDs, TIFF tag IDs, semantic
tag names, and georeferencing modes used across chartgeo, so that the
extractor and the tag reader agree without magic numbers.

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

from enum import Enum, IntEnum


class GeoKey(IntEnum):
    """GeoKey IDs consumed from the GeoKeyDirectory.

    Values follow the GeoTIFF 1.0 key registry.
    """

    PROJ_COORD_TRANS = 3075
    PROJ_STD_PARALLEL_1 = 3078
    PROJ_STD_PARALLEL_2 = 3079
    PROJ_FALSE_ORIGIN_LONG = 3084
    PROJ_FALSE_ORIGIN_LAT = 3085


class CoordTransform(IntEnum):
    """``ProjCoordTransGeoKey`` codes recognised by chartgeo."""

    LAMBERT_CONF_CONIC_2SP = 8


class GeoTag(Enum):
    """Semantic names of the decoded tags, with their TIFF tag IDs.

    The tag reader publishes payloads under ``GeoTag.<member>.value`` and
    the extractor looks them up by the same names.
    """

    IMAGE_WIDTH = "image_width"
    IMAGE_LENGTH = "image_length"
    PIXEL_SCALE = "geo_pixelscale"
    TIEPOINTS = "geo_tiepoints"
    TRANSFORM_MATRIX = "geo_transmatrix"
    KEY_DIRECTORY = "geo_keydirectory"
    DOUBLE_PARAMS = "geo_doubleparams"

    @property
    def tiff_id(self) -> int:
        """Numeric TIFF tag ID."""
        return _TIFF_TAG_IDS[self]

    @property
    def is_double_block(self) -> bool:
        """True for tags whose payload is a raw IEEE-754 double buffer."""
        return self in _DOUBLE_BLOCKS


_TIFF_TAG_IDS = {
    GeoTag.IMAGE_WIDTH: 256,
    GeoTag.IMAGE_LENGTH: 257,
    GeoTag.PIXEL_SCALE: 33550,
    GeoTag.TIEPOINTS: 33922,
    GeoTag.TRANSFORM_MATRIX: 34264,
    GeoTag.KEY_DIRECTORY: 34735,
    GeoTag.DOUBLE_PARAMS: 34736,
}

_DOUBLE_BLOCKS = frozenset({
    GeoTag.PIXEL_SCALE,
    GeoTag.TIEPOINTS,
    GeoTag.TRANSFORM_MATRIX,
    GeoTag.DOUBLE_PARAMS,
})


class GeoreferencingMode(Enum):
    """How an image anchors pixel space to map space."""

    PIXEL_SCALE = "pixel_scale"
    TRANSFORM_MATRIX = "transform_matrix"
