# -*- coding: utf-8 -*-
"""
Parameter Extraction - Build ``ProjectionParameters`` from decoded GeoTIFF tags.

Consumes the mapping produced by the tag reader (semantic tag name to raw
payload), resolves the four LCC GeoKeys from GeoDoubleParams, and selects
one of the two georeferencing encodings a chart may carry:

- **Pixel scale + tiepoint**: ``ModelPixelScaleTag`` and
  ``ModelTiepointTag``. Selected whenever the pixel scale is present.
- **Transformation matrix**: ``ModelTransformationTag``, read positionally.

The encoding is resolved once into a small frozen record
(``PixelScaleGeoreference`` or ``TransformMatrixGeoreference``) that knows
how to turn itself into signed resolutions and origin offsets.

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

# Standard library
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

# Third-party
import numpy as np

# chartgeo internal
from chartgeo.exceptions import (
    MissingTag,
    UnsupportedGeoreferencing,
    UnsupportedProjection,
    ValidationError,
)
from chartgeo.IO.binary import decode_doubles
from chartgeo.IO.geokeys import index_key_directory, resolve_double_key
from chartgeo.projection.parameters import ProjectionParameters, deg_to_rad
from chartgeo.vocabulary import (
    CoordTransform,
    GeoKey,
    GeoreferencingMode,
    GeoTag,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelScaleGeoreference:
    """Georeferencing from ``ModelPixelScaleTag`` + ``ModelTiepointTag``.

    The scale block is read as ``[y_scale, x_scale, _]`` and the tiepoint
    block as ``[_, _, _, easting, northing, _]``.
    """

    x_scale: float
    y_scale: float
    easting_raw: float
    northing_raw: float

    mode = GeoreferencingMode.PIXEL_SCALE

    @classmethod
    def from_blocks(
        cls,
        scale: np.ndarray,
        tiepoints: np.ndarray,
    ) -> 'PixelScaleGeoreference':
        _require_length(GeoTag.PIXEL_SCALE, scale, 2)
        _require_length(GeoTag.TIEPOINTS, tiepoints, 5)
        return cls(
            x_scale=float(scale[1]),
            y_scale=float(scale[0]),
            easting_raw=float(tiepoints[3]),
            northing_raw=float(tiepoints[4]),
        )

    def resolution_and_offset(self) -> Tuple[float, float, float, float]:
        """Return ``(x_res, y_res, easting, northing)``."""
        return (
            -self.x_scale,
            self.y_scale,
            -self.easting_raw,
            -self.northing_raw,
        )


@dataclass(frozen=True)
class TransformMatrixGeoreference:
    """Georeferencing from ``ModelTransformationTag``.

    The first eight doubles are read as
    ``[y_res, _, _, easting, _, x_res, _, northing]``. The matrix already
    encodes axis direction, so the resolutions are taken as-is.
    """

    x_res: float
    y_res: float
    easting_raw: float
    northing_raw: float

    mode = GeoreferencingMode.TRANSFORM_MATRIX

    @classmethod
    def from_block(cls, matrix: np.ndarray) -> 'TransformMatrixGeoreference':
        _require_length(GeoTag.TRANSFORM_MATRIX, matrix, 8)
        return cls(
            x_res=float(matrix[5]),
            y_res=float(matrix[0]),
            easting_raw=float(matrix[3]),
            northing_raw=float(matrix[7]),
        )

    def resolution_and_offset(self) -> Tuple[float, float, float, float]:
        """Return ``(x_res, y_res, easting, northing)``."""
        return (
            self.x_res,
            self.y_res,
            -self.easting_raw,
            -self.northing_raw,
        )


Georeference = Union[PixelScaleGeoreference, TransformMatrixGeoreference]


def _require_length(tag: GeoTag, block: np.ndarray, minimum: int) -> None:
    if len(block) < minimum:
        raise ValidationError(
            f"{tag.value} holds {len(block)} doubles; at least {minimum} "
            f"are required"
        )


def _require_tag(tags: Mapping[str, Any], tag: GeoTag) -> Any:
    value = tags.get(tag.value)
    if value is None:
        raise MissingTag(f"Required tag '{tag.value}' is missing")
    return value


def resolve_georeference(tags: Mapping[str, Any]) -> Georeference:
    """Select and decode the georeferencing encoding present in ``tags``.

    Raises
    ------
    UnsupportedGeoreferencing
        If neither encoding is present, or the pixel scale is present
        without tiepoints.
    ValidationError
        If a block is too short for its positional layout.
    """
    scale = tags.get(GeoTag.PIXEL_SCALE.value)
    if scale is not None:
        tiepoints = tags.get(GeoTag.TIEPOINTS.value)
        if tiepoints is None:
            raise UnsupportedGeoreferencing(
                f"'{GeoTag.PIXEL_SCALE.value}' is present but "
                f"'{GeoTag.TIEPOINTS.value}' is missing"
            )
        return PixelScaleGeoreference.from_blocks(
            decode_doubles(scale), decode_doubles(tiepoints)
        )

    matrix = tags.get(GeoTag.TRANSFORM_MATRIX.value)
    if matrix is not None:
        return TransformMatrixGeoreference.from_block(decode_doubles(matrix))

    raise UnsupportedGeoreferencing(
        f"Neither '{GeoTag.PIXEL_SCALE.value}' + '{GeoTag.TIEPOINTS.value}' "
        f"nor '{GeoTag.TRANSFORM_MATRIX.value}' is present"
    )


def _check_coord_transform(keymap: Mapping[int, int]) -> None:
    code = keymap.get(int(GeoKey.PROJ_COORD_TRANS))
    if code is not None and code != CoordTransform.LAMBERT_CONF_CONIC_2SP:
        raise UnsupportedProjection(
            f"ProjCoordTransGeoKey is {code}; only "
            f"CT_LambertConfConic_2SP ({int(CoordTransform.LAMBERT_CONF_CONIC_2SP)}) "
            f"is supported"
        )


def build_parameters(tags: Mapping[str, Any]) -> ProjectionParameters:
    """Build the LCC parameter record for one chart.

    Parameters
    ----------
    tags : Mapping[str, Any]
        Decoded tags keyed by the ``GeoTag`` semantic names. Double blocks
        are raw little-endian byte buffers, the key directory is an
        integer sequence, and width/length are integers.

    Returns
    -------
    ProjectionParameters

    Raises
    ------
    MissingTag
        If the double params or key directory is absent.
    MalformedKeyDirectory
        If the key directory length is not a multiple of four.
    MissingProjectionKey
        If a false-origin or standard-parallel key cannot be resolved.
    UnsupportedProjection
        If the key directory declares a non-LCC coordinate transform.
    UnsupportedGeoreferencing
        If no usable georeferencing encoding is present.
    DegenerateProjection
        If the parameters make the projection undefined.

    Examples
    --------
    >>> from chartgeo.IO.geotiff import GeoTIFFTagReader
    >>> with GeoTIFFTagReader('chart.tif') as reader:
    ...     params = build_parameters(reader.tags)
    """
    doubles = decode_doubles(_require_tag(tags, GeoTag.DOUBLE_PARAMS))
    keymap = index_key_directory(_require_tag(tags, GeoTag.KEY_DIRECTORY))
    _check_coord_transform(keymap)

    p0 = deg_to_rad(
        resolve_double_key(doubles, keymap, GeoKey.PROJ_FALSE_ORIGIN_LAT))
    l0 = deg_to_rad(
        resolve_double_key(doubles, keymap, GeoKey.PROJ_FALSE_ORIGIN_LONG))
    p1 = deg_to_rad(
        resolve_double_key(doubles, keymap, GeoKey.PROJ_STD_PARALLEL_1))
    p2 = deg_to_rad(
        resolve_double_key(doubles, keymap, GeoKey.PROJ_STD_PARALLEL_2))

    georeference = resolve_georeference(tags)
    logger.debug("Using %s georeferencing", georeference.mode.value)
    x_res, y_res, easting, northing = georeference.resolution_and_offset()

    params = ProjectionParameters(
        x_res=x_res,
        y_res=y_res,
        easting=easting,
        northing=northing,
        p0=p0,
        l0=l0,
        p1=p1,
        p2=p2,
        width=int(tags.get(GeoTag.IMAGE_WIDTH.value) or 0),
        height=int(tags.get(GeoTag.IMAGE_LENGTH.value) or 0),
    )
    logger.debug(
        "Derived LCC constants n=%.10f f=%.10f rho_0=%.4f",
        params.n, params.f, params.rho_0,
    )
    return params
