# -*- coding: utf-8 -*-
"""
GeoTIFF Tag Reader - Read GeoTIFF georeferencing tags from chart images.

Thin adapter over Pillow's TIFF directory that publishes the GeoTIFF tags
under the semantic names the extractor consumes (see ``GeoTag``). Double
blocks are re-packed as little-endian byte buffers, the key directory is
returned as a tuple of ints, and the image extent as ints. No GeoTIFF
semantics are applied here.

Dependencies
------------
Pillow

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
import logging
from pathlib import Path
from typing import Any, Dict, Union, TYPE_CHECKING

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# chartgeo internal
from chartgeo.exceptions import DependencyError
from chartgeo.IO.binary import encode_doubles
from chartgeo.vocabulary import GeoTag

if TYPE_CHECKING:
    from chartgeo.projection.parameters import ProjectionParameters

logger = logging.getLogger(__name__)


class GeoTIFFTagReader:
    """Read the GeoTIFF tags of a TIFF chart.

    Parameters
    ----------
    filepath : str or Path
        Path to the TIFF file.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    tags : Dict[str, Any]
        Decoded tags keyed by ``GeoTag`` semantic name. Tags absent from
        the file are absent from the mapping.
    image : PIL.Image.Image
        Open Pillow image, released by ``close()``.

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file cannot be opened as a TIFF.

    Examples
    --------
    >>> from chartgeo.IO.geotiff import GeoTIFFTagReader
    >>> with GeoTIFFTagReader('chart.tif') as reader:
    ...     print(sorted(reader.tags))
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        if not _HAS_PIL:
            raise DependencyError(
                "Pillow is required for GeoTIFF tag reading. "
                "Install with: pip install Pillow"
            )
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.image = None
        self.tags: Dict[str, Any] = {}
        self._load_tags()

    def _load_tags(self) -> None:
        """Open the image and collect the GeoTIFF tags."""
        try:
            self.image = Image.open(str(self.filepath))
        except OSError as e:
            raise ValueError(f"Failed to open TIFF: {e}") from e

        image_format = self.image.format
        if image_format != 'TIFF':
            self.close()
            raise ValueError(
                f"{self.filepath} is a {image_format} image, not a TIFF"
            )

        directory = self.image.tag_v2
        try:
            for tag in GeoTag:
                if tag.tiff_id not in directory:
                    continue
                self.tags[tag.value] = _convert(tag, directory[tag.tiff_id])
        except (TypeError, ValueError) as e:
            self.close()
            raise ValueError(
                f"Failed to decode GeoTIFF tag '{tag.value}': {e}"
            ) from e

        logger.debug(
            "Read %d GeoTIFF tags from %s: %s",
            len(self.tags), self.filepath, sorted(self.tags),
        )

    def close(self) -> None:
        """Close the underlying Pillow image."""
        if self.image is not None:
            self.image.close()
            self.image = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


def _convert(tag: GeoTag, value: Any) -> Any:
    # Pillow returns a bare scalar for single-valued tags
    values = np.atleast_1d(np.asarray(value))
    if tag.is_double_block:
        return encode_doubles(values.astype(np.float64))
    if tag is GeoTag.KEY_DIRECTORY:
        return tuple(int(v) for v in values)
    return int(values[0])


def read_geotiff_tags(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Return the decoded GeoTIFF tags of ``filepath``."""
    with GeoTIFFTagReader(filepath) as reader:
        return dict(reader.tags)


def parse_geotiff_file(filepath: Union[str, Path]) -> 'ProjectionParameters':
    """Read a chart's tags and build its LCC parameters in one call.

    Examples
    --------
    >>> params = parse_geotiff_file('chart.tif')
    >>> round(params.easting, 9)
    110334.526523672
    """
    from chartgeo.projection.extract import build_parameters

    return build_parameters(read_geotiff_tags(filepath))
