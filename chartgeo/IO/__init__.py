# -*- coding: utf-8 -*-
"""
IO Module - Decoding of GeoTIFF tag payloads.

Holds the low-level decoders for GeoTIFF tag payloads (double blocks and
the GeoKey directory) and the Pillow-backed tag reader that pulls those
payloads out of a TIFF file.

Dependencies
------------
numpy
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
2026-10-17
"""

from chartgeo.IO.binary import decode_doubles, encode_doubles
from chartgeo.IO.geokeys import index_key_directory, resolve_double_key
from chartgeo.IO.geotiff import (
    GeoTIFFTagReader,
    read_geotiff_tags,
    parse_geotiff_file,
)

__all__ = [
    'decode_doubles',
    'encode_doubles',
    'index_key_directory',
    'resolve_double_key',
    'GeoTIFFTagReader',
    'read_geotiff_tags',
    'parse_geotiff_file',
]
