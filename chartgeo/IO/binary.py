# -*- coding: utf-8 -*-
"""
Binary Doubles - Decode raw GeoTIFF double blocks.

GeoTIFF stores pixel scale, tiepoints, the transformation matrix, and the
GeoDoubleParams block as arrays of IEEE-754 doubles. The tag reader hands
these over as raw little-endian byte buffers; this module turns them into
float64 arrays and back.

Dependencies
------------
numpy

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
from typing import Iterable, Union

# Third-party
import numpy as np

_DOUBLE = np.dtype('<f8')

BytesLike = Union[bytes, bytearray, memoryview]


def decode_doubles(buffer: BytesLike) -> np.ndarray:
    """Decode a little-endian byte buffer into a float64 array.

    Each consecutive 8-byte group becomes one value, in order. A trailing
    remainder shorter than 8 bytes is dropped rather than rejected, since
    some chart encoders mis-size their double blocks by a few bytes.
    Values are not validated, so NaN and infinities pass through.

    Parameters
    ----------
    buffer : bytes, bytearray, or memoryview
        Raw tag payload.

    Returns
    -------
    np.ndarray
        1D float64 array of ``len(buffer) // 8`` values.

    Examples
    --------
    >>> decode_doubles(b'\\x00' * 8 + b'\\xff')
    array([0.])
    """
    raw = memoryview(buffer).cast('B')
    count = raw.nbytes // _DOUBLE.itemsize
    if count == 0:
        return np.empty(0, dtype=np.float64)
    usable = raw[:count * _DOUBLE.itemsize].tobytes()
    return np.frombuffer(usable, dtype=_DOUBLE).astype(np.float64)


def encode_doubles(values: Iterable[float]) -> bytes:
    """Pack floats into the little-endian layout ``decode_doubles`` reads."""
    return np.asarray(list(values), dtype=_DOUBLE).tobytes()
