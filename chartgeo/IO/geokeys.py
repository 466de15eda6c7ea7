# -*- coding: utf-8 -*-
"""
GeoKey Directory - Index the GeoKeyDirectory and resolve key values.

The GeoKeyDirectory tag is a flat SHORT array grouped in records of four:
``(key_id, tiff_tag_location, count, value_or_offset)``. For keys stored
in GeoDoubleParams the fourth element is the index of the value within
the decoded double block.

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
from typing import Dict, Mapping, Sequence, Union

# Third-party
import numpy as np

# chartgeo internal
from chartgeo.exceptions import MalformedKeyDirectory, MissingProjectionKey

_RECORD_WIDTH = 4


def index_key_directory(
    entries: Union[Sequence[int], np.ndarray],
) -> Dict[int, int]:
    """Map each key ID to the fourth element of its record.

    The directory header (version, revision, minor revision, key count)
    occupies the first record and is indexed like any other. When a key
    ID repeats, the last record wins.

    Parameters
    ----------
    entries : sequence of int or np.ndarray
        Flat GeoKeyDirectory values.

    Returns
    -------
    Dict[int, int]
        ``key_id -> value_or_offset``.

    Raises
    ------
    MalformedKeyDirectory
        If the number of entries is not a multiple of four.
    """
    flat = np.asarray(entries, dtype=np.int64).ravel()
    if flat.size % _RECORD_WIDTH != 0:
        raise MalformedKeyDirectory(
            f"GeoKey directory length {flat.size} is not a multiple of "
            f"{_RECORD_WIDTH}"
        )
    records = flat.reshape(-1, _RECORD_WIDTH)
    return {int(key): int(value) for key, _, _, value in records}


def resolve_double_key(
    doubles: np.ndarray,
    keymap: Mapping[int, int],
    key_id: int,
) -> float:
    """Read the double referenced by ``key_id``.

    Raises
    ------
    MissingProjectionKey
        If the key is absent from the directory, or its index falls
        outside ``doubles``.
    """
    index = keymap.get(int(key_id))
    if index is None:
        raise MissingProjectionKey(
            int(key_id), f"GeoKey {int(key_id)} not found in key directory"
        )
    if not 0 <= index < len(doubles):
        raise MissingProjectionKey(
            int(key_id),
            f"GeoKey {int(key_id)} points at double index {index}, but only "
            f"{len(doubles)} doubles are present",
        )
    return float(doubles[index])
