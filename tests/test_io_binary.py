# -*- coding: utf-8 -*-
"""
Binary Decoding Tests - Double blocks and the GeoKey directory.

Dependencies
------------
pytest

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

import math
import struct

import numpy as np
import pytest

from chartgeo.exceptions import (
    MalformedKeyDirectory,
    MissingProjectionKey,
    ValidationError,
)
from chartgeo.IO.binary import decode_doubles, encode_doubles
from chartgeo.IO.geokeys import index_key_directory, resolve_double_key


# ---------------------------------------------------------------------------
# decode_doubles
# ---------------------------------------------------------------------------

class TestDecodeDoubles:
    """Test little-endian double decoding."""

    def test_empty_buffer(self):
        """Empty input yields an empty float64 array."""
        result = decode_doubles(b'')
        assert result.shape == (0,)
        assert result.dtype == np.float64

    def test_little_endian_order(self):
        """Values are read little-endian and keep their order."""
        buf = struct.pack('<3d', 1.5, -2.25, 1e300)
        np.testing.assert_array_equal(
            decode_doubles(buf), [1.5, -2.25, 1e300]
        )

    def test_not_big_endian(self):
        """A big-endian buffer does not decode to the same values."""
        buf = struct.pack('>d', 1.5)
        assert decode_doubles(buf)[0] != 1.5

    @pytest.mark.parametrize('remainder', range(1, 8))
    def test_trailing_remainder_truncated(self, remainder):
        """A buffer of 8k + r bytes decodes to exactly k values."""
        buf = struct.pack('<2d', 3.0, 4.0) + b'\xab' * remainder
        np.testing.assert_array_equal(decode_doubles(buf), [3.0, 4.0])

    def test_short_buffer(self):
        """Fewer than 8 bytes yields no values and no error."""
        assert decode_doubles(b'\x01\x02\x03').size == 0

    def test_nan_and_inf_pass_through(self):
        """Non-finite values are not validated."""
        buf = struct.pack('<3d', math.nan, math.inf, -math.inf)
        result = decode_doubles(buf)
        assert math.isnan(result[0])
        assert result[1] == math.inf
        assert result[2] == -math.inf

    def test_accepts_bytearray_and_memoryview(self):
        """Any bytes-like buffer is accepted."""
        buf = struct.pack('<d', 7.0)
        assert decode_doubles(bytearray(buf))[0] == 7.0
        assert decode_doubles(memoryview(buf))[0] == 7.0

    def test_encode_matches_decode_layout(self):
        """encode_doubles produces the layout decode_doubles reads."""
        assert encode_doubles([1.0, 2.0]) == struct.pack('<2d', 1.0, 2.0)


# ---------------------------------------------------------------------------
# index_key_directory
# ---------------------------------------------------------------------------

class TestIndexKeyDirectory:
    """Test GeoKey directory grouping."""

    def test_maps_key_to_fourth_element(self):
        """Each key resolves to the fourth element of its record."""
        keymap = index_key_directory([
            1, 1, 0, 2,
            3078, 34736, 1, 0,
            3075, 0, 1, 8,
        ])
        assert keymap == {1: 2, 3078: 0, 3075: 8}

    def test_last_record_wins(self):
        """Duplicate key IDs keep the last value seen."""
        keymap = index_key_directory([
            3085, 34736, 1, 0,
            3085, 34736, 1, 5,
        ])
        assert keymap[3085] == 5

    def test_empty(self):
        """An empty directory yields an empty mapping."""
        assert index_key_directory([]) == {}

    def test_accepts_tuple_and_array(self):
        """Tuples (as Pillow returns) and arrays both work."""
        values = (3084, 34736, 1, 2)
        assert index_key_directory(values) == {3084: 2}
        assert index_key_directory(np.array(values)) == {3084: 2}

    @pytest.mark.parametrize('length', [1, 2, 3, 5, 7])
    def test_length_not_multiple_of_four(self, length):
        """A ragged directory raises MalformedKeyDirectory."""
        with pytest.raises(MalformedKeyDirectory, match="multiple of 4"):
            index_key_directory(list(range(length)))

    def test_malformed_is_validation_error(self):
        """MalformedKeyDirectory is catchable as ValueError."""
        with pytest.raises(ValueError):
            index_key_directory([1, 2, 3])
        assert issubclass(MalformedKeyDirectory, ValidationError)


# ---------------------------------------------------------------------------
# resolve_double_key
# ---------------------------------------------------------------------------

class TestResolveDoubleKey:
    """Test lookup of GeoKey values in GeoDoubleParams."""

    def test_resolves_indexed_value(self):
        doubles = np.array([45.0, 33.0])
        assert resolve_double_key(doubles, {3079: 1}, 3079) == 33.0

    def test_missing_key(self):
        with pytest.raises(MissingProjectionKey, match="3085") as info:
            resolve_double_key(np.array([1.0]), {3084: 0}, 3085)
        assert info.value.key_id == 3085

    def test_index_out_of_range(self):
        with pytest.raises(MissingProjectionKey, match="index 4"):
            resolve_double_key(np.array([1.0, 2.0]), {3078: 4}, 3078)

    def test_missing_key_is_key_error(self):
        with pytest.raises(KeyError):
            resolve_double_key(np.array([]), {}, 3078)
