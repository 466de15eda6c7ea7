# -*- coding: utf-8 -*-
"""
Shared fixtures - Reference chart tags and parameters.

The reference chart is an LCC chart with standard parallels 33 and 45
degrees, false origin (39 deg 22 min N, 95 deg W), and ~21.17 m pixels.

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

import pytest

from chartgeo.IO.binary import encode_doubles
from chartgeo.projection.parameters import ProjectionParameters

# GeoDoubleParams order: std parallel 1, std parallel 2, false origin long, lat
REFERENCE_DOUBLES = [45.0, 33.0, -95.0, 39.366666666666667]

REFERENCE_KEY_DIRECTORY = [
    1, 1, 0, 5,
    3075, 0, 1, 8,
    3078, 34736, 1, 0,
    3079, 34736, 1, 1,
    3084, 34736, 1, 2,
    3085, 34736, 1, 3,
]

REFERENCE_PIXEL_SCALE = [21.16791991605589, 21.168529658732837, 0.0]
REFERENCE_TIEPOINTS = [0.0, 0.0, 0.0, -110334.52652367248, 85146.60133479013, 0.0]
REFERENCE_TRANSFORM_MATRIX = [
    21.16791991605589, 0.0, 0.0, -110334.52652367248,
    0.0, -21.168529658732837, 0.0, 85146.60133479013,
    0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]

REFERENCE_WIDTH = 10800
REFERENCE_HEIGHT = 7200


@pytest.fixture
def reference_tags():
    """Decoded tags using the pixel-scale + tiepoint encoding."""
    return {
        'geo_doubleparams': encode_doubles(REFERENCE_DOUBLES),
        'geo_keydirectory': list(REFERENCE_KEY_DIRECTORY),
        'geo_pixelscale': encode_doubles(REFERENCE_PIXEL_SCALE),
        'geo_tiepoints': encode_doubles(REFERENCE_TIEPOINTS),
        'image_width': REFERENCE_WIDTH,
        'image_length': REFERENCE_HEIGHT,
    }


@pytest.fixture
def matrix_tags(reference_tags):
    """Decoded tags using the transformation-matrix encoding."""
    tags = dict(reference_tags)
    del tags['geo_pixelscale']
    del tags['geo_tiepoints']
    tags['geo_transmatrix'] = encode_doubles(REFERENCE_TRANSFORM_MATRIX)
    return tags


@pytest.fixture
def reference_params():
    """Reference parameters built directly from their radian values."""
    return ProjectionParameters(
        x_res=-21.168529658732837,
        y_res=21.16791991605589,
        easting=110334.52652367248,
        northing=-85146.60133479013,
        p0=0.6870779488684344,
        l0=-1.6580627893946132,
        p1=0.7853981633974483,
        p2=0.5759586531581288,
        width=REFERENCE_WIDTH,
        height=REFERENCE_HEIGHT,
    )
