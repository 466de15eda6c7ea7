# -*- coding: utf-8 -*-
"""
Reference Ellipsoid - Fixed GRS80 constants for the LCC formulae.

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

# Flattening
FLATTENING = 1.0 / 298.257222101004

# First eccentricity
ECCENTRICITY = math.sqrt(2 * FLATTENING - FLATTENING * FLATTENING)

# Semi-major axis (meters)
SEMI_MAJOR_AXIS = 6_378_137.0

# PROJ ellipsoid name matching the constants above
PROJ_ELLIPSOID = 'GRS80'
