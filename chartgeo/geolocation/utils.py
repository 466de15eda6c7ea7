# -*- coding: utf-8 -*-
"""
Geolocation Utilities - Footprint ring sampling in pixel space.

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

from typing import Tuple

import numpy as np


def sample_image_perimeter(
    shape: Tuple[int, int],
    samples_per_edge: int = 10
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the outer boundary of the raster as a closed ring.

    The ring follows the outside edges of the border pixels, so it runs
    from the top-left corner of pixel (0, 0) to the bottom-right corner of
    the last pixel, ``(rows, cols)``. A one-pixel-wide raster still gets a
    ring of nonzero area. Corners are visited once, clockwise from
    (0, 0), and the first point is repeated at the end.

    Parameters
    ----------
    shape : Tuple[int, int]
        Image shape (rows, cols). Both must be positive.
    samples_per_edge : int, default=10
        Points per edge, counting the starting corner. Values below 1 are
        clamped to 1, which yields the four corners.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        (rows, cols) arrays of ``4 * samples_per_edge + 1`` points.

    Raises
    ------
    ValueError
        If either dimension of ``shape`` is not positive.
    """
    rows, cols = shape
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Image shape must be positive, got {shape}")
    count = max(int(samples_per_edge), 1)

    # Fractions along each edge, end corner excluded
    steps = np.arange(count) / count

    ring_rows = np.concatenate([
        np.zeros(count),            # top, left to right
        steps * rows,               # right, top to bottom
        np.full(count, rows),       # bottom, right to left
        rows - steps * rows,        # left, bottom to top
    ])
    ring_cols = np.concatenate([
        steps * cols,
        np.full(count, cols),
        cols - steps * cols,
        np.zeros(count),
    ])

    return (
        np.append(ring_rows, ring_rows[0]).astype(np.float64),
        np.append(ring_cols, ring_cols[0]).astype(np.float64),
    )
