"""Grayscale morphology on N-dimensional arrays.

Arrays are indexed in image index order (x, y[, z]) and radii are given per
axis in the same order.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from scipy import ndimage

from pximage.pixel_types import max_value

logger = logging.getLogger(__name__)


def broadcast_radius(radius: Sequence[int], dimension: int) -> tuple[int, ...]:
    """Expand a radius given as one value or one value per axis.

    A single value applies to every axis; otherwise the length must equal
    ``dimension``.
    """

    values = tuple(int(v) for v in radius)
    dim = int(dimension)
    if len(values) == 1:
        return values * dim
    if len(values) != dim:
        raise ValueError(
            f"The number of radii should be 1 or Dimension ({dim}), got {len(values)}: {list(values)}"
        )
    return values


def ball_footprint(radius: Sequence[int]) -> np.ndarray:
    """Boolean ellipsoidal neighbourhood with semi-axes ``radius``.

    The footprint has shape ``2*r+1`` per axis and holds the offsets ``o``
    with ``sum((o_i / r_i) ** 2) <= 1``. An axis with radius 0 contributes
    only offset 0. Radius 1 yields the centre plus its face neighbours.
    ITK's BinaryBallStructuringElement uses semi-axes ``r + 0.5`` instead and
    also includes edge neighbours at radius 1; this footprint is deliberately tighter.
    """

    r = [int(v) for v in radius]
    if not r:
        raise ValueError("radius must not be empty")
    if any(v < 0 for v in r):
        raise ValueError(f"radius must be non-negative, got {r}")

    ndim = len(r)
    dist = np.zeros([2 * v + 1 for v in r], dtype=np.float64)
    for axis, v in enumerate(r):
        if v == 0:
            continue
        shape = [1] * ndim
        shape[axis] = 2 * v + 1
        offsets = np.arange(-v, v + 1, dtype=np.float64).reshape(shape)
        dist = dist + (offsets / float(v)) ** 2
    return dist <= 1.0


def grayscale_erode(
    array: np.ndarray,
    radius: Sequence[int],
    *,
    boundary_value: int | float | None = None,
) -> np.ndarray:
    """Replace every pixel with the minimum over its ball neighbourhood.

    Pixels outside the array take ``boundary_value``; by default the
    largest value of the array dtype, so the border never lowers the
    minimum. The result keeps the input dtype.
    """

    arr = np.asarray(array)
    r = tuple(int(v) for v in radius)
    if len(r) != arr.ndim:
        raise ValueError(f"radius must have one value per axis ({arr.ndim}), got {list(r)}")

    bc = max_value(arr.dtype) if boundary_value is None else boundary_value
    footprint = ball_footprint(r)
    logger.debug(
        "Eroding array of shape %s with radius %s (%d neighbours), boundary value %s",
        arr.shape,
        r,
        int(footprint.sum()),
        bc,
    )
    out = ndimage.grey_erosion(arr, footprint=footprint, mode="constant", cval=float(bc))
    return np.asarray(out, dtype=arr.dtype)
