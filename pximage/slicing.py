"""Region descriptors and slice extraction on N-dimensional arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

_AXIS_NAMES = ("x", "y", "z")


@dataclass(frozen=True)
class RegionDescriptor:
    """Start index plus extent per axis.

    An extent of 0 marks an axis collapsed to the single plane at ``index``;
    extraction drops that axis from the result.
    """

    index: tuple[int, ...]
    size: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.index) != len(self.size):
            raise ValueError(
                f"index and size must have the same length, got {self.index} and {self.size}"
            )

    @property
    def collapsed_axes(self) -> tuple[int, ...]:
        return tuple(i for i, s in enumerate(self.size) if int(s) == 0)


def axis_name(axis: int) -> str:
    """``x``/``y``/``z`` for axes 0/1/2."""

    a = int(axis)
    if not 0 <= a < len(_AXIS_NAMES):
        raise ValueError(f"axis must be 0, 1 or 2, got {axis}")
    return _AXIS_NAMES[a]


def slice_region(size: Sequence[int], axis: int, index: int) -> RegionDescriptor:
    """Region covering ``size`` fully except ``axis``, collapsed at ``index``."""

    extent = [int(s) for s in size]
    a = int(axis)
    if not 0 <= a < len(extent):
        raise ValueError(f"axis {a} out of range for a {len(extent)}D image")
    if not 0 <= int(index) < extent[a]:
        raise ValueError(
            f"slice {int(index)} out of range along axis {a} with {extent[a]} slices"
        )

    start = [0] * len(extent)
    start[a] = int(index)
    extent[a] = 0
    return RegionDescriptor(index=tuple(start), size=tuple(extent))


def extract_region(array: np.ndarray, region: RegionDescriptor) -> np.ndarray:
    """Copy the described sub-volume; collapsed axes are dropped."""

    arr = np.asarray(array)
    if len(region.index) != arr.ndim:
        raise ValueError(f"region is {len(region.index)}D but array is {arr.ndim}D")

    key: list[slice | int] = []
    for axis, (start, extent) in enumerate(zip(region.index, region.size)):
        start, extent = int(start), int(extent)
        stop = start + max(extent, 1)
        if start < 0 or stop > arr.shape[axis]:
            raise ValueError(
                f"region [{start}, {stop}) exceeds axis {axis} of extent {arr.shape[axis]}"
            )
        key.append(start if extent == 0 else slice(start, stop))
    return np.array(arr[tuple(key)], copy=True)


def extract_slice(array: np.ndarray, axis: int, index: int) -> np.ndarray:
    """Plane ``index`` along ``axis``; remaining axes keep their order."""

    arr = np.asarray(array)
    return extract_region(arr, slice_region(arr.shape, axis, index))
