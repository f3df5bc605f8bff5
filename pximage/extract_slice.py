"""Extract 2D slices from 3D image files.

``SLICE_ROUTINES`` is keyed by pixel type only: every routine reads a 3D
volume and writes a 2D image.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from pximage.config import SLICE_DIMENSION, ExtractionConfig
from pximage.dispatch import RoutineRegistry, register_routine
from pximage.io.image import array_to_image, image_to_array, read_image, write_image
from pximage.slicing import extract_region, slice_region

logger = logging.getLogger(__name__)

SLICE_COMPONENT_TYPES = ("unsigned char", "char", "unsigned short", "short", "float")

SLICE_ROUTINES = RoutineRegistry("slice extraction", keyed_by_dimension=False)


def _collapse_direction(direction, kept: list[int], ndim: int) -> list[float]:
    matrix = np.asarray(direction, dtype=np.float64).reshape(ndim, ndim)
    sub = matrix[np.ix_(kept, kept)]
    if abs(float(np.linalg.det(sub))) < 1e-12:
        # The kept axes do not span a plane in physical space.
        sub = np.eye(len(kept))
    else:
        # Nearest orthonormal matrix; oblique inputs leave non-unit columns.
        u, _s, vt = np.linalg.svd(sub)
        sub = u @ vt
    return [float(v) for v in sub.ravel()]


def extract_slice_image(image, axis: int, slice_index: int):
    """Extract plane ``slice_index`` along ``axis`` as a 2D SimpleITK image.

    Spacing and direction of the remaining axes are kept; the origin is the
    physical position of the first pixel of the slice.
    """

    ndim = int(image.GetDimension())
    region = slice_region(image.GetSize(), axis, slice_index)
    plane = extract_region(image_to_array(image), region)

    kept = [i for i in range(ndim) if i not in region.collapsed_axes]
    origin = image.TransformIndexToPhysicalPoint(tuple(int(v) for v in region.index))
    spacing = image.GetSpacing()
    return array_to_image(
        plane,
        origin=[origin[i] for i in kept],
        spacing=[spacing[i] for i in kept],
        direction=_collapse_direction(image.GetDirection(), kept, ndim),
    )


def extract_slice_file(config: ExtractionConfig, *, component_type: str) -> str:
    image = read_image(config.input_path, component_type=component_type, dimension=SLICE_DIMENSION)
    logger.info(
        "Extracting slice %s=%d from %s (%s)",
        config.axis_name,
        config.slice_index,
        config.input_path,
        component_type,
    )
    out = extract_slice_image(image, config.axis, config.slice_index)
    return write_image(out, config.output_path)


def _make_routine(component_type: str) -> Callable[[ExtractionConfig], str]:
    def routine(config: ExtractionConfig) -> str:
        return extract_slice_file(config, component_type=component_type)

    routine.__name__ = f"extract_slice_{component_type.replace(' ', '_')}"
    return routine


for _component_type in SLICE_COMPONENT_TYPES:
    register_routine(SLICE_ROUTINES, _component_type)(_make_routine(_component_type))


def run_extraction(config: ExtractionConfig) -> str:
    """Dispatch on the pixel type; unsupported types raise ``KeyError``."""

    routine = SLICE_ROUTINES.get(config.component_type)
    return routine(config)
