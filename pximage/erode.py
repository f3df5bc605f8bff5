"""Erode image files.

``EROSION_ROUTINES`` holds one routine per supported pixel type and
dimensionality; :func:`run_erosion` dispatches a config to it.
"""

from __future__ import annotations

import logging
from typing import Callable

from pximage.config import ErosionConfig
from pximage.dispatch import RoutineRegistry, register_routine
from pximage.io.image import array_to_image, image_to_array, read_image, write_image
from pximage.morphology import grayscale_erode

logger = logging.getLogger(__name__)

EROSION_COMPONENT_TYPES = ("unsigned char", "char", "unsigned short", "short")
EROSION_DIMENSIONS = (2, 3)

EROSION_ROUTINES = RoutineRegistry("erosion")


def erode_image_file(config: ErosionConfig, *, component_type: str, dimension: int) -> str:
    """Read ``config.input_path`` as ``component_type``, erode it and write the result."""

    image = read_image(config.input_path, component_type=component_type, dimension=dimension)
    logger.info(
        "Eroding %s (%s, %dD) with radius %s",
        config.input_path,
        component_type,
        dimension,
        list(config.radius),
    )

    eroded = grayscale_erode(
        image_to_array(image),
        config.radius,
        boundary_value=config.boundary_value,
    )
    out = array_to_image(
        eroded,
        origin=image.GetOrigin(),
        spacing=image.GetSpacing(),
        direction=image.GetDirection(),
    )
    return write_image(out, config.output_path)


def _make_routine(component_type: str, dimension: int) -> Callable[[ErosionConfig], str]:
    def routine(config: ErosionConfig) -> str:
        return erode_image_file(config, component_type=component_type, dimension=dimension)

    routine.__name__ = f"erode_{component_type.replace(' ', '_')}_{dimension}d"
    return routine


for _component_type in EROSION_COMPONENT_TYPES:
    for _dimension in EROSION_DIMENSIONS:
        register_routine(EROSION_ROUTINES, _component_type, _dimension)(
            _make_routine(_component_type, _dimension)
        )


def run_erosion(config: ErosionConfig) -> str:
    """Dispatch on ``(component_type, dimension)``; unsupported pairs raise ``KeyError``."""

    routine = EROSION_ROUTINES.get(config.component_type, config.dimension)
    return routine(config)
