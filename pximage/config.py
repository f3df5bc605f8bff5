"""Immutable run configurations for the command-line tools.

A configuration is built once per run from parsed arguments and the
inspected (possibly overridden) image properties. Builders validate in the
order the tools report problems and raise ``ValueError`` on the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from pximage.io.image import ImageProperties
from pximage.morphology import broadcast_radius
from pximage.pixel_types import normalize_component_type, parse_pixel_value
from pximage.slicing import axis_name
from pximage.utils.param_check import check_all_positive, check_int_in_range

SLICE_DIMENSION = 3
DEFAULT_SLICE_AXIS = 2


def default_erosion_output(input_path: str | Path) -> str:
    """``<stem>ERODED<ext>`` next to the input, e.g. ``scan.mha`` -> ``scanERODED.mha``."""

    p = Path(input_path)
    return str(p.with_name(f"{p.stem}ERODED{p.suffix}"))


def default_slice_output(input_path: str | Path, axis: int, slice_index: int) -> str:
    """``<stem>_slice_<axis>=<index><ext>`` next to the input."""

    p = Path(input_path)
    return str(p.with_name(f"{p.stem}_slice_{axis_name(axis)}={int(slice_index)}{p.suffix}"))


def require_scalar(properties: ImageProperties) -> None:
    if int(properties.number_of_components) > 1:
        raise ValueError(
            f"The NumberOfComponents is larger than 1 ({properties.number_of_components})! "
            "Vector images are not supported!"
        )


@dataclass(frozen=True)
class ErosionConfig:
    input_path: str
    output_path: str
    component_type: str
    dimension: int
    radius: tuple[int, ...]
    boundary_value: int | float | None = None

    @classmethod
    def from_args(
        cls,
        *,
        input_path: str,
        radius: Sequence[int],
        properties: ImageProperties,
        output_path: str | None = None,
        boundary_condition: str | None = None,
    ) -> "ErosionConfig":
        require_scalar(properties)
        dimension = check_int_in_range(properties.dimension, name="Dimension", low=1)
        effective = broadcast_radius(radius, dimension)
        effective = check_all_positive(effective, name="radius")

        component_type = normalize_component_type(properties.component_type)
        boundary_value = None
        if boundary_condition is not None and str(boundary_condition).strip() != "":
            boundary_value = parse_pixel_value(boundary_condition, component_type)

        return cls(
            input_path=str(input_path),
            output_path=(
                str(output_path) if output_path is not None else default_erosion_output(input_path)
            ),
            component_type=component_type,
            dimension=dimension,
            radius=effective,
            boundary_value=boundary_value,
        )


@dataclass(frozen=True)
class ExtractionConfig:
    input_path: str
    output_path: str
    component_type: str
    slice_index: int
    axis: int = DEFAULT_SLICE_AXIS

    @property
    def axis_name(self) -> str:
        return axis_name(self.axis)

    @classmethod
    def from_args(
        cls,
        *,
        input_path: str,
        slice_index: int | None,
        properties: ImageProperties,
        axis: int | None = None,
        output_path: str | None = None,
    ) -> "ExtractionConfig":
        require_scalar(properties)
        if slice_index is None:
            raise ValueError('You should specify "-sn".')

        if int(properties.dimension) != SLICE_DIMENSION:
            raise ValueError(
                f"Slices can only be extracted from {SLICE_DIMENSION}D images, "
                f"where the input image is {properties.dimension}D."
            )

        which = DEFAULT_SLICE_AXIS if axis is None else int(axis)
        if not 0 <= which < int(properties.dimension):
            raise ValueError(
                f"You selected to extract a slice from dimension {which}, "
                f"where the input image is {properties.dimension}D."
            )

        extent = int(properties.size[which])
        index = int(slice_index)
        if not 0 <= index < extent:
            raise ValueError(
                f"You selected slice number {index}, where the input image only has "
                f"{extent} slices in dimension {which}."
            )

        return cls(
            input_path=str(input_path),
            output_path=(
                str(output_path)
                if output_path is not None
                else default_slice_output(input_path, which, index)
            ),
            component_type=normalize_component_type(properties.component_type),
            slice_index=index,
            axis=which,
        )
