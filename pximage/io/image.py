from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

from pximage.pixel_types import component_type_from_sitk, normalize_component_type, sitk_pixel_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageProperties:
    """Header metadata of an image file.

    ``size`` is ordered by index axis (x, y, z), matching ITK conventions.
    """

    component_type: str
    dimension: int
    number_of_components: int
    size: tuple[int, ...]

    def with_overrides(
        self,
        *,
        component_type: str | None = None,
        dimension: int | None = None,
    ) -> "ImageProperties":
        """Return a copy with user supplied pixel type / dimension applied.

        Overrides are not checked against the file; a mismatch surfaces
        when the pixels are decoded by :func:`read_image`.
        """

        return ImageProperties(
            component_type=(
                normalize_component_type(component_type)
                if component_type is not None
                else self.component_type
            ),
            dimension=int(dimension) if dimension is not None else self.dimension,
            number_of_components=self.number_of_components,
            size=self.size,
        )


def _require_file(path: str | Path) -> str:
    path_str = str(path)
    if not Path(path_str).is_file():
        raise FileNotFoundError(f"Unable to read image: {path_str}")
    return path_str


def read_image_properties(path: str | Path) -> ImageProperties:
    """Read pixel type, dimension, component count and size from the file header.

    Only the header is parsed; pixel data is not decoded.
    """

    import SimpleITK as sitk

    path_str = _require_file(path)
    reader = sitk.ImageFileReader()
    reader.SetFileName(path_str)
    try:
        reader.ReadImageInformation()
    except RuntimeError as exc:
        raise ValueError(f"Unable to read image header of {path_str}: {exc}") from exc

    tag, _is_vector = component_type_from_sitk(reader.GetPixelID())
    props = ImageProperties(
        component_type=tag,
        dimension=int(reader.GetDimension()),
        number_of_components=int(reader.GetNumberOfComponents()),
        size=tuple(int(s) for s in reader.GetSize()),
    )
    logger.debug("Header of %s: %s", path_str, props)
    return props


def read_image(path: str | Path, *, component_type: str, dimension: int):
    """Decode an image, converting its pixels to ``component_type``.

    Raises ``ValueError`` when the file does not hold a ``dimension``-D image.
    """

    import SimpleITK as sitk

    path_str = _require_file(path)
    reader = sitk.ImageFileReader()
    reader.SetFileName(path_str)
    reader.SetOutputPixelType(sitk_pixel_id(component_type))
    try:
        image = reader.Execute()
    except RuntimeError as exc:
        raise ValueError(f"Unable to read image {path_str}: {exc}") from exc

    if int(image.GetDimension()) != int(dimension):
        raise ValueError(
            f"Image {path_str} is {image.GetDimension()}D, "
            f"but a {int(dimension)}D image was requested."
        )
    return image


def write_image(image, path: str | Path) -> str:
    """Write an image; the file format follows from the extension."""

    import SimpleITK as sitk

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    try:
        sitk.WriteImage(image, str(p))
    except RuntimeError as exc:
        raise ValueError(f"Unable to write image {p}: {exc}") from exc
    logger.info("Wrote %s", p)
    return str(p)


def image_to_array(image) -> np.ndarray:
    """Pixel buffer as a NumPy array indexed (x, y[, z])."""

    import SimpleITK as sitk

    # SimpleITK returns arrays indexed (z, y, x).
    return np.ascontiguousarray(sitk.GetArrayFromImage(image).transpose())


def array_to_image(
    array: np.ndarray,
    *,
    origin: Sequence[float] | None = None,
    spacing: Sequence[float] | None = None,
    direction: Sequence[float] | None = None,
):
    """Inverse of :func:`image_to_array`, optionally setting the physical geometry."""

    import SimpleITK as sitk

    image = sitk.GetImageFromArray(np.ascontiguousarray(np.asarray(array).transpose()))
    if origin is not None:
        image.SetOrigin(tuple(float(v) for v in origin))
    if spacing is not None:
        image.SetSpacing(tuple(float(v) for v in spacing))
    if direction is not None:
        image.SetDirection(tuple(float(v) for v in direction))
    return image
