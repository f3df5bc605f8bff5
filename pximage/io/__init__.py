"""Image file input/output built on SimpleITK."""

from .image import (
    ImageProperties,
    array_to_image,
    image_to_array,
    read_image,
    read_image_properties,
    write_image,
)

__all__ = [
    "ImageProperties",
    "array_to_image",
    "image_to_array",
    "read_image",
    "read_image_properties",
    "write_image",
]
