"""Component type tags and their NumPy / SimpleITK counterparts.

Tags follow the C type names used by ITK image headers (``unsigned char``,
``short``, ...). Users may spell them with underscores (``unsigned_char``)
on the command line; :func:`normalize_component_type` folds both spellings.
"""

from __future__ import annotations

from typing import Dict

import numpy as np

_COMPONENT_DTYPES: Dict[str, np.dtype] = {
    "unsigned char": np.dtype(np.uint8),
    "char": np.dtype(np.int8),
    "unsigned short": np.dtype(np.uint16),
    "short": np.dtype(np.int16),
    "unsigned int": np.dtype(np.uint32),
    "int": np.dtype(np.int32),
    "unsigned long": np.dtype(np.uint64),
    "long": np.dtype(np.int64),
    "float": np.dtype(np.float32),
    "double": np.dtype(np.float64),
}

# SimpleITK pixel id attribute names, scalar and vector flavour.
_SITK_NAMES: Dict[str, tuple[str, str]] = {
    "unsigned char": ("sitkUInt8", "sitkVectorUInt8"),
    "char": ("sitkInt8", "sitkVectorInt8"),
    "unsigned short": ("sitkUInt16", "sitkVectorUInt16"),
    "short": ("sitkInt16", "sitkVectorInt16"),
    "unsigned int": ("sitkUInt32", "sitkVectorUInt32"),
    "int": ("sitkInt32", "sitkVectorInt32"),
    "unsigned long": ("sitkUInt64", "sitkVectorUInt64"),
    "long": ("sitkInt64", "sitkVectorInt64"),
    "float": ("sitkFloat32", "sitkVectorFloat32"),
    "double": ("sitkFloat64", "sitkVectorFloat64"),
}


def normalize_component_type(tag: str) -> str:
    """Fold ``unsigned_char`` / ``Unsigned Char`` style spellings to ``unsigned char``."""

    return " ".join(str(tag).replace("_", " ").lower().split())


def component_dtype(tag: str) -> np.dtype:
    key = normalize_component_type(tag)
    try:
        return _COMPONENT_DTYPES[key]
    except KeyError as exc:
        available = ", ".join(_COMPONENT_DTYPES)
        raise ValueError(f"Unknown pixel type {tag!r}. Known types: {available}") from exc


def is_integral(tag: str) -> bool:
    return bool(np.issubdtype(component_dtype(tag), np.integer))


def max_value(dtype) -> int | float:
    """Largest representable value for an integer or floating dtype."""

    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.integer):
        return int(np.iinfo(dt).max)
    return float(np.finfo(dt).max)


def sitk_pixel_id(tag: str) -> int:
    import SimpleITK as sitk

    key = normalize_component_type(tag)
    component_dtype(key)
    return int(getattr(sitk, _SITK_NAMES[key][0]))


def component_type_from_sitk(pixel_id: int) -> tuple[str, bool]:
    """Map a SimpleITK pixel id to ``(tag, is_vector)``.

    Raises ``ValueError`` for pixel ids without a component type tag
    (complex and label map images).
    """

    import SimpleITK as sitk

    for tag, (scalar_name, vector_name) in _SITK_NAMES.items():
        if pixel_id == getattr(sitk, scalar_name):
            return tag, False
        if pixel_id == getattr(sitk, vector_name):
            return tag, True
    raise ValueError(f"Unsupported pixel id: {sitk.GetPixelIDValueAsString(pixel_id)}")


def parse_pixel_value(text: str, tag: str) -> int | float:
    """Parse a pixel constant for the given component type.

    Integral component types take an integer (a decimal such as ``"3.7"``
    is truncated toward zero); floating types take a float. The value must
    fit in the component type.
    """

    dt = component_dtype(tag)
    raw = str(text).strip()
    try:
        value: int | float = float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid pixel value {text!r} for pixel type {tag!r}") from exc

    if is_integral(tag):
        if not np.isfinite(value):
            raise ValueError(f"Invalid pixel value {text!r} for pixel type {tag!r}")
        try:
            value = int(raw)
        except ValueError:
            value = int(value)
        info = np.iinfo(dt)
        if value < info.min or value > info.max:
            raise ValueError(
                f"Pixel value {value} out of range for pixel type {tag!r} "
                f"[{info.min}, {info.max}]"
            )
        return value
    return float(value)
