"""pximage - command-line tools for N-dimensional medical images.

- ``pxerodeimage``: grayscale erosion of 2D/3D scalar images
- ``pxextractslice``: 2D slice extraction from 3D scalar volumes
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
