"""Size map constants.

Conventional variant names and file handling defaults in one place.
"""

from __future__ import annotations

# Conventional variant names (not enforced, VariantName is an open set)
VARIANT_ORIGINAL = "original"
VARIANT_LARGE = "large"
VARIANT_MEDIUM = "medium"
VARIANT_SMALL = "small"

# Percentages for small, medium and large
DEFAULT_SCALING = "15 30 60"

# Extensions picked up when scanning a directory
IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "tiff", "tif", "raw", "webp", "avif"}

__all__ = [
    "DEFAULT_SCALING",
    "IMAGE_EXTENSIONS",
    "VARIANT_LARGE",
    "VARIANT_MEDIUM",
    "VARIANT_ORIGINAL",
    "VARIANT_SMALL",
]
