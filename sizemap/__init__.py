"""Image size catalog.

Example:
    from sizemap import SizeCatalog, samples

    catalog = SizeCatalog.load(samples.TEST)
    catalog.get_variant("god", "large")  # Dimensions(width=1747, height=1228)
"""

from __future__ import annotations

from sizemap.catalog import CatalogHolder, MergePolicy, SizeCatalog, merge_catalogs
from sizemap.errors import (
    CatalogSourceError,
    NotFoundError,
    SizeMapError,
    ValidationError,
)
from sizemap.models import (
    Dimensions,
    ImageIdentifier,
    RawSizeMap,
    SizeMap,
    VariantName,
)
from sizemap.scaling import Scaling, derive_variants, parse_scaling

__all__ = [
    "CatalogHolder",
    "CatalogSourceError",
    "Dimensions",
    "ImageIdentifier",
    "MergePolicy",
    "NotFoundError",
    "RawSizeMap",
    "Scaling",
    "SizeCatalog",
    "SizeMap",
    "SizeMapError",
    "ValidationError",
    "VariantName",
    "derive_variants",
    "merge_catalogs",
    "parse_scaling",
]
