"""Read-only catalog of image size variants.

A ``SizeCatalog`` is built once from raw nested mappings, validated as a
whole, and never mutated afterwards. It can be shared between threads
without locking. Applications that reload their size data keep the active
catalog in a ``CatalogHolder`` and swap in a freshly loaded one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from sizemap.constants import VARIANT_ORIGINAL
from sizemap.errors import NotFoundError, ValidationError
from sizemap.models import Dimensions, ImageIdentifier, RawSizeMap, VariantName

logger = logging.getLogger("sizemap.catalog")


class MergePolicy(str, Enum):
    """How ``merge_catalogs`` treats an image present in several catalogs."""

    ERROR = "error"
    REPLACE = "replace"


def _check_side(image_id: str, variant: str, name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Image {image_id!r} variant {variant!r}: {name} must be an integer, "
            f"got {value!r}",
            image_id=image_id,
            variant=variant,
        )
    if value <= 0:
        raise ValidationError(
            f"Image {image_id!r} variant {variant!r}: {name} must be positive, "
            f"got {value}",
            image_id=image_id,
            variant=variant,
        )
    return value


def _coerce_dimensions(image_id: str, variant: str, value: Any) -> Dimensions:
    """Validate one raw variant entry and return it as Dimensions."""
    if isinstance(value, Dimensions):
        width, height = value.width, value.height
    elif isinstance(value, Mapping):
        try:
            raw = Dimensions.from_mapping(value)
        except KeyError as exc:
            raise ValidationError(
                f"Image {image_id!r} variant {variant!r}: missing {exc.args[0]!r}",
                image_id=image_id,
                variant=variant,
            ) from exc
        width, height = raw.width, raw.height
    else:
        raise ValidationError(
            f"Image {image_id!r} variant {variant!r}: expected a mapping with "
            f"width and height, got {type(value).__name__}",
            image_id=image_id,
            variant=variant,
        )

    return Dimensions(
        width=_check_side(image_id, variant, "width", width),
        height=_check_side(image_id, variant, "height", height),
    )


def _validate(data: RawSizeMap) -> dict[str, dict[str, Dimensions]]:
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Size map must be a mapping of images, got {type(data).__name__}"
        )

    images: dict[str, dict[str, Dimensions]] = {}
    for image_id, variants in data.items():
        if not isinstance(image_id, str):
            raise ValidationError(f"Image identifier must be a string: {image_id!r}")
        if not isinstance(variants, Mapping):
            raise ValidationError(
                f"Image {image_id!r}: expected a mapping of variants, "
                f"got {type(variants).__name__}",
                image_id=image_id,
            )

        images[image_id] = {}
        for variant, value in variants.items():
            if not isinstance(variant, str):
                raise ValidationError(
                    f"Image {image_id!r}: variant name must be a string: {variant!r}",
                    image_id=image_id,
                )
            images[image_id][variant] = _coerce_dimensions(image_id, variant, value)

    return images


class SizeCatalog:
    """Validated, immutable lookup from image to variant dimensions."""

    def __init__(self, data: RawSizeMap, *, strict: bool = False) -> None:
        """Validate ``data`` and build the catalog.

        Prefer ``SizeCatalog.load``; both construct fully validated
        instances.

        Args:
            data: Nested ``{image: {variant: {"width", "height"}}}`` mapping
            strict: Reject variants larger than their image's original

        Raises:
            ValidationError: If any entry is malformed or non-positive
        """
        images = _validate(data)
        self._images: Mapping[str, Mapping[str, Dimensions]] = MappingProxyType(
            {
                image_id: MappingProxyType(variants)
                for image_id, variants in images.items()
            }
        )

        violations = self.original_violations()
        for image_id, variant in violations:
            if strict:
                raise ValidationError(
                    f"Image {image_id!r} variant {variant!r} is larger than "
                    f"its {VARIANT_ORIGINAL!r} variant",
                    image_id=image_id,
                    variant=variant,
                )
            logger.warning(
                "Image %r variant %r is larger than its original", image_id, variant
            )

        logger.debug("Loaded size catalog with %d images", len(self._images))

    @classmethod
    def load(cls, data: RawSizeMap, *, strict: bool = False) -> SizeCatalog:
        """Construct a catalog from raw size map data.

        Loading is all-or-nothing: the first invalid entry raises and no
        partial catalog is produced.
        """
        return cls(data, strict=strict)

    def get_variant(
        self, image_id: ImageIdentifier, variant: VariantName
    ) -> Dimensions:
        """Return the stored dimensions of one variant.

        Raises:
            NotFoundError: If the image or the variant is unknown
        """
        variants = self._images.get(image_id)
        if variants is None:
            raise NotFoundError(f"Unknown image {image_id!r}", image_id=image_id)

        dimensions = variants.get(variant)
        if dimensions is None:
            raise NotFoundError(
                f"Image {image_id!r} has no variant {variant!r}",
                image_id=image_id,
                variant=variant,
            )
        return dimensions

    def list_variants(self, image_id: ImageIdentifier) -> frozenset[VariantName]:
        """Return the variant names of an image, empty if the image is unknown."""
        return frozenset(self._images.get(image_id, ()))

    def list_images(self) -> frozenset[ImageIdentifier]:
        return frozenset(self._images)

    def original_violations(self) -> list[tuple[ImageIdentifier, VariantName]]:
        """List variants that exceed their image's original on either side."""
        violations = []
        for image_id, variants in self._images.items():
            original = variants.get(VARIANT_ORIGINAL)
            if original is None:
                continue
            for variant, dimensions in variants.items():
                if variant != VARIANT_ORIGINAL and not dimensions.fits_within(
                    original
                ):
                    violations.append((image_id, variant))
        return violations

    def to_dict(self) -> dict[str, dict[str, dict[str, int]]]:
        """Serialize back to the raw nested mapping form."""
        return {
            image_id: {
                variant: dimensions.to_dict()
                for variant, dimensions in variants.items()
            }
            for image_id, variants in self._images.items()
        }

    def items(
        self,
    ) -> Iterator[tuple[ImageIdentifier, Mapping[VariantName, Dimensions]]]:
        """Iterate over (image, read-only variants) pairs."""
        return iter(self._images.items())

    def __contains__(self, image_id: object) -> bool:
        return image_id in self._images

    def __iter__(self) -> Iterator[ImageIdentifier]:
        return iter(self._images)

    def __len__(self) -> int:
        return len(self._images)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SizeCatalog):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<SizeCatalog images={sorted(self._images)!r}>"


def merge_catalogs(
    *catalogs: SizeCatalog,
    policy: MergePolicy | str = MergePolicy.ERROR,
) -> SizeCatalog:
    """Combine several catalogs into one.

    Args:
        catalogs: Catalogs to merge, in order
        policy: ``error`` rejects duplicate image identifiers, ``replace``
            lets the later catalog's entry win (whole image, variants are
            not mixed)

    Returns:
        A new catalog holding every image

    Raises:
        ValidationError: On a duplicate image with the ``error`` policy
    """
    policy = MergePolicy(policy)
    merged: dict[str, dict[str, Dimensions]] = {}
    for catalog in catalogs:
        for image_id, variants in catalog.items():
            if image_id in merged:
                if policy is MergePolicy.ERROR:
                    raise ValidationError(
                        f"Image {image_id!r} is defined in more than one catalog",
                        image_id=image_id,
                    )
                logger.info("Replacing image %r while merging catalogs", image_id)
            merged[image_id] = dict(variants)

    return SizeCatalog.load(merged)


class CatalogHolder:
    """Shared reference to the active catalog, replaced wholesale on reload."""

    def __init__(self, catalog: SizeCatalog) -> None:
        self._catalog = catalog
        self._reload_lock = threading.Lock()

    @property
    def current(self) -> SizeCatalog:
        return self._catalog

    def reload(self, data: RawSizeMap, *, strict: bool = False) -> SizeCatalog:
        """Load ``data`` into a new catalog and make it the active one.

        If loading fails the previous catalog stays active and the
        ValidationError propagates.
        """
        with self._reload_lock:
            catalog = SizeCatalog.load(data, strict=strict)
            self._catalog = catalog
        logger.info("Reloaded size catalog with %d images", len(catalog))
        return catalog


__all__ = ["CatalogHolder", "MergePolicy", "SizeCatalog", "merge_catalogs"]
