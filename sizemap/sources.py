"""Reading and writing size maps.

Size maps are persisted as JSON in their nested form. A catalog can also
be built by measuring a directory of original images and deriving the
downscaled variants from a ``Scaling``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import anyio
from PIL import Image as PilImage

from sizemap.catalog import SizeCatalog
from sizemap.constants import IMAGE_EXTENSIONS
from sizemap.errors import CatalogSourceError, ValidationError
from sizemap.models import Dimensions
from sizemap.scaling import Scaling, derive_variants

logger = logging.getLogger("sizemap.sources")


def is_image(path: Path | str) -> bool:
    """Check the file extension (or a bare extension) against known image types."""
    path = Path(path)
    extension = path.suffix[1:] if path.suffix else path.name
    return extension.lower() in IMAGE_EXTENSIONS


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """Build a JSON object, refusing keys that appear twice."""
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValidationError(f"Duplicate key {key!r} in size map")
        result[key] = value
    return result


def load_catalog(path: Path, *, strict: bool = False) -> SizeCatalog:
    """Load a catalog from a JSON size map file.

    Raises:
        CatalogSourceError: If the file cannot be read or is not JSON
        ValidationError: If the content is not a valid size map or repeats a key
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogSourceError(f"Cannot read {path}: {exc}", path=path) from exc

    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise CatalogSourceError(f"Invalid JSON in {path}: {exc}", path=path) from exc

    logger.debug("Loading size map from %s", path)
    return SizeCatalog.load(data, strict=strict)


def dump_catalog(catalog: SizeCatalog, path: Path) -> None:
    """Write a catalog to ``path`` as pretty-printed JSON."""
    path.write_text(
        json.dumps(catalog.to_dict(), indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


def read_image_dimensions(path: Path) -> Dimensions:
    """Return the original dimensions of an image file.

    Only the image header is read.

    Raises:
        CatalogSourceError: If the file cannot be opened as an image
    """
    try:
        with PilImage.open(path) as img:
            width, height = img.size
    except PilImage.DecompressionBombError as exc:
        raise CatalogSourceError(
            f"Image {path} exceeds the Pillow pixel limit: {exc}", path=path
        ) from exc
    except (OSError, ValueError) as exc:
        raise CatalogSourceError(f"Image {path} cannot be read", path=path) from exc
    return Dimensions(width=int(width), height=int(height))


async def get_image_dimensions(path: Path) -> Dimensions:
    """Return image dimensions without blocking the event loop."""
    return await anyio.to_thread.run_sync(read_image_dimensions, path)


def scan_directory(directory: Path, scaling: Scaling) -> SizeCatalog:
    """Measure every image in ``directory`` and derive its variants.

    The image identifier is the file stem. Sub-directories and files that
    are not images are skipped.

    Raises:
        CatalogSourceError: If the directory is missing or an image is unreadable
        ValidationError: If two images share a stem or a derived variant
            collapses to zero pixels
    """
    if not directory.is_dir():
        raise CatalogSourceError(
            f"Input directory {directory} does not exist", path=directory
        )

    data: dict[str, dict[str, Dimensions]] = {}
    for entry in sorted(directory.iterdir()):
        # only real suffixes count here, a file named "raw" is not an image
        if not entry.is_file() or not entry.suffix:
            continue
        if not is_image(entry.suffix[1:]):
            continue

        image_id = entry.stem
        if image_id in data:
            raise ValidationError(
                f"Image {image_id!r} appears more than once in {directory}",
                image_id=image_id,
            )

        original = read_image_dimensions(entry)
        logger.info("Measured image %r: %s", image_id, original)
        data[image_id] = derive_variants(original, scaling)

    return SizeCatalog.load(data)


__all__ = [
    "dump_catalog",
    "get_image_dimensions",
    "is_image",
    "load_catalog",
    "read_image_dimensions",
    "scan_directory",
]
