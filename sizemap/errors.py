"""Exceptions raised by the size catalog."""

from __future__ import annotations

from pathlib import Path


class SizeMapError(Exception):
    """Base class for size map errors."""


class ValidationError(SizeMapError):
    """Raised when size map data violates the catalog invariants."""

    def __init__(
        self,
        message: str,
        image_id: str | None = None,
        variant: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Error message
            image_id: Image identifier of the offending entry
            variant: Variant name of the offending entry
        """
        super().__init__(message)
        self.image_id = image_id
        self.variant = variant


class NotFoundError(SizeMapError, KeyError):
    """Raised when an image or variant is not in the catalog."""

    def __init__(self, message: str, image_id: str, variant: str | None = None) -> None:
        super().__init__(message)
        self.image_id = image_id
        self.variant = variant

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0])


class CatalogSourceError(SizeMapError):
    """Raised when a catalog file or image cannot be read."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "CatalogSourceError",
    "NotFoundError",
    "SizeMapError",
    "ValidationError",
]
