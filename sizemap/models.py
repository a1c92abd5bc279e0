"""Core data model for image size maps.

A size map is a nested mapping from image identifier to variant name to
pixel dimensions:

    {"god": {"original": Dimensions(2912, 2047), "large": ...}}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

ImageIdentifier: TypeAlias = str
VariantName: TypeAlias = str

# Raw serialized form: {image: {variant: {"width": int, "height": int}}}
RawSizeMap: TypeAlias = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class Dimensions:
    """Width and height of one rendered variant, in pixels."""

    width: int
    height: int

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> Dimensions:
        """Build dimensions from a ``{"width": ..., "height": ...}`` mapping.

        Raises:
            KeyError: If either key is missing
        """
        return cls(width=value["width"], height=value["height"])

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}

    def scale(self, percent: int) -> Dimensions:
        """Scale both sides by ``percent`` / 100, truncating toward zero."""
        return Dimensions(
            width=self.width * percent // 100,
            height=self.height * percent // 100,
        )

    def fits_within(self, other: Dimensions) -> bool:
        """Check if these dimensions are no larger than ``other`` on both sides."""
        return self.width <= other.width and self.height <= other.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


SizeMap: TypeAlias = Mapping[ImageIdentifier, Mapping[VariantName, Dimensions]]

__all__ = [
    "Dimensions",
    "ImageIdentifier",
    "RawSizeMap",
    "SizeMap",
    "VariantName",
]
