"""Derive downscaled variant dimensions from an original."""

from __future__ import annotations

import re
from typing import NamedTuple

from sizemap.constants import (
    VARIANT_LARGE,
    VARIANT_MEDIUM,
    VARIANT_ORIGINAL,
    VARIANT_SMALL,
)
from sizemap.models import Dimensions

_SCALING_USAGE = (
    "Scaling should be three integers between 1 and 100 separated by spaces "
    'or commas, e.g. --scale "10, 50, 75"'
)


class Scaling(NamedTuple):
    """Percentages of the original used for each derived variant."""

    small: int
    medium: int
    large: int


def parse_scaling(text: str) -> Scaling:
    """Parse three percentages for small, medium and large.

    Args:
        text: Values separated by spaces and/or commas, e.g. "15 30 60"

    Returns:
        Parsed Scaling

    Raises:
        ValueError: If there are not exactly three percentages in 1..100
    """
    parts = [part for part in re.split(r"[,\s]+", text.strip()) if part]
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(_SCALING_USAGE)

    small, medium, large = (int(part) for part in parts)
    if not all(1 <= value <= 100 for value in (small, medium, large)):
        raise ValueError(_SCALING_USAGE)

    return Scaling(small=small, medium=medium, large=large)


def derive_variants(original: Dimensions, scaling: Scaling) -> dict[str, Dimensions]:
    """Build the four conventional variants for an original.

    Example:
        original 1000x1000 with scaling 15/30/60
        → small 150x150, medium 300x300, large 600x600
    """
    return {
        VARIANT_ORIGINAL: original,
        VARIANT_LARGE: original.scale(scaling.large),
        VARIANT_MEDIUM: original.scale(scaling.medium),
        VARIANT_SMALL: original.scale(scaling.small),
    }


__all__ = ["Scaling", "derive_variants", "parse_scaling"]
