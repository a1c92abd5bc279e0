"""Sample size maps.

``TEST`` and ``HOME`` are two independently named maps; use
``merge_catalogs`` to serve them from one catalog.
"""

from __future__ import annotations

TEST = {
    "god": {
        "original": {"width": 2912, "height": 2047},
        "large": {"width": 1747, "height": 1228},
        "medium": {"width": 873, "height": 614},
        "small": {"width": 436, "height": 307},
    }
}

HOME = {
    "image_name": {
        "original": {"width": 1200, "height": 1200},
        "large": {"width": 900, "height": 900},
        "medium": {"width": 600, "height": 600},
        "small": {"width": 300, "height": 300},
    }
}

__all__ = ["HOME", "TEST"]
