"""Tests for the size catalog."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from sizemap import NotFoundError, SizeCatalog, ValidationError, samples
from sizemap.models import Dimensions


def test_get_variant_returns_stored_dimensions(test_catalog: SizeCatalog) -> None:
    """Test that lookups return the stored dimensions unchanged."""
    assert test_catalog.get_variant("god", "large") == Dimensions(1747, 1228)
    assert test_catalog.get_variant("god", "original") == Dimensions(2912, 2047)


def test_get_variant_unknown_variant(test_catalog: SizeCatalog) -> None:
    """Test lookup of a variant the image does not have."""
    with pytest.raises(NotFoundError) as exc_info:
        test_catalog.get_variant("god", "nonexistent")

    assert exc_info.value.image_id == "god"
    assert exc_info.value.variant == "nonexistent"


def test_get_variant_unknown_image(test_catalog: SizeCatalog) -> None:
    """Test lookup of an image that is not in the catalog."""
    with pytest.raises(NotFoundError) as exc_info:
        test_catalog.get_variant("missing_image", "small")

    assert exc_info.value.image_id == "missing_image"
    assert exc_info.value.variant is None
    assert "missing_image" in str(exc_info.value)


def test_not_found_is_a_key_error(test_catalog: SizeCatalog) -> None:
    """Test that missing entries can be handled as KeyError."""
    with pytest.raises(KeyError):
        test_catalog.get_variant("missing_image", "small")


def test_list_variants(home_catalog: SizeCatalog) -> None:
    """Test listing the variants of a known image."""
    assert home_catalog.list_variants("image_name") == {
        "original",
        "large",
        "medium",
        "small",
    }


def test_list_variants_unknown_image_is_empty(home_catalog: SizeCatalog) -> None:
    """Test that listing an unknown image returns an empty set."""
    assert home_catalog.list_variants("god") == frozenset()


def test_list_images(test_catalog: SizeCatalog) -> None:
    """Test listing and membership of image identifiers."""
    assert test_catalog.list_images() == {"god"}
    assert "god" in test_catalog
    assert "image_name" not in test_catalog
    assert len(test_catalog) == 1
    assert list(test_catalog) == ["god"]


def test_variant_names_are_open() -> None:
    """Test that variant names are not limited to the conventional set."""
    catalog = SizeCatalog.load({"hero": {"retina": {"width": 3840, "height": 2160}}})
    assert catalog.list_variants("hero") == {"retina"}


def test_empty_catalog() -> None:
    """Test loading an empty size map."""
    catalog = SizeCatalog.load({})
    assert catalog.list_images() == frozenset()
    assert len(catalog) == 0


def test_load_accepts_dimensions_values() -> None:
    """Test loading Dimensions values directly."""
    catalog = SizeCatalog.load({"logo": {"small": Dimensions(32, 32)}})
    assert catalog.get_variant("logo", "small") == Dimensions(32, 32)


@pytest.mark.parametrize(
    ("width", "height"),
    [(0, 10), (10, 0), (-1, 10), (10, -5)],
)
def test_load_rejects_non_positive_dimensions(width: int, height: int) -> None:
    """Test that non-positive sides name the offending entry."""
    data = copy.deepcopy(samples.TEST)
    data["god"]["medium"] = {"width": width, "height": height}

    with pytest.raises(ValidationError) as exc_info:
        SizeCatalog.load(data)

    assert exc_info.value.image_id == "god"
    assert exc_info.value.variant == "medium"
    assert "'god'" in str(exc_info.value)
    assert "'medium'" in str(exc_info.value)


@pytest.mark.parametrize(
    "value",
    [
        {"width": 10.5, "height": 10},
        {"width": "10", "height": 10},
        {"width": True, "height": 10},
        {"width": 10},
        [10, 10],
        None,
    ],
)
def test_load_rejects_malformed_variant(value: Any) -> None:
    """Test that malformed variant entries are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        SizeCatalog.load({"home": {"small": value}})

    assert exc_info.value.image_id == "home"
    assert exc_info.value.variant == "small"


def test_load_rejects_malformed_structure() -> None:
    """Test that non-mapping levels and non-string keys are rejected."""
    with pytest.raises(ValidationError):
        SizeCatalog.load([])  # type: ignore[arg-type]

    with pytest.raises(ValidationError) as exc_info:
        SizeCatalog.load({"home": "not a mapping"})
    assert exc_info.value.image_id == "home"

    with pytest.raises(ValidationError):
        SizeCatalog.load({1: {"small": {"width": 1, "height": 1}}})


def test_load_does_not_alias_input() -> None:
    """Test that later changes to the input do not leak into the catalog."""
    data = copy.deepcopy(samples.HOME)
    catalog = SizeCatalog.load(data)

    data["image_name"]["small"]["width"] = 1
    data["other"] = {}

    assert catalog.get_variant("image_name", "small") == Dimensions(300, 300)
    assert catalog.list_images() == {"image_name"}


def test_catalog_is_read_only(test_catalog: SizeCatalog) -> None:
    """Test that variant mappings cannot be modified."""
    variants = dict(test_catalog.items())["god"]
    with pytest.raises(TypeError):
        variants["tiny"] = Dimensions(1, 1)  # type: ignore[index]


def test_round_trip(test_catalog: SizeCatalog) -> None:
    """Test that serializing and reloading gives an equal catalog."""
    raw = test_catalog.to_dict()

    assert raw == samples.TEST
    assert SizeCatalog.load(raw) == test_catalog


def test_equality(test_catalog: SizeCatalog, home_catalog: SizeCatalog) -> None:
    """Test structural equality between catalogs."""
    assert test_catalog == SizeCatalog.load(samples.TEST)
    assert test_catalog != home_catalog
    assert test_catalog != samples.TEST


def test_original_violations_are_soft_by_default() -> None:
    """Test that oversized variants are reported but accepted."""
    data = {
        "banner": {
            "original": {"width": 100, "height": 100},
            "large": {"width": 120, "height": 80},
            "small": {"width": 50, "height": 50},
        }
    }

    catalog = SizeCatalog.load(data)

    assert catalog.original_violations() == [("banner", "large")]
    assert catalog.get_variant("banner", "large") == Dimensions(120, 80)


def test_original_violations_strict() -> None:
    """Test that strict loading rejects oversized variants."""
    data = {
        "banner": {
            "original": {"width": 100, "height": 100},
            "large": {"width": 80, "height": 120},
        }
    }

    with pytest.raises(ValidationError) as exc_info:
        SizeCatalog.load(data, strict=True)

    assert exc_info.value.image_id == "banner"
    assert exc_info.value.variant == "large"


def test_samples_satisfy_original_bounds(
    test_catalog: SizeCatalog, home_catalog: SizeCatalog
) -> None:
    """Test that the sample maps keep originals largest."""
    assert test_catalog.original_violations() == []
    assert home_catalog.original_violations() == []
    SizeCatalog.load(samples.TEST, strict=True)
