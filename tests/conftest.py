import json
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image as PilImage

from sizemap import SizeCatalog, samples


@pytest.fixture
def test_catalog() -> SizeCatalog:
    return SizeCatalog.load(samples.TEST)


@pytest.fixture
def home_catalog() -> SizeCatalog:
    return SizeCatalog.load(samples.HOME)


@pytest.fixture
def write_size_map(tmp_path: Path) -> Callable[[str, object], Path]:
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, size: tuple[int, int], directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / name
        PilImage.new("RGB", size, (200, 30, 30)).save(target, format="PNG")
        return target

    return _write
