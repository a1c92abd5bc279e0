"""Configuration management for sizemap."""

import os
from pathlib import Path

from dotenv import load_dotenv

from sizemap.constants import DEFAULT_SCALING

# Load environment variables from .env file
load_dotenv()


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


class Config:
    """Application configuration."""

    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Catalog
    CATALOG_PATH: Path | None = _optional_path("SIZEMAP_CATALOG_PATH")
    STRICT: bool = os.getenv("SIZEMAP_STRICT", "false").lower() == "true"
    MERGE_POLICY: str = os.getenv("SIZEMAP_MERGE_POLICY", "error").lower()

    # Scanning
    SCALING: str = os.getenv("SIZEMAP_SCALING", DEFAULT_SCALING)


config = Config()
