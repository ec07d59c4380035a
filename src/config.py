"""Central application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


@dataclass(frozen=True)
class Config:
    """Central application configuration.

    Reads from environment variables with sensible defaults.
    Relative paths are resolved against the working directory.
    """

    # Paths
    data_dir: Path = field(default_factory=lambda: Path(os.getenv("DATA_DIR", "data")))
    catalog_path: Path | None = field(
        default_factory=lambda: _optional_path(os.getenv("CATALOG_PATH"))
    )
    catalog_filename: str = "pets.json"

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def catalog_file(self) -> Path:
        """Catalog to load: ``CATALOG_PATH`` if set, else under ``data_dir``."""
        if self.catalog_path is not None:
            return self.catalog_path
        return self.data_dir / self.catalog_filename


def get_config() -> Config:
    """Get application configuration.

    Returns:
        Config instance with values from environment or defaults.
    """
    return Config()
