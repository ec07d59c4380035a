"""Load pet catalogs from JSON or CSV files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from src.data.schemas import PET_KINDS, BasePet, pet_adapter

logger = logging.getLogger(__name__)

# Read as text so a pet named "42" is not parsed as a number.
TEXT_COLUMNS: dict[str, type] = {
    "name": str,
    "kind": str,
    "photo_url": str,
    "description": str,
}


def parse_pet(record: dict[str, Any]) -> BasePet:
    """Validate a raw record into the matching pet variant.

    Records of a known kind are validated strictly against their variant.
    Records of any other kind are kept as a plain ``BasePet`` so they can
    still be classified through the default strategy.

    Args:
        record: Mapping of field names to values.

    Returns:
        A ``DogPet``, ``CatPet``, ``BirdPet`` or ``BasePet``.

    Raises:
        pydantic.ValidationError: If the record does not fit its variant.
    """
    if record.get("kind") in PET_KINDS:
        return pet_adapter.validate_python(record)

    logger.warning(
        "Unknown pet kind %r for record id=%s", record.get("kind"), record.get("id")
    )
    return BasePet.model_validate(record)


def load_pets(path: Path) -> list[BasePet]:
    """Load and validate every pet in a catalog file.

    Supports ``.json`` files holding either a list of records or an
    ``{"rows": [...], "totalCount": n}`` envelope, and ``.csv`` files
    with one pet per row. Rows that fail validation are skipped.

    Args:
        path: Path to the catalog file.

    Returns:
        List of validated pets, in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file type is not supported, or a JSON object
            has no ``rows`` key.
    """
    if not path.exists():
        raise FileNotFoundError(f"Pet catalog not found: {path}")

    df = _read_catalog(path)
    logger.info("Loading pet catalog from %s (%d rows)", path, len(df))

    pets: list[BasePet] = []
    for record in df.to_dict(orient="records"):
        # Variant-specific columns are empty for the other kinds.
        cleaned = {k: v for k, v in record.items() if not _is_missing(v)}
        try:
            pets.append(parse_pet(cleaned))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid pet record id=%s: %s",
                cleaned.get("id"),
                exc.errors()[0]["msg"],
            )

    logger.info("Loaded %d of %d pets", len(pets), len(df))
    return pets


def _read_catalog(path: Path) -> pd.DataFrame:
    """Read a catalog file into a DataFrame.

    Args:
        path: Path to a ``.json`` or ``.csv`` catalog.

    Returns:
        DataFrame with one row per pet record.
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=TEXT_COLUMNS)
    if suffix == ".json":
        with open(path) as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            if "rows" not in payload:
                raise ValueError(f"Catalog object has no 'rows' key: {path}")
            payload = payload["rows"]
        return pd.DataFrame(payload)
    raise ValueError(f"Unsupported catalog format: {path.suffix}")


def _is_missing(value: Any) -> bool:
    """Return True for empty cells. Lists and other containers are never missing."""
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))
