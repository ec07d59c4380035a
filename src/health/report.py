"""Classify a catalog of pets and tabulate the results."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd
from pydantic import BaseModel, Field

from src.data.schemas import BasePet, HealthStatus
from src.health.factory import HealthStrategyFactory

logger = logging.getLogger(__name__)

STATUS_ORDER: list[str] = [status.value for status in HealthStatus]


class PetHealth(BaseModel):
    """Health status computed for a single pet."""

    pet_id: int
    name: str
    kind: str
    status: HealthStatus = Field(description="Computed health status")


def classify_pets(pets: Iterable[BasePet]) -> list[PetHealth]:
    """Compute the health status of every pet.

    Args:
        pets: Pets to classify.

    Returns:
        One ``PetHealth`` per pet, in input order.
    """
    results = [
        PetHealth(
            pet_id=pet.id,
            name=pet.name,
            kind=pet.kind,
            status=HealthStrategyFactory.calculate_health(pet),
        )
        for pet in pets
    ]
    logger.info("Classified %d pets", len(results))
    return results


def health_summary(results: list[PetHealth]) -> pd.DataFrame:
    """Count pets per kind and health status.

    Args:
        results: Output of ``classify_pets``.

    Returns:
        DataFrame indexed by kind with one column per status,
        ordered from worst to best.
    """
    if not results:
        return pd.DataFrame(columns=STATUS_ORDER, dtype="int64")

    df = pd.DataFrame(
        {
            "kind": [r.kind for r in results],
            "status": [r.status.value for r in results],
        }
    )
    table = pd.crosstab(df["kind"], df["status"])
    return table.reindex(columns=STATUS_ORDER, fill_value=0)
