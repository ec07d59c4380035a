"""Pydantic models for pet records and health status."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class HealthStatus(str, Enum):
    """Health category assigned to a pet, worst to best."""

    UNHEALTHY = "unhealthy"
    HEALTHY = "healthy"
    VERY_HEALTHY = "very healthy"


class BasePet(BaseModel):
    """Attributes shared by every pet in the catalog.

    Used directly for records whose ``kind`` is not a known species;
    known species use the narrower variants below.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique catalog identifier")
    name: str = Field(description="Display name")
    kind: str = Field(description="Species discriminant")
    weight: float = Field(gt=0, description="Body weight")
    height: float = Field(gt=0, description="Shoulder height")
    length: float = Field(gt=0, description="Body length")
    photo_url: str = Field(default="", description="Photo URL or path")
    description: str = Field(default="", description="Free-text description")


class DogPet(BasePet):
    """A dog. Carries only the shared attributes."""

    kind: Literal["dog"] = "dog"


class CatPet(BasePet):
    """A cat, with its remaining number of lives."""

    kind: Literal["cat"] = "cat"
    number_of_lives: int = Field(gt=0, description="Remaining lives, usually 1-9")


class BirdPet(BasePet):
    """A bird, with wingspan and feather count."""

    kind: Literal["bird"] = "bird"
    wingspan: float = Field(gt=0, description="Wing tip to wing tip")
    num_of_feathers: int = Field(gt=0, description="Feather count")


Pet = Annotated[DogPet | CatPet | BirdPet, Field(discriminator="kind")]

PET_KINDS: frozenset[str] = frozenset({"dog", "cat", "bird"})

pet_adapter: TypeAdapter[DogPet | CatPet | BirdPet] = TypeAdapter(Pet)
