"""Per-species health classification strategies."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from src.data.schemas import BasePet, BirdPet, CatPet, HealthStatus


def body_ratio(pet: BasePet) -> float:
    """Return ``weight / (height * length)``.

    Args:
        pet: Any pet with the shared measurements.

    Returns:
        The ratio, or NaN when ``height * length`` is zero.
    """
    divisor = pet.height * pet.length
    if divisor == 0:
        return math.nan
    return pet.weight / divisor


def wingspan_ratio(pet: BirdPet) -> float:
    """Return ``wingspan / length``, or NaN when ``length`` is zero."""
    if pet.length == 0:
        return math.nan
    return pet.wingspan / pet.length


def classify_body_ratio(ratio: float) -> HealthStatus:
    """Map a body ratio onto a health status.

    Outside ``[2, 5]`` is unhealthy, ``[2, 3)`` very healthy and
    ``[3, 5]`` healthy. Non-finite ratios are unhealthy.
    """
    if not math.isfinite(ratio):
        return HealthStatus.UNHEALTHY
    if ratio < 2 or ratio > 5:
        return HealthStatus.UNHEALTHY
    if ratio < 3:
        return HealthStatus.VERY_HEALTHY
    return HealthStatus.HEALTHY


class HealthStrategy(ABC):
    """Computes the health status of one species."""

    @abstractmethod
    def calculate(self, pet: BasePet) -> HealthStatus:
        """Return the health status of ``pet``."""


class DogHealthStrategy(HealthStrategy):
    """Classifies dogs by body ratio alone.

    Also serves as the default for kinds without a dedicated strategy,
    so it only reads the shared measurements.
    """

    def calculate(self, pet: BasePet) -> HealthStatus:
        return classify_body_ratio(body_ratio(pet))


class CatHealthStrategy(HealthStrategy):
    """Classifies cats by body ratio, with a veto for cats on their last life."""

    def calculate(self, pet: CatPet) -> HealthStatus:  # type: ignore[override]
        # Last life overrides any ratio.
        if pet.number_of_lives == 1:
            return HealthStatus.UNHEALTHY
        return classify_body_ratio(body_ratio(pet))


class BirdHealthStrategy(HealthStrategy):
    """Classifies birds by wingspan ratio, then feather count.

    Rules are checked in order and the first match wins:

    1. wingspan ratio below 1.5 is unhealthy, whatever the feathers.
    2. more than 200 feathers is very healthy.
    3. fewer than 100 feathers is unhealthy.
    4. anything else is healthy.
    """

    def calculate(self, pet: BirdPet) -> HealthStatus:  # type: ignore[override]
        ratio = wingspan_ratio(pet)
        if not math.isfinite(ratio) or ratio < 1.5:
            return HealthStatus.UNHEALTHY
        if pet.num_of_feathers > 200:
            return HealthStatus.VERY_HEALTHY
        if pet.num_of_feathers < 100:
            return HealthStatus.UNHEALTHY
        return HealthStatus.HEALTHY
