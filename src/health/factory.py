"""Resolve a pet kind to its health strategy."""

from __future__ import annotations

import logging
from types import MappingProxyType

from src.data.schemas import BasePet, HealthStatus
from src.health.strategies import (
    BirdHealthStrategy,
    CatHealthStrategy,
    DogHealthStrategy,
    HealthStrategy,
)

logger = logging.getLogger(__name__)

DEFAULT_KIND = "dog"


class HealthStrategyFactory:
    """Maps species discriminants to shared strategy instances.

    One instance per strategy is built at import time and reused for
    the life of the process. Unknown kinds fall back to the dog
    strategy with a warning instead of failing.
    """

    _strategies: MappingProxyType[str, HealthStrategy] = MappingProxyType(
        {
            "dog": DogHealthStrategy(),
            "cat": CatHealthStrategy(),
            "bird": BirdHealthStrategy(),
        }
    )

    @classmethod
    def get_strategy(cls, kind: str) -> HealthStrategy:
        """Return the strategy registered for ``kind``.

        Args:
            kind: Species discriminant, e.g. ``"cat"``.

        Returns:
            The matching strategy, or the dog strategy for unknown kinds.
        """
        strategy = cls._strategies.get(kind)
        if strategy is None:
            logger.warning(
                "No health strategy found for pet kind: %s, using default", kind
            )
            return cls._strategies[DEFAULT_KIND]
        return strategy

    @classmethod
    def calculate_health(cls, pet: BasePet) -> HealthStatus:
        """Resolve the strategy for ``pet.kind`` and apply it."""
        return cls.get_strategy(pet.kind).calculate(pet)
