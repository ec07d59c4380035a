"""Shared test fixtures for the pet health test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.data.schemas import BasePet, BirdPet, CatPet, DogPet
from tests.factories import make_bird, make_cat, make_dog


@pytest.fixture
def sample_dog() -> DogPet:
    """A dog with body ratio 3.0 (healthy)."""
    return make_dog(300, 50, 2)


@pytest.fixture
def sample_cat() -> CatPet:
    """A cat with body ratio 3.0 and seven lives (healthy)."""
    return make_cat(300, 50, 2, 7)


@pytest.fixture
def sample_bird() -> BirdPet:
    """A bird with wingspan ratio 2.0 and 150 feathers (healthy)."""
    return make_bird(200, 100, 150)


@pytest.fixture
def sample_hamster() -> BasePet:
    """A pet of a kind with no dedicated strategy, body ratio 2.0."""
    return BasePet(
        id=4,
        name="Test Hamster",
        kind="hamster",
        weight=200,
        height=50,
        length=2,
    )


@pytest.fixture
def catalog_records() -> list[dict]:
    """Raw catalog records covering every kind."""
    return [
        {"id": 1, "name": "Rex", "kind": "dog", "weight": 200, "height": 50, "length": 2},
        {
            "id": 2,
            "name": "Mimi",
            "kind": "cat",
            "weight": 300,
            "height": 50,
            "length": 2,
            "number_of_lives": 1,
        },
        {
            "id": 3,
            "name": "Kiwi",
            "kind": "bird",
            "weight": 100,
            "height": 10,
            "length": 100,
            "wingspan": 200,
            "num_of_feathers": 250,
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_records: list[dict]) -> Path:
    """Write the catalog records to a JSON file."""
    path = tmp_path / "pets.json"
    path.write_text(json.dumps(catalog_records))
    return path
