"""Shared fixtures for the catalog tests."""

import pytest

from catdistribution.catalog.controller import CatalogController
from catdistribution.catalog.schemas import Cat
from catdistribution.catalog.store import CatStore


def make_cat(name: str, age: int, **fields) -> Cat:
    fields.setdefault("id", name.lower())
    return Cat(name=name, age=age, **fields)


@pytest.fixture
def cats():
    return [
        make_cat("Mimi", 1, breed="Siamese", gender="F", weight=2.9),
        make_cat("Tom", 5, breed="British Shorthair", gender="M", weight=5.4),
        make_cat("luna", 3, breed="Ragdoll", gender="F", weight=4.1),
        make_cat("Garfield", 12, breed="Persian", gender="M", weight=7.8),
        make_cat("Tomasina", 5, breed="Maine Coon", description="Loves tuna"),
    ]


@pytest.fixture
def store(cats):
    return CatStore(cats)


@pytest.fixture
def controller(store):
    c = CatalogController(store, page_size=2, generation_interval_ms=10)
    yield c
    c.shutdown()
