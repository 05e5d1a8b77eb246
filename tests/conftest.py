"""Shared pytest fixtures for all tests."""

import pytest

from tableshape.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def people_records() -> list[dict]:
    """Small heterogeneous table with a missing boolean."""
    return [
        {"id": 1, "name": "Alice", "age": 30, "gender": True},
        {"id": 2, "name": "Bob", "age": 25, "gender": False},
        {"id": 3, "name": "Charlie", "age": 35},
    ]


@pytest.fixture
def mixed_pairs_records() -> list[dict]:
    """Two numeric and two categorical columns with known associations."""
    return [
        {"num1": 1, "num2": 2, "cat1": "A", "cat2": "X"},
        {"num1": 2, "num2": 4, "cat1": "B", "cat2": "Y"},
        {"num1": 3, "num2": 6, "cat1": "B", "cat2": "X"},
    ]
