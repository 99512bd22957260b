"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Dict, List

import pytest


def map_entities(scores: List[int]) -> List[Dict[str, Any]]:
    """Entities with ids 1..n carrying the given scores."""
    return [{"id": i + 1, "score": s} for i, s in enumerate(scores)]


def build_size_entities(size: int, score: int) -> List[Dict[str, Any]]:
    """`size` entities all carrying the same score."""
    return [{"id": i + 1, "score": score} for i in range(size)]


@pytest.fixture
def ten_customers() -> List[Dict[str, Any]]:
    """Customer set shared by most reference scenarios."""
    return map_entities([10, 10, 10, 20, 20, 30, 30, 30, 20, 60])


@pytest.fixture
def four_agents() -> List[Dict[str, Any]]:
    return [
        {"id": 1, "score": 60},
        {"id": 2, "score": 20},
        {"id": 3, "score": 95},
        {"id": 4, "score": 75},
    ]


@pytest.fixture
def six_customers() -> List[Dict[str, Any]]:
    return [
        {"id": 1, "score": 90},
        {"id": 2, "score": 20},
        {"id": 3, "score": 70},
        {"id": 4, "score": 40},
        {"id": 5, "score": 60},
        {"id": 6, "score": 10},
    ]
