"""
Tests for configuration and models.
"""

import pytest
from pydantic import ValidationError

import config
from models import Agent, Customer


class TestConfig:
    """Domain bounds."""

    def test_bounds_are_exclusive_upper_limits(self):
        assert config.MAX_AGENT_ID == 1000
        assert config.MAX_AGENT_SCORE == 10000
        assert config.MAX_CUSTOMER_SCORE == 100000
        assert config.MAX_AGENTS == 1000
        assert config.MAX_CUSTOMERS == 1000000


class TestModels:
    """Field bounds apply when models are built directly."""

    def test_agent_is_frozen(self):
        agent = Agent(id=1, score=10)
        with pytest.raises(ValidationError):
            agent.score = 20

    @pytest.mark.parametrize("fields", [{"id": 0, "score": 1}, {"id": 1, "score": 10000}])
    def test_agent_bounds(self, fields):
        with pytest.raises(ValidationError):
            Agent(**fields)

    def test_customer_bounds(self):
        with pytest.raises(ValidationError):
            Customer(score=100000)
