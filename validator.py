"""Input validation and parsing for agents, customers and away ids."""

from collections.abc import Mapping
from typing import Any, List, Optional

from config import (
    MAX_AGENT_ID,
    MAX_AGENT_SCORE,
    MAX_AGENTS,
    MAX_CUSTOMER_SCORE,
    MAX_CUSTOMERS,
)
from errors import AwayCountError, RangeError, ShapeError
from models import Agent, Customer


def _field(entry: Any, name: str) -> Any:
    """Read `name` from a mapping or from an attribute."""
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def whole_number(value: Any) -> Optional[int]:
    """Return value as int if it's an integral number (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _in_range(value: Any, upper: int) -> bool:
    number = whole_number(value)
    return number is not None and 0 < number < upper


def is_valid_agent(agent: Any) -> bool:
    return (
        agent is not None
        and _in_range(_field(agent, "id"), MAX_AGENT_ID)
        and _in_range(_field(agent, "score"), MAX_AGENT_SCORE)
    )


def is_valid_customer(customer: Any) -> bool:
    return customer is not None and _in_range(_field(customer, "score"), MAX_CUSTOMER_SCORE)


def validate_inputs(agents: Any, customers: Any, away_agent_ids: Any) -> None:
    """
    Reject malformed or out-of-range input, raising an InvalidInput subclass.

    Checks run in order and the first failure wins: parameter shape, entry
    format, agent count, customer count, then the away count.
    """
    if not all(isinstance(p, (list, tuple)) for p in (agents, customers, away_agent_ids)):
        raise ShapeError("All parameters must be arrays.")

    if not all(is_valid_agent(a) for a in agents) or not all(
        is_valid_customer(c) for c in customers
    ):
        raise RangeError("Invalid data format.")

    n = len(agents)
    m = len(customers)
    t = len(away_agent_ids)

    if n <= 0 or n >= MAX_AGENTS:
        raise RangeError(f"Number of agents must be between 1 and {MAX_AGENTS - 1}. Found: {n}")
    if m <= 0 or m >= MAX_CUSTOMERS:
        raise RangeError(
            f"Number of customers must be between 1 and {MAX_CUSTOMERS - 1}. Found: {m}"
        )
    if t > n // 2:
        raise AwayCountError(f"Number of agents away cannot exceed {n // 2}. Found: {t}")


def parse_agents(agents: Any) -> List[Agent]:
    """
    Convert validated agent entries into Agent models (input order kept).

    Bounds were already enforced by validate_inputs, so models are built
    without re-validation.
    """
    return [
        Agent.model_construct(
            id=whole_number(_field(a, "id")), score=whole_number(_field(a, "score"))
        )
        for a in agents
    ]


def parse_customers(customers: Any) -> List[Customer]:
    """Convert validated customer entries into Customer models, unvalidated (see parse_agents)."""
    return [
        Customer.model_construct(
            id=whole_number(_field(c, "id")), score=whole_number(_field(c, "score"))
        )
        for c in customers
    ]
