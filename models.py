"""Pydantic models for agents, customers and the balancing result."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from config import MAX_AGENT_ID, MAX_AGENT_SCORE, MAX_CUSTOMER_SCORE

# Field bounds apply to direct construction only; the pipeline builds models with
# model_construct after validator.validate_inputs has checked the same limits.


class Agent(BaseModel):
    """A service agent eligible for customers unless marked away."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, lt=MAX_AGENT_ID)
    score: int = Field(gt=0, lt=MAX_AGENT_SCORE)


class Customer(BaseModel):
    """A customer to be assigned to at most one agent. `id` is informational."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    score: int = Field(gt=0, lt=MAX_CUSTOMER_SCORE)


class BalancingResult(BaseModel):
    """Outcome of one balancing run (owner 0 = tie, no assignments or invalid input)."""

    owner_id: int = 0
    tally: Dict[int, int] = Field(default_factory=dict)  # agent id -> customers, encounter order
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_owner(self) -> bool:
        return self.owner_id > 0
