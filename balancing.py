"""
Balanced owner selection: assign customers to agents by score, pick the unique busiest agent.

Customers are swept in ascending score order against agents in ascending score order;
each customer goes to the lowest-scoring available agent whose score is >= its own.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from errors import InvalidInput
from models import Agent, BalancingResult, Customer
from validator import parse_agents, parse_customers, validate_inputs, whole_number

logger = logging.getLogger(__name__)


def filter_available_agents(
    agents: Sequence[Agent], away_agent_ids: Iterable[int]
) -> List[Agent]:
    """Return agents not marked away, in input order. Non-integer away ids match nothing."""
    away = {whole_number(i) for i in away_agent_ids} - {None}
    return [a for a in agents if a.id not in away]


def sort_agents_by_score(agents: Sequence[Agent]) -> List[Agent]:
    """Ascending by score. Relative order of equal scores is not guaranteed."""
    return sorted(agents, key=lambda a: a.score)


def sort_customers_by_score(customers: Sequence[Customer]) -> List[Customer]:
    """Ascending by score. Relative order of equal scores is not guaranteed."""
    return sorted(customers, key=lambda c: c.score)


def sweep_customers(
    sorted_agents: Sequence[Agent],
    sorted_customers: Iterable[Customer],
) -> Iterator[Tuple[Customer, Optional[Agent], int]]:
    """
    Yield (customer, agent or None, cursor) for each customer, in order.

    Both inputs must be sorted ascending by score. The cursor never moves back,
    so the whole sweep is O(n + m) and advances at most len(sorted_agents) times.
    Once it runs off the end, every remaining customer is unassigned.
    """
    cursor = 0
    total = len(sorted_agents)
    for customer in sorted_customers:
        while cursor < total and sorted_agents[cursor].score < customer.score:
            cursor += 1
        agent = sorted_agents[cursor] if cursor < total else None
        yield customer, agent, cursor


def distribute_customers(
    sorted_agents: Sequence[Agent],
    sorted_customers: Iterable[Customer],
) -> Dict[int, int]:
    """Build the tally: agent id -> customers assigned, in first-assignment order."""
    tally: Dict[int, int] = {}
    for _, agent, _ in sweep_customers(sorted_agents, sorted_customers):
        if agent is not None:
            tally[agent.id] = tally.get(agent.id, 0) + 1
    return tally


def find_agent_with_max_customers(tally: Dict[int, int]) -> int:
    """Return the agent id with the unique highest count, or 0 on a tie or empty tally."""
    max_customers = 0
    owner = 0
    is_tie = False
    for agent_id, count in tally.items():
        if count > max_customers:
            max_customers = count
            owner = agent_id
            is_tie = False
        elif count == max_customers and max_customers > 0:
            is_tie = True
    return 0 if is_tie else owner


def balance(agents: Any, customers: Any, away_agent_ids: Any) -> BalancingResult:
    """
    Run the full pipeline and return a BalancingResult.

    Invalid input never raises: the result carries the reason in `error`
    and `owner_id` is 0. The caller's collections are not mutated.
    """
    try:
        validate_inputs(agents, customers, away_agent_ids)
    except InvalidInput as e:
        return BalancingResult(owner_id=0, error=str(e))

    available = filter_available_agents(parse_agents(agents), away_agent_ids)
    sorted_agents = sort_agents_by_score(available)
    sorted_customers = sort_customers_by_score(parse_customers(customers))

    tally = distribute_customers(sorted_agents, sorted_customers)
    owner_id = find_agent_with_max_customers(tally)
    logger.debug(
        "Balanced %d customers over %d available agents: assigned=%d owner=%s",
        len(sorted_customers),
        len(sorted_agents),
        sum(tally.values()),
        owner_id,
    )
    return BalancingResult(owner_id=owner_id, tally=tally)


def compute_balanced_owner(agents: Any, customers: Any, away_agent_ids: Any) -> int:
    """Owner id for the inputs, or 0 on a tie, no assignments or invalid input (logged)."""
    result = balance(agents, customers, away_agent_ids)
    if not result.ok:
        logger.error("%s", result.error)
        return 0
    return result.owner_id
