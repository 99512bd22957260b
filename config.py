"""Configuration: domain bounds for agents and customers."""

# Exclusive upper bounds; every id, score and count must also be > 0
MAX_AGENT_ID = 1000
MAX_AGENT_SCORE = 10000
MAX_AGENTS = 1000
MAX_CUSTOMER_SCORE = 100000
MAX_CUSTOMERS = 1000000
