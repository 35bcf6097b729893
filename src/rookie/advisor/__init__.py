"""Remote move-advisor client, fallback rule and Qt worker bridge."""

from rookie.advisor.client import AdvisorClient, AdvisorError
from rookie.advisor.config import AdvisorConfig
from rookie.advisor.fallback import resolve_advisor_move, suggest_move

__all__ = [
    "AdvisorClient",
    "AdvisorConfig",
    "AdvisorError",
    "resolve_advisor_move",
    "suggest_move",
]
