"""
EuroAlt agent package
Each agent has one responsibility and fixed input/output schemas.
"""

from .base import BaseAgent
from .trust_score_agent import TrustScoreAgent
from .query_agent import QueryAgent, QueryInput
from .validation_agent import ValidationAgent

__all__ = [
    "BaseAgent",
    "TrustScoreAgent",
    "QueryAgent",
    "QueryInput",
    "ValidationAgent",
]
