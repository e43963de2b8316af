"""
EuroAlt domain package
Trust scoring, catalogue queries and catalogue validation.
No I/O happens in this layer.
"""

from .trust_score import TrustScoreEngine
from .query import QueryEngine
from .validation import CatalogueValidator

__all__ = ["TrustScoreEngine", "QueryEngine", "CatalogueValidator"]
