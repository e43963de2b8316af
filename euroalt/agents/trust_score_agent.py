"""
Trust Score Agent
Resolves the trust score of a catalogue entry.
"""

from .base import BaseAgent
from euroalt.schemas.alternative import Alternative
from euroalt.schemas.results import TrustScoreResult
from euroalt.domain.trust_score import TrustScoreEngine


class TrustScoreAgent(BaseAgent[Alternative, TrustScoreResult]):
    """
    Trust score agent

    Uses the rule-based TrustScoreEngine. A curated score on the entry
    wins over the formula.
    """

    name = "TrustScoreAgent"

    def __init__(self, engine: TrustScoreEngine | None = None):
        super().__init__()
        self.engine = engine or TrustScoreEngine()

    def _process(self, alternative: Alternative) -> TrustScoreResult:
        """Score resolution"""
        return self.engine.resolve(alternative)
