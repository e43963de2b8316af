"""
Catalogue Browser
Wires the agents together for the API and the UI.
"""

from typing import Optional, Sequence
from loguru import logger

from euroalt.config import settings
from euroalt.schemas.alternative import Alternative
from euroalt.schemas.criteria import SearchCriteria
from euroalt.schemas.results import (
    AlternativeView,
    BrowseResult,
    FilterResult,
    TrustScoreResult,
    ValidationReport,
    VendorComparisonView,
)
from euroalt.agents.trust_score_agent import TrustScoreAgent
from euroalt.agents.query_agent import QueryAgent, QueryInput
from euroalt.agents.validation_agent import ValidationAgent
from euroalt.domain.query import QueryEngine
from euroalt.domain.trust_score import TrustScoreEngine
from euroalt.domain.text import localized_description, localized_vendor_description
from euroalt.data_sources.catalogue import get_catalogue


class CatalogueBrowser:
    """
    Catalogue browser

    [Query]
    Search -> Category -> Jurisdiction -> Pricing -> Open source -> Sort

    [Presentation]
    Trust score (curated or calculated) -> Localised description

    The catalogue is read only; the same criteria always give the same
    result.
    """

    def __init__(self, catalogue: Optional[Sequence[Alternative]] = None):
        self.catalogue: tuple[Alternative, ...] = (
            tuple(catalogue) if catalogue is not None else get_catalogue()
        )
        self._by_id = {a.id: a for a in self.catalogue}

        score_engine = TrustScoreEngine()
        self.trust_score_agent = TrustScoreAgent(engine=score_engine)
        # Trust score sort uses the effective (curated or calculated) score
        self.query_agent = QueryAgent(
            engine=QueryEngine(score_fn=score_engine.effective_score)
        )
        self.validation_agent = ValidationAgent()

        self.logger = logger.bind(component="CatalogueBrowser")

    def browse(
        self,
        criteria: Optional[SearchCriteria] = None,
        language: Optional[str] = None,
    ) -> BrowseResult:
        """
        Entries matching the criteria, ready for display.

        Args:
            criteria: filters, search term, sort key (None: everything)
            language: description language (default: settings)

        Returns:
            BrowseResult: visible entries in display order
        """
        criteria = criteria or SearchCriteria()
        language = language or settings.DEFAULT_LANGUAGE

        matches = self.query_agent.run(
            QueryInput(catalogue=self.catalogue, criteria=criteria)
        )
        items = [self._to_view(a, language) for a in matches]

        self.logger.info(
            f"Browse: {len(items)}/{len(self.catalogue)} entries "
            f"(sort={criteria.sort_by})"
        )

        return BrowseResult(
            criteria=criteria,
            language=language,
            total_count=len(self.catalogue),
            filtered_count=len(items),
            items=items,
        )

    def get(
        self, alternative_id: str, language: Optional[str] = None
    ) -> Optional[AlternativeView]:
        """Single entry, or None"""
        alternative = self._by_id.get(alternative_id)
        if alternative is None:
            return None
        return self._to_view(alternative, language or settings.DEFAULT_LANGUAGE)

    def trust_score(self, alternative_id: str) -> Optional[TrustScoreResult]:
        alternative = self._by_id.get(alternative_id)
        if alternative is None:
            return None
        return self.trust_score_agent.run(alternative)

    def explain(
        self, alternative_id: str, criteria: SearchCriteria
    ) -> Optional[FilterResult]:
        """Which conditions an entry passes or fails"""
        alternative = self._by_id.get(alternative_id)
        if alternative is None:
            return None
        return self.query_agent.engine.filter(alternative, criteria)

    def validate(self) -> ValidationReport:
        return self.validation_agent.run(self.catalogue)

    def _to_view(self, alternative: Alternative, language: str) -> AlternativeView:
        trust = self.trust_score_agent.run(alternative)

        vendors = [
            VendorComparisonView(
                id=v.id,
                name=v.name,
                status=v.trust_score_status,
                trust_score=v.trust_score,
                description=localized_vendor_description(v, language),
            )
            for v in alternative.us_vendor_comparisons
        ]

        return AlternativeView(
            alternative=alternative,
            effective_score=trust.score,
            trust=trust,
            description=localized_description(alternative, language),
            vendor_comparisons=vendors,
        )
