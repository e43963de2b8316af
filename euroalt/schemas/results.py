"""
Result schemas
Outputs of the scoring, query and validation layers.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, computed_field

from .alternative import Alternative, TrustScoreBreakdown
from .criteria import SearchCriteria


class TrustScoreSource(str, Enum):
    """Where a trust score came from"""
    CALCULATED = "calculated"
    CURATED = "curated"


class TrustScoreResult(BaseModel):
    """
    TrustScoreEngine output

    breakdown is None for a curated score without a curated breakdown.
    """
    model_config = ConfigDict(use_enum_values=True, frozen=True)

    score: int = Field(description="Trust score (1-10)")
    breakdown: Optional[TrustScoreBreakdown] = None
    source: TrustScoreSource = TrustScoreSource.CALCULATED


class FilterResult(BaseModel):
    """
    QueryEngine per-entry output
    Which conditions the entry passed or failed, and why.
    """
    alternative_id: str
    passed: bool
    passed_conditions: list[str] = Field(
        default_factory=list,
        description="Conditions the entry satisfies"
    )
    failed_conditions: list[str] = Field(
        default_factory=list,
        description="Conditions the entry fails"
    )
    failure_reasons: dict[str, str] = Field(
        default_factory=dict,
        description="Failure reason per condition",
        examples=[{"countries": "Jurisdiction us not in ['de', 'fr']"}]
    )


class VendorComparisonView(BaseModel):
    """US product next to the alternative"""
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    trust_score: Optional[float] = None
    description: Optional[str] = None


class AlternativeView(BaseModel):
    """An entry as shown to the user"""
    alternative: Alternative
    effective_score: int = Field(description="Curated score, or the calculated one")
    trust: TrustScoreResult
    description: str = Field(description="Description in the requested language")
    vendor_comparisons: list[VendorComparisonView] = Field(default_factory=list)


class BrowseResult(BaseModel):
    """
    CatalogueBrowser output
    Visible entries in display order.
    """
    created_at: datetime = Field(default_factory=datetime.now)
    criteria: SearchCriteria
    language: str = "en"
    total_count: int = Field(description="Catalogue size")
    filtered_count: int = Field(description="Entries matching the criteria")
    items: list[AlternativeView] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """
    Catalogue validation output
    All failures of one pass, not just the first.
    """
    failures: list[str] = Field(default_factory=list)
    compared_vendors: int = 0
    alternative_count: int = 0

    @computed_field
    @property
    def passed(self) -> bool:
        return not self.failures
