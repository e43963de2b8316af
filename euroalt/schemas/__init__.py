"""
EuroAlt schema package
Catalogue records and the inputs/outputs of every layer.
"""

from .alternative import (
    Alternative,
    ActionLink,
    CategoryId,
    CountryCode,
    LocalizedDescriptions,
    OpenSourceLevel,
    Pricing,
    Reservation,
    ReservationSeverity,
    TrustScoreBreakdown,
    TrustScoreStatus,
    USVendorComparison,
    PRIMARY_PRIVACY_TAGS,
    SECONDARY_PRIVACY_TAGS,
)
from .criteria import SearchCriteria, SortBy
from .results import (
    AlternativeView,
    BrowseResult,
    FilterResult,
    TrustScoreResult,
    TrustScoreSource,
    ValidationReport,
    VendorComparisonView,
)

__all__ = [
    "Alternative",
    "ActionLink",
    "CategoryId",
    "CountryCode",
    "LocalizedDescriptions",
    "OpenSourceLevel",
    "Pricing",
    "Reservation",
    "ReservationSeverity",
    "TrustScoreBreakdown",
    "TrustScoreStatus",
    "USVendorComparison",
    "PRIMARY_PRIVACY_TAGS",
    "SECONDARY_PRIVACY_TAGS",
    "SearchCriteria",
    "SortBy",
    "AlternativeView",
    "BrowseResult",
    "FilterResult",
    "TrustScoreResult",
    "TrustScoreSource",
    "ValidationReport",
    "VendorComparisonView",
]
