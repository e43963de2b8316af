"""
EuroAlt API router
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from euroalt.config import settings
from euroalt.schemas.alternative import Alternative, CategoryId, CountryCode, Pricing
from euroalt.schemas.criteria import SearchCriteria
from euroalt.schemas.results import (
    AlternativeView,
    BrowseResult,
    FilterResult,
    TrustScoreResult,
    ValidationReport,
)
from euroalt.pipeline import CatalogueBrowser

router = APIRouter()

_browser: CatalogueBrowser | None = None


def get_browser() -> CatalogueBrowser:
    """Shared browser over the process-wide catalogue"""
    global _browser
    if _browser is None:
        _browser = CatalogueBrowser()
    return _browser


def get_criteria(
    q: str = Query(default="", description="Free-text search"),
    category: list[CategoryId] = Query(default=[]),
    country: list[CountryCode] = Query(default=[]),
    pricing: list[Pricing] = Query(default=[]),
    open_source_only: bool = False,
    sort_by: Optional[str] = Query(
        default=None, description="name / country / category / trustScore"
    ),
) -> SearchCriteria:
    """Query string -> SearchCriteria"""
    return SearchCriteria(
        search_term=q,
        categories=category,
        countries=country,
        pricing=pricing,
        open_source_only=open_source_only,
        sort_by=sort_by,
    )


@router.get("/alternatives", response_model=BrowseResult)
async def browse_alternatives(
    criteria: SearchCriteria = Depends(get_criteria),
    lang: Optional[str] = None,
    browser: CatalogueBrowser = Depends(get_browser),
) -> BrowseResult:
    """
    Browse the catalogue

    - free-text search (name, description, replaced US products, tags)
    - category / jurisdiction / pricing / open-source filters
    - sort by name, jurisdiction, category or trust score
    """
    try:
        return browser.browse(criteria, language=lang or settings.DEFAULT_LANGUAGE)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Browse failed: {str(e)}")


@router.get("/alternatives/{alternative_id}", response_model=AlternativeView)
async def get_alternative(
    alternative_id: str,
    lang: Optional[str] = None,
    browser: CatalogueBrowser = Depends(get_browser),
) -> AlternativeView:
    """Single catalogue entry"""
    view = browser.get(alternative_id, language=lang)
    if view is None:
        raise HTTPException(status_code=404, detail=f"Unknown alternative: {alternative_id}")
    return view


@router.get("/alternatives/{alternative_id}/trust-score", response_model=TrustScoreResult)
async def get_trust_score(
    alternative_id: str,
    browser: CatalogueBrowser = Depends(get_browser),
) -> TrustScoreResult:
    """Trust score with breakdown"""
    result = browser.trust_score(alternative_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Unknown alternative: {alternative_id}")
    return result


@router.get("/alternatives/{alternative_id}/filter", response_model=FilterResult)
async def explain_filter(
    alternative_id: str,
    criteria: SearchCriteria = Depends(get_criteria),
    browser: CatalogueBrowser = Depends(get_browser),
) -> FilterResult:
    """Why an entry is or is not in the result for these criteria"""
    result = browser.explain(alternative_id, criteria)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Unknown alternative: {alternative_id}")
    return result


@router.get("/validation", response_model=ValidationReport)
async def validate_catalogue(
    browser: CatalogueBrowser = Depends(get_browser),
) -> ValidationReport:
    """Integrity report of the loaded catalogue"""
    return browser.validate()


@router.get("/schema/alternative")
async def get_alternative_schema():
    """Catalogue entry schema"""
    return Alternative.model_json_schema()


@router.get("/schema/criteria")
async def get_criteria_schema():
    """Search criteria schema"""
    return SearchCriteria.model_json_schema()
