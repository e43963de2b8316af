"""
Search criteria schema
Structures the filters, search term and sort key chosen by the user.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .alternative import CategoryId, CountryCode, Pricing


class SortBy(str, Enum):
    """Sort keys"""
    NAME = "name"
    COUNTRY = "country"
    CATEGORY = "category"
    TRUST_SCORE = "trustScore"


class SearchCriteria(BaseModel):
    """
    Browse criteria

    Every filter is optional; an empty list, False or a blank search term
    disables it. Active filters are combined with AND.
    sort_by is a plain string: an unsupported key leaves the order unchanged.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "search_term": "mail",
                "categories": ["email"],
                "countries": ["de", "ch"],
                "pricing": ["free", "freemium"],
                "open_source_only": True,
                "sort_by": "trustScore",
            }
        }
    )

    search_term: str = Field(
        default="",
        description="Free-text search over name, description, replaced US products and tags"
    )
    categories: list[CategoryId] = Field(default_factory=list)
    countries: list[CountryCode] = Field(
        default_factory=list,
        description="Jurisdictions"
    )
    pricing: list[Pricing] = Field(default_factory=list)
    open_source_only: bool = False
    sort_by: Optional[str] = Field(
        default=None,
        description="name / country / category / trustScore",
        examples=[SortBy.NAME.value]
    )

    @property
    def is_empty(self) -> bool:
        """No filter is active"""
        return (
            not self.search_term.strip()
            and not self.categories
            and not self.countries
            and not self.pricing
            and not self.open_source_only
        )
