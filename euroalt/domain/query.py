"""
Query engine
Filters, searches and sorts the in-memory catalogue.
"""

from typing import Callable, Iterable, Optional
from loguru import logger

from euroalt.schemas.alternative import Alternative
from euroalt.schemas.criteria import SearchCriteria, SortBy
from euroalt.schemas.results import FilterResult
from .text import collation_key


class QueryEngine:
    """
    Rule-based query engine

    Every active condition in the criteria must hold (AND). Inactive
    conditions (blank term, empty list, False) are skipped, so default
    criteria keep the whole catalogue. Sorting runs after filtering and is
    stable; without a supported sort key the catalogue order is kept.

    The engine does not compute trust scores. Sorting by trust score uses
    the injected score_fn. Without one, only curated trust_score values
    count and every other entry sorts as 0, so a calculated 8 ranks below
    a curated 2. Pass TrustScoreEngine().effective_score (as
    CatalogueBrowser does) to sort by the score users actually see.
    """

    def __init__(self, score_fn: Optional[Callable[[Alternative], float]] = None):
        # Condition registry: criteria field -> check function
        self._filters: dict[str, Callable] = {
            "search_term": self._check_search_term,
            "categories": self._check_categories,
            "countries": self._check_countries,
            "pricing": self._check_pricing,
            "open_source_only": self._check_open_source,
        }
        self._score_fn = score_fn or self._curated_score

        # Sort key -> (key function, descending)
        self._sort_keys: dict[str, tuple[Callable, bool]] = {
            SortBy.NAME.value: (lambda a: collation_key(a.name), False),
            SortBy.COUNTRY.value: (lambda a: collation_key(a.country), False),
            SortBy.CATEGORY.value: (lambda a: collation_key(a.category), False),
            SortBy.TRUST_SCORE.value: (lambda a: self._score_fn(a), True),
        }

    def query(
        self, catalogue: Iterable[Alternative], criteria: SearchCriteria
    ) -> list[Alternative]:
        """
        Runs the filter pipeline and sorts the result.

        Args:
            catalogue: entries in catalogue order
            criteria: filters, search term and sort key

        Returns:
            list[Alternative]: matching entries in display order
        """
        catalogue = list(catalogue)
        result = [a for a in catalogue if self.filter(a, criteria).passed]
        result = self.sort(result, criteria.sort_by)

        logger.debug(f"Query matched {len(result)}/{len(catalogue)} entries")
        return result

    def filter(
        self, alternative: Alternative, criteria: SearchCriteria
    ) -> FilterResult:
        """
        Checks one entry against the criteria.

        Args:
            alternative: catalogue entry
            criteria: search criteria

        Returns:
            FilterResult: passed/failed conditions and reasons
        """
        passed = []
        failed = []
        failure_reasons = {}

        for field_name, check_func in self._filters.items():
            condition_value = getattr(criteria, field_name, None)

            # Inactive condition
            if condition_value is None:
                continue
            if isinstance(condition_value, str) and not condition_value.strip():
                continue
            if isinstance(condition_value, list) and len(condition_value) == 0:
                continue
            if isinstance(condition_value, bool) and not condition_value:
                continue

            is_pass, reason = check_func(alternative, condition_value)

            if is_pass:
                passed.append(field_name)
            else:
                failed.append(field_name)
                failure_reasons[field_name] = reason

        return FilterResult(
            alternative_id=alternative.id,
            passed=not failed,
            passed_conditions=passed,
            failed_conditions=failed,
            failure_reasons=failure_reasons,
        )

    def sort(
        self, alternatives: list[Alternative], sort_by: Optional[str]
    ) -> list[Alternative]:
        """Stable sort by the given key; unknown or missing key keeps the order"""
        if sort_by not in self._sort_keys:
            if sort_by:
                logger.debug(f"Unsupported sort key {sort_by!r}, keeping order")
            return list(alternatives)

        key_func, descending = self._sort_keys[sort_by]
        if descending:
            # Negating keeps ties in their original order
            return sorted(alternatives, key=lambda a: -key_func(a))
        return sorted(alternatives, key=key_func)

    # === Conditions ===

    def _check_search_term(
        self, alternative: Alternative, term: str
    ) -> tuple[bool, str]:
        needle = term.strip().lower()

        haystack = [alternative.name, alternative.description]
        haystack.extend(alternative.replaces_us)
        haystack.extend(alternative.tags)

        for text in haystack:
            if needle in text.lower():
                return True, ""
        return False, f"No match for '{term.strip()}'"

    def _check_categories(
        self, alternative: Alternative, categories: list[str]
    ) -> tuple[bool, str]:
        if alternative.category in categories:
            return True, ""
        return False, f"Category {alternative.category} not in {list(categories)}"

    def _check_countries(
        self, alternative: Alternative, countries: list[str]
    ) -> tuple[bool, str]:
        if alternative.country in countries:
            return True, ""
        return False, f"Jurisdiction {alternative.country} not in {list(countries)}"

    def _check_pricing(
        self, alternative: Alternative, pricing: list[str]
    ) -> tuple[bool, str]:
        if alternative.pricing in pricing:
            return True, ""
        return False, f"Pricing {alternative.pricing} not in {list(pricing)}"

    def _check_open_source(
        self, alternative: Alternative, required: bool
    ) -> tuple[bool, str]:
        if not required or alternative.is_open_source:
            return True, ""
        return False, "Not open source"

    @staticmethod
    def _curated_score(alternative: Alternative) -> float:
        if alternative.trust_score is None:
            return 0
        return alternative.trust_score
