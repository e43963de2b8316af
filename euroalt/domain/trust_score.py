"""
Trust score engine
Rule-based 1-10 trust rating for catalogue entries.
"""

from types import MappingProxyType

from loguru import logger

from euroalt.schemas.alternative import (
    Alternative,
    CountryCode,
    OpenSourceLevel,
    Reservation,
    ReservationSeverity,
    TrustScoreBreakdown,
    PRIMARY_PRIVACY_TAGS,
    SECONDARY_PRIVACY_TAGS,
)
from euroalt.schemas.results import TrustScoreResult, TrustScoreSource


class TrustScoreEngine:
    """
    Rule-based trust score engine

    Five components are scored independently and summed:

        raw = jurisdiction + openness + privacy_signals
              + sovereignty_bonus - reservation_penalty

    raw is clamped to [1, 10]. A US entry that cannot be self-hosted is
    then capped at 4 (us_cap_applied is set only when the cap lowered the
    clamped score).

    The engine holds no state besides its constant tables, so the same
    entry always gives the same result.
    """

    MIN_SCORE = 1
    MAX_SCORE = 10
    US_CEILING = 4

    # Jurisdiction tiers
    EU_MEMBER_STATES = frozenset({
        "at", "be", "bg", "hr", "cy", "cz", "dk", "ee", "fi", "fr", "de",
        "gr", "hu", "ie", "it", "lv", "lt", "lu", "mt", "nl", "pl", "pt",
        "ro", "sk", "si", "es", "se",
    })
    EUROPEAN_NON_EU = frozenset({"ch", "no", "gb", "is"})

    JURISDICTION_SCORES = MappingProxyType({
        "eu_member": 4,
        "european_non_eu": 3,
        "eu": 3,
        "us": 1,
        "other": 2,
    })

    OPENNESS_SCORES = MappingProxyType({
        OpenSourceLevel.FULL.value: 3,
        OpenSourceLevel.PARTIAL.value: 2,
        OpenSourceLevel.NONE.value: 1,
    })
    # Used when no explicit openness level is given
    OPEN_SOURCE_FLAG_SCORES = MappingProxyType({True: 2, False: 1})

    PRIMARY_PRIVACY_TAGS = frozenset(PRIMARY_PRIVACY_TAGS)
    SECONDARY_PRIVACY_TAGS = frozenset(SECONDARY_PRIVACY_TAGS)

    SELF_HOSTING_BONUS = 2

    SEVERITY_WEIGHTS = MappingProxyType({
        ReservationSeverity.MAJOR.value: 3,
        ReservationSeverity.MODERATE.value: 2,
        ReservationSeverity.MINOR.value: 1,
    })
    DEFAULT_SEVERITY_WEIGHT = 1

    def calculate(self, alternative: Alternative) -> TrustScoreResult:
        """
        Calculates the trust score from the entry's attributes.

        Any curated trust_score on the entry is ignored here; use
        resolve() or effective_score() to honour it.

        Args:
            alternative: catalogue entry

        Returns:
            TrustScoreResult: score and breakdown
        """
        jurisdiction = self._score_jurisdiction(alternative.country)
        openness = self._score_openness(alternative)
        privacy_signals = self._score_privacy_signals(alternative.tags)
        sovereignty_bonus = self._score_sovereignty(alternative.self_hostable)
        reservation_penalty = self._reservation_penalty(alternative.reservations)

        raw = (
            jurisdiction
            + openness
            + privacy_signals
            + sovereignty_bonus
            - reservation_penalty
        )
        score = self._clamp(raw)

        # Checked after the clamp
        us_cap_applied = (
            alternative.country == CountryCode.US
            and not alternative.self_hostable
            and score > self.US_CEILING
        )
        if us_cap_applied:
            score = self.US_CEILING

        result = TrustScoreResult(
            score=score,
            breakdown=TrustScoreBreakdown(
                jurisdiction=jurisdiction,
                openness=openness,
                privacy_signals=privacy_signals,
                sovereignty_bonus=sovereignty_bonus,
                reservation_penalty=reservation_penalty,
                us_cap_applied=us_cap_applied,
            ),
            source=TrustScoreSource.CALCULATED,
        )

        logger.debug(f"Trust score for {alternative.id}: raw={raw} score={score}")
        return result

    def resolve(self, alternative: Alternative) -> TrustScoreResult:
        """
        Curated score if the entry has one, otherwise the calculated one.

        A curated score is returned as is (no clamp, no US cap) together
        with the curated breakdown, if any.
        """
        if alternative.trust_score is not None:
            return TrustScoreResult(
                score=alternative.trust_score,
                breakdown=alternative.trust_score_breakdown,
                source=TrustScoreSource.CURATED,
            )
        return self.calculate(alternative)

    def effective_score(self, alternative: Alternative) -> int:
        """Score shown to the user and used for sorting"""
        if alternative.trust_score is not None:
            return alternative.trust_score
        return self.calculate(alternative).score

    # === Components ===

    def _score_jurisdiction(self, country: str) -> int:
        if country in self.EU_MEMBER_STATES:
            return self.JURISDICTION_SCORES["eu_member"]
        if country in self.EUROPEAN_NON_EU:
            return self.JURISDICTION_SCORES["european_non_eu"]
        if country == CountryCode.EU:
            return self.JURISDICTION_SCORES["eu"]
        if country == CountryCode.US:
            return self.JURISDICTION_SCORES["us"]
        return self.JURISDICTION_SCORES["other"]

    def _score_openness(self, alternative: Alternative) -> int:
        level = alternative.open_source_level
        if level in self.OPENNESS_SCORES:
            return self.OPENNESS_SCORES[level]
        return self.OPEN_SOURCE_FLAG_SCORES[bool(alternative.is_open_source)]

    def _score_privacy_signals(self, tags: list[str]) -> int:
        """+1 per tag group with at least one match (max 2)"""
        normalized = {tag.lower() for tag in tags}

        score = 0
        if normalized & self.PRIMARY_PRIVACY_TAGS:
            score += 1
        if normalized & self.SECONDARY_PRIVACY_TAGS:
            score += 1
        return score

    def _score_sovereignty(self, self_hostable: bool) -> int:
        return self.SELF_HOSTING_BONUS if self_hostable else 0

    def _reservation_penalty(self, reservations: list[Reservation]) -> int:
        return sum(self._severity_weight(r.severity) for r in reservations)

    def _severity_weight(self, severity: str | None) -> int:
        # Unknown or missing severity counts as minor
        return self.SEVERITY_WEIGHTS.get(severity, self.DEFAULT_SEVERITY_WEIGHT)

    def _clamp(self, value: int) -> int:
        return min(self.MAX_SCORE, max(self.MIN_SCORE, value))
