"""
EuroAlt tests - Trust Score Engine
"""

import itertools

import pytest

from euroalt.domain.trust_score import TrustScoreEngine
from euroalt.schemas.alternative import Reservation, TrustScoreBreakdown
from euroalt.schemas.results import TrustScoreSource

from factories import build_alternative


def _reservations(*severities):
    return [
        Reservation(id=f"r{i}", text="concern", severity=s)
        for i, s in enumerate(severities)
    ]


class TestTrustScoreEngine:
    """Trust score formula"""

    def setup_method(self):
        self.engine = TrustScoreEngine()

    def test_worked_example(self):
        """de / full / encryption+privacy -> 8"""
        alternative = build_alternative(
            country="de",
            open_source_level="full",
            tags=["encryption", "privacy"],
            self_hostable=False,
            reservations=[],
        )

        result = self.engine.calculate(alternative)

        assert result.breakdown == TrustScoreBreakdown(
            jurisdiction=4,
            openness=3,
            privacy_signals=1,
            sovereignty_bonus=0,
            reservation_penalty=0,
            us_cap_applied=False,
        )
        assert result.score == 8
        assert result.source == TrustScoreSource.CALCULATED

    @pytest.mark.parametrize("country,expected", [
        ("de", 4),
        ("fr", 4),
        ("se", 4),
        ("ch", 3),
        ("gb", 3),
        ("no", 3),
        ("is", 3),
        ("eu", 3),
        ("us", 1),
        ("ca", 2),
    ])
    def test_jurisdiction_tiers(self, country, expected):
        """Fixed jurisdiction lookup"""
        alternative = build_alternative(country=country)
        assert self.engine.calculate(alternative).breakdown.jurisdiction == expected

    @pytest.mark.parametrize("level,is_open_source,expected", [
        ("full", False, 3),
        ("partial", True, 2),
        ("none", True, 1),
        (None, True, 2),
        (None, False, 1),
    ])
    def test_openness(self, level, is_open_source, expected):
        """Explicit level wins over the open-source flag"""
        alternative = build_alternative(
            open_source_level=level, is_open_source=is_open_source
        )
        assert self.engine.calculate(alternative).breakdown.openness == expected

    def test_privacy_tags_case_insensitive(self):
        """GDPR counts like gdpr"""
        alternative = build_alternative(tags=["GDPR"])
        assert self.engine.calculate(alternative).breakdown.privacy_signals == 1

    def test_privacy_primary_group_capped(self):
        """All five primary tags score the same as one"""
        one = build_alternative(tags=["privacy"])
        all_five = build_alternative(
            tags=["privacy", "gdpr", "encryption", "zero-knowledge", "no-logs"]
        )

        assert self.engine.calculate(one).breakdown.privacy_signals == 1
        assert self.engine.calculate(all_five).breakdown.privacy_signals == 1

    def test_privacy_both_groups(self):
        """One point per group, 2 at most"""
        alternative = build_alternative(
            tags=["encryption", "no-logs", "offline", "federated", "local"]
        )
        assert self.engine.calculate(alternative).breakdown.privacy_signals == 2

    def test_unrelated_tags_ignored(self):
        """Tags outside both groups score nothing"""
        alternative = build_alternative(tags=["ad-free", "privacy-friendly"])
        assert self.engine.calculate(alternative).breakdown.privacy_signals == 0

    def test_sovereignty_bonus(self):
        """Self-hosting adds 2"""
        hosted = build_alternative(self_hostable=True)
        assert self.engine.calculate(hosted).breakdown.sovereignty_bonus == 2

    def test_reservation_penalty(self):
        """major 3 + moderate 2 + minor 1"""
        alternative = build_alternative(
            reservations=_reservations("major", "moderate", "minor")
        )
        assert self.engine.calculate(alternative).breakdown.reservation_penalty == 6

    def test_unknown_severity_counts_as_minor(self):
        """Unknown or missing severity weighs 1"""
        alternative = build_alternative(
            reservations=_reservations("critical", None)
        )
        assert self.engine.calculate(alternative).breakdown.reservation_penalty == 2

    def test_clamped_to_minimum(self):
        """Large penalties stop at 1"""
        alternative = build_alternative(
            country="ca",
            reservations=_reservations("major", "major", "major"),
        )
        result = self.engine.calculate(alternative)

        assert result.breakdown.reservation_penalty == 9
        assert result.score == 1

    def test_clamped_to_maximum(self):
        """4 + 3 + 2 + 2 = 11 stops at 10"""
        alternative = build_alternative(
            country="de",
            open_source_level="full",
            tags=["privacy", "federated"],
            self_hostable=True,
        )
        assert self.engine.calculate(alternative).score == 10


class TestUSCeiling:
    """US entries that cannot be self-hosted"""

    def setup_method(self):
        self.engine = TrustScoreEngine()

    def test_cap_applied(self):
        """1 + 3 + 2 = 6 -> 4"""
        alternative = build_alternative(
            country="us",
            open_source_level="full",
            tags=["encryption", "offline"],
            self_hostable=False,
        )
        result = self.engine.calculate(alternative)

        assert result.score == 4
        assert result.breakdown.us_cap_applied is True

    def test_self_hostable_not_capped(self):
        """1 + 3 + 1 + 2 = 7 stays 7"""
        alternative = build_alternative(
            country="us",
            open_source_level="full",
            tags=["encryption"],
            self_hostable=True,
        )
        result = self.engine.calculate(alternative)

        assert result.score == 7
        assert result.breakdown.us_cap_applied is False

    def test_exactly_four_not_flagged(self):
        """1 + 3 = 4: nothing to cap"""
        alternative = build_alternative(country="us", open_source_level="full")
        result = self.engine.calculate(alternative)

        assert result.score == 4
        assert result.breakdown.us_cap_applied is False

    def test_below_four_not_flagged(self):
        alternative = build_alternative(country="us")
        result = self.engine.calculate(alternative)

        assert result.score == 2
        assert result.breakdown.us_cap_applied is False


class TestTrustScoreProperties:
    """Properties over many inputs"""

    def setup_method(self):
        self.engine = TrustScoreEngine()

    def _all_combinations(self):
        countries = ["de", "ch", "eu", "us", "ca"]
        levels = ["full", "partial", "none", None]
        tag_sets = [[], ["privacy"], ["offline"], ["GDPR", "local"]]
        hosting = [True, False]
        reservations = [[], ["minor"], ["major", "moderate"], ["major"] * 4]

        for country, level, tags, hosted, severities in itertools.product(
            countries, levels, tag_sets, hosting, reservations
        ):
            yield build_alternative(
                country=country,
                open_source_level=level,
                is_open_source=level is not None,
                tags=tags,
                self_hostable=hosted,
                reservations=_reservations(*severities),
            )

    def test_score_always_in_range(self):
        """Every score is an int in [1, 10]"""
        for alternative in self._all_combinations():
            score = self.engine.calculate(alternative).score
            assert isinstance(score, int)
            assert 1 <= score <= 10

    def test_us_not_self_hostable_never_above_four(self):
        for alternative in self._all_combinations():
            if alternative.country == "us" and not alternative.self_hostable:
                assert self.engine.calculate(alternative).score <= 4

    def test_idempotent(self):
        """Same entry, same result"""
        for alternative in self._all_combinations():
            assert self.engine.calculate(alternative) == self.engine.calculate(alternative)


class TestEffectiveScore:
    """Curated scores override the formula"""

    def setup_method(self):
        self.engine = TrustScoreEngine()

    def test_curated_score_not_capped(self):
        """trust_score=7 on a US entry stays 7"""
        alternative = build_alternative(country="us", trust_score=7)

        assert self.engine.effective_score(alternative) == 7

    def test_calculated_when_not_curated(self):
        alternative = build_alternative(
            country="de", open_source_level="full", tags=["privacy"]
        )
        assert self.engine.effective_score(alternative) == 8

    def test_resolve_curated(self):
        """Curated score comes with the curated breakdown"""
        breakdown = TrustScoreBreakdown(
            jurisdiction=3,
            openness=2,
            privacy_signals=1,
            sovereignty_bonus=0,
            reservation_penalty=0,
        )
        alternative = build_alternative(
            country="no", trust_score=7, trust_score_breakdown=breakdown
        )

        result = self.engine.resolve(alternative)

        assert result.score == 7
        assert result.breakdown == breakdown
        assert result.source == TrustScoreSource.CURATED

    def test_resolve_curated_without_breakdown(self):
        alternative = build_alternative(trust_score=9)
        result = self.engine.resolve(alternative)

        assert result.score == 9
        assert result.breakdown is None

    def test_resolve_calculated(self):
        alternative = build_alternative()
        result = self.engine.resolve(alternative)

        assert result == self.engine.calculate(alternative)
