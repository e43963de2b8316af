"""
EuroAlt tests - Catalogue loading and entry schema
"""

import json

import pytest
from pydantic import ValidationError

from euroalt.data_sources.catalogue import (
    BUNDLED_CATALOGUE,
    CatalogueLoader,
    CatalogueLoadError,
)
from euroalt.schemas.alternative import Alternative, USVendorComparison

from factories import build_alternative


MINIMAL_ENTRY = {
    "id": "tuta",
    "name": "Tuta",
    "description": "Encrypted email",
    "website": "https://tuta.com",
    "country": "de",
    "category": "email",
    "pricing": "freemium",
    "isOpenSource": True,
}


class TestCatalogueLoader:
    """Catalogue file loading"""

    def test_bundled_catalogue(self):
        catalogue = CatalogueLoader().load()

        assert isinstance(catalogue, tuple)
        assert len(catalogue) == 10
        assert catalogue[0].id == "tuta"
        assert catalogue[-1].id == "signal"
        assert CatalogueLoader().path == BUNDLED_CATALOGUE

    def test_wrapped_and_bare_list(self, tmp_path):
        wrapped = tmp_path / "wrapped.json"
        wrapped.write_text(json.dumps({"alternatives": [MINIMAL_ENTRY]}), encoding="utf-8")
        bare = tmp_path / "bare.json"
        bare.write_text(json.dumps([MINIMAL_ENTRY]), encoding="utf-8")

        assert CatalogueLoader(wrapped).load() == CatalogueLoader(bare).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogueLoadError, match="not found"):
            CatalogueLoader(tmp_path / "nope.json").load()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogueLoadError):
            CatalogueLoader(path).load()

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"entries": []}), encoding="utf-8")

        with pytest.raises(CatalogueLoadError, match="expected a list"):
            CatalogueLoader(path).load()

    def test_invalid_entry_is_reported(self, tmp_path):
        bad = dict(MINIMAL_ENTRY, id="bad-one", country="xx")
        path = tmp_path / "alternatives.json"
        path.write_text(json.dumps([MINIMAL_ENTRY, bad]), encoding="utf-8")

        with pytest.raises(CatalogueLoadError, match=r"#1 \(bad-one\)"):
            CatalogueLoader(path).load()


    def test_load_with_errors_keeps_valid_entries(self, tmp_path):
        bad = dict(MINIMAL_ENTRY, id="bad-one", country="xx")
        path = tmp_path / "alternatives.json"
        path.write_text(json.dumps([bad, MINIMAL_ENTRY, {"name": "No id"}]), encoding="utf-8")

        catalogue, errors = CatalogueLoader(path).load_with_errors()

        assert [a.id for a in catalogue] == ["tuta"]
        assert errors[0].startswith("bad-one: country: ")
        assert any(e.startswith("#2: id: ") for e in errors)

    def test_load_with_errors_still_raises_for_unreadable_file(self, tmp_path):
        with pytest.raises(CatalogueLoadError, match="not found"):
            CatalogueLoader(tmp_path / "nope.json").load_with_errors()


class TestAlternativeSchema:
    """Alternative field mapping"""

    def test_camel_case_aliases(self):
        alternative = Alternative.model_validate(
            dict(
                MINIMAL_ENTRY,
                replacesUS=["Gmail"],
                selfHostable=True,
                localizedDescriptions={"de": "Verschlüsselte E-Mail"},
                trustScoreBreakdown={
                    "jurisdiction": 4,
                    "openness": 2,
                    "privacySignals": 2,
                    "sovereigntyBonus": 0,
                    "reservationPenalty": 0,
                },
            )
        )

        assert alternative.replaces_us == ["Gmail"]
        assert alternative.self_hostable is True
        assert alternative.localized_descriptions.de == "Verschlüsselte E-Mail"
        assert alternative.trust_score_breakdown.privacy_signals == 2
        assert alternative.trust_score_breakdown.us_cap_applied is False

    def test_dump_uses_catalogue_keys(self):
        data = build_alternative(replaces_us=["Dropbox"]).model_dump(by_alias=True)

        assert data["replacesUS"] == ["Dropbox"]
        assert data["isOpenSource"] is False
        assert data["country"] == "de"

    def test_enum_fields_hold_plain_values(self):
        alternative = build_alternative(country="fr", category="search-engine")

        assert alternative.country == "fr"
        assert type(alternative.category) is str

    def test_unknown_country_rejected(self):
        with pytest.raises(ValidationError):
            build_alternative(country="xx")

    def test_entries_are_frozen(self):
        alternative = build_alternative()

        with pytest.raises(ValidationError):
            alternative.name = "Renamed"

    def test_unknown_severity_still_loads(self):
        alternative = build_alternative(
            reservations=[{"id": "r1", "text": "Concern", "severity": "critical"}]
        )
        assert alternative.reservations[0].severity == "critical"

    def test_to_summary(self):
        alternative = build_alternative(name="Tuta", category="email", replaces_us=["Gmail", "Outlook"])
        assert alternative.to_summary() == "Tuta | DE | email | replaces Gmail, Outlook"

    def test_string_scores_rejected(self):
        """Numeric strings are not coerced"""
        with pytest.raises(ValidationError, match="trustScore is not a number"):
            USVendorComparison(id="gmail", trust_score="3")
        with pytest.raises(ValidationError, match="trustScore is not a number"):
            build_alternative(trust_score="7")
        with pytest.raises(ValidationError):
            USVendorComparison(id="gmail", trust_score=True)

    def test_numeric_scores_accepted(self):
        assert USVendorComparison(id="gmail", trust_score=3).trust_score == 3
        assert USVendorComparison(id="gmail", trust_score=2.5).trust_score == 2.5
        assert build_alternative(trust_score=7).trust_score == 7
