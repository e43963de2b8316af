"""
Text helpers
Language fallback and locale-aware sort keys.
"""

import unicodedata

from euroalt.schemas.alternative import Alternative, Reservation, USVendorComparison


def _wants_german(language: str) -> bool:
    return bool(language) and language.lower().startswith("de")


def localized_description(alternative: Alternative, language: str) -> str:
    """German description for "de*" languages if there is one, else English"""
    if _wants_german(language) and alternative.localized_descriptions.de:
        return alternative.localized_descriptions.de
    return alternative.description


def localized_reservation_text(reservation: Reservation, language: str) -> str:
    if _wants_german(language) and reservation.text_de:
        return reservation.text_de
    return reservation.text


def localized_vendor_description(
    vendor: USVendorComparison, language: str
) -> str | None:
    if _wants_german(language) and vendor.description_de:
        return vendor.description_de
    return vendor.description


def collation_key(value: str) -> tuple[str, str, str]:
    """
    Sort key approximating locale string comparison.

    Accents and case are ignored first ("Élan" sorts with "elan"), then
    unaccented before accented, then lower case before upper case.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), value.casefold(), value.swapcase()
