"""
Catalogue validation
Integrity checks run at build time over the whole catalogue.
"""

from typing import Iterable
from loguru import logger

from euroalt.schemas.alternative import (
    Alternative,
    Reservation,
    ReservationSeverity,
    TrustScoreStatus,
    USVendorComparison,
)
from euroalt.schemas.results import ValidationReport


class CatalogueValidator:
    """
    Catalogue integrity checks

    Checks every entry and every US vendor comparison and collects all
    failures instead of stopping at the first one. Messages use the field
    names of the catalogue file so they can be fixed there directly.
    """

    MIN_SCORE = 1
    MAX_SCORE = 10

    VALID_STATUSES = frozenset(s.value for s in TrustScoreStatus)
    VALID_SEVERITIES = frozenset(s.value for s in ReservationSeverity)

    def validate(self, catalogue: Iterable[Alternative]) -> ValidationReport:
        """
        Validates the catalogue.

        Args:
            catalogue: all entries

        Returns:
            ValidationReport: failures and counts
        """
        catalogue = list(catalogue)
        failures: list[str] = []
        compared_vendors = 0
        seen_alternative_ids: set[str] = set()

        for alternative in catalogue:
            if alternative.id in seen_alternative_ids:
                failures.append(f'duplicate alternative id "{alternative.id}".')
            seen_alternative_ids.add(alternative.id)

            failures.extend(self._check_alternative(alternative))

            comparisons = alternative.us_vendor_comparisons
            if alternative.replaces_us and not comparisons:
                failures.append(
                    f"{alternative.id}: missing usVendorComparisons despite replacesUS entries."
                )
                continue

            seen_ids: set[str] = set()
            for vendor in comparisons:
                compared_vendors += 1
                failures.extend(self._check_vendor(alternative, vendor))

                if vendor.id in seen_ids:
                    failures.append(
                        f'{alternative.id}: duplicate vendor id "{vendor.id}" in usVendorComparisons.'
                    )
                else:
                    seen_ids.add(vendor.id)

        report = ValidationReport(
            failures=failures,
            compared_vendors=compared_vendors,
            alternative_count=len(catalogue),
        )

        if failures:
            logger.warning(f"Catalogue validation: {len(failures)} failure(s)")
        else:
            logger.info(
                f"Catalogue validation passed: {compared_vendors} comparisons, "
                f"{len(catalogue)} alternatives"
            )
        return report

    def _check_alternative(self, alternative: Alternative) -> list[str]:
        failures = []

        score = alternative.trust_score
        if score is not None and not self.MIN_SCORE <= score <= self.MAX_SCORE:
            failures.append(
                f"{alternative.id}: trustScore {score} is outside "
                f"{self.MIN_SCORE}-{self.MAX_SCORE}."
            )

        failures.extend(
            self._check_reservations(alternative.id, alternative.reservations)
        )
        return failures

    def _check_vendor(
        self, alternative: Alternative, vendor: USVendorComparison
    ) -> list[str]:
        failures = []
        label = f"{alternative.id}:{vendor.id}"
        status = vendor.trust_score_status

        if not vendor.name or not vendor.name.strip():
            failures.append(f"{alternative.id}: vendor entry has an invalid name.")

        if status not in self.VALID_STATUSES:
            failures.append(
                f'{label} has trustScoreStatus="{status}" (expected "pending" or "ready").'
            )

        if status == TrustScoreStatus.READY:
            if vendor.trust_score is None:
                failures.append(
                    f'{label} has trustScoreStatus="ready" but trustScore is not a number.'
                )
            elif not self.MIN_SCORE <= vendor.trust_score <= self.MAX_SCORE:
                failures.append(
                    f"{label} has trustScore {vendor.trust_score} outside "
                    f"{self.MIN_SCORE}-{self.MAX_SCORE}."
                )
            if not vendor.reservations:
                failures.append(
                    f'{label} has trustScoreStatus="ready" but no reservations.'
                )

        # An explicit "trustScore": null counts as a value too
        has_score = (
            vendor.trust_score is not None
            or "trust_score" in vendor.model_fields_set
        )
        if status == TrustScoreStatus.PENDING and has_score:
            failures.append(
                f'{label} has trustScoreStatus="pending" but unexpectedly has a trustScore value.'
            )

        failures.extend(self._check_reservations(label, vendor.reservations))
        return failures

    def _check_reservations(
        self, owner: str, reservations: list[Reservation]
    ) -> list[str]:
        failures = []
        for reservation in reservations:
            if reservation.severity not in self.VALID_SEVERITIES:
                failures.append(
                    f'{owner}: reservation "{reservation.id}" has severity='
                    f'"{reservation.severity}" (expected minor, moderate or major).'
                )
        return failures
