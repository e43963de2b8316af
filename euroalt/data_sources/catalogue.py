"""
Catalogue loader
Reads the static catalogue file into frozen Alternative records.
"""

import json
from pathlib import Path
from typing import Optional
from loguru import logger
from pydantic import ValidationError

from euroalt.config import settings
from euroalt.schemas.alternative import Alternative


BUNDLED_CATALOGUE = Path(__file__).resolve().parent.parent / "data" / "alternatives.json"


class CatalogueLoadError(Exception):
    """Catalogue file missing, unreadable or invalid"""
    pass


class CatalogueLoader:
    """
    Static catalogue loader

    Accepts either a JSON list of entries or an object with an
    "alternatives" list. Entry order in the file is the catalogue order.
    """

    def __init__(self, path: Optional[str | Path] = None):
        self.path = Path(path) if path else BUNDLED_CATALOGUE
        self.logger = logger.bind(source="CatalogueLoader")

    def load(self) -> tuple[Alternative, ...]:
        """
        Loads and validates the catalogue.

        Returns:
            tuple[Alternative, ...]: entries in file order

        Raises:
            CatalogueLoadError: file missing, not JSON, or an invalid entry
        """
        alternatives = []
        for index, record in enumerate(self._read_records()):
            try:
                alternatives.append(Alternative.model_validate(record))
            except ValidationError as e:
                raise CatalogueLoadError(
                    f"{self.path}: invalid entry #{index} ({_record_label(record, index)}): {e}"
                ) from e

        self.logger.info(f"Loaded {len(alternatives)} alternatives from {self.path.name}")
        return tuple(alternatives)

    def load_with_errors(self) -> tuple[tuple[Alternative, ...], list[str]]:
        """
        Loads every valid entry and describes the invalid ones.

        Used by the validation gate, which reports all problems of a
        catalogue in one run. Only file-level problems raise.

        Returns:
            (valid entries in file order, one message per schema error)

        Raises:
            CatalogueLoadError: file missing, not JSON, or not a list
        """
        alternatives = []
        errors: list[str] = []
        for index, record in enumerate(self._read_records()):
            try:
                alternatives.append(Alternative.model_validate(record))
            except ValidationError as e:
                errors.extend(
                    _describe_error(record, index, error) for error in e.errors()
                )

        self.logger.info(
            f"Loaded {len(alternatives)} alternatives from {self.path.name}, "
            f"{len(errors)} schema error(s)"
        )
        return tuple(alternatives), errors

    def _read_records(self) -> list:
        if not self.path.exists():
            raise CatalogueLoadError(f"Catalogue not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogueLoadError(f"Cannot read {self.path}: {e}") from e

        records = raw.get("alternatives") if isinstance(raw, dict) else raw
        if not isinstance(records, list):
            raise CatalogueLoadError(
                f"{self.path}: expected a list of alternatives"
            )
        return records


def _record_label(record, index: int) -> str:
    if isinstance(record, dict) and record.get("id"):
        return str(record["id"])
    return f"#{index}"


def _describe_error(record, index: int, error: dict) -> str:
    """
    One pydantic error as a catalogue failure line.

    Errors inside usVendorComparisons are labelled "entry:vendor" like
    the integrity checks, e.g. 'tuta:gmail: trustScore is not a number (got str).'
    """
    label = _record_label(record, index)
    loc = list(error["loc"])

    if len(loc) >= 2 and loc[0] == "usVendorComparisons" and isinstance(loc[1], int):
        vendors = record.get("usVendorComparisons") or []
        vendor = vendors[loc[1]] if loc[1] < len(vendors) else None
        vendor_id = vendor.get("id") if isinstance(vendor, dict) else None
        label = f"{label}:{vendor_id or f'#{loc[1]}'}"
        loc = loc[2:]

    if error["type"] == "value_error":
        # numeric_score names the field in its message
        return f"{label}: {error['ctx']['error']}."

    field = ".".join(str(part) for part in loc) or "entry"
    return f"{label}: {field}: {error['msg']}."


# Global instance
_catalogue: tuple[Alternative, ...] | None = None


def get_catalogue() -> tuple[Alternative, ...]:
    """Process-wide catalogue, loaded on first use"""
    global _catalogue
    if _catalogue is None:
        _catalogue = CatalogueLoader(settings.CATALOGUE_PATH or None).load()
    return _catalogue
