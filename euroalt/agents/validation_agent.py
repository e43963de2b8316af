"""
Validation Agent
Runs the catalogue integrity checks.
"""

from typing import Sequence

from .base import BaseAgent
from euroalt.schemas.alternative import Alternative
from euroalt.schemas.results import ValidationReport
from euroalt.domain.validation import CatalogueValidator


class ValidationAgent(BaseAgent[Sequence[Alternative], ValidationReport]):
    """
    Validation agent

    Failures are data, not errors: they come back in the report.
    """

    name = "ValidationAgent"

    def __init__(self):
        super().__init__()
        self.validator = CatalogueValidator()

    def _process(self, catalogue: Sequence[Alternative]) -> ValidationReport:
        report = self.validator.validate(catalogue)
        for failure in report.failures:
            self.logger.debug(f"Validation failure: {failure}")
        return report
