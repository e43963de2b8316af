"""
EuroAlt catalogue validation

Build-time integrity gate. Exits with status 1 if any check fails.

Usage:
    euroalt-validate                       # bundled catalogue
    euroalt-validate --catalogue FILE      # another catalogue file
"""

import argparse
import sys
from typing import Optional

from euroalt.config import configure_logging
from euroalt.data_sources.catalogue import CatalogueLoader, CatalogueLoadError
from euroalt.agents.validation_agent import ValidationAgent


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate the EuroAlt catalogue")
    parser.add_argument(
        "--catalogue",
        default=None,
        help="Catalogue JSON file (default: the bundled catalogue)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="loguru level for diagnostic output",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        catalogue, schema_failures = CatalogueLoader(args.catalogue).load_with_errors()
    except CatalogueLoadError as e:
        print(f"Catalogue could not be loaded: {e}", file=sys.stderr)
        return 1

    # Entries rejected by the schema are reported next to the integrity
    # failures of the entries that loaded
    report = ValidationAgent().run(catalogue)
    if schema_failures:
        report = report.model_copy(
            update={"failures": schema_failures + report.failures}
        )

    if not report.passed:
        print("US vendor comparison validation failed:", file=sys.stderr)
        for failure in report.failures:
            print(f"- {failure}", file=sys.stderr)
        return 1

    print(
        f"Validated {report.compared_vendors} US vendor comparison entries "
        f"across {report.alternative_count} alternatives."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
