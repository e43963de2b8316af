#!/usr/bin/env python
"""
EuroAlt catalogue validation (run from a source checkout)

Usage:
    python scripts/validate_catalogue.py
    python scripts/validate_catalogue.py --catalogue path/to/alternatives.json
"""

import sys
from pathlib import Path

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from euroalt.cli import main


if __name__ == "__main__":
    sys.exit(main())
