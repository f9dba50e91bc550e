#!/usr/bin/env python
"""
Database management script for the movie ratings service.

Usage:
    # Create tables and load sample data
    python scripts/manage_db.py install stage

    # Empty every table
    python scripts/manage_db.py unstage

    # Drop every table
    python scripts/manage_db.py uninstall
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movieratings.cli import main


if __name__ == "__main__":
    sys.exit(main())
