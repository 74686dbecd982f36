#!/usr/bin/env python
"""
Launcher script for Recipe Tracker.

This script ensures the source directory is on the Python path before
running the command-line entry point without installing the package.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from recipe_tracker.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
