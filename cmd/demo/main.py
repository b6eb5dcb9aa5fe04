#!/usr/bin/env python3
"""
Redis demo - script entry point.

Usage:
    python cmd/demo/main.py --step ping --step set --step get
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from internal.cli.runner import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
