"""
Roster entry point.

Usage:
    python -m roster [--file PATH] [--log-level LEVEL]
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
