"""
Entry point for running gridsheet as a module.

Usage:
    python -m gridsheet render sheet.json --format html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
