"""
Main entry point for the region finder.

Allows running: python -m region_finder <command>
"""

import sys
from region_finder.cli import main

if __name__ == "__main__":
    sys.exit(main())
