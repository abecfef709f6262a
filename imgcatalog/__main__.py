"""
Main entry point for running the package as a module.

Usage:
    python -m imgcatalog generate photos/*.jpg -o images_report.xlsx
    python -m imgcatalog list photos/
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
