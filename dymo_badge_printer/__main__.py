"""
Run: python -m dymo_badge_printer
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
