#!/usr/bin/env python
"""
DYMO Badge Printer - Standalone Entry Point

Run directly:
    python main.py print participants.csv

Or with environment variables:
    DYMO_PRINT_DELAY_MS=1000 python main.py print participants.csv
"""

import os
import sys

# Ensure package is importable when running directly
if __name__ == '__main__':
    # Add this directory to path for standalone execution
    base_dir = os.path.dirname(os.path.abspath(__file__))
    if base_dir not in sys.path:
        sys.path.insert(0, base_dir)

from dymo_badge_printer.cli import main


if __name__ == '__main__':
    sys.exit(main())
