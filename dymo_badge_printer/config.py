"""
DYMO Badge Printer Configuration
"""

import os

# =============================================================================
# DYMO Label Web Service
# =============================================================================

# The service always listens locally with a self-signed certificate
SERVICE_HOST = os.environ.get('DYMO_HOST', '127.0.0.1')
SERVICE_PORT = int(os.environ.get('DYMO_PORT', 41951))
SERVICE_BASE_PATH = '/DYMO/DLS/Printing'

STATUS_PATH = 'StatusConnected'
PRINTERS_PATH = 'GetPrinters'
PRINTER_STATUS_PATH = 'GetPrinterStatus'
PRINT_LABEL_PATH = 'PrintLabel'

# Request deadline (milliseconds)
DEFAULT_TIMEOUT_MS = int(os.environ.get('DYMO_TIMEOUT_MS', 5000))

# =============================================================================
# Printing
# =============================================================================

# Pause between two submissions (milliseconds)
PRINT_DELAY_MS = int(os.environ.get('DYMO_PRINT_DELAY_MS', 500))

# Preferred printer: first discovered name containing this (case-insensitive)
PRINTER_MATCH = os.environ.get('DYMO_PRINTER_MATCH', 'dymo labelwriter')
DEFAULT_PRINTER_NAME = os.environ.get('DYMO_DEFAULT_PRINTER', 'DYMO LabelWriter 550')

# Where generated label XML is written (empty = not saved)
OUTPUT_DIR = os.environ.get('DYMO_OUTPUT_DIR', '')

DEBUG = os.environ.get('DYMO_DEBUG', 'false').lower() == 'true'

# =============================================================================
# Badge Roles
# =============================================================================

ROLE_LABELS = {
    'speaker': 'SPEAKER',
    'mc': 'MC',
    'organisateur': 'ORGANISATEUR',
}
DEFAULT_ROLE_LABEL = 'PARTICIPANT'

# =============================================================================
# Simulator
# =============================================================================

SIMULATOR_HOST = os.environ.get('DYMO_SIMULATOR_HOST', '127.0.0.1')
SIMULATOR_PORT = int(os.environ.get('DYMO_SIMULATOR_PORT', SERVICE_PORT))
