"""
DYMO Badge Printer
==================

Batch name-badge printing through the local DYMO Label Web Service.

Reads participants from a CSV file, renders each one into a DieCutLabel
and submits it to the DYMO service running on this machine.

Usage:
    dymo-badges print participants.csv

Service Endpoints (https://127.0.0.1:41951/DYMO/DLS):
    GET  /Printing/StatusConnected   - Service availability
    GET  /Printing/GetPrinters       - Connected printers
    GET  /Printing/GetPrinterStatus  - Status of one printer
    POST /Printing/PrintLabel        - Submit a label
"""

__version__ = '1.0.0'
__author__ = 'EGS Software AG'
