"""
DYMO Badge Printer Models
"""

from .endpoint import ServiceEndpoint
from .printer import PrinterRecord, PrinterStatus
from .job import PrintJobRequest, ItemResult, RunSummary
from .participant import Participant

__all__ = [
    'ServiceEndpoint',
    'PrinterRecord',
    'PrinterStatus',
    'PrintJobRequest',
    'ItemResult',
    'RunSummary',
    'Participant',
]
