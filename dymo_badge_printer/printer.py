"""
Badge Printer
=============

Runs a batch: checks the DYMO service, picks a printer, then submits one
label per participant with a pause between submissions.

Usage:
    from dymo_badge_printer.printer import BadgePrinter

    printer = BadgePrinter()
    summary = printer.run(participants)
    print(summary.success_count, summary.error_count)
"""

import logging
import time
from typing import Callable, List, Optional

from .client import DymoClient
from .config import PRINT_DELAY_MS, PRINTER_MATCH, DEFAULT_PRINTER_NAME
from .errors import DymoError, ServiceUnavailable, PrinterDiscoveryError, NoPrinterFound
from .labels import generate_label_xml, export_label
from .models import Participant, PrinterRecord, PrintJobRequest, ItemResult, RunSummary

logger = logging.getLogger(__name__)


def select_printer(printers: List[PrinterRecord], match: str) -> Optional[PrinterRecord]:
    """First printer whose name contains ``match``, else the first printer."""
    if not printers:
        return None
    for printer in printers:
        if match and printer.matches(match):
            return printer
    return printers[0]


class BadgePrinter:
    """Prints badges for a list of participants through the DYMO service."""

    def __init__(self, client: DymoClient = None,
                 printer_match: str = PRINTER_MATCH,
                 delay_ms: int = PRINT_DELAY_MS,
                 output_dir=None,
                 copies: int = 1,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize the badge printer.

        Args:
            client: DYMO service client
            printer_match: Preferred printer name substring (case-insensitive)
            delay_ms: Pause after each submission
            output_dir: Also save every generated label here (optional)
            copies: Copies per badge
            sleep: Sleep function used for pacing
        """
        self.client = client or DymoClient()
        self.printer_match = printer_match
        self.delay_ms = delay_ms
        self.output_dir = output_dir
        self.copies = copies
        self._sleep = sleep

        self.printer_name: str = DEFAULT_PRINTER_NAME
        self.printers: List[PrinterRecord] = []
        self.participants: List[Participant] = []

    # =========================================================================
    # Printer selection
    # =========================================================================

    def check_printer(self) -> str:
        """
        Check the service and select the target printer.

        Returns:
            Name of the selected printer

        Raises:
            ServiceUnavailable: the service did not answer "true"
            PrinterDiscoveryError: the printer list could not be fetched
            NoPrinterFound: the service reported no printers
        """
        if not self.client.check_available():
            raise ServiceUnavailable()

        try:
            self.printers = self.client.list_printers()
        except DymoError as e:
            raise PrinterDiscoveryError(f'Failed to list printers: {e}') from e

        selected = select_printer(self.printers, self.printer_match)
        if selected is None:
            raise NoPrinterFound()

        if not selected.matches(self.printer_match or ''):
            logger.warning('No printer matching %r, using %s', self.printer_match, selected.name)
        logger.info('Selected printer: %s (%s)', selected.name, selected.model)

        self.printer_name = selected.name
        return self.printer_name

    # =========================================================================
    # Printing
    # =========================================================================

    def print_label(self, participant: Participant) -> ItemResult:
        """Print one badge. Errors are reported in the result, never raised."""
        result = ItemResult(participant=participant)

        try:
            markup = generate_label_xml(participant)
            if self.output_dir:
                try:
                    export_label(participant, markup, self.output_dir)
                except OSError as e:
                    logger.warning('Could not save label for %s: %s', participant.full_name, e)

            result.success = self.client.submit_job(PrintJobRequest(
                printer_name=self.printer_name,
                label_markup=markup,
                copies=self.copies,
            ))
        except DymoError as e:
            logger.error('Printing failed for %s: %s', participant.full_name, e)
            result.error = str(e)
            return result
        except Exception as e:
            logger.exception('Unexpected error printing %s', participant.full_name)
            result.error = f'{type(e).__name__}: {e}'
            return result

        if result.success:
            logger.info('Printed badge for %s (%s)', participant.full_name, participant.role)
        else:
            logger.warning('Badge for %s not printed (job rejected)', participant.full_name)
        return result

    def print_all(self, participants: List[Participant] = None,
                  on_result: Callable[[ItemResult], None] = None) -> RunSummary:
        """
        Print every participant, one submission at a time.

        A failed item does not stop the batch.
        """
        if participants is not None:
            self.participants = list(participants)

        summary = RunSummary(printer_name=self.printer_name)
        logger.info('Printing %d badges on %s', len(self.participants), self.printer_name)

        for participant in self.participants:
            result = self.print_label(participant)
            summary.add(result)
            if on_result:
                on_result(result)

            if self.delay_ms > 0:
                self._sleep(self.delay_ms / 1000.0)

        return summary

    def run(self, participants: List[Participant],
            on_result: Callable[[ItemResult], None] = None) -> RunSummary:
        """Check the service, select a printer and print every participant."""
        self.participants = list(participants)
        self.check_printer()
        return self.print_all(on_result=on_result)
