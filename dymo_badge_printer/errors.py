"""
DYMO Badge Printer Errors
=========================

Failures raised while talking to the DYMO service.

A rejected job (HTTP 200 with a body other than "true") is not an error:
``DymoClient.submit_job`` returns False. Partial or unparseable responses
are not errors either; the parsers return empty/default structures.
"""

from typing import Optional


class DymoError(Exception):
    """Base class for all DYMO service errors."""


class ServiceUnavailable(DymoError):
    """The service did not answer the availability check affirmatively."""

    def __init__(self, message: str = 'DYMO Label Web Service not available'):
        super().__init__(message)


class TransportError(DymoError):
    """Connection refused/reset, DNS or TLS failure."""


class ServiceTimeout(TransportError):
    """The request exceeded its deadline and was aborted."""

    def __init__(self, message: str, timeout_ms: Optional[int] = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class HttpError(DymoError):
    """The service answered with a non-200 status."""

    def __init__(self, status: int, body: str = ''):
        super().__init__(f'HTTP {status}: {body}')
        self.status = status
        self.body = body


class PrinterDiscoveryError(DymoError):
    """Listing printers failed."""


class NoPrinterFound(DymoError):
    """The service reported no printers."""

    def __init__(self, message: str = 'No DYMO printer detected'):
        super().__init__(message)
