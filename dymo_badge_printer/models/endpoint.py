"""
Service Endpoint
================

Fixed location of the local DYMO Label Web Service.
"""

from dataclasses import dataclass

from ..config import (
    SERVICE_HOST, SERVICE_PORT, SERVICE_BASE_PATH,
    STATUS_PATH, PRINTERS_PATH, PRINTER_STATUS_PATH, PRINT_LABEL_PATH,
)


@dataclass(frozen=True)
class ServiceEndpoint:
    """Host, port and resource paths of the DYMO service."""

    host: str = SERVICE_HOST
    port: int = SERVICE_PORT
    base_path: str = SERVICE_BASE_PATH

    status_path: str = STATUS_PATH
    printers_path: str = PRINTERS_PATH
    printer_status_path: str = PRINTER_STATUS_PATH
    print_label_path: str = PRINT_LABEL_PATH

    @property
    def base_url(self) -> str:
        return f'https://{self.host}:{self.port}{self.base_path}'

    def url(self, path: str) -> str:
        """Absolute URL of a resource path."""
        return f'{self.base_url}/{path.lstrip("/")}'
