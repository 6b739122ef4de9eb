"""
DYMO Service Client
===================

HTTPS client for the local DYMO Label Web Service.

Usage:
    from dymo_badge_printer.client import DymoClient

    client = DymoClient()

    if client.check_available():
        printers = client.list_printers()
        client.print_label(printers[0].name, label_xml)

The service runs on this machine with a self-signed certificate. The
client accepts it for its own requests only (``trust_self_signed``);
nothing else in the process is affected.
"""

import logging
import re
import time
import warnings
from typing import List, Tuple, Iterable
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.exceptions import InsecureRequestWarning, ReadTimeoutError

from .config import DEFAULT_TIMEOUT_MS
from .errors import DymoError, TransportError, ServiceTimeout, HttpError
from .models import ServiceEndpoint, PrinterRecord, PrinterStatus, PrintJobRequest
from .parsing import parse_bool_body, parse_printers, parse_status

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'
_CHARSET = re.compile(r'charset\s*=\s*([^;\s]+)', re.IGNORECASE)


def encode_form(fields: Iterable[Tuple[str, str]]) -> str:
    """
    Build an x-www-form-urlencoded body, percent-encoding each value.

    Every reserved character is escaped (including '/', '+' and spaces),
    which keeps XML label markup intact on the service side.
    """
    return '&'.join(f'{key}={quote(value, safe="")}' for key, value in fields)


def decode_body(raw: bytes, content_type: str) -> str:
    """
    Decode a response body.

    The charset declared in Content-Type is used when Python knows it;
    otherwise the body is read as UTF-8, which is what the service sends.
    """
    match = _CHARSET.search(content_type or '')
    encoding = match.group(1).strip('"\'') if match else 'utf-8'
    try:
        return raw.decode(encoding, errors='replace')
    except LookupError:
        logger.debug('Unknown charset %r, decoding as UTF-8', encoding)
        return raw.decode('utf-8', errors='replace')


def print_params_xml(copies: int) -> str:
    """LabelWriter print parameters for a multi-copy job."""
    return f'<LabelWriterPrintParams><Copies>{copies}</Copies></LabelWriterPrintParams>'


class DymoClient:
    """Client for the DYMO Label Web Service."""

    def __init__(self, endpoint: ServiceEndpoint = None,
                 timeout_ms: int = DEFAULT_TIMEOUT_MS,
                 trust_self_signed: bool = True):
        """
        Initialize client.

        Args:
            endpoint: Service location (defaults to https://127.0.0.1:41951)
            timeout_ms: Deadline for each request, measured from its start
            trust_self_signed: Accept the service's self-signed certificate
        """
        self.endpoint = endpoint or ServiceEndpoint()
        self.timeout_ms = timeout_ms
        self.trust_self_signed = trust_self_signed

    @property
    def timeout(self) -> float:
        """Deadline in seconds."""
        return self.timeout_ms / 1000.0

    def _session(self) -> requests.Session:
        """Fresh session for a single round trip, without retries."""
        session = requests.Session()
        session.mount('https://', HTTPAdapter(max_retries=0))
        return session

    def _expired(self, started: float) -> bool:
        return time.monotonic() - started >= self.timeout

    def _read_body(self, response: requests.Response, started: float) -> str:
        """Read the body in chunks, aborting the response past the deadline."""
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if self._expired(started):
                    response.close()
                    raise ServiceTimeout(
                        f'Timeout reading response from {response.url}',
                        timeout_ms=self.timeout_ms,
                    )
        except requests.exceptions.ConnectionError as e:
            # requests reports a socket read timeout mid-body as ConnectionError
            if e.args and isinstance(e.args[0], ReadTimeoutError):
                response.close()
                raise ServiceTimeout(
                    f'Timeout reading response from {response.url}',
                    timeout_ms=self.timeout_ms,
                ) from e
            raise
        return decode_body(b''.join(chunks), response.headers.get('Content-Type', ''))

    def _request(self, method: str, path: str, data: bytes = None,
                 headers: dict = None) -> Tuple[int, str]:
        """
        Make one request to the service.

        Returns:
            (status code, body text)

        Raises:
            ServiceTimeout: deadline exceeded (the connection is closed first)
            TransportError: the request could not be completed
        """
        url = self.endpoint.url(path)
        verify = not self.trust_self_signed
        started = time.monotonic()
        logger.debug('%s %s', method, url)

        try:
            with self._session() as session, warnings.catch_warnings():
                if not verify:
                    warnings.simplefilter('ignore', InsecureRequestWarning)

                response = session.request(
                    method, url,
                    data=data,
                    headers=headers,
                    timeout=self.timeout,
                    verify=verify,
                    stream=True,
                )
                try:
                    body = self._read_body(response, started)
                finally:
                    response.close()

        except requests.exceptions.Timeout as e:
            raise ServiceTimeout(f'Timeout calling {url}', timeout_ms=self.timeout_ms) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f'Cannot connect to {self.endpoint.base_url}: {e}') from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f'Request to {url} failed: {e}') from e

        logger.debug('%s %s -> %s (%d chars)', method, url, response.status_code, len(body))
        return response.status_code, body

    def _get_body(self, path: str) -> str:
        """GET a resource; the body is kept whatever the status."""
        status, body = self._request('GET', path)
        if status != 200:
            logger.warning('GET %s answered HTTP %s, parsing body anyway', path, status)
        return body

    # =========================================================================
    # Service
    # =========================================================================

    def check_available(self) -> bool:
        """
        Check if the DYMO service is running.

        Never raises: any failure means "not available".
        """
        try:
            _, body = self._request('GET', self.endpoint.status_path)
        except DymoError as e:
            logger.info('DYMO service not reachable: %s', e)
            return False
        return parse_bool_body(body)

    # =========================================================================
    # Printers
    # =========================================================================

    def list_printers(self) -> List[PrinterRecord]:
        """List printers known to the service."""
        body = self._get_body(self.endpoint.printers_path)
        return parse_printers(body)

    def get_printer_status(self, name: str) -> PrinterStatus:
        """Get connection/ready status of one printer."""
        path = f'{self.endpoint.printer_status_path}?printerName={quote(name, safe="")}'
        body = self._get_body(path)
        return parse_status(body)

    # =========================================================================
    # Printing
    # =========================================================================

    def submit_job(self, job: PrintJobRequest) -> bool:
        """
        Submit a label.

        Returns:
            True if the service accepted the job, False if it rejected it

        Raises:
            HttpError: non-200 answer (status and body attached)
            ServiceTimeout / TransportError: the request did not complete
        """
        fields = [('printerName', job.printer_name)]
        if job.copies > 1:
            fields.append(('printParamsXml', print_params_xml(job.copies)))
        fields.append(('labelXml', job.label_markup))
        fields.append(('labelSetXml', ''))

        status, body = self._request(
            'POST', self.endpoint.print_label_path,
            data=encode_form(fields).encode('ascii'),
            headers={'Content-Type': FORM_CONTENT_TYPE},
        )
        if status != 200:
            raise HttpError(status, body)

        accepted = parse_bool_body(body)
        if not accepted:
            logger.warning('Job rejected by %s: %r', job.printer_name, body.strip()[:200])
        return accepted

    def print_label(self, printer_name: str, label_xml: str, copies: int = 1) -> bool:
        """Print a label on a named printer."""
        return self.submit_job(PrintJobRequest(
            printer_name=printer_name,
            label_markup=label_xml,
            copies=copies,
        ))

    def __repr__(self) -> str:
        return f'DymoClient({self.endpoint.base_url!r}, timeout_ms={self.timeout_ms})'
