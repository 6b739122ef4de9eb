"""
Response Parsing
================

Tolerant readers for the DYMO service responses.

The service returns XML-ish text whose casing and structure have varied
across versions, so it is scanned with regular expressions instead of an
XML parser. Missing fields fall back to defaults; nothing here raises.
"""

import html
import logging
import re
from typing import List, Optional

from .models import PrinterRecord, PrinterStatus

logger = logging.getLogger(__name__)

# <LabelWriterPrinter>, <TapePrinter>, <DesktopLabelPrinter>, ...
_PRINTER_BLOCK = re.compile(
    r'<(?P<tag>\w*Printer)\b[^>]*>(?P<body>.*?)</(?P=tag)\s*>',
    re.IGNORECASE | re.DOTALL,
)

_TAG_PATTERNS = {}


def _tag_pattern(tag: str):
    pattern = _TAG_PATTERNS.get(tag)
    if pattern is None:
        pattern = re.compile(
            rf'<{tag}\b[^>]*>(.*?)</{tag}\s*>',
            re.IGNORECASE | re.DOTALL,
        )
        _TAG_PATTERNS[tag] = pattern
    return pattern


def extract_tag(text: str, tag: str) -> Optional[str]:
    """Trimmed, unescaped text of the first <tag>...</tag>, or None."""
    match = _tag_pattern(tag).search(text)
    if match is None:
        return None
    return html.unescape(match.group(1)).strip()


def _is_true(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() == 'true'


def parse_bool_body(text: Optional[str]) -> bool:
    """Plain-text boolean answer: only a trimmed, lowercase "true" counts."""
    return text is not None and text.strip() == 'true'


def parse_printers(text: Optional[str]) -> List[PrinterRecord]:
    """
    Parse a GetPrinters response.

    Each printer block yields one record, in order of appearance. A block
    without a Name is skipped; ModelName defaults to "" and IsConnected
    to False.
    """
    printers: List[PrinterRecord] = []
    if not text:
        return printers

    for block in _PRINTER_BLOCK.finditer(text):
        body = block.group('body')
        name = extract_tag(body, 'Name')
        if not name:
            logger.debug('Skipping %s block without a Name', block.group('tag'))
            continue

        printers.append(PrinterRecord(
            name=name,
            model=extract_tag(body, 'ModelName') or '',
            is_connected=_is_true(extract_tag(body, 'IsConnected')),
        ))

    if not printers:
        logger.debug('No printer blocks found in response (%d chars)', len(text))
    return printers


def parse_status(text: Optional[str]) -> PrinterStatus:
    """
    Parse a GetPrinterStatus response.

    Connected, Ready and ErrorText are looked up anywhere in the body.
    ErrorText is kept only when it is not blank.
    """
    status = PrinterStatus()

    try:
        connected = extract_tag(text, 'Connected')
        ready = extract_tag(text, 'Ready')
        error = extract_tag(text, 'ErrorText')

        status.connected = _is_true(connected)
        status.ready = _is_true(ready)
        if error:
            status.error = error
    except Exception as e:
        logger.warning('Failed to parse printer status: %s', e)

    return status
