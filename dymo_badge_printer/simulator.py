"""
DYMO Service Simulator
======================

Flask app answering like the DYMO Label Web Service, for trying the badge
printer without DYMO software or hardware.

Run: dymo-badges simulate
"""

import logging
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from flask import Flask, Response, request
from flask_cors import CORS

from .config import SERVICE_BASE_PATH, SIMULATOR_HOST, SIMULATOR_PORT
from .models import PrinterRecord

logger = logging.getLogger(__name__)

DEFAULT_PRINTERS = [
    PrinterRecord(name='DYMO LabelWriter 550', model='DYMO LabelWriter 550', is_connected=True),
]


def _text(body: str, status: int = 200, mimetype: str = 'text/plain') -> Response:
    return Response(body, status=status, mimetype=mimetype)


def _bool(value: bool) -> str:
    return 'True' if value else 'False'


def printers_xml(printers: Iterable[PrinterRecord]) -> str:
    """GetPrinters body for a list of printers."""
    blocks = []
    for p in printers:
        blocks.append(
            '<LabelWriterPrinter>'
            f'<Name>{escape(p.name)}</Name>'
            f'<ModelName>{escape(p.model)}</ModelName>'
            f'<IsConnected>{_bool(p.is_connected)}</IsConnected>'
            '<IsLocal>True</IsLocal>'
            '<IsTwinTurbo>False</IsTwinTurbo>'
            '</LabelWriterPrinter>'
        )
    return '<Printers>' + ''.join(blocks) + '</Printers>'


def status_xml(printer: Optional[PrinterRecord]) -> str:
    """GetPrinterStatus body; an unknown printer is reported disconnected."""
    connected = bool(printer and printer.is_connected)
    error = '' if printer else 'Printer not found'
    return (
        '<PrinterStatus>'
        f'<Connected>{_bool(connected)}</Connected>'
        f'<Ready>{_bool(connected)}</Ready>'
        f'<ErrorText>{escape(error)}</ErrorText>'
        '</PrinterStatus>'
    )


def create_app(printers: List[PrinterRecord] = None, available: bool = True,
               accept_jobs: bool = True) -> Flask:
    """
    Create a simulator app.

    Args:
        printers: Printers to report (defaults to one LabelWriter 550)
        available: Answer "true" on StatusConnected
        accept_jobs: Answer "true" on PrintLabel for known printers

    Received jobs are appended to app.config['RECEIVED_JOBS'].
    """
    app = Flask(__name__)
    CORS(app)

    app.config['PRINTERS'] = list(DEFAULT_PRINTERS if printers is None else printers)
    app.config['AVAILABLE'] = available
    app.config['ACCEPT_JOBS'] = accept_jobs
    app.config['RECEIVED_JOBS'] = []

    def _find(name: str) -> Optional[PrinterRecord]:
        for p in app.config['PRINTERS']:
            if p.name == name:
                return p
        return None

    # =========================================================================
    # Service Endpoints
    # =========================================================================

    @app.route(f'{SERVICE_BASE_PATH}/StatusConnected', methods=['GET'])
    def status_connected():
        """Service availability."""
        return _text('true' if app.config['AVAILABLE'] else 'false')

    @app.route(f'{SERVICE_BASE_PATH}/GetPrinters', methods=['GET'])
    def get_printers():
        """Printers known to the service."""
        return _text(printers_xml(app.config['PRINTERS']), mimetype='text/xml')

    @app.route(f'{SERVICE_BASE_PATH}/GetPrinterStatus', methods=['GET'])
    def get_printer_status():
        """Status of one printer."""
        name = request.args.get('printerName', '')
        return _text(status_xml(_find(name)), mimetype='text/xml')

    # =========================================================================
    # Printing
    # =========================================================================

    @app.route(f'{SERVICE_BASE_PATH}/PrintLabel', methods=['POST'])
    def print_label():
        """Accept a label for a known printer."""
        name = request.form.get('printerName', '')
        label_xml = request.form.get('labelXml', '')

        if not label_xml:
            return _text('labelXml required', status=400)

        printer = _find(name)
        if printer is None:
            return _text(f'Printer not found: {name}', status=500)

        app.config['RECEIVED_JOBS'].append({
            'printer_name': name,
            'label_xml': label_xml,
            'print_params_xml': request.form.get('printParamsXml', ''),
            'remote_addr': request.remote_addr,
        })
        logger.info('Received label for %s (%d chars)', name, len(label_xml))

        accepted = app.config['ACCEPT_JOBS'] and printer.is_connected
        return _text('true' if accepted else 'false')

    return app


def run_simulator(host: str = SIMULATOR_HOST, port: int = SIMULATOR_PORT,
                  cert: str = None, key: str = None, **kwargs):
    """
    Serve the simulator over HTTPS.

    Without cert/key a throwaway self-signed certificate is generated
    (requires the ``cryptography`` package).
    """
    app = create_app(**kwargs)
    ssl_context = (cert, key) if cert and key else 'adhoc'
    app.run(host=host, port=port, ssl_context=ssl_context)
