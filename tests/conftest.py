"""Shared fixtures for the DYMO badge printer tests."""

import pytest

from dymo_badge_printer.client import DymoClient
from dymo_badge_printer.models import Participant, ServiceEndpoint

ENDPOINT = ServiceEndpoint()
STATUS_URL = ENDPOINT.url('StatusConnected')
PRINTERS_URL = ENDPOINT.url('GetPrinters')
PRINTER_STATUS_URL = ENDPOINT.url('GetPrinterStatus')
PRINT_URL = ENDPOINT.url('PrintLabel')

PRINTERS_RESPONSE = """<Printers>
  <LabelWriterPrinter>
    <Name>DYMO LabelWriter 550</Name>
    <ModelName>DYMO LabelWriter 550</ModelName>
    <IsConnected>True</IsConnected>
    <IsLocal>True</IsLocal>
    <IsTwinTurbo>False</IsTwinTurbo>
  </LabelWriterPrinter>
  <LabelWriterPrinter>
    <Name>DYMO LabelWriter 450 Turbo</Name>
    <ModelName>DYMO LabelWriter 450 Turbo</ModelName>
    <IsConnected>False</IsConnected>
    <IsLocal>True</IsLocal>
    <IsTwinTurbo>False</IsTwinTurbo>
  </LabelWriterPrinter>
</Printers>"""

STATUS_RESPONSE = """<PrinterStatus>
  <Connected>True</Connected>
  <Ready>False</Ready>
  <ErrorText>Out of labels</ErrorText>
</PrinterStatus>"""


@pytest.fixture
def client():
    return DymoClient(timeout_ms=5000)


@pytest.fixture
def participants():
    return [
        Participant(nom='Dupont', prenom='Marie', role='speaker'),
        Participant(nom='Martin', prenom='Paul', role='participant'),
        Participant(nom='Bernard', prenom='Lea', role='MC'),
    ]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / 'participants.csv'
    path.write_text(
        'nom,prenom,role\n'
        'Dupont,Marie,speaker\n'
        'Martin,Paul,participant\n'
        'Bernard,Lea, MC \n',
        encoding='utf-8',
    )
    return path
