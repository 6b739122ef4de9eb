"""Tests for dymo_badge_printer.parsing."""

import logging

from dymo_badge_printer.models import PrinterStatus
from dymo_badge_printer.parsing import (
    extract_tag,
    parse_bool_body,
    parse_printers,
    parse_status,
)

from .conftest import PRINTERS_RESPONSE, STATUS_RESPONSE


# ---------------------------------------------------------------------------
# parse_bool_body
# ---------------------------------------------------------------------------

class TestParseBoolBody:

    def test_true(self):
        assert parse_bool_body('true') is True

    def test_true_with_whitespace(self):
        assert parse_bool_body('  true\r\n') is True

    def test_uppercase_is_not_true(self):
        assert parse_bool_body('TRUE') is False

    def test_false_and_garbage(self):
        assert parse_bool_body('false') is False
        assert parse_bool_body('<html>error</html>') is False
        assert parse_bool_body('') is False
        assert parse_bool_body(None) is False


# ---------------------------------------------------------------------------
# parse_printers
# ---------------------------------------------------------------------------

class TestParsePrinters:

    def test_two_blocks_in_order(self):
        printers = parse_printers(PRINTERS_RESPONSE)
        assert [p.name for p in printers] == [
            'DYMO LabelWriter 550',
            'DYMO LabelWriter 450 Turbo',
        ]
        assert printers[0].model == 'DYMO LabelWriter 550'
        assert printers[0].is_connected is True
        assert printers[1].is_connected is False

    def test_block_without_name_is_dropped(self):
        text = (
            '<Printers>'
            '<LabelWriterPrinter><ModelName>Ghost</ModelName></LabelWriterPrinter>'
            '<LabelWriterPrinter><Name>Real</Name><IsConnected>true</IsConnected></LabelWriterPrinter>'
            '</Printers>'
        )
        printers = parse_printers(text)
        assert len(printers) == 1
        assert printers[0].name == 'Real'
        assert printers[0].is_connected is True

    def test_missing_model_is_empty(self):
        printers = parse_printers('<LabelWriterPrinter><Name>P1</Name></LabelWriterPrinter>')
        assert printers[0].model == ''
        assert printers[0].is_connected is False

    def test_is_connected_false_any_case(self):
        for value in ('False', 'FALSE', 'false', 'no', ''):
            text = f'<LabelWriterPrinter><Name>P</Name><IsConnected>{value}</IsConnected></LabelWriterPrinter>'
            assert parse_printers(text)[0].is_connected is False

    def test_fields_stay_with_their_block(self):
        # Second printer has no ModelName: it must not borrow a later one
        text = (
            '<LabelWriterPrinter><Name>A</Name><ModelName>MA</ModelName></LabelWriterPrinter>'
            '<LabelWriterPrinter><Name>B</Name></LabelWriterPrinter>'
            '<LabelWriterPrinter><Name>C</Name><ModelName>MC</ModelName></LabelWriterPrinter>'
        )
        printers = parse_printers(text)
        assert [(p.name, p.model) for p in printers] == [('A', 'MA'), ('B', ''), ('C', 'MC')]

    def test_other_printer_kinds_and_casing(self):
        text = (
            '<printers>'
            '<tapeprinter><name>LabelManager</name><modelname>PnP</modelname>'
            '<isconnected>TRUE</isconnected></tapeprinter>'
            '<DesktopLabelPrinter><Name>LW 5XL</Name></DesktopLabelPrinter>'
            '</printers>'
        )
        printers = parse_printers(text)
        assert [p.name for p in printers] == ['LabelManager', 'LW 5XL']
        assert printers[0].is_connected is True

    def test_entities_are_unescaped(self):
        text = '<LabelWriterPrinter><Name> R&amp;D Desk </Name></LabelWriterPrinter>'
        assert parse_printers(text)[0].name == 'R&D Desk'

    def test_duplicates_preserved(self):
        block = '<LabelWriterPrinter><Name>Same</Name></LabelWriterPrinter>'
        assert len(parse_printers(block * 2)) == 2

    def test_empty_and_malformed_input(self):
        assert parse_printers('') == []
        assert parse_printers(None) == []
        assert parse_printers('<Printers></Printers>') == []
        assert parse_printers('<LabelWriterPrinter><Name>unterminated') == []
        assert parse_printers('not xml at all') == []


# ---------------------------------------------------------------------------
# parse_status
# ---------------------------------------------------------------------------

class TestParseStatus:

    def test_full_status(self):
        status = parse_status(STATUS_RESPONSE)
        assert status == PrinterStatus(connected=True, ready=False, error='Out of labels')

    def test_connected_not_confused_with_is_connected(self):
        status = parse_status('<IsConnected>True</IsConnected><Ready>true</Ready>')
        assert status.connected is False
        assert status.ready is True

    def test_missing_error_text(self):
        assert parse_status('<Connected>true</Connected>').error is None

    def test_blank_error_text(self):
        assert parse_status('<ErrorText>   \n </ErrorText>').error is None

    def test_booleans_case_insensitive(self):
        status = parse_status('<Connected>TRUE</Connected><Ready>True</Ready>')
        assert status.connected is True
        assert status.ready is True

    def test_malformed_input_gives_defaults(self):
        assert parse_status('<<<>>>') == PrinterStatus()
        assert parse_status('') == PrinterStatus()

    def test_internal_failure_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.WARNING, logger='dymo_badge_printer.parsing'):
            status = parse_status(None)
        assert status == PrinterStatus()
        assert 'Failed to parse printer status' in caplog.text


def test_extract_tag_first_match():
    assert extract_tag('<A>1</A><A>2</A>', 'A') == '1'
    assert extract_tag('<B>1</B>', 'A') is None
