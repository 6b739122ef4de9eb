"""
DYMO Badge Printer - Command Line
=================================

Usage:
    dymo-badges print participants.csv
    dymo-badges export participants.csv --output-dir generated-labels
    dymo-badges printers --status
    dymo-badges simulate
"""

import argparse
import json
import logging
import sys
from typing import List

from . import __version__
from .client import DymoClient
from .config import (
    DEBUG, DEFAULT_TIMEOUT_MS, PRINT_DELAY_MS, PRINTER_MATCH, OUTPUT_DIR,
    SIMULATOR_HOST, SIMULATOR_PORT,
)
from .errors import DymoError, ServiceUnavailable, PrinterDiscoveryError, NoPrinterFound
from .labels import generate_label_xml, export_label, role_display
from .models import Participant, ItemResult
from .participants import read_participants
from .printer import BadgePrinter

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_UNAVAILABLE = 2
EXIT_NO_PRINTER = 3


def _banner(title: str):
    print("=" * 60)
    print(title)
    print("=" * 60)


def _load(csv_path: str) -> List[Participant]:
    """Read participants, reporting problems on the console."""
    try:
        participants = read_participants(csv_path)
    except FileNotFoundError:
        print(f"[ERROR] CSV file not found: {csv_path}")
        print("        Expected columns: nom,prenom,role")
        return []
    except ValueError as e:
        print(f"[ERROR] {e}")
        return []

    if not participants:
        print(f"[ERROR] No participants found in {csv_path}")
    return participants


def _preview(participants: List[Participant]):
    print(f"\nParticipants ({len(participants)}):")
    for index, p in enumerate(participants, start=1):
        print(f"  {index}. {p.full_name} - {role_display(p.role)}")


def _report_item(result: ItemResult):
    p = result.participant
    if result.success:
        print(f"[OK]    {p.full_name} ({p.role})")
    elif result.error:
        print(f"[ERROR] {p.full_name}: {result.error}")
    else:
        print(f"[WARN]  {p.full_name}: label rejected by the printer")


def _client(args) -> DymoClient:
    return DymoClient(timeout_ms=args.timeout_ms)


# =============================================================================
# Commands
# =============================================================================

def cmd_print(args) -> int:
    """Print a badge for every participant in the CSV file."""
    participants = _load(args.csv)
    if not participants:
        return EXIT_ERRORS

    printer = BadgePrinter(
        client=_client(args),
        printer_match=args.printer_match,
        delay_ms=args.delay_ms,
        output_dir=args.output_dir or None,
        copies=args.copies,
    )

    print("Checking DYMO Label Web Service...")
    try:
        printer_name = printer.check_printer()
    except ServiceUnavailable:
        print("[ERROR] DYMO Label Web Service not available")
        print("        Make sure DYMO Connect / DYMO Label Software is installed and running")
        return EXIT_UNAVAILABLE
    except (PrinterDiscoveryError, NoPrinterFound) as e:
        print(f"[ERROR] {e}")
        return EXIT_NO_PRINTER

    print(f"[OK]    Printer: {printer_name}")
    _preview(participants)
    print()

    summary = printer.print_all(participants, on_result=_report_item)

    print()
    _banner("Print results")
    print(f"Success: {summary.success_count}")
    print(f"Errors:  {summary.error_count}")
    print(f"Total:   {summary.total}")
    return EXIT_OK if summary.error_count == 0 else EXIT_ERRORS


def cmd_export(args) -> int:
    """Write label XML files without contacting the service."""
    participants = _load(args.csv)
    if not participants:
        return EXIT_ERRORS

    for p in participants:
        path = export_label(p, generate_label_xml(p), args.output_dir)
        print(f"[OK]    {path}")
    print(f"\n{len(participants)} label(s) written to {args.output_dir}")
    return EXIT_OK


def cmd_printers(args) -> int:
    """Show the printers reported by the service."""
    client = _client(args)
    if not client.check_available():
        print("[ERROR] DYMO Label Web Service not available")
        return EXIT_UNAVAILABLE

    try:
        printers = client.list_printers()
    except DymoError as e:
        print(f"[ERROR] Failed to list printers: {e}")
        return EXIT_NO_PRINTER

    if args.json:
        data = []
        for p in printers:
            entry = p.to_dict()
            if args.status:
                try:
                    entry['status'] = client.get_printer_status(p.name).to_dict()
                except DymoError as e:
                    entry['status'] = {'error': str(e)}
            data.append(entry)
        print(json.dumps(data, indent=2))
        return EXIT_OK if printers else EXIT_NO_PRINTER

    print(f"{len(printers)} DYMO printer(s) detected:")
    for index, p in enumerate(printers, start=1):
        state = 'connected' if p.is_connected else 'not connected'
        print(f"  {index}. {p.name} ({p.model}) - {state}")

        if args.status:
            try:
                status = client.get_printer_status(p.name)
            except DymoError as e:
                print(f"       status unavailable: {e}")
                continue
            line = f"       connected={status.connected} ready={status.ready}"
            if status.error:
                line += f" error={status.error}"
            print(line)

    return EXIT_OK if printers else EXIT_NO_PRINTER


def cmd_simulate(args) -> int:
    """Run the DYMO service simulator."""
    from .simulator import run_simulator

    _banner("DYMO Label Web Service Simulator")
    print(f"Listening on https://{args.host}:{args.port}")
    print("=" * 60)
    run_simulator(host=args.host, port=args.port, cert=args.cert, key=args.key,
                  accept_jobs=not args.reject_jobs)
    return EXIT_OK


# =============================================================================
# Parser
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dymo-badges',
        description='Batch-print name badges on a DYMO LabelWriter',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--timeout-ms', type=int, default=DEFAULT_TIMEOUT_MS,
                        help='Request deadline in milliseconds (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true', default=DEBUG,
                        help='Debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('print', help='Print badges from a CSV file')
    p.add_argument('csv', help='CSV file with columns nom,prenom,role')
    p.add_argument('--output-dir', default=OUTPUT_DIR,
                   help='Also save generated label XML here')
    p.add_argument('--delay-ms', type=int, default=PRINT_DELAY_MS,
                   help='Pause between labels (default: %(default)s)')
    p.add_argument('--printer-match', default=PRINTER_MATCH,
                   help='Preferred printer name substring (default: %(default)r)')
    p.add_argument('--copies', type=int, default=1, help='Copies per badge')
    p.set_defaults(func=cmd_print)

    p = sub.add_parser('export', help='Write label XML files only')
    p.add_argument('csv', help='CSV file with columns nom,prenom,role')
    p.add_argument('--output-dir', default=OUTPUT_DIR or 'generated-labels')
    p.set_defaults(func=cmd_export)

    p = sub.add_parser('printers', help='List printers reported by the service')
    p.add_argument('--status', action='store_true', help='Query each printer status')
    p.add_argument('--json', action='store_true', help='Print the printer list as JSON')
    p.set_defaults(func=cmd_printers)

    p = sub.add_parser('simulate', help='Run a local DYMO service simulator')
    p.add_argument('--host', default=SIMULATOR_HOST)
    p.add_argument('--port', type=int, default=SIMULATOR_PORT)
    p.add_argument('--cert', help='TLS certificate file')
    p.add_argument('--key', help='TLS private key file')
    p.add_argument('--reject-jobs', action='store_true', help='Answer "false" to every label')
    p.set_defaults(func=cmd_simulate)

    return parser


def main(argv: List[str] = None) -> int:
    """Entry point for the dymo-badges command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, 'copies', 1) < 1:
        parser.error('--copies must be at least 1')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
