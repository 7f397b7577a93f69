#!/usr/bin/env python3
"""
AAMVA Decoder CLI - Command Line Interface
==========================================

Main CLI entry point for decoding AAMVA barcode payloads.

Usage:
    aamva-decode decode <file|->        Decode one payload
    aamva-decode detect <file|->        Show version and header of a payload
    aamva-decode batch <folder>         Decode every payload file in a folder
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .config import AppConfig, get_config, set_config
from .exceptions import ConfigurationError
from .core.version import detect_version, parse_header
from .core.field_tables import profile_for
from .parser.decoder import LicenseDecoder
from .parser.extractor import FieldExtractor


def _read_payload(source: str) -> str:
    """Read a payload from a file, or from stdin when source is '-'."""
    if source == '-':
        return sys.stdin.read()
    # newline='' keeps the \r segment terminators intact
    with open(source, encoding='utf-8', errors='replace', newline='') as f:
        return f.read()


def _print_summary(record, minor_age: int):
    names = [record.first_name, *record.middle_names, record.last_name]
    print(f"Name: {' '.join(n for n in names if n) or '-'}")
    print(f"License number: {record.license_number or '-'}")
    print(f"Birth date: {record.birth_date or '-'}")
    print(f"Expiration date: {record.expiration_date or '-'}")
    print(f"Version: {record.version if record.version is not None else 'unrecognized'}")
    print(f"Expired: {record.is_expired()}")
    print(f"Under {minor_age}: {record.is_minor(age=minor_age)}")
    if record.unresolved_codes:
        print(f"Unresolved codes: {record.unresolved_codes}")


def cmd_decode(args, config: AppConfig):
    """Decode a single payload."""
    if args.source != '-' and not Path(args.source).exists():
        print(f"Error: File not found: {args.source}")
        return 1

    payload = _read_payload(args.source)
    decoder = LicenseDecoder(config.decoder)
    record = decoder.decode(payload)

    if args.json:
        result = record.to_dict()
        if args.raw:
            extractor = FieldExtractor(payload, profile_for(record.version).fields)
            result['raw_fields'] = {
                element.value: value for element, value in extractor.raw_fields().items()
            }
        print(json.dumps(result, indent=2))
    else:
        _print_summary(record, config.decoder.minor_age)

    return 0


def cmd_detect(args, config: AppConfig):
    """Show the detected version and header of a payload."""
    if args.source != '-' and not Path(args.source).exists():
        print(f"Error: File not found: {args.source}")
        return 1

    payload = _read_payload(args.source)
    version = detect_version(payload)
    header = parse_header(payload)

    print(f"Version: {version if version is not None else 'unrecognized'}")
    if header is None:
        print("Header: not found")
    else:
        print(f"Issuer ID: {header.issuer_id}")
        print(f"Header version: {header.version}")
        print(f"Jurisdiction version: {header.jurisdiction_version}")
        print(f"Entries: {header.entries}")

    return 0


def cmd_batch(args, config: AppConfig):
    """Batch decode a folder of payload files."""
    folder = Path(args.folder)

    if not folder.exists():
        print(f"Error: Folder not found: {folder}")
        return 1

    files = sorted(folder.glob(args.pattern))

    if not files:
        print(f"No payload files found in {folder}")
        return 1

    print(f"Decoding {len(files)} payloads...")

    decoder = LicenseDecoder(config.decoder)
    results = []
    for path in files:
        record = decoder.decode(_read_payload(str(path)))
        result = record.to_dict()
        result['filename'] = path.name
        results.append(result)
        print(f"  {path.name}: {record.license_number or 'NO LICENSE NUMBER'} (version {record.version})")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to: {args.output}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aamva-decode',
        description='AAMVA Decoder - Decode driver license barcode payloads',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='Path to YAML/JSON config file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Decode command
    decode_parser = subparsers.add_parser('decode', help='Decode one payload')
    decode_parser.add_argument('source', help="Payload file, or '-' for stdin")
    decode_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    decode_parser.add_argument('--raw', '-r', action='store_true',
                               help='Include raw element values in JSON output')

    # Detect command
    detect_parser = subparsers.add_parser('detect', help='Show version and header')
    detect_parser.add_argument('source', help="Payload file, or '-' for stdin")

    # Batch command
    batch_parser = subparsers.add_parser('batch', help='Batch decode folder')
    batch_parser.add_argument('folder', help='Folder with payload files')
    batch_parser.add_argument('--pattern', '-p', default='*.txt', help='Glob for payload files')
    batch_parser.add_argument('--output', '-o', help='Output JSON file')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.config:
            config = AppConfig.load(args.config)
            set_config(config)
        else:
            config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    if args.verbose:
        logging.getLogger('aamva_decoder').setLevel(logging.DEBUG)

    commands = {
        'decode': cmd_decode,
        'detect': cmd_detect,
        'batch': cmd_batch,
    }

    try:
        return commands[args.command](args, config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
