#!/usr/bin/env python3
"""
CLI: CSV -> VCF

Usage:
    python -m src.cli_csv_to_vcf contacts.csv

Writes contacts.vcf next to the input file.
"""

import argparse
import logging
import sys

import src.writer as writer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert CSV contacts -> VCard 2.1 (.vcf)")
    parser.add_argument("input", nargs="?", help="Input CSV file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every parsed row")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)-5s  %(message)s")

    if args.input is None:
        parser.print_usage(sys.stdout)
        return

    try:
        out_path = writer.convert_csv(args.input)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Error: {exc}")

    print(f"Wrote VCF to {out_path}")


if __name__ == "__main__":
    main()
