#!/usr/bin/env python3
"""Command-line front end for the Jalali <-> Gregorian converters.

Examples::

    jalali-sql to-gregorian "1400-01-01 08:30"
    jalali-sql to-gregorian 1400-12-29 --end-of-day
    jalali-sql to-jalali 2021-03-21T17:45:00
    jalali-sql convert-csv orders.csv --column placed_at --direction to-jalali -o out.csv

Logging is configured from ``JALALI_SQL_LOG_LEVEL`` (default WARNING) and
``JALALI_SQL_LOG_FILE`` (optional rotating log file).
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from jalali_sql.batch import DIRECTIONS, TO_GREGORIAN, convert_frame_column
from jalali_sql.converters import gregorian_to_jalali, jalali_to_gregorian
from jalali_sql.errors import JalaliError
from jalali_sql.logging_setup import get_logger, setup_logging

EXIT_CONVERSION_ERROR = 2

logger = get_logger(__name__)


def _configure_logging() -> None:
    level_name = os.getenv("JALALI_SQL_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    setup_logging(level=level, log_file=os.getenv("JALALI_SQL_LOG_FILE") or None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jalali-sql",
        description="Convert dates between the Jalali and Gregorian calendars",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_greg = sub.add_parser("to-gregorian", help="Jalali text -> Gregorian timestamp")
    p_greg.add_argument("text", help="YYYY-MM-DD[ HH:MM[:SS]]")
    p_greg.add_argument("--end-of-day", action="store_true", help="force the time to 23:59:59")

    p_jal = sub.add_parser("to-jalali", help="Gregorian ISO date/timestamp -> Jalali text")
    p_jal.add_argument("timestamp", help="ISO 8601 date or date-time, e.g. 2021-03-21 or 2021-03-21T08:30")

    p_csv = sub.add_parser("convert-csv", help="convert one column of a CSV file")
    p_csv.add_argument("csv_file", type=Path, help="input CSV file")
    p_csv.add_argument("--column", required=True, help="column to convert")
    p_csv.add_argument("--direction", required=True, choices=DIRECTIONS)
    p_csv.add_argument("--end-of-day", action="store_true", help="force the time to 23:59:59 (to-gregorian only)")
    p_csv.add_argument("--target", default=None, help="write into this column instead of overwriting")
    p_csv.add_argument("-o", "--output", type=Path, default=None, help="output CSV (default: stdout)")

    return parser


def _run_convert_csv(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if not args.csv_file.is_file():
        parser.error(f"{args.csv_file} does not exist")

    df = pd.read_csv(args.csv_file, dtype={args.column: str}, keep_default_na=True)
    logger.info("📄 convert-csv: %s rows from %s", len(df), args.csv_file)

    if args.column not in df.columns:
        parser.error(f"column {args.column!r} not in {args.csv_file} (have {list(df.columns)})")

    out = convert_frame_column(
        df,
        args.column,
        args.direction,
        end_of_day=args.end_of_day and args.direction == TO_GREGORIAN,
        target=args.target,
    )
    if args.output:
        out.to_csv(args.output, index=False)
        logger.info("📄 convert-csv: wrote %s", args.output)
    else:
        out.to_csv(sys.stdout, index=False)


def main(argv: Optional[List[str]] = None) -> int:
    _configure_logging()
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "to-gregorian":
            print(jalali_to_gregorian(args.text, args.end_of_day).isoformat(sep=" "))
        elif args.command == "to-jalali":
            try:
                ts = datetime.fromisoformat(args.timestamp)
            except ValueError:
                parser.error(f"not an ISO date/timestamp: {args.timestamp!r}")
            print(gregorian_to_jalali(ts))
        else:
            _run_convert_csv(args, parser)
    except JalaliError as exc:
        print(f"💥 {exc}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
