#!/usr/bin/env python3
"""
src/reader.py
Reader for contact CSV files. Provides read_contact_rows().

The first line is always treated as a header and dropped. Fields are split on
a bare comma; quoting is not supported.
"""

import logging
from pathlib import Path
from typing import List

CSV_ENCODING = "utf-8"

logger = logging.getLogger("csv2vcf.reader")


def split_row(line: str) -> List[str]:
    return line.split(",")


def read_contact_rows(path) -> List[List[str]]:
    """Load the whole file and return one list of fields per data row."""
    path = Path(path)
    # newline="" keeps "\r" so only "\n" ends a line
    with path.open("r", encoding=CSV_ENCODING, newline="") as fh:
        contents = fh.read()

    records = []
    for i, line in enumerate(contents.split("\n")):
        if i == 0:
            continue
        if line.endswith("\r"):
            line = line[:-1]
        # skip empty lines
        if line == "":
            continue
        fields = split_row(line)
        logger.debug("row %d: %r", i, fields)
        records.append(fields)
    return records
