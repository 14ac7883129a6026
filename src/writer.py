#!/usr/bin/env python3
"""
src/writer.py
Turns contact rows into VCard 2.1 text and writes the .vcf file.

Usage:
    from src.writer import convert_csv
    convert_csv("contacts/my_contacts.csv")   # -> contacts/my_contacts.vcf
"""

import logging
import os
from pathlib import Path
from typing import List, NamedTuple, Sequence

from src.reader import read_contact_rows

OUTPUT_EXTENSION = "vcf"
VCF_ENCODING = "utf-8"

logger = logging.getLogger("csv2vcf.writer")


class Contact(NamedTuple):
    first: str
    last: str
    tel: str
    mobile: str
    email: str
    note: str


def format_vcard(first: str, last: str, tel: str, mobile: str, email: str, note: str) -> str:
    """Render one VCard 2.1 block. Values are inserted as-is, without escaping."""
    lines = [
        "BEGIN:VCARD",
        "VERSION:2.1",
        f"N:{last};{first}",
        f"FN:{first} {last}",
        f"EMAIL;PREF;INTERNET:{email}",
        f"TEL;HOME;VOICE:{tel}",
        f"TEL;HOME;VOICE:{mobile}",
        f"NOTE:{note}",
        "REV:1",
        "END:VCARD",
    ]
    return "".join(line + "\n" for line in lines)


def to_contact(fields: Sequence[str]) -> Contact:
    # pad missing trailing fields, drop anything past the note
    values = list(fields[:6]) + [""] * (6 - len(fields[:6]))
    return Contact(*values)


def derive_output_path(input_path, extension: str) -> Path:
    raw = str(input_path)
    input_path = Path(input_path)
    seps = tuple(s for s in (os.sep, os.altsep) if s)
    if raw == "" or raw.endswith(seps) or input_path.name in ("", ".", ".."):
        raise ValueError("Input path has no file name")
    # Path("x.csv").parent is already "."
    parent = input_path.parent
    return parent / f"{input_path.stem}.{extension}"


def write_vcf(path, data: str) -> None:
    path = Path(path)
    with path.open("w", encoding=VCF_ENCODING, newline="") as fh:
        fh.write(data)


def format_vcards(rows: List[List[str]]) -> List[str]:
    return [format_vcard(*to_contact(row)) for row in rows]


def convert_csv(csv_path) -> Path:
    """Convert csv_path into a .vcf file next to it and return the written path.

    Raises OSError if the input cannot be read or the output cannot be
    written, and ValueError if the input is not UTF-8 or no output name can
    be derived from it.
    """
    rows = read_contact_rows(csv_path)
    vcf_path = derive_output_path(csv_path, OUTPUT_EXTENSION)
    cards = format_vcards(rows)
    write_vcf(vcf_path, "\n".join(cards))
    logger.info("Wrote %d contact(s) to %s", len(cards), vcf_path)
    return vcf_path
