# tests/test_writer.py
from pathlib import Path

import pytest

from src.writer import (
    Contact,
    derive_output_path,
    to_contact,
    format_vcard,
    convert_csv,
    write_vcf,
)


def test_format_vcard_layout():
    card = format_vcard("Alice", "Smith", "123-456-7890", "098-765-4321", "alice@example.com", "Friend from school")
    assert card.splitlines() == [
        "BEGIN:VCARD",
        "VERSION:2.1",
        "N:Smith;Alice",
        "FN:Alice Smith",
        "EMAIL;PREF;INTERNET:alice@example.com",
        "TEL;HOME;VOICE:123-456-7890",
        "TEL;HOME;VOICE:098-765-4321",
        "NOTE:Friend from school",
        "REV:1",
        "END:VCARD",
    ]
    assert card.endswith("END:VCARD\n")


def test_format_vcard_does_not_escape():
    card = format_vcard("A;B", "C:D", "", "", "", "x;y:z")
    assert "N:C:D;A;B\n" in card
    assert "NOTE:x;y:z\n" in card


def test_to_contact_full_row():
    assert to_contact(["a", "b", "c", "d", "e", "f"]) == Contact("a", "b", "c", "d", "e", "f")


def test_to_contact_drops_extra_fields():
    data = to_contact(["a", "b", "c", "d", "e", "f", "g", "h"])
    assert data == ("a", "b", "c", "d", "e", "f")
    assert "g" not in format_vcard(*data)


def test_to_contact_pads_missing_fields():
    data = to_contact(["Bob", "Brown", "0112233445", "0611223344"])
    assert data.email == ""
    assert data.note == ""
    card = format_vcard(*data)
    assert "EMAIL;PREF;INTERNET:\n" in card
    assert "NOTE:\n" in card


def test_to_contact_two_fields():
    card = format_vcard(*to_contact(["John", "Smith"]))
    assert "EMAIL;PREF;INTERNET:\n" in card
    assert card.count("TEL;HOME;VOICE:\n") == 2


def test_to_contact_empty_row():
    assert to_contact([]) == Contact("", "", "", "", "", "")


@pytest.mark.parametrize(
    "given, expected",
    [
        ("contacts/my_contacts.csv", Path("contacts/my_contacts.vcf")),
        ("my_contacts.csv", Path("my_contacts.vcf")),
        ("/tmp/data/list.txt", Path("/tmp/data/list.vcf")),
        ("archive.tar.csv", Path("archive.tar.vcf")),
        ("noext", Path("noext.vcf")),
    ],
)
def test_derive_output_path(given, expected):
    assert derive_output_path(given, "vcf") == expected


def test_derive_output_path_no_parent_is_current_dir():
    out = derive_output_path("my_contacts.csv", "vcf")
    assert str(out) == "my_contacts.vcf"
    assert out.parent == Path(".")


@pytest.mark.parametrize("bad", ["", "contacts/", ".", ".."])
def test_derive_output_path_without_stem(bad):
    with pytest.raises(ValueError, match="no file name"):
        derive_output_path(bad, "vcf")


def test_write_vcf_overwrites(tmp_path):
    out = tmp_path / "out.vcf"
    write_vcf(out, "first version, long")
    write_vcf(out, "second")
    assert out.read_text(encoding="utf-8") == "second"


def test_write_vcf_missing_parent(tmp_path):
    with pytest.raises(OSError):
        write_vcf(tmp_path / "missing" / "out.vcf", "x")


def test_convert_csv_missing_input(tmp_path):
    with pytest.raises(OSError):
        convert_csv(tmp_path / "absent.csv")
    assert not (tmp_path / "absent.vcf").exists()
