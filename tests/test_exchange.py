"""Tests for JSON export and import file handling."""

import json
from datetime import date

import pytest

from finflow.domain.errors import ImportFormatError
from finflow.domain.exchange import (
    build_export_payload,
    dump_export,
    export_filename,
    parse_import_payload,
)


def test_export_payload_shape(sample_entries, clock):
    """Test the export document fields."""
    payload = build_export_payload(sample_entries, clock)

    assert payload["app"] == "Financial Flow"
    assert payload["version"] == 1
    assert payload["exportedAt"] == "2024-01-15T12:00:00.000Z"
    assert [e["id"] for e in payload["entries"]] == ["1", "2"]
    assert payload["entries"][1] == {
        "id": "2",
        "type": "outflow",
        "date": "2024-01-06",
        "amount": 40,
        "description": "Groceries",
        "category": "Food",
        "createdAt": 1,
    }


def test_dump_export_is_json(sample_entries, clock):
    """Test that the export document serializes to JSON."""
    document = json.loads(dump_export(sample_entries, clock))
    assert len(document["entries"]) == 2


def test_export_filename():
    """Test the default export file name."""
    assert export_filename(date(2024, 3, 9)) == "financial-flow-export-2024-03-09.json"


def test_parse_bare_array():
    """Test importing a bare JSON array."""
    assert parse_import_payload('[{"id": "a"}]') == [{"id": "a"}]


def test_parse_object_with_entries():
    """Test importing an object with an entries array."""
    assert parse_import_payload('{"version": 1, "entries": [1, 2]}') == [1, 2]


@pytest.mark.parametrize("text,fragment", [
    ("", "invalid JSON"),
    ("{oops", "invalid JSON"),
    ('{"entries": "nope"}', "array of entries"),
    ("null", "array of entries"),
    ("3.5", "array of entries"),
])
def test_parse_rejects_other_shapes(text, fragment):
    """Test that other JSON shapes are rejected."""
    with pytest.raises(ImportFormatError, match=fragment):
        parse_import_payload(text)


def test_parse_bytes_with_byte_order_mark():
    """Test importing UTF-8 bytes that start with a byte order mark."""
    assert parse_import_payload(b'\xef\xbb\xbf[{"id": "a"}]') == [{"id": "a"}]


def test_parse_rejects_undecodable_bytes():
    """Test that bytes that are not UTF-8 are rejected as invalid JSON."""
    with pytest.raises(ImportFormatError, match="invalid JSON file"):
        parse_import_payload(b"\xff\xfe\x00garbage")
