"""JSON export and import file handling."""

import json
from collections.abc import Iterable
from datetime import date, UTC
from decimal import Decimal
from typing import Any

from finflow.database.mappers import entry_to_record
from finflow.domain import errors
from finflow.domain.entities import Entry
from finflow.domain.errors import ImportFormatError
from finflow.domain.normalizer import Clock, system_clock

APP_NAME = "Financial Flow"
EXPORT_VERSION = 1


def export_filename(day: date) -> str:
    """Return the default export file name for a day."""
    return f"financial-flow-export-{day.isoformat()}.json"


def build_export_payload(entries: Iterable[Entry], clock: Clock = system_clock) -> dict[str, Any]:
    """Build the export document for an entry collection."""
    exported_at = clock().astimezone(UTC).isoformat(timespec="milliseconds")
    return {
        "app": APP_NAME,
        "version": EXPORT_VERSION,
        "exportedAt": exported_at.replace("+00:00", "Z"),
        "entries": [entry_to_record(e) for e in entries],
    }


def dump_export(entries: Iterable[Entry], clock: Clock = system_clock) -> str:
    """Serialize the export document as indented JSON."""
    return json.dumps(build_export_payload(entries, clock), ensure_ascii=False, indent=2)


def parse_import_payload(content: str | bytes) -> list[Any]:
    """Extract the raw entry records from an import file.

    Accepts a bare JSON array or an object with an ``entries`` array. Raw
    file bytes are decoded as UTF-8, with or without a byte order mark.

    Raises:
        ImportFormatError: If the content is not UTF-8 JSON or has another shape
    """
    try:
        if isinstance(content, bytes):
            content = content.decode("utf-8-sig")
        document = json.loads(content, parse_float=Decimal)
    except ValueError:
        raise ImportFormatError(errors.invalid_import_json())

    if isinstance(document, list):
        return document
    if isinstance(document, dict) and isinstance(document.get("entries"), list):
        return document["entries"]

    raise ImportFormatError(errors.invalid_import_shape())
