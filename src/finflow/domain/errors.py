"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested entry does not exist."""


class ImportFormatError(DomainError):
    """Import file is not valid JSON or has the wrong top-level shape."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry '{entry_id}' not found"


def invalid_import_json() -> str:
    """Return message for an import file that is not JSON."""
    return "Import failed: invalid JSON file."


def invalid_import_shape() -> str:
    """Return message for an import file with the wrong top-level shape."""
    return "Import failed: JSON must be an array of entries or { entries: [...] }"


def reference_date_out_of_range(period: str, reference_date) -> str:
    """Return message for a period that cannot be represented."""
    return f"Reference date {reference_date} is out of range for a {period} period"
