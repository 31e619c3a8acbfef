from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from markupsafe import escape


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    value: str = ""


CREATE_MESSAGES = {
    "book": "Book must be specified",
    "imprint": "Imprint must be specified",
    "due_back": "Invalid date",
}

UPDATE_MESSAGES = {
    "book": "Must select a book.",
    "imprint": "Imprint must not be empty.",
    "due_back": "Invalid due date",
}


# characters escaped on top of markupsafe's & < > " '
_EXTRA_ENTITIES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})


def sanitize(value: str) -> str:
    """HTML-escape a submitted string: & < > " ' / \\ and backtick."""
    return str(escape(value)).translate(_EXTRA_ENTITIES)


def parse_iso8601(value: str) -> datetime:
    """
    ISO-8601 date or datetime -> naive UTC datetime.
    Date-only input maps to midnight UTC.
    Raises ValueError on bad input, OverflowError when the UTC value is out of range.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _required_text(form, name: str, message: str, errors: list) -> str:
    raw = form.get(name) or ""
    value = raw.strip()
    if not value:
        errors.append(FieldError(name, message, raw))
    return sanitize(value)


def _optional_date(form, name: str, message: str, errors: list) -> Optional[datetime]:
    raw = form.get(name) or ""
    if not raw:
        return None
    try:
        return parse_iso8601(raw)
    except (ValueError, OverflowError):
        # OverflowError: offset pushes the UTC value past datetime.max
        errors.append(FieldError(name, message, raw))
        return None


def validate_bookinstance_form(form, messages=CREATE_MESSAGES):
    """
    Validate + sanitize a submitted book copy form.
    Every rule runs before anything is reported, so the caller gets all errors at once.

    Returns (values, errors):
    - values: book, imprint, status (escaped, None when empty), due_back (datetime or None)
    - errors: list[FieldError] in field order
    """
    errors = []

    book = _required_text(form, "book", messages["book"], errors)
    imprint = _required_text(form, "imprint", messages["imprint"], errors)

    # status is only escaped here; the column type rejects unknown values
    status = sanitize(form.get("status") or "") or None

    due_back = _optional_date(form, "due_back", messages["due_back"], errors)

    values = {
        "book": book,
        "imprint": imprint,
        "status": status,
        "due_back": due_back,
    }
    return values, errors
