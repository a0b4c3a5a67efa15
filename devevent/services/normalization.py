"""Pure normalizers shared by the event and booking pipelines.

Keep these pure (input -> output) so they are easy to test. Each one either
returns the canonical value or raises :class:`ValidationError` naming the
field it was asked to check.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Final, Iterable, List

from bson import ObjectId

from ..errors import ValidationError

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
_QUOTES: Final = re.compile(r"['\"‘’“”]")
_NON_ALNUM: Final = re.compile(r"[^a-z0-9]+")
_MULTI_HYPHEN: Final = re.compile(r"-{2,}")

_TIME_24H: Final = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])(?::[0-5][0-9])?$")
_TIME_12H: Final = re.compile(r"^(1[0-2]|0?[1-9]):([0-5][0-9])\s*(am|pm)$", re.IGNORECASE)

_EMAIL: Final = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Calendar-date layouts tried in order. %Y only matches four-digit years, so
# "12/10/24" is rejected rather than guessed. Slashed dates are US
# month/day/year.
_DATE_FORMATS: Final = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%d %b %Y",
    "%d %B %Y",
)

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def require_text(field: str, value: Any) -> str:
    """Return *value* trimmed, failing when it is not a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"{field.capitalize()} is required.")
    return value.strip()


def require_items(field: str, values: Any) -> List[str]:
    """Return the trimmed, non-blank entries of *values*; at least one must remain."""
    if isinstance(values, str) or not isinstance(values, Iterable):
        raise ValidationError(field, f"{field.capitalize()} must be a list of strings.")
    items: List[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ValidationError(field, f"{field.capitalize()} must be a list of strings.")
        if value.strip():
            items.append(value.strip())
    if not items:
        raise ValidationError(field, f"{field.capitalize()} must have at least one item.")
    return items


def dedupe(values: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


def slugify(title: str) -> str:
    """Derive the URL slug for *title*.

    ``"React Conf 2024"`` becomes ``"react-conf-2024"``. Returns an empty
    string when the title holds no ASCII letters or digits.
    """
    slug = _QUOTES.sub("", title.strip().lower())
    slug = _NON_ALNUM.sub("-", slug).strip("-")
    return _MULTI_HYPHEN.sub("-", slug)


def normalize_date(value: str) -> str:
    """Return *value* as an ISO calendar date (``YYYY-MM-DD``).

    Datetimes carrying an offset are converted to UTC first; naive ones are
    taken as UTC already.
    """
    text = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("date", "Invalid date.") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Return *value* as a zero-padded 24-hour ``HH:mm`` string.

    Accepts ``HH:mm``, ``HH:mm:ss`` and ``h:mm AM/PM``.
    """
    text = value.strip()

    m24 = _TIME_24H.match(text)
    if m24:
        return f"{int(m24.group(1)):02d}:{m24.group(2)}"

    m12 = _TIME_12H.match(text)
    if m12:
        hour = int(m12.group(1))
        meridiem = m12.group(3).lower()
        if meridiem == "pm" and hour != 12:
            hour += 12
        if meridiem == "am" and hour == 12:
            hour = 0
        return f"{hour:02d}:{m12.group(2)}"

    raise ValidationError("time", "Invalid time.")


def to_object_id(field: str, value: Any) -> ObjectId:
    """Accept an :class:`ObjectId` or its 24-character hex form."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value.strip()):
        return ObjectId(value.strip())
    raise ValidationError(field, "Invalid id.")


def normalize_email(value: Any) -> str:
    """Trim and lowercase *value*, then check it looks like ``local@domain.tld``."""
    if not isinstance(value, str):
        raise ValidationError("email", "Invalid email.")
    email = value.strip().lower()
    if not email.isascii() or not _EMAIL.match(email):
        raise ValidationError("email", "Invalid email.")
    return email


__all__ = [
    "require_text",
    "require_items",
    "dedupe",
    "slugify",
    "normalize_date",
    "normalize_time",
    "normalize_email",
    "to_object_id",
]
