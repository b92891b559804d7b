from __future__ import annotations

from datetime import date, datetime, timezone
import re

# Marker found in JavaScript Date.toString() output, e.g.
# "Mon Jan 01 2024 00:00:00 GMT+0000 (Coordinated Universal Time)"
TIMESTAMP_MARKER = "GMT"

# Date.toString() and Date.toUTCString() shapes.
_JS_DATE_FORMATS = ("%a %b %d %Y %H:%M:%S GMT%z", "%a, %d %b %Y %H:%M:%S GMT")
_PAREN_SUFFIX = re.compile(r"\s*\(.*\)\s*$")


def looks_like_timestamp(value: object) -> bool:
    return TIMESTAMP_MARKER in str(value)


def parse_timestamp(value: object) -> datetime | None:
    """Parse ISO-8601 or JavaScript Date.toString()/toUTCString() text. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if value is None:
        return None

    text = str(value).strip()
    if not text:
        return None

    if TIMESTAMP_MARKER in text:
        text = _PAREN_SUFFIX.sub("", text)
        for fmt in _JS_DATE_FORMATS:
            try:
                dt = datetime.strptime(text, fmt)
            except ValueError:
                continue
            return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
        return None

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: object) -> str:
    """Short US date (M/D/YYYY) in the timestamp's own offset; raw text if it does not parse."""
    dt = parse_timestamp(value)
    if dt is None:
        return "" if value is None else str(value)
    return f"{dt.month}/{dt.day}/{dt.year}"
