from datetime import date, datetime, timezone
from typing import Any, Optional

# Instant used for missing or unparsable dates so they order first.
EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Return an ISO 8601 string for the current UTC time."""
    return utc_now().isoformat()


def parse_instant(value: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 date or timestamp into an aware UTC datetime.

    Date-only strings ("2025-01-15") and naive timestamps are read as UTC.
    Returns None for missing or unparsable values, and for offsets whose UTC
    equivalent falls outside the datetime range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # Offset pushes the instant outside the datetime range
        return None


def instant_or_earliest(value: Any) -> datetime:
    parsed = parse_instant(value)
    return parsed if parsed is not None else EARLIEST_INSTANT
