from __future__ import annotations

import re
from datetime import date, datetime

_FRACTION = re.compile(r"\.(\d+)")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as returned by the backend.

    PostgREST emits `Z` or `+00:00` offsets and trims trailing zeros from
    the fraction (`.12345`); `fromisoformat` before 3.11 wants 3 or 6 digits.
    """
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    v = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), v, count=1)
    return datetime.fromisoformat(v)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it easier.
    """
    return date.today()
