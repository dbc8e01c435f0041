from __future__ import annotations

import re
from datetime import date, datetime, timezone

from ..core.constants import DATE_FORMAT
from ..core.exceptions import InvalidDateError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise InvalidDateError("invalid date format, use YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError("invalid date format, use YYYY-MM-DD") from None


def utc_now() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)
