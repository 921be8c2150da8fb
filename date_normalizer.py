from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, Optional, Pattern, Tuple

from errors import DateParseError

ORDINAL_RE = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)\b", re.I)

# Source format (as written on the site) -> (strptime pattern, regex the text must match;
# group 1 replaces the match before strptime)
DATE_FORMATS: Dict[str, Tuple[str, Optional[Pattern[str]]]] = {
    "MMMM dd, yyyy": ("%B %d, %Y", None),
    "do MMMM, yyyy": ("%d %B, %Y", ORDINAL_RE),
}


def parse_date(text: Optional[str], date_format: str) -> Optional[str]:
    """
    Parse a date as printed on the dashboard and return it as YYYY-MM-DD.
    Empty input gives None; text that doesn't match the format raises DateParseError.
    """
    if not text or not text.strip():
        return None
    try:
        pattern, cleanup = DATE_FORMATS[date_format]
    except KeyError:
        raise ValueError(f"Unsupported date format: {date_format!r}") from None

    cleaned = re.sub(r"\s+", " ", text).strip()
    if cleanup is not None:
        cleaned, found = cleanup.subn(r"\1", cleaned, count=1)
        if not found:
            raise DateParseError(text, date_format)
    try:
        return datetime.strptime(cleaned, pattern).date().isoformat()
    except ValueError as e:
        raise DateParseError(text, date_format) from e
