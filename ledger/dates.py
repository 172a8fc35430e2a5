import re
from functools import lru_cache
from typing import Optional, Tuple

import pandas as pd

# Sort key for a date that could not be parsed; below every (True, ts) key.
UNPARSABLE_DATE: Tuple = (False,)

_RELATIVE = re.compile(r"\b(now|today|tomorrow|yesterday)\b", re.IGNORECASE)
_DIGIT = re.compile(r"\d")


@lru_cache(maxsize=4096)
def parse_entry_date(text: str) -> Optional[pd.Timestamp]:
    """Parse a free-text ledger date, or None when it is not a calendar date.

    Text without any digit ("Jan") and relative words ("today") are not
    calendar dates. Timezone-aware values are converted to naive UTC so that
    every result is comparable with every other one.
    """
    if not text or not _DIGIT.search(text) or _RELATIVE.search(text):
        return None
    try:
        ts = pd.to_datetime(text.strip(), errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def date_key(text: str) -> Tuple:
    """Sort key for an entry date: unparsable dates order before all others."""
    ts = parse_entry_date(text)
    return UNPARSABLE_DATE if ts is None else (True, ts)
