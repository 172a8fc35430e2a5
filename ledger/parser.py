import re
from typing import List, Optional, Tuple

from ledger.domain import LedgerEntry, UNKNOWN_PARTY

MIN_COLUMNS = 6

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
# Longest leading decimal number, the way a lenient float reader takes it.
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def split_csv_line(line: str) -> List[str]:
    """Split one CSV line on commas that are not inside double quotes.

    Quote characters only toggle the quoted mode and are dropped from the
    output; every column is whitespace-trimmed.
    """
    cols: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            cols.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    cols.append("".join(current).strip())
    return cols


def parse_amount(raw: Optional[str]) -> float:
    """Strip everything but digits, dots and minus signs, then read the
    leading number: "(500)" -> 500.0, "1.2.3" -> 1.2, "--5" -> 0.0.
    """
    if not raw:
        return 0.0
    m = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", raw))
    if not m:
        return 0.0
    return float(m.group(0)) or 0.0


def _column(cols: List[str], idx: int) -> Optional[str]:
    return cols[idx] if idx < len(cols) else None


def row_to_entry(cols: List[str]) -> Optional[LedgerEntry]:
    if len(cols) < MIN_COLUMNS:
        return None
    return LedgerEntry(
        date=cols[0] or "",
        party_name=cols[1] or UNKNOWN_PARTY,
        voucher_type=cols[2] or "",
        voucher_no=cols[3] or "",
        debit=parse_amount(cols[4]),
        credit=parse_amount(cols[5]),
        balance=parse_amount(_column(cols, 6)),
    )


def parse_csv(text: Optional[str]) -> Tuple[LedgerEntry, ...]:
    """Parse a ledger CSV export into entries, in input order.

    The first non-blank line is the header and is skipped. Rows with fewer
    than six columns are dropped. Never raises: unusable input gives ().
    """
    if not isinstance(text, str):
        return ()

    lines = [line for line in text.split("\n") if line.strip()]
    entries = (row_to_entry(split_csv_line(line)) for line in lines[1:])
    return tuple(e for e in entries if e is not None)
