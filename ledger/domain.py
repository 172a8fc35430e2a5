from dataclasses import dataclass
from typing import Tuple

ALL_CATEGORIES = "all"
UNKNOWN_PARTY = "Unknown"


@dataclass(frozen=True)
class LedgerEntry:
    date: str = ""                    # free text, e.g. "2024-01-02" or "02-Jan-24"
    party_name: str = UNKNOWN_PARTY
    voucher_type: str = ""            # category label, may be empty
    voucher_no: str = ""
    debit: float = 0.0
    credit: float = 0.0
    balance: float = 0.0              # signed running balance


@dataclass(frozen=True)
class LedgerSnapshot:
    entries: Tuple[LedgerEntry, ...]
    synced_at: str  # ISO timestamp of the sync


@dataclass(frozen=True)
class FilterState:
    search_query: str = ""
    category: str = ALL_CATEGORIES


@dataclass(frozen=True)
class LedgerStats:
    total_parties: int
    total_debit: float
    total_credit: float
    net_balance: float
