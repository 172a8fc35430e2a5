from functools import reduce
from typing import Iterable

from ledger.domain import LedgerEntry, LedgerStats


def total_debit(entries: Iterable[LedgerEntry]) -> float:
    return reduce(lambda acc, e: acc + e.debit, entries, 0.0)


def total_credit(entries: Iterable[LedgerEntry]) -> float:
    return reduce(lambda acc, e: acc + e.credit, entries, 0.0)


def compute_stats(entries: tuple[LedgerEntry, ...]) -> LedgerStats:
    debit = total_debit(entries)
    credit = total_credit(entries)
    return LedgerStats(
        total_parties=len({e.party_name for e in entries}),
        total_debit=debit,
        total_credit=credit,
        net_balance=debit - credit,
    )
