from typing import Dict, Iterable

from ledger.dates import date_key
from ledger.domain import LedgerEntry


def latest_per_party(entries: Iterable[LedgerEntry]) -> Dict[str, LedgerEntry]:
    """Most recently dated entry for each party, keyed in first-seen order.

    An entry only replaces the current one when its date is strictly later,
    so ties and unparsable dates keep the first entry seen.
    """
    latest: Dict[str, LedgerEntry] = {}
    for e in entries:
        current = latest.get(e.party_name)
        if current is None or date_key(e.date) > date_key(current.date):
            latest[e.party_name] = e
    return latest


def resolve_balances(entries: Iterable[LedgerEntry]) -> tuple[LedgerEntry, ...]:
    """One entry per party, largest absolute balance first.

    sorted() is stable, so parties with equal |balance| stay in the order
    they were first seen.
    """
    return tuple(
        sorted(
            latest_per_party(entries).values(),
            key=lambda e: abs(e.balance),
            reverse=True,
        )
    )
