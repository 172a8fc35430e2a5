from typing import Callable, Iterable, Iterator

from ledger.domain import ALL_CATEGORIES, LedgerEntry

Predicate = Callable[[LedgerEntry], bool]


def by_party_search(query: str) -> Predicate:
    needle = (query or "").lower()

    def _filter(e: LedgerEntry) -> bool:
        return needle in e.party_name.lower()

    return _filter


def by_category(category: str) -> Predicate:
    def _filter(e: LedgerEntry) -> bool:
        return category == ALL_CATEGORIES or e.voucher_type == category

    return _filter


def iter_entries(
    entries: Iterable[LedgerEntry], pred: Predicate
) -> Iterator[LedgerEntry]:
    for e in entries:
        if pred(e):
            yield e


def filter_entries(
    entries: Iterable[LedgerEntry], search_query: str = "", category: str = ALL_CATEGORIES
) -> tuple[LedgerEntry, ...]:
    """Entries whose party matches the search and whose voucher type matches
    the category, in input order. Duplicated parties are kept."""
    matches_search = by_party_search(search_query)
    matches_category = by_category(category)
    return tuple(
        iter_entries(entries, lambda e: matches_search(e) and matches_category(e))
    )


def categories(entries: Iterable[LedgerEntry]) -> tuple[str, ...]:
    # dict keeps first-seen order
    seen = dict.fromkeys([ALL_CATEGORIES])
    for e in entries:
        seen.setdefault(e.voucher_type, None)
    return tuple(seen)
