import logging
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union

from ledger.domain import ALL_CATEGORIES, FilterState, LedgerEntry, LedgerSnapshot, LedgerStats
from ledger.events import LEDGER_SYNCED, SYNC_FAILED, EventBus, event_bus
from ledger.functional import Either, Left, Maybe, Nothing, Right, pipe
from ledger.parser import parse_csv
from ledger.query import categories as list_categories, filter_entries
from ledger.resolver import resolve_balances
from ledger.stats import compute_stats
from ledger.storage import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)

NO_DATA = "No data found in CSV file"

Fetcher = Callable[[], Either[str, str]]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class LedgerSession:
    """Owns the current snapshot and filter for one viewer session.

    Only this object replaces the snapshot or the filter; every view is a
    fresh projection of the current state.
    """

    def __init__(
        self,
        snapshot_path: Optional[Union[str, Path]] = None,
        bus: EventBus = event_bus,
        clock: Callable[[], str] = _utc_now_iso,
    ):
        self.snapshot_path = snapshot_path
        self.bus = bus
        self.clock = clock
        self.snapshot: Optional[LedgerSnapshot] = None
        self.filter_state = FilterState()
        self.last_status: str = ""

    # --- state changes

    def load(self) -> Maybe[LedgerSnapshot]:
        if self.snapshot_path is None:
            return Nothing()
        return load_snapshot(self.snapshot_path).map(self._restore)

    def _restore(self, snapshot: LedgerSnapshot) -> LedgerSnapshot:
        self.snapshot = snapshot
        logger.info("Loaded %d stored entries", len(snapshot.entries))
        return snapshot

    def ingest(self, text: str) -> Either[str, LedgerSnapshot]:
        entries = parse_csv(text)
        if not entries:
            return Left(NO_DATA)

        self.snapshot = LedgerSnapshot(entries=entries, synced_at=self.clock())
        if self.filter_state.category not in self.categories():
            self.filter_state = replace(self.filter_state, category=ALL_CATEGORIES)
        self._persist(self.snapshot)
        return Right(self.snapshot)

    def sync(self, fetch: Fetcher) -> Either[str, LedgerSnapshot]:
        return self._announce(fetch().bind(self.ingest))

    def upload(self, text: str) -> Either[str, LedgerSnapshot]:
        """Install a CSV export read from disk, reported like a sync."""
        return self._announce(self.ingest(text))

    def _announce(self, result: Either[str, LedgerSnapshot]) -> Either[str, LedgerSnapshot]:
        if result.is_right():
            snapshot = result.get_or_else(None)
            outcomes = self.bus.publish(
                LEDGER_SYNCED,
                {"entries": len(snapshot.entries), "synced_at": snapshot.synced_at},
            )
        else:
            logger.error("Sync error: %s", result.get_error())
            outcomes = self.bus.publish(SYNC_FAILED, {"error": result.get_error()})
        for outcome in outcomes:
            self.last_status = outcome.get("status", self.last_status)
        return result

    def search(self, query: str) -> FilterState:
        self.filter_state = replace(self.filter_state, search_query=query or "")
        return self.filter_state

    def select_category(self, category: str) -> FilterState:
        self.filter_state = replace(self.filter_state, category=category or ALL_CATEGORIES)
        return self.filter_state

    def _persist(self, snapshot: LedgerSnapshot) -> None:
        if self.snapshot_path is None:
            return
        try:
            save_snapshot(self.snapshot_path, snapshot)
        except (OSError, TypeError):
            logger.exception("Could not store ledger snapshot at %s", self.snapshot_path)

    # --- views

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        return self.snapshot.entries if self.snapshot else ()

    @property
    def last_synced(self) -> Optional[str]:
        return self.snapshot.synced_at if self.snapshot else None

    def stats(self) -> LedgerStats:
        return compute_stats(self.entries)

    def categories(self) -> tuple[str, ...]:
        return list_categories(self.entries)

    def filtered(self) -> tuple[LedgerEntry, ...]:
        f = self.filter_state
        return filter_entries(self.entries, f.search_query, f.category)

    def party_balances(self) -> tuple[LedgerEntry, ...]:
        f = self.filter_state
        return pipe(
            self.entries,
            lambda es: filter_entries(es, f.search_query, f.category),
            resolve_balances,
        )
