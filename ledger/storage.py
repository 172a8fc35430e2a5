"""JSON persistence for the last synced ledger snapshot.

The document keeps the keys the web viewer stored in localStorage::

    {"ledgerData": [{"date": ..., "partyName": ..., ...}], "lastSync": "<iso>"}
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ledger.domain import LedgerEntry, LedgerSnapshot
from ledger.functional import Maybe, Nothing, Some

logger = logging.getLogger(__name__)

# LedgerEntry field -> stored key
FIELD_KEYS = {
    "date": "date",
    "party_name": "partyName",
    "voucher_type": "voucherType",
    "voucher_no": "voucherNo",
    "debit": "debit",
    "credit": "credit",
    "balance": "balance",
}
_AMOUNT_FIELDS = ("debit", "credit", "balance")


def entry_to_dict(e: LedgerEntry) -> Dict[str, Any]:
    return {key: getattr(e, field) for field, key in FIELD_KEYS.items()}


def entry_from_dict(d: Dict[str, Any]) -> LedgerEntry:
    kwargs = {field: d[key] for field, key in FIELD_KEYS.items() if d.get(key) is not None}
    for field in _AMOUNT_FIELDS:
        if field in kwargs:
            kwargs[field] = float(kwargs[field])
    for field in set(kwargs) - set(_AMOUNT_FIELDS):
        kwargs[field] = str(kwargs[field])
    return LedgerEntry(**kwargs)


def snapshot_to_dict(snapshot: LedgerSnapshot) -> Dict[str, Any]:
    return {
        "ledgerData": [entry_to_dict(e) for e in snapshot.entries],
        "lastSync": snapshot.synced_at,
    }


def snapshot_from_dict(data: Dict[str, Any]) -> LedgerSnapshot:
    return LedgerSnapshot(
        entries=tuple(entry_from_dict(d) for d in data["ledgerData"]),
        synced_at=str(data.get("lastSync") or ""),
    )


def save_snapshot(path: Union[str, Path], snapshot: LedgerSnapshot) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(snapshot_to_dict(snapshot), f, ensure_ascii=False)
    tmp.replace(path)


def load_snapshot(path: Union[str, Path]) -> Maybe[LedgerSnapshot]:
    path = Path(path)
    if not path.exists():
        return Nothing()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Some(snapshot_from_dict(data))
    except (OSError, ValueError, KeyError, TypeError, AttributeError):
        logger.warning("Ignoring unreadable ledger snapshot at %s", path, exc_info=True)
        return Nothing()
