from datetime import datetime
from typing import Callable, Dict, List, NamedTuple

__all__ = [
    "event_bus", "LEDGER_SYNCED", "SYNC_FAILED", "Event", "EventBus",
    "synced_status_handler", "failed_status_handler", "register_default_handlers",
]


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


Handler = Callable[[Event, dict], dict]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> None:
        handlers = self._subscribers.setdefault(name, [])
        if handler not in handlers:
            handlers.append(handler)

    def publish(self, name: str, payload: dict) -> List[dict]:
        if name not in self._subscribers:
            return []

        event = Event(name=name, ts=datetime.now().isoformat(), payload=payload)
        return [handler(event, payload) for handler in list(self._subscribers[name])]

    def unsubscribe(self, name: str, handler: Handler) -> None:
        if handler in self._subscribers.get(name, []):
            self._subscribers[name].remove(handler)


LEDGER_SYNCED = "LEDGER_SYNCED"
SYNC_FAILED = "SYNC_FAILED"

event_bus = EventBus()


def synced_status_handler(event: Event, payload: dict) -> dict:
    count = payload.get("entries", 0)
    return {"status": f"✅ Synced {count} entries", "synced_at": payload.get("synced_at", event.ts)}


def failed_status_handler(event: Event, payload: dict) -> dict:
    reason = payload.get("error") or "Could not load data from Google Drive"
    return {"status": f"❌ Sync failed: {reason}", "error": reason}


def register_default_handlers(bus: EventBus = event_bus) -> None:
    bus.subscribe(LEDGER_SYNCED, synced_status_handler)
    bus.subscribe(SYNC_FAILED, failed_status_handler)


register_default_handlers()
