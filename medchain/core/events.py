"""
State-change notifications for external subscribers.

Events are buffered by the ledger while a command runs and published only
after the command commits, so a rolled-back command never notifies anyone.
"""
from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, List, Optional, Type
import logging
import threading

# Set up logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerEvent:
    """Base class for all ledger notifications."""
    timestamp: int = field(default=0, kw_only=True)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["kind"] = self.kind
        return payload


@dataclass(frozen=True)
class UserRegistered(LedgerEvent):
    address: str
    name: str
    role: str


@dataclass(frozen=True)
class RecordCreated(LedgerEvent):
    record_id: int
    patient: str
    record_type: str


@dataclass(frozen=True)
class AccessGranted(LedgerEvent):
    patient: str
    doctor: str
    expires_at: int


@dataclass(frozen=True)
class AccessRevoked(LedgerEvent):
    patient: str
    doctor: str


@dataclass(frozen=True)
class EmergencyModeToggled(LedgerEvent):
    status: bool


@dataclass(frozen=True)
class RecordAccessed(LedgerEvent):
    """Declared for subscribers; no read path publishes it."""
    accessor: str
    record_id: int


EventHandler = Callable[[LedgerEvent], None]


class EventBus:
    """
    In-process publish/subscribe channel for ledger notifications.
    
    Handlers subscribe to one event class or, with ``kind=None``, to every
    event. A failing handler is logged and does not affect other handlers.
    """

    def __init__(self):
        self._handlers: Dict[Optional[Type[LedgerEvent]], List[EventHandler]] = {}
        self._lock = threading.Lock()

    def subscribe(self, handler: EventHandler, kind: Optional[Type[LedgerEvent]] = None) -> None:
        """Add a handler for one event class, or for all events."""
        with self._lock:
            self._handlers.setdefault(kind, []).append(handler)

    def unsubscribe(self, handler: EventHandler, kind: Optional[Type[LedgerEvent]] = None) -> None:
        with self._lock:
            handlers = self._handlers.get(kind, [])
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event: LedgerEvent) -> None:
        """Deliver an event to its subscribers in subscription order."""
        with self._lock:
            handlers = list(self._handlers.get(type(event), [])) + list(self._handlers.get(None, []))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler error for {event.kind}: {e}")


def log_event(event: LedgerEvent) -> None:
    """Subscriber that writes every notification to the application log."""
    logger.info(f"Event {event.kind}: {event.to_dict()}")
