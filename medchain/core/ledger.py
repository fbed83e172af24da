"""
Single-writer transaction boundary for all ledger state.

Every state-changing command runs inside ``Ledger.transaction()``: the
process-wide write lock is held for the whole command, ``now`` is fixed from
the clock once, and the session commits only if the command returns. Any
exception rolls back every write of that command, audit entries included.
Notifications are buffered and published after commit.

Read-only queries use ``Ledger.snapshot()``, which never commits, so they
only observe committed state. Snapshots skip the write lock unless the
engine shares a single connection between sessions.
"""
from contextlib import contextmanager, nullcontext
from typing import Iterator, List, Optional
import logging
import threading

from sqlalchemy.orm import Session, sessionmaker

from ..database import is_single_connection
from .clock import SystemClock
from .events import EventBus, LedgerEvent

# Set up logging
logger = logging.getLogger(__name__)


class LedgerContext:
    """
    State handle passed to every service function.
    
    Attributes:
        db: Session bound to this command or snapshot
        now: The timestamp every comparison in this unit of work uses
        writable: Whether the context belongs to a write transaction
    """

    def __init__(self, db: Session, now: int, writable: bool):
        self.db = db
        self.now = now
        self.writable = writable
        self._events: List[LedgerEvent] = []

    def emit(self, event: LedgerEvent) -> None:
        """Queue a notification to publish once the command commits."""
        if not self.writable:
            raise RuntimeError("Notifications can only be emitted from a write transaction")
        self._events.append(event)

    @property
    def pending_events(self) -> List[LedgerEvent]:
        return list(self._events)

class Ledger:
    """
    Owner of the combined application state.
    
    When the engine hands every session the same connection (in-memory
    SQLite), snapshots take the write lock too, and opening one from inside
    a write transaction is an error: its rollback would discard the
    command's pending writes.
    
    Args:
        session_factory: SQLAlchemy session factory for the ledger database
        clock: Authoritative time source (defaults to the wall clock)
        events: Notification channel (a new bus is created when omitted)
    """

    def __init__(self, session_factory: sessionmaker, clock=None, events: Optional[EventBus] = None):
        self._session_factory = session_factory
        self.clock = clock or SystemClock()
        self.events = events or EventBus()
        self._write_lock = threading.RLock()
        self._local = threading.local()
        self.shared_connection = is_single_connection(session_factory.kw.get("bind"))

    @property
    def in_transaction(self) -> bool:
        """Whether the calling thread is inside a write transaction."""
        return getattr(self._local, "depth", 0) > 0

    @contextmanager
    def transaction(self) -> Iterator[LedgerContext]:
        """
        Run one state-changing command atomically.
        
        Yields:
            LedgerContext: Writable context for the command
        """
        with self._write_lock:
            db = self._session_factory()
            ctx = LedgerContext(db, self.clock.now(), writable=True)
            self._local.depth = getattr(self._local, "depth", 0) + 1
            try:
                yield ctx
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                self._local.depth -= 1
                db.close()

        for event in ctx.pending_events:
            self.events.publish(event)

    @contextmanager
    def snapshot(self) -> Iterator[LedgerContext]:
        """
        Open a read-only view of committed state.
        
        Yields:
            LedgerContext: Read-only context
            
        Raises:
            RuntimeError: On a single-connection engine, when called inside a write transaction
        """
        if self.shared_connection and self.in_transaction:
            raise RuntimeError("Snapshots cannot be opened inside a write transaction on a single-connection database")

        with self._write_lock if self.shared_connection else nullcontext():
            db = self._session_factory()
            try:
                yield LedgerContext(db, self.clock.now(), writable=False)
            finally:
                db.rollback()
                db.close()
