"""
Test configuration for the access ledger.

Every test gets its own database file and a manual clock so grant
expiry can be stepped through without waiting.
"""
import os

ADMIN = "0x" + "a" * 40
PATIENT = "0x" + "1" * 40
PATIENT_2 = "0x" + "4" * 40
DOCTOR = "0x" + "2" * 40
DOCTOR_2 = "0x" + "3" * 40
STRANGER = "0x" + "5" * 40

# Settings are read at import time
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_ADDRESS"] = ADMIN
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ALLOW_DEV_TOKENS"] = "true"

import pytest
from fastapi.testclient import TestClient

from medchain.core.clock import ManualClock
from medchain.core.events import EventBus
from medchain.core.ledger import Ledger
from medchain.core.security import create_access_token
from medchain.database import build_engine, build_session_factory, init_db
from medchain.identity.models import UserRole
from medchain.identity.service import bootstrap_admin_if_needed, register_user
from medchain.main import create_app


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def published():
    """Every event published on the ledger's bus, in order."""
    return []


@pytest.fixture
def ledger(engine, clock, published):
    """
    Create a ledger with the Admin already fixed.
    """
    events = EventBus()
    events.subscribe(published.append)
    ledger = Ledger(build_session_factory(engine), clock=clock, events=events)
    bootstrap_admin_if_needed(ledger, ADMIN)
    return ledger


@pytest.fixture
def execute(ledger):
    """Run one command in its own write transaction."""
    def _execute(command, *args, **kwargs):
        with ledger.transaction() as ctx:
            return command(ctx, *args, **kwargs)
    return _execute


@pytest.fixture
def query(ledger):
    """Run one read against a committed snapshot."""
    def _query(reader, *args, **kwargs):
        with ledger.snapshot() as ctx:
            return reader(ctx, *args, **kwargs)
    return _query


@pytest.fixture
def participants(execute):
    """
    Register two patients and two doctors.
    """
    execute(register_user, PATIENT, "Alice", UserRole.PATIENT)
    execute(register_user, PATIENT_2, "Dave", UserRole.PATIENT)
    execute(register_user, DOCTOR, "Dr. Bob", UserRole.DOCTOR)
    execute(register_user, DOCTOR_2, "Dr. Carol", UserRole.DOCTOR)


@pytest.fixture
def app(tmp_path, clock):
    engine = build_engine(f"sqlite:///{tmp_path / 'app.db'}")
    yield create_app(engine=engine, clock=clock)
    engine.dispose()


@pytest.fixture
def client(app):
    """
    Create a test client around a fresh application.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth():
    """Build bearer headers for an address."""
    def _auth(address):
        return {"Authorization": f"Bearer {create_access_token(address)}"}
    return _auth
