"""
Tests for the emergency switch and ledger statistics.
"""
import pytest

from conftest import ADMIN, PATIENT, DOCTOR, STRANGER
from medchain.audit.service import get_audit_trail
from medchain.core.events import EmergencyModeToggled
from medchain.emergency.service import toggle_emergency_mode, get_stats
from medchain.identity.exceptions import AdminOnlyException
from medchain.records.service import create_record

pytestmark = pytest.mark.usefixtures("participants")


def test_stats_start_empty(query):
    stats = query(get_stats)
    assert stats.total_records == 0
    assert stats.emergency_active is False


def test_admin_toggles_emergency_mode(execute, query):
    assert execute(toggle_emergency_mode, ADMIN) is True
    assert query(get_stats).emergency_active is True

    assert execute(toggle_emergency_mode, ADMIN) is False
    assert query(get_stats).emergency_active is False


@pytest.mark.parametrize("caller", [PATIENT, DOCTOR, STRANGER])
def test_only_admin_can_toggle(execute, query, caller):
    with pytest.raises(AdminOnlyException):
        execute(toggle_emergency_mode, caller)
    assert query(get_stats).emergency_active is False


def test_emergency_mode_does_not_expire(execute, query, clock):
    execute(toggle_emergency_mode, ADMIN)
    clock.advance(365 * 86400)
    assert query(get_stats).emergency_active is True


def test_toggle_publishes_new_state(execute, published):
    published.clear()
    execute(toggle_emergency_mode, ADMIN)
    execute(toggle_emergency_mode, ADMIN)

    assert [event.status for event in published] == [True, False]
    assert all(isinstance(event, EmergencyModeToggled) for event in published)


def test_toggle_is_not_audited(execute, query):
    execute(toggle_emergency_mode, ADMIN)
    assert query(get_audit_trail, ADMIN) == []


def test_stats_count_records(execute, query):
    for n in range(3):
        execute(create_record, PATIENT, f"Qm{n}", "lab", "")
    assert query(get_stats).total_records == 3
