"""
Tests for the authorization engine.
"""
import pytest

from conftest import ADMIN, PATIENT, PATIENT_2, DOCTOR, DOCTOR_2, STRANGER
from medchain.access.service import grant_access, revoke_access
from medchain.audit.service import get_audit_trail
from medchain.authorization.engine import (
    is_authorized,
    get_record,
    get_doctor_accessible_records,
)
from medchain.core.events import RecordAccessed
from medchain.emergency.service import toggle_emergency_mode
from medchain.identity.exceptions import (
    NotRegisteredException,
    UnauthorizedException,
    WrongRoleException,
)
from medchain.records.exceptions import RecordNotFoundException
from medchain.records.service import create_record, find_record

DAY = 86400

pytestmark = pytest.mark.usefixtures("participants")


@pytest.fixture
def record_id(execute):
    return execute(create_record, PATIENT, "Qm123", "lab", "Blood panel")


def test_owner_can_always_read(query, clock, record_id):
    assert query(get_record, PATIENT, record_id).payload_reference == "Qm123"
    clock.advance(100 * 365 * DAY)
    assert query(get_record, PATIENT, record_id).owner == PATIENT


def test_doctor_without_grant_is_refused(query, record_id):
    with pytest.raises(UnauthorizedException):
        query(get_record, DOCTOR, record_id)


@pytest.mark.parametrize("reader", [PATIENT_2, STRANGER])
def test_other_patients_and_strangers_are_refused(query, record_id, reader):
    with pytest.raises(UnauthorizedException):
        query(get_record, reader, record_id)


def test_grant_authorizes_until_expiry(execute, query, clock, record_id):
    execute(grant_access, PATIENT, DOCTOR, DAY, "consult")
    assert query(get_record, DOCTOR, record_id).id == record_id

    clock.advance(DAY)
    with pytest.raises(UnauthorizedException):
        query(get_record, DOCTOR, record_id)
    assert query(get_record, PATIENT, record_id).id == record_id


def test_grant_covers_only_the_granted_doctor(execute, query, record_id):
    execute(grant_access, PATIENT, DOCTOR, 0, "")
    with pytest.raises(UnauthorizedException):
        query(get_record, DOCTOR_2, record_id)


def test_revoked_grant_is_refused(execute, query, record_id):
    execute(grant_access, PATIENT, DOCTOR, 0, "")
    execute(revoke_access, PATIENT, DOCTOR)
    with pytest.raises(UnauthorizedException):
        query(get_record, DOCTOR, record_id)


def test_emergency_mode_authorizes_doctors_only(execute, query, record_id):
    execute(toggle_emergency_mode, ADMIN)

    assert query(get_record, DOCTOR_2, record_id).id == record_id
    with pytest.raises(UnauthorizedException):
        query(get_record, PATIENT_2, record_id)
    with pytest.raises(UnauthorizedException):
        query(get_record, STRANGER, record_id)


def test_emergency_access_ends_when_toggled_off(execute, query, record_id):
    execute(toggle_emergency_mode, ADMIN)
    assert query(get_record, DOCTOR_2, record_id).id == record_id

    execute(toggle_emergency_mode, ADMIN)
    with pytest.raises(UnauthorizedException):
        query(get_record, DOCTOR_2, record_id)


def test_admin_can_read_any_record(query, record_id):
    assert query(get_record, ADMIN, record_id).id == record_id


def test_missing_record_is_reported_before_authorization(query):
    with pytest.raises(RecordNotFoundException):
        query(get_record, STRANGER, 42)


def test_is_authorized_paths(execute, query, record_id):
    def authorized(actor):
        return query(lambda ctx: is_authorized(ctx, actor, find_record(ctx, record_id)))

    assert authorized(PATIENT)
    assert authorized(ADMIN)
    assert not authorized(DOCTOR)

    execute(grant_access, PATIENT, DOCTOR, 0, "")
    assert authorized(DOCTOR)


def test_reads_are_not_audited(execute, query, published, record_id):
    execute(grant_access, PATIENT, DOCTOR, 0, "")
    published.clear()

    for reader in (PATIENT, DOCTOR, ADMIN):
        query(get_record, reader, record_id)

    assert len(query(get_audit_trail, PATIENT)) == 2
    assert query(get_audit_trail, DOCTOR) == []
    assert query(get_audit_trail, ADMIN) == []
    assert not any(isinstance(event, RecordAccessed) for event in published)


def test_accessible_records_follow_grants(execute, query):
    first = execute(create_record, PATIENT, "QmA", "lab", "")
    other = execute(create_record, PATIENT_2, "QmB", "lab", "")
    second = execute(create_record, PATIENT, "QmC", "xray", "")

    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == []

    execute(grant_access, PATIENT, DOCTOR, 0, "")
    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == [first, second]

    execute(grant_access, PATIENT_2, DOCTOR, 0, "")
    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == [first, other, second]
    assert query(get_doctor_accessible_records, DOCTOR_2, DOCTOR_2) == []


def test_accessible_records_drop_expired_and_revoked_grants(execute, query, clock):
    execute(create_record, PATIENT, "QmA", "lab", "")
    other = execute(create_record, PATIENT_2, "QmB", "lab", "")
    execute(grant_access, PATIENT, DOCTOR, 60, "")
    execute(grant_access, PATIENT_2, DOCTOR, 0, "")

    clock.advance(60)
    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == [other]

    execute(revoke_access, PATIENT_2, DOCTOR)
    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == []


def test_accessible_records_ignore_emergency_mode(execute, query, record_id):
    execute(toggle_emergency_mode, ADMIN)

    assert query(get_record, DOCTOR, record_id).id == record_id
    assert query(get_doctor_accessible_records, DOCTOR, DOCTOR) == []


def test_accessible_records_are_self_only(query):
    with pytest.raises(UnauthorizedException):
        query(get_doctor_accessible_records, DOCTOR, DOCTOR_2)


@pytest.mark.parametrize("caller", [PATIENT, ADMIN])
def test_accessible_records_require_doctor(query, caller):
    with pytest.raises(WrongRoleException):
        query(get_doctor_accessible_records, caller, caller)


def test_accessible_records_require_registration(query):
    with pytest.raises(NotRegisteredException):
        query(get_doctor_accessible_records, STRANGER, STRANGER)
