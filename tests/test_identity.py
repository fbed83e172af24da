"""
Tests for registration, user lookup and admin bootstrap.
"""
import pytest

from conftest import ADMIN, PATIENT, DOCTOR, STRANGER
from medchain.audit.service import get_audit_trail
from medchain.core.events import UserRegistered
from medchain.identity.exceptions import (
    AlreadyRegisteredException,
    InvalidRoleException,
    EmptyNameException,
)
from medchain.identity.models import UserRole
from medchain.identity.service import (
    register_user,
    get_user,
    get_admin_address,
    bootstrap_admin_if_needed,
)


def test_register_patient(execute, query, clock):
    execute(register_user, PATIENT, "Alice", UserRole.PATIENT)

    user = query(get_user, PATIENT)
    assert user.is_registered
    assert user.name == "Alice"
    assert user.role == UserRole.PATIENT
    assert user.registered_at == clock.now()


def test_register_accepts_role_value(execute, query):
    execute(register_user, DOCTOR, "Dr. Bob", "DOCTOR")
    assert query(get_user, DOCTOR).role == UserRole.DOCTOR


def test_second_registration_fails_and_keeps_role(execute, query):
    execute(register_user, PATIENT, "Alice", UserRole.PATIENT)

    with pytest.raises(AlreadyRegisteredException):
        execute(register_user, PATIENT, "Alice again", UserRole.DOCTOR)

    user = query(get_user, PATIENT)
    assert user.role == UserRole.PATIENT
    assert user.name == "Alice"


def test_already_registered_is_checked_before_role(execute):
    execute(register_user, PATIENT, "Alice", UserRole.PATIENT)
    with pytest.raises(AlreadyRegisteredException):
        execute(register_user, PATIENT, "", UserRole.ADMIN)


@pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.NONE, "SURGEON"])
def test_register_rejects_invalid_roles(execute, query, role):
    with pytest.raises(InvalidRoleException):
        execute(register_user, STRANGER, "Mallory", role)
    assert not query(get_user, STRANGER).is_registered


def test_invalid_role_is_checked_before_name(execute):
    with pytest.raises(InvalidRoleException):
        execute(register_user, STRANGER, "", UserRole.ADMIN)


def test_register_rejects_empty_name(execute, query):
    with pytest.raises(EmptyNameException):
        execute(register_user, STRANGER, "", UserRole.PATIENT)
    assert not query(get_user, STRANGER).is_registered


def test_unknown_address_returns_zero_value(query):
    user = query(get_user, STRANGER)
    assert user.address == STRANGER
    assert user.name == ""
    assert user.role == UserRole.NONE
    assert user.is_registered is False
    assert user.registered_at == 0


def test_registration_is_not_audited(execute, query):
    execute(register_user, PATIENT, "Alice", UserRole.PATIENT)
    assert query(get_audit_trail, PATIENT) == []


def test_registration_publishes_event(execute, published, clock):
    execute(register_user, DOCTOR, "Dr. Bob", UserRole.DOCTOR)

    assert published == [
        UserRegistered(address=DOCTOR, name="Dr. Bob", role="DOCTOR", timestamp=clock.now())
    ]


def test_failed_registration_publishes_nothing(execute, published):
    with pytest.raises(EmptyNameException):
        execute(register_user, PATIENT, "", UserRole.PATIENT)
    assert published == []


def test_admin_is_fixed_at_bootstrap(query):
    admin = query(get_user, ADMIN)
    assert admin.is_registered
    assert admin.role == UserRole.ADMIN
    assert query(get_admin_address) == ADMIN


def test_admin_cannot_register(execute):
    with pytest.raises(AlreadyRegisteredException):
        execute(register_user, ADMIN, "Admin", UserRole.PATIENT)


def test_bootstrap_keeps_first_admin(ledger, query):
    assert bootstrap_admin_if_needed(ledger, STRANGER) == ADMIN

    assert query(get_admin_address) == ADMIN
    assert not query(get_user, STRANGER).is_registered
