"""Unit tests for role checks and the note ownership rule."""

import uuid

import pytest

from tenantnotes.core.exceptions import ForbiddenError, InsufficientPermissionsError
from tenantnotes.core.models import UserRole
from tenantnotes.core.permissions import can_modify_note, check_role, require_tenant_admin


class Dummy:
    def __init__(self, **kw):
        self.__dict__.update(kw)

    def is_owned_by(self, user_id):
        return self.user_id == user_id

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN


def _user(role, tenant_id):
    return Dummy(id=uuid.uuid4(), role=role, tenant_id=tenant_id)


def test_check_role_allows_listed_role():
    check_role(_user(UserRole.ADMIN, uuid.uuid4()), (UserRole.ADMIN,))


def test_check_role_reports_required_and_current():
    with pytest.raises(InsufficientPermissionsError) as exc_info:
        check_role(_user(UserRole.MEMBER, uuid.uuid4()), (UserRole.ADMIN,))

    body = exc_info.value.to_dict()
    assert exc_info.value.status_code == 403
    assert body["error"] == "Insufficient permissions"
    assert body["required"] == ["admin"]
    assert body["current"] == "member"


def test_creator_can_modify_own_note():
    tenant_id = uuid.uuid4()
    member = _user(UserRole.MEMBER, tenant_id)
    note = Dummy(user_id=member.id, tenant_id=tenant_id)

    assert can_modify_note(member, note) is True


def test_member_cannot_modify_someone_elses_note():
    tenant_id = uuid.uuid4()
    member = _user(UserRole.MEMBER, tenant_id)
    note = Dummy(user_id=uuid.uuid4(), tenant_id=tenant_id)

    assert can_modify_note(member, note) is False


def test_admin_can_modify_any_note_in_tenant():
    tenant_id = uuid.uuid4()
    admin = _user(UserRole.ADMIN, tenant_id)
    note = Dummy(user_id=uuid.uuid4(), tenant_id=tenant_id)

    assert can_modify_note(admin, note) is True


def test_admin_cannot_modify_note_of_other_tenant():
    admin = _user(UserRole.ADMIN, uuid.uuid4())
    note = Dummy(user_id=admin.id, tenant_id=uuid.uuid4())

    assert can_modify_note(admin, note) is False


async def test_tenant_admin_dependency_matches_slug():
    dependency = require_tenant_admin("Not authorized to upgrade this tenant")
    context = Dummy(tenant=Dummy(slug="acme"), user_id=uuid.uuid4())

    assert await dependency(slug="acme", context=context) is context

    with pytest.raises(ForbiddenError) as exc_info:
        await dependency(slug="globex", context=context)
    assert exc_info.value.error == "Not authorized to upgrade this tenant"
