"""Unit tests for AuthService (src/tenantnotes/core/services/auth_service.py)."""

import uuid

import pytest

import tenantnotes.core.services.auth_service as auth_mod
from tenantnotes.config import Settings
from tenantnotes.core.exceptions import InactiveTenantError, InvalidCredentialsError
from tenantnotes.core.models import TenantPlan, UserRole
from tenantnotes.core.schemas.auth import LoginRequest
from tenantnotes.core.services.auth_service import AuthService
from tenantnotes.security.jwt import get_user_id_from_token

SETTINGS = Settings(_env_file=None, secret_key="auth-service-secret")


class Dummy:
    def __init__(self, **kw):
        self.__dict__.update(kw)


class FakeUserRepo:
    def __init__(self, user):
        self.user = user
        self.lookups = []

    async def get_by_email(self, email, active_only=False):
        self.lookups.append((email, active_only))
        return self.user


class FakeTenantRepo:
    def __init__(self, tenant):
        self.tenant = tenant

    async def get_by_id(self, tenant_id):
        return self.tenant


def _tenant(is_active=True):
    return Dummy(id=uuid.uuid4(), name="Acme Corporation", slug="acme", plan=TenantPlan.FREE, max_notes=3, is_active=is_active)


def _service(monkeypatch, user, tenant, password_ok=True):
    user_repo = FakeUserRepo(user)
    monkeypatch.setattr(auth_mod, "UserRepository", lambda s: user_repo)
    monkeypatch.setattr(auth_mod, "TenantRepository", lambda s: FakeTenantRepo(tenant))
    monkeypatch.setattr(auth_mod, "verify_password", lambda plain, hashed: password_ok)
    return AuthService(session=object(), settings=SETTINGS), user_repo


@pytest.mark.asyncio
async def test_authenticate_user(monkeypatch):
    tenant = _tenant()
    user = Dummy(id=uuid.uuid4(), email="admin@acme.test", role=UserRole.ADMIN, tenant_id=tenant.id, password_hash="h")
    svc, user_repo = _service(monkeypatch, user, tenant)

    resp = await svc.authenticate_user(LoginRequest(email="Admin@Acme.test", password="password"))

    assert user_repo.lookups == [("admin@acme.test", True)]
    assert get_user_id_from_token(resp.token, SETTINGS) == user.id
    assert resp.user.tenant.slug == "acme"
    assert resp.user.role == UserRole.ADMIN


@pytest.mark.asyncio
async def test_unknown_user(monkeypatch):
    svc, _ = _service(monkeypatch, None, _tenant())

    with pytest.raises(InvalidCredentialsError):
        await svc.authenticate_user(LoginRequest(email="nobody@acme.test", password="password"))


@pytest.mark.asyncio
async def test_wrong_password(monkeypatch):
    tenant = _tenant()
    user = Dummy(id=uuid.uuid4(), email="admin@acme.test", role=UserRole.ADMIN, tenant_id=tenant.id, password_hash="h")
    svc, _ = _service(monkeypatch, user, tenant, password_ok=False)

    with pytest.raises(InvalidCredentialsError):
        await svc.authenticate_user(LoginRequest(email="admin@acme.test", password="nope"))


@pytest.mark.asyncio
async def test_inactive_tenant(monkeypatch):
    tenant = _tenant(is_active=False)
    user = Dummy(id=uuid.uuid4(), email="admin@acme.test", role=UserRole.ADMIN, tenant_id=tenant.id, password_hash="h")
    svc, _ = _service(monkeypatch, user, tenant)

    with pytest.raises(InactiveTenantError):
        await svc.authenticate_user(LoginRequest(email="admin@acme.test", password="password"))
