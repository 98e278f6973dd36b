"""NoteRepository against an in-memory SQLite database."""

import uuid

import pytest

from tenantnotes.core.models import Note, Tenant, User, UserRole
from tenantnotes.core.repositories.note_repository import NoteRepository, _escape_like


@pytest.fixture
async def author(test_session):
    tenant = Tenant(name="Acme Corporation", slug="acme")
    test_session.add(tenant)
    await test_session.commit()
    user = User(email="user@acme.test", password_hash="h", role=UserRole.MEMBER, tenant_id=tenant.id)
    test_session.add(user)
    await test_session.commit()
    return user


async def _add(repo, user, title, content="content"):
    return await repo.create_note(
        {"title": title, "content": content, "user": user, "tenant_id": user.tenant_id}
    )


def test_escape_like():
    assert _escape_like("50%_off\\") == "50\\%\\_off\\\\"


@pytest.mark.asyncio
async def test_create_and_get(test_session, author):
    repo = NoteRepository(test_session)
    note = await _add(repo, author, "First")

    assert note.user_id == author.id
    found = await repo.get_active_note(author.tenant_id, note.id)
    assert found is note
    assert found.user.email == "user@acme.test"


@pytest.mark.asyncio
async def test_get_requires_matching_tenant(test_session, author):
    repo = NoteRepository(test_session)
    note = await _add(repo, author, "First")

    assert await repo.get_active_note(uuid.uuid4(), note.id) is None


@pytest.mark.asyncio
async def test_soft_delete_hides_note_but_keeps_row(test_session, author):
    repo = NoteRepository(test_session)
    note = await _add(repo, author, "First")

    await repo.soft_delete_note(note)

    assert await repo.get_active_note(author.tenant_id, note.id) is None
    assert await repo.count_active_notes(author.tenant_id) == 0
    assert await test_session.get(Note, note.id) is not None


@pytest.mark.asyncio
async def test_update_note(test_session, author):
    repo = NoteRepository(test_session)
    note = await _add(repo, author, "First")

    updated = await repo.update_note(note, {"title": "Second", "content": "changed"})

    assert updated.title == "Second"
    assert (await repo.get_active_note(author.tenant_id, note.id)).content == "changed"


@pytest.mark.asyncio
async def test_list_pages_and_counts(test_session, author):
    repo = NoteRepository(test_session)
    for i in range(5):
        await _add(repo, author, f"Note {i}")

    notes, total = await repo.list_tenant_notes(author.tenant_id, page=2, per_page=2)

    assert total == 5
    assert [n.title for n in notes] == ["Note 2", "Note 1"]


@pytest.mark.asyncio
async def test_list_search_is_case_insensitive(test_session, author):
    repo = NoteRepository(test_session)
    await _add(repo, author, "Budget", "FY plan")
    await _add(repo, author, "Standup", "notes")

    notes, total = await repo.list_tenant_notes(author.tenant_id, search="PLAN")

    assert total == 1
    assert notes[0].title == "Budget"
