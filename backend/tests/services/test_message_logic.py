"""Message Logic — decision-tree tests against a mocked MessageRepository.

Tests cover:
    - create: Created with trimmed values, Conflict on duplicate, ValidationError
      (single and combined keys), Conflict when the store's unique constraint fires
    - update: NotFound, IsActive gate before field validation, keeping own title,
      Conflict against another record, NotFound when the row vanished, Updated
    - delete: NotFound, IsActive gate, NotFound when nothing removed, Deleted
    - get/list delegate to the store unchanged
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from unittest.mock import AsyncMock

from message_api.core.errors import DuplicateTitleError
from message_api.core.message import Message
from message_api.core.outcomes import (
    Conflict, Created, Deleted, NotFound, Updated, ValidationError,
)
from message_api.services.message_logic import (
    MessageLogic, NOT_FOUND_MESSAGE, TITLE_CONFLICT_MESSAGE,
)

VALID_CONTENT = "a" * 20


def _make_repository() -> AsyncMock:
    repository = AsyncMock()
    repository.get_by_id.return_value = None
    repository.get_by_title.return_value = None
    repository.update.side_effect = lambda m: m
    repository.delete.return_value = True
    return repository


def _stored(organization_id, *, title="Old title", is_active=True, message_id=None) -> Message:
    return Message(
        id=message_id or uuid4(),
        organization_id=organization_id,
        title=title,
        content=VALID_CONTENT,
        is_active=is_active,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def organization_id():
    return uuid4()


@pytest.fixture
def repository():
    return _make_repository()


@pytest.fixture
def logic(repository):
    return MessageLogic(repository)


# ─── create_message ──────────────────────────────────────────────

async def test_create_success_returns_created(logic, repository, organization_id):
    async def _persist(message: Message) -> Message:
        message.id = uuid4()
        return message
    repository.create.side_effect = _persist

    outcome = await logic.create_message(organization_id, "Hello World", VALID_CONTENT)

    assert isinstance(outcome, Created)
    assert outcome.payload.id is not None
    assert outcome.payload.organization_id == organization_id
    assert outcome.payload.title == "Hello World"
    assert outcome.payload.content == VALID_CONTENT
    assert outcome.payload.is_active is True


async def test_create_trims_title_and_content(logic, repository, organization_id):
    repository.create.side_effect = lambda m: m

    outcome = await logic.create_message(
        organization_id, "  Hello World  ", f"  {VALID_CONTENT}\n",
    )

    assert isinstance(outcome, Created)
    repository.get_by_title.assert_awaited_once_with(organization_id, "Hello World")
    persisted = repository.create.await_args.args[0]
    assert persisted.title == "Hello World"
    assert persisted.content == VALID_CONTENT
    assert persisted.is_active is True


async def test_create_duplicate_title_returns_conflict(logic, repository, organization_id):
    repository.get_by_title.return_value = _stored(organization_id, title="Duplicate")

    outcome = await logic.create_message(organization_id, "Duplicate", VALID_CONTENT)

    assert outcome == Conflict(TITLE_CONFLICT_MESSAGE)
    repository.create.assert_not_awaited()


async def test_create_short_content_returns_validation_error(logic, repository, organization_id):
    outcome = await logic.create_message(organization_id, "Valid Title", "short")

    assert isinstance(outcome, ValidationError)
    assert "Content" in outcome.errors
    assert "Title" not in outcome.errors
    repository.get_by_title.assert_not_awaited()
    repository.create.assert_not_awaited()


async def test_create_collects_title_and_content_errors(logic, organization_id):
    outcome = await logic.create_message(organization_id, "  ", "")

    assert isinstance(outcome, ValidationError)
    assert set(outcome.errors) == {"Title", "Content"}
    assert outcome.errors["Title"] == ["Title is required."]


@pytest.mark.parametrize("title", ["ab", "x" * 201])
async def test_create_title_length_out_of_range(logic, organization_id, title):
    outcome = await logic.create_message(organization_id, title, VALID_CONTENT)

    assert isinstance(outcome, ValidationError)
    assert outcome.errors["title"] == ["Title must be between 3 and 200 characters."]


async def test_create_store_unique_violation_returns_conflict(logic, repository, organization_id):
    repository.create.side_effect = DuplicateTitleError("Hello World")

    outcome = await logic.create_message(organization_id, "Hello World", VALID_CONTENT)

    assert outcome == Conflict(TITLE_CONFLICT_MESSAGE)


async def test_create_propagates_store_faults(logic, repository, organization_id):
    repository.create.side_effect = RuntimeError("store unreachable")

    with pytest.raises(RuntimeError):
        await logic.create_message(organization_id, "Hello World", VALID_CONTENT)


# ─── update_message ──────────────────────────────────────────────

async def test_update_nonexistent_returns_not_found(logic, repository, organization_id):
    outcome = await logic.update_message(
        organization_id, uuid4(), "Updated", VALID_CONTENT, True,
    )

    assert outcome == NotFound(NOT_FOUND_MESSAGE)
    repository.update.assert_not_awaited()


async def test_update_inactive_returns_is_active_error_only(logic, repository, organization_id):
    existing = _stored(organization_id, title="Old", is_active=False)
    repository.get_by_id.return_value = existing

    outcome = await logic.update_message(
        organization_id, existing.id, "Updated", VALID_CONTENT, True,
    )

    assert isinstance(outcome, ValidationError)
    assert dict(outcome.errors) == {"IsActive": ["Only active messages can be updated."]}
    repository.update.assert_not_awaited()


async def test_update_inactive_check_precedes_field_validation(logic, repository, organization_id):
    existing = _stored(organization_id, is_active=False)
    repository.get_by_id.return_value = existing

    outcome = await logic.update_message(organization_id, existing.id, "", "short", True)

    assert isinstance(outcome, ValidationError)
    assert list(outcome.errors) == ["IsActive"]


async def test_update_invalid_fields_returns_validation_error(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing

    outcome = await logic.update_message(organization_id, existing.id, "ab", "short", True)

    assert isinstance(outcome, ValidationError)
    assert set(outcome.errors) == {"Title", "Content"}
    repository.update.assert_not_awaited()


async def test_update_keeping_own_title_succeeds(logic, repository, organization_id):
    existing = _stored(organization_id, title="Same Title")
    repository.get_by_id.return_value = existing
    repository.get_by_title.return_value = existing

    outcome = await logic.update_message(
        organization_id, existing.id, "Same Title", "b" * 30, True,
    )

    assert outcome == Updated()


async def test_update_title_held_by_other_message_returns_conflict(logic, repository, organization_id):
    existing = _stored(organization_id, title="Mine")
    repository.get_by_id.return_value = existing
    repository.get_by_title.return_value = _stored(organization_id, title="Theirs")

    outcome = await logic.update_message(
        organization_id, existing.id, "Theirs", VALID_CONTENT, True,
    )

    assert outcome == Conflict(TITLE_CONFLICT_MESSAGE)
    repository.update.assert_not_awaited()


async def test_update_applies_trimmed_fields_and_refreshes_timestamp(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing

    outcome = await logic.update_message(
        organization_id, existing.id, "  New Title ", f" {'c' * 15} ", False,
    )

    assert outcome == Updated()
    written = repository.update.await_args.args[0]
    assert written.id == existing.id
    assert written.organization_id == organization_id
    assert written.title == "New Title"
    assert written.content == "c" * 15
    assert written.is_active is False
    assert written.updated_at > existing.updated_at
    # loaded copy is left untouched
    assert existing.title == "Old title"


async def test_update_row_vanished_returns_not_found(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing
    repository.update.side_effect = None
    repository.update.return_value = None

    outcome = await logic.update_message(
        organization_id, existing.id, "New Title", VALID_CONTENT, True,
    )

    assert outcome == NotFound(NOT_FOUND_MESSAGE)


async def test_update_store_unique_violation_returns_conflict(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing
    repository.update.side_effect = DuplicateTitleError("New Title")

    outcome = await logic.update_message(
        organization_id, existing.id, "New Title", VALID_CONTENT, True,
    )

    assert outcome == Conflict(TITLE_CONFLICT_MESSAGE)


# ─── delete_message ──────────────────────────────────────────────

async def test_delete_nonexistent_returns_not_found(logic, repository, organization_id):
    outcome = await logic.delete_message(organization_id, uuid4())

    assert outcome == NotFound(NOT_FOUND_MESSAGE)
    repository.delete.assert_not_awaited()


async def test_delete_inactive_returns_is_active_error(logic, repository, organization_id):
    existing = _stored(organization_id, is_active=False)
    repository.get_by_id.return_value = existing

    outcome = await logic.delete_message(organization_id, existing.id)

    assert isinstance(outcome, ValidationError)
    assert dict(outcome.errors) == {"IsActive": ["Only active messages can be deleted."]}
    repository.delete.assert_not_awaited()


async def test_delete_nothing_removed_returns_not_found(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing
    repository.delete.return_value = False

    outcome = await logic.delete_message(organization_id, existing.id)

    assert outcome == NotFound(NOT_FOUND_MESSAGE)


async def test_delete_active_returns_deleted(logic, repository, organization_id):
    existing = _stored(organization_id)
    repository.get_by_id.return_value = existing

    outcome = await logic.delete_message(organization_id, existing.id)

    assert outcome == Deleted()
    repository.delete.assert_awaited_once_with(organization_id, existing.id)


# ─── reads ───────────────────────────────────────────────────────

async def test_get_message_delegates_to_store(logic, repository, organization_id):
    existing = _stored(organization_id, is_active=False)
    repository.get_by_id.return_value = existing

    assert await logic.get_message(organization_id, existing.id) is existing


async def test_list_messages_returns_inactive_too(logic, repository, organization_id):
    messages = [_stored(organization_id), _stored(organization_id, is_active=False)]
    repository.list_by_organization.return_value = messages

    assert await logic.list_messages(organization_id) == messages
    repository.list_by_organization.assert_awaited_once_with(organization_id)
