"""Message Logic — create/update/delete decisions for organization messages.

Invariants:
    - Every write operation returns exactly one Outcome; expected failures never raise
    - Store calls run sequentially; a write only follows the reads it depends on
    - Update/delete check the active flag BEFORE field validation
    - Title uniqueness is checked on the trimmed title; update excludes the record itself
    - Store faults (DatabaseError, connectivity) propagate untouched

Design Decisions:
    - Stateless: holds only the repository, caches nothing between calls
    - DuplicateTitleError raised by the store's unique constraint maps to Conflict
"""

import dataclasses
import logging
from datetime import datetime, timezone

from message_api.core.domain_types import MessageId, OrganizationId
from message_api.core.enforce_message_rules import (
    INACTIVE_DELETE, INACTIVE_UPDATE,
    check_active, is_title_taken, normalize, validate_title_and_content,
)
from message_api.core.errors import DuplicateTitleError
from message_api.core.message import Message
from message_api.core.outcomes import (
    Conflict, Created, Deleted, NotFound, Outcome, Updated, ValidationError,
)
from message_api.core.repository_protocols import MessageRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Message not found."
TITLE_CONFLICT_MESSAGE = "Title must be unique per organization."


class MessageLogic:
    """Business rules for one organization's messages."""

    def __init__(self, repository: MessageRepository):
        self.repository = repository

    async def create_message(
        self, organization_id: OrganizationId, title: str | None, content: str | None,
    ) -> Outcome:
        """Validate, check title uniqueness, then persist an active message."""
        errors = validate_title_and_content(title, content)
        if errors:
            logger.info(
                "Create rejected: invalid fields",
                extra={"organization_id": str(organization_id), "outcome": "validation_error"},
            )
            return ValidationError(errors)

        normalized_title = normalize(title)
        holder = await self.repository.get_by_title(organization_id, normalized_title)
        if is_title_taken(holder):
            return self._conflict(organization_id, None)

        message = Message(
            organization_id=organization_id,
            title=normalized_title,
            content=normalize(content),
            is_active=True,
        )
        try:
            created = await self.repository.create(message)
        except DuplicateTitleError:
            return self._conflict(organization_id, None)

        logger.info(
            f"Message {created.id} created",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(created.id),
                "outcome": "created",
            },
        )
        return Created(created)

    async def update_message(
        self,
        organization_id: OrganizationId,
        message_id: MessageId,
        title: str | None,
        content: str | None,
        is_active: bool,
    ) -> Outcome:
        """Replace title, content and active flag of an active message."""
        existing = await self.repository.get_by_id(organization_id, message_id)
        if existing is None:
            return self._not_found(organization_id, message_id)

        inactive = check_active(existing, INACTIVE_UPDATE)
        if inactive:
            return self._rejected(organization_id, message_id, inactive)

        errors = validate_title_and_content(title, content)
        if errors:
            return self._rejected(organization_id, message_id, ValidationError(errors))

        normalized_title = normalize(title)
        holder = await self.repository.get_by_title(organization_id, normalized_title)
        if is_title_taken(holder, existing.id):
            return self._conflict(organization_id, message_id)

        changed = dataclasses.replace(
            existing,
            title=normalized_title,
            content=normalize(content),
            is_active=is_active,
            updated_at=datetime.now(timezone.utc),
        )
        try:
            updated = await self.repository.update(changed)
        except DuplicateTitleError:
            return self._conflict(organization_id, message_id)
        if updated is None:
            return self._not_found(organization_id, message_id)

        logger.info(
            f"Message {message_id} updated",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(message_id),
                "outcome": "updated",
            },
        )
        return Updated()

    async def delete_message(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> Outcome:
        """Remove an active message."""
        existing = await self.repository.get_by_id(organization_id, message_id)
        if existing is None:
            return self._not_found(organization_id, message_id)

        inactive = check_active(existing, INACTIVE_DELETE)
        if inactive:
            return self._rejected(organization_id, message_id, inactive)

        if not await self.repository.delete(organization_id, message_id):
            return self._not_found(organization_id, message_id)

        logger.info(
            f"Message {message_id} deleted",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(message_id),
                "outcome": "deleted",
            },
        )
        return Deleted()

    async def get_message(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> Message | None:
        """Load one message, active or not; None when absent."""
        return await self.repository.get_by_id(organization_id, message_id)

    async def list_messages(self, organization_id: OrganizationId) -> list[Message]:
        """All messages of the organization, inactive ones included."""
        return await self.repository.list_by_organization(organization_id)

    # ─── Outcome helpers ────────────────────────────────────────

    def _not_found(self, organization_id, message_id) -> NotFound:
        logger.info(
            f"Message {message_id} not found",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(message_id),
                "outcome": "not_found",
            },
        )
        return NotFound(NOT_FOUND_MESSAGE)

    def _conflict(self, organization_id, message_id) -> Conflict:
        logger.warning(
            "Title already used in organization",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(message_id) if message_id else None,
                "outcome": "conflict",
            },
        )
        return Conflict(TITLE_CONFLICT_MESSAGE)

    def _rejected(
        self, organization_id, message_id, outcome: ValidationError,
    ) -> ValidationError:
        logger.info(
            f"Message {message_id} rejected: {sorted(outcome.errors)}",
            extra={
                "organization_id": str(organization_id),
                "message_id": str(message_id),
                "outcome": "validation_error",
            },
        )
        return outcome
