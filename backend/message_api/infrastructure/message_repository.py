"""SQL Message Store — SQLAlchemy implementation of the MessageRepository protocol.

Invariants:
    - Every query is scoped by organization_id
    - Rows never leave this module: callers receive core Message copies
    - Unique-constraint violations on write surface as DuplicateTitleError, after rollback
    - Each write commits its own unit of work
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from message_api.core.domain_types import MessageId, OrganizationId
from message_api.core.errors import DuplicateTitleError, ErrorContext
from message_api.core.message import Message
from message_api.models.message import Message as MessageModel

logger = logging.getLogger(__name__)


def _to_domain(row: MessageModel) -> Message:
    return Message(
        id=MessageId(row.id),
        organization_id=OrganizationId(row.organization_id),
        title=row.title,
        content=row.content,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyMessageRepository:
    """Message persistence backed by one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_row(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> MessageModel | None:
        result = await self.db.execute(
            select(MessageModel)
            .where(MessageModel.organization_id == organization_id)
            .where(MessageModel.id == message_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> Message | None:
        row = await self._get_row(organization_id, message_id)
        return _to_domain(row) if row else None

    async def list_by_organization(
        self, organization_id: OrganizationId,
    ) -> list[Message]:
        result = await self.db.execute(
            select(MessageModel)
            .where(MessageModel.organization_id == organization_id)
            .order_by(MessageModel.created_at, MessageModel.id)
        )
        return [_to_domain(row) for row in result.scalars().all()]

    async def get_by_title(
        self, organization_id: OrganizationId, title: str,
    ) -> Message | None:
        result = await self.db.execute(
            select(MessageModel)
            .where(MessageModel.organization_id == organization_id)
            .where(MessageModel.title == title)
        )
        row = result.scalar_one_or_none()
        return _to_domain(row) if row else None

    async def create(self, message: Message) -> Message:
        """Insert a new row; id and timestamps are assigned here."""
        now = datetime.now(timezone.utc)
        row = MessageModel(
            organization_id=message.organization_id,
            title=message.title,
            content=message.content,
            is_active=message.is_active,
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        await self._commit(message)
        await self.db.refresh(row)
        return _to_domain(row)

    async def update(self, message: Message) -> Message | None:
        """Write mutable fields back. None when the row no longer exists."""
        row = await self._get_row(message.organization_id, message.id)
        if row is None:
            return None
        row.title = message.title
        row.content = message.content
        row.is_active = message.is_active
        row.updated_at = message.updated_at or datetime.now(timezone.utc)
        await self._commit(message)
        await self.db.refresh(row)
        return _to_domain(row)

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> bool:
        result = await self.db.execute(
            delete(MessageModel)
            .where(MessageModel.organization_id == organization_id)
            .where(MessageModel.id == message_id)
        )
        await self.db.commit()
        return result.rowcount > 0

    async def _commit(self, message: Message) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Unique title constraint rejected write: {e.orig}",
                extra={"organization_id": str(message.organization_id)},
            )
            raise DuplicateTitleError(
                message.title,
                ErrorContext(
                    organization_id=str(message.organization_id),
                    message_id=str(message.id) if message.id else None,
                ),
            ) from e
