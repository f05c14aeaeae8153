"""Message ORM — persists organization-scoped messages.

Invariants:
    - id is UUID primary key (client-side default uuid4)
    - (organization_id, title) is unique: the store-level guard for title uniqueness
    - organization_id indexed: every query is scoped by it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, DateTime, Index, String, Text, UniqueConstraint, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from message_api.db.base import Base


class Message(Base):
    """Message row: one title/content record owned by an organization."""
    __tablename__ = "messages"
    __table_args__ = (
        UniqueConstraint(
            "organization_id", "title", name="uq_messages_organization_title",
        ),
        Index("ix_messages_organization_id", "organization_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
