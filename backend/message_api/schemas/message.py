"""Message Schemas — request/response bodies for the messages API.

Invariants:
    - JSON keys are camelCase (title, content, isActive, organizationId, ...)
    - Request schemas do NO length/required checks: field rules live in
      core/enforce_message_rules.py so violations come back as ValidationError outcomes
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from message_api.core.message import Message


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateMessageRequest(_CamelModel):
    title: str | None = ""
    content: str | None = ""


class UpdateMessageRequest(_CamelModel):
    title: str | None = ""
    content: str | None = ""
    is_active: bool = False


class MessageResponse(_CamelModel):
    """Public-facing message data."""
    id: UUID
    organization_id: UUID
    title: str
    content: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            organization_id=message.organization_id,
            title=message.title,
            content=message.content,
            is_active=message.is_active,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
