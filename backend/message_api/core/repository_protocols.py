"""Boundary Protocols — contract between the message logic and its store.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - create/update raise DuplicateTitleError when the store's unique constraint fires

Design Decisions:
    - Protocol (structural subtyping), not ABC
    - Boundary methods are async; implementations do IO
"""

from typing import Protocol

from message_api.core.domain_types import MessageId, OrganizationId
from message_api.core.message import Message


class MessageRepository(Protocol):
    """Contract for message persistence, implemented by shell."""
    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> Message | None: ...
    async def list_by_organization(
        self, organization_id: OrganizationId,
    ) -> list[Message]: ...
    async def get_by_title(
        self, organization_id: OrganizationId, title: str,
    ) -> Message | None: ...
    async def create(self, message: Message) -> Message: ...
    async def update(self, message: Message) -> Message | None: ...
    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId,
    ) -> bool: ...
