"""Message Entity — transient, store-independent copy of one organization message.

Invariants:
    - id, created_at, updated_at are None until the store assigns them
    - organization_id and id never change after creation
    - Instances are never cached by the logic layer; each call loads fresh copies
"""

from dataclasses import dataclass
from datetime import datetime

from message_api.core.domain_types import MessageId, OrganizationId


@dataclass
class Message:
    """One organization-scoped message."""
    organization_id: OrganizationId
    title: str
    content: str
    is_active: bool = True
    id: MessageId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
