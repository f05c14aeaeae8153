"""Domain Types — identity types and field limits shared across the codebase.

Invariants:
    - OrganizationId, MessageId wrap UUIDs; never use bare UUID in domain logic
    - Field limits apply to trimmed values
    - All field keys encoded as Enums, no raw string matching

Design Decisions:
    - Identity types are NewTypes, field keys are str Enums
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

OrganizationId = NewType("OrganizationId", UUID)
MessageId = NewType("MessageId", UUID)


# ─── Field Limits ────────────────────────────────────────────────

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 1000


# ─── Enums ───────────────────────────────────────────────────────

class MessageField(str, Enum):
    """Field keys reported in validation errors."""
    TITLE = "Title"
    CONTENT = "Content"
    IS_ACTIVE = "IsActive"
