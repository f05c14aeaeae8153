"""Message Rule Enforcement — field validation and lifecycle checks for messages.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Values are trimmed before any length check; None counts as empty
    - validate_title_and_content never short-circuits; every field is checked
    - Empty title reports only "required"; empty content reports the length message

Design Decisions:
    - Return FieldErrors / ValidationError (not exceptions): the logic layer returns
      them to callers as Outcome variants unchanged
"""

from message_api.core.domain_types import (
    MessageField, MessageId,
    TITLE_MIN_LENGTH, TITLE_MAX_LENGTH,
    CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH,
)
from message_api.core.message import Message
from message_api.core.outcomes import FieldErrors, ValidationError

TITLE_REQUIRED = "Title is required."
TITLE_LENGTH = (
    f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters."
)
CONTENT_LENGTH = (
    f"Content must be between {CONTENT_MIN_LENGTH} and {CONTENT_MAX_LENGTH} characters."
)
INACTIVE_UPDATE = "Only active messages can be updated."
INACTIVE_DELETE = "Only active messages can be deleted."


def normalize(value: str | None) -> str:
    """Trim surrounding whitespace; None becomes the empty string."""
    return (value or "").strip()


def check_title(title: str | None) -> str | None:
    """Return the title error message, or None when the title is valid."""
    normalized = normalize(title)
    if not normalized:
        return TITLE_REQUIRED
    if not TITLE_MIN_LENGTH <= len(normalized) <= TITLE_MAX_LENGTH:
        return TITLE_LENGTH
    return None


def check_content(content: str | None) -> str | None:
    """Return the content error message, or None when the content is valid."""
    normalized = normalize(content)
    if not CONTENT_MIN_LENGTH <= len(normalized) <= CONTENT_MAX_LENGTH:
        return CONTENT_LENGTH
    return None


def validate_title_and_content(
    title: str | None, content: str | None,
) -> FieldErrors:
    """Collect all title/content errors. Empty result means both are valid."""
    errors = FieldErrors()
    title_error = check_title(title)
    if title_error:
        errors.add(MessageField.TITLE.value, title_error)
    content_error = check_content(content)
    if content_error:
        errors.add(MessageField.CONTENT.value, content_error)
    return errors


def check_active(message: Message, reason: str) -> ValidationError | None:
    """Inactive messages are frozen: return an IsActive error carrying reason."""
    if message.is_active:
        return None
    return ValidationError(FieldErrors({MessageField.IS_ACTIVE.value: [reason]}))


def is_title_taken(
    holder: Message | None, own_id: MessageId | None = None,
) -> bool:
    """True when holder exists and is not the record identified by own_id."""
    return holder is not None and (own_id is None or holder.id != own_id)
