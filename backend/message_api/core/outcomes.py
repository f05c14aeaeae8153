"""Outcomes — closed set of result variants returned by the message logic.

Invariants:
    - Every logic operation returns exactly one Outcome per call
    - Expected failures (absence, duplicate, invalid input) are variants, never exceptions
    - FieldErrors keys compare case-insensitively; first spelling wins

Design Decisions:
    - Tagged union of frozen dataclasses; the response mapper dispatches with `match`
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class FieldErrors(dict[str, list[str]]):
    """Field name → ordered error messages, with case-insensitive keys."""

    def __init__(self, errors: dict[str, list[str]] | None = None):
        super().__init__()
        for key, messages in (errors or {}).items():
            self[key] = messages

    def _resolve(self, key: str) -> str:
        folded = key.casefold()
        for existing in super().keys():
            if existing.casefold() == folded:
                return existing
        return key

    def __setitem__(self, key: str, value: list[str]) -> None:
        super().__setitem__(self._resolve(key), list(value))

    def __getitem__(self, key: str) -> list[str]:
        return super().__getitem__(self._resolve(key))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return super().__contains__(self._resolve(key))

    def __delitem__(self, key: str) -> None:
        super().__delitem__(self._resolve(key))

    def get(self, key: str, default=None):
        return super().get(self._resolve(key), default)

    def pop(self, key: str, *default):
        return super().pop(self._resolve(key), *default)

    def setdefault(self, key: str, default: list[str] | None = None) -> list[str]:
        if key not in self:
            self[key] = default if default is not None else []
        return self[key]

    def update(self, other=(), /, **kwargs: list[str]) -> None:
        items = other.items() if hasattr(other, "items") else other
        for key, messages in items:
            self[key] = messages
        for key, messages in kwargs.items():
            self[key] = messages

    def __ior__(self, other):
        self.update(other)
        return self

    @classmethod
    def fromkeys(cls, keys, value: list[str] | None = None) -> "FieldErrors":
        errors = cls()
        for key in keys:
            errors[key] = value if value is not None else []
        return errors

    def add(self, key: str, message: str) -> None:
        """Append one message under key, creating the entry if needed."""
        if key in self:
            self[key].append(message)
        else:
            self[key] = [message]


@dataclass(frozen=True)
class Created(Generic[T]):
    """A new entity was persisted."""
    payload: T


@dataclass(frozen=True)
class Updated:
    """An existing entity was mutated."""


@dataclass(frozen=True)
class Deleted:
    """An existing entity was removed."""


@dataclass(frozen=True)
class Success:
    """Generic success with no payload."""


@dataclass(frozen=True)
class NotFound:
    """The target entity does not exist in the given scope."""
    message: str


@dataclass(frozen=True)
class Conflict:
    """The operation violates a uniqueness constraint."""
    message: str


@dataclass(frozen=True)
class ValidationError:
    """One or more fields failed validation."""
    errors: FieldErrors = field(default_factory=FieldErrors)


Outcome = Created | Updated | Deleted | Success | NotFound | Conflict | ValidationError
