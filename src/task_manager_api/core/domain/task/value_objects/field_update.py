from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FieldUpdate(Generic[T]):
    """Presence wrapper for one field of a partial update.

    ``FieldUpdate.absent()`` means the client did not send the field;
    ``FieldUpdate.of(value)`` means it did, whatever the value is.
    """

    value: T | None = None
    is_present: bool = False

    @classmethod
    def absent(cls) -> FieldUpdate[T]:
        return cls()

    @classmethod
    def of(cls, value: T) -> FieldUpdate[T]:
        return cls(value=value, is_present=True)

    def apply(self, current: T) -> T:
        """Return the new value when present, otherwise ``current``."""
        if self.is_present:
            return self.value  # type: ignore[return-value]
        return current
