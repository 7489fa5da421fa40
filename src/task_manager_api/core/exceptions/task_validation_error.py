from __future__ import annotations

from collections.abc import Sequence

from task_manager_api.core.exceptions.domain_error import DomainError
from task_manager_api.core.exceptions.field_violation import FieldViolation


class TaskValidationError(DomainError):
    """Raised when a payload violates one or more field constraints."""

    def __init__(self, violations: Sequence[FieldViolation]):
        self.violations = tuple(violations)
        super().__init__(str(self))

    @property
    def fields(self) -> list[str]:
        return [violation.field for violation in self.violations]

    def __str__(self) -> str:
        return "; ".join(f"{v.field}: {v.message}" for v in self.violations)
