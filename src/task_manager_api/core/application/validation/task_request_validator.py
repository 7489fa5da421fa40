from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from task_manager_api.core.application.validation.contracts.task_payload_contracts import (
    CreateTaskContract,
    UpdateTaskContract,
)
from task_manager_api.core.domain.task.value_objects.field_update import FieldUpdate
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_patch import TaskPatch
from task_manager_api.core.exceptions.field_violation import FieldViolation
from task_manager_api.core.exceptions.malformed_input_error import MalformedInputError
from task_manager_api.core.exceptions.task_validation_error import TaskValidationError

C = TypeVar("C", bound=BaseModel)


class TaskRequestValidator:
    """
    Checks create/update payloads before the store is touched.

    Every violated field is reported in a single ``TaskValidationError``;
    the validator never stops at the first failure.
    """

    def validate_create(self, payload: Any) -> NewTask:
        contract = self._validate(CreateTaskContract, payload)
        return NewTask(
            title=contract.title,
            description=contract.description,
            priority=contract.priority,
            status=contract.status,
        )

    def validate_update(self, payload: Any) -> TaskPatch:
        contract = self._validate(UpdateTaskContract, payload)
        present = contract.model_fields_set

        def _field(name: str) -> FieldUpdate:
            if name in present:
                return FieldUpdate.of(getattr(contract, name))
            return FieldUpdate.absent()

        return TaskPatch(
            title=_field("title"),
            description=_field("description"),
            priority=_field("priority"),
            status=_field("status"),
        )

    def _validate(self, contract_type: type[C], payload: Any) -> C:
        if not isinstance(payload, Mapping):
            raise MalformedInputError()

        # An explicit null is a present value, not an omission.
        null_fields = {
            name for name in contract_type.model_fields if name in payload and payload[name] is None
        }
        violations = [
            FieldViolation(field=name, constraint="not_null", message=f"{name} must not be null")
            for name in null_fields
        ]
        candidate = {key: value for key, value in payload.items() if key not in null_fields}

        contract = None
        try:
            contract = contract_type.model_validate(candidate)
        except PydanticValidationError as exc:
            violations.extend(
                violation
                for violation in self._to_violations(contract_type, exc)
                if violation.field not in null_fields
            )

        if violations:
            order = list(contract_type.model_fields)
            violations.sort(key=lambda v: order.index(v.field) if v.field in order else len(order))
            raise TaskValidationError(violations)
        return contract

    @staticmethod
    def _to_violations(
        contract_type: type[BaseModel], exc: PydanticValidationError
    ) -> list[FieldViolation]:
        violations = []
        for error in exc.errors():
            name = str(error["loc"][0]) if error["loc"] else "body"
            violations.append(_describe(contract_type, name, error["type"], error.get("ctx") or {}))
        return violations


def _describe(
    contract_type: type[BaseModel], name: str, error_type: str, ctx: dict[str, Any]
) -> FieldViolation:
    if error_type == "missing":
        return FieldViolation(name, "required", f"{name} is required")
    if error_type == "string_too_short":
        return FieldViolation(
            name, "min_length", f"{name} must be at least {ctx.get('min_length', 1)} character(s)"
        )
    if error_type == "string_too_long":
        return FieldViolation(
            name, "max_length", f"{name} must be at most {ctx.get('max_length')} characters"
        )
    if error_type == "enum":
        allowed = ", ".join(_allowed_values(contract_type, name))
        return FieldViolation(name, "one_of", f"{name} must be one of: {allowed}")
    return FieldViolation(name, "type", f"{name} must be a string")


def _allowed_values(contract_type: type[BaseModel], name: str) -> list[str]:
    annotation = contract_type.model_fields[name].annotation
    for candidate in getattr(annotation, "__args__", (annotation,)):
        if isinstance(candidate, type) and issubclass(candidate, StrEnum):
            return [member.value for member in candidate]
    return []
