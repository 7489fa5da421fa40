import pytest

from task_manager_api.core.application.validation.task_request_validator import (
    TaskRequestValidator,
)
from task_manager_api.core.domain.task import TaskPriority, TaskStatus
from task_manager_api.core.exceptions import MalformedInputError, TaskValidationError


@pytest.fixture
def validator():
    return TaskRequestValidator()


def _constraints(exc_info) -> dict[str, str]:
    return {v.field: v.constraint for v in exc_info.value.violations}


class TestValidateCreate:
    def test_defaults_status_to_pending(self, validator, valid_payload):
        new_task = validator.validate_create(valid_payload)

        assert new_task.title == "Learn X"
        assert new_task.description == "desc"
        assert new_task.priority is TaskPriority.HIGH
        assert new_task.status is TaskStatus.PENDING

    def test_keeps_explicit_status(self, validator, valid_payload):
        new_task = validator.validate_create({**valid_payload, "status": "in-progress"})
        assert new_task.status is TaskStatus.IN_PROGRESS

    def test_ignores_unknown_fields(self, validator, valid_payload):
        new_task = validator.validate_create({**valid_payload, "owner": "someone"})
        assert new_task.title == "Learn X"

    def test_rejects_priority_outside_enum(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({**valid_payload, "priority": "urgent"})

        assert _constraints(exc) == {"priority": "one_of"}
        assert "low, medium, high" in exc.value.violations[0].message

    def test_rejects_empty_title(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({**valid_payload, "title": ""})

        assert _constraints(exc) == {"title": "min_length"}

    def test_length_bounds_are_inclusive(self, validator, valid_payload):
        new_task = validator.validate_create(
            {**valid_payload, "title": "t" * 100, "description": "d" * 500}
        )
        assert len(new_task.title) == 100
        assert len(new_task.description) == 500

    def test_rejects_values_over_max_length(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create(
                {**valid_payload, "title": "t" * 101, "description": "d" * 501}
            )

        assert _constraints(exc) == {"title": "max_length", "description": "max_length"}

    def test_counts_characters_not_bytes(self, validator, valid_payload):
        new_task = validator.validate_create({**valid_payload, "title": "é" * 100})
        assert new_task.title == "é" * 100

    def test_reports_every_missing_field_at_once(self, validator):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({})

        assert exc.value.fields == ["title", "description", "priority"]
        assert set(_constraints(exc).values()) == {"required"}

    def test_rejects_invalid_status(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({**valid_payload, "status": "done"})
        assert _constraints(exc) == {"status": "one_of"}

    def test_rejects_non_string_title(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({**valid_payload, "title": 42})
        assert _constraints(exc) == {"title": "type"}

    def test_explicit_null_is_not_treated_as_missing(self, validator, valid_payload):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_create({**valid_payload, "title": None, "status": None})
        assert _constraints(exc) == {"title": "not_null", "status": "not_null"}

    @pytest.mark.parametrize("payload", [["title"], "title", 3, None])
    def test_non_mapping_payload_is_malformed(self, validator, payload):
        with pytest.raises(MalformedInputError):
            validator.validate_create(payload)


class TestValidateUpdate:
    def test_empty_payload_is_a_valid_noop(self, validator):
        patch = validator.validate_update({})
        assert patch.is_empty

    def test_marks_only_supplied_fields_present(self, validator):
        patch = validator.validate_update({"status": "completed"})

        assert patch.present_fields == ["status"]
        assert patch.status.value is TaskStatus.COMPLETED
        assert patch.title.is_present is False

    def test_absent_fields_are_not_checked(self, validator):
        patch = validator.validate_update({"priority": "low"})
        assert patch.priority.value is TaskPriority.LOW

    def test_reports_every_violated_field(self, validator):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_update(
                {
                    "title": "",
                    "description": "d" * 501,
                    "priority": "urgent",
                    "status": "archived",
                }
            )

        assert _constraints(exc) == {
            "title": "min_length",
            "description": "max_length",
            "priority": "one_of",
            "status": "one_of",
        }

    def test_explicit_empty_string_is_checked_not_skipped(self, validator):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_update({"description": ""})
        assert _constraints(exc) == {"description": "min_length"}

    def test_explicit_null_is_rejected(self, validator):
        with pytest.raises(TaskValidationError) as exc:
            validator.validate_update({"title": None})
        assert _constraints(exc) == {"title": "not_null"}

    def test_non_mapping_payload_is_malformed(self, validator):
        with pytest.raises(MalformedInputError):
            validator.validate_update([{"title": "x"}])
