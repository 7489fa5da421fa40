from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    field: str
    constraint: str
    message: str
