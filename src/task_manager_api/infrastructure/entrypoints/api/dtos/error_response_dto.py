from pydantic import BaseModel


class FieldViolationDTO(BaseModel):
    field: str
    constraint: str
    message: str


class ErrorResponseDTO(BaseModel):
    error: str
    message: str
    details: list[FieldViolationDTO] | None = None
