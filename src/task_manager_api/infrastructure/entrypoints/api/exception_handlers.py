from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog.contextvars import get_contextvars

from task_manager_api.core.exceptions.malformed_input_error import MalformedInputError
from task_manager_api.core.exceptions.task_not_found_error import TaskNotFoundError
from task_manager_api.core.exceptions.task_validation_error import TaskValidationError
from task_manager_api.infrastructure.entrypoints.api.dtos.error_response_dto import (
    ErrorResponseDTO,
    FieldViolationDTO,
)
from task_manager_api.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


def _error_response(
    status_code: int, body: ErrorResponseDTO, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers
    )


async def task_validation_error_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponseDTO(
            error="validation_error",
            message=f"Validation failed: {exc}",
            details=[
                FieldViolationDTO(field=v.field, constraint=v.constraint, message=v.message)
                for v in exc.violations
            ],
        ),
    )


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        ErrorResponseDTO(error="not_found", message=str(exc)),
    )


async def malformed_input_handler(request: Request, exc: MalformedInputError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponseDTO(error="malformed_input", message=exc.message),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Unparseable JSON or a missing body never reaches the task validator.
    logger.warning(
        "Malformed request body",
        error_type="RequestValidationError",
        error_details=[error.get("msg") for error in exc.errors()],
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponseDTO(
            error="malformed_input",
            message="Request body must be a valid JSON object",
        ),
    )


_HTTP_ERROR_KINDS = {
    status.HTTP_400_BAD_REQUEST: "malformed_input",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework-raised, e.g. an undecodable body or an unrouted method.
    return _error_response(
        exc.status_code,
        ErrorResponseDTO(
            error=_HTTP_ERROR_KINDS.get(exc.status_code, "http_error"),
            message=str(exc.detail),
        ),
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error processing request",
        processing_status="ERROR",
        error_type=type(exc).__name__,
        error_details=str(exc),
    )
    # Answered outside CorrelationMiddleware, so the header is added here.
    correlation_id = get_contextvars().get("correlation_id")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponseDTO(error="internal_error", message="An unexpected error occurred."),
        headers={"X-Correlation-ID": correlation_id} if correlation_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, task_validation_error_handler)
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(MalformedInputError, malformed_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
