"""Error Handlers — the single place where failure kinds become HTTP responses.

Invariants:
    - Every failure response is an ErrorResponse: timestamp, status, error, detalles (>= 1)
    - validation / bad_argument / resource_not_found → 400, conflict → 409, anything else → 500
    - 500 bodies carry a fixed sentence — never exception text or stack traces
    - Path-parameter parse failures are bad arguments; body failures are validation failures

Design Decisions:
    - error_response() serves both service result values and raised UsuariosError
    - Four-layer handler: domain (UsuariosError), validation (Pydantic), framework HTTP
      errors (404/405), catch-all (Exception)
    - Missing or null body fields reuse the field rule's blank message so they read
      the same as an empty one
"""

import logging
from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    BadArgumentError,
    ErrorCategory,
    ErrorSeverity,
    UnclassifiedError,
    UsuariosError,
    ValidationFailureError,
)
from app.core.validate_usuario import FIELD_RULES
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.BAD_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
}

_LABEL_BY_CATEGORY: dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "Error de validación",
    ErrorCategory.BAD_ARGUMENT: "Argumento inválido",
    ErrorCategory.RESOURCE_NOT_FOUND: "Argumento inválido",
    ErrorCategory.CONFLICT: "Error de integridad de datos",
}

INTERNAL_ERROR_LABEL = "Error interno del servidor"
INTERNAL_ERROR_DETAIL = (
    "Ha ocurrido un error inesperado. Por favor, contacte al administrador"
)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _render(status_code: int, error: str, detalles: list[str]) -> JSONResponse:
    body = ErrorResponse(status=status_code, error=error, detalles=detalles)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json"),
    )


def internal_error_response() -> JSONResponse:
    return _render(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_LABEL, [INTERNAL_ERROR_DETAIL],
    )


def error_response(request: Request, error: UsuariosError) -> JSONResponse:
    """Map an error kind to status + body. Unmapped categories fall to 500."""
    status_code = _STATUS_BY_CATEGORY.get(error.category)
    log_extra = {
        "error_code": error.code,
        "path": request.url.path,
        "method": request.method,
        "user_id": error.context.user_id,
        "status_code": status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
    }
    if status_code is None:
        logger.error(
            f"{type(error).__name__} on {request.url.path}: {error.message}",
            exc_info=error.__cause__, extra=log_extra,
        )
        return internal_error_response()

    level = (
        logging.ERROR
        if error.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
        else logging.WARNING
    )
    logger.log(level, f"{type(error).__name__}: {error.message}", extra=log_extra)
    return _render(status_code, _LABEL_BY_CATEGORY[error.category], error.detalles)


def classify_request_errors(errors: Sequence[dict]) -> UsuariosError:
    """Turn Pydantic/FastAPI request errors into a single error kind."""
    for e in errors:
        if e["loc"][:1] == ("path",):
            return BadArgumentError(
                f"El ID '{e.get('input')}' no es un identificador válido",
            )
    return ValidationFailureError([_format_field_error(e) for e in errors])


def _format_field_error(e: dict) -> str:
    # json_invalid locs carry the decode position, not a field
    if e["type"] == "json_invalid":
        return f"body: {e['msg']}"
    field_path = ".".join(str(part) for part in e["loc"] if part != "body")
    field_name = field_path or "body"
    rule = FIELD_RULES.get(field_name)
    is_null = "input" in e and e["input"] is None
    if rule is not None and (e["type"] == "missing" or is_null):
        return f"{field_name}: {rule(None)}"
    return f"{field_name}: {e['msg']}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_usuarios_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_usuarios_error_handler(app: FastAPI) -> None:
    """Register handler for raised domain/infrastructure errors."""

    @app.exception_handler(UsuariosError)
    async def usuarios_error_handler(request: Request, exc: UsuariosError):
        return error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return error_response(request, classify_request_errors(exc.errors()))


def _register_http_error_handler(app: FastAPI) -> None:
    """Unknown routes and wrong methods still get the uniform body."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path, "method": request.method},
        )
        response = _render(
            exc.status_code,
            HTTPStatus(exc.status_code).phrase,
            [str(exc.detail)],
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return error_response(request, UnclassifiedError(exc))
