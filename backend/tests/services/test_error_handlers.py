"""Error mapping — category → status/label, request error classification."""

import json
from types import SimpleNamespace

import pytest

from app.api.error_handlers import (
    INTERNAL_ERROR_DETAIL,
    classify_request_errors,
    error_response,
)
from app.core.errors import (
    BadArgumentError,
    DatabaseError,
    DuplicateEmailError,
    ErrorCategory,
    IntegrityConflictError,
    UnclassifiedError,
    UserNotFoundError,
    UsuariosError,
    ValidationFailureError,
)

_REQUEST = SimpleNamespace(url=SimpleNamespace(path="/api/usuarios"), method="GET")


def _body(response):
    return json.loads(response.body)


@pytest.mark.parametrize(
    ("error", "status_code", "label"),
    [
        (ValidationFailureError(["nombre: x"]), 400, "Error de validación"),
        (BadArgumentError("mal"), 400, "Argumento inválido"),
        (UserNotFoundError(3), 400, "Argumento inválido"),
        (DuplicateEmailError(), 409, "Error de integridad de datos"),
        (IntegrityConflictError(), 409, "Error de integridad de datos"),
        (DatabaseError("boom", "commit"), 500, "Error interno del servidor"),
    ],
)
def test_error_response_maps_category(error, status_code, label):
    response = error_response(_REQUEST, error)
    assert response.status_code == status_code
    body = _body(response)
    assert body["status"] == status_code
    assert body["error"] == label


def test_unmapped_category_falls_to_sanitized_500():
    error = UsuariosError("internal detail", "WHATEVER", ErrorCategory.INTERNAL)
    response = error_response(_REQUEST, error)
    assert response.status_code == 500
    assert _body(response)["detalles"] == [INTERNAL_ERROR_DETAIL]


def test_unclassified_error_is_sanitized_500():
    error = UnclassifiedError(RuntimeError("secret connection string"))
    response = error_response(_REQUEST, error)
    assert response.status_code == 500
    body = _body(response)
    assert body["error"] == "Error interno del servidor"
    assert body["detalles"] == [INTERNAL_ERROR_DETAIL]
    assert "secret" not in response.body.decode()


def test_path_error_classified_as_bad_argument():
    errors = [{"loc": ("path", "user_id"), "type": "int_parsing", "msg": "bad", "input": "xyz"}]
    error = classify_request_errors(errors)
    assert isinstance(error, BadArgumentError)
    assert error.detalles == ["El ID 'xyz' no es un identificador válido"]


def test_body_errors_classified_as_validation_failure():
    errors = [
        {"loc": ("body", "nombre"), "type": "nombre_invalido", "msg": "El nombre no puede estar vacío"},
        {"loc": ("body", "email"), "type": "missing", "msg": "Field required"},
    ]
    error = classify_request_errors(errors)
    assert isinstance(error, ValidationFailureError)
    assert error.detalles == [
        "nombre: El nombre no puede estar vacío",
        "email: El email no puede estar vacío",
    ]


def test_missing_body_keeps_framework_message():
    errors = [{"loc": ("body",), "type": "missing", "msg": "Field required"}]
    assert classify_request_errors(errors).detalles == ["body: Field required"]


def test_null_fields_read_as_blank():
    errors = [
        {"loc": ("body", "nombre"), "type": "string_type", "msg": "Input should be a valid string", "input": None},
        {"loc": ("body", "password"), "type": "string_type", "msg": "Input should be a valid string", "input": None},
    ]
    assert classify_request_errors(errors).detalles == [
        "nombre: El nombre no puede estar vacío",
        "password: La contraseña no puede estar vacía",
    ]


def test_non_string_field_keeps_framework_message():
    errors = [{"loc": ("body", "nombre"), "type": "string_type", "msg": "Input should be a valid string", "input": 42}]
    assert classify_request_errors(errors).detalles == ["nombre: Input should be a valid string"]


def test_json_decode_error_reported_on_body():
    errors = [{"loc": ("body", 1), "type": "json_invalid", "msg": "JSON decode error", "input": {}}]
    error = classify_request_errors(errors)
    assert isinstance(error, ValidationFailureError)
    assert error.detalles == ["body: JSON decode error"]
