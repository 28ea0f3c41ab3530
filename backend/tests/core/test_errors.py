"""Error Hierarchy — categories, messages and detalles per failure kind."""

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


def test_not_found_identifies_the_id():
    error = UserNotFoundError(999)
    assert error.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert error.detalles == ["No existe un usuario con el ID 999"]
    assert error.context.user_id == 999


def test_duplicate_email_has_fixed_message():
    error = DuplicateEmailError()
    assert error.category == ErrorCategory.CONFLICT
    assert error.detalles == ["El email ya está registrado"]


def test_integrity_conflict_keeps_constraint_out_of_detalles():
    error = IntegrityConflictError("ck_secret_internal")
    assert error.category == ErrorCategory.CONFLICT
    assert error.detalles == ["Violación de constraint de integridad"]
    assert error.constraint == "ck_secret_internal"


def test_validation_failure_keeps_all_detalles_in_order():
    detalles = ["nombre: a", "email: b"]
    error = ValidationFailureError(detalles)
    assert error.category == ErrorCategory.VALIDATION
    assert error.detalles == detalles


def test_bad_argument_category():
    assert BadArgumentError("x").category == ErrorCategory.BAD_ARGUMENT


def test_database_error_records_operation():
    error = DatabaseError("connection refused", "execute")
    assert error.category == ErrorCategory.DATABASE
    assert error.context.operation == "execute"
    assert "connection refused" in error.message


def test_all_kinds_share_the_base():
    for error in (
        UserNotFoundError(1), DuplicateEmailError(), BadArgumentError("x"),
        ValidationFailureError(["a: b"]), DatabaseError("m", "op"),
    ):
        assert isinstance(error, UsuariosError)
        assert len(error.detalles) >= 1


def test_unclassified_error_keeps_cause_for_logs():
    cause = RuntimeError("driver state corrupted")
    error = UnclassifiedError(cause)
    assert error.category == ErrorCategory.INTERNAL
    assert error.code == "INTERNAL_ERROR"
    assert error.__cause__ is cause
    assert "RuntimeError" in error.message
