"""Usuario Input Rules — pure field checks for create/update payloads.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Each check returns the violation message or None on success
    - One message per field: blankness is checked before length/format

Design Decisions:
    - Return messages (not exceptions): the same rules feed Pydantic field validators
      and the missing-field formatter in api/error_handlers.py
    - Values are checked as given (untrimmed) for length, trimmed only for blankness
"""

from collections.abc import Callable

from email_validator import EmailNotValidError, validate_email

NOMBRE_MIN_LENGTH = 2
NOMBRE_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_nombre(value: str | None) -> str | None:
    """Required, 2-100 characters."""
    if _is_blank(value):
        return "El nombre no puede estar vacío"
    if not NOMBRE_MIN_LENGTH <= len(value) <= NOMBRE_MAX_LENGTH:
        return (
            f"El nombre debe tener entre {NOMBRE_MIN_LENGTH} "
            f"y {NOMBRE_MAX_LENGTH} caracteres"
        )
    return None


def check_email(value: str | None) -> str | None:
    """Required, standard address grammar (no deliverability lookup)."""
    if _is_blank(value):
        return "El email no puede estar vacío"
    try:
        # Grammar only: special-use domains (localhost, .test) are accepted
        validate_email(
            value, check_deliverability=False,
            globally_deliverable=False, test_environment=True,
        )
    except EmailNotValidError:
        return "Formato de email inválido"
    return None


def check_password(value: str | None) -> str | None:
    """Required, at least 6 characters. Stored as given."""
    if _is_blank(value):
        return "La contraseña no puede estar vacía"
    if len(value) < PASSWORD_MIN_LENGTH:
        return (
            f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres"
        )
    return None


FIELD_RULES: dict[str, Callable[[str | None], str | None]] = {
    "nombre": check_nombre,
    "email": check_email,
    "password": check_password,
}

