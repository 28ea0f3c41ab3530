"""Usuario Input Rules — pure field checks.

Invariants:
    - One message per field, blankness before length/format
    - Special-use domains (localhost, .test) pass the email grammar
    - Valid values produce no message
"""

import pytest

from app.core.validate_usuario import (
    FIELD_RULES,
    check_email,
    check_nombre,
    check_password,
)


# --- nombre -------------------------------------------------------------------

@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_nombre_blank_reports_empty_message(value):
    assert check_nombre(value) == "El nombre no puede estar vacío"


@pytest.mark.parametrize("value", ["J", "x" * 101])
def test_nombre_out_of_bounds_reports_length_message(value):
    assert check_nombre(value) == "El nombre debe tener entre 2 y 100 caracteres"


@pytest.mark.parametrize("value", ["Jo", "Juan Pérez", "x" * 100])
def test_nombre_within_bounds_is_valid(value):
    assert check_nombre(value) is None


# --- email --------------------------------------------------------------------

def test_email_blank_reports_empty_message():
    assert check_email("  ") == "El email no puede estar vacío"


@pytest.mark.parametrize("value", ["juan", "juan.example.com", "juan@", "@example.com", "a b@example.com"])
def test_email_malformed_reports_format_message(value):
    assert check_email(value) == "Formato de email inválido"


@pytest.mark.parametrize("value", ["juan@example.com", "ana.maria+tag@sub.example.org"])
def test_email_well_formed_is_valid(value):
    assert check_email(value) is None


@pytest.mark.parametrize("value", ["admin@localhost", "a@b.test"])
def test_email_special_use_domain_is_valid(value):
    assert check_email(value) is None


# --- password -----------------------------------------------------------------

def test_password_blank_reports_empty_message():
    assert check_password("") == "La contraseña no puede estar vacía"


def test_password_too_short_reports_length_message():
    assert check_password("12345") == "La contraseña debe tener al menos 6 caracteres"


def test_password_six_chars_is_valid():
    assert check_password("123456") is None


def test_field_rules_cover_exactly_the_request_fields():
    assert list(FIELD_RULES) == ["nombre", "email", "password"]
