"""Usuario Schemas — Pydantic models for the /api/usuarios boundary.

Invariants:
    - UsuarioRequest: nombre 2-100 chars, email well-formed, password >= 6 chars, all required
    - Every violated field is reported; Pydantic collects field errors before failing
    - UsuarioResponse never has a password field — the only outbound user shape

Design Decisions:
    - Rules live in core/validate_usuario.py; field validators only adapt them to Pydantic
    - PydanticCustomError over ValueError: message reaches the client without a "Value error," prefix
    - Same schema for create and update: update is a full replacement
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.repository_protocols import UsuarioLike
from app.core.validate_usuario import check_email, check_nombre, check_password


def _enforce(rule, value: str, error_type: str) -> str:
    message = rule(value)
    if message:
        raise PydanticCustomError(error_type, message)
    return value


class UsuarioRequest(BaseModel):
    """Create/update payload."""
    nombre: str = Field(examples=["Juan Pérez"])
    email: str = Field(examples=["juan@example.com"])
    password: str = Field(examples=["pass123456"])

    @field_validator("nombre")
    @classmethod
    def validate_nombre(cls, v: str) -> str:
        return _enforce(check_nombre, v, "nombre_invalido")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _enforce(check_email, v, "email_invalido")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _enforce(check_password, v, "password_invalido")


# Update accepts exactly the create shape
UsuarioUpdateRequest = UsuarioRequest


class UsuarioResponse(BaseModel):
    """Public user view — id, nombre, email."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str

    @classmethod
    def from_entity(cls, usuario: UsuarioLike) -> "UsuarioResponse":
        return cls(id=usuario.id, nombre=usuario.nombre, email=usuario.email)
