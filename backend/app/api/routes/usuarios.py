"""Usuarios Routes — thin HTTP translation over UsuarioService.

Invariants:
    - No business logic here: decode, call service, match result, encode
    - Every service result that is a UsuariosError goes through error_response()
    - Success statuses: POST 201, GET/PUT 200, DELETE 204 with empty body

Design Decisions:
    - Service built per request from the request's db session (explicit wiring, no globals)
    - user_id bounded to BIGINT so out-of-range ids are bad arguments, not driver errors
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import ERROR_RESPONSES, error_response
from app.core.domain_types import MAX_USER_ID, UserId
from app.core.errors import UsuariosError
from app.infrastructure.database import get_db
from app.infrastructure.usuario_repository import UsuarioRepository
from app.schemas.usuario import (
    UsuarioRequest, UsuarioResponse, UsuarioUpdateRequest,
)
from app.services.usuario_service import UsuarioService

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])

UserIdPath = Annotated[int, Path(le=MAX_USER_ID, description="ID del usuario")]


def get_usuario_service(
    db: AsyncSession = Depends(get_db),
) -> UsuarioService:
    return UsuarioService(db, UsuarioRepository(db))


@router.post(
    "", response_model=UsuarioResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_usuario(
    body: UsuarioRequest,
    request: Request,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Create a user. Email must not be registered yet."""
    result = await service.create(body)
    if isinstance(result, UsuariosError):
        return error_response(request, result)
    return result


@router.get("", response_model=list[UsuarioResponse])
async def list_usuarios(
    service: UsuarioService = Depends(get_usuario_service),
):
    """List all users (empty list when there are none)."""
    return await service.list_all()


@router.get(
    "/{user_id}", response_model=UsuarioResponse,
    responses=ERROR_RESPONSES,
)
async def get_usuario(
    user_id: UserIdPath,
    request: Request,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Get one user by id."""
    result = await service.get_by_id(UserId(user_id))
    if isinstance(result, UsuariosError):
        return error_response(request, result)
    return result


@router.put(
    "/{user_id}", response_model=UsuarioResponse,
    responses=ERROR_RESPONSES,
)
async def update_usuario(
    user_id: UserIdPath,
    body: UsuarioUpdateRequest,
    request: Request,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Replace nombre, email and password of an existing user."""
    result = await service.update(UserId(user_id), body)
    if isinstance(result, UsuariosError):
        return error_response(request, result)
    return result


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=ERROR_RESPONSES,
)
async def delete_usuario(
    user_id: UserIdPath,
    request: Request,
    service: UsuarioService = Depends(get_usuario_service),
):
    """Delete an existing user. Deleting the same id twice fails the second time."""
    error = await service.delete(UserId(user_id))
    if error is not None:
        return error_response(request, error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
