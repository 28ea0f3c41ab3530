"""Usuario Service — business invariants and transaction boundary for every user operation.

Invariants:
    - Every write runs in exactly one transaction: commit on success, rollback on any failure kind
    - Expected failures are RETURNED (UsuariosError values), never raised
    - update/delete retrieve the row and act on that same instance inside one transaction
      (row-locked where supported) — no exists-then-act round trips
    - Email uniqueness is never pre-checked: the store's constraint decides, the service classifies
    - Outbound data always passes through UsuarioResponse.from_entity (password never leaves)

Design Decisions:
    - Result values over exceptions: the gateway pattern-matches one union per operation
    - Service owns commit/rollback; repository only flushes
    - Delete is not idempotent: a second delete of the same id is a not-found failure
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ConstraintViolation, UserId
from app.core.errors import (
    DuplicateEmailError,
    IntegrityConflictError,
    UserNotFoundError,
    UsuariosError,
)
from app.core.repository_protocols import UsuarioRepositoryProtocol
from app.models.usuario import EMAIL_UNIQUE_CONSTRAINT, Usuario
from app.schemas.usuario import UsuarioRequest, UsuarioResponse

logger = logging.getLogger(__name__)


def classify_conflict(violation: ConstraintViolation) -> UsuariosError:
    """Map a storage constraint violation to its error kind."""
    if violation.involves(EMAIL_UNIQUE_CONSTRAINT, "email"):
        return DuplicateEmailError()
    return IntegrityConflictError(violation.constraint)


class UsuarioService:
    """CRUD over users with existence checks and conflict classification."""

    def __init__(self, db: AsyncSession, repository: UsuarioRepositoryProtocol):
        self.db = db
        self.repository = repository

    async def create(
        self, body: UsuarioRequest,
    ) -> UsuarioResponse | UsuariosError:
        usuario = Usuario(
            nombre=body.nombre, email=body.email, password=body.password,
        )
        saved = await self.repository.insert(usuario)
        if isinstance(saved, ConstraintViolation):
            await self.db.rollback()
            return classify_conflict(saved)
        response = UsuarioResponse.from_entity(saved)
        await self.db.commit()
        logger.info("Usuario created", extra={"user_id": response.id})
        return response

    async def list_all(self) -> list[UsuarioResponse]:
        usuarios = await self.repository.find_all()
        return [UsuarioResponse.from_entity(u) for u in usuarios]

    async def get_by_id(
        self, user_id: UserId,
    ) -> UsuarioResponse | UsuariosError:
        usuario = await self.repository.find_by_id(user_id)
        if usuario is None:
            return UserNotFoundError(user_id)
        return UsuarioResponse.from_entity(usuario)

    async def update(
        self, user_id: UserId, body: UsuarioRequest,
    ) -> UsuarioResponse | UsuariosError:
        usuario = await self.repository.find_by_id(user_id, for_update=True)
        if usuario is None:
            await self.db.rollback()
            return UserNotFoundError(user_id)

        # Full replacement on the retrieved instance
        usuario.nombre = body.nombre
        usuario.email = body.email
        usuario.password = body.password

        saved = await self.repository.save(usuario)
        if isinstance(saved, ConstraintViolation):
            await self.db.rollback()
            return classify_conflict(saved)
        response = UsuarioResponse.from_entity(saved)
        await self.db.commit()
        logger.info("Usuario updated", extra={"user_id": user_id})
        return response

    async def delete(self, user_id: UserId) -> UsuariosError | None:
        """Delete an existing user. None on success."""
        usuario = await self.repository.find_by_id(user_id, for_update=True)
        if usuario is None or not await self.repository.delete(usuario):
            await self.db.rollback()
            return UserNotFoundError(user_id)
        await self.db.commit()
        logger.info("Usuario deleted", extra={"user_id": user_id})
        return None
