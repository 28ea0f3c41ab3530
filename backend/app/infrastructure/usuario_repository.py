"""Usuario Repository — SQLAlchemy implementation of UsuarioRepositoryProtocol.

Invariants:
    - Never commits or rolls back: the service owns the transaction boundary
    - insert/save flush immediately so constraint violations surface inside the caller's transaction
    - IntegrityError on flush is returned as ConstraintViolation; any other error propagates
    - delete acts on the identity of an already-retrieved instance

Design Decisions:
    - Constraint identity read from the driver (asyncpg constraint_name, psycopg diag);
      SQLite reports no name, so its "UNIQUE constraint failed: t.col" columns are used instead
    - find_by_id(for_update=True) takes a row lock where the dialect supports it
      (SQLite ignores FOR UPDATE and serializes writers itself)
"""

import logging
import re

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ConstraintViolation, UserId
from app.models.usuario import Usuario

logger = logging.getLogger(__name__)

_SQLITE_CONSTRAINT = re.compile(
    r"(?:UNIQUE|NOT NULL) constraint failed: (?P<columns>[\w.]+(?:, [\w.]+)*)",
)


def classify_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """Extract the violated constraint (or columns) from a driver IntegrityError."""
    orig = exc.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        name = getattr(candidate, "constraint_name", None)
        if name:
            return ConstraintViolation(constraint=name)
        diag = getattr(candidate, "diag", None)
        if diag is not None and getattr(diag, "constraint_name", None):
            return ConstraintViolation(constraint=diag.constraint_name)

    match = _SQLITE_CONSTRAINT.search(str(orig))
    if match:
        columns = tuple(
            column.rsplit(".", 1)[-1]
            for column in match.group("columns").split(", ")
        )
        return ConstraintViolation(columns=columns)
    return ConstraintViolation()


class UsuarioRepository:
    """Data access for Usuario rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, usuario: Usuario) -> Usuario | ConstraintViolation:
        self.db.add(usuario)
        return await self._flush(usuario)

    async def save(self, usuario: Usuario) -> Usuario | ConstraintViolation:
        """Flush pending changes of an instance already in the session."""
        return await self._flush(usuario)

    async def find_by_id(
        self, user_id: UserId, *, for_update: bool = False,
    ) -> Usuario | None:
        query = select(Usuario).where(Usuario.id == user_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Usuario]:
        result = await self.db.execute(select(Usuario).order_by(Usuario.id))
        return list(result.scalars().all())

    async def delete(self, usuario: Usuario) -> bool:
        """Delete by identity. False when the row was already gone."""
        result = await self.db.execute(
            delete(Usuario).where(Usuario.id == usuario.id),
        )
        return result.rowcount > 0

    async def _flush(self, usuario: Usuario) -> Usuario | ConstraintViolation:
        try:
            await self.db.flush()
        except IntegrityError as e:
            violation = classify_integrity_error(e)
            logger.info(f"Integrity violation on usuarios: {violation}")
            return violation
        return usuario
