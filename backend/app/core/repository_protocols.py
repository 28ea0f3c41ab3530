"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage access goes through the Protocol; the service never builds SQL itself
    - Integrity violations come back as ConstraintViolation values, not exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from app.core.domain_types import ConstraintViolation, UserId


class UsuarioLike(Protocol):
    """Structural contract for persisted users (the ORM model satisfies it)."""
    id: int | None
    nombre: str
    email: str
    password: str


class UsuarioRepositoryProtocol(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def insert(
        self, usuario: UsuarioLike,
    ) -> UsuarioLike | ConstraintViolation: ...
    async def save(
        self, usuario: UsuarioLike,
    ) -> UsuarioLike | ConstraintViolation: ...
    async def find_by_id(
        self, user_id: UserId, *, for_update: bool = False,
    ) -> UsuarioLike | None: ...
    async def find_all(self) -> list[UsuarioLike]: ...
    async def delete(self, usuario: UsuarioLike) -> bool: ...
