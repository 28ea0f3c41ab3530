"""Usuario ORM — the single persisted entity.

Invariants:
    - id assigned by the database on insert, never changed afterwards
    - email unique across all rows (uq_usuarios_email is the sole authority)
    - password stored as given and never leaves the service (see schemas/usuario.py)

Design Decisions:
    - Named UniqueConstraint: drivers that report constraint names let the service
      classify duplicates without parsing error text
    - BIGINT identity, INTEGER on SQLite so ROWID autoincrement still applies
"""

from sqlalchemy import BigInteger, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

EMAIL_UNIQUE_CONSTRAINT = "uq_usuarios_email"


class Usuario(Base):
    """User account — nombre, email, password."""
    __tablename__ = "usuarios"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Usuario(id={self.id!r}, email={self.email!r})"
