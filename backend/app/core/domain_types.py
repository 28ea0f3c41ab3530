"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the storage-assigned integer — never client-supplied on create
    - ConstraintViolation is a value, never raised

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - ConstraintViolation carries the constraint NAME when the driver reports one and the
      offending COLUMNS otherwise, so classification never depends on message wording
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# Largest value a BIGINT primary key can hold
MAX_USER_ID = 2**63 - 1


# ─── Storage Signals ─────────────────────────────────────────────

@dataclass(frozen=True)
class ConstraintViolation:
    """Integrity constraint reported by the store on flush."""
    constraint: str | None = None
    columns: tuple[str, ...] = ()

    def involves(self, constraint: str, column: str) -> bool:
        """True when the violation names the constraint or, lacking a name, the column."""
        if self.constraint is not None:
            return self.constraint == constraint
        return column in self.columns
