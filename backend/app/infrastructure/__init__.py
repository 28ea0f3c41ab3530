"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Driver exceptions are translated here (ConstraintViolation values, DatabaseError)

Design Decisions:
    - Repository implements a core Protocol so the service stays storage-agnostic
"""
