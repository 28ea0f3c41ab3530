"""Services Layer — business operations over the usuarios store.

Invariants:
    - Services own transaction boundaries; repositories never commit
    - Services return error kinds as values; the API layer maps them to HTTP

Design Decisions:
    - Service constructed per request with explicit db session + repository (no globals)
"""
