"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All failures leave through api/error_handlers.py in one uniform JSON shape

Design Decisions:
    - Thin routes delegate to services
"""
