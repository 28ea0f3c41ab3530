"""Usuarios API Package — CRUD REST service for user accounts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
