"""Core Layer — registry state, locking, rendering, and errors. No IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Core never logs; adapters decide what to report

Design Decisions:
    - Functional rendering separated from the locked aggregate (ADR: impureim sandwich)
"""
