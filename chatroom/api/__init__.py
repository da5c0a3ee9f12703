"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes hold no chat state; they delegate to ChatRegistry

Design Decisions:
    - Thin routes translate HTTP calls into the four registry operations
"""
