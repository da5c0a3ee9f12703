"""Chatroom Package — in-memory multi-client chat registry over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - __version__ reported by the health check and OpenAPI metadata

Design Decisions:
    - Version-only __init__.py: explicit imports, no star exports
"""

__version__ = "1.0.0"
