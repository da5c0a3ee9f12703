"""Render Views — pure text rendering of registry snapshots.

Invariants:
    - Inputs are immutable snapshots taken by ChatRegistry (no IO, no locking here)
    - Author names and bodies are embedded verbatim (no HTML escaping)
    - Never raises for well-formed snapshots

Design Decisions:
    - Pure functions, not ChatRegistry methods: rendering runs after the lock is released
    - No escaping keeps the wire output legacy clients expect; callers must not treat the
      result as sanitized markup
"""

from chatroom.core.domain_types import (
    ChatMessage, DiagnosticsSnapshot, LINE_BREAK,
)


def render_transcript(messages: tuple[ChatMessage, ...]) -> str:
    """Render messages as `author: body` lines joined by the line-break marker."""
    return LINE_BREAK.join(f"{m.author}: {m.body}" for m in messages)


def render_diagnostics(snapshot: DiagnosticsSnapshot) -> str:
    """Render the connected-users table followed by both counters."""
    lines = ["Connected users: "]
    lines.extend(f"{p.id} {p.name} {p.origin}" for p in snapshot.participants)
    lines.append(f"Id counter: {snapshot.id_counter} ")
    lines.append(f"Info counter: {snapshot.diagnostics_reads} ")
    return "".join(line + LINE_BREAK for line in lines)
