"""Domain Types — identity and record types shared by the registry and renderers.

Invariants:
    - ParticipantId is a positive int, issued once, never reused
    - Participant and ChatMessage are frozen: past records never change
    - ChatMessage.author is a copied name, not a reference to a Participant

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses: snapshots can be handed out of the lock without copying fields
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ParticipantId = NewType("ParticipantId", int)


# ─── Rendering ───────────────────────────────────────────────────

LINE_BREAK = "<br/>"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Participant:
    """A registered presence — name is unique among registered participants."""
    id: ParticipantId
    name: str
    origin: str


@dataclass(frozen=True)
class ChatMessage:
    """One accepted post, in registry arrival order."""
    author: str
    body: str


@dataclass(frozen=True)
class DiagnosticsSnapshot:
    """Consistent view of registry counters taken under one lock acquisition."""
    participants: tuple[Participant, ...]
    id_counter: int
    diagnostics_reads: int
