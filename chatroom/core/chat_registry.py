"""Chat Registry — single in-memory source of truth for presence and history.

Invariants:
    - One ReadWriteLock guards every field; no per-field locking
    - Display names are unique among registered participants
    - Issued ids strictly increase from 1 and are never reused
    - messages is append-only and ordered by write-lock acquisition
    - A failed operation leaves every field untouched
    - No IO, logging, or rendering while the lock is held

Design Decisions:
    - Errors raised, not returned: adapters map ChatroomError subclasses to 400s
    - _ids_by_name index lives inside the same aggregate as participants, so the
      uniqueness check and the insert share one critical section
    - render_diagnostics takes the write side: it bumps diagnostics_reads
    - No removal operation: the registry grows for the lifetime of the process
"""

from chatroom.core.domain_types import (
    ChatMessage, DiagnosticsSnapshot, Participant, ParticipantId,
)
from chatroom.core.errors import AlreadyRegisteredError, NotRegisteredError
from chatroom.core import render_views
from chatroom.core.rw_lock import ReadWriteLock


class ChatRegistry:
    """Shared participant/message store; every public method is atomic."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._participants: dict[ParticipantId, Participant] = {}
        self._ids_by_name: dict[str, ParticipantId] = {}
        self._id_counter = 0  # equals the last issued id
        self._messages: list[ChatMessage] = []
        self._diagnostics_reads = 0

    # === Mutations ===

    def register(self, name: str, origin: str) -> ParticipantId:
        """Register `name` from `origin` and return its new id.

        Raises AlreadyRegisteredError if the name is held by a participant.
        """
        with self._lock.write():
            if name in self._ids_by_name:
                raise AlreadyRegisteredError(name)
            self._id_counter += 1
            participant_id = ParticipantId(self._id_counter)
            self._participants[participant_id] = Participant(
                id=participant_id, name=name, origin=origin,
            )
            self._ids_by_name[name] = participant_id
        return participant_id

    def post_message(self, name: str, body: str) -> ChatMessage:
        """Append a message authored by registered participant `name`.

        Raises NotRegisteredError if no participant holds `name`.
        """
        with self._lock.write():
            participant_id = self._ids_by_name.get(name)
            if participant_id is None:
                raise NotRegisteredError(name)
            message = ChatMessage(
                author=self._participants[participant_id].name, body=body,
            )
            self._messages.append(message)
        return message

    # === Views ===

    def render_transcript(self) -> str:
        """Messages in arrival order, one `author: body` line each."""
        with self._lock.read():
            messages = tuple(self._messages)
        return render_views.render_transcript(messages)

    def render_diagnostics(self) -> str:
        """Participants and counters; counts this call after snapshotting."""
        with self._lock.write():
            snapshot = DiagnosticsSnapshot(
                participants=tuple(
                    self._participants[pid] for pid in sorted(self._participants)
                ),
                id_counter=self._id_counter,
                diagnostics_reads=self._diagnostics_reads,
            )
            self._diagnostics_reads += 1
        return render_views.render_diagnostics(snapshot)

    def is_registered(self, name: str) -> bool:
        with self._lock.read():
            return name in self._ids_by_name

    @property
    def participant_count(self) -> int:
        with self._lock.read():
            return len(self._participants)

    @property
    def message_count(self) -> int:
        with self._lock.read():
            return len(self._messages)
