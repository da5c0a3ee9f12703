"""Render view tests — pure rendering of transcript and diagnostics snapshots."""

from chatroom.core.domain_types import (
    ChatMessage, DiagnosticsSnapshot, Participant, ParticipantId,
)
from chatroom.core.render_views import render_diagnostics, render_transcript


def test_transcript_single_message_has_no_trailing_marker():
    assert render_transcript((ChatMessage("alice", "hi"),)) == "alice: hi"


def test_transcript_joins_with_line_break_marker():
    messages = (ChatMessage("alice", "hi"), ChatMessage("bob", "yo"))
    assert render_transcript(messages) == "alice: hi<br/>bob: yo"


def test_transcript_empty():
    assert render_transcript(()) == ""


def test_diagnostics_format():
    snapshot = DiagnosticsSnapshot(
        participants=(Participant(ParticipantId(3), "carol", "127.0.0.1:9000"),),
        id_counter=3,
        diagnostics_reads=7,
    )
    assert render_diagnostics(snapshot) == (
        "Connected users: <br/>"
        "3 carol 127.0.0.1:9000<br/>"
        "Id counter: 3 <br/>"
        "Info counter: 7 <br/>"
    )
