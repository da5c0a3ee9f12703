"""Chat Schemas — Pydantic models for the JSON chat endpoints.

Invariants:
    - ParticipantCreate.name: 1-100 chars after stripping, non-empty
    - MessageCreate.body: any string, including empty (registry accepts all content)
    - normalize_name is the one name rule for JSON bodies and legacy path segments

Design Decisions:
    - Name validation lives here, not in ChatRegistry: the core compares names exactly
"""

from pydantic import BaseModel, Field, field_validator


def normalize_name(v: str) -> str:
    """Strip surrounding whitespace; blank names are rejected with ValueError."""
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class ParticipantCreate(BaseModel):
    """Registration request — the origin comes from the transport, not the body."""
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return normalize_name(v)


class ParticipantResponse(BaseModel):
    id: int
    name: str


class MessageCreate(BaseModel):
    """Post request — name must belong to a registered participant."""
    name: str = Field(min_length=1, max_length=100)
    body: str = ""

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return normalize_name(v)


class MessageResponse(BaseModel):
    author: str
    body: str
