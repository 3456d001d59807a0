"""
Pydantic models for the user resource.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from pydantic import BaseModel


# ── User ──────────────────────────────────────────────────────


class User(BaseModel):
    """A stored user record. `id` is the identity and never changes."""

    id: str
    name: str
    age: int
