"""
Message DTO used by the relay adapter.

Defines the `Message` dataclass and the `Role` literal representing the sender
role of one chat turn.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal


# Message roles accepted by OpenAI-compatible endpoints.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """A single ``{role, content}`` chat turn."""

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Return the wire shape sent in the ``messages`` array."""
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
]
