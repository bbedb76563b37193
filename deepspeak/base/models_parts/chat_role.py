"""Chat role enumeration shared by the generic contract."""
from __future__ import annotations

from enum import Enum


class ChatRole(str, Enum):
    """Author role of a generic chat message.

    A ``str`` enum, so members compare equal to their plain string values
    (``ChatRole.USER == "user"``).
    """

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


__all__ = ["ChatRole"]
