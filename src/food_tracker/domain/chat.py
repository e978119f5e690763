"""Chat domain models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


@dataclass(frozen=True)
class ChatMessage:
    """A single message in the diet chat."""

    id: int
    text: str
    sender: Literal["user", "bot"]
    timestamp: datetime
