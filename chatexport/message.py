"""The chat message record."""

from dataclasses import dataclass
from datetime import datetime

from .textutil import case_insensitive_find


@dataclass(frozen=True)
class Message:
    """One message taken from a chat export."""

    sender: str
    content: str
    timestamp: datetime
    attachment: bool = False
    id: int = 0

    def contains(self, word: str) -> bool:
        """Whether ``word`` occurs in the content, ignoring ASCII case."""
        return case_insensitive_find(self.content, word) != -1