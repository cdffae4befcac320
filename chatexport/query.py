"""Filters that select messages."""

from dataclasses import dataclass
from typing import Optional, Sequence

from .message import Message


@dataclass(frozen=True)
class MessageQuery:
    """A set of criteria; unset criteria match every message.

    ``contains`` matches when the content holds at least one of the words.
    """

    sender: Optional[str] = None
    contains: Optional[Sequence[str]] = None
    has_attachment: Optional[bool] = None

    def matches(self, message: Message) -> bool:
        """Whether ``message`` meets every criterion that is set."""
        if self.sender is not None and self.sender != message.sender:
            return False
        if self.contains is not None and not any(
            message.contains(word) for word in self.contains
        ):
            return False
        if self.has_attachment is not None and self.has_attachment != message.attachment:
            return False
        return True