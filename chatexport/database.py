"""An in-memory store of messages."""

from typing import Iterable, Iterator, List, Protocol

from .message import Message


class _Query(Protocol):
    def matches(self, message: Message) -> bool: ...


class MessageDatabase:
    """Messages kept in insertion order and searched with queries."""

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._elements: List[Message] = list(messages)

    def insert(self, message: Message) -> None:
        """Append a message."""
        self._elements.append(message)

    def select(self, query: _Query) -> List[Message]:
        """Return the messages the query matches, in insertion order."""
        return [message for message in self._elements if query.matches(message)]

    def messages(self) -> List[Message]:
        """Return a copy of all stored messages."""
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._elements)