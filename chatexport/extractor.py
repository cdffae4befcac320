"""Pull chat messages out of an exported HTML history page."""

import re
from datetime import datetime, timedelta, timezone
from typing import List, Union

from .message import Message
from .node import Node, Selector, parse_html

_OFFSET = re.compile(r"(?s).{3}([+-])(\d+):(\d+).*")
_SENDER_NOISE = str.maketrans("", "", "\n\t ")


def parse_timestamp(value: str) -> datetime:
    """Parse ``"DD.MM.YYYY HH:MM:SS UTC+HH:MM"`` into an aware UTC datetime.

    The zone token must be present. When it does not have the
    ``UTC+HH:MM`` shape, the time is taken as local time.
    """
    tokens = value.split()
    if len(tokens) < 3:
        raise ValueError(f"failed to parse timestamp: {value!r}")
    try:
        moment = datetime.strptime(f"{tokens[0]} {tokens[1]}", "%d.%m.%Y %H:%M:%S")
    except ValueError as error:
        raise ValueError(f"failed to parse timestamp: {value!r}") from error
    offset = _OFFSET.fullmatch(tokens[2])
    if offset is None:
        return moment.astimezone(timezone.utc)
    sign, hours, minutes = offset.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    zone = timezone(delta if sign == "+" else -delta)
    return moment.replace(tzinfo=zone).astimezone(timezone.utc)


class MessageExtractor:
    """Finds message blocks in a history page and turns them into messages."""

    CONTENT_SELECTOR = Selector(class_="text")
    MESSAGE_SELECTOR = Selector(class_="message default")
    TIMESTAMP_SELECTOR = Selector(tag="div", class_="date")
    SENDER_SELECTOR = Selector(class_="from_name")
    ATTACHMENT_SELECTOR = Selector(class_="from_name")
    HISTORY_SELECTOR = Selector(class_="history")

    def extract(self, document: Union[Node, str]) -> List[Message]:
        """Return the messages of a parsed document (or of HTML text)."""
        if isinstance(document, str):
            document = parse_html(document)
        return [self._message(node) for node in self._message_nodes(document)]

    def _message_nodes(self, document: Node) -> List[Node]:
        history = document.query_selector(self.HISTORY_SELECTOR)
        if history is None:
            return []
        return history.query_selector_all(self.MESSAGE_SELECTOR, 0)

    def _message(self, node: Node) -> Message:
        return Message(
            sender=self._sender(node),
            content=self._content(node),
            timestamp=self._timestamp(node),
            attachment=self._attachment(node),
        )

    def _sender(self, node: Node) -> str:
        sender = node.query_selector(self.SENDER_SELECTOR)
        if sender is None:
            return ""
        return sender.text.translate(_SENDER_NOISE)

    def _content(self, node: Node) -> str:
        return "".join(part.text for part in node.query_selector_all(self.CONTENT_SELECTOR))

    def _attachment(self, node: Node) -> bool:
        return bool(node.query_selector_all(self.ATTACHMENT_SELECTOR))

    def _timestamp(self, node: Node) -> datetime:
        stamp = node.query_selector(self.TIMESTAMP_SELECTOR)
        if stamp is None:
            raise ValueError("message has no timestamp")
        return parse_timestamp(stamp.attribute("title"))