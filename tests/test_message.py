from datetime import datetime, timezone

import pytest

from chatexport.message import Message

WHEN = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make(content="Hello there, General"):
    return Message(sender="Alice", content=content, timestamp=WHEN)


def test_defaults():
    message = make()
    assert message.id == 0
    assert message.attachment is False


def test_contains_ignores_case():
    message = make()
    assert message.contains("general")
    assert message.contains("HELLO")


def test_contains_false_for_missing_word():
    assert not make().contains("kenobi")


def test_empty_word_is_always_contained():
    assert make("").contains("")


def test_message_is_immutable():
    message = make()
    with pytest.raises(AttributeError):
        message.sender = "Bob"
    assert message.sender == "Alice"