from datetime import datetime, timezone

from chatexport.database import MessageDatabase
from chatexport.message import Message
from chatexport.query import MessageQuery

WHEN = datetime(2022, 2, 2, tzinfo=timezone.utc)


def msg(sender, content, attachment=False):
    return Message(sender=sender, content=content, timestamp=WHEN, attachment=attachment)


def filled():
    db = MessageDatabase()
    for message in (
        msg("Alice", "first"),
        msg("Bob", "second"),
        msg("Alice", "third", attachment=True),
    ):
        db.insert(message)
    return db


def test_starts_empty():
    db = MessageDatabase()
    assert len(db) == 0
    assert db.messages() == []


def test_insert_keeps_order():
    db = filled()
    assert len(db) == 3
    assert [m.content for m in db] == ["first", "second", "third"]


def test_select_by_sender():
    selected = filled().select(MessageQuery(sender="Alice"))
    assert [m.content for m in selected] == ["first", "third"]


def test_select_with_no_match():
    assert filled().select(MessageQuery(sender="Carol")) == []


def test_select_empty_query_returns_all():
    db = filled()
    assert db.select(MessageQuery()) == db.messages()


def test_messages_returns_copy():
    db = filled()
    copy = db.messages()
    copy.clear()
    assert len(db) == 3


def test_constructed_from_iterable():
    source = [msg("Dan", "x"), msg("Eve", "y")]
    db = MessageDatabase(source)
    assert list(db) == source