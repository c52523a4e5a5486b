import pytest

from redisqueue_core.exceptions import InvalidArgument
from redisqueue_core.queue.destination import Destination
from redisqueue_core.queue.message import Message


def test_message_defaults():
    message = Message()

    assert message.body is None
    assert message.properties == {}
    assert message.headers == {}
    assert message.redelivered is False


def test_messages_do_not_share_default_mappings():
    first, second = Message(), Message()
    first.set_property("a", "1")

    assert second.properties == {}


def test_property_and_header_accessors():
    message = Message().set_property("aProp", "aVal").set_header("aHeader", "hVal")

    assert message.get_property("aProp") == "aVal"
    assert message.get_property("missing", "default") == "default"
    assert message.get_header("aHeader") == "hVal"
    assert message.get_header("missing") is None


def test_header_backed_attributes():
    message = Message()
    message.correlation_id = "corr"
    message.message_id = "mid"
    message.timestamp = 1700000000
    message.reply_to = "replies"

    assert message.headers == {
        "correlation_id": "corr",
        "message_id": "mid",
        "timestamp": 1700000000,
        "reply_to": "replies",
    }
    assert message.correlation_id == "corr"
    assert message.message_id == "mid"
    assert message.timestamp == 1700000000
    assert message.reply_to == "replies"


def test_timestamp_is_none_when_unset():
    assert Message().timestamp is None


def test_equality_ignores_redelivered():
    assert Message(body="x", redelivered=True) == Message(body="x")
    assert Message(body="x") != Message(body="y")
    assert Message(body="x", headers={"h": "1"}) != Message(body="x")


def test_destination_equality_by_name():
    assert Destination("aQueue") == Destination("aQueue")
    assert Destination("aQueue") != Destination("other")
    assert hash(Destination("aQueue")) == hash(Destination("aQueue"))


def test_destination_names():
    destination = Destination("aQueue")

    assert destination.queue_name == "aQueue"
    assert destination.topic_name == "aQueue"
    assert str(destination) == "aQueue"


@pytest.mark.parametrize("name", ["", None, 5])
def test_destination_requires_name(name):
    with pytest.raises(InvalidArgument):
        Destination(name)


def test_destination_is_immutable():
    destination = Destination("aQueue")

    with pytest.raises(AttributeError):
        destination.name = "other"
