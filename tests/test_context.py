import pytest

from redisqueue_core.client.consumer import RedisConsumer
from redisqueue_core.client.producer import RedisProducer
from redisqueue_core.context import RedisContext
from redisqueue_core.exceptions import InvalidDestination, TemporaryQueueNotSupported
from redisqueue_core.protocol.codec import EnvelopeCodec
from redisqueue_core.queue.destination import Destination


def test_create_message(fake_connection):
    context = RedisContext(fake_connection)
    properties = {"p": "1"}

    message = context.create_message("aBody", properties, {"h": "2"})
    properties["p"] = "changed"

    assert message.body == "aBody"
    assert message.properties == {"p": "1"}
    assert message.headers == {"h": "2"}


def test_create_queue_and_topic(fake_connection):
    context = RedisContext(fake_connection)

    assert context.create_queue("aQueue") == Destination("aQueue")
    assert context.create_topic("aTopic") == Destination("aTopic")


def test_temporary_queues_are_not_supported(fake_connection):
    with pytest.raises(TemporaryQueueNotSupported):
        RedisContext(fake_connection).create_temporary_queue()


def test_create_producer_and_consumer(fake_connection):
    context = RedisContext(fake_connection)
    queue = context.create_queue("aQueue")

    consumer = context.create_consumer(queue)

    assert isinstance(context.create_producer(), RedisProducer)
    assert isinstance(consumer, RedisConsumer)
    assert consumer.get_queue() is queue
    assert fake_connection.calls == []


def test_create_consumer_requires_destination(fake_connection):
    with pytest.raises(InvalidDestination):
        RedisContext(fake_connection).create_consumer("aQueue")


@pytest.mark.parametrize("method", ["purge_queue", "delete_queue", "delete_topic"])
def test_removal_deletes_list(fake_connection, method):
    context = RedisContext(fake_connection)

    getattr(context, method)(Destination("aQueue"))

    assert fake_connection.calls == [("delete", ("aQueue",))]


def test_purge_drops_waiting_messages(memory_context):
    queue = memory_context.create_queue("aQueue")
    memory_context.create_producer().send(queue, memory_context.create_message("x"))

    memory_context.purge_queue(queue)

    assert memory_context.create_consumer(queue).receive_no_wait() is None


def test_custom_codec_is_used(fake_connection):
    codec = EnvelopeCodec()
    context = RedisContext(fake_connection, codec=codec)

    assert context.codec is codec
    assert context.get_connection() is fake_connection


def test_context_manager_closes_connection(fake_connection):
    with RedisContext(fake_connection) as context:
        assert context.get_connection() is fake_connection

    assert fake_connection.closed
