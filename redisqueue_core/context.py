"""RedisQueue Context - Connection Handle and Factory.

The context owns one broker connection and is the only way consumers and
producers reach it. Give each worker its own context: a blocking pop
holds the connection until it returns.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from redisqueue_core.client.consumer import RedisConsumer
from redisqueue_core.client.producer import RedisProducer
from redisqueue_core.exceptions import InvalidDestination, TemporaryQueueNotSupported
from redisqueue_core.protocol.codec import EnvelopeCodec
from redisqueue_core.queue.destination import Destination
from redisqueue_core.queue.message import Message
from redisqueue_core.storage.backend import BrokerConnection

logger = logging.getLogger(__name__)


class RedisContext:
    """Creates messages, destinations, producers and consumers.

    Closing the context closes the connection. A consumer blocked in
    receive(0) on that connection then fails with BrokerUnavailable,
    which is how an indefinite wait is cancelled from outside.
    """

    def __init__(
        self,
        connection: BrokerConnection,
        codec: Optional[EnvelopeCodec] = None,
    ):
        self._connection = connection
        self._codec = codec or EnvelopeCodec()

    def get_connection(self) -> BrokerConnection:
        return self._connection

    @property
    def codec(self) -> EnvelopeCodec:
        return self._codec

    def create_message(
        self,
        body: Optional[str] = None,
        properties: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, Any]] = None,
    ) -> Message:
        return Message(
            body=body,
            properties=dict(properties or {}),
            headers=dict(headers or {}),
        )

    def create_queue(self, name: str) -> Destination:
        return Destination(name)

    def create_topic(self, name: str) -> Destination:
        return Destination(name)

    def create_temporary_queue(self) -> Destination:
        raise TemporaryQueueNotSupported("Temporary queues are not supported by a list broker")

    def create_producer(self) -> RedisProducer:
        return RedisProducer(self)

    def create_consumer(self, destination: Destination) -> RedisConsumer:
        InvalidDestination.assert_destination(destination)
        return RedisConsumer(self, destination)

    def purge_queue(self, queue: Destination) -> None:
        """Drop every message waiting on a queue."""
        InvalidDestination.assert_destination(queue)
        self._connection.delete(queue.name)
        logger.info(f"Purged queue {queue.name}")

    def delete_queue(self, queue: Destination) -> None:
        InvalidDestination.assert_destination(queue)
        self._connection.delete(queue.name)
        logger.info(f"Deleted queue {queue.name}")

    def delete_topic(self, topic: Destination) -> None:
        InvalidDestination.assert_destination(topic)
        self._connection.delete(topic.name)
        logger.info(f"Deleted topic {topic.name}")

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "RedisContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["RedisContext"]
