"""RedisQueue Consumer - Receive, Acknowledge and Reject.

A consumer is bound to one destination and pops envelopes from the tail
of its list.

Timeouts:
    receive(t) with t > 0 issues a single blocking pop of ceil(t / 1000)
    seconds, so sub-second timeouts wait a full second. receive(0) waits
    indefinitely as a sequence of blocking pops of BLOCKING_POP_CHUNK
    seconds each; it only ends when a message arrives or the broker call
    fails (for example because the connection was closed).

Acknowledgement:
    A pop removes the payload from the broker, so acknowledge() has
    nothing to confirm and reject() without requeue has nothing to undo.
    reject(message, requeue=True) sends the same message again, which
    places it at the tail of the queue behind everything already waiting.

Concurrency:
    A blocking pop occupies the connection until it returns. Do not call
    one consumer from several threads; give each worker its own context.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from redisqueue_core.client.base import Consumer
from redisqueue_core.exceptions import InvalidArgument, MalformedEnvelope
from redisqueue_core.queue.destination import Destination
from redisqueue_core.queue.message import Message

if TYPE_CHECKING:
    from redisqueue_core.context import RedisContext

logger = logging.getLogger(__name__)


# Seconds per blocking pop while waiting indefinitely
BLOCKING_POP_CHUNK = 5


@dataclass
class ConsumerStats:
    """Consumer statistics.

    Attributes:
        polls: Broker pop calls issued
        received: Messages decoded and handed to the caller
        acknowledged: acknowledge() calls
        rejected: reject() calls that dropped the message
        requeued: reject() calls that sent the message again
        malformed: Payloads that failed to decode
    """

    polls: int = 0
    received: int = 0
    acknowledged: int = 0
    rejected: int = 0
    requeued: int = 0
    malformed: int = 0


class RedisConsumer(Consumer):
    """Consumer reading a destination's list through a context's connection."""

    def __init__(self, context: "RedisContext", queue: Destination):
        """Initialize consumer.

        Args:
            context: Context owning the broker connection
            queue: Destination to read from
        """
        self._context = context
        self._queue = queue
        self._stats = ConsumerStats()

    def get_queue(self) -> Destination:
        return self._queue

    @property
    def stats(self) -> ConsumerStats:
        return self._stats

    def receive(self, timeout: int = 0) -> Optional[Message]:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise InvalidArgument(f"Timeout must be a number of milliseconds, got {timeout!r}")
        if not math.isfinite(timeout):
            raise InvalidArgument(f"Timeout must be finite, got {timeout}")
        if timeout < 0:
            raise InvalidArgument(f"Timeout must not be negative, got {timeout}")

        if timeout > 0:
            return self._blocking_pop(math.ceil(timeout / 1000))

        while True:
            message = self._blocking_pop(BLOCKING_POP_CHUNK)
            if message is not None:
                return message
            logger.debug(
                f"No message on {self._queue.name} after {BLOCKING_POP_CHUNK}s, waiting again"
            )

    def receive_no_wait(self) -> Optional[Message]:
        self._stats.polls += 1
        payload = self._context.get_connection().rpop(self._queue.name)
        if payload is None:
            return None
        return self._decode(payload)

    def acknowledge(self, message: Message) -> None:
        # The pop already removed the message from the broker.
        self._stats.acknowledged += 1

    def reject(self, message: Message, requeue: bool = False) -> None:
        if not requeue:
            self._stats.rejected += 1
            return

        self._context.create_producer().send(self._queue, message)
        self._stats.requeued += 1
        logger.debug(f"Requeued message to the tail of {self._queue.name}")

    def _blocking_pop(self, timeout: int) -> Optional[Message]:
        self._stats.polls += 1
        result = self._context.get_connection().brpop([self._queue.name], timeout)
        if result is None:
            return None
        return self._decode(result.payload)

    def _decode(self, payload: str) -> Message:
        try:
            message = self._context.codec.decode(payload)
        except MalformedEnvelope as e:
            self._stats.malformed += 1
            logger.error(
                f"Dropped undecodable payload from {self._queue.name}: {e.reason}"
            )
            raise

        self._stats.received += 1
        return message

    def __repr__(self) -> str:
        return f"RedisConsumer(queue={self._queue.name!r})"


__all__ = ["RedisConsumer", "ConsumerStats", "BLOCKING_POP_CHUNK"]
