"""RedisQueue Producer - Message Publishing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from redisqueue_core.client.base import Producer
from redisqueue_core.exceptions import (
    DeliveryOptionNotSupported,
    InvalidDestination,
    InvalidMessage,
)
from redisqueue_core.queue.destination import Destination
from redisqueue_core.queue.message import Message

if TYPE_CHECKING:
    from redisqueue_core.context import RedisContext

logger = logging.getLogger(__name__)


class RedisProducer(Producer):
    """Pushes encoded messages onto the head of a destination's list.

    Holds nothing but the context, so one producer may serve any number
    of destinations. Delivery delay, priority and time to live are not
    supported by a plain list and may only be set to None.
    """

    def __init__(self, context: "RedisContext"):
        self._context = context

    def send(self, destination: Destination, message: Message) -> None:
        InvalidDestination.assert_destination(destination)
        InvalidMessage.assert_message(message)

        payload = self._context.codec.encode(message)
        self._context.get_connection().lpush(destination.name, payload)
        logger.debug(f"Sent message to {destination.name}")

    def set_delivery_delay(self, delay: Optional[int] = None) -> "RedisProducer":
        if delay is not None:
            raise DeliveryOptionNotSupported.for_option("delivery delay")
        return self

    def get_delivery_delay(self) -> Optional[int]:
        return None

    def set_priority(self, priority: Optional[int] = None) -> "RedisProducer":
        if priority is not None:
            raise DeliveryOptionNotSupported.for_option("priority")
        return self

    def get_priority(self) -> Optional[int]:
        return None

    def set_time_to_live(self, ttl: Optional[int] = None) -> "RedisProducer":
        if ttl is not None:
            raise DeliveryOptionNotSupported.for_option("time to live")
        return self

    def get_time_to_live(self) -> Optional[int]:
        return None


__all__ = ["RedisProducer"]
