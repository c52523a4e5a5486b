"""RedisQueue Exceptions - Error Hierarchy.

Every error raised by the client surfaces synchronously to the caller of
the operation that triggered it. Broker failures are chained to the
underlying client exception.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional


class QueueError(Exception):
    """Base class for all queue client errors."""


class BrokerError(QueueError):
    """The broker rejected or failed a command."""


class BrokerUnavailable(BrokerError):
    """Connection-level failure talking to the broker."""


class MalformedEnvelope(QueueError):
    """A dequeued payload could not be decoded into a message.

    The payload is already gone from the broker, so it is kept on the
    exception for the caller to inspect or park elsewhere.
    """

    def __init__(self, reason: str, payload: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.payload = payload


class InvalidArgument(QueueError, ValueError):
    """An argument was rejected before any broker call was made."""


class InvalidDestination(InvalidArgument):
    """Expected a Destination instance."""

    @classmethod
    def assert_destination(cls, destination: object) -> None:
        from redisqueue_core.queue.destination import Destination

        if not isinstance(destination, Destination):
            raise cls(
                f"The destination must be an instance of Destination "
                f"but got {type(destination).__name__}"
            )


class InvalidMessage(InvalidArgument):
    """Expected a Message instance."""

    @classmethod
    def assert_message(cls, message: object) -> None:
        from redisqueue_core.queue.message import Message

        if not isinstance(message, Message):
            raise cls(
                f"The message must be an instance of Message "
                f"but got {type(message).__name__}"
            )


class DeliveryOptionNotSupported(QueueError):
    """The transport has no support for the requested delivery option."""

    @classmethod
    def for_option(cls, option: str) -> "DeliveryOptionNotSupported":
        return cls(f"The provider does not support {option} feature")


class TemporaryQueueNotSupported(QueueError):
    """Temporary queues cannot be created on a list broker."""


__all__ = [
    "QueueError",
    "BrokerError",
    "BrokerUnavailable",
    "MalformedEnvelope",
    "InvalidArgument",
    "InvalidDestination",
    "InvalidMessage",
    "DeliveryOptionNotSupported",
    "TemporaryQueueNotSupported",
]
