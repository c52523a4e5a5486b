"""RedisQueue Codec - Message Envelope Codec.

The envelope is a JSON object with three members::

    {"body": <string|null>, "headers": {...}, "properties": {...}}

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Optional

from redisqueue_core.exceptions import InvalidMessage, MalformedEnvelope
from redisqueue_core.protocol.serializer import JSONSerializer, Serializer
from redisqueue_core.queue.message import Message


class EnvelopeCodec:
    """Converts messages to and from broker payloads.

    Stateless, so one instance may be shared by any number of producers
    and consumers.
    """

    def __init__(self, serializer: Optional[Serializer] = None):
        self.serializer = serializer or JSONSerializer()

    def encode(self, message: Message) -> str:
        """Encode a message into a transport string.

        Raises:
            InvalidMessage: If message is not a Message or cannot be serialized
        """
        InvalidMessage.assert_message(message)
        self._check_encodable(message)
        try:
            return self.serializer.serialize(message.to_dict())
        except (TypeError, ValueError) as e:
            raise InvalidMessage(f"Message cannot be encoded: {e}") from e

    def _check_encodable(self, message: Message) -> None:
        # Anything decode() would reject must never reach the broker.
        if message.body is not None and not isinstance(message.body, str):
            raise InvalidMessage(
                f"Message body must be a string or None, got {type(message.body).__name__}"
            )

        for member in ("properties", "headers"):
            value = getattr(message, member)
            if not isinstance(value, dict):
                raise InvalidMessage(f"Message {member} must be a dict")
            for key in value:
                if not isinstance(key, str):
                    raise InvalidMessage(f"Message {member} keys must be strings, got {key!r}")

    def decode(self, raw: Any) -> Message:
        """Decode a transport string into a message.

        Raises:
            MalformedEnvelope: If raw is not a well-formed envelope
        """
        if not isinstance(raw, (str, bytes)):
            raise MalformedEnvelope(
                f"Envelope must be a string, got {type(raw).__name__}"
            )

        try:
            data = self.serializer.deserialize(raw)
        except (TypeError, ValueError, RecursionError) as e:
            raise MalformedEnvelope(f"Envelope is not valid: {e}", raw) from e

        self._validate(data, raw)
        return Message.from_dict(data)

    def _validate(self, data: Any, raw: Any) -> None:
        if not isinstance(data, dict):
            raise MalformedEnvelope("Envelope must be an object", raw)

        body = data.get("body")
        if body is not None and not isinstance(body, str):
            raise MalformedEnvelope("Envelope body must be a string or null", raw)

        for member in ("properties", "headers"):
            value = data.get(member, {})
            if not isinstance(value, dict):
                raise MalformedEnvelope(f"Envelope {member} must be an object", raw)

    @property
    def content_type(self) -> str:
        return self.serializer.content_type


_default_codec = EnvelopeCodec()


def encode(message: Message) -> str:
    """Encode with the default JSON codec."""
    return _default_codec.encode(message)


def decode(raw: Any) -> Message:
    """Decode with the default JSON codec."""
    return _default_codec.decode(raw)


__all__ = ["EnvelopeCodec", "encode", "decode"]
