"""RedisQueue Message - Core Message Type.

This module defines the message handed between producers, the broker
list and consumers. A message is mutable while the application builds
it; once received it is a plain value owned by the caller.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


# Well-known header names
HEADER_CORRELATION_ID = "correlation_id"
HEADER_MESSAGE_ID = "message_id"
HEADER_TIMESTAMP = "timestamp"
HEADER_REPLY_TO = "reply_to"


@dataclass
class Message:
    """A queue message.

    Properties carry application data alongside the body, headers carry
    transport metadata. Both travel through the envelope codec; the
    redelivered flag is consumer-local and does not.

    Attributes:
        body: Message payload
        properties: Application properties
        headers: Transport headers
        redelivered: Set by consumers that know the message was seen before
    """

    body: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, Any] = field(default_factory=dict)
    redelivered: bool = field(default=False, compare=False)

    def get_property(self, name: str, default: Any = None) -> Any:
        """Get an application property."""
        return self.properties.get(name, default)

    def set_property(self, name: str, value: Any) -> "Message":
        """Set an application property."""
        self.properties[name] = value
        return self

    def get_header(self, name: str, default: Any = None) -> Any:
        """Get a transport header."""
        return self.headers.get(name, default)

    def set_header(self, name: str, value: Any) -> "Message":
        """Set a transport header."""
        self.headers[name] = value
        return self

    @property
    def correlation_id(self) -> Optional[str]:
        return self.get_header(HEADER_CORRELATION_ID)

    @correlation_id.setter
    def correlation_id(self, value: Optional[str]) -> None:
        self.set_header(HEADER_CORRELATION_ID, value)

    @property
    def message_id(self) -> Optional[str]:
        return self.get_header(HEADER_MESSAGE_ID)

    @message_id.setter
    def message_id(self, value: Optional[str]) -> None:
        self.set_header(HEADER_MESSAGE_ID, value)

    @property
    def timestamp(self) -> Optional[int]:
        value = self.get_header(HEADER_TIMESTAMP)
        return None if value is None else int(value)

    @timestamp.setter
    def timestamp(self, value: Optional[int]) -> None:
        self.set_header(HEADER_TIMESTAMP, value)

    @property
    def reply_to(self) -> Optional[str]:
        return self.get_header(HEADER_REPLY_TO)

    @reply_to.setter
    def reply_to(self, value: Optional[str]) -> None:
        self.set_header(HEADER_REPLY_TO, value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize message to dictionary."""
        return {
            "body": self.body,
            "properties": dict(self.properties),
            "headers": dict(self.headers),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """Deserialize message from dictionary."""
        return cls(
            body=data.get("body"),
            properties=dict(data.get("properties") or {}),
            headers=dict(data.get("headers") or {}),
        )

    def __repr__(self) -> str:
        return (
            f"Message(body={self.body!r}, properties={self.properties!r}, "
            f"headers={self.headers!r}, redelivered={self.redelivered})"
        )


__all__ = [
    "Message",
    "HEADER_CORRELATION_ID",
    "HEADER_MESSAGE_ID",
    "HEADER_TIMESTAMP",
    "HEADER_REPLY_TO",
]
