"""RedisQueue Serializer - Envelope Serialization.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any


class Serializer(ABC):
    """Abstract envelope serializer.

    Broker lists store strings, so serializers work in text.
    """

    @abstractmethod
    def serialize(self, data: Any) -> str:
        """Serialize data to a string."""
        pass

    @abstractmethod
    def deserialize(self, data: str) -> Any:
        """Deserialize a string to data."""
        pass

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Get content type."""
        pass


class JSONSerializer(Serializer):
    """JSON serializer.

    Keys are sorted so equal envelopes always produce equal payloads.
    """

    def serialize(self, data: Any) -> str:
        return json.dumps(data, sort_keys=True, ensure_ascii=False)

    def deserialize(self, data: str) -> Any:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)

    @property
    def content_type(self) -> str:
        return "application/json"


__all__ = ["Serializer", "JSONSerializer"]
