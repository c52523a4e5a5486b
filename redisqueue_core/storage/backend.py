"""RedisQueue Broker Connection - Abstract List Broker Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class RedisResult:
    """Outcome of a successful blocking pop.

    Attributes:
        key: List the payload was popped from
        payload: Raw envelope string
    """

    key: str
    payload: str


class BrokerConnection(ABC):
    """List primitives a consumer and producer need from the broker.

    Producers push to the head of a list and consumers pop from the tail,
    so each list behaves as a FIFO queue. A connection is not multiplexed:
    a blocking pop occupies it until it returns.
    """

    @abstractmethod
    def brpop(self, keys: Sequence[str], timeout: int) -> Optional[RedisResult]:
        """Pop from the tail of the first non-empty list, waiting up to timeout seconds."""
        pass

    @abstractmethod
    def rpop(self, key: str) -> Optional[str]:
        """Pop from the tail of a list without waiting."""
        pass

    @abstractmethod
    def lpush(self, key: str, payload: str) -> int:
        """Push a payload onto the head of a list."""
        pass

    @abstractmethod
    def delete(self, key: str) -> int:
        """Remove a list and everything queued on it."""
        pass

    def close(self) -> None:
        """Close the broker connection."""
        pass


__all__ = ["BrokerConnection", "RedisResult"]
