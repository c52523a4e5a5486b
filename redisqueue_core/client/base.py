"""RedisQueue Client Interfaces - Consumer and Producer Contracts.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from redisqueue_core.queue.destination import Destination
from redisqueue_core.queue.message import Message


class Consumer(ABC):
    """Receives messages from one destination."""

    @abstractmethod
    def get_queue(self) -> Destination:
        """Get the destination this consumer reads from."""
        pass

    @abstractmethod
    def receive(self, timeout: int = 0) -> Optional[Message]:
        """Wait for a message.

        Args:
            timeout: Milliseconds to wait, 0 waits indefinitely

        Returns:
            The next message, or None if the timeout expired
        """
        pass

    @abstractmethod
    def receive_no_wait(self) -> Optional[Message]:
        """Take a message if one is waiting, otherwise return None."""
        pass

    @abstractmethod
    def acknowledge(self, message: Message) -> None:
        """Confirm a received message was processed."""
        pass

    @abstractmethod
    def reject(self, message: Message, requeue: bool = False) -> None:
        """Give up on a received message, optionally queueing it again."""
        pass


class Producer(ABC):
    """Sends messages to destinations."""

    @abstractmethod
    def send(self, destination: Destination, message: Message) -> None:
        """Send a message to a destination."""
        pass


__all__ = ["Consumer", "Producer"]
