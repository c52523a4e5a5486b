"""RedisQueue Memory Connection - In-Process List Broker.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import defaultdict, deque
from typing import Deque, Dict, Optional, Sequence

from redisqueue_core.exceptions import BrokerUnavailable, InvalidArgument
from redisqueue_core.storage.backend import BrokerConnection, RedisResult

logger = logging.getLogger(__name__)


class MemoryConnection(BrokerConnection):
    """In-memory list broker.

    Follows the same contract as RedisConnection, for tests and
    single-process use. Closing the connection wakes every blocked pop,
    which then raises BrokerUnavailable.
    """

    def __init__(self):
        self._lists: Dict[str, Deque[str]] = defaultdict(deque)
        self._condition = threading.Condition(threading.RLock())
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise BrokerUnavailable("Memory connection is closed")

    def _pop_first(self, keys: Sequence[str]) -> Optional[RedisResult]:
        for key in keys:
            items = self._lists.get(key)
            if items:
                return RedisResult(key=key, payload=items.pop())
        return None

    def brpop(self, keys: Sequence[str], timeout: int) -> Optional[RedisResult]:
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 1:
            raise InvalidArgument(f"Blocking pop timeout must be a whole number of seconds >= 1, got {timeout!r}")

        deadline = time.monotonic() + timeout
        with self._condition:
            while True:
                self._ensure_open()
                result = self._pop_first(keys)
                if result is not None:
                    return result

                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                self._condition.wait(remaining)

    def rpop(self, key: str) -> Optional[str]:
        with self._condition:
            self._ensure_open()
            items = self._lists.get(key)
            if not items:
                return None
            return items.pop()

    def lpush(self, key: str, payload: str) -> int:
        with self._condition:
            self._ensure_open()
            items = self._lists[key]
            items.appendleft(payload)
            self._condition.notify_all()
            return len(items)

    def delete(self, key: str) -> int:
        with self._condition:
            self._ensure_open()
            return 1 if self._lists.pop(key, None) else 0

    def llen(self, key: str) -> int:
        """Count payloads waiting on a list."""
        with self._condition:
            return len(self._lists.get(key, ()))

    def close(self) -> None:
        with self._condition:
            if self._closed:
                return
            self._closed = True
            self._condition.notify_all()
        logger.info("Memory connection closed")

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = ["MemoryConnection"]
