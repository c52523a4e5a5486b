from __future__ import annotations

import json
from typing import Any, List, Optional, Sequence, Tuple

import pytest

from redisqueue_core.context import RedisContext
from redisqueue_core.storage.backend import BrokerConnection, RedisResult
from redisqueue_core.storage.memory import MemoryConnection


def envelope(body: Optional[str], properties=None, headers=None) -> str:
    return json.dumps({"body": body, "properties": properties or {}, "headers": headers or {}})


class FakeConnection(BrokerConnection):
    """Implements BrokerConnection for tests; replays scripted pop results and records calls."""

    def __init__(
        self,
        brpop_results: Sequence[Optional[RedisResult]] = (),
        rpop_results: Sequence[Optional[str]] = (),
        *,
        raise_on_call: Exception | None = None,
    ) -> None:
        self._brpop_results = list(brpop_results)
        self._rpop_results = list(rpop_results)
        self._raise_on_call = raise_on_call
        self.calls: List[Tuple[str, Any]] = []
        self.closed = False

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self._raise_on_call is not None:
            raise self._raise_on_call

    def brpop(self, keys, timeout):
        self._record("brpop", list(keys), timeout)
        return self._brpop_results.pop(0) if self._brpop_results else None

    def rpop(self, key):
        self._record("rpop", key)
        return self._rpop_results.pop(0) if self._rpop_results else None

    def lpush(self, key, payload):
        self._record("lpush", key, payload)
        return 1

    def delete(self, key):
        self._record("delete", key)
        return 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def memory_connection():
    connection = MemoryConnection()
    yield connection
    connection.close()


@pytest.fixture
def memory_context(memory_connection) -> RedisContext:
    return RedisContext(memory_connection)
