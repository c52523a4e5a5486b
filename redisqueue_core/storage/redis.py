"""RedisQueue Redis Connection - Redis-Backed List Broker.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import redis

from redisqueue_core.exceptions import BrokerError, BrokerUnavailable, InvalidArgument
from redisqueue_core.storage.backend import BrokerConnection, RedisResult

logger = logging.getLogger(__name__)


class RedisConnection(BrokerConnection):
    """Broker connection over a redis-py client.

    The client is created on first use. Connection and socket failures
    are raised as BrokerUnavailable, any other Redis error as BrokerError.
    Keep socket_timeout unset or above the longest blocking pop, or the
    client will abort a wait the server is still honouring.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        username: Optional[str] = None,
        password: Optional[str] = None,
        socket_timeout: Optional[float] = None,
        socket_connect_timeout: Optional[float] = None,
        client: Optional[redis.Redis] = None,
    ):
        self.host = host
        self.port = port
        self.db = db
        self.username = username
        self.password = password
        self.socket_timeout = socket_timeout
        self.socket_connect_timeout = socket_connect_timeout
        self._client = client
        self._closed = False
        self._lock = threading.Lock()

    def _connect(self) -> redis.Redis:
        """Lazy connect to Redis."""
        with self._lock:
            if self._closed:
                raise BrokerUnavailable("Redis connection is closed")
            if self._client is None:
                self._client = redis.Redis(
                    host=self.host,
                    port=self.port,
                    db=self.db,
                    username=self.username,
                    password=self.password,
                    socket_timeout=self.socket_timeout,
                    socket_connect_timeout=self.socket_connect_timeout,
                    decode_responses=True,
                )
                logger.info(f"Redis client created for {self.host}:{self.port}/{self.db}")
            return self._client

    @contextmanager
    def _command(self, name: str) -> Iterator[redis.Redis]:
        client = self._connect()
        try:
            yield client
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            logger.error(f"Redis {name} failed, broker unavailable: {e}")
            raise BrokerUnavailable(f"Redis {name} failed: {e}") from e
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis {name} failed: {e}")
            raise BrokerError(f"Redis {name} failed: {e}") from e

    def brpop(self, keys: Sequence[str], timeout: int) -> Optional[RedisResult]:
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 1:
            raise InvalidArgument(f"Blocking pop timeout must be a whole number of seconds >= 1, got {timeout!r}")

        with self._command("BRPOP") as client:
            result = client.brpop(list(keys), timeout=timeout)

        if result is None:
            return None
        key, payload = result
        return RedisResult(key=_text(key), payload=_text(payload))

    def rpop(self, key: str) -> Optional[str]:
        with self._command("RPOP") as client:
            payload = client.rpop(key)
        return None if payload is None else _text(payload)

    def lpush(self, key: str, payload: str) -> int:
        with self._command("LPUSH") as client:
            return client.lpush(key, payload)

    def delete(self, key: str) -> int:
        with self._command("DEL") as client:
            return client.delete(key)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            client, self._client = self._client, None
        if client is not None:
            client.close()
            logger.info(f"Redis connection to {self.host}:{self.port}/{self.db} closed")

    @property
    def closed(self) -> bool:
        return self._closed


def _text(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


__all__ = ["RedisConnection"]
