"""RedisQueue Configuration - Connection Settings and Factory.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import parse_qs, unquote, urlparse

from redisqueue_core.context import RedisContext
from redisqueue_core.exceptions import InvalidArgument
from redisqueue_core.storage.backend import BrokerConnection
from redisqueue_core.storage.memory import MemoryConnection
from redisqueue_core.storage.redis import RedisConnection

logger = logging.getLogger(__name__)


VENDOR_REDIS = "redis"
VENDOR_MEMORY = "memory"


@dataclass
class ConnectionConfig:
    """Broker connection configuration.

    Attributes:
        vendor: "redis" or "memory"
        host: Redis host
        port: Redis port
        db: Redis database index
        username: Redis ACL user
        password: Redis password
        socket_timeout: Read timeout in seconds (None waits as long as the server)
        socket_connect_timeout: Connect timeout in seconds
    """

    vendor: str = VENDOR_REDIS
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    socket_timeout: Optional[float] = None
    socket_connect_timeout: Optional[float] = None

    def __post_init__(self):
        if self.vendor not in (VENDOR_REDIS, VENDOR_MEMORY):
            raise InvalidArgument(f"Unsupported vendor: {self.vendor}")
        if not 0 < self.port < 65536:
            raise InvalidArgument(f"Invalid port: {self.port}")
        if self.db < 0:
            raise InvalidArgument(f"Invalid database index: {self.db}")

    @classmethod
    def from_dsn(cls, dsn: str) -> "ConnectionConfig":
        """Parse a DSN.

        Accepted forms::

            memory:
            redis://[[username]:password@]host[:port][/db][?socket_timeout=N]
        """
        parsed = urlparse(dsn)
        scheme = parsed.scheme.lower()

        if scheme == VENDOR_MEMORY:
            return cls(vendor=VENDOR_MEMORY)
        if scheme != VENDOR_REDIS:
            raise InvalidArgument(f"Unsupported DSN scheme: {parsed.scheme!r}")

        db = 0
        path = parsed.path.strip("/")
        if path:
            if not path.isdigit():
                raise InvalidArgument(f"Invalid database index in DSN: {path!r}")
            db = int(path)

        try:
            port = parsed.port or 6379
        except ValueError as e:
            raise InvalidArgument(f"Invalid port in DSN: {e}") from e

        query = parse_qs(parsed.query)

        return cls(
            vendor=VENDOR_REDIS,
            host=parsed.hostname or "localhost",
            port=port,
            db=db,
            username=unquote(parsed.username) if parsed.username else None,
            password=unquote(parsed.password) if parsed.password else None,
            socket_timeout=_float_option(query, "socket_timeout"),
            socket_connect_timeout=_float_option(query, "socket_connect_timeout"),
        )


def _float_option(query, name: str) -> Optional[float]:
    values = query.get(name)
    if not values:
        return None
    try:
        return float(values[-1])
    except ValueError as e:
        raise InvalidArgument(f"Invalid {name} in DSN: {values[-1]!r}") from e


class ConnectionFactory:
    """Builds contexts, each with its own broker connection."""

    def __init__(self, config: Union[ConnectionConfig, str, None] = None):
        if config is None:
            config = ConnectionConfig()
        elif isinstance(config, str):
            config = ConnectionConfig.from_dsn(config)
        self.config = config

    def create_connection(self) -> BrokerConnection:
        if self.config.vendor == VENDOR_MEMORY:
            return MemoryConnection()

        return RedisConnection(
            host=self.config.host,
            port=self.config.port,
            db=self.config.db,
            username=self.config.username,
            password=self.config.password,
            socket_timeout=self.config.socket_timeout,
            socket_connect_timeout=self.config.socket_connect_timeout,
        )

    def create_context(self) -> RedisContext:
        if self.config.vendor == VENDOR_MEMORY:
            logger.info("Creating in-memory context")
        else:
            logger.info(
                f"Creating context for {self.config.host}:{self.config.port}/{self.config.db}"
            )
        return RedisContext(self.create_connection())


__all__ = ["ConnectionConfig", "ConnectionFactory", "VENDOR_REDIS", "VENDOR_MEMORY"]
