"""RedisQueue Storage Module - List Broker Connections.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from redisqueue_core.storage.backend import BrokerConnection, RedisResult
from redisqueue_core.storage.memory import MemoryConnection
from redisqueue_core.storage.redis import RedisConnection

__all__ = ["BrokerConnection", "RedisResult", "MemoryConnection", "RedisConnection"]
