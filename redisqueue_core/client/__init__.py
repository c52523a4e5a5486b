"""RedisQueue Client Module - Consumers and Producers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from redisqueue_core.client.base import Consumer, Producer
from redisqueue_core.client.consumer import RedisConsumer, ConsumerStats
from redisqueue_core.client.producer import RedisProducer

__all__ = [
    "Consumer",
    "Producer",
    "RedisConsumer",
    "ConsumerStats",
    "RedisProducer",
]
