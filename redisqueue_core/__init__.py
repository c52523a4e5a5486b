"""RedisQueue - Message Queue Client for List Brokers.

RedisQueue lets an application send and receive messages through named
lists on a Redis-style broker. Producers push envelopes onto the head of
a list; consumers pop them from the tail, giving FIFO delivery per queue.

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────┐
│                           RedisQueue Client                             │
├─────────────────────────────────────────────────────────────────────────┤
│  ┌─────────────┐      ┌─────────────┐      ┌─────────────────────────┐ │
│  │  Producer   │      │   Context   │      │        Consumer         │ │
│  │             │◀─────│             │─────▶│                         │ │
│  │ • Send      │      │ • Messages  │      │ • Receive (timeout)     │ │
│  │             │      │ • Queues    │      │ • Receive no wait       │ │
│  └──────┬──────┘      │ • Purge     │      │ • Acknowledge / Reject  │ │
│         │ LPUSH       └──────┬──────┘      └────────────┬────────────┘ │
│         ▼                    │ owns                     │ BRPOP / RPOP │
│  ┌──────────────────────────────────────────────────────────────────┐  │
│  │                       Broker Connection                          │  │
│  │  • RedisConnection - redis-py client                             │  │
│  │  • MemoryConnection - in-process lists                           │  │
│  └──────────────────────────────────────────────────────────────────┘  │
├─────────────────────────────────────────────────────────────────────────┤
│  Protocol: EnvelopeCodec + JSONSerializer   Queue: Message, Destination │
└─────────────────────────────────────────────────────────────────────────┘

Features:
- Blocking receive with timeout, or indefinite wait in bounded chunks
- Non-blocking receive
- Requeue on reject
- JSON message envelopes with properties and headers
- Redis and in-memory brokers

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

# Queue components
from redisqueue_core.queue.message import Message
from redisqueue_core.queue.destination import Destination

# Protocol components
from redisqueue_core.protocol.serializer import Serializer, JSONSerializer
from redisqueue_core.protocol.codec import EnvelopeCodec

# Storage components
from redisqueue_core.storage.backend import BrokerConnection, RedisResult
from redisqueue_core.storage.memory import MemoryConnection
from redisqueue_core.storage.redis import RedisConnection

# Client components
from redisqueue_core.client.base import Consumer, Producer
from redisqueue_core.client.consumer import RedisConsumer, ConsumerStats
from redisqueue_core.client.producer import RedisProducer

# Context and configuration
from redisqueue_core.context import RedisContext
from redisqueue_core.config import ConnectionConfig, ConnectionFactory

# Errors
from redisqueue_core.exceptions import (
    QueueError,
    BrokerError,
    BrokerUnavailable,
    MalformedEnvelope,
    InvalidArgument,
    InvalidDestination,
    InvalidMessage,
    DeliveryOptionNotSupported,
    TemporaryQueueNotSupported,
)

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

__all__ = [
    # Version
    "__version__",
    # Queue
    "Message",
    "Destination",
    # Protocol
    "Serializer",
    "JSONSerializer",
    "EnvelopeCodec",
    # Storage
    "BrokerConnection",
    "RedisResult",
    "MemoryConnection",
    "RedisConnection",
    # Client
    "Consumer",
    "Producer",
    "RedisConsumer",
    "ConsumerStats",
    "RedisProducer",
    # Context
    "RedisContext",
    "ConnectionConfig",
    "ConnectionFactory",
    # Errors
    "QueueError",
    "BrokerError",
    "BrokerUnavailable",
    "MalformedEnvelope",
    "InvalidArgument",
    "InvalidDestination",
    "InvalidMessage",
    "DeliveryOptionNotSupported",
    "TemporaryQueueNotSupported",
]
