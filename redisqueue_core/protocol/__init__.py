"""RedisQueue Protocol Module - Envelope Serialization & Encoding.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from redisqueue_core.protocol.serializer import Serializer, JSONSerializer
from redisqueue_core.protocol.codec import EnvelopeCodec

__all__ = [
    "Serializer", "JSONSerializer",
    "EnvelopeCodec",
]
