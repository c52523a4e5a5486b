"""RedisQueue Queue Module - Messages and Destinations.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from redisqueue_core.queue.message import Message
from redisqueue_core.queue.destination import Destination

__all__ = [
    "Message",
    "Destination",
]
