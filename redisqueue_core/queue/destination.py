"""RedisQueue Destination - Named Queue Identifier.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass

from redisqueue_core.exceptions import InvalidArgument


@dataclass(frozen=True)
class Destination:
    """A named list on the broker.

    A list key serves as both queue and topic, so both names resolve to
    the same key. Two destinations are equal iff their names are equal.

    Attributes:
        name: Broker list key
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgument("Destination name is required")

    @property
    def queue_name(self) -> str:
        return self.name

    @property
    def topic_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


__all__ = ["Destination"]
