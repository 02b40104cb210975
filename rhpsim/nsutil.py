"""Small helpers for time values, routing selection and walk modes."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

__all__ = [
    "RoutingType",
    "WalkMode",
    "seconds",
    "minutes",
    "get_routing_type",
    "get_walk_mode",
]


class RoutingType(Enum):
    """Routing protocol used by the simulation."""

    DSDV = "dsdv"
    AODV = "aodv"
    UNKNOWN = "unknown"


class WalkMode(Enum):
    """When a random walker changes direction: after a distance or a period."""

    DISTANCE = "distance"
    TIME = "time"


def seconds(value: float) -> timedelta:
    """Return a time span of ``value`` seconds."""
    return timedelta(seconds=value)


def minutes(value: float) -> timedelta:
    """Return a time span of ``value`` minutes."""
    return timedelta(minutes=value)


def get_routing_type(text: str) -> RoutingType:
    """Parse a routing protocol name, case-insensitively.

    Unrecognised names give ``RoutingType.UNKNOWN``.
    """
    lowered = text.lower()
    if lowered == RoutingType.DSDV.value:
        return RoutingType.DSDV
    if lowered == RoutingType.AODV.value:
        return RoutingType.AODV
    return RoutingType.UNKNOWN


def get_walk_mode(text: str) -> WalkMode:
    """Parse a walk mode name, case-insensitively.

    Raises ``ValueError`` for anything but ``distance`` or ``time``.
    """
    lowered = text.lower()
    try:
        return WalkMode(lowered)
    except ValueError:
        raise ValueError(f"unrecognized walk mode {text!r}") from None