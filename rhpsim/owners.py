"""Choosing which nodes start out owning data."""

from __future__ import annotations

import random
from enum import Enum

__all__ = ["Role", "select_data_owners", "assign_roles"]


class Role(Enum):
    """Initial role of a node's data access application."""

    OWNER = 0
    CONSUMER_ONLY = 1


def select_data_owners(node_count: int, owners: int, rng: random.Random) -> list[int]:
    """Draw ``owners`` distinct ids from ``0`` to ``node_count`` inclusive.

    The upper bound is inclusive, so an id may fall one past the last node;
    such an id names no node.
    """
    if node_count < 0:
        raise ValueError(f"node count must not be negative, got {node_count}")
    if owners < 0:
        raise ValueError(f"owner count must not be negative, got {owners}")
    if owners > node_count + 1:
        raise ValueError(f"cannot choose {owners} distinct owners among {node_count} nodes")
    chosen: list[int] = []
    seen: set[int] = set()
    while len(chosen) < owners:
        candidate = rng.randint(0, node_count)
        if candidate not in seen:
            seen.add(candidate)
            chosen.append(candidate)
    return chosen


def assign_roles(node_count: int, owners: int, rng: random.Random) -> list[Role]:
    """Return the role of each node, with randomly chosen data owners."""
    owner_ids = set(select_data_owners(node_count, owners, rng))
    return [
        Role.OWNER if node in owner_ids else Role.CONSUMER_ONLY
        for node in range(node_count)
    ]