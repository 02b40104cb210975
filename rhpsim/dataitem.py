"""The data item that the replication scheme stores and moves around."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Union

__all__ = ["DataItem"]

_Payload = Union[bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class DataItem:
    """An opaque payload with an identifier and the id of its owning node.

    A default item has id 0, owner 0 and no payload.
    """

    data_id: int = 0
    owner: int = 0
    payload: bytes | None = field(default=None)

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    def __post_init__(self) -> None:
        payload = self.payload
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        elif payload is not None:
            payload = bytes(payload)
        object.__setattr__(self, "payload", payload)

    @classmethod
    def create(cls, size: int, owner: int, payload: _Payload) -> "DataItem":
        """Make an item holding the first ``size`` bytes of ``payload``.

        Each item made this way gets the next identifier, starting from 1.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
        if len(raw) < size:
            raise ValueError(f"payload holds {len(raw)} bytes, fewer than size {size}")
        return cls(next(cls._ids), owner, raw[:size])

    @property
    def size(self) -> int:
        """Number of payload bytes."""
        return 0 if self.payload is None else len(self.payload)