"""Single-producer/single-consumer ring of trade events held in a writable buffer."""

from __future__ import annotations

import struct
from dataclasses import dataclass

BUFFER_SIZE = 1024
CACHE_LINE_SIZE = 64

_INDEX = struct.Struct("=Q")
_EVENT = struct.Struct("=qdd")
_READ, _WRITE, _EVENTS = 0, CACHE_LINE_SIZE, 2 * CACHE_LINE_SIZE


@dataclass(frozen=True)
class TradeEvent:
    instrument_id: int
    price: float
    quantity: float


def required_size() -> int:
    """Number of bytes a buffer needs to hold one ring."""
    raw = _EVENTS + BUFFER_SIZE * _EVENT.size
    return -(-raw // CACHE_LINE_SIZE) * CACHE_LINE_SIZE


class TradeRingBuffer:
    """A ring view over ``buffer``; it holds at most ``BUFFER_SIZE - 1`` events."""

    def __init__(self, buffer) -> None:
        if memoryview(buffer).nbytes < required_size():
            raise ValueError(f"a ring needs {required_size()} bytes")
        self._buffer = buffer

    def _index(self, offset: int) -> int:
        return _INDEX.unpack_from(self._buffer, offset)[0]

    def reset(self) -> None:
        _INDEX.pack_into(self._buffer, _READ, 0)
        _INDEX.pack_into(self._buffer, _WRITE, 0)

    def is_empty(self) -> bool:
        return self._index(_READ) == self._index(_WRITE)

    def is_full(self) -> bool:
        return (self._index(_WRITE) + 1) % BUFFER_SIZE == self._index(_READ)

    def __len__(self) -> int:
        return (self._index(_WRITE) - self._index(_READ)) % BUFFER_SIZE

    def push(self, event: TradeEvent) -> bool:
        """Append an event; return False if the ring is full."""
        if self.is_full():
            return False
        write = self._index(_WRITE)
        _EVENT.pack_into(
            self._buffer, _EVENTS + write * _EVENT.size,
            event.instrument_id, event.price, event.quantity,
        )
        _INDEX.pack_into(self._buffer, _WRITE, (write + 1) % BUFFER_SIZE)
        return True

    def pop(self) -> TradeEvent | None:
        """Remove and return the oldest event, or None if the ring is empty."""
        if self.is_empty():
            return None
        read = self._index(_READ)
        fields = _EVENT.unpack_from(self._buffer, _EVENTS + read * _EVENT.size)
        _INDEX.pack_into(self._buffer, _READ, (read + 1) % BUFFER_SIZE)
        return TradeEvent(*fields)