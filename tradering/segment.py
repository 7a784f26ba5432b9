"""Named shared-memory segments that hold a trade ring."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from multiprocessing import resource_tracker, shared_memory
from typing import Iterator

from .ring import TradeRingBuffer, required_size

SHM_NAME = "trade_ring_buffer_shm"


def _remove_existing(name: str) -> bool:
    try:
        stale = shared_memory.SharedMemory(name=name)
    except FileNotFoundError:
        return False
    stale.close()
    stale.unlink()
    return True


def _open_untracked(name: str) -> shared_memory.SharedMemory:
    # An attaching process must not remove the segment when it exits.
    if sys.version_info >= (3, 13):
        return shared_memory.SharedMemory(name=name, track=False)
    shm = shared_memory.SharedMemory(name=name)
    if os.name == "posix":
        resource_tracker.unregister(shm._name, "shared_memory")
    return shm


@contextmanager
def create_segment(name: str = SHM_NAME) -> Iterator[tuple[TradeRingBuffer, bool]]:
    """Create a fresh segment holding an empty ring.

    Any segment already under ``name`` is removed first. Yields the ring and
    whether a previous segment was replaced; the segment is removed on exit.
    """
    replaced = _remove_existing(name)
    shm = shared_memory.SharedMemory(name=name, create=True, size=required_size())
    try:
        ring = TradeRingBuffer(shm.buf)
        ring.reset()
        yield ring, replaced
    finally:
        shm.close()
        shm.unlink()


@contextmanager
def attach(name: str = SHM_NAME) -> Iterator[TradeRingBuffer]:
    """Open an existing segment and yield its ring; raises FileNotFoundError."""
    shm = _open_untracked(name)
    try:
        yield TradeRingBuffer(shm.buf)
    finally:
        shm.close()