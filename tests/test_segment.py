import uuid
from multiprocessing import shared_memory

import pytest

from tradering.ring import TradeEvent
from tradering.segment import attach, create_segment


@pytest.fixture
def name():
    return "trt_" + uuid.uuid4().hex[:12]


def test_attach_missing_segment_fails(name):
    with pytest.raises(FileNotFoundError):
        with attach(name):
            pass


def test_created_segment_is_shared(name):
    event = TradeEvent(17, 42.5, 3.25)
    with create_segment(name) as (ring, replaced):
        assert replaced is False
        assert ring.is_empty()
        with attach(name) as other:
            assert other.push(event)
        assert ring.pop() == event


def test_segment_removed_after_create_exits(name):
    with create_segment(name):
        pass
    with pytest.raises(FileNotFoundError):
        with attach(name):
            pass


def test_attach_leaves_segment_in_place(name):
    event = TradeEvent(5, 1.5, 2.5)
    with create_segment(name) as (ring, _):
        with attach(name) as first:
            first.push(event)
        with attach(name) as second:
            assert len(second) == 1
            assert second.pop() == event
        assert ring.is_empty()


def test_stale_segment_is_replaced(name):
    stale = shared_memory.SharedMemory(name=name, create=True, size=64)
    stale.buf[:8] = b"\x07" * 8
    try:
        with create_segment(name) as (ring, replaced):
            assert replaced is True
            assert ring.is_empty()
            assert ring.pop() is None
    finally:
        stale.close()


def test_too_small_segment_cannot_be_attached(name):
    small = shared_memory.SharedMemory(name=name, create=True, size=64)
    try:
        if small.size < 24704:
            with pytest.raises(ValueError):
                with attach(name):
                    pass
        else:
            with attach(name) as ring:
                assert ring.is_empty()
    finally:
        small.close()
        small.unlink()