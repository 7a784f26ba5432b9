import io
import uuid
from multiprocessing import shared_memory

import pytest

from tradering.manager import main, serve
from tradering.segment import attach


@pytest.fixture
def name():
    return "trt_" + uuid.uuid4().hex[:12]


def test_serve_announces_ring(name):
    out = io.StringIO()
    serve(name, out, iterations=2, interval=0)
    lines = out.getvalue().splitlines()
    assert lines == [
        "Trade ring buffer created in shared memory.",
        "Press Ctrl+C to exit ...",
    ]


def test_serve_removes_segment_when_done(name):
    serve(name, io.StringIO(), iterations=0, interval=0)
    with pytest.raises(FileNotFoundError):
        with attach(name):
            pass


def test_serve_replaces_stale_segment(name):
    stale = shared_memory.SharedMemory(name=name, create=True, size=64)
    out = io.StringIO()
    try:
        serve(name, out, iterations=0, interval=0)
    finally:
        stale.close()
    text = out.getvalue()
    assert name in text.splitlines()[0]
    assert "Trade ring buffer created in shared memory." in text


def test_main_returns_zero(name, capsys):
    assert main(["--name", name, "--iterations", "1", "--interval", "0"]) == 0
    assert "Press Ctrl+C to exit ..." in capsys.readouterr().out