"""Drains the shared ring and reports each trade."""

from __future__ import annotations

import argparse
import itertools
import sys
import time

from .segment import SHM_NAME, attach


def format_trade(event) -> str:
    return (
        f"Processing Trade: instrument_id = {event.instrument_id}, "
        f"price = {event.price:g}, quantity = {event.quantity:g}"
    )


def run(ring, out=None, iterations=None, interval=0.001) -> int:
    """Poll the ring ``iterations`` times (forever if None); return trades processed."""
    out = out or sys.stdout
    processed = 0
    for _ in itertools.count() if iterations is None else range(iterations):
        event = ring.pop()
        if event is None:
            time.sleep(interval)
        else:
            print(format_trade(event), file=out, flush=True)
            processed += 1
    return processed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Process trades from the ring.")
    parser.add_argument("--name", default=SHM_NAME)
    parser.add_argument("--interval", type=float, default=0.001)
    parser.add_argument("--iterations", type=int)
    args = parser.parse_args(argv)
    try:
        with attach(args.name) as ring:
            run(ring, sys.stdout, args.iterations, args.interval)
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as exc:
        print(f"shm_open: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())