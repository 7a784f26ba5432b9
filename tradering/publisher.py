"""Producer that writes random trades into the shared ring."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
import time

from .ring import TradeEvent, TradeRingBuffer
from .segment import SHM_NAME, attach


def random_trade(rng: random.Random) -> TradeEvent:
    """A trade with id below 1000, price in cents up to 99.99, quantity in tenths up to 99.9."""
    instrument_id = rng.randrange(1000)
    price = rng.randrange(10000) / 100.0
    quantity = rng.randrange(1000) / 10.0
    return TradeEvent(instrument_id, price, quantity)


def run(
    ring: TradeRingBuffer,
    rng: random.Random,
    iterations: int | None = None,
    interval: float = 0.001,
) -> int:
    """Publish one trade per tick unless the ring is full; return how many were published."""
    published = 0
    ticks = itertools.count() if iterations is None else range(iterations)
    for _ in ticks:
        time.sleep(interval)
        if ring.is_full():
            continue
        if ring.push(random_trade(rng)):
            published += 1
    return published


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Publish random trades.")
    parser.add_argument("--name", default=SHM_NAME)
    parser.add_argument("--interval", type=float, default=0.001)
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        with attach(args.name) as ring:
            run(ring, rng, args.iterations, args.interval)
    except KeyboardInterrupt:
        return 0
    except (OSError, ValueError) as exc:
        print(f"shm_open: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())