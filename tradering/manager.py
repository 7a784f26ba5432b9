"""Creates the shared trade ring and keeps it alive."""

from __future__ import annotations

import argparse
import itertools
import sys
import time

from .segment import SHM_NAME, create_segment


def serve(name=SHM_NAME, out=None, iterations=None, interval=1.0) -> None:
    """Create the ring segment and hold it for ``iterations`` ticks (forever if None)."""
    out = out or sys.stdout
    with create_segment(name) as (_, replaced):
        if replaced:
            print(f"Removed previous shared memory segment: {name}", file=out)
        print("Trade ring buffer created in shared memory.", file=out)
        print("Press Ctrl+C to exit ...", file=out, flush=True)
        for _ in itertools.count() if iterations is None else range(iterations):
            time.sleep(interval)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create and hold the trade ring.")
    parser.add_argument("--name", default=SHM_NAME)
    parser.add_argument("--interval", type=float, default=1.0)
    parser.add_argument("--iterations", type=int)
    args = parser.parse_args(argv)
    try:
        serve(args.name, sys.stdout, args.iterations, args.interval)
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"shm_open: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())