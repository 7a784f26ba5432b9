# tradering

`tradering` passes trade events from one process to another. It does this
through a fixed-size ring buffer that lives in a named shared-memory segment.

The ring has 1024 slots. Each slot holds one trade: an instrument id, a price
and a quantity. One process writes into the ring and another reads from it.
One slot is always left free, so the ring holds at most 1023 unread trades.
When the ring is full, the writer skips that tick. Unread slots are never
overwritten.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the three processes

Start these commands in three terminals, in this order.

```
tradering-manager
```

This command creates the shared-memory segment and sets up an empty ring. If
a segment with the same name already exists, the command removes it, prints
`Removed previous shared memory segment: <name>` and creates the segment
again. The manager keeps running so that the segment stays available. It
wakes once per `--interval` seconds (default 1.0). Stop it with Ctrl+C. On
exit it removes the segment.

```
tradering-publisher
```

This command attaches to the segment. About once per `--interval` seconds
(default 0.001), it writes a random trade. Each trade has an instrument id
from 0 to 999, a price from 0.00 to 99.99 and a quantity from 0.0 to 99.9.
Use `--seed` to make the sequence of trades repeatable.

```
tradering-processor
```

This command attaches to the segment and prints every trade it takes from the
ring. For example:

```
Processing Trade: instrument_id = 42, price = 17.5, quantity = 3.2
```

When the ring is empty, the processor waits `--interval` seconds
(default 0.001) and then checks again.

All three commands accept these options:

- `--name` selects the segment. The default is `trade_ring_buffer_shm`.
- `--iterations` stops the loop after that many ticks. Without it, the loop
  runs until Ctrl+C.

The publisher and the processor print an error to standard error and exit
with status 1 if the segment does not exist, for example if the manager has
not created it yet.

## Using the ring from Python

The ring itself is in the `tradering.ring` module. `TradeRingBuffer` works on
any writable buffer of at least `required_size()` bytes. A smaller buffer
raises `ValueError`. `TradeEvent` is a frozen dataclass with the fields
`instrument_id`, `price` and `quantity`.

```python
from tradering.ring import TradeEvent, TradeRingBuffer, required_size

ring = TradeRingBuffer(bytearray(required_size()))
ring.reset()
ring.push(TradeEvent(7, 12.5, 3.0))   # True
ring.pop()                            # TradeEvent(instrument_id=7, price=12.5, quantity=3.0)
ring.pop()                            # None
```

The ring has these methods:

- `push(event)` stores a trade and returns `True`. It returns `False` if the
  ring is full.
- `pop()` removes and returns the oldest unread trade. It returns `None` if
  the ring is empty.
- `is_empty()` and `is_full()` report the state of the ring.
- `reset()` clears the ring.
- `len(ring)` is the number of unread trades.

The `tradering.segment` module provides two context managers:

- `create_segment(name)` removes any existing segment with that name and
  creates a fresh one. It yields the ring and a flag that says whether an old
  segment was replaced. On exit it removes the segment.
- `attach(name)` opens an existing segment and yields its ring. If the segment
  does not exist, it raises `FileNotFoundError`.

The loops behind the commands are also available as functions. Each one takes
a number of iterations and an interval, so it can run a bounded number of
steps:

- `tradering.manager.serve(name, out, iterations, interval)`
- `tradering.publisher.run(ring, rng, iterations, interval)` returns the
  number of trades published.
- `tradering.processor.run(ring, out, iterations, interval)` returns the
  number of trades processed.

Two helpers are also provided:

- `tradering.publisher.random_trade(rng)` makes one random trade from a
  `random.Random`.
- `tradering.processor.format_trade(event)` returns the line that the
  processor prints for a trade.

## What it does not do

- The ring is meant for exactly one writer and one reader at a time. There is
  no locking, so several publishers or several processors on one segment will
  interfere with each other.
- Trades are not stored anywhere. The processor only prints them, and
  everything in the ring is lost when the manager removes the segment.
- The publisher only makes random trades. It has no way to feed in real trade
  data.