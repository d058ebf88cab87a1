# tagalloc

`tagalloc` tracks the buffers you allocate. Each buffer can have a tag. You
release all of them with one call instead of handling each one on its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tagalloc.collector import Collector
from tagalloc.status import print_status

collector = Collector()
collector.init()

name = collector.allocate(100, "name")
numbers = collector.allocate(50 * 4, "numbers")
numbers[0] = 42

print(collector.num_allocations)   # 2
print(collector.total_size)        # 300

print_status(collector)            # report of every tracked block, to stdout

collector.clear()                  # release everything at once
```

Behaviour:

- `Collector.init()` returns `True` on the first call. Later calls return
  `False` and change nothing. `Collector.initialized` tells you whether
  `init()` has been called.
- `allocate(size, tag=None)` returns a new zero-filled `bytearray` of `size`
  bytes and records it.
  - It raises `NotInitializedError`, a subclass of `RuntimeError`, if `init()`
    was never called.
  - It raises `ValueError` for a negative size.
  - A size of zero allocates nothing and returns `None`.
  - A missing or empty tag is stored as `"__void"`.
- `blocks` is a tuple of the tracked `Block` objects, newest first. Each
  `Block` has:
  - `data`, the buffer
  - `tag`
  - `size`, the buffer's length
  - `address`, an identifier of the buffer
- `total_size` is the sum of the sizes of all tracked blocks.
  `num_allocations` is how many blocks are tracked.
- `clear()` drops every block and resets the counters. The collector stays
  initialized, so you can keep allocating after it.

`compare_tags(first, second)` compares two tags byte by byte in UTF-8. It
returns `0` when they are equal. Otherwise it returns the difference between
the first pair of bytes that differ, where a missing byte counts as zero.

## Status report

`format_status(collector)` returns the report as a string, so you can log it
or check it in code. `print_status(collector, stream=None)` writes the same
report to `stream`, or to standard output when no stream is given.

The report starts with the number of allocations and their total size. After
that comes one section per block, newest first, with the block's address,
size and tag.

## Demo

```
tagalloc-demo
```

The demo does the following:

1. Makes three tagged allocations: `name`, `numbers` and `values`.
2. Packs 50 integers into `numbers` and 20 doubles into `values`.
3. Prints the status report.
4. Clears the collector.

## Limits

`tagalloc` only tracks Python `bytearray` objects. It does not manage raw
memory. `clear()` only drops the collector's references to the buffers. A
buffer that your code still references stays alive and usable. There is no
way to free a single block on its own: `clear()` releases everything at once.