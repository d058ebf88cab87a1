"""Tagged allocation tracking: every buffer handed out is remembered until cleared."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest

DEFAULT_TAG = "__void"


class NotInitializedError(RuntimeError):
    """Raised when a collector is used before :meth:`Collector.init`."""


def compare_tags(first: str, second: str) -> int:
    """Compare two tags byte by byte.

    Returns zero when equal, otherwise the difference between the first pair
    of differing bytes (a missing byte counts as zero).
    """
    left = first.encode("utf-8")
    right = second.encode("utf-8")
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b or a == 0:
            return a - b
    return 0


@dataclass(eq=False)
class Block:
    """One tracked allocation."""

    data: bytearray
    tag: str = field(default=DEFAULT_TAG)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def address(self) -> int:
        return id(self.data)


class Collector:
    """Keeps every allocation it makes until :meth:`clear` is called."""

    def __init__(self) -> None:
        self._blocks: list[Block] = []
        self._total_size = 0
        self._initialized = False

    def init(self) -> bool:
        """Initialize the collector.

        Returns True if this call performed the initialization and False if
        the collector was already initialized; repeated calls change nothing.
        """
        if self._initialized:
            return False
        self._blocks = []
        self._total_size = 0
        self._initialized = True
        return True

    def allocate(self, size: int, tag: str | None = None) -> bytearray | None:
        """Allocate a zeroed buffer of ``size`` bytes and track it under ``tag``.

        A size of zero allocates nothing and returns None. An empty or missing
        tag is replaced by the default tag.
        """
        if not self._initialized:
            raise NotInitializedError("collector was not initialized")
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        if size == 0:
            return None
        if not tag:
            tag = DEFAULT_TAG
        data = bytearray(size)
        self._blocks.append(Block(data, tag))
        self._total_size += size
        return data

    def clear(self) -> None:
        """Release every tracked allocation and reset the counters."""
        self._blocks = []
        self._total_size = 0

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Tracked blocks, most recent first."""
        return tuple(reversed(self._blocks))

    @property
    def total_size(self) -> int:
        return self._total_size

    @property
    def num_allocations(self) -> int:
        return len(self._blocks)

    @property
    def initialized(self) -> bool:
        return self._initialized