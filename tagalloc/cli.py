"""Command that demonstrates tagged allocation and prints the collector status."""

from __future__ import annotations

import struct
import sys

from tagalloc.collector import Collector
from tagalloc.status import print_status


def main(argv: list[str] | None = None) -> int:
    """Allocate a few tagged buffers, fill them, print the status, then clear."""
    del argv
    gc = Collector()
    gc.init()

    name = gc.allocate(100, "name")
    numbers = gc.allocate(struct.calcsize("i") * 50, "numbers")
    values = gc.allocate(struct.calcsize("d") * 20, "values")
    if name is None or numbers is None or values is None:
        print("allocation failure", file=sys.stderr)
        return 1

    struct.pack_into("50i", numbers, 0, *(i * 2 for i in range(50)))
    struct.pack_into("20d", values, 0, *(i * 1.5 for i in range(20)))

    gc.init()
    print_status(gc, sys.stdout)
    gc.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())