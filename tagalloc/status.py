"""Human-readable report of a collector's tracked allocations."""

from __future__ import annotations

import sys
from typing import TextIO

from tagalloc.collector import Collector

SEPARATOR = "\t-----------\t"


def format_status(collector: Collector) -> str:
    """Return the status report for ``collector`` as text."""
    lines = [
        SEPARATOR,
        f"Number of allocations:\t{collector.num_allocations}",
        f"Size of allocations:\t{collector.total_size}B",
    ]
    for block in collector.blocks:
        lines.extend(
            [
                SEPARATOR,
                f"Pointer address:\t{block.address:#x}",
                f"Size of block memory:\t{block.size}",
                f"Tag of block memory:\t{block.tag}",
            ]
        )
    return "\n".join(lines) + "\n"


def print_status(collector: Collector, stream: TextIO | None = None) -> None:
    """Write the status report to ``stream`` (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(format_status(collector))