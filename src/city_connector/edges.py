"""Edge normalization helpers shared by the spanning tree algorithms."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Tuple

DISCONNECTED = -1

Connection = Sequence[int]
Edge = Tuple[int, int, int]


def iter_edges(connections: Iterable[Connection]) -> Iterator[Edge]:
    """Yield 0-based `(u, v, cost)` edges from 1-based connections, skipping self-loops."""

    for source, target, cost in connections:
        if source == target:
            continue
        yield source - 1, target - 1, cost


def validate_connections(n: int, connections: Iterable[Connection]) -> None:
    """Raise ValueError when a connection cannot describe an edge between `n` cities."""

    if n < 0:
        raise ValueError(f"city count must be non-negative, got {n}")
    for row_number, connection in enumerate(connections):
        if len(connection) != 3:
            raise ValueError(f"connection {row_number} must have 3 fields, got {len(connection)}")
        source, target, cost = connection
        for label in (source, target):
            if not 1 <= label <= n:
                raise ValueError(f"connection {row_number} references city {label} outside [1, {n}]")
        if cost < 0:
            raise ValueError(f"connection {row_number} has negative cost {cost}")
