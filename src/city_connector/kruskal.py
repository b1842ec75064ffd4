"""Kruskal's minimum spanning tree cost."""

from __future__ import annotations

from typing import Iterable

from .edges import DISCONNECTED, Connection, iter_edges
from .structures import DisjointSet


def minimum_cost_kruskal(n: int, connections: Iterable[Connection]) -> int:
    """Return the cheapest cost of connecting all `n` cities, or -1 if impossible.

    Connections are `(city1, city2, cost)` triples with 1-based city labels.
    Edges are taken cheapest first and kept whenever they join two
    previously unconnected groups of cities.
    """

    if n <= 1:
        return 0

    edges = sorted(iter_edges(connections), key=lambda edge: edge[2])

    clusters = DisjointSet(n)
    total = 0
    used = 0
    for source, target, cost in edges:
        if not clusters.union(source, target):
            continue
        total += cost
        used += 1
        if used == n - 1:
            return total
    return DISCONNECTED
