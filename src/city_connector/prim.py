"""Prim's minimum spanning tree cost."""

from __future__ import annotations

import heapq
from typing import Iterable, List, Tuple

from .edges import DISCONNECTED, Connection, iter_edges


def build_adjacency(n: int, connections: Iterable[Connection]) -> List[List[Tuple[int, int]]]:
    """Return `(cost, neighbor)` lists per 0-based city, with each edge recorded both ways."""

    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    for source, target, cost in iter_edges(connections):
        adjacency[source].append((cost, target))
        adjacency[target].append((cost, source))
    return adjacency


def minimum_cost_prim(n: int, connections: Iterable[Connection]) -> int:
    """Return the cheapest cost of connecting all `n` cities, or -1 if impossible.

    The tree grows from the first city, always taking the cheapest
    connection that reaches a city not yet in the tree.
    """

    if n <= 1:
        return 0

    adjacency = build_adjacency(n, connections)
    visited = [False] * n
    visited[0] = True
    heap = list(adjacency[0])
    heapq.heapify(heap)

    total = 0
    count = 1
    while heap and count < n:
        cost, city = heapq.heappop(heap)
        if visited[city]:
            continue
        visited[city] = True
        count += 1
        total += cost
        for candidate in adjacency[city]:
            if not visited[candidate[1]]:
                heapq.heappush(heap, candidate)

    return total if count == n else DISCONNECTED
