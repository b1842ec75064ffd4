"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union by size."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.sizes = [1] * self.size

    def find(self, index: int) -> int:
        parent = self.parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def union(self, left: int, right: int) -> bool:
        """Merge the classes of `left` and `right`; return False if already merged."""

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self.sizes[root_left] < self.sizes[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.sizes[root_left] += self.sizes[root_right]
        return True

