"""Module: disjoint_set.py

Author: Michael Economou
Date: 2026-10-02

Union-find over the integers 0..size-1, with path compression.
"""


class DisjointSet:
    """Partition of element indices into disjoint sets."""

    def __init__(self, size: int):
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, index: int) -> int:
        """Return the representative of the set containing index."""
        root = index
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]

        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of two elements.

        The root of the first element's set becomes the root of the merged set.

        Returns:
            True if two distinct sets were merged, False if already joined

        """
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False
        self._parent[second_root] = first_root
        return True

    def roots(self) -> list[int]:
        """Return the representative of every element, in index order."""
        return [self.find(index) for index in range(len(self._parent))]
