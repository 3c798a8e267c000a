from __future__ import annotations

from typing import Dict, Generic, Hashable, List, TypeVar


K = TypeVar("K", bound=Hashable)


class DisjointSet(Generic[K]):
    """Union-find over hashable keys with path compression and union by rank.

    Keys are mapped to compact integer ids; parent and rank live in flat lists
    indexed by those ids.
    """

    def __init__(self) -> None:
        self._ids: Dict[K, int] = {}
        self._keys: List[K] = []
        self._parent: List[int] = []
        self._rank: List[int] = []

    def _id(self, key: K) -> int:
        index = self._ids.get(key)
        if index is None:
            # unseen key: new singleton set
            index = len(self._keys)
            self._ids[key] = index
            self._keys.append(key)
            self._parent.append(index)
            self._rank.append(0)
        return index

    def _root(self, index: int) -> int:
        parent = self._parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def find(self, key: K) -> K:
        """Return the representative key of the set containing ``key``."""
        return self._keys[self._root(self._id(key))]

    def union(self, first: K, second: K) -> bool:
        """Merge the sets of both keys. Returns False if they were already joined."""
        root_a = self._root(self._id(first))
        root_b = self._root(self._id(second))
        if root_a == root_b:
            return False

        rank = self._rank
        if rank[root_a] < rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if rank[root_a] == rank[root_b]:
            rank[root_a] += 1
        return True

    def connected(self, first: K, second: K) -> bool:
        return self.find(first) == self.find(second)

    def set_count(self) -> int:
        return sum(1 for index, parent in enumerate(self._parent) if index == parent)

    def __contains__(self, key: object) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._keys)
