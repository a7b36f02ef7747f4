"""A general tree of station names stored in a fixed table of slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

MAX_NODES = 20


@dataclass
class _Node:
    info: Optional[str] = None
    fs: int = 0  # first child
    nb: int = 0  # next sibling
    pr: int = 0  # parent


class StationTree:
    """Tree held in slots 1..capacity; index 0 means "no node"."""

    def __init__(self, capacity: int = MAX_NODES) -> None:
        self.capacity = capacity
        self._nodes = [_Node() for _ in range(capacity + 1)]

    def _check(self, idx: int) -> _Node:
        if not 0 < idx <= self.capacity:
            raise IndexError(f"slot {idx} is outside 1..{self.capacity}")
        return self._nodes[idx]

    def _occupied(self) -> Iterator[tuple[int, str]]:
        for idx in range(1, self.capacity + 1):
            info = self._nodes[idx].info
            if info is not None:
                yield idx, info

    def _links(self, idx: int) -> tuple[int, int, int]:
        """Return (parent, first child, next sibling) of a slot."""
        node = self._check(idx)
        return node.pr, node.fs, node.nb

    def _restore(self, idx: int, info: Optional[str], pr: int, fs: int, nb: int) -> None:
        node = self._check(idx)
        node.info, node.pr, node.fs, node.nb = info, pr, fs, nb

    def _clear(self) -> None:
        self._nodes = [_Node() for _ in range(self.capacity + 1)]

    def _live(self, idx: int) -> bool:
        return 0 < idx <= self.capacity and self._nodes[idx].info is not None

    def _children(self, idx: int) -> Iterator[int]:
        child = self._nodes[idx].fs
        while child != 0:
            yield child
            child = self._nodes[child].nb

    def _ancestors_count(self, idx: int) -> int:
        count = 0
        pr = self._nodes[idx].pr
        while pr != 0:
            count += 1
            pr = self._nodes[pr].pr
        return count

    def is_empty(self) -> bool:
        return self._nodes[1].info is None if self.capacity >= 1 else True

    def preorder(self) -> list[str]:
        def walk(idx: int) -> Iterator[str]:
            if not self._live(idx):
                return
            yield self._nodes[idx].info
            yield from walk(self._nodes[idx].fs)
            yield from walk(self._nodes[idx].nb)

        return list(walk(1))

    def inorder(self) -> list[str]:
        """First child's subtree, then the node, then the remaining children."""

        def walk(idx: int) -> Iterator[str]:
            if not self._live(idx):
                return
            children = list(self._children(idx))
            if children:
                yield from walk(children[0])
            yield self._nodes[idx].info
            for child in children[1:]:
                yield from walk(child)

        return list(walk(1))

    def postorder(self) -> list[str]:
        def walk(idx: int) -> Iterator[str]:
            if not self._live(idx):
                return
            for child in self._children(idx):
                yield from walk(child)
            yield self._nodes[idx].info

        return list(walk(1))

    def level_order(self) -> list[str]:
        """Names in slot order, which is the order they were inserted into free slots."""
        if self.is_empty():
            return []
        return [info for _, info in self._occupied()]

    def __contains__(self, name: object) -> bool:
        return any(info == name for _, info in self._occupied())

    def __len__(self) -> int:
        return sum(1 for _ in self._occupied())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StationTree):
            return NotImplemented
        return self.capacity == other.capacity and self._nodes[1:] == other._nodes[1:]

    def leaf_count(self) -> int:
        return sum(1 for idx, _ in self._occupied() if self._nodes[idx].fs == 0)

    def level(self, name: str) -> int:
        """Depth of the first node with this name; the root is at level 0."""
        idx = self.index_of(name)
        if idx is None:
            raise KeyError(name)
        return self._ancestors_count(idx)

    def depth(self) -> int:
        return max((self._ancestors_count(idx) for idx, _ in self._occupied()), default=0)

    def find_empty_slot(self) -> Optional[int]:
        for idx in range(1, self.capacity + 1):
            if self._nodes[idx].info is None:
                return idx
        return None

    def index_of(self, name: str) -> Optional[int]:
        for idx, info in self._occupied():
            if info == name:
                return idx
        return None

    def info(self, idx: int) -> Optional[str]:
        return self._check(idx).info

    def insert(self, info: str, parent_idx: int) -> Optional[int]:
        """Put a node in the first free slot as the last child of ``parent_idx``.

        A parent index of 0 adds a node without a parent. Returns the slot
        used, or None when the table is full.
        """
        if parent_idx != 0:
            self._check(parent_idx)
        idx = self.find_empty_slot()
        if idx is None:
            return None
        self._nodes[idx] = _Node(info=info, pr=parent_idx)
        if parent_idx != 0:
            parent = self._nodes[parent_idx]
            if parent.fs == 0:
                parent.fs = idx
            else:
                sibling = parent.fs
                while self._nodes[sibling].nb != 0:
                    sibling = self._nodes[sibling].nb
                self._nodes[sibling].nb = idx
        return idx

    def delete(self, idx: int) -> None:
        """Remove a node together with its whole subtree."""
        node = self._check(idx)
        parent = node.pr
        if parent != 0:
            pnode = self._nodes[parent]
            if pnode.fs == idx:
                pnode.fs = node.nb
            else:
                curr = pnode.fs
                while curr != 0 and self._nodes[curr].nb != idx:
                    curr = self._nodes[curr].nb
                if curr != 0:
                    self._nodes[curr].nb = node.nb

        def wipe(i: int) -> None:
            if not self._live(i):
                return
            for child in list(self._children(i)):
                wipe(child)
            self._nodes[i] = _Node()

        wipe(idx)

    def parent(self, idx: int) -> Optional[int]:
        pr = self._check(idx).pr
        return pr if pr != 0 else None

    def child(self, idx: int, k: int) -> Optional[int]:
        """The k-th child (counting from 1); k below 1 gives the first child."""
        child = self._check(idx).fs
        step = 1
        while step < k and child != 0:
            child = self._nodes[child].nb
            step += 1
        return child if child != 0 else None

    def is_leaf(self, idx: int) -> bool:
        return self._check(idx).fs == 0

    def is_root(self, idx: int) -> bool:
        return self._check(idx).pr == 0

    def degree(self, idx: int) -> int:
        self._check(idx)
        return sum(1 for _ in self._children(idx))

    def copy(self) -> StationTree:
        duplicate = StationTree(self.capacity)
        duplicate._nodes = [
            _Node(node.info, node.fs, node.nb, node.pr) for node in self._nodes
        ]
        return duplicate