"""A binary tree of characters whose left/right paths give a Morse-style password hash."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

DOT = "X"
DASH = "O"
SEPARATOR = "S"


@dataclass(eq=False)
class HashNode:
    """One character of the tree; left children are dots, right children dashes."""

    info: str
    kiri: Optional[HashNode] = None
    kanan: Optional[HashNode] = None

    def children(self) -> Iterator[HashNode]:
        if self.kiri is not None:
            yield self.kiri
        if self.kanan is not None:
            yield self.kanan


def _same(a: Optional[HashNode], b: Optional[HashNode]) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.info == b.info and _same(a.kiri, b.kiri) and _same(a.kanan, b.kanan)


def _duplicate(node: Optional[HashNode]) -> Optional[HashNode]:
    if node is None:
        return None
    return HashNode(node.info, _duplicate(node.kiri), _duplicate(node.kanan))


class HashTree:
    """A binary tree of single characters."""

    def __init__(self, root: Optional[HashNode] = None) -> None:
        self.root = root

    def is_empty(self) -> bool:
        return self.root is None

    def _preorder_nodes(self) -> Iterator[HashNode]:
        def walk(node: Optional[HashNode]) -> Iterator[HashNode]:
            if node is None:
                return
            yield node
            yield from walk(node.kiri)
            yield from walk(node.kanan)

        return walk(self.root)

    def preorder(self) -> list[str]:
        return [node.info for node in self._preorder_nodes()]

    def inorder(self) -> list[str]:
        def walk(node: Optional[HashNode]) -> Iterator[str]:
            if node is None:
                return
            yield from walk(node.kiri)
            yield node.info
            yield from walk(node.kanan)

        return list(walk(self.root))

    def postorder(self) -> list[str]:
        def walk(node: Optional[HashNode]) -> Iterator[str]:
            if node is None:
                return
            yield from walk(node.kiri)
            yield from walk(node.kanan)
            yield node.info

        return list(walk(self.root))

    def _level_nodes(self) -> Iterator[HashNode]:
        if self.root is None:
            return
        queue: deque[HashNode] = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children())

    def level_order(self) -> list[str]:
        return [node.info for node in self._level_nodes()]

    def format(self) -> str:
        """A sketch of the top of the tree followed by an indented full listing."""
        root = self.root
        if root is None:
            return ""
        out = [f"    {root.info}\n"]
        left, right = root.kiri, root.kanan
        if left is not None or right is not None:
            out.append("   / \\\n")
            if left is not None and right is not None:
                out.append(f"  {left.info}   {right.info}\n")
            elif left is not None:
                out.append(f"  {left.info}    \n")
            else:
                out.append(f"      {right.info}\n")

            right_has_children = right is not None and (
                right.kiri is not None or right.kanan is not None
            )
            if left is not None and (left.kiri is not None or left.kanan is not None):
                out.append(" / \\\n")
                if left.kiri is not None and left.kanan is not None:
                    out.append(f"{left.kiri.info}   {left.kanan.info}")
                elif left.kiri is not None:
                    out.append(f"{left.kiri.info}    ")
                else:
                    out.append(f"    {left.kanan.info}")
                if right_has_children:
                    out.append("   / \\\n")
                    if right.kiri is not None and right.kanan is not None:
                        out.append(f"        {right.kiri.info}   {right.kanan.info}\n")
                    elif right.kiri is not None:
                        out.append(f"        {right.kiri.info}    \n")
                    else:
                        out.append(f"            {right.kanan.info}\n")
                else:
                    out.append("\n")
            elif right_has_children:
                out.append("      / \\\n")
                if right.kiri is not None and right.kanan is not None:
                    out.append(f"     {right.kiri.info}   {right.kanan.info}\n")
                elif right.kiri is not None:
                    out.append(f"     {right.kiri.info}    \n")
                else:
                    out.append(f"         {right.kanan.info}\n")

        out.append("\nNote: This is a simplified view of the top of the tree.\n")
        out.append("Full traversal of the tree structure:\n\n")

        def walk(node: Optional[HashNode], level: int) -> None:
            if node is None:
                return
            line = "    " * level + node.info
            if node.kiri is not None or node.kanan is not None:
                parts = []
                if node.kiri is not None:
                    parts.append(f"L: {node.kiri.info}")
                if node.kanan is not None:
                    parts.append(f"R: {node.kanan.info}")
                line += " → " + ", ".join(parts)
            out.append(line + "\n")
            walk(node.kiri, level + 1)
            walk(node.kanan, level + 1)

        walk(root, 0)
        return "".join(out)

    def __contains__(self, info: object) -> bool:
        return any(node.info == info for node in self._preorder_nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._preorder_nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashTree):
            return NotImplemented
        return _same(self.root, other.root)

    def leaf_count(self) -> int:
        return sum(
            1
            for node in self._preorder_nodes()
            if node.kiri is None and node.kanan is None
        )

    def level(self, info: str) -> int:
        """Level of the first node (preorder) holding ``info``; the root is level 0."""

        def search(node: Optional[HashNode]) -> int:
            if node is None:
                return -1
            if node.info == info:
                return 0
            for child in (node.kiri, node.kanan):
                found = search(child)
                if found >= 0:
                    return found + 1
            return -1

        result = search(self.root)
        if result < 0:
            raise KeyError(info)
        return result

    def depth(self) -> int:
        def height(node: Optional[HashNode]) -> int:
            if node is None:
                return 0
            return max(height(node.kiri), height(node.kanan)) + 1

        return height(self.root)

    def find(self, info: str) -> Optional[HashNode]:
        return next((node for node in self._preorder_nodes() if node.info == info), None)

    def insert(self, info: str, parent: Optional[HashNode]) -> HashNode:
        """Add ``info`` as the left child of ``parent``, or the right one if left is taken.

        With an empty tree and no parent the node becomes the root. Raises
        ValueError when no parent is given for a non-empty tree or when the
        parent already has two children.
        """
        if parent is None:
            if self.root is not None:
                raise ValueError("Parent node is required for a non-empty tree.")
            self.root = HashNode(info)
            return self.root
        node = HashNode(info)
        if parent.kiri is None:
            parent.kiri = node
        elif parent.kanan is None:
            parent.kanan = node
        else:
            raise ValueError("Parent already has two children. Cannot insert node.")
        return node

    def delete(self, node: Optional[HashNode]) -> None:
        """Remove ``node`` and its whole subtree; unknown nodes are ignored."""
        if self.root is None or node is None:
            return
        if self.root is node:
            self.root = None
            return
        for current in self._level_nodes():
            if current.kiri is node:
                current.kiri = None
                return
            if current.kanan is node:
                current.kanan = None
                return

    def _parent_node(self, node: HashNode) -> Optional[HashNode]:
        for current in self._preorder_nodes():
            if current.kiri is node or current.kanan is node:
                return current
        return None

    def parent_of(self, node: Optional[HashNode]) -> Optional[str]:
        """The character of the node's parent, or None for the root or a stranger."""
        if self.root is None or node is None or node is self.root:
            return None
        parent = self._parent_node(node)
        return parent.info if parent is not None else None

    def child_of(self, node: Optional[HashNode], k: int) -> Optional[str]:
        """The character of child ``k`` (1 = left, 2 = right), or None."""
        if node is None:
            return None
        if k == 1 and node.kiri is not None:
            return node.kiri.info
        if k == 2 and node.kanan is not None:
            return node.kanan.info
        return None

    def is_leaf(self, node: Optional[HashNode]) -> bool:
        return node is not None and node.kiri is None and node.kanan is None

    def is_root(self, node: Optional[HashNode]) -> bool:
        return self.root is node

    def degree(self, node: Optional[HashNode]) -> int:
        if node is None:
            return 0
        return sum(1 for _ in node.children())

    def copy(self) -> HashTree:
        return HashTree(_duplicate(self.root))

    def encode(self, character: str) -> str:
        """Path from the root to ``character``: a dot per left step, a dash per right.

        Returns an empty string when the character is missing or is the root.
        """

        def search(node: Optional[HashNode], path: str) -> Optional[str]:
            if node is None:
                return None
            if node.info == character:
                return path
            found = search(node.kiri, path + DOT)
            if found is not None:
                return found
            return search(node.kanan, path + DASH)

        return search(self.root, "") or ""

    def hash_password(self, password: str) -> str:
        """Join the codes of the password's characters with separators.

        Characters without a code are skipped. Raises ValueError on an empty tree.
        """
        if self.root is None:
            raise ValueError("Tree kosong: tidak dapat membuat hash.")
        codes = (self.encode(ch) for ch in password)
        return SEPARATOR.join(code for code in codes if code)