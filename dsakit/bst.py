"""Binary search tree of distinct, ordered values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    left: _Node[T] | None = None
    right: _Node[T] | None = None


class BinarySearchTree(Generic[T]):
    """An unbalanced binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Add ``value`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:  # type: ignore[operator]
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:  # type: ignore[operator]
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def search(self, key: T) -> bool:
        """Return True if ``key`` is in the tree."""
        node = self._root
        while node is not None:
            if key == node.value:
                return True
            node = node.left if key < node.value else node.right  # type: ignore[operator]
        return False

    def delete(self, key: T) -> None:
        """Remove ``key`` if present.

        A node with two children takes the value of its in-order successor,
        the smallest value in its right subtree, which is then removed.
        """
        parent: _Node[T] | None = None
        node = self._root
        while node is not None and key != node.value:
            parent = node
            node = node.left if key < node.value else node.right  # type: ignore[operator]
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def minimum(self) -> T:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def inorder(self) -> list[T]:
        """Values in left, root, right order: ascending."""
        result: list[T] = []
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[T]:
        """Values in root, left, right order."""
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[T]:
        """Values in left, right, root order."""
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        """Iterate in ascending order."""
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"