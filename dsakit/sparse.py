"""Triplet and linked-list representations of sparse matrices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class SparseNode:
    """One non-zero entry of a sparse matrix, linked to the next one."""

    row: int
    col: int
    value: int
    next: SparseNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[SparseNode]:
        node: SparseNode | None = self
        while node is not None:
            yield node
            node = node.next


def triplets(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return (row, col, value) for every non-zero entry, row by row."""
    return [
        (i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]


def format_triplets(matrix: Sequence[Sequence[int]]) -> str:
    """Render the three-column array representation as text."""
    lines = ["Array Representation (Row, Col, Value):"]
    lines.extend(f"{i} {j} {value}" for i, j, value in triplets(matrix))
    return "\n".join(lines) + "\n"


def linked_representation(matrix: Sequence[Sequence[int]]) -> SparseNode | None:
    """Build a chain of nodes for the non-zero entries; None if there are none."""
    head: SparseNode | None = None
    tail: SparseNode | None = None
    for i, j, value in triplets(matrix):
        node = SparseNode(i, j, value)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head


def format_linked(head: SparseNode | None) -> str:
    """Render a node chain as text, ending with NULL."""
    parts = [f"({n.row}, {n.col}, {n.value}) -> " for n in (head or ())]
    return (
        "Linked List Representation (Row, Col, Value):\n" + "".join(parts) + "NULL\n"
    )