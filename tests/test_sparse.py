from dsakit.sparse import (
    SparseNode,
    format_linked,
    format_triplets,
    linked_representation,
    triplets,
)

MATRIX = [
    [0, 0, 3, 0],
    [22, 0, 0, 0],
    [0, 0, 0, 5],
    [0, 17, 0, 0],
]


def test_triplets_of_sample_matrix():
    assert triplets(MATRIX) == [(0, 2, 3), (1, 0, 22), (2, 3, 5), (3, 1, 17)]


def test_triplets_point_at_nonzero_values():
    for i, j, value in triplets(MATRIX):
        assert MATRIX[i][j] == value
    nonzero = sum(1 for row in MATRIX for v in row if v)
    assert len(triplets(MATRIX)) == nonzero


def test_format_triplets_header_and_lines():
    text = format_triplets(MATRIX)
    lines = text.splitlines()
    assert lines[0] == "Array Representation (Row, Col, Value):"
    assert lines[1:] == [f"{i} {j} {v}" for i, j, v in triplets(MATRIX)]


def test_linked_matches_triplets():
    head = linked_representation(MATRIX)
    assert [(n.row, n.col, n.value) for n in head] == triplets(MATRIX)


def test_linked_of_zero_matrix_is_none():
    assert linked_representation([[0, 0], [0, 0]]) is None


def test_format_linked_sample():
    text = format_linked(linked_representation(MATRIX))
    assert text == (
        "Linked List Representation (Row, Col, Value):\n"
        "(0, 2, 3) -> (1, 0, 22) -> (2, 3, 5) -> (3, 1, 17) -> NULL\n"
    )


def test_format_linked_empty():
    assert format_linked(None).endswith("):\nNULL\n")


def test_node_iteration_follows_links():
    tail = SparseNode(1, 1, 4)
    head = SparseNode(0, 0, 2, tail)
    assert [n.value for n in head] == [2, 4]