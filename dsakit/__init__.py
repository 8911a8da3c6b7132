"""Classic data structures and algorithms: arrays, sparse matrices, graphs,
expressions, sorting, stacks, queues, linked lists and binary search trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "sparse",
    "graph",
    "timing",
    "expressions",
    "sorting",
    "stack",
    "stack_ops",
    "queues",
    "circular_list",
    "linked_list",
    "bst",
]