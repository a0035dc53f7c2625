"""Classic data-structure and algorithm routines: arrays, searches, strings,
stacks, graphs, a heap, a linked queue, recursion, sorting and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "array_search",
    "strings",
    "stacks",
    "graphs",
    "heap",
    "linked_queue",
    "recursion",
    "sorting",
    "backtracking",
]