"""Character, string, memory, conversion, output, tree, list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "btree",
    "chars",
    "conversion",
    "line_reader",
    "linked_list",
    "memory",
    "numbers",
    "output",
    "strings",
]