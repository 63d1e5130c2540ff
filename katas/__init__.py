"""Solutions to classic algorithm puzzles on linked lists, binary trees, strings, numbers and arrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "roman", "strings", "tree"]