"""Solutions to classic string, array, linked-list and binary-tree problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "strings", "tree"]