"""Integer stacks, a growable array and linked lists, with classic exercises built on them."""

__version__ = "0.1.0"
__all__ = ["stack", "vector", "doubly_linked_list", "linked_list"]