"""Classic data structures and algorithms: bounded arrays, searches, linked lists, stacks, a queue, postfix conversion, sparse triplets and small recursions."""

__version__ = "0.1.0"