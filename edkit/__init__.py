"""Teaching toolkit: integer exercises, vectors, a clock, stacks, queues, text checks, an AVL tree and a graph."""

__version__ = "0.1.0"

__all__ = ["arith", "vectors", "clock", "stacks", "queues", "textchecks", "avl", "graph", "cli"]