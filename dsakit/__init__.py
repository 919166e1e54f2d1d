"""Classic data structures and algorithm exercises: arrays, sorting, recursion,
stacks, queues, linked lists, hash tables, trees, heaps, graphs and tries."""

__version__ = "0.1.0"