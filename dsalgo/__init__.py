"""Classic data structures and algorithms: graphs, hashing, heaps, linked lists, backtracking and array puzzles."""

__version__ = "0.1.0"