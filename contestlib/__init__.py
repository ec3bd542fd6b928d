"""Algorithms and data structures for competitive programming: segment trees,
sparse tables, prefix sums, modular integers, matrices, a reversible list,
shortest paths, Euler tours and strongly connected components."""

__version__ = "0.1.0"