"""Disjoint sets, tries, graph and tree traversals, and dynamic-programming routines."""

__version__ = "0.1.0"