"""Linked binary trees: nodes, traversals, measures, shape checks, relations, rotations, BSTs and drawing."""

__version__ = "0.1.0"