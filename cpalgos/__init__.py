"""Classic competitive-programming algorithms as plain Python functions.

Modules: geometry, introductory, search, dp, subsequences, maths, trees,
grids, structure, traversal, weighted and paths.
"""

__version__ = "0.1.0"