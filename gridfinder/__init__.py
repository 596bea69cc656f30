"""
Grid Pathfinding Engine.

Computes shortest and heuristic-guided paths over a weighted grid of
cells and records the visitation order so a rendering layer can replay
each search step by step.
"""

__version__ = "0.1.0"
