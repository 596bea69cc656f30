"""
Configuration constants for the grid pathfinding engine.

All tunable defaults for grids, mazes, weights and algorithms are defined here.
Environment-dependent values are read once at import time.
"""

import os

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid dimensions (rows x cols)
DEFAULT_ROWS = 10
DEFAULT_COLS = 10

# =============================================================================
# Maze Configuration
# =============================================================================

# Probability that a cell becomes a wall in the random-density maze
DEFAULT_MAZE_DENSITY = 0.35

# Probability of the favoured orientation when a recursive-division
# chamber is square and a skew is requested
SKEW_BIAS = 0.7

# Accepted skew values for recursive division (None = balanced)
SKEW_VERTICAL = "vertical"
SKEW_HORIZONTAL = "horizontal"
VALID_SKEWS = (None, SKEW_VERTICAL, SKEW_HORIZONTAL)

# =============================================================================
# Terrain Configuration
# =============================================================================

# Cost of stepping onto an ordinary cell
DEFAULT_WEIGHT = 1

# Weight assigned when a cell is marked weighted without an explicit value
DEFAULT_HEAVY_WEIGHT = 2

# Range (inclusive) for randomly generated terrain weights
RANDOM_WEIGHT_MIN = 2
RANDOM_WEIGHT_MAX = 10

# Probability that a free cell receives a random weight
DEFAULT_WEIGHT_DENSITY = 0.15

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Strategy used when none is requested
DEFAULT_ALGORITHM = "astar"

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of generated mazes per comparison run
DEFAULT_TRIALS = 20

# Seed for reproducible maze generation (unset = nondeterministic)
RANDOM_SEED = int(os.environ["GRIDFINDER_SEED"]) if os.environ.get("GRIDFINDER_SEED") else None

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================


def validate_dimensions(rows: int, cols: int) -> None:
    """Raise ValueError unless both dimensions are positive integers."""
    if not isinstance(rows, int) or not isinstance(cols, int):
        raise ValueError(f"Grid dimensions must be integers, got {rows!r} x {cols!r}")
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid dimensions must be at least 1x1, got {rows}x{cols}")


def validate_density(density: float) -> None:
    """Raise ValueError unless density lies in [0, 1]."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be between 0 and 1, got {density}")
