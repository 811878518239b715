"""
Configuration constants for the pathfinding package.

Settings that can be overridden at runtime are read from environment
variables when the module is imported.
"""

import os
from pathlib import Path

# =============================================================================
# Search Configuration
# =============================================================================

# Next-node selection policy: "heap" (priority queue) or "scan" (linear scan)
SELECTION_STRATEGY = os.environ.get("PATHFINDING_STRATEGY", "heap")

SELECTION_STRATEGIES = ("heap", "scan")

# =============================================================================
# Demo Configuration
# =============================================================================

# Random network defaults
RANDOM_N_NODES = 15
RANDOM_EDGE_PROB = 0.3
RANDOM_WEIGHT_RANGE = (1, 11)

DEFAULT_NETWORK = "cycle"

# Endpoints used when none are given on the command line
DEFAULT_ENDPOINTS = {
    "cycle": ("A", "D"),
    "sample": ("A", "F"),
    "random": ("n0", f"n{RANDOM_N_NODES - 1}"),
}

# Separator used when printing a path
PATH_SEPARATOR = " -> "

# =============================================================================
# Output Configuration
# =============================================================================

# Relative to the working directory
PLOTS_DIR = Path("plots")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
