"""Core constants for the site percolation project."""

from __future__ import annotations

from pathlib import Path

# Trial defaults
DEFAULT_OPEN_PROBABILITY = 0.593  # close to the site percolation threshold
DEFAULT_MIN_GRID_SIZE = 5
DEFAULT_MAX_GRID_SIZE = 15  # exclusive
DEFAULT_TRIALS = 10
DEFAULT_PAUSE_S = 3.0

# Threshold estimation
DEFAULT_THRESHOLD_TRIALS = 100
CONFIDENCE_Z = 1.96

# Sentinel slot of the virtual top; the virtual bottom sits at n * n + 1
VIRTUAL_TOP = 0

# up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Rendering
OPEN_COLOR = "tab:blue"
CLOSED_COLOR = "black"
SPANNING_COLOR = "tab:cyan"
FRAME_DPI = 140
GIF_FPS = 2
OUTPUT_DIR = Path("out_percolation")
