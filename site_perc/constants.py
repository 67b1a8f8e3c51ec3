"""Core constants for the site percolation project."""

from __future__ import annotations

# Virtual nodes and the off-grid sentinel
TOP_ID = 0
BOTTOM_ID = 1
VIRTUAL_COUNT = 2
OUT_OF_GRID = -1
VIRTUAL_COORD = (-1, -1)

# Canvas defaults (pixels), one cell per RESOLUTION pixels
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400
RESOLUTION = 16

# Animation
PAUSE_S = 0.01
DRAW_EVERY = 1
FINAL_PAUSE_S = 0.1
GIF_FPS = 12

# Colors (RGB, 0..1)
CLOSED_COLOR = (0.0, 0.0, 0.0)
OPEN_COLOR = (1.0, 1.0, 1.0)
FULL_COLOR = (0.678, 0.847, 0.902)  # lightblue

# Monte Carlo
CONFIDENCE_Z = 1.96

# north, east, south, west
NEIGHBOR_OFFSETS = [
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
]
