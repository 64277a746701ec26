"""
PF2e Reference: Core Rulebook p.421-422 (movement on the grid), p.456-457 (areas).
Purpose: Configs for grid squares, area shapes and highlight visuals.
Dependencies: None.
Ext Hooks: Per-scene grid sizes.
"""

import logging

# Grid: 1 square = 5 ft, drawn at 100 px
GRID_SIZE = 100
GRID_DISTANCE = 5

# Diagonals alternate 5 ft / 10 ft, so on average they cost 1.5 squares
DIAGONAL_COST = 1.5
# "10-foot reach can reach 2 squares diagonally" (CRB p.455)
REACH_DIAGONAL_EXCEPTION = 10

# Area shape defaults
DEFAULT_CONE_ANGLE = 0
DEFAULT_DIRECTION = 45
WINDOW_INFLATION = 1.5  # Worst-case diagonal inflation when sizing the candidate window
ANGLE_PRECISION = 9  # Decimal places kept when comparing ray angles to a cone's sector

# Highlight visuals (0xRRGGBB)
HIGHLIGHT_BORDER = 0x000000
HIGHLIGHT_FILL = 0xFF9829
HIGHLIGHT_ALPHA = 96

# Template viewer
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
VIEWER_GRID_SIZE = 50
FPS = 60

LOG_LEVEL = logging.INFO
