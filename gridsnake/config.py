"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Grid & Snake ──────────────────────────────────────────────────
CELL          = 50
ROWS          = 7
COLS          = 7
SNAKE_LENGTH  = 5

# ── Window layout ─────────────────────────────────────────────────
MARGIN          = 20
BOARD_W         = COLS * CELL
BOARD_H         = ROWS * CELL
OFFSET_X        = MARGIN
OFFSET_Y        = MARGIN
BUTTON_SIZE     = 48
BUTTON_GAP      = 6
PANEL_H         = 3 * BUTTON_SIZE + 2 * BUTTON_GAP + 2 * MARGIN
WIDTH           = BOARD_W + 2 * MARGIN
HEIGHT          = BOARD_H + 2 * MARGIN + PANEL_H
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG           = (245, 245, 240)
GRID_COL     = (128, 128, 128)
SNAKE_COL    = (0,   128, 0)
HEAD_COL     = (0,   100, 0)
HEAD_GLOW    = (144, 238, 144)
BUTTON_COL   = (40,  40,  60)
BUTTON_OFF   = (190, 190, 190)
BUTTON_TEXT  = (250, 250, 250)
UI_COL       = (90,  90,  110)

# ── Rendering ─────────────────────────────────────────────────────
SEGMENT_SCALE = 0.99     # segment width/height relative to CELL
DASH_PATTERN  = (2, 2)   # dash, gap (px) for interior grid lines
HEAD_GLOW_RADIUS = 20

# ── Gameplay ──────────────────────────────────────────────────────
AUTO_STEP_SPEED = 4      # steps per second while auto-advance is on
