"""
Values you can freely tinker with without touching the logic.
"""

# ── Colours ───────────────────────────────────────────────────────────
MENU_BG_COLOR          = (120, 120, 120)     # overall background
PLAYFIELD_BG_COLOR     = (25, 25, 40)
PLAYFIELD_BORDER_COLOR = (80, 80, 80)
AIM_LINE_COLOR         = (255, 255, 255)
OVERLAY_COLOR          = (0, 0, 0, 160)

BUTTON_FG_COLOR        = (240, 240, 240)
BUTTON_BG_COLOR        = (70, 120, 70)    # RESTART
BUTTON_QUIT_BG_COLOR   = (120, 70, 70)    # QUIT

# Bubble palette (name → RGB)
PALETTE = {
    "BLUE":   (  0,   0, 255),
    "GREEN":  (  0, 128,   0),
    "RED":    (255,   0,   0),
    "PINK":   (255, 192, 203),
    "YELLOW": (255, 255,   0),
    "ORANGE": (255, 165,   0),
}

# ── Bubble grid ───────────────────────────────────────────────────────
BUBBLE_RADIUS          = 20
ROWS                   = 20
INITIAL_ROWS           = 5                 # full rows seeded at start

# ── Rules ─────────────────────────────────────────────────────────────
SHOT_SPEED             = 20                # px per tick
MIN_MATCH              = 3
MAX_SHOTS_WITHOUT_BURST = 5                # misses before a row drops
LAUNCH_OFFSET          = 30                # launcher dist. from bottom

# ── Layout / timing ───────────────────────────────────────────────────
PLAYFIELD_SIZE         = (500, 600)        # 12 cols + half‑bubble for offset rows
PLAYFIELD_MARGIN_TOP   = 30
TICK_RATE              = 60                # simulation ticks per second
MAX_TICKS_PER_FRAME    = 5
