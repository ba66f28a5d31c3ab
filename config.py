"""
Global constants shared across modules.
"""
import os
from pathlib import Path

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 900, 640
FPS           = 60
BG_COLOR      = (30, 30, 30)

# Fonts / sizes --------------------------------------------------------
import pygame  # only to query default font
FONT_NAME  = pygame.font.get_default_font()

# Paths ----------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent

# Environment overrides (read once at import) --------------------------
LOG_LEVEL = os.environ.get("BUBBLEPOP_LOG_LEVEL", "INFO").upper()

_seed     = os.environ.get("BUBBLEPOP_SEED", "").strip()
SEED: int | None = int(_seed) if _seed.lstrip("-").isdigit() else None

# Scene launched at start‑up
START_GAME = "BubblePop"
PRESET     = os.environ.get("BUBBLEPOP_PRESET", "Classic")
