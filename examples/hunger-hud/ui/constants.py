"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 20

# Layout dimensions
SCREEN_W = 560
SCREEN_H = 360
STATUS_H = 36

# Plate
PLATE_CX = 150
PLATE_CY = 160
PLATE_RADIUS = 90
RIM_WIDTH = 6
FLASH_SECONDS = 0.35

# Panel
PANEL_X = 290
PANEL_Y = 40
LINE_H = 24

# Colors
BG_COLOR = (20, 20, 30)
PLATE_BG = (40, 40, 55)
PANEL_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
FLASH_COLOR = (220, 40, 40)
PAUSED_COLOR = (255, 200, 80)

# Key -> simulation speed
SPEEDS = [1.0, 2.0, 5.0, 10.0]

EAT_SECONDS = 60.0
