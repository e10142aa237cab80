# ------------------------------
# CONFIG
# ------------------------------
W, H = 1100, 900
FPS = 30

# ------------------------------
# COLORS (Neo-dark dashboard)
# ------------------------------
BG = (14, 15, 18)            # app background
PANEL = (26, 28, 34)         # primary surface
BORDER = (70, 74, 88)        # subtle border (no bright white)
OUTLINE = (10, 11, 13)       # dark outline for blocks
TEXT = (240, 242, 248)
MUTED = (170, 176, 192)

CPU_IDLE = (110, 114, 126)
GANTT_BG = (18, 19, 22)
GRID = (60, 62, 72)

SHADOW = (0, 0, 0)
SHADOW_ALPHA = 120
SHADOW_OFFSET = (0, 6)
HILITE = (255, 255, 255)
HILITE_ALPHA = 18

# Vibrant per-task palette, high-contrast on the dark background.
TASK_COLORS = [
    (255, 99, 132),   # pink-red
    (54, 162, 235),   # blue
    (255, 206, 86),   # yellow
    (75, 192, 192),   # teal
    (153, 102, 255),  # purple
    (255, 159, 64),   # orange
    (46, 204, 113),   # green
    (231, 76, 60),    # red
    (52, 152, 219),   # light blue
    (241, 196, 15),   # gold
    (155, 89, 182),   # violet
    (26, 188, 156),   # aqua
]
