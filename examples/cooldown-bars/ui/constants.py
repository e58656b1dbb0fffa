"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
BAR_W = 360
BAR_H = 22
LABEL_W = 140
ROW_H = 48
PAD = 20
STATUS_H = 36

ROW_COUNT = 5
SCREEN_W = LABEL_W + BAR_W + PAD * 3
SCREEN_H = ROW_H * ROW_COUNT + PAD * 2 + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
BAR_BG = (30, 30, 45)
BAR_BORDER = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
READY_COLOR = (120, 220, 120)

# Ability name -> (cooldown seconds, normalization, color)
ABILITIES = [
    ("Dash", 1.5, "clamp", (80, 180, 255)),
    ("Fireball", 4.0, "smooth_clamp", (255, 140, 60)),
    ("Shield", 8.0, "unlimited", (200, 120, 255)),
]

STAMINA_CAPACITY = 100.0
STAMINA_DECAY = 15.0  # per second
STAMINA_CHARGE = 12.0  # per key press
STAMINA_COLOR = (240, 220, 90)
PULSE_COLOR = (240, 90, 120)
PULSE_PERIOD = 2.0
