"""Color and layout constants for the dojo demo."""
from __future__ import annotations

from tick_dojo import ShurikenKind

FPS = 60
HUD_H = 36

# Arena
COLOR_OUTER = (232, 232, 232)
COLOR_OUTER_GRID = (208, 208, 208)
COLOR_FLOOR = (92, 61, 46)
COLOR_BOARD = (74, 48, 32)
COLOR_GRAIN = (80, 52, 38)
COLOR_BORDER = (139, 69, 19)
OUTER_GRID_STEP = 20
BOARD_WIDTH = 40
GRAIN_STEP = 15

# Avatar
COLOR_NINJA = (17, 17, 17)
COLOR_NINJA_OUTLINE = (51, 51, 51)
COLOR_GLOW = (255, 215, 0)
COLOR_RANGE = (255, 255, 255, 20)
COLOR_RANGE_EDGE = (255, 255, 255, 38)
COLOR_HANDLE = (101, 67, 33)
COLOR_BLADE = (240, 240, 240)
COLOR_BLADE_EDGE = (192, 192, 192)

# Projectiles
SHURIKEN_COLORS: dict[ShurikenKind, tuple[int, int, int]] = {
    ShurikenKind.COMMON: (240, 240, 240),
    ShurikenKind.HOMING: (68, 255, 68),
    ShurikenKind.EXPLOSIVE: (255, 68, 68),
    ShurikenKind.SHADOW: (34, 34, 34),
}
COLOR_SHURIKEN_EDGE = (136, 136, 136)
COLOR_SHADOW_EDGE = (68, 68, 68)
COLOR_HOLE = (51, 51, 51)

# Collectibles
COLOR_RICE = (255, 255, 255)
COLOR_RICE_EDGE = (238, 238, 238)
COLOR_SALMON = (250, 128, 114)
SUSHI_BOB_HEIGHT = 2.0

# Combo selection and fog
COLOR_SELECT_DIM = (0, 0, 50, 76)
COLOR_POINT_FILL = (255, 215, 0, 128)
COLOR_POINT_EDGE = (255, 215, 0)
COLOR_FOG = (0, 0, 0, 242)
FOG_EDGE = 40

# HUD
COLOR_HUD_BG = (26, 26, 46)
COLOR_TEXT = (220, 220, 230)
COLOR_TEXT_DIM = (150, 150, 165)
COLOR_SLOT_EMPTY = (60, 60, 70)
COLOR_SLOT_FULL = (250, 128, 114)
