# Screen / playfield
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 680
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
HUD_HEIGHT = SCREEN_HEIGHT - FIELD_HEIGHT
FPS = 60

DEFAULT_MAP = "crown_path.json"

# Placement
TOWER_FOOTPRINT_RADIUS = 20   # collision radius, independent of sprite size
TOWER_CLICK_RADIUS = 20       # clicking this close to a tower upgrades it

# Waves
SPAWN_INTERVAL_FRAMES = 60    # one enemy per second at 60 FPS

# Session setup
DIFFICULTIES = {
    # name: (starting money, enemy hp multiplier)
    "easy": (250, 1.0),
    "normal": (150, 1.0),
    "hard": (100, 1.5),
}
DIFFICULTY_ORDER = ["easy", "normal", "hard"]
LIVES_FULL_HEALTH = 100
LIVES_ONE_HIT = 1

# Policies that differ between rule sets
BUILD_DURING_WAVE = True
UPGRADE_DURING_WAVE = True

# Notifications live this many frames
NOTIFICATION_FRAMES = 180

# Colors
COLOR_BG = (34, 34, 34)
COLOR_PATH = (51, 51, 51)
COLOR_CROWN = (241, 196, 15)
COLOR_WHITE = (255, 255, 255)
COLOR_TEXT = (230, 230, 230)
COLOR_TEXT_DIM = (140, 140, 140)
COLOR_HUD_BG = (20, 20, 28)
COLOR_BUTTON = (60, 60, 80)
COLOR_BUTTON_SELECTED = (40, 120, 200)
COLOR_BUTTON_DISABLED = (45, 45, 45)
COLOR_HP_BAR = (46, 204, 113)
COLOR_HP_BAR_BG = (120, 30, 30)
COLOR_DANGER = (231, 76, 60)
