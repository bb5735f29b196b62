# Indexed by tier, weakest first
ENEMY_TIERS = [
    {"name": "Red", "color": (255, 118, 117), "hp": 20, "speed": 2.5, "reward": 15},
    {"name": "Yellow", "color": (255, 234, 167), "hp": 40, "speed": 3.0, "reward": 20},
    {"name": "Green", "color": (85, 239, 196), "hp": 90, "speed": 2.0, "reward": 25},
    {"name": "Purple", "color": (162, 155, 254), "hp": 150, "speed": 3.5, "reward": 35},
    {"name": "Brown", "color": (211, 84, 0), "hp": 300, "speed": 1.5, "reward": 45},
    {"name": "Grey", "color": (99, 110, 114), "hp": 600, "speed": 1.8, "reward": 60},
    {"name": "Black", "color": (0, 0, 0), "hp": 1200, "speed": 1.0, "reward": 100},
]

MAX_TIER = len(ENEMY_TIERS) - 1

BASE_RADIUS = 12  # radius = BASE_RADIUS + tier
