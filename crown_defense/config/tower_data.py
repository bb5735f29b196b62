TOWERS = {
    "basic": {
        "name": "Basic",
        "cost": 50,
        "upgrade_cost": 100,
        "damage": 10,
        "range": 130,
        "cooldown": 40,          # frames between shots
        "projectile_speed": 6,
        "color": (9, 132, 227),
        "projectile_color": (0, 255, 255),
        "projectile_size": 3,
    },
    "sniper": {
        "name": "Sniper",
        "cost": 500,
        "upgrade_cost": 500,
        "damage": 80,
        "range": 300,
        "cooldown": 120,
        "projectile_speed": 12,
        "color": (253, 203, 110),
        "projectile_color": (255, 255, 0),
        "projectile_size": 6,
    },
}

TOWER_ORDER = ["basic", "sniper"]

# Applied on every upgrade, for all tower types
UPGRADE_DAMAGE_MULT = 1.4
UPGRADE_RANGE_BONUS = 10
UPGRADE_COOLDOWN_MULT = 0.9
MIN_COOLDOWN = 10
