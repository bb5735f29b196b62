import math
from crown_defense.config.enemy_data import ENEMY_TIERS, BASE_RADIUS


class Enemy:
    def __init__(self, tier, waypoints, hp_multiplier=1.0, enemy_id=None):
        # Sessions pass sequential ids; standalone enemies use object identity
        self.id = enemy_id or f"e_{id(self):x}"
        self.tier = tier
        stats = ENEMY_TIERS[tier]
        self.waypoints = waypoints
        self.current_wp = 0
        self.x, self.y = float(waypoints[0][0]), float(waypoints[0][1])
        self.max_hp = stats["hp"] * hp_multiplier
        self.hp = self.max_hp
        self.speed = stats["speed"]
        self.reward = stats["reward"]
        self.color = stats["color"]
        self.radius = BASE_RADIUS + tier
        self.reached_end = False

    @property
    def alive(self):
        return self.hp > 0

    def update(self):
        """Move one frame along the path.

        Returns True on the frame the enemy reaches the Crown; the caller
        takes one life for it.
        """
        if self.current_wp + 1 >= len(self.waypoints):
            return False

        tx, ty = self.waypoints[self.current_wp + 1]
        dx = tx - self.x
        dy = ty - self.y
        dist = math.hypot(dx, dy)

        if dist < self.speed:
            self.x, self.y = float(tx), float(ty)
            self.current_wp += 1
            if self.current_wp >= len(self.waypoints) - 1:
                self.hp = 0
                self.reached_end = True
                return True
        else:
            self.x += (dx / dist) * self.speed
            self.y += (dy / dist) * self.speed
        return False

    def take_damage(self, damage):
        """Returns True if this hit killed the enemy."""
        if not self.alive:
            return False
        self.hp -= damage
        return self.hp <= 0

    def distance_to(self, x, y):
        return math.hypot(self.x - x, self.y - y)

    def to_dict(self):
        return {
            "id": self.id,
            "tier": self.tier,
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "hp": round(max(self.hp, 0), 1),
            "max_hp": self.max_hp,
            "radius": self.radius,
            "color": self.color,
        }
