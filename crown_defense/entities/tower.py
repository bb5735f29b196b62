from crown_defense.config.tower_data import (
    TOWERS, UPGRADE_DAMAGE_MULT, UPGRADE_RANGE_BONUS,
    UPGRADE_COOLDOWN_MULT, MIN_COOLDOWN,
)
from crown_defense.entities.projectile import Projectile


class Tower:
    def __init__(self, tower_type, x, y, tower_id=None):
        self.id = tower_id or f"t_{id(self):x}"
        self.tower_type = tower_type
        self.x = x
        self.y = y
        stats = TOWERS[tower_type]
        self.level = 1
        self.damage = stats["damage"]
        self.range = stats["range"]
        self.cooldown = stats["cooldown"]
        self.projectile_speed = stats["projectile_speed"]
        self.projectile_color = stats["projectile_color"]
        self.projectile_size = stats["projectile_size"]
        self.color = stats["color"]
        self.cost = stats["cost"]
        self.upgrade_cost = stats["upgrade_cost"]
        self.timer = 0  # frames until the next shot

    def update(self, enemies):
        """Update tower, return list of new projectiles."""
        if self.timer > 0:
            self.timer -= 1
            return []

        target = self._find_target(enemies)
        if target is None:
            return []

        self.timer = self.cooldown
        return [Projectile(
            self.x, self.y, target.id, self.damage,
            self.projectile_speed, self.projectile_color,
            size=self.projectile_size, tower_type=self.tower_type,
        )]

    def _find_target(self, enemies):
        """First living enemy in collection order that is within range.

        Collection order is spawn order, so the earliest spawned enemy in
        range is always picked.
        """
        for enemy in enemies:
            if enemy.alive and enemy.distance_to(self.x, self.y) <= self.range:
                return enemy
        return None

    def upgrade(self):
        self.level += 1
        self.damage *= UPGRADE_DAMAGE_MULT
        self.range += UPGRADE_RANGE_BONUS
        self.cooldown = max(self.cooldown * UPGRADE_COOLDOWN_MULT, MIN_COOLDOWN)

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.tower_type,
            "x": self.x,
            "y": self.y,
            "level": self.level,
            "damage": round(self.damage, 1),
            "range": self.range,
            "cooldown": round(self.cooldown, 1),
            "color": self.color,
            "upgrade_cost": self.upgrade_cost,
        }
