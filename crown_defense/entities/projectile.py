import math


class Projectile:
    """Homing shot. Holds only the target's id, never the enemy itself."""

    def __init__(self, x, y, target_id, damage, speed, color, size=3,
                 tower_type="basic"):
        self.x = float(x)
        self.y = float(y)
        self.target_id = target_id
        self.damage = damage
        self.speed = speed
        self.color = color
        self.size = size
        self.tower_type = tower_type
        self.hit = False

    def update(self, enemies):
        """Fly toward the target. Returns the reward earned by this frame.

        A target that has left *enemies* or is already dead (killed earlier
        this frame) consumes the projectile with no effect.
        """
        if self.hit:
            return 0

        target = self._find_target(enemies)
        if target is None:
            self.hit = True
            return 0

        dx = target.x - self.x
        dy = target.y - self.y
        dist = math.hypot(dx, dy)

        if dist < self.speed:
            self.hit = True
            if target.take_damage(self.damage):
                return target.reward
            return 0

        self.x += (dx / dist) * self.speed
        self.y += (dy / dist) * self.speed
        return 0

    def _find_target(self, enemies):
        for enemy in enemies:
            if enemy.id == self.target_id:
                return enemy if enemy.alive else None
        return None

    def to_dict(self):
        return {
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "color": self.color,
            "size": self.size,
            "tower_type": self.tower_type,
        }
