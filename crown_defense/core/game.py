import itertools
import math
import random

from crown_defense.config import settings
from crown_defense.config.settings import (
    DIFFICULTIES, LIVES_FULL_HEALTH, LIVES_ONE_HIT,
    TOWER_CLICK_RADIUS, NOTIFICATION_FRAMES,
)
from crown_defense.config.tower_data import TOWERS
from crown_defense.core.errors import CommandError
from crown_defense.core.game_map import GameMap
from crown_defense.core.placement import validate_placement
from crown_defense.core.waves import WaveSpawner
from crown_defense.entities.enemy import Enemy
from crown_defense.entities.tower import Tower


class GameSession:
    """One player's game: map, towers, enemies, money, lives and waves.

    Phases: "setup" -> "running" -> "game_over". Inside "running" the
    wave_active flag is the wave lock: no new wave starts until the spawn
    queue is drained and every enemy is gone.

    Call update() once per frame. Commands may be issued between frames
    and take effect immediately.
    """

    def __init__(self, game_map=None, seed=None, build_during_wave=None,
                 upgrade_during_wave=None):
        self.map = game_map or GameMap.load_default()
        self.rng = random.Random(seed)
        self.build_during_wave = (settings.BUILD_DURING_WAVE
                                  if build_during_wave is None else build_during_wave)
        self.upgrade_during_wave = (settings.UPGRADE_DURING_WAVE
                                    if upgrade_during_wave is None else upgrade_during_wave)

        self.towers = []
        self.enemies = []
        self.projectiles = []
        self.money = 0
        self.lives = 0
        self.wave_number = 1
        self.wave_active = False
        self.spawner = WaveSpawner(self.rng)
        self.phase = "setup"  # "setup", "running", "game_over"
        self.difficulty = None
        self.health_mode = None
        self.hp_multiplier = 1.0
        self.selection = None
        self.frame = 0
        self.lives_lost_last_frame = 0
        self.notifications = []  # [(text, remaining_frames)]
        self._enemy_ids = itertools.count(1)
        self._tower_ids = itertools.count(1)

    # ── Setup ─────────────────────────────────────────────────

    def configure_session(self, difficulty, health_mode):
        """Pick difficulty ("easy"/"normal"/"hard") and health mode.

        health_mode True gives a full life bar, False means one hit ends
        the game.
        """
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {difficulty!r}")
        if self.phase != "setup":
            return False, CommandError.SESSION_STARTED
        self.difficulty = difficulty
        self.health_mode = bool(health_mode)
        self.money, self.hp_multiplier = DIFFICULTIES[difficulty]
        self.lives = LIVES_FULL_HEALTH if self.health_mode else LIVES_ONE_HIT
        return True, None

    @property
    def is_configured(self):
        return self.difficulty is not None and self.health_mode is not None

    def start_session(self):
        if self.phase != "setup":
            return False, CommandError.SESSION_STARTED
        if not self.is_configured:
            return False, CommandError.NOT_CONFIGURED
        self.phase = "running"
        return True, None

    # ── Per-frame update ──────────────────────────────────────

    def update(self):
        if self.phase != "running":
            return
        self.frame += 1

        # Spawning
        if self.wave_active:
            tier = self.spawner.update()
            if tier is not None:
                self.enemies.append(Enemy(
                    tier, self.map.waypoints, self.hp_multiplier,
                    enemy_id=f"e_{next(self._enemy_ids)}",
                ))

        # Enemies walk; each one reaching the Crown costs a life
        reached = 0
        for enemy in self.enemies:
            if enemy.update():
                reached += 1
        self.enemies = [e for e in self.enemies if e.alive]

        # Towers only see living enemies; new shots wait for next frame
        new_projectiles = []
        for tower in self.towers:
            new_projectiles.extend(tower.update(self.enemies))

        for proj in self.projectiles:
            self.money += proj.update(self.enemies)
        self.projectiles = [p for p in self.projectiles if not p.hit]
        self.projectiles.extend(new_projectiles)

        # Drop enemies killed this frame
        self.enemies = [e for e in self.enemies if e.alive]

        self.lives_lost_last_frame = reached
        if reached:
            self.lives = max(0, self.lives - reached)

        # Game over freezes wave progress, even if this was the wave's last enemy
        if self.lives <= 0:
            self.lives = 0
            self.phase = "game_over"
            self.add_notification("The Crown has fallen!")
        elif self.wave_active and self.spawner.is_done and not self.enemies:
            self.wave_active = False
            self.add_notification(f"Wave {self.wave_number} cleared!")
            self.wave_number += 1

        self.notifications = [(t, r - 1) for t, r in self.notifications if r - 1 > 0]

    # ── Commands ──────────────────────────────────────────────

    def request_next_wave(self):
        """Start the next wave. Does nothing while a wave is running."""
        if self.phase != "running":
            return False, CommandError.NOT_RUNNING
        if self.wave_active:
            return False, CommandError.WAVE_ALREADY_ACTIVE
        self.spawner.start(self.wave_number)
        self.wave_active = True
        self.add_notification(f"Wave {self.wave_number} incoming!")
        return True, self.wave_number

    start_wave = request_next_wave

    def select_tower_type(self, tower_type):
        if tower_type is not None and tower_type not in TOWERS:
            return False, CommandError.UNKNOWN_TOWER_TYPE
        self.selection = tower_type
        return True, tower_type

    def place_tower(self, x, y):
        """Build the selected tower at (x, y). Returns (ok, tower_id_or_reason)."""
        if self.phase != "running":
            return False, CommandError.NOT_RUNNING
        if self.selection is None:
            return False, CommandError.NO_TOWER_SELECTED
        if self.wave_active and not self.build_during_wave:
            return False, CommandError.WAVE_IN_PROGRESS

        cost = TOWERS[self.selection]["cost"]
        if self.money < cost:
            return False, CommandError.INSUFFICIENT_FUNDS

        error = validate_placement(x, y, self.towers, self.map)
        if error is not None:
            return False, error

        tower = Tower(self.selection, x, y, tower_id=f"t_{next(self._tower_ids)}")
        self.towers.append(tower)
        self.money -= cost
        self.selection = None
        self.add_notification("Tower placed!")
        return True, tower.id

    def upgrade_tower(self, tower_id):
        if self.phase != "running":
            return False, CommandError.NOT_RUNNING
        tower = self.get_tower(tower_id)
        if tower is None:
            return False, CommandError.UNKNOWN_TOWER
        if self.wave_active and not self.upgrade_during_wave:
            return False, CommandError.WAVE_IN_PROGRESS
        if self.money < tower.upgrade_cost:
            return False, CommandError.INSUFFICIENT_FUNDS
        self.money -= tower.upgrade_cost
        tower.upgrade()
        self.add_notification(f"Tower upgraded to level {tower.level}")
        return True, tower.level

    def click(self, x, y):
        """Pointer press on the field: upgrade the tower under it, or build."""
        tower = self.get_tower_at(x, y)
        if tower is not None:
            return self.upgrade_tower(tower.id)
        if self.selection is not None:
            return self.place_tower(x, y)
        return False, CommandError.NO_TOWER_SELECTED

    # ── Queries ───────────────────────────────────────────────

    def get_tower(self, tower_id):
        for tower in self.towers:
            if tower.id == tower_id:
                return tower
        return None

    def get_tower_at(self, x, y):
        for tower in self.towers:
            if math.hypot(tower.x - x, tower.y - y) < TOWER_CLICK_RADIUS:
                return tower
        return None

    def add_notification(self, text, duration=NOTIFICATION_FRAMES):
        self.notifications.append((text, duration))

    def get_state(self):
        return {
            "money": self.money,
            "lives": self.lives,
            "wave_number": self.wave_number,
            "wave_active": self.wave_active,
            "phase": self.phase,
            "difficulty": self.difficulty,
            "selection": self.selection,
            "spawn_queue": self.spawner.remaining if self.wave_active else 0,
            "towers": [t.to_dict() for t in self.towers],
            "enemies": [e.to_dict() for e in self.enemies],
            "projectiles": [p.to_dict() for p in self.projectiles],
            "notifications": list(self.notifications),
        }
