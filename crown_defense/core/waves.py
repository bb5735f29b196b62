import math
from collections import deque

from crown_defense.config.enemy_data import MAX_TIER
from crown_defense.config.settings import SPAWN_INTERVAL_FRAMES
from crown_defense.config.wave_data import (
    WAVE_BASE_COUNT, WAVE_COUNT_STEP, TIER_UNLOCK_EVERY,
)


def wave_size(wave_index):
    return WAVE_BASE_COUNT + WAVE_COUNT_STEP * wave_index


def max_tier_for_wave(wave_index):
    """Strongest tier that may appear in the given wave."""
    return min(math.ceil(wave_index / TIER_UNLOCK_EVERY) - 1, MAX_TIER)


def generate_wave(wave_index, rng):
    """Build the spawn queue for one wave, weakest tiers first.

    *rng* is a ``random.Random`` owned by the caller, so a seeded session
    always produces the same waves.
    """
    if wave_index < 1:
        raise ValueError(f"wave index must be >= 1, got {wave_index}")
    top = max_tier_for_wave(wave_index)
    tiers = [rng.randint(0, top) for _ in range(wave_size(wave_index))]
    # sorted() is stable
    return sorted(tiers)


class WaveSpawner:
    """Drains one wave's spawn queue at a fixed pace."""

    def __init__(self, rng, interval=SPAWN_INTERVAL_FRAMES):
        self.rng = rng
        self.interval = interval
        self.queue = deque()
        self.frame = 0

    def start(self, wave_index):
        self.queue = deque(generate_wave(wave_index, self.rng))
        self.frame = 0

    def update(self):
        """Advance one frame. Returns the tier to spawn now, or None."""
        if not self.queue:
            return None
        self.frame += 1
        if self.frame % self.interval == 0:
            return self.queue.popleft()
        return None

    @property
    def is_done(self):
        return not self.queue

    @property
    def remaining(self):
        return len(self.queue)
