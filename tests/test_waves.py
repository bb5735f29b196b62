"""Unit tests for wave generation and spawn pacing."""

import random

import pytest

from crown_defense.config.enemy_data import MAX_TIER
from crown_defense.config.settings import SPAWN_INTERVAL_FRAMES
from crown_defense.core.waves import (
    WaveSpawner, generate_wave, max_tier_for_wave, wave_size,
)

pytestmark = pytest.mark.unit


class TestWaveFormula:
    def test_size_grows_linearly(self):
        assert wave_size(1) == 7
        assert wave_size(2) == 9
        assert wave_size(10) == 25

    @pytest.mark.parametrize("wave, expected", [
        (1, 0), (2, 0), (3, 1), (4, 1), (5, 2), (12, 5), (13, 6), (14, 6), (100, 6),
    ])
    def test_tier_unlock_steps(self, wave, expected):
        assert max_tier_for_wave(wave) == expected

    def test_tier_never_exceeds_table(self):
        assert max_tier_for_wave(1000) == MAX_TIER


class TestGenerateWave:
    def test_first_wave(self):
        queue = generate_wave(1, random.Random(0))
        assert len(queue) == 7
        assert queue == [0] * 7

    @pytest.mark.parametrize("seed", range(5))
    def test_sorted_and_within_unlocked_tiers(self, seed):
        queue = generate_wave(9, random.Random(seed))
        assert len(queue) == wave_size(9)
        assert queue == sorted(queue)
        assert all(0 <= t <= max_tier_for_wave(9) for t in queue)

    def test_same_seed_same_wave(self):
        assert generate_wave(20, random.Random(42)) == generate_wave(20, random.Random(42))

    def test_late_waves_reach_top_tier(self):
        rng = random.Random(3)
        tiers = set()
        for _ in range(10):
            tiers.update(generate_wave(30, rng))
        assert MAX_TIER in tiers

    @pytest.mark.parametrize("bad", [0, -1])
    def test_wave_index_must_be_positive(self, bad):
        with pytest.raises(ValueError):
            generate_wave(bad, random.Random(0))


class TestWaveSpawner:
    def test_start_fills_queue(self):
        spawner = WaveSpawner(random.Random(0))
        assert spawner.is_done
        spawner.start(1)
        assert spawner.remaining == 7
        assert not spawner.is_done

    def test_paced_spawning(self):
        spawner = WaveSpawner(random.Random(0))
        spawner.start(1)
        for _ in range(SPAWN_INTERVAL_FRAMES - 1):
            assert spawner.update() is None
        assert spawner.update() == 0
        assert spawner.remaining == 6

    def test_drains_weakest_first(self):
        spawner = WaveSpawner(random.Random(5), interval=1)
        spawner.start(11)
        expected = list(spawner.queue)
        spawned = [spawner.update() for _ in range(len(expected))]
        assert spawned == expected
        assert spawned == sorted(spawned)
        assert spawner.is_done
        assert spawner.update() is None

    def test_start_resets_pacing(self):
        spawner = WaveSpawner(random.Random(0), interval=10)
        spawner.start(1)
        for _ in range(7):
            spawner.update()
        spawner.start(2)
        assert spawner.frame == 0
        assert spawner.remaining == 9
