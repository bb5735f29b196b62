"""Unit tests for tower placement validation."""

import pytest

from crown_defense.core.errors import PlacementError
from crown_defense.core.placement import validate_placement
from crown_defense.entities.tower import Tower

pytestmark = pytest.mark.unit


class TestPlacementRules:
    def test_open_ground_is_accepted(self, game_map):
        assert validate_placement(350, 250, [], game_map) is None

    @pytest.mark.parametrize("x, y", [(10, 300), (790, 300), (350, 5), (350, 595)])
    def test_out_of_bounds(self, game_map, x, y):
        assert validate_placement(x, y, [], game_map) is PlacementError.OUT_OF_BOUNDS

    def test_footprint_must_fit_inside_field(self, game_map):
        assert validate_placement(19, 300, [], game_map) is PlacementError.OUT_OF_BOUNDS

    def test_on_objective(self, game_map):
        # Inside the Crown grown by the footprint radius
        assert validate_placement(740 - 1, 530, [], game_map) is PlacementError.ON_OBJECTIVE

    def test_objective_checked_before_path(self, game_map):
        # (730, 530) is also within the path corridor near the last waypoint
        assert game_map.distance_to_path(730, 530) < 45
        assert validate_placement(730, 530, [], game_map) is PlacementError.ON_OBJECTIVE

    def test_overlap(self, game_map):
        towers = [Tower("basic", 350, 250)]
        assert validate_placement(370, 250, towers, game_map) is PlacementError.OVERLAP

    def test_touching_towers_allowed(self, game_map):
        towers = [Tower("basic", 350, 250)]
        assert validate_placement(390, 250, towers, game_map) is None

    def test_overlap_checked_before_path(self, game_map):
        towers = [Tower("basic", 300, 440)]
        assert validate_placement(300, 430, towers, game_map) is PlacementError.OVERLAP


class TestPathCorridor:
    def test_near_segment_rejected(self, game_map):
        # 44 from the (200,400)-(500,400) leg, threshold is 25 + 20
        assert validate_placement(300, 444, [], game_map) is PlacementError.ON_PATH

    def test_perpendicular_offset_beyond_threshold_accepted(self, game_map):
        assert validate_placement(300, 446, [], game_map) is None

    def test_exact_threshold_accepted(self, game_map):
        assert validate_placement(300, 445, [], game_map) is None

    def test_on_path_itself(self, game_map):
        assert validate_placement(200, 250, [], game_map) is PlacementError.ON_PATH

    def test_near_corner(self, game_map):
        # Diagonal from the (200, 100) corner, 30 * sqrt(2) ~ 42.4
        assert validate_placement(230, 70, [], game_map) is PlacementError.ON_PATH


class TestSelfConsistency:
    def test_revalidating_placed_spot_gives_overlap(self, game_map):
        towers = []
        for x, y in [(350, 250), (400, 300), (600, 300), (100, 300)]:
            assert validate_placement(x, y, towers, game_map) is None
            towers.append(Tower("basic", x, y))
            assert validate_placement(x, y, towers, game_map) is PlacementError.OVERLAP
