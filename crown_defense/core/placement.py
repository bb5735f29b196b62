import math

from crown_defense.config.settings import TOWER_FOOTPRINT_RADIUS
from crown_defense.core.errors import PlacementError


def validate_placement(x, y, towers, game_map, radius=TOWER_FOOTPRINT_RADIUS):
    """Check whether a tower may stand at (x, y).

    Rules run in order and the first failure wins:
    field bounds, Crown, other towers, path corridor.
    Returns None when the spot is free, otherwise a PlacementError.
    """
    if not game_map.in_bounds(x, y, margin=radius):
        return PlacementError.OUT_OF_BOUNDS

    if game_map.crown_contains(x, y, margin=radius):
        return PlacementError.ON_OBJECTIVE

    # Two footprints touching
    min_gap = 2 * radius
    for tower in towers:
        if math.hypot(tower.x - x, tower.y - y) < min_gap:
            return PlacementError.OVERLAP

    if game_map.distance_to_path(x, y) < game_map.path_width / 2 + radius:
        return PlacementError.ON_PATH

    return None
