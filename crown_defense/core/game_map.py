import json
import os

from crown_defense.config.settings import DEFAULT_MAP, FIELD_WIDTH, FIELD_HEIGHT
from crown_defense.core.geometry import distance_to_path

MAPS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "maps")


class GameMap:
    """Playfield with a fixed enemy path and the Crown enemies walk toward."""

    def __init__(self, waypoints, path_width, crown, width=FIELD_WIDTH, height=FIELD_HEIGHT):
        if len(waypoints) < 2:
            raise ValueError("path needs at least 2 waypoints")
        self.waypoints = tuple((float(x), float(y)) for x, y in waypoints)
        self.path_width = path_width
        self.crown = dict(crown)  # {"x", "y", "w", "h"}
        self.width = width
        self.height = height

    @property
    def final_waypoint_index(self):
        return len(self.waypoints) - 1

    def distance_to_path(self, x, y):
        return distance_to_path(x, y, self.waypoints)

    def in_bounds(self, x, y, margin=0):
        """True if the point lies inside the field inset by *margin*."""
        return (margin <= x <= self.width - margin
                and margin <= y <= self.height - margin)

    def crown_contains(self, x, y, margin=0):
        """True if the point is strictly inside the Crown grown by *margin*."""
        c = self.crown
        return (c["x"] - margin < x < c["x"] + c["w"] + margin
                and c["y"] - margin < y < c["y"] + c["h"] + margin)

    @classmethod
    def load_from_json(cls, filepath):
        with open(filepath, 'r') as f:
            data = json.load(f)
        try:
            return cls(
                data["waypoints"], data["path_width"], data["crown"],
                width=data.get("width", FIELD_WIDTH),
                height=data.get("height", FIELD_HEIGHT),
            )
        except KeyError as e:
            raise ValueError(f"map file {filepath} is missing {e}") from e

    @classmethod
    def load_default(cls):
        return cls.load_from_json(os.path.join(MAPS_DIR, DEFAULT_MAP))

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "path_width": self.path_width,
            "waypoints": [list(p) for p in self.waypoints],
            "crown": dict(self.crown),
        }
