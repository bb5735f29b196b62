import math


def distance_to_segment(px, py, x1, y1, x2, y2):
    """Distance from point (px, py) to the segment (x1, y1)-(x2, y2)."""
    l2 = (x2 - x1) ** 2 + (y2 - y1) ** 2
    if l2 == 0:
        return math.hypot(px - x1, py - y1)

    t = ((px - x1) * (x2 - x1) + (py - y1) * (y2 - y1)) / l2
    t = max(0.0, min(1.0, t))

    proj_x = x1 + t * (x2 - x1)
    proj_y = y1 + t * (y2 - y1)
    return math.hypot(px - proj_x, py - proj_y)


def distance_to_path(px, py, waypoints):
    """Smallest distance from a point to any segment of the polyline."""
    best = math.inf
    for (x1, y1), (x2, y2) in zip(waypoints, waypoints[1:]):
        best = min(best, distance_to_segment(px, py, x1, y1, x2, y2))
    return best
