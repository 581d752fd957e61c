import math
from typing import Tuple

import config

Vec2 = Tuple[float, float]

def norm(a: Vec2) -> float:
    return math.hypot(a[0], a[1])

def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0]+b[0], a[1]+b[1])

def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0]-b[0], a[1]-b[1])

def mul(a: Vec2, k: float) -> Vec2:
    return (a[0]*k, a[1]*k)

def km_to_ft(km: float) -> float:
    return km * config.KM_TO_FT

def vturn(heading: float) -> Vec2:
    """Unit vector for a heading in radians (0 = north, clockwise; x east, y north)."""
    return (math.sin(heading), math.cos(heading))

def angle_offset(a: float, b: float) -> float:
    """Signed difference a - b wrapped into (-pi, pi]."""
    offset = math.fmod(a - b, 2 * math.pi)
    if offset > math.pi:
        offset -= 2 * math.pi
    elif offset <= -math.pi:
        offset += 2 * math.pi
    return offset

def ray_intersection(pa: Vec2, ta: float, pb: Vec2, tb: float) -> Tuple[float, float]:
    """
    Intersect the ground-track rays of two aircraft.

    Returns (u, v): distance along each ray from its origin to the point of
    convergence. A negative value means that aircraft is already past it.
    Parallel tracks give (inf, inf).
    """
    ad = vturn(ta)
    bd = vturn(tb)
    dx, dy = sub(pb, pa)
    det = bd[0] * ad[1] - bd[1] * ad[0]
    if abs(det) < 1e-12:
        return float("inf"), float("inf")
    u = (dy * bd[0] - dx * bd[1]) / det
    v = (dy * ad[0] - dx * ad[1]) / det
    return u, v
