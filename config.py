# Global knobs (simulation + separation thresholds)
SCREEN_W, SCREEN_H = 1200, 800
PIXELS_PER_KM = 25.0        # horizontal scale

# Colors
BG_COLOR = (12, 12, 18)

DT = 1/30.0                 # sim step (s)
SPEED_MULTIPLIER = 4.0

# Unit conversions
NM_TO_KM = 1.852
KM_TO_FT = 3280.839895
KTS_TO_KMPS = NM_TO_KM / 3600.0

# ---------------------------------------------------------------------
# Bounding-box check: beyond 8 NM no separation rule can apply,
# so the pair tracker is dropped.
# ---------------------------------------------------------------------
BOUNDING_RADIUS_KM = 14.816

# --- Collision thresholds ---
# A collision if BOTH are true (and both aircraft visible, not landed):
#   - horizontal separation < 0.05 km (~160 ft)
#   - vertical separation   < 160 ft
COLLISION_HORZ_KM = 0.05
COLLISION_VERT_FT = 160.0

# Opposite ends of the same runway closer than this -> collision course
RUNWAY_COURSE_KM = 10.0

# ---------------------------------------------------------------------
# Proximity gates:
# - Below LOW_ALT_SUPPRESS_FT above field elevation, no proximity checks.
# - Within DEPARTURE_GRACE_S of takeoff, no proximity checks.
# ---------------------------------------------------------------------
LOW_ALT_SUPPRESS_FT = 990.0
DEPARTURE_GRACE_S = 60.0

# Vertical separation alone is always sufficient at or above this
VERTICAL_SEP_FT = 1000.0

BASELINE_LATERAL_MIN_KM = 5.556   # 3.0 nm
NOTICE_BUFFER_KM = 1.852          # +1.0 nm before a violation -> conflict notice

# Passing & diverging exception (FAA JO 7110.65, 5-5-7-a-1)
PASSING_MIN_DEG = 15.0
OPPOSITE_MIN_DEG = 165.0

# ---------------------------------------------------------------------
# Simultaneous dependent approaches to parallel runways
# (FAA JO 7110.65, 5-9-6). Each row: (max_lateral_ft inclusive, min_km).
# Below PARALLEL_APPROACH_MIN_FT, or beyond the last row, the baseline
# minimum applies. Dual/triple approach rules (5-9-7) are not modelled.
# ---------------------------------------------------------------------
PARALLEL_APPROACH_MIN_FT = 2500.0

PARALLEL_APPROACH_MINIMA = [
    # max_ft, lateral_min_km
    (3600.0, 1.852),   # 1.0 nm
    (4300.0, 2.778),   # 1.5 nm
    (9000.0, 3.704),   # 2.0 nm
]

# Runway ends whose headings (mod 180) differ by less than this are parallel
PARALLEL_RUNWAY_TOLERANCE_DEG = 10.0


def get_parallel_approach_minimum_km(feet_between: float) -> float:
    if feet_between < PARALLEL_APPROACH_MIN_FT:
        return BASELINE_LATERAL_MIN_KM

    for max_ft, min_km in PARALLEL_APPROACH_MINIMA:
        if feet_between <= max_ft:
            return min_km

    # Fallback: runways far enough apart to be treated independently
    return BASELINE_LATERAL_MIN_KM
