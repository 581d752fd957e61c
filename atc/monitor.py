from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple

import config


@dataclass
class Score:
    """Game score counters touched by the conflict trackers."""
    hit: int = 0
    warning: int = 0


@dataclass
class SeparationStats:
    """Aggregated separation statistics for a simulation run."""
    samples: int = 0
    conflict_samples: int = 0
    violation_samples: int = 0
    min_distance_km: float = field(default=float("inf"))
    min_altitude_ft: float = field(default=float("inf"))
    # closest lateral approach seen while vertically unseparated, per pair
    min_distance_by_pair: Dict[Tuple[str, str], float] = field(default_factory=dict)

    def record(self, pair: Tuple[str, str], distance_km: float, altitude_ft: float,
               has_conflict: bool, has_violation: bool) -> None:
        self.samples += 1
        if distance_km < self.min_distance_km:
            self.min_distance_km = distance_km
        if altitude_ft < self.min_altitude_ft:
            self.min_altitude_ft = altitude_ft
        if has_conflict:
            self.conflict_samples += 1
        if has_violation:
            self.violation_samples += 1

        if altitude_ft < config.VERTICAL_SEP_FT:
            best = self.min_distance_by_pair.get(pair, float("inf"))
            if distance_km < best:
                self.min_distance_by_pair[pair] = distance_km


class ConflictMonitor:
    """
    Samples every live pair tracker once per tick.

    Keeps the shared Score (hit / warning counters the trackers increment)
    alongside run-wide separation statistics.
    """

    def __init__(self) -> None:
        self.score = Score()
        self.stats = SeparationStats()

    def sample(self, conflict) -> Tuple[bool, bool]:
        has_conflict, has_violation = conflict.has_alerts()
        first, second = conflict.aircraft
        self.stats.record(
            (first.callsign, second.callsign),
            conflict.distance,
            conflict.altitude,
            has_conflict,
            has_violation,
        )
        return has_conflict, has_violation

    def summary(self) -> SeparationStats:
        """Return aggregated separation statistics."""
        return self.stats
