from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Tuple, TYPE_CHECKING
import math

import config

if TYPE_CHECKING:
    from .conflict import AircraftConflict


@dataclass(eq=False)
class Aircraft:
    # -------------------------------
    # Basic positional state
    # -------------------------------
    callsign: str
    pos_km: Tuple[float, float]         # (x,y) km, x east, y north
    alt_ft: float                       # altitude in ft (MSL)
    ground_track: float = 0.0           # radians, 0 = north, clockwise
    speed_kts: float = 0.0              # ground speed
    climb_fps: float = 0.0              # vertical speed ft/s

    # -------------------------------
    # Approach / departure assignment
    # -------------------------------
    precision_guided: bool = False      # established on an ILS-style approach
    rwy_arr: Optional[str] = None
    rwy_dep: Optional[str] = None

    # -------------------------------
    # Flight phase
    # -------------------------------
    taxiing: bool = False
    landed: bool = False
    visible: bool = True
    takeoff_time: Optional[float] = None  # sim seconds, None if never departed

    hit: bool = False

    # other callsign -> pair tracker; maintained by ConflictRegistry
    conflicts: Dict[str, "AircraftConflict"] = field(default_factory=dict, repr=False)

    def add_conflict(self, conflict: "AircraftConflict", other: "Aircraft") -> None:
        self.conflicts[other.callsign] = conflict

    def remove_conflict(self, other: "Aircraft") -> None:
        self.conflicts.pop(other.callsign, None)

    def step(self, dt: float):
        """Integrate horizontal and vertical motion."""
        if self.landed or self.taxiing:
            return
        v_kmps = self.speed_kts * config.KTS_TO_KMPS
        self.pos_km = (
            self.pos_km[0] + math.sin(self.ground_track) * v_kmps * dt,
            self.pos_km[1] + math.cos(self.ground_track) * v_kmps * dt,
        )
        self.alt_ft += self.climb_fps * dt


@dataclass
class SimClock:
    time_s: float = 0.0

    def advance(self, dt: float) -> None:
        self.time_s += dt


Traffic = Dict[str, Aircraft]
