from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import csv
import os

from atc.airport import Airport
from atc.bus import EventBus, NOTICE
from atc.conflict import AircraftConflict, ConflictContext
from atc.math_utils import norm, sub
from atc.models import Aircraft, SimClock
from atc.monitor import ConflictMonitor
from atc.registry import ConflictRegistry
from sim.scenarios import demo_airport
import config

LOG_HEADER = [
    "time_s",
    "first_id",
    "second_id",
    "distance_km",
    "distance_delta_km",
    "altitude_ft",
    "runway_collision",
    "proximity_conflict",
    "proximity_violation",
    "collided",
]

# notices kept for the HUD
MAX_NOTICES = 8


class World:
    """
    Outer simulation loop around the pair trackers.

    Each tick: fly every aircraft, update every live tracker (sequentially),
    start trackers for newly close pairs, log, and retire crashed aircraft.
    """

    def __init__(self, aircraft: Dict[str, Aircraft], airport: Optional[Airport] = None,
                 log_path: str | None = "logs/conflict_log.csv", echo: bool = True) -> None:
        self.log_path = log_path
        self.log_file = None
        self.log_writer: csv.writer | None = None
        self.echo = echo

        if self.log_path is not None:
            # Ensure directory exists
            log_dir = os.path.dirname(self.log_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            self.log_file = open(self.log_path, "w", newline="", encoding="utf-8")
            self.log_writer = csv.writer(self.log_file)
            self.log_writer.writerow(LOG_HEADER)

        self.paused: bool = False
        self.reset(aircraft, airport)

    def reset(self, aircraft: Dict[str, Aircraft], airport: Optional[Airport] = None) -> None:
        previous = getattr(self, "registry", None)
        if previous is not None:
            previous.clear()

        self.ac: Dict[str, Aircraft] = aircraft
        self.airport = airport or demo_airport()
        self.clock = SimClock()
        self.bus = EventBus()
        self.monitor = ConflictMonitor()
        self.registry = ConflictRegistry()
        self.ctx = ConflictContext(
            airport=self.airport,
            clock=self.clock,
            score=self.monitor.score,
            bus=self.bus,
            registry=self.registry,
        )
        self.notices: List[Tuple[float, str, bool]] = []
        self.bus.on(NOTICE, self._on_notice)

        self._queue_departures()
        self._pair_aircraft()

    @property
    def time_s(self) -> float:
        return self.clock.time_s

    @property
    def score(self):
        return self.monitor.score

    def _on_notice(self, message: str, warning: bool = False) -> None:
        self.notices.append((self.time_s, message, warning))
        del self.notices[:-MAX_NOTICES]
        if self.echo:
            tag = "WARNING" if warning else "INFO"
            print(f"[{tag}] t={self.time_s:.1f}s {message}")

    def _queue_departures(self) -> None:
        # Departures that have not rolled yet wait at their runway end
        for ac in self.ac.values():
            if ac.rwy_dep is None or ac.takeoff_time is not None:
                continue
            end = self.airport.get_runway_end(ac.rwy_dep)
            if end is not None:
                end.add_queue(ac)

    def _pair_aircraft(self) -> None:
        """Start a tracker for every untracked pair inside the bounding radius."""
        traffic = list(self.ac.values())
        n = len(traffic)
        for i in range(n):
            for j in range(i + 1, n):
                a, b = traffic[i], traffic[j]
                if self.registry.get(a, b) is not None:
                    continue
                if norm(sub(a.pos_km, b.pos_km)) <= config.BOUNDING_RADIUS_KM:
                    AircraftConflict(a, b, self.ctx)

    def step(self, dt: float) -> None:
        if self.paused:
            return

        # --- 1) Integrate aircraft motion ---
        for ac in self.ac.values():
            ac.step(dt)
        self.clock.advance(dt)

        # --- 2) Update live trackers, then pick up new pairs ---
        for conflict in self.registry.trackers():
            conflict.update()
        self._pair_aircraft()

        # --- 3) Sample + log ---
        for conflict in self.registry.trackers():
            self.monitor.sample(conflict)
            if self.log_writer is not None:
                self._log(conflict)

        # --- 4) Crashed aircraft leave the sim ---
        for cs in [cs for cs, ac in self.ac.items() if ac.hit]:
            self.remove_aircraft(cs)

    def _log(self, conflict: AircraftConflict) -> None:
        first, second = conflict.aircraft
        self.log_writer.writerow([
            f"{self.time_s:.2f}",
            first.callsign,
            second.callsign,
            f"{conflict.distance:.3f}",
            f"{conflict.distance_delta:.4f}",
            f"{conflict.altitude:.1f}",
            int(conflict.conflicts.runway_collision),
            int(conflict.conflicts.proximity_conflict),
            int(conflict.violations.proximity_violation),
            int(conflict.collided),
        ])

    def remove_aircraft(self, callsign: str) -> Optional[Aircraft]:
        ac = self.ac.pop(callsign, None)
        if ac is None:
            return None
        self.registry.remove_aircraft(ac)
        for rwy in self.airport.runways:
            for end in rwy.ends:
                end.remove_queue(ac)
        return ac

    def close(self) -> None:
        """Call this when the simulation ends to flush/close the log file."""
        if self.log_file is not None:
            self.log_file.close()
            self.log_file = None
            self.log_writer = None
