from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple
import math

import config
from .airport import Airport
from .bus import EventBus
from .math_utils import angle_offset, km_to_ft, norm, ray_intersection, sub
from .models import Aircraft, SimClock
from .monitor import Score
from .registry import ConflictRegistry


class TrackerState(Enum):
    ACTIVE = auto()
    COLLIDED = auto()   # terminal: no further updates


@dataclass
class Conflicts:
    """Needs controller attention, not yet a violation."""
    runway_collision: bool = False
    proximity_conflict: bool = False

    def any(self) -> bool:
        return self.runway_collision or self.proximity_conflict


@dataclass
class Violations:
    """Regulatory separation breached."""
    proximity_violation: bool = False

    def any(self) -> bool:
        return self.proximity_violation


@dataclass
class ConflictContext:
    """Simulation collaborators shared by every pair tracker."""
    airport: Airport
    clock: SimClock
    score: Score
    bus: EventBus
    registry: ConflictRegistry


class AircraftConflict:
    """
    Details about two aircraft in close proximity in relation to the
    separation rules.

    One instance per unordered pair within the bounding radius. The
    tracker never moves aircraft; it reads their state each update and
    records:
      - collision (terminal, freezes the tracker)
      - runway head-on collision course
      - proximity conflict (within 1 nm of the applicable minimum)
      - proximity violation (inside the applicable minimum)
    """

    def __init__(self, first: Aircraft, second: Aircraft, ctx: ConflictContext) -> None:
        if first is second:
            raise ValueError(f"Cannot track a conflict between {first.callsign} and itself")

        self.aircraft: Tuple[Aircraft, Aircraft] = (first, second)
        self.ctx = ctx

        self.distance = norm(sub(first.pos_km, second.pos_km))
        self.distance_delta = 0.0
        self.altitude = abs(first.alt_ft - second.alt_ft)

        self.state = TrackerState.ACTIVE
        self.conflicts = Conflicts()
        self.violations = Violations()

        ctx.registry.register(self)
        self.update()

    def __repr__(self) -> str:
        a, b = self.aircraft
        return (f"AircraftConflict({a.callsign}, {b.callsign}, "
                f"d={self.distance:.3f}km, alt={self.altitude:.0f}ft, {self.state.name})")

    @property
    def collided(self) -> bool:
        return self.state is TrackerState.COLLIDED

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------

    def has_conflict(self) -> bool:
        return self.conflicts.any()

    def has_violation(self) -> bool:
        return self.violations.any()

    def has_alerts(self) -> Tuple[bool, bool]:
        """(any conflict, any violation) - anything the controller should see."""
        return self.has_conflict(), self.has_violation()

    # ------------------------------------------------------------
    # Update cascade
    # ------------------------------------------------------------

    def update(self) -> None:
        """Update conflict and violation checks, potentially removing this conflict."""
        # Nothing more to report once the two aircraft have collided
        if self.collided:
            return

        a1, a2 = self.aircraft
        previous = self.distance
        self.distance = norm(sub(a1.pos_km, a2.pos_km))
        self.distance_delta = self.distance - previous
        self.altitude = abs(a1.alt_ft - a2.alt_ft)

        if self.distance > config.BOUNDING_RADIUS_KM:
            self.remove()
            return

        self.check_collision()
        self.check_runway_collision()

        # No proximity rules near the ground
        elevation = self.ctx.airport.elevation_ft
        if (a1.alt_ft - elevation < config.LOW_ALT_SUPPRESS_FT
                or a2.alt_ft - elevation < config.LOW_ALT_SUPPRESS_FT):
            return

        # Nor in the first minute of a departure
        if self._just_departed(a1) or self._just_departed(a2):
            return

        self.check_proximity()

    def _just_departed(self, aircraft: Aircraft) -> bool:
        if aircraft.takeoff_time is None:
            return False
        return self.ctx.clock.time_s - aircraft.takeoff_time < config.DEPARTURE_GRACE_S

    def remove(self) -> None:
        """Remove this conflict from both aircraft."""
        self.ctx.registry.deregister(*self.aircraft)

    # ------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------

    def check_collision(self) -> None:
        a1, a2 = self.aircraft
        # Landed traffic is ignored so arrivals never "collide" with taxiing aircraft
        if a1.landed or a2.landed:
            return

        if (self.distance < config.COLLISION_HORZ_KM
                and self.altitude < config.COLLISION_VERT_FT
                and a1.visible and a2.visible):
            self.state = TrackerState.COLLIDED
            self.ctx.bus.notify(f"{a1.callsign} collided with {a2.callsign}", warning=True)
            self.ctx.score.hit += 1
            a1.hit = True
            a2.hit = True

            # Any pending runway sequencing for either aircraft is void
            for rwy in self.ctx.airport.runways:
                for end in rwy.ends:
                    end.remove_queue(a1)
                    end.remove_queue(a2)

    def check_runway_collision(self) -> None:
        """Head-on course from opposite ends of the same runway."""
        a1, a2 = self.aircraft
        airport = self.ctx.airport

        on_course = False
        if (not a1.taxiing and not a2.taxiing
                and a1.rwy_dep is not None and a2.rwy_dep is not None
                and a1.rwy_dep != a2.rwy_dep
                and self.distance < config.RUNWAY_COURSE_KM):
            rwy1 = airport.get_runway(a1.rwy_dep)
            rwy2 = airport.get_runway(a2.rwy_dep)
            on_course = rwy1 is not None and rwy1 is rwy2

        if on_course and not self.conflicts.runway_collision:
            self.ctx.bus.notify(
                f"{a1.callsign} appears on a collision course with "
                f"{a2.callsign} on the same runway",
                warning=True,
            )
            self.ctx.score.warning += 1
        self.conflicts.runway_collision = on_course

    def applicable_lateral_minimum(self) -> Tuple[float, bool]:
        """
        Lateral separation minimum for this pair, and whether notices are
        suppressed (simultaneous approaches to parallel runways).
        """
        a1, a2 = self.aircraft
        if not (a1.precision_guided and a2.precision_guided) or a1.rwy_arr == a2.rwy_arr:
            return config.BASELINE_LATERAL_MIN_KM, False

        relationship = self.ctx.airport.relationship(a1.rwy_arr, a2.rwy_arr)
        if relationship is None or not relationship.parallel:
            return config.BASELINE_LATERAL_MIN_KM, False

        feet_between = km_to_ft(relationship.lateral_dist_km)
        return config.get_parallel_approach_minimum_km(feet_between), True

    def check_proximity(self) -> None:
        # Vertical separation alone is sufficient
        if self.altitude >= config.VERTICAL_SEP_FT:
            self.conflicts.proximity_conflict = False
            self.violations.proximity_violation = False
            return

        a1, a2 = self.aircraft
        minimum, disable_notices = self.applicable_lateral_minimum()

        violation = self.distance < minimum
        conflict = (self.distance < minimum + config.NOTICE_BUFFER_KM and not disable_notices) or violation

        # "Passing & diverging" exception (FAA JO 7110.65, 5-5-7-a-1)
        if conflict:
            hdg_difference = abs(angle_offset(a1.ground_track, a2.ground_track))
            if hdg_difference >= math.radians(config.PASSING_MIN_DEG):
                if hdg_difference > math.radians(config.OPPOSITE_MIN_DEG):
                    # opposite courses: fine once they have passed and are opening
                    if self.distance_delta > 0:
                        conflict = False
                        violation = False
                else:
                    # same or crossing courses: fine once either has crossed the other's track
                    u, v = ray_intersection(a1.pos_km, a1.ground_track, a2.pos_km, a2.ground_track)
                    if u < 0 or v < 0:
                        conflict = False
                        violation = False

        self.conflicts.proximity_conflict = conflict
        self.violations.proximity_violation = violation
