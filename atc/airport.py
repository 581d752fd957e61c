from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import math

import config
from .math_utils import Vec2, angle_offset, sub, vturn
from .models import Aircraft


@dataclass
class RunwayEnd:
    name: str                       # e.g. "27L"
    threshold_km: Vec2              # threshold position, airport frame
    heading: float                  # radians, direction of takeoff/landing roll
    queue: List[Aircraft] = field(default_factory=list)

    def add_queue(self, aircraft: Aircraft) -> None:
        if aircraft not in self.queue:
            self.queue.append(aircraft)

    def remove_queue(self, aircraft: Aircraft) -> bool:
        """Drop an aircraft from the departure queue; True if it was queued."""
        if aircraft in self.queue:
            self.queue.remove(aircraft)
            return True
        return False


@dataclass
class Runway:
    """One physical strip; both ends share this object."""
    ends: Tuple[RunwayEnd, RunwayEnd]

    @property
    def names(self) -> Tuple[str, str]:
        return self.ends[0].name, self.ends[1].name


@dataclass
class RunwayRelationship:
    parallel: bool
    lateral_dist_km: float          # perpendicular distance between centerlines


# runway-end code -> runway-end code -> relationship
RunwayMetadata = Dict[str, Dict[str, RunwayRelationship]]


def make_runway(name_a: str, name_b: str, threshold_a: Vec2, threshold_b: Vec2) -> Runway:
    """Build a runway from its two thresholds; headings point along the strip."""
    dx, dy = sub(threshold_b, threshold_a)
    heading_a = math.atan2(dx, dy) % (2 * math.pi)
    heading_b = (heading_a + math.pi) % (2 * math.pi)
    return Runway(ends=(
        RunwayEnd(name_a, threshold_a, heading_a),
        RunwayEnd(name_b, threshold_b, heading_b),
    ))


def build_runway_metadata(runways: List[Runway]) -> RunwayMetadata:
    """
    Relationship between every pair of runway-end codes on different strips.

    Two ends are parallel when their headings agree (mod 180 deg) within
    config.PARALLEL_RUNWAY_TOLERANCE_DEG.
    """
    tolerance = math.radians(config.PARALLEL_RUNWAY_TOLERANCE_DEG)
    metadata: RunwayMetadata = {}

    for rwy in runways:
        for end in rwy.ends:
            row = metadata.setdefault(end.name, {})
            direction = vturn(end.heading)
            for other in runways:
                if other is rwy:
                    continue
                for other_end in other.ends:
                    diff = abs(angle_offset(end.heading, other_end.heading))
                    diff = min(diff, math.pi - diff)
                    dx, dy = sub(other_end.threshold_km, end.threshold_km)
                    lateral = abs(direction[0] * dy - direction[1] * dx)
                    row[other_end.name] = RunwayRelationship(
                        parallel=diff < tolerance,
                        lateral_dist_km=lateral,
                    )
    return metadata


class Airport:
    def __init__(self, icao: str, elevation_ft: float = 0.0,
                 runways: Optional[List[Runway]] = None,
                 metadata: Optional[RunwayMetadata] = None) -> None:
        self.icao = icao
        self.elevation_ft = elevation_ft
        self.runways: List[Runway] = list(runways or [])
        self.metadata: RunwayMetadata = (
            metadata if metadata is not None else build_runway_metadata(self.runways)
        )

    def get_runway(self, name: Optional[str]) -> Optional[Runway]:
        """Canonical physical runway for a runway-end code, or None."""
        if name is None:
            return None
        for rwy in self.runways:
            if name in rwy.names:
                return rwy
        return None

    def get_runway_end(self, name: str) -> Optional[RunwayEnd]:
        rwy = self.get_runway(name)
        if rwy is None:
            return None
        return rwy.ends[0] if rwy.ends[0].name == name else rwy.ends[1]

    def relationship(self, a: Optional[str], b: Optional[str]) -> Optional[RunwayRelationship]:
        """Runway-pair relationship; None when the table has no entry."""
        if a is None or b is None:
            return None
        return self.metadata.get(a, {}).get(b)
