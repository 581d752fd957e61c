from __future__ import annotations
from typing import Dict, FrozenSet, List, Optional, TYPE_CHECKING

from .models import Aircraft

if TYPE_CHECKING:
    from .conflict import AircraftConflict

PairKey = FrozenSet[str]


def pair_key(a: Aircraft, b: Aircraft) -> PairKey:
    return frozenset((a.callsign, b.callsign))


class ConflictRegistry:
    """
    Directory of live pair trackers.

    Owns the unordered-pair -> tracker map and keeps each aircraft's
    back-references (add_conflict / remove_conflict) in step with it.
    Trackers only ever ask to be registered or removed.
    """

    def __init__(self) -> None:
        self._pairs: Dict[PairKey, "AircraftConflict"] = {}

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: PairKey) -> bool:
        return key in self._pairs

    def register(self, conflict: "AircraftConflict") -> None:
        first, second = conflict.aircraft
        self._pairs[pair_key(first, second)] = conflict
        first.add_conflict(conflict, second)
        second.add_conflict(conflict, first)

    def deregister(self, first: Aircraft, second: Aircraft) -> None:
        self._pairs.pop(pair_key(first, second), None)
        first.remove_conflict(second)
        second.remove_conflict(first)

    def get(self, a: Aircraft, b: Aircraft) -> Optional["AircraftConflict"]:
        return self._pairs.get(pair_key(a, b))

    def trackers(self) -> List["AircraftConflict"]:
        # snapshot: updates may deregister while iterating
        return list(self._pairs.values())

    def remove_aircraft(self, aircraft: Aircraft) -> None:
        """Tear down every tracker that references this aircraft."""
        for conflict in list(aircraft.conflicts.values()):
            first, second = conflict.aircraft
            self.deregister(first, second)

    def clear(self) -> None:
        for conflict in self.trackers():
            self.deregister(*conflict.aircraft)
