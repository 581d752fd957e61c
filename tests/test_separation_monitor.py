import pytest
from hypothesis import given, strategies as st

from atc.airport import Airport
from atc.bus import EventBus
from atc.conflict import AircraftConflict, ConflictContext
from atc.models import Aircraft, SimClock
from atc.monitor import ConflictMonitor, SeparationStats
from atc.registry import ConflictRegistry


def make_ctx(monitor):
    return ConflictContext(
        airport=Airport("TEST"),
        clock=SimClock(),
        score=monitor.score,
        bus=EventBus(),
        registry=ConflictRegistry(),
    )


def test_sample_records_violation():
    mon = ConflictMonitor()
    a = Aircraft("A", pos_km=(0.0, 0.0), alt_ft=8000.0)
    b = Aircraft("B", pos_km=(3.0, 0.0), alt_ft=8200.0)
    conflict = AircraftConflict(a, b, make_ctx(mon))

    has_conflict, has_violation = mon.sample(conflict)

    assert has_conflict is True
    assert has_violation is True
    stats = mon.summary()
    assert stats.samples == 1
    assert stats.violation_samples == 1
    assert stats.min_distance_km == pytest.approx(3.0)
    assert stats.min_altitude_ft == pytest.approx(200.0)
    assert stats.min_distance_by_pair[("A", "B")] == pytest.approx(3.0)


def test_sample_vertically_separated_pair_not_in_pair_minima():
    mon = ConflictMonitor()
    a = Aircraft("A", pos_km=(0.0, 0.0), alt_ft=8000.0)
    b = Aircraft("B", pos_km=(3.0, 0.0), alt_ft=10000.0)
    conflict = AircraftConflict(a, b, make_ctx(mon))

    assert mon.sample(conflict) == (False, False)
    assert mon.stats.conflict_samples == 0
    assert mon.stats.min_distance_by_pair == {}


def test_score_is_shared_with_trackers():
    mon = ConflictMonitor()
    a = Aircraft("A", pos_km=(0.0, 0.0), alt_ft=8000.0)
    b = Aircraft("B", pos_km=(0.02, 0.0), alt_ft=8050.0)
    AircraftConflict(a, b, make_ctx(mon))
    assert mon.score.hit == 1


@given(
    samples=st.lists(
        st.tuples(st.floats(0.0, 15.0), st.floats(0.0, 5000.0)),
        min_size=1,
        max_size=30,
    )
)
def test_stats_minima_track_smallest_sample(samples):
    stats = SeparationStats()
    for d, alt in samples:
        stats.record(("A", "B"), d, alt, False, False)
    assert stats.samples == len(samples)
    assert stats.min_distance_km == min(d for d, _ in samples)
    assert stats.min_altitude_ft == min(alt for _, alt in samples)
