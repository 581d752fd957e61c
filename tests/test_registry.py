from atc.airport import Airport
from atc.bus import EventBus
from atc.conflict import AircraftConflict, ConflictContext
from atc.models import Aircraft, SimClock
from atc.monitor import Score
from atc.registry import ConflictRegistry, pair_key


def make_ctx():
    return ConflictContext(
        airport=Airport("TEST"),
        clock=SimClock(),
        score=Score(),
        bus=EventBus(),
        registry=ConflictRegistry(),
    )


def make_aircraft(callsign, x, y=0.0):
    return Aircraft(callsign, pos_km=(x, y), alt_ft=10000.0)


def test_pair_key_is_unordered():
    a, b = make_aircraft("A", 0.0), make_aircraft("B", 1.0)
    assert pair_key(a, b) == pair_key(b, a)


def test_register_and_lookup_either_order():
    ctx = make_ctx()
    a, b = make_aircraft("A", 0.0), make_aircraft("B", 5.0)
    conflict = AircraftConflict(a, b, ctx)

    assert ctx.registry.get(a, b) is conflict
    assert ctx.registry.get(b, a) is conflict
    assert pair_key(a, b) in ctx.registry
    assert ctx.registry.trackers() == [conflict]


def test_deregister_clears_back_references():
    ctx = make_ctx()
    a, b = make_aircraft("A", 0.0), make_aircraft("B", 5.0)
    conflict = AircraftConflict(a, b, ctx)

    conflict.remove()
    assert len(ctx.registry) == 0
    assert ctx.registry.get(a, b) is None
    assert a.conflicts == {}
    assert b.conflicts == {}


def test_deregister_unknown_pair_is_noop():
    registry = ConflictRegistry()
    a, b = make_aircraft("A", 0.0), make_aircraft("B", 5.0)
    registry.deregister(a, b)
    assert len(registry) == 0


def test_remove_aircraft_drops_all_its_pairs():
    ctx = make_ctx()
    a = make_aircraft("A", 0.0)
    b = make_aircraft("B", 5.0)
    c = make_aircraft("C", 0.0, 5.0)
    AircraftConflict(a, b, ctx)
    AircraftConflict(a, c, ctx)
    bc = AircraftConflict(b, c, ctx)
    assert len(ctx.registry) == 3

    ctx.registry.remove_aircraft(a)
    assert ctx.registry.trackers() == [bc]
    assert set(b.conflicts) == {"C"}
    assert set(c.conflicts) == {"B"}


def test_trackers_snapshot_survives_removal_during_iteration():
    ctx = make_ctx()
    a = make_aircraft("A", 0.0)
    b = make_aircraft("B", 5.0)
    c = make_aircraft("C", 0.0, 5.0)
    AircraftConflict(a, b, ctx)
    AircraftConflict(a, c, ctx)

    # both pairs drift out of range
    a.pos_km = (-20.0, 0.0)
    for conflict in ctx.registry.trackers():
        conflict.update()
    assert len(ctx.registry) == 0


def test_clear():
    ctx = make_ctx()
    a, b = make_aircraft("A", 0.0), make_aircraft("B", 5.0)
    AircraftConflict(a, b, ctx)
    ctx.registry.clear()
    assert len(ctx.registry) == 0
    assert a.conflicts == {}
