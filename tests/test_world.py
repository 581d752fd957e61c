import pytest

import analysis
import config
from sim.scenarios import (
    SCENARIOS, crossing, head_on_passing, midair, parallel_approaches, runway_head_on,
)
from sim.world import World


def run_until(world, predicate, max_steps=12000):
    for _ in range(max_steps):
        if predicate(world):
            return True
        world.step(config.DT)
    return predicate(world)


def test_pairs_started_only_inside_bounding_radius():
    world = World(crossing(), log_path=None, echo=False)
    # 20 km apart at the start
    assert len(world.registry) == 0

    assert run_until(world, lambda w: len(w.registry) == 1)
    conflict = world.registry.trackers()[0]
    assert conflict.distance <= config.BOUNDING_RADIUS_KM


def test_midair_collision_is_scored_and_aircraft_removed(tmp_path):
    log_path = tmp_path / "conflict_log.csv"
    world = World(midair(), log_path=str(log_path), echo=False)
    assert len(world.registry) == 1

    assert run_until(world, lambda w: w.score.hit > 0)
    assert world.score.hit == 1
    assert world.ac == {}
    assert len(world.registry) == 0
    assert any("collided with" in msg for _, msg, _ in world.notices)
    world.close()

    rows = analysis.load_log(str(log_path))
    basic = analysis.compute_basic_counts(rows)
    assert basic["collisions"] == 1
    assert basic["count_violation"] > 0


def test_runway_head_on_warns_then_collides():
    world = World(runway_head_on(), log_path=None, echo=False)
    assert world.score.warning == 1
    assert world.airport.get_runway_end("09R").queue == [
        a for a in world.ac.values() if a.callsign == "FFT808"
    ]

    assert run_until(world, lambda w: w.score.hit > 0)
    assert world.score.warning == 1
    assert world.airport.get_runway_end("09R").queue == []
    assert world.airport.get_runway_end("27L").queue == []


def test_head_on_passing_clears_and_pair_is_dropped():
    world = World(head_on_passing(), log_path=None, echo=False)

    assert run_until(world, lambda w: w.monitor.stats.violation_samples > 0)
    conflict = world.registry.trackers()[0]

    # once past each other the exception clears the pair
    assert run_until(world, lambda w: conflict.distance_delta > 0 and not any(conflict.has_alerts()))
    assert run_until(world, lambda w: len(w.registry) == 0)
    assert world.score.hit == 0
    assert len(world.ac) == 2


def test_parallel_approaches_raise_no_notices():
    world = World(parallel_approaches(), log_path=None, echo=False)
    for _ in range(300):
        world.step(config.DT)
    conflict = world.registry.trackers()[0]
    assert conflict.has_alerts() == (False, False)
    assert world.notices == []


def test_pause_freezes_world():
    world = World(midair(), log_path=None, echo=False)
    world.paused = True
    before = world.ac["ENY120"].pos_km
    world.step(config.DT)
    assert world.ac["ENY120"].pos_km == before
    assert world.time_s == 0.0


def test_reset_replaces_traffic_and_state():
    world = World(midair(), log_path=None, echo=False)
    run_until(world, lambda w: w.score.hit > 0)

    world.reset(SCENARIOS["4"]())
    assert world.score.hit == 0
    assert world.score.warning == 1
    assert world.time_s == 0.0
    assert set(world.ac) == {"FFT808", "NKS919"}


def test_notices_are_echoed(capsys):
    World(runway_head_on(), log_path=None, echo=True)
    out = capsys.readouterr().out
    assert "[WARNING]" in out
    assert "collision course" in out


def test_count_episodes():
    assert analysis.count_episodes([]) == 0
    assert analysis.count_episodes([True, True, False, True]) == 2
    assert analysis.count_episodes([False, True, True, True]) == 1
