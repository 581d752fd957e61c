import math
import pytest

from atc.airport import Airport, RunwayRelationship, build_runway_metadata, make_runway
from atc.models import Aircraft


def make_airport():
    return Airport(
        "KTST",
        elevation_ft=600.0,
        runways=[
            make_runway("09R", "27L", (-1.5, 0.0), (1.5, 0.0)),
            make_runway("09L", "27R", (-1.0, 1.0), (2.0, 1.0)),
            make_runway("18", "36", (4.0, 2.0), (4.0, -1.0)),
        ],
    )


def test_make_runway_headings():
    rwy = make_runway("09", "27", (-1.5, 0.0), (1.5, 0.0))
    assert rwy.ends[0].heading == pytest.approx(math.radians(90))
    assert rwy.ends[1].heading == pytest.approx(math.radians(270))
    assert rwy.names == ("09", "27")


def test_get_runway_returns_shared_physical_runway():
    airport = make_airport()
    assert airport.get_runway("09R") is airport.get_runway("27L")
    assert airport.get_runway("09R") is not airport.get_runway("27R")
    assert airport.get_runway("04") is None
    assert airport.get_runway(None) is None


def test_get_runway_end():
    airport = make_airport()
    assert airport.get_runway_end("27L").name == "27L"
    assert airport.get_runway_end("18").name == "18"
    assert airport.get_runway_end("04") is None


def test_metadata_parallel_and_lateral_distance():
    airport = make_airport()
    rel = airport.relationship("27L", "27R")
    assert rel.parallel is True
    assert rel.lateral_dist_km == pytest.approx(1.0)

    # reciprocal ends are parallel too
    assert airport.relationship("27L", "09L").parallel is True


def test_metadata_crossing_runways_not_parallel():
    airport = make_airport()
    assert airport.relationship("27L", "36").parallel is False
    assert airport.relationship("18", "09R").parallel is False


def test_metadata_has_no_self_relationships():
    metadata = build_runway_metadata(make_airport().runways)
    assert "27L" not in metadata["09R"]
    assert "09R" not in metadata["09R"]


def test_relationship_missing_entries():
    airport = Airport("KTST", metadata={"27L": {"27R": RunwayRelationship(True, 1.0)}})
    assert airport.relationship("27R", "27L") is None
    assert airport.relationship("27L", None) is None
    assert airport.relationship("27L", "27R").parallel is True


def test_runway_queue():
    rwy = make_runway("09", "27", (-1.5, 0.0), (1.5, 0.0))
    ac = Aircraft("A", pos_km=(0.0, 0.0), alt_ft=0.0)
    end = rwy.ends[0]
    end.add_queue(ac)
    end.add_queue(ac)
    assert end.queue == [ac]
    assert end.remove_queue(ac) is True
    assert end.remove_queue(ac) is False
    assert end.queue == []
