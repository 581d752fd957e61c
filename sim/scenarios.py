import math
from typing import Dict
from atc.airport import Airport, make_runway
from atc.models import Aircraft

def demo_airport() -> Airport:
    # Two parallel east/west runways 1.0 km (~3280 ft) apart
    return Airport(
        "KDEM",
        elevation_ft=0.0,
        runways=[
            make_runway("09R", "27L", (-1.5, 0.0), (1.5, 0.0)),
            make_runway("09L", "27R", (-1.5, 1.0), (1.5, 1.0)),
        ],
    )

def head_on_passing() -> Dict[str, Aircraft]:
    # Reciprocal courses at the same level, 1 km lateral offset
    return {
        "AAL101": Aircraft("AAL101", pos_km=(-12.0, 6.0), alt_ft=6000, ground_track=math.radians(90), speed_kts=250),
        "UAL202": Aircraft("UAL202", pos_km=( 12.0, 7.0), alt_ft=6000, ground_track=math.radians(270), speed_kts=250),
    }

def crossing() -> Dict[str, Aircraft]:
    return {
        "DAL305": Aircraft("DAL305", pos_km=(-10.0, -10.0), alt_ft=8000, ground_track=math.radians(45), speed_kts=280),
        "JBU707": Aircraft("JBU707", pos_km=( 10.0, -10.0), alt_ft=8400, ground_track=math.radians(315), speed_kts=280),
    }

def parallel_approaches() -> Dict[str, Aircraft]:
    # Staggered ILS finals to 27L and 27R (2.2 km diagonal, 1.0 nm needed)
    return {
        "SWA410": Aircraft("SWA410", pos_km=(14.0, 0.0), alt_ft=3000, ground_track=math.radians(270), speed_kts=160,
                           climb_fps=-10, precision_guided=True, rwy_arr="27L"),
        "ASA512": Aircraft("ASA512", pos_km=(16.0, 1.0), alt_ft=3200, ground_track=math.radians(270), speed_kts=160,
                           climb_fps=-10, precision_guided=True, rwy_arr="27R"),
    }

def runway_head_on() -> Dict[str, Aircraft]:
    # Departures cleared from opposite ends of the same strip
    return {
        "FFT808": Aircraft("FFT808", pos_km=(-1.5, 0.0), alt_ft=0, ground_track=math.radians(90), speed_kts=120,
                           rwy_dep="09R"),
        "NKS919": Aircraft("NKS919", pos_km=( 1.5, 0.0), alt_ft=0, ground_track=math.radians(270), speed_kts=120,
                           rwy_dep="27L"),
    }

def midair() -> Dict[str, Aircraft]:
    return {
        "ENY120": Aircraft("ENY120", pos_km=(-6.0, 3.0), alt_ft=5000, ground_track=math.radians(90), speed_kts=220),
        "SKW121": Aircraft("SKW121", pos_km=( 6.0, 3.0), alt_ft=5050, ground_track=math.radians(270), speed_kts=220),
    }

SCENARIOS = {
    "1": head_on_passing,
    "2": crossing,
    "3": parallel_approaches,
    "4": runway_head_on,
    "5": midair,
}
