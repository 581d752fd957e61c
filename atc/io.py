import csv, math
from typing import Dict, Optional
from .models import Aircraft

FIELDNAMES = [
    'callsign', 'x_km', 'y_km', 'alt_ft', 'track_deg', 'speed_kts',
    'climb_fps', 'precision_guided', 'rwy_arr', 'rwy_dep',
    'taxiing', 'landed', 'takeoff_time',
]


def _bool_from_int_str(value: Optional[str], default: bool = False) -> bool:
    """Helper to parse '0'/'1' (or missing) into bool."""
    if value is None:
        return default
    value = value.strip()
    if value == "":
        return default
    try:
        return bool(int(value))
    except ValueError:
        # fallback: accept 'true'/'false'
        return value.lower() in ("1", "true", "yes", "y")


def _optional_str(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _optional_float(value: Optional[str]) -> Optional[float]:
    value = _optional_str(value)
    return float(value) if value is not None else None


# CSV columns:
# callsign,x_km,y_km,alt_ft,track_deg,speed_kts,climb_fps,
# precision_guided,rwy_arr,rwy_dep,taxiing,landed,takeoff_time
# Example:
# AAL101,-8,0,5000,90,250,0,0,,,0,0,

def load_traffic_csv(path: str) -> Dict[str, Aircraft]:
    """Load a traffic CSV into Aircraft objects keyed by callsign."""
    aircraft: Dict[str, Aircraft] = {}
    with open(path, newline='', encoding="utf-8") as f:
        r = csv.DictReader(f)
        for row in r:
            try:
                callsign = row['callsign']
                ac = Aircraft(
                    callsign=callsign,
                    pos_km=(float(row['x_km']), float(row['y_km'])),
                    alt_ft=float(row['alt_ft']),
                    ground_track=math.radians(float(row.get('track_deg') or 0)),
                    speed_kts=float(row.get('speed_kts') or 0),
                    climb_fps=float(row.get('climb_fps') or 0),
                    precision_guided=_bool_from_int_str(row.get('precision_guided')),
                    rwy_arr=_optional_str(row.get('rwy_arr')),
                    rwy_dep=_optional_str(row.get('rwy_dep')),
                    taxiing=_bool_from_int_str(row.get('taxiing')),
                    landed=_bool_from_int_str(row.get('landed')),
                    takeoff_time=_optional_float(row.get('takeoff_time')),
                )
            except KeyError as e:
                raise RuntimeError(f"Missing expected column in {path}: {e}")
            aircraft[callsign] = ac

    if not aircraft:
        raise RuntimeError(f"No aircraft in traffic file: {path}")
    return aircraft


def save_traffic_csv(path: str, aircraft: Dict[str, Aircraft]):
    with open(path, 'w', newline='', encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        for cs, ac in aircraft.items():
            w.writerow({
                'callsign': cs,
                'x_km': ac.pos_km[0],
                'y_km': ac.pos_km[1],
                'alt_ft': ac.alt_ft,
                'track_deg': math.degrees(ac.ground_track),
                'speed_kts': ac.speed_kts,
                'climb_fps': ac.climb_fps,
                'precision_guided': int(ac.precision_guided),
                'rwy_arr': ac.rwy_arr or '',
                'rwy_dep': ac.rwy_dep or '',
                'taxiing': int(ac.taxiing),
                'landed': int(ac.landed),
                'takeoff_time': '' if ac.takeoff_time is None else ac.takeoff_time,
            })
