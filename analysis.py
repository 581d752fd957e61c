#!/usr/bin/env python3
"""
Conflict log analysis script.

Reads a conflict_log.csv produced by World and computes:

- Basic counts:
    * Fraction of pair samples in conflict / violation
    * Samples with a runway collision course
    * Collisions

- Episodes (per pair):
    * Number of distinct conflict and violation episodes
      (a run of consecutive flagged samples counts once)
    * Total time spent in violation

- Separation:
    * Closest lateral approach per pair while vertically unseparated

Usage:
    python analysis.py logs/conflict_log.csv
    python analysis.py logs/conflict_log.csv --out-csv summary.csv
"""

import argparse
import csv
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Tuple

import config  # assumes analysis.py is in same project root as config.py


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass
class LogRow:
    time_s: float
    first_id: str
    second_id: str
    distance_km: float
    altitude_ft: float
    runway_collision: bool
    proximity_conflict: bool
    proximity_violation: bool
    collided: bool


def _flag(value: str) -> bool:
    return str(value).strip() == "1"


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

def load_log(path: str) -> List[LogRow]:
    """
    Load the conflict log CSV into a list of LogRow objects, sorted by time.
    """
    rows: List[LogRow] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for r in reader:
            try:
                rows.append(
                    LogRow(
                        time_s=float(r["time_s"]),
                        first_id=r["first_id"],
                        second_id=r["second_id"],
                        distance_km=float(r["distance_km"]),
                        altitude_ft=float(r["altitude_ft"]),
                        runway_collision=_flag(r["runway_collision"]),
                        proximity_conflict=_flag(r["proximity_conflict"]),
                        proximity_violation=_flag(r["proximity_violation"]),
                        collided=_flag(r["collided"]),
                    )
                )
            except KeyError as e:
                raise RuntimeError(f"Missing expected column in CSV: {e}")
    rows.sort(key=lambda x: x.time_s)
    return rows


def group_by_pair(rows: List[LogRow]) -> Dict[Tuple[str, str], List[LogRow]]:
    """
    Group rows by unordered (first_id, second_id) and sort each sub-sequence by time.
    """
    groups: Dict[Tuple[str, str], List[LogRow]] = defaultdict(list)
    for r in rows:
        groups[tuple(sorted((r.first_id, r.second_id)))].append(r)
    for k in groups:
        groups[k].sort(key=lambda x: x.time_s)
    return groups


# ---------------------------------------------------------------------------
# Metric computations
# ---------------------------------------------------------------------------

def compute_basic_counts(rows: List[LogRow]) -> Dict[str, float]:
    total = len(rows) or 1
    conflict = sum(1 for r in rows if r.proximity_conflict)
    violation = sum(1 for r in rows if r.proximity_violation)
    runway = sum(1 for r in rows if r.runway_collision)
    collisions = len({k for k, seq in group_by_pair(rows).items() if any(r.collided for r in seq)})

    return {
        "total_samples": len(rows),
        "frac_conflict": conflict / total,
        "frac_violation": violation / total,
        "count_conflict": conflict,
        "count_violation": violation,
        "count_runway_course": runway,
        "collisions": collisions,
    }


def count_episodes(flags: List[bool]) -> int:
    """Number of false -> true edges (a leading true counts)."""
    episodes = 0
    prev = False
    for f in flags:
        if f and not prev:
            episodes += 1
        prev = f
    return episodes


def compute_episodes(rows: List[LogRow]) -> Dict[str, float]:
    """
    Episode counts per pair, summed over the run.

    Violation time is the sum of sample intervals that start in violation.
    """
    conflict_episodes = 0
    violation_episodes = 0
    violation_time = 0.0

    for key, seq in group_by_pair(rows).items():
        conflict_episodes += count_episodes([r.proximity_conflict for r in seq])
        violation_episodes += count_episodes([r.proximity_violation for r in seq])
        for a, b in zip(seq, seq[1:]):
            if a.proximity_violation:
                violation_time += b.time_s - a.time_s

    return {
        "conflict_episodes": conflict_episodes,
        "violation_episodes": violation_episodes,
        "violation_time_s": violation_time,
    }


def compute_min_separation(rows: List[LogRow]) -> Dict[str, float]:
    """
    Closest lateral approach per pair while vertical separation was below
    config.VERTICAL_SEP_FT. Pairs that were always vertically separated
    are omitted.
    """
    out: Dict[str, float] = {}
    for (a, b), seq in group_by_pair(rows).items():
        close = [r.distance_km for r in seq if r.altitude_ft < config.VERTICAL_SEP_FT]
        if close:
            out[f"{a}/{b}"] = min(close)
    return out


# ---------------------------------------------------------------------------
# Main / reporting
# ---------------------------------------------------------------------------

def print_block(title: str, metrics: Dict[str, float]) -> None:
    print(title)
    for k in sorted(metrics.keys()):
        print(f"{k:25s}: {metrics[k]}")
    print()


def write_metrics_csv(path: str, blocks: Dict[str, Dict[str, float]]) -> None:
    """
    Flatten named metric blocks into a single-row CSV for easy comparison
    across runs.
    """
    flat: Dict[str, float] = {}
    for block_name, metrics in blocks.items():
        for k, v in metrics.items():
            flat[f"{block_name}.{k}"] = v

    fieldnames = sorted(flat.keys())
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerow(flat)


def main():
    parser = argparse.ArgumentParser(description="Analyze conflict log CSV.")
    parser.add_argument("csv_path", help="Path to conflict_log.csv")
    parser.add_argument(
        "--out-csv",
        help="Optional path to write a single-row CSV summary of all metrics.",
        default=None,
    )
    args = parser.parse_args()

    rows = load_log(args.csv_path)

    basic = compute_basic_counts(rows)
    episodes = compute_episodes(rows)
    separation = compute_min_separation(rows)

    print_block("=== Basic Counts ===", basic)
    print_block("=== Episodes ===", episodes)
    print_block("=== Min Lateral Separation (km, < 1000 ft vertical) ===", separation)

    if args.out_csv:
        all_blocks = {
            "basic": basic,
            "episodes": episodes,
            "min_sep_km": separation,
        }
        write_metrics_csv(args.out_csv, all_blocks)
        print(f"Metric summary written to: {args.out_csv}")


if __name__ == "__main__":
    main()
