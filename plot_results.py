#!/usr/bin/env python3
"""Print a comparison chart and table for a saved Neon vs Turso benchmark run."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from edgebench.results import RESULTS_PREFIX

BACKENDS = ("neon", "turso")


def find_latest_results_file(directory: Path) -> Path:
    """Find the newest results file in a directory."""
    if not directory.exists():
        raise FileNotFoundError(f"No directory {directory}")

    result_files = list(directory.glob(f"{RESULTS_PREFIX}-*.json"))
    if not result_files:
        raise FileNotFoundError(f"No {RESULTS_PREFIX}-*.json files found in {directory}")

    # Sort by modification time, newest first
    return max(result_files, key=lambda p: p.stat().st_mtime)


def load_results(results_file: Path) -> Dict[str, Any]:
    with open(results_file) as f:
        return json.load(f)


def flatten_results(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """One row per measured phase with a column per backend.

    Phases that never ran (empty sections) are skipped.
    """
    phases = [
        ("Cold start", data.get("coldStart", {})),
        ("Write", data.get("writeTest", {})),
        ("Simple query", data.get("readTest", {}).get("simpleQuery", {})),
        ("Filter query", data.get("readTest", {}).get("filterQuery", {})),
    ]
    rows = []
    for phase, section in phases:
        if not any(name in section for name in BACKENDS):
            continue
        row = {"phase": phase}
        for name in BACKENDS:
            row[name] = section.get(name)
        rows.append(row)
    return rows


def format_ms(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"


def print_table(rows: List[Dict[str, Any]], title: str) -> None:
    """Print formatted table."""
    print(f"\n📋 {title}")
    print("=" * 60)

    header = f"{'Phase':<15} | {'Neon (ms)':>12} | {'Turso (ms)':>12} | {'Faster':<6}"
    print(header)
    print("-" * len(header))

    for row in rows:
        neon, turso = row["neon"], row["turso"]
        if neon is None or turso is None:
            faster = "-"
        else:
            faster = "neon" if neon < turso else "turso"
        print(f"{row['phase']:<15} | {format_ms(neon):>12} | {format_ms(turso):>12} | {faster:<6}")


def print_ascii_chart(rows: List[Dict[str, Any]], title: str, max_width: int = 50) -> None:
    """Print ASCII chart, bars scaled per phase."""
    if not rows:
        return

    print(f"\n📊 {title}")
    print("=" * 80)

    for row in rows:
        values = [row[name] for name in BACKENDS if row[name] is not None]
        max_value = max(values) if values else 0
        print(f"{row['phase']}")
        for name in BACKENDS:
            value = row[name]
            if value is None:
                continue
            bar_length = int((value / max_value) * max_width) if max_value > 0 else 0
            bar = '█' * bar_length + '░' * (max_width - bar_length)
            print(f"  {name:<6} {bar} {value:.1f}ms")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show benchmark results")
    parser.add_argument("--file", help="Specific results file to show")
    parser.add_argument("--dir", default=".", help="Directory to search for the newest results file (default: .)")
    args = parser.parse_args(argv)

    try:
        results_file = Path(args.file) if args.file else find_latest_results_file(Path(args.dir))
        data = load_results(results_file)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"📁 Results: {results_file}")
    print(f"🕒 Run started: {data.get('timestamp', 'unknown')}")
    print(f"🔢 Records: {data.get('configuration', {}).get('recordCount', 'unknown')}")

    rows = flatten_results(data)
    if not rows:
        print("⚠️  No measurements in this file")
        return 0

    print_table(rows, "LATENCY BY PHASE")
    print_ascii_chart(rows, "Neon vs Turso")

    write_test = data.get("writeTest", {})
    if "rowCount" in write_test:
        print(f"\nPer-row write time ({write_test['rowCount']} rows):")
        for name in BACKENDS:
            print(f"  {name:<6}: {format_ms(write_test.get(f'{name}AvgPerRow'))}ms")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
