#!/usr/bin/env python3
"""
Build the same queries from N threads and compare with single-threaded output.

Each call owns its arguments; the only shared state is the template cache.
Every threaded result must equal the sequential one.

Usage:
  python scripts/check_concurrent.py [--threads N] [--rounds R]
  Or set env: CONCURRENT, ROUNDS
"""

import argparse
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

from sqlbuild import build_query, skip

CASES: list[tuple[str, list[Any]]] = [
    ("SELECT name FROM users WHERE user_id = 1", []),
    ("SELECT * FROM users WHERE name = ? AND block = 0", ["Jack"]),
    (
        "SELECT ?# FROM users WHERE user_id = ?d AND block = ?d",
        [["name", "email"], 2, True],
    ),
    ("UPDATE users SET ?a WHERE user_id = -1", [{"name": "Jack", "email": None}]),
    ("SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}", ["user_id", [1, 2, 3], skip()]),
    ("SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}", ["user_id", [1, 2, 3], True]),
]


def build_all(index: int) -> tuple[int, list[str]]:
    """Build every case once; return (index, results)."""
    return index, [build_query(template, args) for template, args in CASES]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Check that concurrent build_query calls are independent."
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=int(os.environ.get("CONCURRENT", "20")),
        help="Number of worker threads (default 20)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=int(os.environ.get("ROUNDS", "500")),
        help="Number of build rounds submitted (default 500)",
    )
    args = parser.parse_args()

    _, expected = build_all(-1)
    print(f"Building {len(CASES)} queries x {args.rounds} rounds on {args.threads} threads")
    print("---")

    mismatches: list[int] = []
    with ThreadPoolExecutor(max_workers=args.threads) as executor:
        futures = [executor.submit(build_all, i) for i in range(args.rounds)]
        for fut in as_completed(futures):
            index, results = fut.result()
            if results != expected:
                mismatches.append(index)

    print("---")
    print(f"Rounds: {args.rounds}, mismatches: {len(mismatches)}")
    if mismatches:
        print(f"Mismatching rounds: {sorted(mismatches)[:20]}", file=sys.stderr)
        sys.exit(1)
    print("OK: all results identical")


if __name__ == "__main__":
    main()
