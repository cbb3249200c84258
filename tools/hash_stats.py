#!/usr/bin/env python3
"""
Compare the two hash functions on a dictionary file.

Loads the dictionary once per hash function and reports load time, final
capacity, empty buckets and table load.

Default paths (relative to repo root):
  - dictionary: ./dictionary.txt

Usage:
  python tools/hash_stats.py
  python tools/hash_stats.py --dictionary ./words.txt --capacity 1000
"""

from __future__ import annotations
import argparse, os, sys, time
from typing import Any, Dict, List

from wordmatch.dictionary import build_dictionary
from wordmatch.errors import DictionaryNotFound
from wordmatch.hash_map import hash_function_1, hash_function_2

_HASH_FUNCTIONS = [("1 (sum)", hash_function_1), ("2 (weighted)", hash_function_2)]


def _repo_root() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _default_dictionary() -> str:
    return os.path.join(_repo_root(), "dictionary.txt")


def collect_stats(path: str, capacity: int) -> List[Dict[str, Any]]:
    """
    Load ``path`` with each hash function.

    Returns:
        One dict per hash function with name, seconds, size, capacity,
        empty_buckets and load
    """
    out: List[Dict[str, Any]] = []
    for name, fn in _HASH_FUNCTIONS:
        t0 = time.time()
        table = build_dictionary(path, capacity=capacity, hash_function=fn)
        out.append({
            "name": name,
            "seconds": time.time() - t0,
            "size": table.size,
            "capacity": table.capacity,
            "empty_buckets": table.empty_buckets(),
            "load": table.table_load(),
        })
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare hash functions on a dictionary file.")
    ap.add_argument("--dictionary", help="Path to the dictionary file", default=_default_dictionary())
    ap.add_argument("--capacity", type=int, default=1000, help="Initial bucket count")
    args = ap.parse_args(argv)

    print(f"[hash_stats] Dictionary: {args.dictionary}")
    print(f"[hash_stats] Capacity:   {args.capacity}")
    try:
        rows = collect_stats(args.dictionary, args.capacity)
    except DictionaryNotFound as e:
        sys.exit(f"[hash_stats] {e}")

    print(f"{'hash':14s} {'seconds':>8s} {'size':>8s} {'capacity':>9s} {'empty':>7s} {'load':>7s}")
    for r in rows:
        print(f"{r['name']:14s} {r['seconds']:8.3f} {r['size']:8d} {r['capacity']:9d} "
              f"{r['empty_buckets']:7d} {r['load']:7.3f}")


if __name__ == "__main__":
    main()
