#!/usr/bin/env python3
"""
Build the ordered rank table (every 5-card hand, weakest first); save to data/.
Run from project root: python scripts/build_rank_table.py
"""

import os
import sys
import argparse
import time

# Project root
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_equity.config import BUILD_WORKERS, RANK_TABLE_BYTES
from poker_equity.table_build import default_table_path, ensure_rank_table


def main():
    ap = argparse.ArgumentParser(description="Build the ordered 5-card rank table")
    ap.add_argument("--out", default=default_table_path(), help="Output file")
    ap.add_argument("--workers", type=int, default=BUILD_WORKERS, help="Scoring processes")
    ap.add_argument("--force", action="store_true", help="Rebuild even if the file exists")
    ap.add_argument("--quiet", action="store_true", help="No progress bar")
    args = ap.parse_args()

    start = time.time()
    path = ensure_rank_table(args.out, workers=args.workers, force=args.force, progress=not args.quiet)
    size = os.path.getsize(path)
    if size != RANK_TABLE_BYTES:
        print(f"ERROR: {path} has {size} bytes, expected {RANK_TABLE_BYTES}")
        sys.exit(1)
    print(f"Done in {time.time() - start:.1f}s: {path}")


if __name__ == "__main__":
    main()
