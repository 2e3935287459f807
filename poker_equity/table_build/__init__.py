"""
One-off precomputation of the ordered rank table.
Run scripts/build_rank_table.py to generate data/ordered_hands.bin.
"""

from poker_equity.table_build.rank_table import (
    build_rank_table,
    default_table_path,
    ensure_rank_table,
    write_rank_table,
)
from poker_equity.table_build.oracle import evaluate_5, strength_key

__all__ = [
    "build_rank_table",
    "default_table_path",
    "ensure_rank_table",
    "write_rank_table",
    "evaluate_5",
    "strength_key",
]
