"""
Run-time rank lookup: encoded hand -> absolute rank, plus hand classes.
"""

from poker_equity.lookup.rank_index import (
    RankIndex,
    RankLookupError,
    RankTableError,
    load_rank_index,
)
from poker_equity.lookup.hand_class import hand_class, hand_description

__all__ = [
    "RankIndex",
    "RankLookupError",
    "RankTableError",
    "load_rank_index",
    "hand_class",
    "hand_description",
]
