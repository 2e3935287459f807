"""
Rank lookup: encoded hand -> absolute rank (0 = weakest, NUM_HANDS - 1 = royal flush).
Rebuilt from the ordered rank table once per process, then shared read-only.
"""

import os
import threading
from types import MappingProxyType

import numpy as np

from poker_equity.codec.compact import encode_hand
from poker_equity.config import NUM_HANDS, RANK_TABLE_BYTES
from poker_equity.table_build.rank_table import default_table_path, ensure_rank_table


class RankTableError(ValueError):
    """Rank table artifact is malformed."""


class RankLookupError(LookupError):
    """Encoded hand is missing from the index."""


class RankIndex:
    """
    Immutable map from encoded hand to its position in the rank table.
    Create with from_bytes / from_file; pass the instance to every consumer.
    """

    __slots__ = ("_ranks",)

    def __init__(self, ranks):
        self._ranks = MappingProxyType(ranks)

    @property
    def ranks(self):
        """Read-only encoded hand -> rank mapping."""
        return self._ranks

    @classmethod
    def from_bytes(cls, blob):
        if len(blob) != RANK_TABLE_BYTES:
            raise RankTableError(
                f"Rank table must be exactly {RANK_TABLE_BYTES} bytes, got {len(blob)}"
            )
        hands = np.frombuffer(blob, dtype=">u4").tolist()
        ranks = dict(zip(hands, range(NUM_HANDS)))
        if len(ranks) != NUM_HANDS:
            raise RankTableError(
                f"Rank table has {NUM_HANDS - len(ranks)} duplicate entries"
            )
        return cls(ranks)

    @classmethod
    def from_file(cls, path):
        with open(path, "rb") as f:
            blob = f.read()
        return cls.from_bytes(blob)

    def get(self, hand):
        """Rank of an encoded hand."""
        try:
            return self._ranks[hand]
        except KeyError:
            raise RankLookupError(f"Hand {hand:#x} is not in the rank table") from None

    __getitem__ = get

    def rank_of(self, cards):
        """Rank of exactly 5 card ids."""
        return self.get(encode_hand(cards))

    def __len__(self):
        return len(self._ranks)

    def __contains__(self, hand):
        return hand in self._ranks


_indexes = {}
_indexes_lock = threading.Lock()


def load_rank_index(path=None, build_missing=True):
    """
    Process-wide RankIndex for the table at `path` (default data/ordered_hands.bin).
    The index is built exactly once per path, even with concurrent callers;
    a missing table is generated first unless build_missing is False.
    """
    path = os.path.abspath(path or default_table_path())
    index = _indexes.get(path)
    if index is not None:
        return index
    with _indexes_lock:
        index = _indexes.get(path)
        if index is None:
            if build_missing and not os.path.isfile(path):
                ensure_rank_table(path)
            index = RankIndex.from_file(path)
            _indexes[path] = index
    return index
