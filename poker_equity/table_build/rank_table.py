"""
Build the ordered rank table: every 5-card hand, encoded, weakest first.
Written once as a flat file of big-endian uint32 entries; run-time code only
reads it back (see poker_equity.lookup).
"""

import os
from concurrent.futures import ProcessPoolExecutor
from itertools import combinations

import numpy as np
from tqdm import tqdm

from poker_equity.codec.compact import encode_hand
from poker_equity.config import (
    BUILD_WORKERS,
    DEFAULT_TABLE_DIR,
    HAND_SIZE,
    NUM_CARDS,
    NUM_HANDS,
    RANK_TABLE_FILE,
)
from poker_equity.table_build.oracle import evaluate_5, strength_key


def default_table_path():
    base = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base, DEFAULT_TABLE_DIR, RANK_TABLE_FILE)


def score_hands_from(first):
    """
    Encode and score every hand whose lowest card id is `first`.
    Returns (encoded hands as uint32, strength keys as int64).
    """
    hands = []
    keys = []
    for rest in combinations(range(first + 1, NUM_CARDS), HAND_SIZE - 1):
        cards = (first,) + rest
        hands.append(encode_hand(cards))
        keys.append(strength_key(evaluate_5(cards)))
    return np.array(hands, dtype=np.uint32), np.array(keys, dtype=np.int64)


def build_rank_table(workers=BUILD_WORKERS, progress=True):
    """
    Enumerate all C(52, 5) hands, score each with the oracle, and return the
    encoded hands as a uint32 array sorted weakest first. Hands of equal
    strength are ordered by encoded value, so the output is deterministic.
    """
    firsts = range(NUM_CARDS - HAND_SIZE + 1)
    bar = dict(total=len(firsts), desc="Scoring hands", unit="chunk", disable=not progress)
    if workers > 1:
        with ProcessPoolExecutor(max_workers=workers) as ex:
            parts = list(tqdm(ex.map(score_hands_from, firsts), **bar))
    else:
        parts = [score_hands_from(first) for first in tqdm(firsts, **bar)]

    hands = np.concatenate([p[0] for p in parts])
    keys = np.concatenate([p[1] for p in parts])
    if len(hands) != NUM_HANDS:
        raise RuntimeError(f"Enumerated {len(hands)} hands, expected {NUM_HANDS}")

    order = np.lexsort((hands, keys))
    return hands[order]


def table_to_bytes(table):
    return np.asarray(table, dtype=">u4").tobytes()


def write_rank_table(path, table):
    """Write the table atomically so readers never see a partial file."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    tmp = f"{path}.{os.getpid()}.tmp"
    with open(tmp, "wb") as f:
        f.write(table_to_bytes(table))
    os.replace(tmp, path)


def ensure_rank_table(path=None, workers=BUILD_WORKERS, force=False, progress=True):
    """
    Build the rank table at `path` unless it already exists.
    Returns the path.
    """
    path = path or default_table_path()
    if os.path.isfile(path) and not force:
        print(f"Skipping rank table, file exists: {path}")
        return path

    print(f"Generating all {NUM_HANDS} hands ({workers} workers)...")
    table = build_rank_table(workers=workers, progress=progress)
    print(f"Writing hands in order to {path}")
    write_rank_table(path, table)
    return path
