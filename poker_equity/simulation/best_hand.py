"""
Best 5 of N: pick the strongest 5-card hand out of 5-7 cards.
"""

from itertools import combinations

from poker_equity.codec.compact import encode_card
from poker_equity.config import HAND_SIZE, MAX_HOLDING

# Positions of every 5-card subset, per holding size (21 for 7 cards).
SUBSET_POSITIONS = {
    n: tuple(combinations(range(n), HAND_SIZE)) for n in range(HAND_SIZE, MAX_HOLDING + 1)
}


def best_hand(cards, index):
    """
    Best 5-card hand from 5-7 card ids.
    Returns (encoded hand, rank); on equal rank the first subset wins.
    """
    positions = SUBSET_POSITIONS.get(len(cards))
    if positions is None:
        raise ValueError(f"best_hand needs {HAND_SIZE}-{MAX_HOLDING} cards, got {len(cards)}")

    # Sorted once, so every subset below is already in canonical order.
    codes = sorted([encode_card(c) for c in cards])
    ranks = index.get
    best = -1
    best_rank = -1
    for a, b, c, d, e in positions:
        hand = codes[a] | codes[b] << 6 | codes[c] << 12 | codes[d] << 18 | codes[e] << 24
        rank = ranks(hand)
        if rank > best_rank:
            best = hand
            best_rank = rank
    return best, best_rank
