"""
Hand class of an absolute rank.
Every class occupies a contiguous block of the rank table, so the class
follows from the rank alone.
"""

from bisect import bisect_right

from poker_equity.config import NUM_HANDS

# First rank of each class, weakest class first.
HANDCLASS_HIGH_CARD = 0
HANDCLASS_PAIR = 1_302_540
HANDCLASS_TWO_PAIR = 2_400_780
HANDCLASS_TRIPS = 2_524_332
HANDCLASS_STRAIGHT = 2_579_244
HANDCLASS_FLUSH = 2_589_444
HANDCLASS_FULL_HOUSE = 2_594_552
HANDCLASS_QUADS = 2_598_296
HANDCLASS_STRAIGHT_FLUSH = 2_598_920

_CLASS_STARTS = [
    HANDCLASS_HIGH_CARD,
    HANDCLASS_PAIR,
    HANDCLASS_TWO_PAIR,
    HANDCLASS_TRIPS,
    HANDCLASS_STRAIGHT,
    HANDCLASS_FLUSH,
    HANDCLASS_FULL_HOUSE,
    HANDCLASS_QUADS,
    HANDCLASS_STRAIGHT_FLUSH,
]

HAND_CLASS_NAMES = [
    "High Card",
    "Pair",
    "Two Pair",
    "Three of a Kind",
    "Straight",
    "Flush",
    "Full House",
    "Four of a Kind",
    "Straight Flush",
]


def hand_class(rank):
    """Hand class 0-8 (0=high card .. 8=straight flush) of an absolute rank."""
    if not 0 <= rank < NUM_HANDS:
        raise ValueError(f"Rank out of range: {rank}")
    return bisect_right(_CLASS_STARTS, rank) - 1


def hand_description(rank):
    return HAND_CLASS_NAMES[hand_class(rank)]
