"""
Reference 5-card evaluator used once, offline, to order the rank table.
Wraps treys: a hand's treys score runs from 1 (royal flush) to 7462
(7-5-4-3-2 offsuit), lower is stronger. Equal scores are equal hands.
"""

from treys import Card, Evaluator
from treys.lookup import LookupTable

from poker_equity.codec.cards import format_card
from poker_equity.config import NUM_CARDS

BEST_SCORE = 1
WORST_SCORE = LookupTable.MAX_HIGH_CARD

# treys card ints indexed by our card id
_TREYS_CARDS = [Card.new(format_card(card)) for card in range(NUM_CARDS)]

_evaluator = None


def _get_evaluator():
    # Built lazily so each build worker process makes its own lookup tables.
    global _evaluator
    if _evaluator is None:
        _evaluator = Evaluator()
    return _evaluator


def evaluate_5(cards):
    """treys score of exactly 5 card ids (1 = best, WORST_SCORE = worst)."""
    if len(cards) != 5:
        raise ValueError(f"Oracle scores 5-card hands, got {len(cards)} cards")
    return _get_evaluator().evaluate([_TREYS_CARDS[c] for c in cards], [])


def strength_key(score):
    """Turn a treys score into a key that grows with hand strength (0 = worst)."""
    return WORST_SCORE - score
