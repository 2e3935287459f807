"""
Compact card and hand encodings.

A card is reduced to 6 bits:

    +--------+
    |  rrrrss|
    +--------+

so the 52 legal codes are 0..51 and 52..63 are unused.

A 5-card hand is the 5 card codes sorted ascending and packed into 30 bits,
lowest card in the lowest bits:

    +--------+--------+--------+--------+
    |  card05|card04ca|rd03card|02card01|
    +--------+--------+--------+--------+

Sorting before packing makes the encoding independent of card order, so an
encoded hand is a canonical key for an unordered 5-card set.
"""

from poker_equity.codec.cards import card_rank, card_suit
from poker_equity.config import CARD_BITS, HAND_BITS, HAND_SIZE, NUM_CARDS, NUM_RANKS

CARD_MASK = (1 << CARD_BITS) - 1


class InvalidEncoding(ValueError):
    """Bit pattern that does not decode to a card or hand."""


def encode_card(card):
    """Card id (0-51) -> 6-bit code."""
    if not 0 <= card < NUM_CARDS:
        raise ValueError(f"Invalid card id: {card}")
    return card_rank(card) << 2 | card_suit(card)


def decode_card(code):
    """6-bit code -> card id. Raises InvalidEncoding on unused patterns."""
    if not 0 <= code < NUM_CARDS:
        raise InvalidEncoding(f"Not a card code: {code}")
    return (code & 0x3) * NUM_RANKS + (code >> 2)


def pack_sorted(codes):
    """Pack 5 codes that are already sorted ascending."""
    c0, c1, c2, c3, c4 = codes
    return c0 | c1 << 6 | c2 << 12 | c3 << 18 | c4 << 24


def encode_hand(cards):
    """Encode exactly 5 distinct card ids as a 30-bit hand."""
    if len(cards) != HAND_SIZE:
        raise ValueError(f"A hand has {HAND_SIZE} cards, got {len(cards)}")
    codes = sorted(encode_card(c) for c in cards)
    for a, b in zip(codes, codes[1:]):
        if a == b:
            raise ValueError(f"Duplicate card in hand: {decode_card(a)}")
    return pack_sorted(codes)


def _unchecked_members(hand):
    # Only for hands this package produced itself (the rank table builder).
    return (
        hand & CARD_MASK,
        (hand >> 6) & CARD_MASK,
        (hand >> 12) & CARD_MASK,
        (hand >> 18) & CARD_MASK,
        (hand >> 24) & CARD_MASK,
    )


def hand_members(hand):
    """
    Card codes of an encoded hand, ascending.
    Raises InvalidEncoding unless hand is a legal 30-bit encoding.
    """
    if hand < 0 or hand >> HAND_BITS:
        raise InvalidEncoding(f"Not a hand encoding: {hand:#x}")
    codes = _unchecked_members(hand)
    prev = -1
    for code in codes:
        if code >= NUM_CARDS:
            raise InvalidEncoding(f"Hand {hand:#x} contains unused card code {code}")
        if code <= prev:
            raise InvalidEncoding(f"Hand {hand:#x} is not in canonical order")
        prev = code
    return codes


def decode_hand(hand):
    """Encoded hand -> tuple of 5 card ids in ascending code order."""
    return tuple(decode_card(code) for code in hand_members(hand))
