"""
Card ids and card strings.
Cards are integers 0-51: suit = card // 13, rank = card % 13 (0=2 .. 12=A).
Suits are 0=clubs, 1=diamonds, 2=hearts, 3=spades.
"""

from poker_equity.config import NUM_CARDS, NUM_RANKS, NUM_SUITS

RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "cdhs"


def card_rank(card):
    return card % NUM_RANKS


def card_suit(card):
    return card // NUM_RANKS


def card_to_id(suit, rank):
    """Convert suit (0-3) and rank (0-12) to card id (0-51)."""
    if not (0 <= suit < NUM_SUITS and 0 <= rank < NUM_RANKS):
        raise ValueError(f"Invalid suit/rank: {suit}/{rank}")
    return suit * NUM_RANKS + rank


def full_deck():
    """All 52 card ids, clubs first."""
    return list(range(NUM_CARDS))


def parse_card(card_str):
    """
    Parse a card string like "As", "7h" or "Td" to a card id.
    "10" is accepted for ten.
    """
    text = card_str.strip()
    if text[:2] == "10":
        text = "T" + text[2:]
    if len(text) != 2:
        raise ValueError(f"Invalid card string: {card_str!r}")
    rank_char, suit_char = text[0].upper(), text[1].lower()
    if rank_char not in RANK_CHARS or suit_char not in SUIT_CHARS:
        raise ValueError(f"Invalid card string: {card_str!r}")
    return card_to_id(SUIT_CHARS.index(suit_char), RANK_CHARS.index(rank_char))


def parse_cards(cards_str):
    """
    Parse a whitespace separated list like "7h Qd 2c".
    Duplicates are rejected.
    """
    cards = []
    for token in cards_str.split():
        card = parse_card(token)
        if card in cards:
            raise ValueError(f"Duplicate card: {token!r}")
        cards.append(card)
    return cards


def format_card(card):
    if not 0 <= card < NUM_CARDS:
        raise ValueError(f"Invalid card id: {card}")
    return RANK_CHARS[card_rank(card)] + SUIT_CHARS[card_suit(card)]


def format_cards(cards):
    return " ".join(format_card(c) for c in cards)
