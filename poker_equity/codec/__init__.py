"""
Card ids, card strings, and the compact 6-bit card / 30-bit hand encodings.
"""

from poker_equity.codec.cards import (
    card_rank,
    card_suit,
    card_to_id,
    full_deck,
    parse_card,
    parse_cards,
    format_card,
    format_cards,
)
from poker_equity.codec.compact import (
    InvalidEncoding,
    encode_card,
    decode_card,
    encode_hand,
    decode_hand,
    hand_members,
    pack_sorted,
)

__all__ = [
    "card_rank",
    "card_suit",
    "card_to_id",
    "full_deck",
    "parse_card",
    "parse_cards",
    "format_card",
    "format_cards",
    "InvalidEncoding",
    "encode_card",
    "decode_card",
    "encode_hand",
    "decode_hand",
    "hand_members",
    "pack_sorted",
]
