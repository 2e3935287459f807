"""
Simulation inputs and outputs: partial hands, the residual deck, per-draw results.
"""

from poker_equity.codec.cards import format_cards, full_deck
from poker_equity.config import MAX_HOLDING, NUM_CARDS


def _check_cards(cards, what):
    seen = set()
    for c in cards:
        if not 0 <= c < NUM_CARDS:
            raise ValueError(f"Invalid card id in {what}: {c}")
        if c in seen:
            raise ValueError(f"Duplicate card in {what}: {format_cards([c])}")
        seen.add(c)


class PartialHand:
    """
    Cards owned or ownable by one player.
    drawn: known cards (hole + stud + community), at most 7.
    undrawn: number of cards still to be revealed to this player.
    len(drawn) + undrawn never changes; reveal() moves cards across.
    """

    __slots__ = ("drawn", "undrawn")

    def __init__(self, drawn=(), undrawn=0):
        drawn = list(drawn)
        _check_cards(drawn, "drawn cards")
        if undrawn < 0:
            raise ValueError(f"undrawn must be >= 0, got {undrawn}")
        if len(drawn) + undrawn > MAX_HOLDING:
            raise ValueError(
                f"A hand holds at most {MAX_HOLDING} cards, got {len(drawn)} drawn + {undrawn} undrawn"
            )
        self.drawn = drawn
        self.undrawn = undrawn

    @property
    def total(self):
        return len(self.drawn) + self.undrawn

    def reveal(self, cards):
        """Move newly seen cards from undrawn to drawn. All or nothing."""
        cards = list(cards)
        if len(cards) > self.undrawn:
            raise ValueError(f"Cannot reveal {len(cards)} cards, only {self.undrawn} undrawn")
        _check_cards(self.drawn + cards, "revealed cards")
        self.drawn.extend(cards)
        self.undrawn -= len(cards)

    def __repr__(self):
        return f"PartialHand(drawn=[{format_cards(self.drawn)}], undrawn={self.undrawn})"


class ResidualDeck:
    """
    Cards not known to belong to any player or the discard pile.
    Usually (full deck) - (known cards of all players) - (community) - (discards).
    """

    __slots__ = ("cards",)

    def __init__(self, cards):
        cards = tuple(cards)
        _check_cards(cards, "residual deck")
        self.cards = cards

    @classmethod
    def full(cls):
        return cls(full_deck())

    @classmethod
    def excluding(cls, known):
        known = set(known)
        return cls(c for c in full_deck() if c not in known)

    def remove(self, cards):
        """Take cards out of the deck (seen or discarded). All or nothing."""
        cards = list(cards)
        missing = [c for c in cards if c not in self.cards]
        if missing:
            raise ValueError(f"Cards not in residual deck: {format_cards(missing)}")
        _check_cards(cards, "removed cards")
        gone = set(cards)
        self.cards = tuple(c for c in self.cards if c not in gone)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __contains__(self, card):
        return card in self.cards

    def __repr__(self):
        return f"ResidualDeck({len(self.cards)} cards)"


class SimResult:
    """
    One completed hand.
    sampled: the cards drawn for the undrawn slots.
    best_hand: encoded best 5-card hand.
    rank: its absolute rank.
    """

    __slots__ = ("sampled", "best_hand", "rank")

    def __init__(self, sampled, best_hand, rank):
        self.sampled = sampled
        self.best_hand = best_hand
        self.rank = rank

    def __eq__(self, other):
        if not isinstance(other, SimResult):
            return NotImplemented
        return (self.sampled, self.best_hand, self.rank) == (other.sampled, other.best_hand, other.rank)

    def __repr__(self):
        return f"SimResult(sampled=[{format_cards(self.sampled)}], best_hand={self.best_hand:#x}, rank={self.rank})"
