"""
Tests for partial hands, the residual deck and the equity simulator.
"""

from math import comb, sqrt

import numpy as np
import pytest

from poker_equity.codec.cards import full_deck, parse_cards
from poker_equity.simulation import (
    EquitySimulator,
    PartialHand,
    ResidualDeck,
    SimulationError,
    best_hand,
    ranks_of,
)
from poker_equity.simulation.montecarlo import chunk_seeds


def make_sim(index, drawn_text, undrawn, **kwargs):
    drawn = parse_cards(drawn_text)
    player = PartialHand(drawn, undrawn=undrawn)
    deck = ResidualDeck.excluding(drawn)
    return EquitySimulator(index, player, deck, **kwargs)


class TestPartialHand:
    """PartialHand construction and reveal."""

    def test_reveal_moves_cards(self):
        hand = PartialHand(parse_cards("7h Qd"), undrawn=5)
        hand.reveal(parse_cards("2h 2d 8c"))
        assert hand.drawn == parse_cards("7h Qd 2h 2d 8c")
        assert hand.undrawn == 2
        assert hand.total == 7

    def test_reveal_too_many(self):
        hand = PartialHand(parse_cards("7h Qd"), undrawn=1)
        with pytest.raises(ValueError):
            hand.reveal(parse_cards("2h 2d"))
        assert hand.drawn == parse_cards("7h Qd")
        assert hand.undrawn == 1

    def test_reveal_duplicate_leaves_hand_unchanged(self):
        hand = PartialHand(parse_cards("7h Qd"), undrawn=3)
        with pytest.raises(ValueError):
            hand.reveal(parse_cards("2h 7h"))
        assert hand.drawn == parse_cards("7h Qd")
        assert hand.undrawn == 3

    def test_too_many_cards(self):
        with pytest.raises(ValueError):
            PartialHand(parse_cards("7h Qd 2h 2d 8c Ks"), undrawn=2)

    def test_negative_undrawn(self):
        with pytest.raises(ValueError):
            PartialHand(parse_cards("7h Qd"), undrawn=-1)

    def test_duplicate_drawn(self):
        with pytest.raises(ValueError):
            PartialHand([3, 3], undrawn=3)


class TestResidualDeck:
    """ResidualDeck construction and removal."""

    def test_excluding(self):
        known = parse_cards("7h Qd 2h")
        deck = ResidualDeck.excluding(known)
        assert len(deck) == 49
        assert all(c not in deck for c in known)

    def test_full(self):
        assert list(ResidualDeck.full()) == full_deck()

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError):
            ResidualDeck([1, 2, 2])

    def test_remove(self):
        deck = ResidualDeck.full()
        deck.remove(parse_cards("As Kd"))
        assert len(deck) == 50
        assert parse_cards("As")[0] not in deck

    def test_remove_all_or_nothing(self):
        deck = ResidualDeck.excluding(parse_cards("As"))
        with pytest.raises(ValueError, match="As"):
            deck.remove(parse_cards("Kd As"))
        assert len(deck) == 51
        assert parse_cards("Kd")[0] in deck


class TestExhaustive:
    """Exhaustive enumeration of draws."""

    def test_nothing_to_draw(self, rank_index):
        cards = "7h Qd 2h 2d 8c Ks Qh"
        sim = make_sim(rank_index, cards, 0)
        results = sim.run_exhaustive()
        assert len(results) == 1
        assert results[0].sampled == ()
        assert (results[0].best_hand, results[0].rank) == best_hand(parse_cards(cards), rank_index)

    def test_every_draw_once(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h 2d 8c", 2, workers=4, chunk_size=100)
        results = sim.run_exhaustive()
        assert sim.n_possibilities() == comb(47, 2)
        assert len(results) == comb(47, 2)
        assert len({frozenset(r.sampled) for r in results}) == comb(47, 2)

    def test_parallel_matches_serial(self, rank_index):
        serial = make_sim(rank_index, "Ah Kh 2c 7d", 2, workers=1, chunk_size=50).run_exhaustive()
        parallel = make_sim(rank_index, "Ah Kh 2c 7d", 2, workers=4, chunk_size=50).run_exhaustive()
        assert serial == parallel

    def test_drawing_whole_hand(self, rank_index):
        player = PartialHand([], undrawn=5)
        deck = ResidualDeck(parse_cards("2c 3c 4c 5c 6c 7c"))
        results = EquitySimulator(rank_index, player, deck).run_exhaustive()
        assert len(results) == 6
        assert max(r.rank for r in results) == rank_index.rank_of(parse_cards("3c 4c 5c 6c 7c"))


class TestRandom:
    """Random sampling of draws."""

    def test_trial_count(self, rank_index):
        sim = make_sim(rank_index, "7h Qd", 5, chunk_size=300)
        assert len(sim.run_random(1000, seed=1)) == 1000
        assert sim.run_random(0) == []

    def test_samples_come_from_deck(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h", 4)
        drawn = set(sim.player.drawn)
        for result in sim.run_random(500, seed=2):
            assert len(result.sampled) == 4
            assert len(set(result.sampled)) == 4
            assert all(c in sim.deck and c not in drawn for c in result.sampled)

    def test_seed_reproducible(self, rank_index):
        a = make_sim(rank_index, "7h Qd 2h 2d 8c", 2, workers=1, chunk_size=64).run_random(500, seed=9)
        b = make_sim(rank_index, "7h Qd 2h 2d 8c", 2, workers=4, chunk_size=64).run_random(500, seed=9)
        assert a == b

    def test_chunk_seeds(self):
        assert chunk_seeds(5, 2) == chunk_seeds(5, 4)[:2]
        assert len(set(chunk_seeds(0, 50)) | set(chunk_seeds(1, 50))) == 100

    def test_adjacent_seeds_do_not_overlap(self, rank_index):
        sim = make_sim(rank_index, "7h Qd", 5, workers=1, chunk_size=100)
        first = sim.run_random(200, seed=0)
        second = sim.run_random(200, seed=1)
        assert [r.sampled for r in first[100:]] != [r.sampled for r in second[:100]]

    def test_run_sample(self, rank_index):
        import random

        sim = make_sim(rank_index, "7h Qd 2h 2d 8c", 2)
        result = sim.run_sample(random.Random(0))
        assert len(result.sampled) == 2
        assert result.rank == best_hand(list(result.sampled) + sim.player.drawn, rank_index)[1]

    def test_modes_agree(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h 2d 8c Ks", 1)
        exact = ranks_of(sim.run_exhaustive())
        assert len(exact) == 46
        sampled = ranks_of(sim.run_random(100_000, seed=11))
        stderr = exact.std() / sqrt(len(sampled))
        assert abs(sampled.mean() - exact.mean()) < 5 * stderr
        assert set(np.unique(sampled)) <= set(np.unique(exact))


class TestRun:
    """Mode selection and batch validation."""

    def test_prefers_exhaustive_when_small(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h 2d 8c Ks", 1)
        assert sim.prefers_exhaustive()
        assert len(sim.run(trials=5000)) == 46

    def test_samples_when_large(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h 2d 8c Ks", 1, exhaustive_threshold=10)
        assert not sim.prefers_exhaustive()
        assert len(sim.run(trials=300, seed=0)) == 300

    def test_forced_modes(self, rank_index):
        sim = make_sim(rank_index, "7h Qd 2h 2d 8c Ks", 1)
        assert len(sim.run(trials=300, exhaustive=False, seed=0)) == 300
        assert len(sim.run(trials=300, exhaustive=True)) == 46

    def test_exhausted_deck(self, rank_index):
        player = PartialHand(parse_cards("7h Qd 2h 2d 8c"), undrawn=2)
        deck = ResidualDeck(parse_cards("Ks"))
        sim = EquitySimulator(rank_index, player, deck)
        with pytest.raises(SimulationError):
            sim.run_random(100)
        with pytest.raises(SimulationError):
            sim.run_exhaustive()

    def test_drawn_card_in_deck(self, rank_index):
        player = PartialHand(parse_cards("7h Qd 2h 2d 8c"), undrawn=2)
        sim = EquitySimulator(rank_index, player, ResidualDeck.full())
        with pytest.raises(SimulationError, match="residual deck"):
            sim.run(trials=10)

    def test_too_few_cards(self, rank_index):
        sim = make_sim(rank_index, "7h Qd", 2)
        with pytest.raises(SimulationError):
            sim.run(trials=10)

    def test_negative_trials(self, rank_index):
        sim = make_sim(rank_index, "7h Qd", 5)
        with pytest.raises(SimulationError):
            sim.run_random(-1)

    def test_simulation_error_is_value_error(self):
        assert issubclass(SimulationError, ValueError)
