"""
Equity simulation: complete a partial hand from the residual deck and score
every completion, either by random sampling or by enumerating all draws.
Draws are independent, so chunks of them run on a thread pool that shares the
read-only rank index and deck; each chunk has its own random source.
"""

import random
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations
from math import comb

import numpy as np

from poker_equity.config import (
    DEFAULT_TRIALS,
    EXHAUSTIVE_THRESHOLD,
    HAND_SIZE,
    MAX_HOLDING,
    SIM_CHUNK_SIZE,
    SIM_WORKERS,
)
from poker_equity.simulation.best_hand import best_hand
from poker_equity.simulation.model import SimResult


class SimulationError(ValueError):
    """Partial hand and residual deck cannot be simulated."""


def chunk_seeds(seed, n):
    """
    One independent 64-bit seed per chunk, spawned from `seed`.
    Chunk i gets the same seed however many chunks there are, and runs with
    different seeds never share a stream. seed=None draws OS entropy.
    """
    children = np.random.SeedSequence(seed).spawn(n)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


class EquitySimulator:
    """
    player: PartialHand to complete.
    deck: ResidualDeck to draw the player's undrawn cards from.
    index: RankIndex used to score completions.
    """

    def __init__(
        self,
        index,
        player,
        deck,
        workers=SIM_WORKERS,
        exhaustive_threshold=EXHAUSTIVE_THRESHOLD,
        chunk_size=SIM_CHUNK_SIZE,
    ):
        self.index = index
        self.player = player
        self.deck = deck
        self.workers = max(1, workers)
        self.exhaustive_threshold = exhaustive_threshold
        self.chunk_size = max(1, chunk_size)

    def validate(self):
        """Raise SimulationError if no batch can be run for the current inputs."""
        drawn = self.player.drawn
        undrawn = self.player.undrawn
        total = len(drawn) + undrawn
        if not HAND_SIZE <= total <= MAX_HOLDING:
            raise SimulationError(
                f"Completed hand must have {HAND_SIZE}-{MAX_HOLDING} cards, "
                f"got {len(drawn)} drawn + {undrawn} undrawn"
            )
        if undrawn > len(self.deck):
            raise SimulationError(
                f"Cannot draw {undrawn} cards from a residual deck of {len(self.deck)}"
            )
        overlap = set(drawn).intersection(self.deck.cards)
        if overlap:
            raise SimulationError(f"Drawn cards still in residual deck: {sorted(overlap)}")

    def n_possibilities(self):
        """Number of distinct draws for the undrawn cards."""
        return comb(len(self.deck), self.player.undrawn)

    def prefers_exhaustive(self):
        return self.n_possibilities() <= self.exhaustive_threshold

    def _score(self, sampled):
        hand, rank = best_hand(list(sampled) + self.player.drawn, self.index)
        return SimResult(tuple(sampled), hand, rank)

    def run_sample(self, rng=random):
        """Score one uniform draw of the undrawn cards."""
        return self._score(rng.sample(self.deck.cards, self.player.undrawn))

    def _random_chunk(self, n, seed):
        rng = random.Random(seed)
        return [self.run_sample(rng) for _ in range(n)]

    def _exhaustive_chunk(self, draws):
        return [self._score(draw) for draw in draws]

    def _map(self, fn, *chunks):
        results = []
        if self.workers == 1:
            for args in zip(*chunks):
                results.extend(fn(*args))
            return results
        with ThreadPoolExecutor(max_workers=self.workers) as ex:
            for part in ex.map(fn, *chunks):
                results.extend(part)
        return results

    def run_random(self, trials=DEFAULT_TRIALS, seed=None):
        """
        `trials` independent uniform draws without replacement.
        With a seed the output is reproducible for a given chunk size.
        """
        self.validate()
        if trials < 0:
            raise SimulationError(f"trials must be >= 0, got {trials}")
        full, rest = divmod(trials, self.chunk_size)
        sizes = [self.chunk_size] * full + ([rest] if rest else [])
        seeds = chunk_seeds(seed, len(sizes))
        return self._map(self._random_chunk, sizes, seeds)

    def run_exhaustive(self):
        """Every possible draw of the undrawn cards: the exact distribution."""
        self.validate()
        if self.player.undrawn == 0:
            return [self._score(())]
        draws = list(combinations(self.deck.cards, self.player.undrawn))
        chunks = [draws[i:i + self.chunk_size] for i in range(0, len(draws), self.chunk_size)]
        return self._map(self._exhaustive_chunk, chunks)

    def run(self, trials=DEFAULT_TRIALS, exhaustive=None, seed=None):
        """
        Exhaustive when requested, or when exhaustive is None and the number of
        draws is within exhaustive_threshold; random sampling otherwise.
        """
        if exhaustive is None:
            exhaustive = self.prefers_exhaustive()
        if exhaustive:
            return self.run_exhaustive()
        return self.run_random(trials, seed=seed)
