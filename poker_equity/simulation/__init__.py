"""
Simulation: partial hands, best-of-N selection, equity sampling, result statistics.
"""

from poker_equity.simulation.model import PartialHand, ResidualDeck, SimResult
from poker_equity.simulation.best_hand import best_hand
from poker_equity.simulation.montecarlo import EquitySimulator, SimulationError
from poker_equity.simulation.stats import (
    normalized_scores,
    ranks_of,
    score_histogram,
    summarize,
    win_probability,
)

__all__ = [
    "PartialHand",
    "ResidualDeck",
    "SimResult",
    "best_hand",
    "EquitySimulator",
    "SimulationError",
    "normalized_scores",
    "ranks_of",
    "score_histogram",
    "summarize",
    "win_probability",
]
