"""
Summaries of simulation output: normalized scores, mean/variance/standard error,
quantiles, histogram counts, win probability against a fixed score.
"""

import numpy as np

from poker_equity.config import NUM_HANDS

DEFAULT_QUANTILES = (0.05, 0.25, 0.5, 0.75, 0.95)


def ranks_of(results):
    return np.fromiter((r.rank for r in results), dtype=np.int64, count=len(results))


def normalized_scores(results):
    """Ranks scaled to [0, 1]; 1.0 is a royal flush."""
    return ranks_of(results) / (NUM_HANDS - 1)


def summarize(results, quantiles=DEFAULT_QUANTILES):
    """
    Mean, variance, std and standard error of normalized scores, plus quantiles.
    Exhaustive results give the exact distribution, sampled results an estimate.
    """
    if len(results) == 0:
        raise ValueError("No results to summarize")
    scores = normalized_scores(results)
    n = len(scores)
    var = float(scores.var(ddof=1)) if n > 1 else 0.0
    std = float(np.sqrt(var))
    return {
        "count": n,
        "mean": float(scores.mean()),
        "var": var,
        "std": std,
        "stderr": std / np.sqrt(n),
        "quantiles": dict(zip(quantiles, np.quantile(scores, quantiles).tolist())),
    }


def win_probability(my_rank, results):
    """Share of results that rank strictly below my_rank, e.g. an opponent's distribution."""
    if len(results) == 0:
        raise ValueError("No results to compare against")
    return float(np.mean(ranks_of(results) < my_rank))


def score_histogram(results, bins=20):
    """(counts, edges) of normalized scores over [0, 1]."""
    return np.histogram(normalized_scores(results), bins=bins, range=(0.0, 1.0))
