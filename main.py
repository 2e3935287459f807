"""
Main entry point.

Usage:
    python main.py build        # Build data/ordered_hands.bin if missing
    python main.py demo         # 7h Qd on 2h 2d 8c Ks Qh vs one random opponent
"""

import sys
import time


def run_build():
    """Generate the rank table (skipped when it already exists)."""
    from poker_equity.table_build import ensure_rank_table

    start = time.time()
    path = ensure_rank_table()
    print(f"Rank table ready: {path} ({time.time() - start:.1f}s)")


def run_demo():
    """Score a known river hand and estimate the chance a random opponent is beaten."""
    from poker_equity.codec import parse_cards, format_cards, decode_hand
    from poker_equity.config import NUM_HANDS
    from poker_equity.lookup import load_rank_index, hand_description
    from poker_equity.simulation import (
        EquitySimulator,
        PartialHand,
        ResidualDeck,
        best_hand,
        summarize,
        win_probability,
    )

    print("=" * 60)
    print("Equity demo: 7h Qd on 2h 2d 8c Ks Qh")
    print("=" * 60)

    my_cards = parse_cards("7h Qd")
    community = parse_cards("2h 2d 8c Ks Qh")

    start = time.time()
    index = load_rank_index()
    print(f"Rank index loaded: {len(index)} hands ({time.time() - start:.1f}s)")

    hand, my_score = best_hand(my_cards + community, index)
    print(f"Your hand: {format_cards(decode_hand(hand))} ({hand_description(my_score)})")
    print(f"Your score: {my_score / (NUM_HANDS - 1):.4f}")

    opponent = PartialHand(community, undrawn=2)
    deck = ResidualDeck.excluding(my_cards + community)
    sim = EquitySimulator(index, opponent, deck)
    start = time.time()
    results = sim.run(trials=10_000, seed=0)
    print(f"Opponent completions: {len(results)} ({time.time() - start:.1f}s)")
    print(f"Opponent mean score: {summarize(results)['mean']:.4f}")
    print(f"Likelihood of winning: {win_probability(my_score, results):.4f}")


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "demo"

    modes = {
        "build": run_build,
        "demo": run_demo,
    }

    if mode in modes:
        modes[mode]()
    else:
        print(f"Unknown mode: {mode}")
        print(f"Available: {', '.join(modes.keys())}")
