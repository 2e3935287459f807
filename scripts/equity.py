#!/usr/bin/env python3
"""
Estimate the score distribution of a partially known hand.
Usage:
  python scripts/equity.py --hand "7h Qd" --board "2h 2d 8c Ks Qh"
  python scripts/equity.py --hand "7h Qd" --board "2h 2d 8c" --unknown 2 --trials 50000
  python scripts/equity.py --hand "7h Qd" --board "2h 2d 8c Ks Qh" --vs-random   # likelihood of winning
"""

import os
import sys
import argparse
import time

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_equity.codec import format_cards, parse_cards, decode_hand
from poker_equity.config import DEFAULT_TRIALS, MAX_HOLDING, SIM_WORKERS
from poker_equity.lookup import load_rank_index, hand_description
from poker_equity.simulation import (
    EquitySimulator,
    PartialHand,
    ResidualDeck,
    summarize,
    win_probability,
)


def print_summary(title, results):
    s = summarize(results)
    print(f"{title}: {s['count']} completions")
    print(f"  mean {s['mean']:.4f} | std {s['std']:.4f} | stderr {s['stderr']:.5f}")
    print("  quantiles " + ", ".join(f"{q:.0%}:{v:.4f}" for q, v in s["quantiles"].items()))


def main():
    ap = argparse.ArgumentParser(description="Equity of a partially known poker hand")
    ap.add_argument("--hand", required=True, help='Your known cards, e.g. "7h Qd"')
    ap.add_argument("--board", default="", help="Known community cards")
    ap.add_argument("--unknown", type=int, default=None,
                    help="Cards still to come to your hand (default: fill up to 7)")
    ap.add_argument("--discard", default="", help="Cards known to be out of play")
    ap.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--exhaustive", action="store_true", help="Enumerate every draw")
    mode.add_argument("--random", action="store_true", help="Always sample")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", type=int, default=SIM_WORKERS)
    ap.add_argument("--vs-random", action="store_true",
                    help="With a complete hand: likelihood of beating one random opponent")
    ap.add_argument("--table", default=None, help="Rank table path (default data/ordered_hands.bin)")
    args = ap.parse_args()

    exhaustive = True if args.exhaustive else (False if args.random else None)

    try:
        hand = parse_cards(args.hand)
        board = parse_cards(args.board)
        discard = parse_cards(args.discard)
        known = hand + board
        unknown = args.unknown if args.unknown is not None else max(0, MAX_HOLDING - len(known))
        player = PartialHand(known, undrawn=unknown)
        deck = ResidualDeck.excluding(known + discard)
        if len(set(known + discard)) != len(known) + len(discard):
            raise ValueError("Discarded cards overlap known cards")
        if args.vs_random and player.undrawn:
            raise ValueError("--vs-random needs your hand fully known")
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    index = load_rank_index(args.table)
    sim = EquitySimulator(index, player, deck, workers=args.workers)

    print(f"Hand: {format_cards(player.drawn)} + {player.undrawn} unknown "
          f"({sim.n_possibilities()} possible draws, residual deck {len(deck)})")
    start = time.time()
    try:
        results = sim.run(trials=args.trials, exhaustive=exhaustive, seed=args.seed)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    print(f"Time: {time.time() - start:.2f}s")
    print_summary("You", results)

    if player.undrawn == 0:
        best = results[0]
        print(f"Best hand: {format_cards(decode_hand(best.best_hand))} "
              f"({hand_description(best.rank)}, rank {best.rank})")

    if args.vs_random:
        opponent = PartialHand(board, undrawn=MAX_HOLDING - len(board))
        opp_sim = EquitySimulator(index, opponent, deck, workers=args.workers)
        opp_results = opp_sim.run(trials=args.trials, exhaustive=exhaustive, seed=args.seed)
        print_summary("Random opponent", opp_results)
        print(f"Likelihood of winning: {win_probability(results[0].rank, opp_results):.4f}")


if __name__ == "__main__":
    main()
