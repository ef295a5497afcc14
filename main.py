from __future__ import annotations

import argparse
import random

from game.ruleset import DEFAULT_RULES
from plot.plot import plot_turn_distribution
from solver.simulation import print_summary, simulate_games, summarize
from ui.cli import gameloop
from ui.console import log_print


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Play Mastermind against the computer, in either direction."
    )
    ap.add_argument("--mode", type=int, choices=(1, 2), default=None,
                    help="1: you guess the computer's code, 2: the computer guesses yours. "
                         "Default: ask.")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the random source (codes and computer guesses).")
    ap.add_argument("--delay", type=float, default=None,
                    help=f"Seconds between computer turns (default {DEFAULT_RULES.think_delay}).")
    ap.add_argument("--emoji", action="store_true",
                    help="Render the board as a peg grid.")
    ap.add_argument("--simulate", type=int, default=None, metavar="N",
                    help="Auto-play N computer games against random codes and print statistics.")
    ap.add_argument("--plot", default=None, metavar="PATH",
                    help="With --simulate: save the turns-to-win chart as PNG.")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.delay is not None and args.delay < 0:
        ap.error("--delay must not be negative")
    if args.simulate is not None and args.simulate <= 0:
        ap.error("--simulate needs a positive number of games")
    if args.plot and args.simulate is None:
        ap.error("--plot requires --simulate")

    rules = DEFAULT_RULES
    if args.delay is not None:
        rules = rules.with_overrides(think_delay=args.delay)
    rng = random.Random(args.seed)

    if args.simulate is not None:
        results = simulate_games(args.simulate, rules, rng, progress=True)
        print_summary(summarize(results))
        if args.plot:
            out = plot_turn_distribution(results, args.plot, rules)
            log_print(f"Saved plot to {out}")
        return 0

    gameloop(rules, mode=args.mode, rng=rng, emoji=args.emoji)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
