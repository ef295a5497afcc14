from __future__ import annotations

import random
import time
from dataclasses import dataclass

import numpy as np

from game.board import Board
from game.ruleset import DEFAULT_RULES, Ruleset
from game.secret_code import Code
from solver.deduction import ComputerPlayer
from ui.console import log_print, progress_print


@dataclass(frozen=True)
class GameResult:
    secret: str
    won: bool
    turns: int
    total_time_s: float


def play_computer_game(
    secret: Code, rules: Ruleset | None = None, rng=None
) -> GameResult:
    """
    Let the computer player break one code without pacing or console output.

    Args:
        secret: The code to break.
        rules: Ruleset (turn limit, alphabet).
        rng: Random source for the computer player.
    Returns:
        GameResult for this game.
    """
    rules = rules or secret.rules
    player = ComputerPlayer(rules=rules, rng=rng, announce=None)
    board = Board(secret, rules=rules)

    start_time = time.perf_counter()
    while not board.is_over:
        guess = player.make_guess()
        feedback = secret.evaluate(guess)
        player.learn_from_feedback(guess, feedback)
        board.record(guess, feedback)
    end_time = time.perf_counter()

    return GameResult(
        secret=secret.as_string(""),
        won=board.is_won,
        turns=board.current_attempt,
        total_time_s=end_time - start_time,
    )


def simulate_games(
    n: int,
    rules: Ruleset | None = None,
    rng=None,
    *,
    progress: bool = False,
) -> list[GameResult]:
    """
    Auto-play n games of the computer against random codes.

    Args:
        n: Number of games, must be positive.
        rules: Ruleset for every game.
        rng: Random source for codes and guesses.
        progress: Whether to show a progress line.
    Returns:
        One GameResult per game, in play order.
    """
    if n <= 0:
        raise ValueError(f"Number of games must be positive, got {n}.")

    rules = rules or DEFAULT_RULES
    rng = rng or random

    results = []
    for counter in range(1, n + 1):
        secret = Code.generate(rules, rng)
        results.append(play_computer_game(secret, rules, rng))
        if progress:
            progress_print(f"Progress: {counter}/{n} games")
    if progress:
        log_print(f"Played {n} games.")
    return results


def summarize(results: list[GameResult]) -> dict:
    """
    Returns:
      games, won, win_rate,
      avg/min/max turns over won games (np.nan if no won games),
      avg_total_time_s over all games
    """
    won = np.array([r.won for r in results], dtype=bool)
    turns = np.array([r.turns for r in results], dtype=np.int64)
    total_time = np.array([r.total_time_s for r in results], dtype=np.float64)

    won_turns = turns[won]
    n_won = int(won_turns.size)

    return {
        "games": len(results),
        "won": n_won,
        "win_rate": n_won / len(results) if results else np.nan,
        "avg_turns": float(np.mean(won_turns)) if n_won > 0 else np.nan,
        "min_turns": int(np.min(won_turns)) if n_won > 0 else np.nan,
        "max_turns": int(np.max(won_turns)) if n_won > 0 else np.nan,
        "avg_total_time_s": float(np.mean(total_time)) if results else np.nan,
    }


def print_summary(summary: dict) -> None:
    log_print(
        f"\nGames played: {summary['games']}, "
        f"won: {summary['won']} ({summary['win_rate']:.1%})."
    )
    log_print(f"Average turns over won games: {summary['avg_turns']:.2f} turns.")
    log_print(f"Min turns over won games: {summary['min_turns']} turns.")
    log_print(f"Max turns over won games: {summary['max_turns']} turns.")
    log_print(
        f"Average time per game: {summary['avg_total_time_s'] * 1000:.3f} ms."
    )
