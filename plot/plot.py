from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from game.ruleset import DEFAULT_RULES


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None:
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def turn_distribution(results, max_attempts: int) -> np.ndarray:
    """
    Count won games per number of turns.

    Returns:
      array of length max_attempts, index 0 = games won on turn 1
    """
    counts = np.zeros(max_attempts, dtype=np.int64)
    for r in results:
        if r.won and 1 <= r.turns <= max_attempts:
            counts[r.turns - 1] += 1
    return counts


def plot_turn_distribution(results, out_path, rules=None) -> Path:
    """
    Save a bar chart of how many turns the computer needed to win.

    Args:
        results: list of GameResult from solver.simulation
        out_path: PNG file to write
        rules: Ruleset used for the games (turn limit)
    Returns:
        Path of the written file.
    """
    rules = rules or DEFAULT_RULES
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    counts = turn_distribution(results, rules.max_attempts)
    x = np.arange(1, rules.max_attempts + 1)
    n_won = int(counts.sum())
    n_lost = len(results) - n_won

    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"

    plt.figure(figsize=(10, 6))
    plt.bar(x, counts, label="Games won")
    _annotate_points(plt.gca(), x.tolist(), counts.tolist(), fmt="{:d}", dy=6)
    if n_won > 0:
        avg = float(np.sum(x * counts) / n_won)
        plt.axvline(avg, linestyle="--", color="gray", label=f"Average ({avg:.2f})")

    plt.title(
        f"Turns to crack the code ({rules.code_length} pegs, {rules.num_colors} colors)\n"
        f"Games: {len(results)}, won: {n_won}, lost: {n_lost}"
    )
    plt.xlabel("Turn Number")
    plt.ylabel("Games won")
    plt.xticks(x)
    plt.grid(True, axis="y")
    plt.legend()
    plt.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close()

    return out_path
