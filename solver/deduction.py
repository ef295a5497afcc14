from __future__ import annotations

import random
from typing import Callable

from game.feedback import Feedback
from game.ruleset import DEFAULT_RULES, Ruleset
from ui.console import log_print


class ComputerPlayer:
    """
    Rule-based code breaker.

    Keeps a small belief state about the secret code and refines it after
    every feedback. This is a heuristic, not a constraint solver: guesses are
    only consistent with what `confirmed` and `excluded` encode, not with the
    whole history.

    Attributes:
        rules: Ruleset
        rng: random source with choice()
        announce: callable used to report conclusions on the console
        confirmed: list[str | None] - colors known to be correct per position
        excluded: list[str] - colors proven absent from the code
        candidates: list[str] - colors not yet excluded, in alphabet order
        history: list[tuple[list[str], Feedback]] - past guesses and feedback

    Methods:
        make_guess(): Builds the next guess from the belief state.
        learn_from_feedback(guess, feedback): Updates the belief state.
    """

    def __init__(
        self,
        rules: Ruleset | None = None,
        rng=None,
        announce: Callable[[str], None] | None = log_print,
    ):
        self.rules = rules or DEFAULT_RULES
        self.rng = rng or random
        self.announce = announce

        self.confirmed: list[str | None] = [None] * self.rules.code_length
        self.excluded: list[str] = []
        self.candidates: list[str] = list(self.rules.colors)
        self.history: list[tuple[list[str], Feedback]] = []

    def make_guess(self) -> list[str]:
        """
        Build the next guess.

        Confirmed positions are copied verbatim. Every other position gets a
        random candidate color not yet used in this guess; when none is
        left, any color of the alphabet is used.

        Returns:
            list[str]: A guess of code_length valid colors.
        """
        guess = list(self.confirmed)

        for position in range(self.rules.code_length):
            if self.is_confirmed(position):
                continue

            placed = {c for c in guess if c is not None}
            available = [
                c
                for c in self.candidates
                if c not in placed and c not in self.excluded
            ]
            if available:
                guess[position] = self.rng.choice(available)
            else:
                guess[position] = self.rng.choice(self.rules.colors)

        return guess

    def learn_from_feedback(self, guess, feedback) -> None:
        """
        Update the belief state with the feedback for a guess.

        Args:
            guess: Sequence of colors that was scored.
            feedback: (black, white) for that guess.
        """
        guess = list(guess)
        feedback = Feedback(*feedback)
        self.history.append((guess, feedback))

        # No color matches at all: drop every guessed color.
        if feedback.total == 0:
            for color in guess:
                if color not in self.excluded:
                    self.excluded.append(color)
            self.candidates = [c for c in self.candidates if c not in guess]
            return

        # Fully correct guess.
        if feedback.black == self.rules.code_length:
            for position, color in enumerate(guess):
                self._confirm(position, color)

        if feedback.black > 0:
            self._identify_some_correct_positions(guess, feedback)

    def is_confirmed(self, position: int) -> bool:
        return self.confirmed[position] is not None

    def _confirm(self, position: int, color: str) -> None:
        # Confirmed slots are never overwritten.
        if self.confirmed[position] is None:
            self.confirmed[position] = color

    def _identify_some_correct_positions(self, guess, feedback: Feedback) -> None:
        """
        Compare the guess with the one before it. If exactly one position
        changed and the black count moved, the color that kept the higher
        count at that position is taken as correct.

        Only the last two guesses are compared, and changes in more than
        one position are ignored even if they could be explained.
        """
        if len(self.history) < 2:
            return

        prev_guess, prev_feedback = self.history[-2]

        differences = [
            i for i in range(self.rules.code_length) if guess[i] != prev_guess[i]
        ]
        if len(differences) != 1:
            return

        changed_pos = differences[0]
        if feedback.black > prev_feedback.black:
            color = guess[changed_pos]
        elif feedback.black < prev_feedback.black:
            color = prev_guess[changed_pos]
        else:
            return

        if self.announce is not None:
            self.announce(
                f"Computer thinks: '{color}' belongs at position {changed_pos + 1}."
            )
        self._confirm(changed_pos, color)
