import random
from typing import Sequence

from .feedback import Feedback
from .ruleset import DEFAULT_RULES, Ruleset


class InvalidCodeError(ValueError):
    """Raised when a code or guess has the wrong length or unknown colors."""


def normalize_sequence(raw) -> list[str]:
    """
    Turn raw player input into a list of upper-case color symbols.

    Accepts a list of symbols, a space separated string ("r g b y")
    or a compact string ("RGBY").

    Args:
        raw (list[str] | str | None): The raw input.
    Returns:
        list[str]: The normalized sequence (empty for None).
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        tokens = raw.split()
        # "RGBY" typed without spaces
        if len(tokens) == 1:
            tokens = list(tokens[0])
        return [t.upper() for t in tokens]
    return [str(c).upper() for c in raw]


def validate_sequence(
    sequence: Sequence[str], rules: Ruleset = DEFAULT_RULES, strict: bool = True
) -> bool:
    """
    Check a sequence against the rules (length and valid colors).

    Args:
        sequence (Sequence[str]): The normalized sequence.
        rules (Ruleset): The ruleset to validate against.
        strict (bool): If True, raise InvalidCodeError on failure.
    Returns:
        bool: True if valid; False if invalid and strict is False.
    """

    def fail(msg: str) -> bool:
        if strict:
            raise InvalidCodeError(msg)
        return False

    if len(sequence) != rules.code_length:
        return fail(
            f"Code length must be {rules.code_length}, "
            f"but got {len(sequence)}."
        )

    for color in sequence:
        if color not in rules.colors:
            allowed = ", ".join(rules.colors)
            return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

    return True


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (tuple[str, ...]): The colors of the code, fixed once set.
        rules (Ruleset): The ruleset for validation.
    """

    def __init__(self, sequence, rules: Ruleset = None):
        """
        Initialize a Code instance from an already chosen sequence.

        Args:
            sequence (list[str] | str): The color symbols of the code.
            rules (Ruleset or None): Defines length and colors.
        Raises:
            InvalidCodeError: If the sequence breaks the rules.
        """
        self.rules = rules or DEFAULT_RULES
        self._sequence = tuple(normalize_sequence(sequence))
        self.validate()

    @property
    def sequence(self) -> tuple[str, ...]:
        return self._sequence

    @classmethod
    def generate(cls, rules: Ruleset = None, rng=None) -> "Code":
        """
        Generate a random code, sampling every position independently.

        Args:
            rules (Ruleset or None): The ruleset to follow.
            rng: Random source with choices(); defaults to the
            random module.
        Returns:
            Code: The new secret code.
        """
        rules = rules or DEFAULT_RULES
        rng = rng or random

        sequence = rng.choices(rules.colors, k=rules.code_length)
        return cls(sequence, rules=rules)

    @classmethod
    def from_input(cls, raw, rules: Ruleset = None) -> "Code":
        """
        Build a code from player input, e.g. "R G B Y".

        Raises:
            InvalidCodeError: If the input is not a valid code.
        """
        return cls(raw, rules=rules)

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length and colors).

        Args:
            strict (bool): If True, raise InvalidCodeError with an explanatory
            message when validation fails. If False, return False on failure.

        Returns:
            bool: True if the code sequence is valid; False if invalid and
            strict is False.
        """
        return validate_sequence(self._sequence, self.rules, strict=strict)

    def evaluate(self, guess) -> Feedback:
        """
        Compare this secret code with a guess and compute
        Mastermind-style feedback.

        Args:
            guess (Guess | Code | Sequence[str]): A validated guess of the
            same length as the code.

        Returns:
            Feedback: (black, white)
            black: number of pegs with correct color in the correct position,
            white: number of pegs with correct color but in the wrong
            position.

        Notes:
            Positions counted as black are excluded from white-counting to
            avoid double-counting, and each code position gives at most one
            white peg.
        """
        guess_sequence = _symbols_of(guess)

        black = 0
        white = 0

        remaining_code = list(self._sequence)
        remaining_guess = list(guess_sequence)

        # First pass: color and position.
        for i in range(len(self._sequence)):
            if self._sequence[i] == guess_sequence[i]:
                black += 1
                remaining_guess[i] = None
                remaining_code[i] = None

        # Second pass: color only, consuming the matched code position.
        for color in remaining_guess:
            if color is not None and color in remaining_code:
                white += 1
                remaining_code[remaining_code.index(color)] = None

        return Feedback(black, white)

    def matches_exactly(self, guess) -> bool:
        """Return True if the guess equals the code position by position."""
        return tuple(_symbols_of(guess)) == self._sequence

    def as_string(self, sep: str = " "):
        """
        Return a string representation of the code (e.g. 'R G B Y').
        Returns:
            str: The code as a string.
        """
        return sep.join(self._sequence)

    def __eq__(self, other):
        if isinstance(other, Code):
            return self._sequence == other._sequence
        if isinstance(other, (list, tuple)):
            return self._sequence == tuple(other)
        return False

    def __hash__(self):
        return hash(self._sequence)

    def __repr__(self):
        return f"Code({self.as_string('')!r})"

    def __str__(self):
        return self.as_string()


def _symbols_of(guess) -> Sequence[str]:
    # Guess and Code both carry a .sequence
    return getattr(guess, "sequence", guess)
