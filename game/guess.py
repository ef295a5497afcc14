from .feedback import Feedback
from .ruleset import DEFAULT_RULES, Ruleset
from .secret_code import normalize_sequence, validate_sequence


class Guess:
    """
        Represents a single guess in the Mastermind game.
    Attributes:
        sequence (list[str]): The guessed sequence of colors.
        rules (Ruleset): The ruleset for validation.
        black_pegs (int | None): Number of correct colors in correct positions.
        white_pegs (int | None): Number of correct colors in wrong positions.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, sequence: list[str] | str | None, rules: Ruleset = None):
        """
        Initialize a Guess instance.
        Args:
            sequence (list[str] | str | None): The guessed sequence.
            rules (Ruleset, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """
        self.sequence = normalize_sequence(sequence)
        self.rules = rules or DEFAULT_RULES
        self.black_pegs = None
        self.white_pegs = None
        self.is_valid = False

        if self.sequence:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules
        (length and valid colors).

        Args:
            strict (bool): If True, raise InvalidCodeError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """
        return validate_sequence(self.sequence, self.rules, strict=strict)

    def apply_feedback(self, feedback: tuple[int, int]):
        """
        Store feedback values after evaluation by the Code.
        Args:
            feedback (tuple[int, int]): (black_pegs, white_pegs)
        """
        self.black_pegs = feedback[0]
        self.white_pegs = feedback[1]

    def get_feedback(self) -> Feedback | None:
        """
        Return the stored feedback, or None if the guess was not scored yet.
        """
        if self.black_pegs is None:
            return None
        return Feedback(self.black_pegs, self.white_pegs)

    def get_guess(self):
        return self.sequence

    def as_string(self, sep: str = " "):
        """
        Return a string representation of the guess (e.g. 'R G B Y').
        Returns:
            str: The guess as a string."""
        return sep.join(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
