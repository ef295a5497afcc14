from typing import NamedTuple


class Feedback(NamedTuple):
    """
    Result of scoring one guess against the secret code.

    Attributes:
        black (int): Pegs for a correct color in the correct position.
        white (int): Pegs for a correct color in the wrong position.
    """

    black: int
    white: int

    @property
    def total(self) -> int:
        """Number of guessed colors that occur in the code at all."""
        return self.black + self.white

    def as_text(self) -> str:
        """
        Return the feedback as shown on the board
        (e.g. '1 black peg(s), 2 white peg(s).').
        """
        return f"{self.black} black peg(s), {self.white} white peg(s)."

    def __str__(self):
        return self.as_text()
