from .feedback import Feedback
from .guess import Guess
from .ruleset import DEFAULT_RULES, Ruleset
from .secret_code import Code


class Board:
    """Game board: holds the secret code, the turn log and win/loss state."""

    def __init__(self, secret_code: Code, rules: Ruleset = None):
        """Initialize the board for one game against the given code."""
        self.rules = rules or secret_code.rules or DEFAULT_RULES
        self.secret_code = secret_code
        self.guesses: list[Guess] = []
        self.current_attempt = 0
        self.max_attempts = self.rules.max_attempts
        self.is_over = False
        self.is_won = False

    def make_guess(self, guess_input) -> Feedback:
        """
        Validate a guess, evaluate it against the secret and record the turn.

        Raises:
            InvalidCodeError: If the guess breaks the rules.
        """
        new_guess = Guess(guess_input, rules=self.rules)
        new_guess.validate(strict=True)

        feedback = self.secret_code.evaluate(new_guess)
        self._append(new_guess, feedback)
        return feedback

    def record(self, guess_sequence, feedback: Feedback):
        """Record a turn that was already evaluated elsewhere."""
        self._append(Guess(guess_sequence, rules=self.rules), feedback)

    def _append(self, guess: Guess, feedback: Feedback):
        guess.apply_feedback(feedback)
        self.guesses.append(guess)
        self.current_attempt += 1
        self.check_game_over()

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(guess.get_guess(), guess.get_feedback()) for guess in self.guesses]

    def check_game_over(self):
        """Check if the game is finished (win or all attempts used)."""
        last_guess = self.guesses[-1]
        if self.secret_code.matches_exactly(last_guess):
            self.is_over = True
            self.is_won = True
            return

        if self.remaining_attempts() <= 0:
            self.is_over = True

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def render(self, emoji: bool = False):
        """Print the board: one line per turn, or the peg grid with emoji=True."""
        if emoji:
            self._render_grid()
            return

        print("--- BOARD ---")
        if not self.guesses:
            print("No guesses yet.")
        for i, guess in enumerate(self.guesses, start=1):
            print(f"Turn {i}: {guess.as_string()} | {guess.get_feedback().as_text()}")
        print("-------------")

    def _render_grid(self):
        colors = self.rules.emoji_map
        width = self.rules.code_length * 2
        title = "| +++++++++++++ Mastermind ++++++++++++ |"
        colums = "| ++++ Guesses ++++ | ++++ Feedback +++ |"
        line = "+----" * width + "+"

        print(line)
        print(title)
        print(line)
        print(colums)
        print(line)
        for guess in self.guesses:
            attempt_line = ""
            for c in guess.get_guess():
                attempt_line += "| " + colors.get(c, c) + " "
            black, white = guess.get_feedback()
            attempt_line += ("| " + colors["BK"] + " ") * black
            attempt_line += ("| " + colors["W"] + " ") * white
            attempt_line += "|    " * max(0, self.rules.code_length - black - white)
            print(attempt_line + "|")
            print(line)
