# # Command-line interface (text-based play)

import random
import time

from game.board import Board
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code, InvalidCodeError
from solver.deduction import ComputerPlayer


class ExitGame(Exception):
    """Raised when the player types 'exit' at a prompt."""


def _ask(prompt, input_fn):
    user_input = input_fn(prompt).strip()
    if user_input.upper() == "EXIT":
        raise ExitGame()
    return user_input


def print_welcome(rules):
    colors = ", ".join(rules.colors)
    print("=== Welcome to Mastermind! ===")
    print(f"The available colors are: {colors}.")
    print("Game Rules:")
    print("Black peg = correct color in the correct position.")
    print("White peg = correct color in the wrong position.")
    print(f"You have {rules.max_attempts} turns to crack the code!")
    print("Type 'exit' at any prompt to quit.\n")


def choose_mode(input_fn=input):
    print("Choose your game mode:")
    print("1: You guess the computer's secret code;")
    print("2: The computer guesses your secret code!")

    while True:
        mode = _ask("Either 1 or 2: ", input_fn)
        if mode in ("1", "2"):
            return int(mode)
        print("Please enter either 1 or 2.")


def read_code(rules, input_fn=input, prompt="Enter 4 colors separated by spaces (ex. R G B Y): "):
    """Prompt until the player enters a valid code."""
    while True:
        user_input = _ask(prompt, input_fn)
        try:
            return Code.from_input(user_input, rules=rules)
        except InvalidCodeError as e:
            print(f"Invalid code! {e}")


def play_human_guesses(rules=DEFAULT_RULES, rng=None, input_fn=input, emoji=False):
    """Mode 1: the player breaks a random code. Returns the finished board."""
    print("The computer has created a secret code. Try to crack it!")
    board = Board(Code.generate(rules, rng), rules=rules)

    while not board.is_over:
        print(f"\n--- Turn {board.current_attempt + 1} of {board.max_attempts} ---")

        # Make the guess
        while True:
            user_input = _ask("Player, enter your guess (ex. R G B Y): ", input_fn)
            try:
                feedback = board.make_guess(user_input)
                break
            except InvalidCodeError as e:
                print(f"Invalid guess! {e}")

        # Render current board
        board.render(emoji=emoji)

        # Check win/loss
        if board.is_won:
            print(f"\nCongratulations! You cracked the code in {board.current_attempt} turn(s)!")
        elif feedback.total > 0:
            print("Good progress! Keep going!")

    if not board.is_won:
        print("\nGame Over! You ran out of turns.")
        print(f"The secret code was: {board.reveal_code()}.")
    return board


def play_computer_guesses(
    rules=DEFAULT_RULES, rng=None, input_fn=input, sleep=time.sleep, emoji=False
):
    """Mode 2: the computer breaks the player's code. Returns the finished board."""
    print("You are the codemaker! Create your secret code.")
    print(f"Use these colors: {', '.join(rules.colors)}.")
    code = read_code(rules, input_fn)
    print("Great! Your secret code is set. Let's see if the computer can crack it!")

    computer = ComputerPlayer(rules=rules, rng=rng)
    board = Board(code, rules=rules)

    while not board.is_over:
        print(f"\n--- Turn {board.current_attempt + 1} of {board.max_attempts} ---")

        guess = computer.make_guess()
        print(f"Computer guesses: {' '.join(guess)}")

        feedback = code.evaluate(guess)
        computer.learn_from_feedback(guess, feedback)
        board.record(guess, feedback)
        board.render(emoji=emoji)

        if board.is_won:
            print(f"\nThe computer cracked your code in {board.current_attempt} turn(s)!")
        elif not board.is_over:
            # Small delay for intrigue
            print("Computer is thinking...")
            if rules.think_delay > 0:
                sleep(rules.think_delay)

    if not board.is_won:
        print("\nCongratulations! The computer couldn't crack your code!")
    print(f"Your secret code was: {board.reveal_code()}.")
    return board


def gameloop(rules=DEFAULT_RULES, mode=None, rng=None, input_fn=input, sleep=time.sleep, emoji=False):
    """Run one session. Returns the finished board, or None if the player quit."""
    rng = rng or random
    print_welcome(rules)

    try:
        if mode is None:
            mode = choose_mode(input_fn)
        if mode == 1:
            board = play_human_guesses(rules, rng, input_fn, emoji=emoji)
        else:
            board = play_computer_guesses(rules, rng, input_fn, sleep, emoji=emoji)
    except ExitGame:
        print("Exiting game.")
        return None

    print("\n=== Game Over ===")
    return board
