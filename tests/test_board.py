"""
Testing the board (turn log) and guesses
- Make guesses against a known code and check feedback, turns and status.
"""

import pytest

from game.board import Board
from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code, InvalidCodeError


def make_board(secret="R O Y G", rules=DEFAULT_RULES):
    return Board(Code.from_input(secret, rules=rules), rules=rules)


def test_win_on_first_turn():
    board = make_board()

    feedback = board.make_guess("R O Y G")

    assert feedback == (4, 0)
    assert board.is_won is True
    assert board.is_over is True
    assert board.current_attempt == 1
    assert board.remaining_attempts() == 11


def test_repeated_colors_scored_against_secret():
    board = make_board("R R O O")
    assert board.make_guess(["O", "O", "R", "R"]) == (0, 4)
    assert board.is_won is False
    assert board.is_over is False


def test_loss_after_turn_limit():
    board = make_board()

    for _ in range(DEFAULT_RULES.max_attempts):
        assert board.is_over is False
        board.make_guess("B B B B")

    assert board.current_attempt == 12
    assert board.remaining_attempts() == 0
    assert board.is_over is True
    assert board.is_won is False


def test_win_on_last_turn_counts_as_win():
    rules = DEFAULT_RULES.with_overrides(max_attempts=2)
    board = make_board(rules=rules)
    board.make_guess("B B B B")
    board.make_guess("R O Y G")

    assert board.is_over is True
    assert board.is_won is True


def test_invalid_guess_raises_and_is_not_recorded():
    board = make_board()

    with pytest.raises(InvalidCodeError):
        board.make_guess("R O Y")
    with pytest.raises(InvalidCodeError):
        board.make_guess("R O Y X")

    assert board.current_attempt == 0
    assert board.guesses == []


def test_record_and_history():
    board = make_board()
    board.record(["R", "B", "B", "B"], (1, 0))
    board.make_guess("G Y O R")

    history = board.get_feedback_history()
    assert history == [
        (["R", "B", "B", "B"], (1, 0)),
        (["G", "Y", "O", "R"], (0, 4)),
    ]


def test_render_text(capsys):
    board = make_board()
    board.render()
    out = capsys.readouterr().out
    assert "--- BOARD ---" in out
    assert "No guesses yet." in out

    board.make_guess("R Y B B")
    board.render()
    out = capsys.readouterr().out
    assert "Turn 1: R Y B B | 1 black peg(s), 1 white peg(s)." in out


def test_render_emoji_grid(capsys):
    board = make_board()
    board.make_guess("R O G B")
    board.render(emoji=True)
    out = capsys.readouterr().out

    emoji = DEFAULT_RULES.emoji_map
    assert "Mastermind" in out
    assert out.count(emoji["BK"]) == 2
    assert out.count(emoji["W"]) == 1


def test_render_emoji_grid_falls_back_to_symbols(capsys):
    rules = DEFAULT_RULES.with_overrides(colors=("A", "C", "D", "E", "F"))
    board = Board(Code("A C D E", rules=rules), rules=rules)
    board.make_guess("F A C D")
    board.render(emoji=True)
    out = capsys.readouterr().out

    assert "| F | A | C | D " in out
    assert out.count(rules.emoji_map["W"]) == 3
    assert rules.emoji_map["BK"] not in out


def test_reveal_code():
    assert make_board("V I B G").reveal_code() == "V I B G"


def test_guess_validation_and_feedback():
    guess = Guess("r o y g")
    assert guess.is_valid is True
    assert guess.get_feedback() is None

    guess.apply_feedback((2, 1))
    assert guess.get_feedback() == (2, 1)
    assert guess.get_feedback().black == 2
    assert str(guess) == "R O Y G"


def test_invalid_guess_is_flagged():
    assert Guess("R O Y").is_valid is False
    assert Guess(None).as_string() == "EMPTY"
    with pytest.raises(InvalidCodeError):
        Guess("R O Y Z").validate()
