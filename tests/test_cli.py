"""
Testing the game loop
- Trick: feed scripted answers through input_fn and replace randomness
  with tiny fake random sources, so every game is predictable.
"""

import main as main_module
from game.ruleset import DEFAULT_RULES
from ui import cli


class FixedCodeRng:
    """Generates the code R O Y G."""

    def choices(self, population, k):
        return ["R", "O", "Y", "G"]


class FirstChoiceRng:
    def choice(self, seq):
        return list(seq)[0]


def scripted(*answers):
    it = iter(answers)

    def fake_input(prompt=""):
        return next(it)

    return fake_input


def test_human_wins_after_invalid_guess(capsys):
    board = cli.gameloop(
        rng=FixedCodeRng(),
        input_fn=scripted("3", "1", "R O Y X", "B B B B", "R Y O G", "r o y g"),
    )
    out = capsys.readouterr().out

    assert board.is_won is True
    assert board.current_attempt == 3
    assert "Please enter either 1 or 2." in out
    assert "Invalid guess!" in out
    assert "Good progress! Keep going!" in out
    assert "You cracked the code in 3 turn(s)!" in out


def test_human_loses_and_sees_code(capsys):
    rules = DEFAULT_RULES.with_overrides(max_attempts=2)
    board = cli.gameloop(
        rules, mode=1, rng=FixedCodeRng(), input_fn=scripted("B B B B", "I I I I")
    )
    out = capsys.readouterr().out

    assert board.is_won is False
    assert board.is_over is True
    assert "Game Over! You ran out of turns." in out
    assert "The secret code was: R O Y G." in out


def test_computer_cracks_code_on_first_turn(capsys):
    sleeps = []
    board = cli.gameloop(
        mode=2,
        rng=FirstChoiceRng(),
        input_fn=scripted("R O Y", "royg"),
        sleep=sleeps.append,
    )
    out = capsys.readouterr().out

    assert board.is_won is True
    assert board.current_attempt == 1
    assert "Invalid code!" in out
    assert "Computer guesses: R O Y G" in out
    assert "The computer cracked your code in 1 turn(s)!" in out
    assert sleeps == []


def test_computer_fails_and_pauses_between_turns(capsys):
    # With first-choice picks the computer is stuck on B I V R after
    # excluding R O Y G, so it never finds B B B B.
    sleeps = []
    board = cli.gameloop(
        mode=2,
        rng=FirstChoiceRng(),
        input_fn=scripted("B B B B"),
        sleep=sleeps.append,
    )
    out = capsys.readouterr().out

    assert board.is_won is False
    assert board.current_attempt == DEFAULT_RULES.max_attempts
    assert sleeps == [DEFAULT_RULES.think_delay] * (DEFAULT_RULES.max_attempts - 1)
    assert out.count("Computer is thinking...") == DEFAULT_RULES.max_attempts - 1
    assert "The computer couldn't crack your code!" in out
    assert "Your secret code was: B B B B." in out


def test_zero_delay_skips_sleep():
    sleeps = []
    rules = DEFAULT_RULES.with_overrides(think_delay=0, max_attempts=3)
    cli.gameloop(
        rules, mode=2, rng=FirstChoiceRng(), input_fn=scripted("B B B B"), sleep=sleeps.append
    )
    assert sleeps == []


def test_exit_at_prompt(capsys):
    assert cli.gameloop(input_fn=scripted("exit")) is None
    assert "Exiting game." in capsys.readouterr().out


def test_exit_while_guessing(capsys):
    assert cli.gameloop(mode=1, rng=FixedCodeRng(), input_fn=scripted("B B B B", "EXIT")) is None


def test_welcome_lists_colors(capsys):
    cli.print_welcome(DEFAULT_RULES)
    out = capsys.readouterr().out
    assert "R, O, Y, G, B, I, V" in out
    assert "12 turns" in out


def test_main_passes_options_to_gameloop(monkeypatch):
    calls = {}

    def fake_gameloop(rules, mode=None, rng=None, emoji=False):
        calls.update(rules=rules, mode=mode, rng=rng, emoji=emoji)

    monkeypatch.setattr(main_module, "gameloop", fake_gameloop)

    assert main_module.main(["--mode", "2", "--delay", "0", "--seed", "5", "--emoji"]) == 0
    assert calls["mode"] == 2
    assert calls["rules"].think_delay == 0
    assert calls["emoji"] is True
