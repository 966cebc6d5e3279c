"""
Tests for the terminal interface, driven with scripted input.
"""

import pytest

from joindots.interfaces.cli import SimpleCLI, main


@pytest.fixture
def scripted_input(monkeypatch):
    """Replace input() with a list of answers; EOF once they run out."""
    def _script(answers):
        pending = list(answers)

        def fake_input(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
    return _script


class TestPlay:

    def test_red_wins(self, scripted_input, capsys):
        scripted_input(["0", "6", "1", "6", "2", "6", "3", "n"])
        assert main(["play", "--delay", "0"]) == 0

        out = capsys.readouterr().out
        assert "Red drops into column 3, landing on row 5..." in out
        assert "Red wins! Winning run: (5, 0), (5, 1), (5, 2), (5, 3)" in out

    def test_bad_input_and_rejections(self, scripted_input, capsys):
        scripted_input(["x", "9", "q"])
        assert main(["play", "--delay", "0"]) == 0

        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Move rejected: column is out of range." in out
        assert "Quitting game." in out

    def test_restart_and_play_again(self, scripted_input, capsys):
        scripted_input(["4", "r", "0", "6", "1", "6", "2", "6", "3", "y", "5"])
        cli = SimpleCLI(["play", "--delay", "0"])
        assert cli.run() == 0

        out = capsys.readouterr().out
        assert "Game restarted." in out
        assert "Red wins!" in out
        # The second game got one move in before input ran out
        assert cli.session.move_count == 1
        assert cli.session.last_move.col == 5


class TestCommands:

    def test_benchmark(self, capsys):
        assert main(["benchmark", "--iterations", "3", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "Played 3 games" in out
        assert "draws:" in out

    def test_negative_delay_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["play", "--delay", "-1"])
        assert exc.value.code == 2
        assert "--delay must not be negative" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out
