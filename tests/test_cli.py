"""Tests for the sizecheck command line."""

from unittest.mock import patch

from sizecheck import LOADING_MESSAGES, generate_results
from sizecheck.cli import main


class TestCheckCommand:
    def test_single_user(self, capsys):
        assert main(["check", "jack"]) == 0
        out = capsys.readouterr().out
        r = generate_results("jack")
        assert f"@jack  {r['size']} {r['unit']}  ({r['confidence']}% confidence)" in out
        assert "Percentile" not in out

    def test_strips_at_and_junk(self, capsys):
        assert main(["check", "@ja-ck"]) == 0
        assert "@jack " in capsys.readouterr().out

    def test_case_insensitive_output(self, capsys):
        main(["check", "JACK"])
        upper = capsys.readouterr().out
        main(["check", "jack"])
        lower = capsys.readouterr().out
        assert upper.replace("@JACK", "@jack") == lower

    def test_invalid_username(self, capsys):
        assert main(["check", "@@@"]) == 1
        captured = capsys.readouterr()
        assert "not a valid username" in captured.err
        assert captured.out == ""

    def test_invalid_does_not_stop_others(self, capsys):
        assert main(["check", "!!!", "jack"]) == 1
        captured = capsys.readouterr()
        assert "'!!!'" in captured.err
        assert "@jack" in captured.out

    def test_percentile(self, capsys):
        assert main(["check", "jack", "--percentile"]) == 0
        r = generate_results("jack", percentile=True)
        assert f"Percentile: {r['percentile']}" in capsys.readouterr().out

    def test_share(self, capsys):
        assert main(["check", "jack", "--share", "https://example.com"]) == 0
        out = capsys.readouterr().out
        assert "Share: https://twitter.com/intent/tweet?text=" in out
        assert "url=https%3A%2F%2Fexample.com" in out

    @patch("sizecheck.cli.time.sleep")
    def test_animate(self, mock_sleep, capsys):
        assert main(["check", "jack", "--animate"]) == 0
        out = capsys.readouterr().out
        for message in LOADING_MESSAGES:
            assert message in out
        assert mock_sleep.call_count == len(LOADING_MESSAGES)
        assert out.index(LOADING_MESSAGES[-1]) < out.index("@jack")

    @patch("sizecheck.cli.time.sleep")
    def test_no_animation_by_default(self, mock_sleep, capsys):
        main(["check", "jack"])
        mock_sleep.assert_not_called()


class TestOtherCommands:
    def test_about(self, capsys):
        assert main(["about"]) == 0
        assert "parody" in capsys.readouterr().out

    def test_privacy(self, capsys):
        assert main(["privacy"]) == 0
        assert "Nothing you type" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: sizecheck" in capsys.readouterr().out
