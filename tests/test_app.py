"""Tests for the Streamlit page."""

from pathlib import Path
from unittest.mock import patch

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")

QUICK_STEPS = [("Working...", 0)]


def _submit(value: str) -> AppTest:
    at = AppTest.from_file(APP, default_timeout=10)
    at.run()
    at.text_input[0].input(value)
    at.button[0].click()
    at.run()
    return at


class TestCheckerPage:
    def test_input_length_not_capped_by_widget(self):
        at = AppTest.from_file(APP, default_timeout=10)
        at.run()
        assert not at.text_input[0].max_chars

    @patch("sizecheck.loading_steps", return_value=QUICK_STEPS)
    def test_long_pasted_handle_is_sanitised(self, mock_steps):
        at = _submit("@jack.o.lantern.x")
        assert not at.exception
        assert at.subheader[0].value == "@jackolanternx"

    @patch("sizecheck.loading_steps", return_value=QUICK_STEPS)
    def test_invalid_username(self, mock_steps):
        at = _submit("!!!")
        assert at.error[0].value == "Please enter a valid Twitter username"
        mock_steps.assert_not_called()

    @patch("sizecheck.generate_results", side_effect=RuntimeError("boom"))
    @patch("sizecheck.loading_steps", return_value=QUICK_STEPS)
    def test_failure_shows_generic_message(self, mock_steps, mock_generate):
        at = _submit("jack")
        assert at.error[0].value == "Oops! Something went wrong. Please try again."
        assert "boom" not in at.error[0].value
