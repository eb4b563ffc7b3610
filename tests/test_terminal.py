"""Tests for terminal prompts and coloring."""

import sys
from pathlib import Path
from unittest.mock import Mock

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cronos.terminal import TITLE_LINES, colorize, prompt, render_title


def test_prompt_returns_default_on_empty_input(capsys):
    """Verify pressing Enter accepts the displayed default."""
    input_func = Mock(return_value="  ")

    value = prompt("Name of the origin branch", "main", color=False, input_func=input_func)

    assert value == "main"
    input_func.assert_called_once_with("[main]: ")
    assert "Name of the origin branch" in capsys.readouterr().out


def test_prompt_returns_stripped_answer():
    """Verify typed answers override the default."""
    value = prompt("Destination branch name", "production", color=False, input_func=Mock(return_value=" staging "))

    assert value == "staging"


def test_secret_prompt_uses_secret_reader_and_hides_default():
    """Verify secrets are read without echo and their default is not shown."""
    input_func = Mock()
    secret_func = Mock(return_value="")

    value = prompt("Your GitLab token", "env-token", secret=True, color=False, input_func=input_func, secret_func=secret_func)

    assert value == "env-token"
    input_func.assert_not_called()
    assert "env-token" not in secret_func.call_args.args[0]


def test_colorize_disabled_returns_plain_text():
    """Verify disabling color leaves the text untouched."""
    assert colorize(42, "\033[31m", bold=True, enabled=False) == "42"


def test_render_title_has_one_line_per_banner_row():
    """Verify the banner renders every row."""
    assert render_title(enabled=False).splitlines() == list(TITLE_LINES)
