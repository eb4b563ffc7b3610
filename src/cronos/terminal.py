"""Terminal presentation helpers: colored text, title banner and prompts."""

from __future__ import annotations

import getpass
import random
from typing import Callable, List

_RESET = "\033[0m"
_BOLD = "\033[1m"

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"
BRIGHT_RED = "\033[91m"

PALETTE = (RED, GREEN, BLUE, YELLOW, CYAN)

TITLE_LINES = (
    r"  ____ ____   ___  _   _  ___  ____     ____ _     ___ ",
    r" / ___|  _ \ / _ \| \ | |/ _ \/ ___|   / ___| |   |_ _|",
    r"| |   | |_) | | | |  \| | | | \___ \  | |   | |    | | ",
    r"| |___|  _ <| |_| | |\  | |_| |___) | | |___| |___ | | ",
    r" \____|_| \_\\___/|_| \_|\___/|____/   \____|_____|___|",
)


def colorize(text: object, color: str, bold: bool = False, enabled: bool = True) -> str:
    """Wrap ``text`` in ANSI color codes when ``enabled``."""
    if not enabled:
        return str(text)
    prefix = _BOLD + color if bold else color
    return f"{prefix}{text}{_RESET}"


def random_color(text: object, enabled: bool = True) -> str:
    """Render ``text`` in bold using a randomly chosen palette color."""
    return colorize(text, random.choice(PALETTE), bold=True, enabled=enabled)


def render_title(enabled: bool = True) -> str:
    """Render the title banner, one palette color per line."""
    lines: List[str] = [
        colorize(line, color, enabled=enabled) for line, color in zip(TITLE_LINES, PALETTE)
    ]
    return "\n".join(lines)


def prompt(
    message: str,
    default: str = "",
    secret: bool = False,
    color: bool = True,
    input_func: Callable[[str], str] = input,
    secret_func: Callable[[str], str] = getpass.getpass,
) -> str:
    """Ask for a value on the terminal, returning ``default`` on empty input.

    Secret values are read without echo and their default is never displayed.
    """
    print(random_color(message, enabled=color))

    if secret:
        hint = "[press Enter to keep the current value]: " if default else ": "
        answer = secret_func(hint)
    else:
        answer = input_func(f"[{default}]: " if default else ": ")

    return answer.strip() or default
