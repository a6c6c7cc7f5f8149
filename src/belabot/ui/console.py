"""Terminal output helpers shared by the setup wizard and the entry point."""

from __future__ import annotations

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.shortcuts import PromptSession, clear

# Box drawing helpers for aligned console output
BOX_WIDTH = 60


def box_title(title: str) -> list[str]:
    """Return the three lines of a ╔═╗ box with ``title`` centered inside."""
    inner_width = BOX_WIDTH - 2
    pad_left = (inner_width - len(title)) // 2
    pad_right = inner_width - len(title) - pad_left
    return [
        f"╔{'═' * inner_width}╗",
        f"║{' ' * pad_left}{title}{' ' * pad_right}║",
        f"╚{'═' * inner_width}╝",
    ]


def print_boxed_title(title: str, color: str = "") -> None:
    """Print ``title`` centered in a box, optionally styled."""
    for line in box_title(title):
        console_print(line, color)


def console_print(message: str, style: str = "") -> None:
    """
    Print text to the console using prompt_toolkit without breaking active prompts.

    Args:
        message (str): The text to print to the console.
        style (str): Optional prompt_toolkit style (e.g. ``"ansigreen"``).
    """
    formatted: FormattedText | str
    if style:
        formatted = FormattedText([(style, message)])
    else:
        formatted = message
    print_formatted_text(formatted)


def clear_screen() -> None:
    """Erase the terminal and move the cursor home (works on Windows too)."""
    clear()


_session: PromptSession[str] | None = None


async def prompt_line(message: str) -> str:
    """Ask for one line of input without blocking the event loop."""
    global _session
    if _session is None:
        _session = PromptSession()
    return await _session.prompt_async(message)
