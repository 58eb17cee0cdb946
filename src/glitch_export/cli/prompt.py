"""Single-question terminal prompt for the CLI layer.

Used when a required input (the Glitch username) was neither given on
the command line nor recoverable from the cache.
"""

from __future__ import annotations

from typing import Any

from glitch_export.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass the username with -u <username>.",
        ) from exc
    return questionary


def build_question(prompt_text: str, default_answer: str | None = None) -> str:
    """Return the question line, showing the default in parentheses."""
    if default_answer:
        return f"{prompt_text} ({default_answer})"
    return prompt_text


def ask(prompt_text: str, default_answer: str | None = None) -> str | None:
    """Ask one question and return the answer, or *default_answer* if empty.

    Raises
    ------
    KeyboardInterrupt
        If the user cancels the prompt (questionary returns ``None``).
    """
    questionary = _import_questionary()

    answer: str | None = questionary.text(
        build_question(prompt_text, default_answer),
        qmark="",
    ).ask()  # Returns None on Ctrl+C

    if answer is None:
        raise KeyboardInterrupt
    return answer or default_answer
