"""Terminal prompt helper for the interactive menu (prompt_toolkit-based).

Kept apart from :mod:`bid_sort.shell` so the loop can be driven by a plain
``input``-style callable in tests and pipes, while a real terminal gets
history and completion of the menu choices.
"""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

DEFAULT_CHOICES: tuple[str, ...] = ("1", "2", "3", "4", "9")


def prompt_menu_choice(
    message: str = "Enter choice: ",
    *,
    choices: Iterable[str] = DEFAULT_CHOICES,
    session: PromptSession | None = None,
) -> str:
    """Read one menu choice and return it stripped of surrounding whitespace.

    The text is returned as typed; validating it is the caller's job so that
    unrecognized input can be reported by the menu loop. ``EOFError`` and
    ``KeyboardInterrupt`` propagate from prompt_toolkit unchanged.
    """

    completer = WordCompleter(list(choices), sentence=True)
    if session is None:
        sess: PromptSession = PromptSession()
    else:
        sess = session
    return sess.prompt(message, completer=completer).strip()


__all__ = ["DEFAULT_CHOICES", "prompt_menu_choice"]
