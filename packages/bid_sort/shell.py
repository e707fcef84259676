"""Menu-driven interactive shell.

The loop prints the menu, reads a choice through ``input_fn`` and dispatches
to one command handler per choice. All state lives in an :class:`AppState`
passed to each handler; there are no module-level globals.
"""

from __future__ import annotations

import builtins
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .logging_setup import get_logger
from .models import SortStats
from .store import BidStore

_logger = get_logger("bid_sort.shell")

MENU = (
    "Menu:\n"
    "  1. Load Bids\n"
    "  2. Display All Bids\n"
    "  3. Selection Sort All Bids\n"
    "  4. Quick Sort All Bids\n"
    "  9. Exit"
)
PROMPT = "Enter choice: "
EXIT_CHOICE = 9
UNRECOGNIZED = "Selection not recognized. Please try again."
GOODBYE = "Good bye."


@dataclass(slots=True)
class AppState:
    """Everything the command handlers read or change."""

    csv_path: Path
    store: BidStore = field(default_factory=BidStore)


def _print_elapsed(seconds: float) -> None:
    print(f"time: {seconds:.6f} seconds")


def _print_sorted(state: AppState, stats: SortStats, seconds: float) -> None:
    print(f"{len(state.store)} bids sorted")
    print(f"comparisons: {stats.comparisons} | exchanges: {stats.exchanges}")
    _print_elapsed(seconds)


# ---- Command handlers ---------------------------------------------------------


def cmd_load(state: AppState) -> None:
    print(f"Loading CSV file {state.csv_path}")
    t0 = time.perf_counter()
    count = state.store.load(state.csv_path)
    elapsed = time.perf_counter() - t0
    print(f"{count} bids read")
    _print_elapsed(elapsed)


def cmd_display(state: AppState) -> None:
    for line in state.store.render_lines():
        print(line)
    print()


def cmd_selection_sort(state: AppState) -> None:
    t0 = time.perf_counter()
    stats = state.store.selection_sort()
    _print_sorted(state, stats, time.perf_counter() - t0)


def cmd_quicksort(state: AppState) -> None:
    t0 = time.perf_counter()
    stats = state.store.quicksort()
    _print_sorted(state, stats, time.perf_counter() - t0)


COMMANDS: dict[int, Callable[[AppState], None]] = {
    1: cmd_load,
    2: cmd_display,
    3: cmd_selection_sort,
    4: cmd_quicksort,
}


def _parse_choice(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run_shell(
    csv_path: str | PathLike[str],
    *,
    store: BidStore | None = None,
    input_fn: Callable[[str], str] = builtins.input,
) -> AppState:
    """Run the menu loop until the user picks 9 or input ends.

    ``EOFError`` and ``KeyboardInterrupt`` raised by ``input_fn`` end the loop
    the same way choice 9 does. Returns the final state so callers (and tests)
    can inspect the store.
    """

    state = AppState(csv_path=Path(csv_path), store=store if store is not None else BidStore())

    while True:
        print(MENU)
        try:
            raw = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        choice = _parse_choice(raw)
        if choice == EXIT_CHOICE:
            break
        handler = COMMANDS.get(choice) if choice is not None else None
        if handler is None:
            _logger.debug("unrecognized menu input %r", raw)
            print(UNRECOGNIZED)
            continue
        handler(state)

    print(GOODBYE)
    return state


__all__ = [
    "COMMANDS",
    "MENU",
    "AppState",
    "cmd_display",
    "cmd_load",
    "cmd_quicksort",
    "cmd_selection_sort",
    "run_shell",
]
