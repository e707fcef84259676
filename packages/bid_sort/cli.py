"""Console entrypoint for ``bid_sort``.

A Typer application taking one optional positional argument, the path of the
bids CSV export, and handing control to the interactive menu in
:mod:`bid_sort.shell`. A local ``.env`` is loaded first (without overriding
variables already set) so ``BID_SORT_LOG_LEVEL`` can be configured there.
"""

from __future__ import annotations

import builtins
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import ArgumentInfo

from .logging_setup import configure_logging, get_logger
from .shell import run_shell
from .term_ui import prompt_menu_choice

DEFAULT_CSV_PATH = Path("eBid_Monthly_Sales_Dec_2016.csv")

_logger = get_logger("bid_sort.cli")


def _resolve_input_fn() -> Callable[[str], str]:
    """Use prompt_toolkit on a real terminal, plain ``input`` on pipes."""

    if sys.stdin is not None and sys.stdin.isatty():
        return prompt_menu_choice
    return builtins.input


app = typer.Typer(
    add_completion=False,
    help=(
        "Load bids from a CSV export and sort them by title with selection "
        "sort or quicksort from an interactive menu."
    ),
)


# Module-level argument object to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_ARGUMENT: ArgumentInfo = typer.Argument(
    help="Path to the bids CSV file.",
    file_okay=True,
    exists=False,  # missing files and directories are reported by the Load command
    show_default=True,
)


@app.command()
def main(
    csv_path: Annotated[Path, CSV_PATH_ARGUMENT] = DEFAULT_CSV_PATH,
) -> None:
    """Run the interactive bid sorting menu."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()
    _logger.info("starting menu with csv_path=%s", csv_path)

    run_shell(csv_path, input_fn=_resolve_input_fn())


if __name__ == "__main__":  # pragma: no cover - exercised via the console script
    app()
